"""Shared fixtures for the practice client tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from practice_client.gateway import ApiGateway
from practice_client.token_storage import MemoryTokenStorage

from .helpers import BASE_URL


@pytest.fixture
def storage() -> MemoryTokenStorage:
    """Provide empty in-memory token storage."""
    return MemoryTokenStorage()


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def gateway(storage: MemoryTokenStorage, http_client: httpx.AsyncClient) -> ApiGateway:
    """Gateway bound to the test base URL."""
    return ApiGateway(storage, base_url=BASE_URL, http_client=http_client)
