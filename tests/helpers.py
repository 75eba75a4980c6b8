"""Helpers shared by the test modules."""

from __future__ import annotations

import json

import httpx

BASE_URL = "https://api.practice.test"


def bearer(request: httpx.Request) -> str | None:
    """Return the bearer token a request was sent with."""
    header = request.headers.get("Authorization")
    if header and header.startswith("Bearer "):
        return header[len("Bearer ") :]
    return None


def body(request: httpx.Request) -> dict:
    """Decode the JSON body of a captured request."""
    return json.loads(request.content)
