"""Shared helpers for the resource clients"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_list(model: type[ModelT], data: Any) -> list[ModelT]:
    """Parse a list response, accepting a bare list or a {"data": [...]} wrapper"""
    if isinstance(data, dict):
        data = data.get("data")
    if not isinstance(data, list):
        logger.warning(
            f"⚠️ Expected a list of {model.__name__} records, got {type(data).__name__}"
        )
        return []
    return [model.model_validate(item) for item in data]


def parse_item(model: type[ModelT], data: Any) -> ModelT:
    """Parse a single record, unwrapping {"data": {...}} when present"""
    if isinstance(data, dict) and isinstance(data.get("data"), dict) and "id" not in data:
        data = data["data"]
    return model.model_validate(data)


def create_payload(data: BaseModel) -> dict[str, Any]:
    """Body for a create call: unset optional fields are omitted"""
    return data.model_dump(mode="json", exclude_none=True)


def update_payload(data: BaseModel) -> dict[str, Any]:
    """Body for a partial update: only fields the caller set, explicit None kept"""
    return data.model_dump(mode="json", exclude_unset=True)
