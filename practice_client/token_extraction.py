"""
Token extraction from auth responses

The upstream API has returned its login/refresh payloads in several shapes over
time (camelCase, snake_case, a bare "token", a "data" wrapper, tokens inside the
user record). Each extractor below is an ordered list of dotted paths tried in
sequence; the first non-empty string wins.

Compatibility shim: tighten to a single path once the upstream contract is stable.
"""
from typing import Any, Optional

ACCESS_TOKEN_PATHS = (
    "accessToken",
    "access_token",
    "token",
    "data.accessToken",
    "data.access_token",
    "data.token",
    "user.access_token",
)

REFRESH_TOKEN_PATHS = (
    "refreshToken",
    "refresh_token",
    "data.refreshToken",
    "data.refresh_token",
    "user.refresh_token",
)

USER_PATHS = ("user", "data.user")

_TOKEN_FIELDS = {"access_token", "refresh_token", "accessToken", "refreshToken", "token"}


def _resolve(payload: Any, path: str) -> Any:
    value = payload
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def first_string(payload: Any, paths: tuple[str, ...]) -> Optional[str]:
    """Return the first non-empty string found at one of `paths`"""
    for path in paths:
        value = _resolve(payload, path)
        if isinstance(value, str) and value:
            return value
    return None


def extract_access_token(payload: Any) -> Optional[str]:
    return first_string(payload, ACCESS_TOKEN_PATHS)


def extract_refresh_token(payload: Any) -> Optional[str]:
    return first_string(payload, REFRESH_TOKEN_PATHS)


def extract_user(payload: Any) -> Optional[dict[str, Any]]:
    """Return the user record without any credential fields"""
    for path in USER_PATHS:
        value = _resolve(payload, path)
        if isinstance(value, dict) and value:
            return {k: v for k, v in value.items() if k not in _TOKEN_FIELDS}
    return None
