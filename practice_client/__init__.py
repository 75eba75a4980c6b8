"""Async client for the practice management API"""

from .client import PracticeClient
from .exceptions import (
    ApiError,
    AuthenticationError,
    HttpError,
    NetworkError,
    SessionExpiredError,
)
from .gateway import ApiGateway
from .token_storage import (
    EncryptedTokenStorage,
    FileTokenStorage,
    MemoryTokenStorage,
    RedisTokenStorage,
    TokenStorage,
)

__version__ = "1.0.0"

__all__ = [
    "ApiError",
    "ApiGateway",
    "AuthenticationError",
    "EncryptedTokenStorage",
    "FileTokenStorage",
    "HttpError",
    "MemoryTokenStorage",
    "NetworkError",
    "PracticeClient",
    "RedisTokenStorage",
    "SessionExpiredError",
    "TokenStorage",
]
