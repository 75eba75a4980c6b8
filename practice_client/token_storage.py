"""
Durable key/value storage for the session
Holds the access token, the refresh token and the cached user record
"""
import json
import logging
from pathlib import Path
from typing import Optional, Protocol

import redis
from cryptography.fernet import Fernet, InvalidToken

from .config import (
    REDIS_URL,
    TOKEN_ENCRYPTION_KEY,
    TOKEN_STORAGE_BACKEND,
    TOKEN_STORAGE_PATH,
    TOKEN_STORAGE_PREFIX,
)

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "auth_token"  # noqa: S105
REFRESH_TOKEN_KEY = "refresh_token"  # noqa: S105
USER_KEY = "user"


class TokenStorage(Protocol):
    """Minimal persistence capability the gateway depends on"""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryTokenStorage:
    """Process-local storage, lost on exit"""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class FileTokenStorage:
    """JSON object in a single file; a missing or corrupt file reads as empty"""

    def __init__(self, path: Path = TOKEN_STORAGE_PATH):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️ Ignoring unreadable session file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class RedisTokenStorage:
    """String values in Redis under a key prefix"""

    def __init__(self, client: Optional[redis.Redis] = None, prefix: str = TOKEN_STORAGE_PREFIX):
        self.prefix = prefix
        self.redis_client = client

    def _get_client(self) -> redis.Redis:
        """Lazy load Redis client"""
        if self.redis_client is None:
            if not REDIS_URL:
                raise ValueError("REDIS_URL not configured for redis token storage")
            logger.info("🔄 Initializing Redis connection for token storage...")
            self.redis_client = redis.from_url(
                REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=15,
                socket_timeout=30,
                retry_on_timeout=True,
            )
        return self.redis_client

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        value = self._get_client().get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self._get_client().set(self._key(key), value)

    def remove(self, key: str) -> None:
        self._get_client().delete(self._key(key))


class EncryptedTokenStorage:
    """Fernet-encrypts values before handing them to another storage"""

    def __init__(self, inner: TokenStorage, key: str):
        self.inner = inner
        self.cipher_suite = Fernet(key.encode() if isinstance(key, str) else key)

    def get(self, key: str) -> Optional[str]:
        encrypted = self.inner.get(key)
        if encrypted is None:
            return None
        try:
            return self.cipher_suite.decrypt(encrypted.encode()).decode()
        except InvalidToken:
            logger.warning(f"⚠️ Stored value for '{key}' could not be decrypted, ignoring it")
            return None

    def set(self, key: str, value: str) -> None:
        self.inner.set(key, self.cipher_suite.encrypt(value.encode()).decode())

    def remove(self, key: str) -> None:
        self.inner.remove(key)


def build_token_storage(
    backend: str = TOKEN_STORAGE_BACKEND,
    encryption_key: Optional[str] = TOKEN_ENCRYPTION_KEY,
) -> TokenStorage:
    """Create the storage configured through the environment"""
    storage: TokenStorage
    if backend == "memory":
        storage = MemoryTokenStorage()
    elif backend == "file":
        storage = FileTokenStorage()
    elif backend == "redis":
        storage = RedisTokenStorage()
    else:
        raise ValueError(f"Unknown token storage backend: {backend}")

    if encryption_key:
        logger.info(f"🔐 Encrypting stored tokens ({backend} backend)")
        storage = EncryptedTokenStorage(storage, encryption_key)
    return storage
