"""
Auth session
Login/logout, account and password flows, and the cached signed-in user
"""
import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from ...exceptions import AuthenticationError, SessionExpiredError
from ...gateway import (
    LOGIN_ENDPOINT,
    PASSWORD_RESET_REQUEST_ENDPOINT,
    SET_PASSWORD_ENDPOINT,
    SIGNUP_ENDPOINT,
    ApiGateway,
)
from ...token_extraction import extract_access_token, extract_refresh_token, extract_user
from ...token_storage import USER_KEY, TokenStorage
from ..common import parse_item
from .schemas import MessageResponse, SignUp, User

logger = logging.getLogger(__name__)


class AuthSession:
    """Signs the user in and out through the gateway and remembers who they are"""

    def __init__(self, gateway: ApiGateway, storage: Optional[TokenStorage] = None):
        self.gateway = gateway
        self.storage = storage or gateway.storage
        self.user: Optional[User] = None
        gateway.add_session_expired_listener(self._on_session_expired)

    def _cache_user(self, user: User) -> None:
        self.user = user
        self.storage.set(USER_KEY, user.model_dump_json(exclude_none=True))

    def _drop_user(self) -> None:
        self.user = None
        self.storage.remove(USER_KEY)

    def _on_session_expired(self) -> None:
        logger.info("🔒 Session expired, dropping cached user")
        self._drop_user()

    async def login(self, username: str, password: str) -> User:
        """
        Sign in and store the returned credential pair.

        Raises:
            AuthenticationError: Credentials rejected or no access token in the response
        """
        try:
            data = await self.gateway.post(
                LOGIN_ENDPOINT, {"username": username, "password": password}
            )
        except SessionExpiredError as e:
            logger.warning(f"⚠️ Login rejected for {username}")
            raise AuthenticationError(e.message, status_code=401) from e

        access_token = extract_access_token(data)
        if not access_token:
            logger.error("❌ No access token in login response")
            raise AuthenticationError("Login response did not contain an access token")

        self.gateway.configure_credentials(access_token, extract_refresh_token(data))

        record = extract_user(data) or {
            "id": username,
            "username": username,
            "email": username if "@" in username else "",
        }
        user = User.model_validate(record)
        self._cache_user(user)
        logger.info(f"✅ Logged in as {user.username or user.email or user.id} ({user.role})")
        return user

    def logout(self) -> None:
        """Forget the credential pair and the cached user"""
        self.gateway.clear_credentials()
        self._drop_user()
        logger.info("👋 Logged out")

    def restore(self) -> Optional[User]:
        """Reload the cached user when a stored session exists"""
        if not self.gateway.is_authenticated:
            self._drop_user()
            return None

        raw = self.storage.get(USER_KEY)
        if not raw:
            return None
        try:
            self.user = User.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning(f"⚠️ Discarding unreadable cached user: {e}")
            self._drop_user()
            return None
        return self.user

    async def sign_up(self, data: SignUp) -> dict[str, Any]:
        """Create a user account; the current session is left untouched"""
        result = await self.gateway.post(SIGNUP_ENDPOINT, data.model_dump())
        logger.info(f"👤 Signed up user {data.username}")
        return result if isinstance(result, dict) else {}

    async def request_password_reset(self, email: str) -> MessageResponse:
        """Ask the API to email a password reset link"""
        data = await self.gateway.post(PASSWORD_RESET_REQUEST_ENDPOINT, {"email": email})
        return parse_item(MessageResponse, data)

    async def set_password(self, token: str, new_password: str) -> MessageResponse:
        """Set a new password using the token from a reset link"""
        data = await self.gateway.post(
            SET_PASSWORD_ENDPOINT, {"token": token, "newPassword": new_password}
        )
        return parse_item(MessageResponse, data)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.gateway.is_authenticated

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.role == "admin"

    @property
    def is_provider(self) -> bool:
        return self.user is not None and self.user.role == "provider"

    @property
    def is_client(self) -> bool:
        return self.user is not None and self.user.role == "client"
