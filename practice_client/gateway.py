"""
Authenticated API Gateway
Attaches the bearer token to every call and recovers once from an expired
access token through a single refresh shared by all concurrent callers
"""
import asyncio
import inspect
import json
import logging
from typing import Any, Awaitable, Callable, Optional, Union

import httpx

from .config import API_BASE_URL, API_TIMEOUT_SECONDS
from .exceptions import (
    GENERIC_ERROR_MESSAGE,
    HttpError,
    NetworkError,
    SessionExpiredError,
)
from .token_extraction import extract_access_token, extract_refresh_token
from .token_storage import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_KEY, TokenStorage

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "/auth/login"
SIGNUP_ENDPOINT = "/auth/signup"
REFRESH_ENDPOINT = "/auth/refresh"
PASSWORD_RESET_REQUEST_ENDPOINT = "/auth/request-password-reset"  # noqa: S105
SET_PASSWORD_ENDPOINT = "/auth/set-password"  # noqa: S105

# A 401 from these never triggers a refresh
AUTH_EXEMPT_ENDPOINTS = frozenset(
    {
        LOGIN_ENDPOINT,
        SIGNUP_ENDPOINT,
        REFRESH_ENDPOINT,
        PASSWORD_RESET_REQUEST_ENDPOINT,
        SET_PASSWORD_ENDPOINT,
    }
)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})

SessionExpiredCallback = Callable[[], Union[None, Awaitable[None]]]


def normalize_endpoint(endpoint: str) -> str:
    """Endpoint path relative to the base URL, always with a leading slash"""
    if not endpoint.startswith("/"):
        endpoint = f"/{endpoint}"
    return endpoint


def is_auth_endpoint(endpoint: str) -> bool:
    """True for endpoints of the auth subsystem itself"""
    path = normalize_endpoint(endpoint).split("?", 1)[0].rstrip("/")
    return path in AUTH_EXEMPT_ENDPOINTS


def error_message_from_response(response: httpx.Response) -> str:
    """Best-effort human readable message from an error response"""
    try:
        data = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE

    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, list):
            message = ", ".join(str(m) for m in message if m)
        if message:
            return str(message)
    return f"HTTP error! status: {response.status_code}"


class ApiGateway:
    """
    Owns the credential pair and issues every call to the remote API.

    Only `configure_credentials` and `clear_credentials` write the tokens. At most
    one refresh runs at a time: `_refresh_task` is the shared pending handle that
    every caller needing a refresh awaits.
    """

    def __init__(
        self,
        storage: TokenStorage,
        base_url: str = API_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = API_TIMEOUT_SECONDS,
        on_session_expired: Optional[SessionExpiredCallback] = None,
    ):
        self.storage = storage
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

        self._access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None
        self._credentials_loaded = False
        self._refresh_task: Optional[asyncio.Task] = None

        self._session_expired_callbacks: list[SessionExpiredCallback] = []
        if on_session_expired is not None:
            self._session_expired_callbacks.append(on_session_expired)

    async def __aenter__(self) -> "ApiGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if the gateway created it"""
        if self._owns_client:
            await self._client.aclose()

    # Credentials

    def _load_credentials(self) -> None:
        """Read the stored pair once per gateway; memory is authoritative afterwards"""
        if self._credentials_loaded:
            return
        self._credentials_loaded = True
        self._access_token = self.storage.get(ACCESS_TOKEN_KEY)
        self._refresh_token = self.storage.get(REFRESH_TOKEN_KEY)
        if self._access_token or self._refresh_token:
            logger.debug("🔑 Restored credentials from token storage")

    def configure_credentials(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        """Store the pair in memory and in durable storage"""
        self._access_token = access_token
        self._refresh_token = refresh_token
        self._credentials_loaded = True

        self.storage.set(ACCESS_TOKEN_KEY, access_token)
        if refresh_token:
            self.storage.set(REFRESH_TOKEN_KEY, refresh_token)
        else:
            self.storage.remove(REFRESH_TOKEN_KEY)

    def clear_credentials(self) -> None:
        """Erase the pair from memory and durable storage"""
        self._access_token = None
        self._refresh_token = None
        self._credentials_loaded = True
        self.storage.remove(ACCESS_TOKEN_KEY)
        self.storage.remove(REFRESH_TOKEN_KEY)

    @property
    def access_token(self) -> Optional[str]:
        self._load_credentials()
        return self._access_token

    @property
    def has_refresh_token(self) -> bool:
        self._load_credentials()
        return bool(self._refresh_token)

    @property
    def is_authenticated(self) -> bool:
        self._load_credentials()
        return bool(self._access_token or self._refresh_token)

    @property
    def refresh_in_progress(self) -> bool:
        return self._refresh_task is not None

    def add_session_expired_listener(self, callback: SessionExpiredCallback) -> None:
        """Register a hand-off invoked when the session becomes unrecoverable"""
        self._session_expired_callbacks.append(callback)

    async def _expire_session(self) -> None:
        had_credentials = bool(self._access_token or self._refresh_token)
        self.clear_credentials()
        if not had_credentials:
            return

        logger.warning("⚠️ Session expired, credentials cleared")
        for callback in self._session_expired_callbacks:
            try:
                result = callback()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                # Listener failures must not mask the session error
                logger.error(f"❌ Session-expired listener failed: {e}")

    # Refresh

    def _cached_user_id(self) -> Optional[str]:
        raw = self.storage.get(USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except ValueError:
            return None
        if isinstance(user, dict) and user.get("id") is not None:
            return str(user["id"])
        return None

    async def refresh(self) -> str:
        """Refresh the access token, joining the in-flight refresh if there is one"""
        if self._refresh_task is None:
            self._refresh_task = asyncio.ensure_future(self._run_refresh())
        else:
            logger.debug("⏳ Waiting for in-flight token refresh")
        # A cancelled waiter must not cancel the shared refresh
        return await asyncio.shield(self._refresh_task)

    async def _run_refresh(self) -> str:
        try:
            return await self._perform_refresh()
        finally:
            self._refresh_task = None

    async def _perform_refresh(self) -> str:
        self._load_credentials()
        refresh_token = self._refresh_token
        if not refresh_token:
            await self._expire_session()
            raise SessionExpiredError()

        payload: dict[str, Any] = {"refresh_token": refresh_token}
        user_id = self._cached_user_id()
        if user_id:
            payload["userId"] = user_id

        logger.info("🔄 Refreshing access token")
        response = await self._send("POST", REFRESH_ENDPOINT, body=payload, token=None)

        if not response.is_success:
            logger.error(f"❌ Token refresh failed: {response.status_code}")
            await self._expire_session()
            raise SessionExpiredError()

        try:
            data = response.json()
        except ValueError:
            data = None

        access_token = extract_access_token(data)
        if not access_token:
            logger.error("❌ No access token in refresh response")
            await self._expire_session()
            raise SessionExpiredError()

        new_refresh_token = extract_refresh_token(data) or refresh_token
        self.configure_credentials(access_token, new_refresh_token)
        logger.info("✅ Access token refreshed successfully")
        return access_token

    # Requests

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{normalize_endpoint(endpoint)}"

    async def _send(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            return await self._client.request(
                method,
                self._url(endpoint),
                headers=headers,
                json=body,
                params=params,
            )
        except httpx.TransportError as e:
            logger.error(f"❌ Network error on {method} {endpoint}: {e}")
            raise NetworkError(f"Network error while calling {endpoint}", original=e) from e

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Perform one logical API call.

        Args:
            endpoint: Path relative to the base URL (e.g. "/client")
            method: HTTP verb
            body: JSON-serializable payload
            params: Optional query string parameters

        Returns:
            Parsed JSON body, or {} for a "no content" response

        Raises:
            SessionExpiredError: No valid credential could be obtained
            HttpError: Any other non-2xx response
            NetworkError: No response was received
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        endpoint = normalize_endpoint(endpoint)
        self._load_credentials()
        auth_endpoint = is_auth_endpoint(endpoint)

        if not self._access_token and self._refresh_token and not auth_endpoint:
            logger.info(f"🔄 No access token for {endpoint}, refreshing first")
            await self.refresh()

        token = self._access_token
        response = await self._send(method, endpoint, body=body, params=params, token=token)

        if response.status_code == 401:
            if auth_endpoint:
                await self._expire_session()
                raise SessionExpiredError(error_message_from_response(response))

            if not self._refresh_token:
                await self._expire_session()
                raise SessionExpiredError()

            if self._refresh_task is None and self._access_token and self._access_token != token:
                # Another caller already refreshed during this episode
                logger.debug(f"🔁 Token already refreshed, retrying {endpoint}")
            else:
                await self.refresh()

            response = await self._send(
                method, endpoint, body=body, params=params, token=self._access_token
            )
            if response.status_code == 401:
                logger.warning(f"⚠️ Retried call to {endpoint} rejected again")
                await self._expire_session()
                raise SessionExpiredError()

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> Any:
        if not response.is_success:
            message = error_message_from_response(response)
            logger.warning(f"⚠️ API error {response.status_code}: {message}")
            raise HttpError(response.status_code, message)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise HttpError(response.status_code, "Malformed JSON in API response") from e

    async def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.request(endpoint, "GET", params=params)

    async def post(self, endpoint: str, body: Any = None) -> Any:
        return await self.request(endpoint, "POST", body=body)

    async def put(self, endpoint: str, body: Any = None) -> Any:
        return await self.request(endpoint, "PUT", body=body)

    async def delete(self, endpoint: str) -> Any:
        return await self.request(endpoint, "DELETE")
