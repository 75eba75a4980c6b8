"""Errors raised by the API gateway and the resource clients"""

from typing import Optional

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."
GENERIC_ERROR_MESSAGE = "An error occurred"


class ApiError(Exception):
    """Base class for every error surfaced to callers"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SessionExpiredError(ApiError):
    """No valid credential could be obtained; the user has to log in again"""

    def __init__(self, message: str = SESSION_EXPIRED_MESSAGE):
        super().__init__(message, status_code=401)


class HttpError(ApiError):
    """Non-2xx response other than a recoverable 401"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code=status_code)

    def __repr__(self) -> str:
        return f"HttpError(status_code={self.status_code}, message={self.message!r})"


class NetworkError(ApiError):
    """The call never produced a response"""

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.original = original


class AuthenticationError(ApiError):
    """Login answered 2xx but carried no usable access token"""
