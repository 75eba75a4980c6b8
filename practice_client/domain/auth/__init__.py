"""Auth domain - login, logout, sign-up and password flows"""

from .schemas import MessageResponse, SignUp, User
from .session import AuthSession

__all__ = ["AuthSession", "MessageResponse", "SignUp", "User"]
