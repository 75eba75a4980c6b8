"""Auth domain schemas - Pydantic models for the auth endpoints"""

from typing import Optional

from pydantic import BaseModel, field_validator

USER_ROLES = ("admin", "provider", "client")


class User(BaseModel):
    """The signed-in user as cached between runs"""

    id: str
    email: str = ""
    role: str = "client"  # "admin" | "provider" | "client"
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    username: Optional[str] = None
    reset: Optional[bool] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        # Some auth responses send numeric ids
        if isinstance(v, int):
            return str(v)
        return v


class SignUp(BaseModel):
    """Schema for creating a user account (matches backend validation)"""

    username: str
    password: str
    email: str
    first_name: str
    last_name: str


class MessageResponse(BaseModel):
    message: str = ""
