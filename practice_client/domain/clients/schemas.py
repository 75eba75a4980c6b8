"""Client domain schemas - Pydantic models for the client endpoints"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ClientCreate(BaseModel):
    """Schema for creating a new client"""

    first_name: str
    last_name: str
    email: str
    phone: str
    company: Optional[str] = None
    pref_contact: str = "email"  # "email" | "phone" | "sms"
    service_category: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal: Optional[str] = None
    stripeCustomerId: Optional[str] = None


class ClientUpdate(BaseModel):
    """Schema for updating an existing client"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    pref_contact: Optional[str] = None
    service_category: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal: Optional[str] = None
    stripeCustomerId: Optional[str] = None


class Client(BaseModel):
    """Schema for client response"""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    company: Optional[str] = None
    pref_contact: str = "email"
    service_category: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal: Optional[str] = None
    stripeCustomerId: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
