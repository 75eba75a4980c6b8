"""Service catalog schemas - Pydantic models for the service endpoints"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class ServiceCreate(BaseModel):
    """Schema for creating a new service"""

    service: str
    description: Optional[str] = None
    price: Optional[float] = None
    priceId: Optional[str] = None  # Stripe price id


class ServiceUpdate(BaseModel):
    """Schema for updating an existing service"""

    service: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    priceId: Optional[str] = None


class Service(BaseModel):
    """Schema for service response"""

    id: str
    name: Optional[str] = None
    service: Optional[str] = None
    description: Optional[str] = None
    durationMinutes: Optional[int] = None
    price: Optional[Decimal] = None  # sent as number or string
    priceId: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        return self.name or self.service or ""
