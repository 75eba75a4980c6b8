"""Lead domain schemas - Pydantic models for the lead endpoints"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class LeadCreate(BaseModel):
    """Schema for creating a new lead"""

    first_name: str
    last_name: str
    email: str
    phone: str
    company: Optional[str] = None
    pref_contact: str = "email"  # "email" | "phone" | "sms"
    service_category: Optional[str] = None
    source: Optional[str] = None
    status: Optional[str] = None  # "lead" | "contacted" | "scheduled" | "converted" | "lost"
    message: Optional[str] = None


class LeadUpdate(BaseModel):
    """Schema for updating an existing lead"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    pref_contact: Optional[str] = None
    service_category: Optional[str] = None
    source: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None


class Lead(BaseModel):
    """Schema for lead response"""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    company: Optional[str] = None
    pref_contact: str
    service_category: Optional[str] = None
    source: Optional[str] = None
    convertedClientId: Optional[str] = None
    status: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
