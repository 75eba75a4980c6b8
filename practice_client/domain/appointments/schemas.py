"""Appointment domain schemas - Pydantic models for the appointment endpoints"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..clients.schemas import Client
from ..leads.schemas import Lead
from ..services.schemas import Service


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment for a client or a lead"""

    clientId: Optional[str] = None
    leadId: Optional[str] = None
    serviceId: Optional[str] = None
    startAt: datetime
    endAt: datetime
    notes: Optional[str] = None
    status: Optional[str] = None  # "tentative" | "confirmed" | "cancelled" | "completed" | "no_show"


class AppointmentUpdate(BaseModel):
    """Schema for updating an existing appointment"""

    clientId: Optional[str] = None
    leadId: Optional[str] = None
    serviceId: Optional[str] = None
    startAt: Optional[datetime] = None
    endAt: Optional[datetime] = None
    notes: Optional[str] = None
    status: Optional[str] = None


class Appointment(BaseModel):
    """Schema for appointment response"""

    id: str
    clientId: Optional[str] = None
    leadId: Optional[str] = None
    serviceId: Optional[str] = None
    startAt: datetime
    endAt: datetime
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    status: str
    notes: Optional[str] = None
    client: Optional[Client] = None
    lead: Optional[Lead] = None
    service: Optional[Service] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class AvailableSlot(BaseModel):
    """A bookable time window"""

    startTime: Optional[str] = None
    endTime: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    available: Optional[bool] = None

    @property
    def starts(self) -> Optional[str]:
        return self.startTime or self.start

    @property
    def ends(self) -> Optional[str]:
        return self.endTime or self.end
