"""Appointment service - calls to the /appointment endpoints"""

import logging
from datetime import datetime
from typing import Any, Optional, Union

from ...gateway import ApiGateway
from ..common import create_payload, parse_item, parse_list, update_payload
from .schemas import Appointment, AppointmentCreate, AppointmentUpdate, AvailableSlot

logger = logging.getLogger(__name__)

DateLike = Union[datetime, str]


def _iso(value: DateLike) -> str:
    return value.isoformat() if isinstance(value, datetime) else value


class AppointmentService:
    """Client for appointment operations"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_appointments(self) -> list[Appointment]:
        """Get all appointments"""
        return parse_list(Appointment, await self.gateway.get("/appointment"))

    async def get_appointment(self, appointment_id: str) -> Appointment:
        """Get a specific appointment"""
        return parse_item(Appointment, await self.gateway.get(f"/appointment/{appointment_id}"))

    async def get_available_slots(
        self, start_date: DateLike, end_date: DateLike, duration: Optional[int] = None
    ) -> list[AvailableSlot]:
        """
        Get bookable slots between two dates

        Args:
            start_date: Window start (date string or datetime)
            end_date: Window end (date string or datetime)
            duration: Optional slot length in minutes
        """
        params: dict[str, Any] = {"startDate": _iso(start_date), "endDate": _iso(end_date)}
        if duration:
            params["duration"] = str(duration)
        data = await self.gateway.get("/appointment/available/slots", params=params)
        return parse_list(AvailableSlot, data)

    async def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Book an appointment"""
        logger.info(f"📅 Booking appointment at {data.startAt.isoformat()}")
        return parse_item(
            Appointment, await self.gateway.post("/appointment", create_payload(data))
        )

    async def reschedule_appointment(
        self, appointment_id: str, start_at: DateLike, end_at: DateLike
    ) -> Appointment:
        """Move an appointment to a new time window"""
        data = await self.gateway.put(
            f"/appointment/{appointment_id}/reschedule",
            {"startAt": _iso(start_at), "endAt": _iso(end_at)},
        )
        logger.info(f"📅 Rescheduled appointment {appointment_id}")
        return parse_item(Appointment, data)

    async def cancel_appointment(self, appointment_id: str) -> Appointment:
        """Cancel an appointment"""
        data = await self.gateway.put(f"/appointment/{appointment_id}/cancel")
        logger.info(f"🚫 Cancelled appointment {appointment_id}")
        return parse_item(Appointment, data)

    async def update_appointment(self, appointment_id: str, data: AppointmentUpdate) -> Appointment:
        return parse_item(
            Appointment,
            await self.gateway.put(f"/appointment/{appointment_id}", update_payload(data)),
        )

    async def delete_appointment(self, appointment_id: str) -> None:
        await self.gateway.delete(f"/appointment/{appointment_id}")
        logger.info(f"🗑️ Deleted appointment {appointment_id}")
