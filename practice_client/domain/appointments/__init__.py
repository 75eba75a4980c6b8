"""Appointments domain - bookings, availability and rescheduling"""

from .schemas import Appointment, AppointmentCreate, AppointmentUpdate, AvailableSlot
from .service import AppointmentService

__all__ = [
    "Appointment",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AvailableSlot",
    "AppointmentService",
]
