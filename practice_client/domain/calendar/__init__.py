"""Calendar domain - external calendar connection"""

from .service import CalendarAuth, CalendarService

__all__ = ["CalendarAuth", "CalendarService"]
