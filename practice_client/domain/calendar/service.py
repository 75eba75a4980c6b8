"""Calendar service - starts the external calendar OAuth flow"""

import logging

from pydantic import BaseModel

from ...gateway import ApiGateway
from ..common import parse_item

logger = logging.getLogger(__name__)


class CalendarAuth(BaseModel):
    authUrl: str


class CalendarService:
    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def init_calendar_auth(self) -> CalendarAuth:
        """Get the URL the user must visit to connect their calendar"""
        auth = parse_item(CalendarAuth, await self.gateway.get("/calendar/auth/init"))
        logger.info("🔗 Calendar authorization URL issued")
        return auth
