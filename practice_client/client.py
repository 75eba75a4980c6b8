"""
Practice API client
Wires one gateway, the auth session and every resource client together
"""
import logging
from typing import Optional

import httpx

from .config import API_BASE_URL, API_TIMEOUT_SECONDS
from .domain.appointments import AppointmentService
from .domain.auth import AuthSession
from .domain.calendar import CalendarService
from .domain.clients import ClientService
from .domain.invoices import InvoiceService
from .domain.leads import LeadService
from .domain.payments import PaymentService
from .domain.services import ServiceCatalog
from .gateway import ApiGateway, SessionExpiredCallback
from .token_storage import TokenStorage, build_token_storage

logger = logging.getLogger(__name__)


class PracticeClient:
    """
    Entry point for the UI layer.

    Example:
        async with PracticeClient(on_session_expired=show_login) as api:
            await api.auth.login("admin", "secret")
            clients = await api.clients.list_clients()
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        storage: Optional[TokenStorage] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = API_TIMEOUT_SECONDS,
        on_session_expired: Optional[SessionExpiredCallback] = None,
    ):
        self.gateway = ApiGateway(
            storage if storage is not None else build_token_storage(),
            base_url=base_url,
            http_client=http_client,
            timeout=timeout,
            on_session_expired=on_session_expired,
        )
        self.auth = AuthSession(self.gateway)
        self.leads = LeadService(self.gateway)
        self.clients = ClientService(self.gateway)
        self.appointments = AppointmentService(self.gateway)
        self.services = ServiceCatalog(self.gateway)
        self.invoices = InvoiceService(self.gateway)
        self.payments = PaymentService(self.gateway)
        self.calendar = CalendarService(self.gateway)

        if self.auth.restore():
            logger.info("🔑 Restored previous session")

    async def __aenter__(self) -> "PracticeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.gateway.aclose()
