"""Invoice service - calls to the /invoice endpoints"""

import logging

from ...gateway import ApiGateway
from ..common import create_payload, parse_item, parse_list, update_payload
from .schemas import INVOICE_STATUSES, Invoice, InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)


class InvoiceService:
    """Client for invoice operations"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_invoices(self) -> list[Invoice]:
        """Get all invoices"""
        return parse_list(Invoice, await self.gateway.get("/invoice"))

    async def get_invoice(self, invoice_id: str) -> Invoice:
        """Get a specific invoice"""
        return parse_item(Invoice, await self.gateway.get(f"/invoice/{invoice_id}"))

    async def list_invoices_for_client(self, client_id: str) -> list[Invoice]:
        """Get all invoices billed to one client"""
        return parse_list(Invoice, await self.gateway.get(f"/invoice/client/{client_id}"))

    async def create_invoice(self, data: InvoiceCreate) -> Invoice:
        """Create a new invoice"""
        logger.info(f"🧾 Creating invoice for client {data.clientId}")
        return parse_item(Invoice, await self.gateway.post("/invoice", create_payload(data)))

    async def update_invoice(self, invoice_id: str, data: InvoiceUpdate) -> Invoice:
        """Update invoice content (status is changed through update_invoice_status)"""
        return parse_item(
            Invoice, await self.gateway.put(f"/invoice/{invoice_id}", update_payload(data))
        )

    async def update_invoice_status(self, invoice_id: str, status: str) -> Invoice:
        """Move an invoice to a new status"""
        if status not in INVOICE_STATUSES:
            raise ValueError(f"Unknown invoice status: {status}")
        data = await self.gateway.put(f"/invoice/{invoice_id}/status", {"status": status})
        logger.info(f"🧾 Invoice {invoice_id} marked {status}")
        return parse_item(Invoice, data)
