"""Payment service - calls to the /stripe endpoints"""

import logging
from typing import Optional

from ...gateway import ApiGateway
from ..common import parse_item
from .schemas import CheckoutSession, SalesStatistics

logger = logging.getLogger(__name__)


class PaymentService:
    """Client for Stripe checkout and sales statistics"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def create_checkout_session(
        self, invoice_id: str, success_url: str, cancel_url: str
    ) -> CheckoutSession:
        """Create a Stripe Checkout session paying an invoice"""
        data = await self.gateway.post(
            "/stripe/checkout-session/from-invoice",
            {"invoiceId": invoice_id, "successUrl": success_url, "cancelUrl": cancel_url},
        )
        logger.info(f"💳 Checkout session created for invoice {invoice_id}")
        return parse_item(CheckoutSession, data)

    async def get_sales_statistics(
        self,
        period: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> SalesStatistics:
        """Get revenue statistics, optionally for a period or a date range"""
        params = {}
        if period:
            params["period"] = period
        if start_date:
            params["startDate"] = start_date
        if end_date:
            params["endDate"] = end_date
        data = await self.gateway.get("/stripe/sales-statistics", params=params or None)
        return parse_item(SalesStatistics, data)
