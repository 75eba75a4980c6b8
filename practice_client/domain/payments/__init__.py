"""Payments domain - Stripe checkout and sales statistics"""

from .schemas import CheckoutSession, CurrencyTotal, SalesStatistics
from .service import PaymentService

__all__ = ["CheckoutSession", "CurrencyTotal", "SalesStatistics", "PaymentService"]
