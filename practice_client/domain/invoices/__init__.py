"""Invoices domain - billing documents sent to clients"""

from .schemas import Invoice, InvoiceCreate, InvoiceLineItem, InvoiceLineItemCreate, InvoiceUpdate
from .service import InvoiceService

__all__ = [
    "Invoice",
    "InvoiceCreate",
    "InvoiceLineItem",
    "InvoiceLineItemCreate",
    "InvoiceUpdate",
    "InvoiceService",
]
