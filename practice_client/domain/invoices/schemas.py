"""Invoice domain schemas - Pydantic models for the invoice endpoints"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field

INVOICE_STATUSES = ("draft", "issued", "paid", "past_due", "cancelled")


class InvoiceLineItemCreate(BaseModel):
    """One billed line on a new or updated invoice"""

    serviceId: Optional[str] = None
    description: str
    quantity: int = 1
    unitPrice: float


class InvoiceCreate(BaseModel):
    """Schema for creating a new invoice"""

    invoiceNumber: Optional[str] = None
    clientId: str
    issueDate: Optional[str] = None  # YYYY-MM-DD
    dueDate: Optional[str] = None
    currency: Optional[str] = None
    notes: Optional[str] = None
    lineItems: list[InvoiceLineItemCreate] = Field(default_factory=list)
    tax: Optional[Union[float, str]] = None


class InvoiceUpdate(BaseModel):
    """Schema for updating an existing invoice"""

    invoiceNumber: Optional[str] = None
    clientId: Optional[str] = None
    issueDate: Optional[str] = None
    dueDate: Optional[str] = None
    currency: Optional[str] = None
    notes: Optional[str] = None
    lineItems: Optional[list[InvoiceLineItemCreate]] = None
    tax: Optional[Union[float, str]] = None


class InvoiceLineItem(BaseModel):
    id: str
    serviceId: Optional[str] = None
    serviceName: Optional[str] = None
    description: Optional[str] = None
    quantity: int
    unitPrice: Decimal
    lineTotal: Decimal
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class InvoiceClient(BaseModel):
    """Client summary embedded in an invoice"""

    id: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None


class Invoice(BaseModel):
    """Schema for invoice response"""

    id: str
    invoiceNumber: str
    clientId: str
    status: str  # "draft" | "issued" | "paid" | "past_due" | "cancelled"
    issueDate: Optional[str] = None
    dueDate: Optional[str] = None
    currency: str = "usd"
    subtotal: Decimal = Decimal("0")
    tax: Optional[Decimal] = None
    total: Decimal = Decimal("0")
    amount: Optional[Decimal] = None
    paidAmount: Decimal = Decimal("0")
    notes: Optional[str] = None
    lineItems: list[InvoiceLineItem] = Field(default_factory=list)
    client: Optional[InvoiceClient] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @property
    def balance_due(self) -> Decimal:
        return self.total - self.paidAmount
