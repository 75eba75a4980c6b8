"""Payment schemas - Stripe checkout and revenue statistics"""

from typing import Optional

from pydantic import BaseModel, Field


class CheckoutSession(BaseModel):
    sessionId: str
    url: str


class CurrencyTotal(BaseModel):
    amount: float = 0
    count: int = 0


class SalesStatistics(BaseModel):
    """Revenue summary for a period"""

    period: Optional[str] = None  # "day" | "week" | "month" | "year" | "custom"
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    totalRevenue: float = 0
    totalTransactions: int = 0
    invoiceRevenue: float = 0
    totalInvoices: int = 0
    averageTransactionValue: float = 0
    byCurrency: dict[str, CurrencyTotal] = Field(default_factory=dict)
