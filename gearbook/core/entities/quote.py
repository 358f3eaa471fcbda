"""Quote and invoice entities."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class QuoteType(str, Enum):
    """Kind of financial document."""

    ESTIMATE = "Angebot"
    INVOICE = "Rechnung"
    CREDIT_NOTE = "Gutschrift"

    @property
    def number_prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    QuoteType.ESTIMATE: "AN",
    QuoteType.INVOICE: "RE",
    QuoteType.CREDIT_NOTE: "GU",
}


class QuoteStatus(str, Enum):
    """Quote workflow status."""

    DRAFT = "Entwurf"
    SENT = "Gesendet"
    ACCEPTED = "Angenommen"
    REJECTED = "Abgelehnt"
    PAID = "Bezahlt"
    CANCELLED = "Storniert"


class QuoteItem(BaseModel):
    """A single priced line on a quote."""

    id: int | None = None
    quote_id: int | None = None
    position: int | None = None  # next free slot when omitted
    description: str
    quantity: float = 1.0
    unit: str = "Tag"
    unit_price: float = 0.0
    total: float = 0.0  # quantity * unit_price

    @model_validator(mode="after")
    def compute_total(self) -> "QuoteItem":
        """Line total is always derived from quantity and unit price."""
        self.total = self.quantity * self.unit_price
        return self


class Quote(BaseModel):
    """An estimate, invoice or credit note with cached running totals."""

    id: int | None = None
    event_id: int | None = None
    quote_number: str = ""
    quote_type: QuoteType = QuoteType.ESTIMATE
    status: QuoteStatus = QuoteStatus.DRAFT
    client_name: str | None = None
    client_address: str | None = None
    issue_date: date = Field(default_factory=date.today)
    valid_until: date | None = None
    tax_rate: float = 19.0
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0
    notes: str | None = None
    items: list[QuoteItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def item_count(self) -> int:
        return len(self.items)
