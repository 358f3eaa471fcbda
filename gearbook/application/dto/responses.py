"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.

Money values are kept at full precision in storage and rounded to two
places here.
"""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field

# Rounded to cents on output
Money = Annotated[float, AfterValidator(lambda v: round(v, 2))]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. OVERBOOKING_CONFLICT)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    details: dict[str, Any] | None = Field(
        default=None, description="Structured error context, e.g. needed/available"
    )
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


# --- Catalog ---


class InventoryItemResponse(BaseModel):
    """Catalog item response DTO."""

    id: int
    name: str
    category: str
    description: str | None = None
    quantity: int
    rental_rate: Money
    purchase_price: Money | None = None
    barcode: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class RepairLogResponse(BaseModel):
    """Repair log response DTO."""

    id: int
    inventory_item_id: int
    quantity_affected: int
    issue_description: str
    status: str
    repair_cost: Money | None = None
    notes: str | None = None
    reported_at: datetime
    resolved_at: datetime | None = None


class AvailabilityResponse(BaseModel):
    """How many units of an item are free for a date range."""

    item_id: int
    name: str
    quantity: int
    in_repair: int
    usable: int
    booked: int
    available: int
    date_from: date | None = None
    date_to: date | None = None


# --- Events ---


class EventResponse(BaseModel):
    """Event response DTO with its derived occupancy window."""

    id: int
    title: str
    status: str
    client_name: str | None = None
    event_date: date | None = None
    setup_date: date | None = None
    teardown_date: date | None = None
    window_start: date | None = None
    window_end: date | None = None
    created_at: datetime
    updated_at: datetime


class EventHistoryResponse(BaseModel):
    """Event history entry."""

    id: int
    event_id: int
    action: str
    detail: str | None = None
    changed_at: datetime


class CrewMemberResponse(BaseModel):
    """Crew member assigned to an event."""

    id: int
    event_id: int
    name: str
    role: str | None = None


class EquipmentEntryResponse(BaseModel):
    """Free-text equipment entry on an event."""

    id: int
    event_id: int
    asset_name: str
    booking_line_id: int | None = None


# --- Bookings ---


class BookingLineResponse(BaseModel):
    """Booking line joined with catalog name and category."""

    id: int
    event_id: int
    inventory_item_id: int
    item_name: str | None = None
    category: str | None = None
    quantity: int
    rental_days: int
    unit_price: Money
    notes: str | None = None
    packed: bool = False


class PackingSummaryResponse(BaseModel):
    """Packed/unpacked counts of a packing list."""

    total: int
    packed: int
    unpacked: int


class PackingListResponse(BaseModel):
    """Booking lines of an event with a packing summary."""

    event_id: int
    items: list[BookingLineResponse]
    summary: PackingSummaryResponse


# --- Equipment sets ---


class SetItemResponse(BaseModel):
    """Set item joined with catalog data."""

    id: int
    set_id: int
    inventory_item_id: int
    quantity: int
    item_name: str | None = None
    category: str | None = None
    rental_rate: Money | None = None
    stock_quantity: int | None = None


class EquipmentSetResponse(BaseModel):
    """Equipment set response DTO."""

    id: int
    name: str
    description: str | None = None
    notes: str | None = None
    item_count: int = 0
    items: list[SetItemResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class SetConflictResponse(BaseModel):
    """A set item that could not be booked."""

    inventory_item_id: int
    item_name: str
    needed: int
    available: int


class ApplySetResponse(BaseModel):
    """Result of applying a set to an event. Conflicts are not an error."""

    inserted_count: int
    conflicts: list[SetConflictResponse] | None = None
    message: str


# --- Quotes ---


class QuoteItemResponse(BaseModel):
    """Quote line item response DTO."""

    id: int
    quote_id: int
    position: int
    description: str
    quantity: float
    unit: str
    unit_price: Money
    total: Money


class QuoteResponse(BaseModel):
    """Quote response DTO with items and rounded totals."""

    id: int
    event_id: int | None = None
    quote_number: str
    quote_type: str
    status: str
    client_name: str | None = None
    client_address: str | None = None
    issue_date: date
    valid_until: date | None = None
    tax_rate: float
    subtotal: Money
    tax_amount: Money
    total: Money
    notes: str | None = None
    item_count: int = 0
    items: list[QuoteItemResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
