"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Business rules (blank names, quantities below one, closed vocabularies)
are checked by the use cases so they surface as domain errors.
Update requests are partial: only fields present in the payload change.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

# --- Catalog ---


class CreateInventoryItemRequest(BaseModel):
    """Request to add an item to the equipment catalog."""

    name: str = Field(..., description="Display name", examples=["CDJ-3000"])
    category: str | None = Field(
        default=None,
        description="Category (defaults to the configured catch-all)",
        examples=["DJ", "Licht", "Ton"],
    )
    description: str | None = Field(default=None, description="Free-text description")
    quantity: int = Field(default=1, description="Physical count owned")
    rental_rate: float = Field(default=0.0, ge=0, description="Rental price per day")
    purchase_price: float | None = Field(default=None, ge=0, description="Buying cost")
    barcode: str | None = Field(default=None, description="Barcode or SKU")
    notes: str | None = Field(default=None, description="Additional notes")


class UpdateInventoryItemRequest(BaseModel):
    """Partial update of a catalog item."""

    name: str | None = None
    category: str | None = None
    description: str | None = None
    quantity: int | None = None
    rental_rate: float | None = Field(default=None, ge=0)
    purchase_price: float | None = Field(default=None, ge=0)
    barcode: str | None = None
    notes: str | None = None


# --- Repairs ---


class CreateRepairRequest(BaseModel):
    """Request to report defective units of a catalog item."""

    quantity_affected: int = Field(default=1, description="Units taken out of service")
    issue_description: str = Field(..., description="What is wrong")
    status: str = Field(
        default="defekt",
        description="Repair status",
        examples=["defekt", "in-reparatur", "repariert", "abgeschrieben"],
    )
    repair_cost: float | None = Field(default=None, ge=0, description="Cost of the repair")
    notes: str | None = Field(default=None, description="Additional notes")


class UpdateRepairRequest(BaseModel):
    """Partial update of a repair log."""

    quantity_affected: int | None = None
    issue_description: str | None = None
    status: str | None = None
    repair_cost: float | None = Field(default=None, ge=0)
    notes: str | None = None
    resolved_at: datetime | None = Field(
        default=None,
        description="Explicit resolution time (stamped automatically when omitted)",
    )


# --- Availability ---


class CheckAvailabilityRequest(BaseModel):
    """Availability query for one catalog item."""

    item_id: int = Field(..., description="Catalog item ID")
    date_from: date | None = Field(default=None, description="Range start (inclusive)")
    date_to: date | None = Field(default=None, description="Range end (inclusive)")
    exclude_event_id: int | None = Field(
        default=None,
        description="Ignore bookings of this event",
    )


# --- Events ---


class CreateEventRequest(BaseModel):
    """Request to create an event record."""

    title: str = Field(..., description="Event title")
    status: str = Field(default="angefragt", description="Event status")
    client_name: str | None = Field(default=None, description="Client name")
    event_date: date | None = Field(default=None, description="Day of the event")
    setup_date: date | None = Field(default=None, description="Load-in day")
    teardown_date: date | None = Field(default=None, description="Return day")


class UpdateEventRequest(BaseModel):
    """Partial update of status, dates, title or client."""

    title: str | None = None
    status: str | None = None
    client_name: str | None = None
    event_date: date | None = None
    setup_date: date | None = None
    teardown_date: date | None = None


class AddCrewMemberRequest(BaseModel):
    """Assign a crew member to an event."""

    name: str = Field(..., description="Crew member name")
    role: str | None = Field(default=None, description="Role", examples=["DJ", "Techniker"])


class AddEquipmentEntryRequest(BaseModel):
    """Add a free-text equipment entry to an event."""

    asset_name: str = Field(..., description="Display name of the equipment")
    booking_line_id: int | None = Field(
        default=None,
        description="Booking line that represents this entry",
    )


# --- Bookings ---


class BookEquipmentRequest(BaseModel):
    """Request to book units of a catalog item onto an event."""

    inventory_item_id: int = Field(..., description="Catalog item ID")
    quantity: int = Field(default=1, description="Units to book")
    rental_days: int | None = Field(default=None, description="Days charged")
    unit_price: float | None = Field(
        default=None,
        ge=0,
        description="Price per day (defaults to the catalog rate)",
    )
    notes: str | None = Field(default=None, description="Additional notes")


class UpdateBookingRequest(BaseModel):
    """Partial update of a booking line. Capacity is not re-checked."""

    quantity: int | None = None
    rental_days: int | None = None
    unit_price: float | None = Field(default=None, ge=0)
    notes: str | None = None
    packed: bool | None = None


# --- Equipment sets ---


class SetItemRequest(BaseModel):
    """A catalog item and quantity inside a set."""

    inventory_item_id: int = Field(..., description="Catalog item ID")
    quantity: int = Field(default=1, description="Template quantity")


class CreateSetRequest(BaseModel):
    """Request to create an equipment set."""

    name: str = Field(..., description="Set name", examples=["DJ Standard Set"])
    description: str | None = None
    notes: str | None = None
    items: list[SetItemRequest] = Field(default_factory=list, description="Initial items")


class UpdateSetRequest(BaseModel):
    """Partial update of a set header."""

    name: str | None = None
    description: str | None = None
    notes: str | None = None


class UpdateSetItemRequest(BaseModel):
    """Change the template quantity of a set item."""

    quantity: int = Field(..., description="New template quantity")


class ApplySetRequest(BaseModel):
    """Request to book a whole set onto an event."""

    rental_days: int | None = Field(default=None, description="Days charged per line")


# --- Quotes ---


class QuoteItemRequest(BaseModel):
    """A line item on a quote."""

    description: str = Field(..., description="Line description")
    quantity: float = Field(default=1.0, description="Quantity")
    unit: str = Field(default="Tag", description="Unit", examples=["Tag", "Stk", "Pauschale"])
    unit_price: float = Field(default=0.0, description="Price per unit")
    position: int | None = Field(default=None, description="Sort position")


class UpdateQuoteItemRequest(BaseModel):
    """Partial update of a quote line item."""

    description: str | None = None
    quantity: float | None = None
    unit: str | None = None
    unit_price: float | None = None
    position: int | None = None


class CreateQuoteRequest(BaseModel):
    """Request to create a quote manually."""

    event_id: int | None = Field(default=None, description="Related event")
    quote_type: str = Field(default="Angebot", description="Angebot, Rechnung or Gutschrift")
    status: str = Field(default="Entwurf", description="Quote status")
    client_name: str | None = None
    client_address: str | None = None
    issue_date: date | None = Field(default=None, description="Defaults to today")
    valid_until: date | None = None
    tax_rate: float | None = Field(default=None, ge=0, description="Tax percentage")
    notes: str | None = None
    items: list[QuoteItemRequest] = Field(default_factory=list)


class UpdateQuoteRequest(BaseModel):
    """Partial update of a quote header."""

    event_id: int | None = None
    quote_type: str | None = None
    status: str | None = None
    client_name: str | None = None
    client_address: str | None = None
    issue_date: date | None = None
    valid_until: date | None = None
    tax_rate: float | None = Field(default=None, ge=0)
    notes: str | None = None


class GenerateQuoteRequest(BaseModel):
    """Request to derive a quote from an event's bookings."""

    quote_type: str = Field(default="Angebot", description="Angebot, Rechnung or Gutschrift")
    tax_rate: float | None = Field(default=None, ge=0, description="Tax percentage")
