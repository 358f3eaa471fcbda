"""Equipment set (bundle template) entities."""

from datetime import datetime

from pydantic import BaseModel, Field


class EquipmentSetItem(BaseModel):
    """One catalog item and its template quantity inside a set."""

    id: int | None = None
    set_id: int | None = None
    inventory_item_id: int
    quantity: int = 1

    # Joined from the catalog on reads
    item_name: str | None = None
    category: str | None = None
    rental_rate: float | None = None
    stock_quantity: int | None = None


class EquipmentSet(BaseModel):
    """A reusable named template of (item, quantity) pairs."""

    id: int | None = None
    name: str
    description: str | None = None
    notes: str | None = None
    items: list[EquipmentSetItem] = Field(default_factory=list)
    item_count: int | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class SetApplyConflict(BaseModel):
    """A set item that could not be booked onto the event."""

    inventory_item_id: int
    item_name: str
    needed: int
    available: int
