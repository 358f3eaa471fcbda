"""Booking ledger entities."""

from pydantic import BaseModel, Field


class EventInventoryLine(BaseModel):
    """A reservation of N units of one catalog item against one event."""

    id: int | None = None
    event_id: int  # FK → events.id
    inventory_item_id: int  # FK → inventory_items.id
    quantity: int = 1
    rental_days: int = 1  # pricing only, not used for overlap
    unit_price: float = 0.0  # per day, snapshot of the catalog rate
    notes: str | None = None
    packed: bool = False

    # Joined from the catalog on reads
    item_name: str | None = None
    category: str | None = None
    rental_rate: float | None = None


class PackingList(BaseModel):
    """Booking lines of an event with a packed/unpacked summary."""

    event_id: int
    items: list[EventInventoryLine] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def packed(self) -> int:
        return sum(1 for line in self.items if line.packed)

    @property
    def unpacked(self) -> int:
        return self.total - self.packed
