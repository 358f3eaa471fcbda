"""Equipment catalog and repair ledger entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class RepairStatus(str, Enum):
    """Lifecycle of a defect report."""

    DEFECTIVE = "defekt"
    IN_REPAIR = "in-reparatur"
    REPAIRED = "repariert"
    WRITTEN_OFF = "abgeschrieben"

    @property
    def is_open(self) -> bool:
        """Open repairs take units out of usable capacity."""
        return self in OPEN_REPAIR_STATUSES

    @property
    def is_resolved(self) -> bool:
        return self in RESOLVED_REPAIR_STATUSES


OPEN_REPAIR_STATUSES = frozenset({RepairStatus.DEFECTIVE, RepairStatus.IN_REPAIR})
RESOLVED_REPAIR_STATUSES = frozenset({RepairStatus.REPAIRED, RepairStatus.WRITTEN_OFF})


class InventoryItem(BaseModel):
    """One named pool of physical equipment with a fixed total quantity."""

    id: int | None = None
    name: str
    category: str = "Sonstiges"
    description: str | None = None
    quantity: int = 1  # physical count owned, never changed by bookings
    rental_rate: float = 0.0  # per day
    purchase_price: float | None = None
    barcode: str | None = None
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class RepairLog(BaseModel):
    """Units of a catalog item reported defective or under repair."""

    id: int | None = None
    inventory_item_id: int  # FK → inventory_items.id
    quantity_affected: int = 1
    issue_description: str
    status: RepairStatus = RepairStatus.DEFECTIVE
    repair_cost: float | None = None
    notes: str | None = None
    reported_at: datetime = Field(default_factory=datetime.utcnow)
    resolved_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.status.is_open
