"""Core domain entities."""

from gearbook.core.entities.availability import Availability
from gearbook.core.entities.booking import EventInventoryLine, PackingList
from gearbook.core.entities.equipment_set import (
    EquipmentSet,
    EquipmentSetItem,
    SetApplyConflict,
)
from gearbook.core.entities.event import (
    CrewMember,
    EquipmentEntry,
    Event,
    EventHistoryEntry,
    EventStatus,
    OccupancyWindow,
)
from gearbook.core.entities.inventory import (
    OPEN_REPAIR_STATUSES,
    RESOLVED_REPAIR_STATUSES,
    InventoryItem,
    RepairLog,
    RepairStatus,
)
from gearbook.core.entities.quote import Quote, QuoteItem, QuoteStatus, QuoteType

__all__ = [
    # Availability
    "Availability",
    # Booking
    "EventInventoryLine",
    "PackingList",
    # Equipment sets
    "EquipmentSet",
    "EquipmentSetItem",
    "SetApplyConflict",
    # Events
    "CrewMember",
    "EquipmentEntry",
    "Event",
    "EventHistoryEntry",
    "EventStatus",
    "OccupancyWindow",
    # Inventory
    "InventoryItem",
    "RepairLog",
    "RepairStatus",
    "OPEN_REPAIR_STATUSES",
    "RESOLVED_REPAIR_STATUSES",
    # Quotes
    "Quote",
    "QuoteItem",
    "QuoteStatus",
    "QuoteType",
]
