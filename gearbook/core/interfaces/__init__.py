"""Core interfaces (ports) for dependency injection."""

from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.interfaces.quote_store import IQuoteStore
from gearbook.core.interfaces.repair_store import IRepairStore
from gearbook.core.interfaces.set_store import ISetStore

__all__ = [
    "IBookingStore",
    "ICatalogStore",
    "IEventStore",
    "IQuoteStore",
    "IRepairStore",
    "ISetStore",
]
