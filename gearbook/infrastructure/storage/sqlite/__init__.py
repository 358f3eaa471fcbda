"""SQLite storage implementations."""

from gearbook.config import get_settings
from gearbook.infrastructure.storage.sqlite.booking_store import SQLiteBookingStore
from gearbook.infrastructure.storage.sqlite.catalog_store import SQLiteCatalogStore
from gearbook.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from gearbook.infrastructure.storage.sqlite.event_store import SQLiteEventStore
from gearbook.infrastructure.storage.sqlite.quote_store import SQLiteQuoteStore
from gearbook.infrastructure.storage.sqlite.repair_store import SQLiteRepairStore
from gearbook.infrastructure.storage.sqlite.set_store import SQLiteSetStore

# Singleton instances
_catalog_store: SQLiteCatalogStore | None = None
_repair_store: SQLiteRepairStore | None = None
_event_store: SQLiteEventStore | None = None
_booking_store: SQLiteBookingStore | None = None
_set_store: SQLiteSetStore | None = None
_quote_store: SQLiteQuoteStore | None = None


async def get_catalog_store() -> SQLiteCatalogStore:
    """Get singleton catalog store instance."""
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = SQLiteCatalogStore()
    return _catalog_store


async def get_repair_store() -> SQLiteRepairStore:
    """Get singleton repair store instance."""
    global _repair_store
    if _repair_store is None:
        _repair_store = SQLiteRepairStore()
    return _repair_store


async def get_event_store() -> SQLiteEventStore:
    """Get singleton event store instance."""
    global _event_store
    if _event_store is None:
        _event_store = SQLiteEventStore()
    return _event_store


async def get_booking_store() -> SQLiteBookingStore:
    """Get singleton booking store instance."""
    global _booking_store
    if _booking_store is None:
        _booking_store = SQLiteBookingStore(
            closed_status=get_settings().booking.closed_event_status,
        )
    return _booking_store


async def get_set_store() -> SQLiteSetStore:
    """Get singleton equipment set store instance."""
    global _set_store
    if _set_store is None:
        _set_store = SQLiteSetStore()
    return _set_store


async def get_quote_store() -> SQLiteQuoteStore:
    """Get singleton quote store instance."""
    global _quote_store
    if _quote_store is None:
        _quote_store = SQLiteQuoteStore()
    return _quote_store


def reset_stores() -> None:
    """Drop singleton stores (for testing)."""
    global _catalog_store, _repair_store, _event_store
    global _booking_store, _set_store, _quote_store
    _catalog_store = None
    _repair_store = None
    _event_store = None
    _booking_store = None
    _set_store = None
    _quote_store = None


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteBookingStore",
    "SQLiteCatalogStore",
    "SQLiteEventStore",
    "SQLiteQuoteStore",
    "SQLiteRepairStore",
    "SQLiteSetStore",
    # Factory functions
    "get_booking_store",
    "get_catalog_store",
    "get_event_store",
    "get_quote_store",
    "get_repair_store",
    "get_set_store",
    "reset_stores",
]
