"""Storage infrastructure implementations."""

from gearbook.infrastructure.storage.sqlite import (
    SQLiteBookingStore,
    SQLiteCatalogStore,
    SQLiteEventStore,
    SQLiteQuoteStore,
    SQLiteRepairStore,
    SQLiteSetStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteBookingStore",
    "SQLiteCatalogStore",
    "SQLiteEventStore",
    "SQLiteQuoteStore",
    "SQLiteRepairStore",
    "SQLiteSetStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
