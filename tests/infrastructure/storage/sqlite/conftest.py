"""Fixtures for the SQLite store tests: real stores on a migrated temp database."""

from datetime import date

import pytest

from gearbook.core.entities import Event, EventStatus, InventoryItem
from gearbook.infrastructure.storage.sqlite import (
    SQLiteBookingStore,
    SQLiteCatalogStore,
    SQLiteEventStore,
    SQLiteQuoteStore,
    SQLiteRepairStore,
    SQLiteSetStore,
)


@pytest.fixture
def catalog_store(db_pool) -> SQLiteCatalogStore:
    return SQLiteCatalogStore()


@pytest.fixture
def repair_store(db_pool) -> SQLiteRepairStore:
    return SQLiteRepairStore()


@pytest.fixture
def event_store(db_pool) -> SQLiteEventStore:
    return SQLiteEventStore()


@pytest.fixture
def booking_store(db_pool) -> SQLiteBookingStore:
    return SQLiteBookingStore()


@pytest.fixture
def set_store(db_pool) -> SQLiteSetStore:
    return SQLiteSetStore()


@pytest.fixture
def quote_store(db_pool) -> SQLiteQuoteStore:
    return SQLiteQuoteStore()


@pytest.fixture
async def stored_item(catalog_store) -> InventoryItem:
    """Four CDJs at 50 per day."""
    return await catalog_store.create_item(
        InventoryItem(name="CDJ-3000", category="DJ", quantity=4, rental_rate=50.0)
    )


@pytest.fixture
async def stored_event(event_store) -> Event:
    """Confirmed event occupying 2025-09-10..11."""
    return await event_store.create_event(
        Event(
            title="Sommerfest",
            status=EventStatus.CONFIRMED,
            client_name="Stadtwerke",
            event_date=date(2025, 9, 10),
            setup_date=date(2025, 9, 10),
            teardown_date=date(2025, 9, 11),
        )
    )
