"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gearbook.config import reset_settings
from gearbook.core.entities import (
    Event,
    EventInventoryLine,
    EventStatus,
    InventoryItem,
    RepairLog,
)


@pytest.fixture(autouse=True)
def _fresh_singletons():
    """Every test starts without cached settings, stores or services."""
    from gearbook.application.services import reset_services
    from gearbook.infrastructure.storage.sqlite import reset_stores

    reset_settings()
    reset_stores()
    reset_services()
    yield
    reset_settings()
    reset_stores()
    reset_services()


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def migrated_db(temp_db_path: Path) -> Path:
    """Temporary database with the full schema applied."""
    from gearbook.infrastructure.storage.sqlite.migrations import initialize_database

    results = await initialize_database(temp_db_path, create_backup_before=False)
    assert all(r.success for r in results)
    return temp_db_path


@pytest.fixture
async def db_pool(migrated_db: Path) -> AsyncGenerator[Path, None]:
    """
    Point the global connection pool at the migrated temp database.

    Stores created inside the test use this pool; it is closed afterwards.
    """
    import gearbook.infrastructure.storage.sqlite.connection as conn_module

    conn_module._pool = None
    mock_settings = MagicMock()
    mock_settings.storage.db_path = migrated_db
    mock_settings.storage.pool_size = 1
    mock_settings.storage.busy_timeout = 5000

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield migrated_db
        finally:
            await conn_module.close_pool()


@pytest.fixture
def sample_item() -> InventoryItem:
    return InventoryItem(id=1, name="CDJ-3000", category="DJ", quantity=4, rental_rate=50.0)


@pytest.fixture
def sample_event() -> Event:
    return Event(
        id=10,
        title="Sommerfest",
        status=EventStatus.CONFIRMED,
        client_name="Stadtwerke",
        event_date=date(2025, 9, 10),
        setup_date=date(2025, 9, 10),
        teardown_date=date(2025, 9, 11),
    )


@pytest.fixture
def undated_event() -> Event:
    return Event(id=11, title="Anfrage ohne Termin")


@pytest.fixture
def sample_line() -> EventInventoryLine:
    return EventInventoryLine(
        id=100,
        event_id=10,
        inventory_item_id=1,
        quantity=2,
        rental_days=2,
        unit_price=50.0,
        item_name="CDJ-3000",
        category="DJ",
        rental_rate=50.0,
    )


@pytest.fixture
def sample_repair() -> RepairLog:
    return RepairLog(
        id=5,
        inventory_item_id=1,
        quantity_affected=1,
        issue_description="Jog wheel loose",
    )
