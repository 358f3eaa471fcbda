"""Tests for the event use cases."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from gearbook.application.dto.requests import (
    AddCrewMemberRequest,
    AddEquipmentEntryRequest,
    CreateEventRequest,
    UpdateEventRequest,
)
from gearbook.application.use_cases.manage_events import (
    AddCrewMemberUseCase,
    AddEquipmentEntryUseCase,
    CreateEventUseCase,
    UpdateEventUseCase,
)
from gearbook.core.entities.event import EventStatus
from gearbook.core.exceptions import (
    BookingLineNotFoundError,
    EventNotFoundError,
    InvalidStatusError,
    ValidationError,
)


@pytest.fixture
def event_store(sample_event):
    store = AsyncMock()
    store.get_event.return_value = sample_event
    store.create_event.side_effect = lambda e: e.model_copy(update={"id": 12})
    store.update_event.side_effect = lambda e: e
    store.add_crew_member.side_effect = lambda m: m.model_copy(update={"id": 1})
    store.add_equipment_entry.side_effect = lambda e: e.model_copy(update={"id": 1})
    return store


@pytest.fixture
def booking_store(sample_line):
    store = AsyncMock()
    store.get_line.return_value = sample_line
    return store


class TestCreateEventUseCase:
    async def test_create(self, event_store):
        use_case = CreateEventUseCase(event_store=event_store)

        event = await use_case.execute(
            CreateEventRequest(title="Hochzeit", event_date=date(2025, 6, 7))
        )

        assert event.id == 12
        assert event.status == EventStatus.REQUESTED
        assert event.occupancy_window.start == date(2025, 6, 7)

    async def test_teardown_before_setup(self, event_store):
        use_case = CreateEventUseCase(event_store=event_store)
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateEventRequest(
                    title="Hochzeit",
                    setup_date=date(2025, 6, 8),
                    teardown_date=date(2025, 6, 7),
                )
            )
        event_store.create_event.assert_not_awaited()

    async def test_unknown_status(self, event_store):
        use_case = CreateEventUseCase(event_store=event_store)
        with pytest.raises(InvalidStatusError):
            await use_case.execute(CreateEventRequest(title="Hochzeit", status="storniert"))


class TestUpdateEventUseCase:
    async def test_close_event(self, event_store):
        use_case = UpdateEventUseCase(event_store=event_store)

        event = await use_case.execute(10, UpdateEventRequest(status="abgeschlossen"))

        assert event.status == EventStatus.CLOSED
        assert event.title == "Sommerfest"

    async def test_clear_dates(self, event_store):
        use_case = UpdateEventUseCase(event_store=event_store)

        event = await use_case.execute(
            10, UpdateEventRequest(event_date=None, setup_date=None, teardown_date=None)
        )

        assert event.occupancy_window is None

    async def test_unknown_event(self, event_store):
        event_store.get_event.return_value = None
        use_case = UpdateEventUseCase(event_store=event_store)
        with pytest.raises(EventNotFoundError):
            await use_case.execute(99, UpdateEventRequest(title="x"))


class TestEventChildren:
    async def test_add_crew(self, event_store):
        use_case = AddCrewMemberUseCase(event_store=event_store)

        member = await use_case.execute(10, AddCrewMemberRequest(name="Anna", role="DJ"))

        assert member.event_id == 10
        assert member.role == "DJ"

    async def test_add_linked_equipment(self, event_store, booking_store):
        use_case = AddEquipmentEntryUseCase(event_store=event_store, booking_store=booking_store)

        entry = await use_case.execute(
            10, AddEquipmentEntryRequest(asset_name="CDJ-3000", booking_line_id=100)
        )

        assert entry.booking_line_id == 100
        booking_store.get_line.assert_awaited_once_with(10, 100)

    async def test_link_to_unknown_line(self, event_store, booking_store):
        booking_store.get_line.return_value = None
        use_case = AddEquipmentEntryUseCase(event_store=event_store, booking_store=booking_store)
        with pytest.raises(BookingLineNotFoundError):
            await use_case.execute(
                10, AddEquipmentEntryRequest(asset_name="CDJ-3000", booking_line_id=7)
            )
