"""Tests for ApplyEquipmentSetUseCase."""

from unittest.mock import AsyncMock

import pytest

from gearbook.application.dto.requests import ApplySetRequest
from gearbook.application.use_cases.apply_equipment_set import (
    ApplyEquipmentSetUseCase,
    ApplySetResult,
)
from gearbook.core.entities.availability import Availability
from gearbook.core.entities.booking import EventInventoryLine
from gearbook.core.entities.equipment_set import (
    EquipmentSet,
    EquipmentSetItem,
    SetApplyConflict,
)
from gearbook.core.exceptions import EquipmentSetNotFoundError, EventNotFoundError


def _availability(item_id: int, name: str, available: int) -> Availability:
    return Availability(
        item_id=item_id,
        name=name,
        quantity=available,
        in_repair=0,
        usable=available,
        booked=0,
        available=available,
    )


@pytest.fixture
def equipment_set():
    return EquipmentSet(
        id=3,
        name="DJ Standard",
        items=[
            EquipmentSetItem(id=1, set_id=3, inventory_item_id=1, quantity=2, item_name="CDJ-3000"),
            EquipmentSetItem(id=2, set_id=3, inventory_item_id=2, quantity=1, item_name="DJM-900"),
        ],
    )


@pytest.fixture
def set_store(equipment_set):
    store = AsyncMock()
    store.get_set.return_value = equipment_set
    return store


@pytest.fixture
def event_store(sample_event):
    store = AsyncMock()
    store.get_event.return_value = sample_event
    return store


@pytest.fixture
def booking_store():
    store = AsyncMock()

    async def apply(event_id, candidates, rental_days, window, set_name):
        lines = [
            EventInventoryLine(
                id=i + 1,
                event_id=event_id,
                inventory_item_id=c.inventory_item_id,
                quantity=c.quantity,
                rental_days=rental_days,
            )
            for i, c in enumerate(candidates)
        ]
        return lines, []

    store.apply_set_lines.side_effect = apply
    return store


@pytest.fixture
def availability_service():
    service = AsyncMock()
    service.check.side_effect = lambda item_id, **kwargs: _availability(
        item_id, "CDJ-3000" if item_id == 1 else "DJM-900", 5
    )
    return service


@pytest.fixture
def use_case(set_store, event_store, booking_store, availability_service):
    return ApplyEquipmentSetUseCase(
        set_store=set_store,
        event_store=event_store,
        booking_store=booking_store,
        availability_service=availability_service,
    )


class TestApplyEquipmentSetUseCase:
    async def test_all_items_fit(self, use_case, booking_store, availability_service):
        result = await use_case.execute(3, 10, ApplySetRequest(rental_days=2))

        assert result.inserted_count == 2
        assert result.conflicts == []
        args = booking_store.apply_set_lines.call_args.args
        assert args[0] == 10
        assert [c.inventory_item_id for c in args[1]] == [1, 2]
        assert args[2] == 2
        assert args[4] == "DJ Standard"
        # The event's own lines are ignored when checking
        assert all(
            call.kwargs["exclude_event_id"] == 10 for call in availability_service.check.call_args_list
        )

    async def test_partial_success(self, use_case, availability_service, booking_store):
        availability_service.check.side_effect = lambda item_id, **kwargs: _availability(
            item_id, "CDJ-3000" if item_id == 1 else "DJM-900", 1 if item_id == 1 else 5
        )

        result = await use_case.execute(3, 10, ApplySetRequest())

        assert result.inserted_count == 1
        assert result.conflicts == [
            SetApplyConflict(inventory_item_id=1, item_name="CDJ-3000", needed=2, available=1)
        ]
        candidates = booking_store.apply_set_lines.call_args.args[1]
        assert [c.inventory_item_id for c in candidates] == [2]

    async def test_late_conflicts_are_merged(self, use_case, booking_store):
        late = SetApplyConflict(inventory_item_id=2, item_name="DJM-900", needed=1, available=0)
        booking_store.apply_set_lines.side_effect = None
        booking_store.apply_set_lines.return_value = ([], [late])

        result = await use_case.execute(3, 10, ApplySetRequest())

        assert result.conflicts == [late]
        assert result.inserted_count == 0

    async def test_undated_event_skips_checks(
        self, use_case, event_store, undated_event, availability_service
    ):
        event_store.get_event.return_value = undated_event

        result = await use_case.execute(3, 11, ApplySetRequest())

        availability_service.check.assert_not_awaited()
        assert result.inserted_count == 2

    async def test_unknown_set(self, use_case, set_store):
        set_store.get_set.return_value = None
        with pytest.raises(EquipmentSetNotFoundError):
            await use_case.execute(99, 10, ApplySetRequest())

    async def test_unknown_event(self, use_case, event_store, booking_store):
        event_store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            await use_case.execute(3, 99, ApplySetRequest())
        booking_store.apply_set_lines.assert_not_awaited()


class TestApplySetResponse:
    def test_message_without_conflicts(self):
        result = ApplySetResult(
            set_name="DJ Standard",
            lines=[EventInventoryLine(event_id=1, inventory_item_id=1)] * 2,
        )
        response = ApplyEquipmentSetUseCase().to_response(result)
        assert response.inserted_count == 2
        assert response.conflicts is None
        assert response.message == "Alle 2 Artikel hinzugefügt"

    def test_message_with_conflicts(self):
        result = ApplySetResult(
            set_name="DJ Standard",
            lines=[EventInventoryLine(event_id=1, inventory_item_id=2)],
            conflicts=[
                SetApplyConflict(inventory_item_id=1, item_name="CDJ-3000", needed=2, available=1)
            ],
        )
        response = ApplyEquipmentSetUseCase().to_response(result)
        assert response.message == "1 Artikel hinzugefügt, 1 Konflikte"
        assert response.conflicts[0].item_name == "CDJ-3000"
        assert response.conflicts[0].available == 1
