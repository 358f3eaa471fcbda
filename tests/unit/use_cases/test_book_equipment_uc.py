"""Tests for BookEquipmentUseCase."""

from unittest.mock import AsyncMock

import pytest

from gearbook.application.dto.requests import BookEquipmentRequest
from gearbook.application.use_cases.book_equipment import BookEquipmentUseCase
from gearbook.core.entities.availability import Availability
from gearbook.core.exceptions import (
    EventNotFoundError,
    InventoryItemNotFoundError,
    OverbookingConflictError,
    ValidationError,
)


def _availability(available: int, booked: int = 0, usable: int = 4) -> Availability:
    return Availability(
        item_id=1,
        name="CDJ-3000",
        quantity=4,
        in_repair=4 - usable,
        usable=usable,
        booked=booked,
        available=available,
    )


@pytest.fixture
def event_store(sample_event):
    store = AsyncMock()
    store.get_event.return_value = sample_event
    return store


@pytest.fixture
def catalog_store(sample_item):
    store = AsyncMock()
    store.get_item.return_value = sample_item
    return store


@pytest.fixture
def booking_store():
    store = AsyncMock()
    store.create_line.side_effect = lambda line, window, detail: line.model_copy(update={"id": 1})
    return store


@pytest.fixture
def availability_service():
    service = AsyncMock()
    service.check_item.return_value = _availability(available=2, booked=2)
    return service


@pytest.fixture
def use_case(event_store, catalog_store, booking_store, availability_service):
    return BookEquipmentUseCase(
        event_store=event_store,
        catalog_store=catalog_store,
        booking_store=booking_store,
        availability_service=availability_service,
    )


class TestBookEquipmentUseCase:
    async def test_books_when_capacity_allows(self, use_case, booking_store, sample_event):
        line = await use_case.execute(
            10, BookEquipmentRequest(inventory_item_id=1, quantity=2, rental_days=3)
        )

        assert line.id == 1
        assert line.quantity == 2
        assert line.rental_days == 3
        assert line.unit_price == 50.0  # catalog rate
        booked_line, window, detail = booking_store.create_line.call_args.args
        assert window == sample_event.occupancy_window
        assert detail == "2× CDJ-3000 added for 3 days"

    async def test_unit_price_override(self, use_case):
        line = await use_case.execute(
            10, BookEquipmentRequest(inventory_item_id=1, quantity=1, unit_price=35.0)
        )
        assert line.unit_price == 35.0

    async def test_rental_days_default(self, use_case):
        line = await use_case.execute(10, BookEquipmentRequest(inventory_item_id=1))
        assert line.rental_days == 1

    async def test_overbooking_rejected(self, use_case, booking_store):
        with pytest.raises(OverbookingConflictError) as exc_info:
            await use_case.execute(10, BookEquipmentRequest(inventory_item_id=1, quantity=3))

        assert exc_info.value.needed == 3
        assert exc_info.value.available == 2
        booking_store.create_line.assert_not_awaited()

    async def test_undated_event_skips_check(
        self, use_case, event_store, undated_event, availability_service, booking_store
    ):
        event_store.get_event.return_value = undated_event

        await use_case.execute(11, BookEquipmentRequest(inventory_item_id=1, quantity=99))

        availability_service.check_item.assert_not_awaited()
        assert booking_store.create_line.call_args.args[1] is None

    async def test_unknown_event(self, use_case, event_store):
        event_store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            await use_case.execute(999, BookEquipmentRequest(inventory_item_id=1))

    async def test_unknown_item(self, use_case, catalog_store):
        catalog_store.get_item.return_value = None
        with pytest.raises(InventoryItemNotFoundError):
            await use_case.execute(10, BookEquipmentRequest(inventory_item_id=999))

    @pytest.mark.parametrize("payload", [{"quantity": 0}, {"rental_days": 0}])
    async def test_minimums(self, use_case, booking_store, payload):
        with pytest.raises(ValidationError):
            await use_case.execute(10, BookEquipmentRequest(inventory_item_id=1, **payload))
        booking_store.create_line.assert_not_awaited()

    def test_to_response(self, use_case, sample_line):
        response = use_case.to_response(sample_line)
        assert response.id == 100
        assert response.item_name == "CDJ-3000"
