"""Tests for booking line maintenance."""

from unittest.mock import AsyncMock

import pytest

from gearbook.application.dto.requests import UpdateBookingRequest
from gearbook.application.use_cases.manage_bookings import (
    GetPackingListUseCase,
    RemoveBookingUseCase,
    UpdateBookingUseCase,
)
from gearbook.core.exceptions import (
    BookingLineNotFoundError,
    EventNotFoundError,
    ValidationError,
)


@pytest.fixture
def booking_store(sample_line):
    store = AsyncMock()
    store.get_line.return_value = sample_line
    store.update_line.side_effect = lambda line: line
    store.delete_line.return_value = True
    return store


@pytest.fixture
def event_store(sample_event):
    store = AsyncMock()
    store.get_event.return_value = sample_event
    return store


class TestUpdateBookingUseCase:
    async def test_quantity_is_not_rechecked(self, booking_store):
        use_case = UpdateBookingUseCase(booking_store=booking_store)

        line = await use_case.execute(10, 100, UpdateBookingRequest(quantity=50, packed=True))

        assert line.quantity == 50
        assert line.packed is True
        assert line.rental_days == 2

    async def test_rental_days_must_be_positive(self, booking_store):
        use_case = UpdateBookingUseCase(booking_store=booking_store)
        with pytest.raises(ValidationError):
            await use_case.execute(10, 100, UpdateBookingRequest(rental_days=0))
        booking_store.update_line.assert_not_awaited()

    async def test_unknown_line(self, booking_store):
        booking_store.get_line.return_value = None
        use_case = UpdateBookingUseCase(booking_store=booking_store)
        with pytest.raises(BookingLineNotFoundError):
            await use_case.execute(10, 1, UpdateBookingRequest(notes="x"))


class TestRemoveBookingUseCase:
    async def test_remove_writes_history_detail(self, booking_store):
        use_case = RemoveBookingUseCase(booking_store=booking_store)

        assert await use_case.execute(10, 100) is True

        booking_store.delete_line.assert_awaited_once_with(10, 100, "2× CDJ-3000 removed")

    async def test_remove_unknown(self, booking_store):
        booking_store.get_line.return_value = None
        use_case = RemoveBookingUseCase(booking_store=booking_store)
        with pytest.raises(BookingLineNotFoundError):
            await use_case.execute(10, 1)


class TestGetPackingListUseCase:
    async def test_counts(self, booking_store, event_store, sample_line):
        packed = sample_line.model_copy(update={"id": 101, "packed": True})
        booking_store.list_lines.return_value = [sample_line, packed]
        use_case = GetPackingListUseCase(booking_store=booking_store, event_store=event_store)

        response = use_case.to_response(await use_case.execute(10))

        assert response.summary.total == 2
        assert response.summary.packed == 1
        assert response.summary.unpacked == 1

    async def test_unknown_event(self, booking_store, event_store):
        event_store.get_event.return_value = None
        use_case = GetPackingListUseCase(booking_store=booking_store, event_store=event_store)
        with pytest.raises(EventNotFoundError):
            await use_case.execute(10)
