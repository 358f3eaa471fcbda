"""Booking line maintenance: edit, remove and packing list."""

from gearbook.application.dto.converters import booking_line_response, packing_list_response
from gearbook.application.dto.requests import UpdateBookingRequest
from gearbook.application.dto.responses import BookingLineResponse, PackingListResponse
from gearbook.config import get_logger
from gearbook.core.entities.booking import EventInventoryLine, PackingList
from gearbook.core.exceptions import BookingLineNotFoundError, EventNotFoundError
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.services.validation import require_min

logger = get_logger(__name__)


class _BookingUseCase:
    def __init__(
        self,
        booking_store: IBookingStore | None = None,
        event_store: IEventStore | None = None,
    ):
        self._booking_store = booking_store
        self._event_store = event_store

    async def _get_booking_store(self) -> IBookingStore:
        if self._booking_store is None:
            from gearbook.infrastructure.storage.sqlite import get_booking_store

            self._booking_store = await get_booking_store()
        return self._booking_store

    async def _get_event_store(self) -> IEventStore:
        if self._event_store is None:
            from gearbook.infrastructure.storage.sqlite import get_event_store

            self._event_store = await get_event_store()
        return self._event_store

    async def _require_line(self, event_id: int, line_id: int) -> EventInventoryLine:
        store = await self._get_booking_store()
        line = await store.get_line(event_id, line_id)
        if line is None:
            raise BookingLineNotFoundError(line_id)
        return line


class UpdateBookingUseCase(_BookingUseCase):
    """
    Edit a booking line in place.

    Capacity is deliberately not re-checked: quantity may be raised past
    what is free.
    """

    async def execute(
        self, event_id: int, line_id: int, request: UpdateBookingRequest
    ) -> EventInventoryLine:
        line = await self._require_line(event_id, line_id)
        changes = request.model_dump(exclude_unset=True)

        if changes.get("quantity") is not None:
            line.quantity = int(require_min("quantity", changes["quantity"]))
        if changes.get("rental_days") is not None:
            line.rental_days = int(require_min("rental_days", changes["rental_days"]))
        if changes.get("unit_price") is not None:
            line.unit_price = changes["unit_price"]
        if "notes" in changes:
            line.notes = changes["notes"]
        if changes.get("packed") is not None:
            line.packed = changes["packed"]

        store = await self._get_booking_store()
        return await store.update_line(line)

    def to_response(self, line: EventInventoryLine) -> BookingLineResponse:
        """Convert result to API response."""
        return booking_line_response(line)


class RemoveBookingUseCase(_BookingUseCase):
    """Delete a booking line; the freed units are available immediately."""

    async def execute(self, event_id: int, line_id: int) -> bool:
        line = await self._require_line(event_id, line_id)
        store = await self._get_booking_store()
        return await store.delete_line(
            event_id,
            line_id,
            f"{line.quantity}× {line.item_name} removed",
        )


class GetPackingListUseCase(_BookingUseCase):
    """Booking lines of an event with packed/unpacked counts."""

    async def execute(self, event_id: int) -> PackingList:
        event_store = await self._get_event_store()
        if await event_store.get_event(event_id) is None:
            raise EventNotFoundError(event_id)

        store = await self._get_booking_store()
        return PackingList(event_id=event_id, items=await store.list_lines(event_id))

    def to_response(self, packing_list: PackingList) -> PackingListResponse:
        """Convert result to API response."""
        return packing_list_response(packing_list)
