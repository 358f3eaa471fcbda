"""Book Equipment Use Case: reserve units of a catalog item for an event."""

from gearbook.application.dto.converters import booking_line_response
from gearbook.application.dto.requests import BookEquipmentRequest
from gearbook.application.dto.responses import BookingLineResponse
from gearbook.config import get_logger, get_settings
from gearbook.core.entities.booking import EventInventoryLine
from gearbook.core.exceptions import (
    EventNotFoundError,
    InventoryItemNotFoundError,
    OverbookingConflictError,
)
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.services.availability import AvailabilityService
from gearbook.core.services.validation import require_min

logger = get_logger(__name__)


class BookEquipmentUseCase:
    """
    Book N units of an item onto an event.

    When the event has an occupancy window, the booking is rejected with
    OverbookingConflictError if it does not fit next to the bookings of
    other open events in that window. The store repeats the check under
    the write lock. Events without any dates are booked unchecked.
    """

    def __init__(
        self,
        event_store: IEventStore | None = None,
        catalog_store: ICatalogStore | None = None,
        booking_store: IBookingStore | None = None,
        availability_service: AvailabilityService | None = None,
    ):
        self._event_store = event_store
        self._catalog_store = catalog_store
        self._booking_store = booking_store
        self._availability_service = availability_service

    async def _get_event_store(self) -> IEventStore:
        if self._event_store is None:
            from gearbook.infrastructure.storage.sqlite import get_event_store

            self._event_store = await get_event_store()
        return self._event_store

    async def _get_catalog_store(self) -> ICatalogStore:
        if self._catalog_store is None:
            from gearbook.infrastructure.storage.sqlite import get_catalog_store

            self._catalog_store = await get_catalog_store()
        return self._catalog_store

    async def _get_booking_store(self) -> IBookingStore:
        if self._booking_store is None:
            from gearbook.infrastructure.storage.sqlite import get_booking_store

            self._booking_store = await get_booking_store()
        return self._booking_store

    async def _get_availability_service(self) -> AvailabilityService:
        if self._availability_service is None:
            from gearbook.application.services import get_availability_service

            self._availability_service = await get_availability_service()
        return self._availability_service

    async def execute(
        self, event_id: int, request: BookEquipmentRequest
    ) -> EventInventoryLine:
        """Execute book equipment use case."""
        rental_days = (
            request.rental_days
            if request.rental_days is not None
            else get_settings().booking.default_rental_days
        )
        require_min("quantity", request.quantity)
        require_min("rental_days", rental_days)

        logger.info(
            "book_equipment_started",
            event_id=event_id,
            item_id=request.inventory_item_id,
            quantity=request.quantity,
        )

        # 1. Resolve event and item
        event_store = await self._get_event_store()
        event = await event_store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        catalog_store = await self._get_catalog_store()
        item = await catalog_store.get_item(request.inventory_item_id)
        if item is None:
            raise InventoryItemNotFoundError(request.inventory_item_id)

        # 2. Capacity check for the event's window
        window = event.occupancy_window
        if window is not None:
            service = await self._get_availability_service()
            availability = await service.check_item(item, window)
            if not availability.can_fit(request.quantity):
                logger.warning(
                    "overbooking_rejected",
                    event_id=event_id,
                    item_id=item.id,
                    needed=request.quantity,
                    available=availability.available,
                )
                raise OverbookingConflictError(
                    item_id=item.id,  # type: ignore[arg-type]
                    item_name=item.name,
                    needed=request.quantity,
                    available=availability.available,
                )

        # 3. Insert line and history entry
        line = EventInventoryLine(
            event_id=event_id,
            inventory_item_id=item.id,  # type: ignore[arg-type]
            quantity=request.quantity,
            rental_days=rental_days,
            unit_price=(
                request.unit_price if request.unit_price is not None else item.rental_rate
            ),
            notes=request.notes,
        )
        booking_store = await self._get_booking_store()
        line = await booking_store.create_line(
            line,
            window,
            f"{request.quantity}× {item.name} added for {rental_days} days",
        )

        logger.info(
            "book_equipment_complete",
            line_id=line.id,
            event_id=event_id,
            window=f"{window.start}..{window.end}" if window else None,
        )
        return line

    def to_response(self, line: EventInventoryLine) -> BookingLineResponse:
        """Convert result to API response."""
        return booking_line_response(line)
