"""Apply Equipment Set Use Case: book a whole bundle onto an event."""

from dataclasses import dataclass, field

from gearbook.application.dto.requests import ApplySetRequest
from gearbook.application.dto.responses import ApplySetResponse, SetConflictResponse
from gearbook.config import get_logger, get_settings
from gearbook.core.entities.booking import EventInventoryLine
from gearbook.core.entities.equipment_set import EquipmentSetItem, SetApplyConflict
from gearbook.core.exceptions import EquipmentSetNotFoundError, EventNotFoundError
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.interfaces.set_store import ISetStore
from gearbook.core.services.availability import AvailabilityService
from gearbook.core.services.validation import require_min

logger = get_logger(__name__)


@dataclass
class ApplySetResult:
    """Result of applying a set. Conflicts are reported, not raised."""

    set_name: str
    lines: list[EventInventoryLine] = field(default_factory=list)
    conflicts: list[SetApplyConflict] = field(default_factory=list)

    @property
    def inserted_count(self) -> int:
        return len(self.lines)


class ApplyEquipmentSetUseCase:
    """
    Book every item of a set onto one event, with partial success.

    Each item is checked for the event's window, ignoring the event's own
    lines so re-applying a set does not conflict with itself. Items that
    do not fit are reported and skipped; the rest are written together.
    """

    def __init__(
        self,
        set_store: ISetStore | None = None,
        event_store: IEventStore | None = None,
        booking_store: IBookingStore | None = None,
        availability_service: AvailabilityService | None = None,
    ):
        self._set_store = set_store
        self._event_store = event_store
        self._booking_store = booking_store
        self._availability_service = availability_service

    async def _get_set_store(self) -> ISetStore:
        if self._set_store is None:
            from gearbook.infrastructure.storage.sqlite import get_set_store

            self._set_store = await get_set_store()
        return self._set_store

    async def _get_event_store(self) -> IEventStore:
        if self._event_store is None:
            from gearbook.infrastructure.storage.sqlite import get_event_store

            self._event_store = await get_event_store()
        return self._event_store

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
        self, set_id: int, event_id: int, request: ApplySetRequest
    ) -> ApplySetResult:
        """Execute apply set use case."""
        rental_days = (
            request.rental_days
            if request.rental_days is not None
            else get_settings().booking.default_rental_days
        )
        require_min("rental_days", rental_days)

        set_store = await self._get_set_store()
        equipment_set = await set_store.get_set(set_id)
        if equipment_set is None:
            raise EquipmentSetNotFoundError(set_id)

        event_store = await self._get_event_store()
        event = await event_store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        window = event.occupancy_window
        candidates: list[EquipmentSetItem] = []
        conflicts: list[SetApplyConflict] = []

        # 1. Classify each set item
        if window is None:
            candidates = list(equipment_set.items)
        else:
            service = await self._get_availability_service()
            for set_item in equipment_set.items:
                availability = await service.check(
                    set_item.inventory_item_id,
                    date_from=window.start,
                    date_to=window.end,
                    exclude_event_id=event_id,
                )
                if set_item.quantity > availability.available:
                    conflicts.append(
                        SetApplyConflict(
                            inventory_item_id=set_item.inventory_item_id,
                            item_name=set_item.item_name or availability.name,
                            needed=set_item.quantity,
                            available=availability.available,
                        )
                    )
                else:
                    candidates.append(set_item)

        # 2. Write the insertable lines in one transaction
        booking_store = await self._get_booking_store()
        lines, late_conflicts = await booking_store.apply_set_lines(
            event_id,
            candidates,
            rental_days,
            window,
            equipment_set.name,
        )
        conflicts.extend(late_conflicts)

        logger.info(
            "set_applied",
            set_id=set_id,
            event_id=event_id,
            inserted=len(lines),
            conflicts=len(conflicts),
        )

        return ApplySetResult(
            set_name=equipment_set.name,
            lines=lines,
            conflicts=conflicts,
        )

    def to_response(self, result: ApplySetResult) -> ApplySetResponse:
        """Convert result to API response."""
        if result.conflicts:
            message = (
                f"{result.inserted_count} Artikel hinzugefügt, "
                f"{len(result.conflicts)} Konflikte"
            )
        else:
            message = f"Alle {result.inserted_count} Artikel hinzugefügt"

        return ApplySetResponse(
            inserted_count=result.inserted_count,
            conflicts=[
                SetConflictResponse(**c.model_dump()) for c in result.conflicts
            ]
            or None,
            message=message,
        )
