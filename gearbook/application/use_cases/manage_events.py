"""Event Use Cases: the minimal event data the reservation engine reads."""

from gearbook.application.dto.converters import event_response
from gearbook.application.dto.requests import (
    AddCrewMemberRequest,
    AddEquipmentEntryRequest,
    CreateEventRequest,
    UpdateEventRequest,
)
from gearbook.application.dto.responses import EventResponse
from gearbook.config import get_logger
from gearbook.core.entities.event import CrewMember, EquipmentEntry, Event, EventStatus
from gearbook.core.exceptions import (
    BookingLineNotFoundError,
    EventNotFoundError,
    ValidationError,
)
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.services.validation import parse_enum, require_text

logger = get_logger(__name__)


def _check_dates(event: Event) -> None:
    window = event.occupancy_window
    if window is not None and window.end < window.start:
        raise ValidationError(
            "teardown_date",
            "occupancy window ends before it starts",
            f"{window.start}..{window.end}",
        )


class _EventUseCase:
    def __init__(
        self,
        event_store: IEventStore | None = None,
        booking_store: IBookingStore | None = None,
    ):
        self._event_store = event_store
        self._booking_store = booking_store

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

    async def _require_event(self, event_id: int) -> Event:
        store = await self._get_event_store()
        event = await store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def to_response(self, event: Event) -> EventResponse:
        """Convert result to API response."""
        return event_response(event)


class CreateEventUseCase(_EventUseCase):
    """Create an event record."""

    async def execute(self, request: CreateEventRequest) -> Event:
        event = Event(
            title=require_text("title", request.title),
            status=parse_enum(EventStatus, "status", request.status),
            client_name=request.client_name,
            event_date=request.event_date,
            setup_date=request.setup_date,
            teardown_date=request.teardown_date,
        )
        _check_dates(event)
        store = await self._get_event_store()
        return await store.create_event(event)


class UpdateEventUseCase(_EventUseCase):
    """Change status, dates, title or client of an event."""

    async def execute(self, event_id: int, request: UpdateEventRequest) -> Event:
        event = await self._require_event(event_id)
        changes = request.model_dump(exclude_unset=True)

        if changes.get("title") is not None:
            event.title = require_text("title", changes["title"])
        if changes.get("status") is not None:
            event.status = parse_enum(EventStatus, "status", changes["status"])
        for field in ("client_name", "event_date", "setup_date", "teardown_date"):
            if field in changes:
                setattr(event, field, changes[field])

        _check_dates(event)
        store = await self._get_event_store()
        return await store.update_event(event)


class AddCrewMemberUseCase(_EventUseCase):
    """Assign crew to an event; crew shows up as placeholders on quotes."""

    async def execute(self, event_id: int, request: AddCrewMemberRequest) -> CrewMember:
        await self._require_event(event_id)
        member = CrewMember(
            event_id=event_id,
            name=require_text("name", request.name),
            role=request.role,
        )
        store = await self._get_event_store()
        return await store.add_crew_member(member)


class AddEquipmentEntryUseCase(_EventUseCase):
    """Record free-text equipment, optionally linked to a booking line."""

    async def execute(
        self, event_id: int, request: AddEquipmentEntryRequest
    ) -> EquipmentEntry:
        await self._require_event(event_id)

        if request.booking_line_id is not None:
            booking_store = await self._get_booking_store()
            line = await booking_store.get_line(event_id, request.booking_line_id)
            if line is None:
                raise BookingLineNotFoundError(request.booking_line_id)

        entry = EquipmentEntry(
            event_id=event_id,
            asset_name=require_text("asset_name", request.asset_name),
            booking_line_id=request.booking_line_id,
        )
        store = await self._get_event_store()
        return await store.add_equipment_entry(entry)
