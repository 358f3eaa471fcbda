"""Event endpoints: the minimal event record, its history, crew and bookings."""

from fastapi import APIRouter, Depends, Response, status

from gearbook.api.dependencies import (
    get_add_crew_member_use_case,
    get_add_equipment_entry_use_case,
    get_book_equipment_use_case,
    get_book_store,
    get_create_event_use_case,
    get_evt_store,
    get_packing_list_use_case,
    get_remove_booking_use_case,
    get_update_booking_use_case,
    get_update_event_use_case,
)
from gearbook.application.dto.converters import (
    booking_line_response,
    crew_response,
    equipment_entry_response,
    event_response,
    history_response,
)
from gearbook.application.dto.requests import (
    AddCrewMemberRequest,
    AddEquipmentEntryRequest,
    BookEquipmentRequest,
    CreateEventRequest,
    UpdateBookingRequest,
    UpdateEventRequest,
)
from gearbook.application.dto.responses import (
    BookingLineResponse,
    CrewMemberResponse,
    EquipmentEntryResponse,
    ErrorResponse,
    EventHistoryResponse,
    EventResponse,
    PackingListResponse,
)
from gearbook.application.use_cases import (
    AddCrewMemberUseCase,
    AddEquipmentEntryUseCase,
    BookEquipmentUseCase,
    CreateEventUseCase,
    GetPackingListUseCase,
    RemoveBookingUseCase,
    UpdateBookingUseCase,
    UpdateEventUseCase,
)
from gearbook.core.exceptions import EventNotFoundError
from gearbook.infrastructure.storage.sqlite import SQLiteBookingStore, SQLiteEventStore

router = APIRouter(prefix="/api/events", tags=["events"])


@router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_event(
    request: CreateEventRequest,
    use_case: CreateEventUseCase = Depends(get_create_event_use_case),
) -> EventResponse:
    """Create an event record."""
    event = await use_case.execute(request)
    return use_case.to_response(event)


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_event(
    event_id: int,
    store: SQLiteEventStore = Depends(get_evt_store),
) -> EventResponse:
    """Get an event with its occupancy window."""
    event = await store.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    return event_response(event)


@router.patch(
    "/{event_id}",
    response_model=EventResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_event(
    event_id: int,
    request: UpdateEventRequest,
    use_case: UpdateEventUseCase = Depends(get_update_event_use_case),
) -> EventResponse:
    """Change status or dates. Closing an event releases its equipment."""
    event = await use_case.execute(event_id, request)
    return use_case.to_response(event)


@router.get(
    "/{event_id}/history",
    response_model=list[EventHistoryResponse],
    responses={404: {"model": ErrorResponse}},
)
async def list_history(
    event_id: int,
    store: SQLiteEventStore = Depends(get_evt_store),
) -> list[EventHistoryResponse]:
    """Event history, newest first."""
    if await store.get_event(event_id) is None:
        raise EventNotFoundError(event_id)
    return [history_response(entry) for entry in await store.list_history(event_id)]


@router.post(
    "/{event_id}/crew",
    response_model=CrewMemberResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_crew_member(
    event_id: int,
    request: AddCrewMemberRequest,
    use_case: AddCrewMemberUseCase = Depends(get_add_crew_member_use_case),
) -> CrewMemberResponse:
    """Assign a crew member to the event."""
    return crew_response(await use_case.execute(event_id, request))


@router.post(
    "/{event_id}/equipment",
    response_model=EquipmentEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_equipment_entry(
    event_id: int,
    request: AddEquipmentEntryRequest,
    use_case: AddEquipmentEntryUseCase = Depends(get_add_equipment_entry_use_case),
) -> EquipmentEntryResponse:
    """Add a free-text equipment entry, optionally linked to a booking line."""
    return equipment_entry_response(await use_case.execute(event_id, request))


# --- Bookings ---


@router.get(
    "/{event_id}/inventory-items",
    response_model=list[BookingLineResponse],
    responses={404: {"model": ErrorResponse}},
)
async def list_bookings(
    event_id: int,
    event_store: SQLiteEventStore = Depends(get_evt_store),
    store: SQLiteBookingStore = Depends(get_book_store),
) -> list[BookingLineResponse]:
    """Booking lines of an event."""
    if await event_store.get_event(event_id) is None:
        raise EventNotFoundError(event_id)
    return [booking_line_response(line) for line in await store.list_lines(event_id)]


@router.post(
    "/{event_id}/inventory-items",
    response_model=BookingLineResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def book_equipment(
    event_id: int,
    request: BookEquipmentRequest,
    use_case: BookEquipmentUseCase = Depends(get_book_equipment_use_case),
) -> BookingLineResponse:
    """
    Book units of a catalog item onto the event.

    Returns 409 with needed/available when the event's window has too few
    free units.
    """
    line = await use_case.execute(event_id, request)
    return use_case.to_response(line)


@router.put(
    "/{event_id}/inventory-items/{line_id}",
    response_model=BookingLineResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_booking(
    event_id: int,
    line_id: int,
    request: UpdateBookingRequest,
    use_case: UpdateBookingUseCase = Depends(get_update_booking_use_case),
) -> BookingLineResponse:
    """Edit a booking line (quantity, days, price, notes, packed)."""
    line = await use_case.execute(event_id, line_id, request)
    return use_case.to_response(line)


@router.delete(
    "/{event_id}/inventory-items/{line_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def remove_booking(
    event_id: int,
    line_id: int,
    use_case: RemoveBookingUseCase = Depends(get_remove_booking_use_case),
) -> Response:
    """Remove a booking line."""
    await use_case.execute(event_id, line_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{event_id}/packing-list",
    response_model=PackingListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def packing_list(
    event_id: int,
    use_case: GetPackingListUseCase = Depends(get_packing_list_use_case),
) -> PackingListResponse:
    """Booking lines with packed/unpacked counts."""
    result = await use_case.execute(event_id)
    return use_case.to_response(result)
