"""Equipment set endpoints."""

from fastapi import APIRouter, Depends, Response, status

from gearbook.api.dependencies import (
    get_add_set_item_use_case,
    get_apply_set_use_case,
    get_create_set_use_case,
    get_eq_set_store,
    get_update_set_item_use_case,
    get_update_set_use_case,
)
from gearbook.application.dto.converters import equipment_set_response
from gearbook.application.dto.requests import (
    ApplySetRequest,
    CreateSetRequest,
    SetItemRequest,
    UpdateSetItemRequest,
    UpdateSetRequest,
)
from gearbook.application.dto.responses import (
    ApplySetResponse,
    EquipmentSetResponse,
    ErrorResponse,
    SetItemResponse,
)
from gearbook.application.use_cases import (
    AddSetItemUseCase,
    ApplyEquipmentSetUseCase,
    CreateEquipmentSetUseCase,
    UpdateEquipmentSetUseCase,
    UpdateSetItemUseCase,
)
from gearbook.core.exceptions import EquipmentSetNotFoundError, SetItemNotFoundError
from gearbook.infrastructure.storage.sqlite import SQLiteSetStore

router = APIRouter(prefix="/api/sets", tags=["sets"])


@router.get("", response_model=list[EquipmentSetResponse])
async def list_sets(
    store: SQLiteSetStore = Depends(get_eq_set_store),
) -> list[EquipmentSetResponse]:
    """List sets by name with their item counts."""
    return [equipment_set_response(s) for s in await store.list_sets()]


@router.post(
    "",
    response_model=EquipmentSetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_set(
    request: CreateSetRequest,
    use_case: CreateEquipmentSetUseCase = Depends(get_create_set_use_case),
) -> EquipmentSetResponse:
    """Create a set, optionally with initial items."""
    equipment_set = await use_case.execute(request)
    return use_case.to_response(equipment_set)


@router.get(
    "/{set_id}",
    response_model=EquipmentSetResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_set(
    set_id: int,
    store: SQLiteSetStore = Depends(get_eq_set_store),
) -> EquipmentSetResponse:
    """Get a set with its items."""
    equipment_set = await store.get_set(set_id)
    if equipment_set is None:
        raise EquipmentSetNotFoundError(set_id)
    return equipment_set_response(equipment_set)


@router.put(
    "/{set_id}",
    response_model=EquipmentSetResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_set(
    set_id: int,
    request: UpdateSetRequest,
    use_case: UpdateEquipmentSetUseCase = Depends(get_update_set_use_case),
) -> EquipmentSetResponse:
    """Rename or describe a set."""
    equipment_set = await use_case.execute(set_id, request)
    return use_case.to_response(equipment_set)


@router.delete(
    "/{set_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_set(
    set_id: int,
    store: SQLiteSetStore = Depends(get_eq_set_store),
) -> Response:
    """Delete a set. Bookings made from it stay."""
    if not await store.delete_set(set_id):
        raise EquipmentSetNotFoundError(set_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{set_id}/items",
    response_model=SetItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_set_item(
    set_id: int,
    request: SetItemRequest,
    use_case: AddSetItemUseCase = Depends(get_add_set_item_use_case),
) -> SetItemResponse:
    """Add an item to a set; an item already in the set is summed."""
    set_item = await use_case.execute(set_id, request)
    return use_case.to_response(set_item)


@router.put(
    "/{set_id}/items/{set_item_id}",
    response_model=SetItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_set_item(
    set_id: int,
    set_item_id: int,
    request: UpdateSetItemRequest,
    use_case: UpdateSetItemUseCase = Depends(get_update_set_item_use_case),
) -> SetItemResponse:
    """Change the template quantity of a set item."""
    set_item = await use_case.execute(set_id, set_item_id, request)
    return use_case.to_response(set_item)


@router.delete(
    "/{set_id}/items/{set_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_set_item(
    set_id: int,
    set_item_id: int,
    store: SQLiteSetStore = Depends(get_eq_set_store),
) -> Response:
    """Remove an item from a set."""
    if await store.get_set_item(set_id, set_item_id) is None:
        raise SetItemNotFoundError(set_item_id)
    await store.delete_set_item(set_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{set_id}/apply/{event_id}",
    response_model=ApplySetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def apply_set(
    set_id: int,
    event_id: int,
    request: ApplySetRequest | None = None,
    use_case: ApplyEquipmentSetUseCase = Depends(get_apply_set_use_case),
) -> ApplySetResponse:
    """
    Book every item of the set onto the event.

    Items that do not fit are listed under ``conflicts``; the others are
    booked. Partial success is still a 201.
    """
    result = await use_case.execute(set_id, event_id, request or ApplySetRequest())
    return use_case.to_response(result)
