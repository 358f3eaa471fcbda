"""Equipment catalog, availability and repair endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from gearbook.api.dependencies import (
    get_add_inventory_item_use_case,
    get_cat_store,
    get_check_availability_use_case,
    get_rep_store,
    get_report_repair_use_case,
    get_update_inventory_item_use_case,
    get_update_repair_use_case,
)
from gearbook.application.dto.converters import inventory_item_response, repair_response
from gearbook.application.dto.requests import (
    CheckAvailabilityRequest,
    CreateInventoryItemRequest,
    CreateRepairRequest,
    UpdateInventoryItemRequest,
    UpdateRepairRequest,
)
from gearbook.application.dto.responses import (
    AvailabilityResponse,
    ErrorResponse,
    InventoryItemResponse,
    RepairLogResponse,
)
from gearbook.application.use_cases import (
    AddInventoryItemUseCase,
    CheckAvailabilityUseCase,
    ReportRepairUseCase,
    UpdateInventoryItemUseCase,
    UpdateRepairUseCase,
)
from gearbook.core.exceptions import InventoryItemNotFoundError, RepairLogNotFoundError
from gearbook.infrastructure.storage.sqlite import SQLiteCatalogStore, SQLiteRepairStore

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


# --- Catalog ---


@router.get("", response_model=list[InventoryItemResponse])
async def list_items(
    category: str | None = None,
    search: str | None = Query(default=None, description="Match name, description or barcode"),
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    store: SQLiteCatalogStore = Depends(get_cat_store),
) -> list[InventoryItemResponse]:
    """List catalog items ordered by category and name."""
    items = await store.list_items(category=category, search=search, limit=limit, offset=offset)
    return [inventory_item_response(item) for item in items]


@router.post(
    "",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(
    request: CreateInventoryItemRequest,
    use_case: AddInventoryItemUseCase = Depends(get_add_inventory_item_use_case),
) -> InventoryItemResponse:
    """Add an item to the catalog."""
    item = await use_case.execute(request)
    return use_case.to_response(item)


@router.get("/categories", response_model=list[str])
async def list_categories(
    store: SQLiteCatalogStore = Depends(get_cat_store),
) -> list[str]:
    """Distinct catalog categories."""
    return await store.list_categories()


@router.get(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: int,
    store: SQLiteCatalogStore = Depends(get_cat_store),
) -> InventoryItemResponse:
    """Get a catalog item."""
    item = await store.get_item(item_id)
    if item is None:
        raise InventoryItemNotFoundError(item_id)
    return inventory_item_response(item)


@router.put(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_item(
    item_id: int,
    request: UpdateInventoryItemRequest,
    use_case: UpdateInventoryItemUseCase = Depends(get_update_inventory_item_use_case),
) -> InventoryItemResponse:
    """Update a catalog item."""
    item = await use_case.execute(item_id, request)
    return use_case.to_response(item)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(
    item_id: int,
    store: SQLiteCatalogStore = Depends(get_cat_store),
) -> Response:
    """Delete a catalog item with its bookings, repairs and set memberships."""
    if not await store.delete_item(item_id):
        raise InventoryItemNotFoundError(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Availability ---


@router.get(
    "/{item_id}/availability",
    response_model=AvailabilityResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def check_availability(
    item_id: int,
    date_from: date | None = Query(default=None, description="Range start (inclusive)"),
    date_to: date | None = Query(default=None, description="Range end (inclusive)"),
    exclude_event_id: int | None = Query(default=None, description="Ignore this event's bookings"),
    use_case: CheckAvailabilityUseCase = Depends(get_check_availability_use_case),
) -> AvailabilityResponse:
    """
    Free units of an item.

    Without both dates the booked count covers every open event.
    """
    request = CheckAvailabilityRequest(
        item_id=item_id,
        date_from=date_from,
        date_to=date_to,
        exclude_event_id=exclude_event_id,
    )
    result = await use_case.execute(request)
    return use_case.to_response(result, request)


# --- Repairs ---


@router.get(
    "/{item_id}/repairs",
    response_model=list[RepairLogResponse],
    responses={404: {"model": ErrorResponse}},
)
async def list_repairs(
    item_id: int,
    catalog_store: SQLiteCatalogStore = Depends(get_cat_store),
    store: SQLiteRepairStore = Depends(get_rep_store),
) -> list[RepairLogResponse]:
    """Repair history of an item, newest first."""
    if await catalog_store.get_item(item_id) is None:
        raise InventoryItemNotFoundError(item_id)
    return [repair_response(r) for r in await store.list_repairs(item_id)]


@router.post(
    "/{item_id}/repairs",
    response_model=RepairLogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def report_repair(
    item_id: int,
    request: CreateRepairRequest,
    use_case: ReportRepairUseCase = Depends(get_report_repair_use_case),
) -> RepairLogResponse:
    """Take units of an item out of service."""
    repair = await use_case.execute(item_id, request)
    return use_case.to_response(repair)


@router.put(
    "/{item_id}/repairs/{repair_id}",
    response_model=RepairLogResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_repair(
    item_id: int,
    repair_id: int,
    request: UpdateRepairRequest,
    use_case: UpdateRepairUseCase = Depends(get_update_repair_use_case),
) -> RepairLogResponse:
    """Update a repair; resolving it returns the units to service."""
    repair = await use_case.execute(item_id, repair_id, request)
    return use_case.to_response(repair)


@router.delete(
    "/{item_id}/repairs/{repair_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_repair(
    item_id: int,
    repair_id: int,
    store: SQLiteRepairStore = Depends(get_rep_store),
) -> Response:
    """Delete a repair log."""
    if await store.get_repair(item_id, repair_id) is None:
        raise RepairLogNotFoundError(repair_id)
    await store.delete_repair(repair_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
