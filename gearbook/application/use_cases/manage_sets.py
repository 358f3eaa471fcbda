"""Equipment Set Use Cases: bundle templates and their items."""

from gearbook.application.dto.converters import equipment_set_response, set_item_response
from gearbook.application.dto.requests import (
    CreateSetRequest,
    SetItemRequest,
    UpdateSetItemRequest,
    UpdateSetRequest,
)
from gearbook.application.dto.responses import EquipmentSetResponse, SetItemResponse
from gearbook.config import get_logger
from gearbook.core.entities.equipment_set import EquipmentSet, EquipmentSetItem
from gearbook.core.exceptions import (
    EquipmentSetNotFoundError,
    InventoryItemNotFoundError,
    SetItemNotFoundError,
)
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.core.interfaces.set_store import ISetStore
from gearbook.core.services.validation import require_min, require_text

logger = get_logger(__name__)


class _SetUseCase:
    def __init__(
        self,
        set_store: ISetStore | None = None,
        catalog_store: ICatalogStore | None = None,
    ):
        self._set_store = set_store
        self._catalog_store = catalog_store

    async def _get_set_store(self) -> ISetStore:
        if self._set_store is None:
            from gearbook.infrastructure.storage.sqlite import get_set_store

            self._set_store = await get_set_store()
        return self._set_store

    async def _get_catalog_store(self) -> ICatalogStore:
        if self._catalog_store is None:
            from gearbook.infrastructure.storage.sqlite import get_catalog_store

            self._catalog_store = await get_catalog_store()
        return self._catalog_store

    async def _require_set(self, set_id: int) -> EquipmentSet:
        store = await self._get_set_store()
        equipment_set = await store.get_set(set_id)
        if equipment_set is None:
            raise EquipmentSetNotFoundError(set_id)
        return equipment_set

    async def _check_item(self, request: SetItemRequest) -> None:
        require_min("quantity", request.quantity)
        catalog_store = await self._get_catalog_store()
        if await catalog_store.get_item(request.inventory_item_id) is None:
            raise InventoryItemNotFoundError(request.inventory_item_id)

    async def _add_item(self, set_id: int, request: SetItemRequest) -> EquipmentSetItem:
        await self._check_item(request)
        return await self._write_item(set_id, request)

    async def _write_item(self, set_id: int, request: SetItemRequest) -> EquipmentSetItem:
        store = await self._get_set_store()
        return await store.add_set_item(
            EquipmentSetItem(
                set_id=set_id,
                inventory_item_id=request.inventory_item_id,
                quantity=request.quantity,
            )
        )


class CreateEquipmentSetUseCase(_SetUseCase):
    """Create a set, optionally with its initial items."""

    async def execute(self, request: CreateSetRequest) -> EquipmentSet:
        name = require_text("name", request.name)
        # Quantities and catalog items are all checked before the header is written
        for item_request in request.items:
            await self._check_item(item_request)

        store = await self._get_set_store()
        equipment_set = await store.create_set(
            EquipmentSet(name=name, description=request.description, notes=request.notes)
        )
        for item_request in request.items:
            await self._write_item(equipment_set.id, item_request)  # type: ignore[arg-type]

        return await self._require_set(equipment_set.id)  # type: ignore[arg-type]

    def to_response(self, equipment_set: EquipmentSet) -> EquipmentSetResponse:
        """Convert result to API response."""
        return equipment_set_response(equipment_set)


class UpdateEquipmentSetUseCase(_SetUseCase):
    """Edit the header of a set."""

    async def execute(self, set_id: int, request: UpdateSetRequest) -> EquipmentSet:
        equipment_set = await self._require_set(set_id)
        changes = request.model_dump(exclude_unset=True)

        if changes.get("name") is not None:
            equipment_set.name = require_text("name", changes["name"])
        if "description" in changes:
            equipment_set.description = changes["description"]
        if "notes" in changes:
            equipment_set.notes = changes["notes"]

        store = await self._get_set_store()
        return await store.update_set(equipment_set)

    def to_response(self, equipment_set: EquipmentSet) -> EquipmentSetResponse:
        """Convert result to API response."""
        return equipment_set_response(equipment_set)


class AddSetItemUseCase(_SetUseCase):
    """Add a catalog item to a set; an item already in the set is summed."""

    async def execute(self, set_id: int, request: SetItemRequest) -> EquipmentSetItem:
        await self._require_set(set_id)
        return await self._add_item(set_id, request)

    def to_response(self, set_item: EquipmentSetItem) -> SetItemResponse:
        """Convert result to API response."""
        return set_item_response(set_item)


class UpdateSetItemUseCase(_SetUseCase):
    """Change the template quantity of a set item."""

    async def execute(
        self, set_id: int, set_item_id: int, request: UpdateSetItemRequest
    ) -> EquipmentSetItem:
        require_min("quantity", request.quantity)
        store = await self._get_set_store()
        set_item = await store.get_set_item(set_id, set_item_id)
        if set_item is None:
            raise SetItemNotFoundError(set_item_id)

        set_item.quantity = request.quantity
        return await store.update_set_item(set_item)

    def to_response(self, set_item: EquipmentSetItem) -> SetItemResponse:
        """Convert result to API response."""
        return set_item_response(set_item)
