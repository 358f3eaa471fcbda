"""Catalog Use Cases: add and edit equipment items."""

from gearbook.application.dto.converters import inventory_item_response
from gearbook.application.dto.requests import (
    CreateInventoryItemRequest,
    UpdateInventoryItemRequest,
)
from gearbook.application.dto.responses import InventoryItemResponse
from gearbook.config import get_logger, get_settings
from gearbook.core.entities.inventory import InventoryItem
from gearbook.core.exceptions import InventoryItemNotFoundError
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.core.services.validation import require_min, require_text

logger = get_logger(__name__)


class _CatalogUseCase:
    def __init__(self, catalog_store: ICatalogStore | None = None):
        self._catalog_store = catalog_store

    async def _get_catalog_store(self) -> ICatalogStore:
        if self._catalog_store is None:
            from gearbook.infrastructure.storage.sqlite import get_catalog_store

            self._catalog_store = await get_catalog_store()
        return self._catalog_store

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        """Convert result to API response."""
        return inventory_item_response(item)


class AddInventoryItemUseCase(_CatalogUseCase):
    """Add an item to the equipment catalog."""

    async def execute(self, request: CreateInventoryItemRequest) -> InventoryItem:
        name = require_text("name", request.name)
        require_min("quantity", request.quantity, minimum=0)

        store = await self._get_catalog_store()
        item = InventoryItem(
            name=name,
            category=(request.category or "").strip() or get_settings().booking.default_category,
            description=request.description,
            quantity=request.quantity,
            rental_rate=request.rental_rate,
            purchase_price=request.purchase_price,
            barcode=request.barcode,
            notes=request.notes,
        )
        return await store.create_item(item)


class UpdateInventoryItemUseCase(_CatalogUseCase):
    """Edit a catalog item. Only fields present in the request change."""

    async def execute(
        self, item_id: int, request: UpdateInventoryItemRequest
    ) -> InventoryItem:
        store = await self._get_catalog_store()
        item = await store.get_item(item_id)
        if item is None:
            raise InventoryItemNotFoundError(item_id)

        changes = request.model_dump(exclude_unset=True)
        if "name" in changes:
            changes["name"] = require_text("name", changes["name"])
        if "quantity" in changes:
            if changes["quantity"] is None:
                del changes["quantity"]
            else:
                require_min("quantity", changes["quantity"], minimum=0)
        if changes.get("category") is None:
            changes.pop("category", None)
        if changes.get("rental_rate") is None:
            changes.pop("rental_rate", None)

        for field, value in changes.items():
            setattr(item, field, value)

        item = await store.update_item(item)
        logger.info("inventory_item_edited", item_id=item_id, fields=sorted(changes))
        return item
