"""Repair Use Cases: report defects and move them through their lifecycle."""

from datetime import datetime

from gearbook.application.dto.converters import repair_response
from gearbook.application.dto.requests import CreateRepairRequest, UpdateRepairRequest
from gearbook.application.dto.responses import RepairLogResponse
from gearbook.config import get_logger
from gearbook.core.entities.inventory import RepairLog, RepairStatus
from gearbook.core.exceptions import (
    CapacityExceededError,
    InventoryItemNotFoundError,
    RepairLogNotFoundError,
)
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.core.interfaces.repair_store import IRepairStore
from gearbook.core.services.validation import parse_enum, require_min, require_text

logger = get_logger(__name__)


class _RepairUseCase:
    def __init__(
        self,
        catalog_store: ICatalogStore | None = None,
        repair_store: IRepairStore | None = None,
    ):
        self._catalog_store = catalog_store
        self._repair_store = repair_store

    async def _get_catalog_store(self) -> ICatalogStore:
        if self._catalog_store is None:
            from gearbook.infrastructure.storage.sqlite import get_catalog_store

            self._catalog_store = await get_catalog_store()
        return self._catalog_store

    async def _get_repair_store(self) -> IRepairStore:
        if self._repair_store is None:
            from gearbook.infrastructure.storage.sqlite import get_repair_store

            self._repair_store = await get_repair_store()
        return self._repair_store

    def to_response(self, repair: RepairLog) -> RepairLogResponse:
        """Convert result to API response."""
        return repair_response(repair)


class ReportRepairUseCase(_RepairUseCase):
    """Record defective units; open repairs reduce usable capacity."""

    async def execute(self, item_id: int, request: CreateRepairRequest) -> RepairLog:
        catalog_store = await self._get_catalog_store()
        item = await catalog_store.get_item(item_id)
        if item is None:
            raise InventoryItemNotFoundError(item_id)

        description = require_text("issue_description", request.issue_description)
        status = parse_enum(RepairStatus, "status", request.status)
        require_min("quantity_affected", request.quantity_affected)
        if request.quantity_affected > item.quantity:
            raise CapacityExceededError(item_id, request.quantity_affected, item.quantity)

        repair = RepairLog(
            inventory_item_id=item_id,
            quantity_affected=request.quantity_affected,
            issue_description=description,
            status=status,
            repair_cost=request.repair_cost,
            notes=request.notes,
        )
        repair_store = await self._get_repair_store()
        return await repair_store.create_repair(repair)


class UpdateRepairUseCase(_RepairUseCase):
    """
    Edit a repair log.

    Moving into a resolved status stamps ``resolved_at`` with the current
    time unless the caller supplies one or it is already set. Quantity is
    not re-validated against other open repairs.
    """

    async def execute(
        self, item_id: int, repair_id: int, request: UpdateRepairRequest
    ) -> RepairLog:
        repair_store = await self._get_repair_store()
        repair = await repair_store.get_repair(item_id, repair_id)
        if repair is None:
            raise RepairLogNotFoundError(repair_id)

        changes = request.model_dump(exclude_unset=True)

        if changes.get("status") is not None:
            repair.status = parse_enum(RepairStatus, "status", changes["status"])
        if changes.get("issue_description") is not None:
            repair.issue_description = require_text(
                "issue_description", changes["issue_description"]
            )
        if changes.get("quantity_affected") is not None:
            repair.quantity_affected = int(
                require_min("quantity_affected", changes["quantity_affected"])
            )
        if "repair_cost" in changes:
            repair.repair_cost = changes["repair_cost"]
        if "notes" in changes:
            repair.notes = changes["notes"]

        if "resolved_at" in changes:
            repair.resolved_at = changes["resolved_at"]
        elif repair.status.is_resolved and repair.resolved_at is None:
            repair.resolved_at = datetime.utcnow()

        repair = await repair_store.update_repair(repair)
        logger.info(
            "repair_status_changed",
            repair_id=repair_id,
            status=repair.status.value,
            open=repair.is_open,
        )
        return repair
