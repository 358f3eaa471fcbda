"""SQLite implementation of the repair ledger."""

from datetime import datetime

import aiosqlite

from gearbook.config import get_logger
from gearbook.core.entities.inventory import RepairLog, RepairStatus
from gearbook.core.interfaces.repair_store import IRepairStore
from gearbook.infrastructure.storage.sqlite.capacity import fetch_in_repair
from gearbook.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gearbook.infrastructure.storage.sqlite.rows import parse_datetime, to_iso

logger = get_logger(__name__)


class SQLiteRepairStore(IRepairStore):
    """SQLite implementation of repair log storage."""

    async def create_repair(self, repair: RepairLog) -> RepairLog:
        """Record a new defect report."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO repair_logs (
                    inventory_item_id, quantity_affected, issue_description,
                    status, repair_cost, notes, reported_at, resolved_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    repair.inventory_item_id,
                    repair.quantity_affected,
                    repair.issue_description,
                    repair.status.value,
                    repair.repair_cost,
                    repair.notes,
                    repair.reported_at.isoformat(),
                    to_iso(repair.resolved_at),
                ),
            )
            repair.id = cursor.lastrowid
            logger.info(
                "repair_reported",
                repair_id=repair.id,
                item_id=repair.inventory_item_id,
                quantity_affected=repair.quantity_affected,
                status=repair.status.value,
            )
            return repair

    async def get_repair(self, item_id: int, repair_id: int) -> RepairLog | None:
        """Get a repair log that belongs to the given item."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM repair_logs WHERE id = ? AND inventory_item_id = ?",
                (repair_id, item_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_repair(row)

    async def list_repairs(self, item_id: int) -> list[RepairLog]:
        """Repair logs of an item, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM repair_logs
                WHERE inventory_item_id = ?
                ORDER BY reported_at DESC, id DESC
                """,
                (item_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_repair(row) for row in rows]

    async def update_repair(self, repair: RepairLog) -> RepairLog:
        """Persist the mutable fields of a repair log."""
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE repair_logs SET
                    quantity_affected = ?,
                    issue_description = ?,
                    status = ?,
                    repair_cost = ?,
                    notes = ?,
                    resolved_at = ?
                WHERE id = ?
                """,
                (
                    repair.quantity_affected,
                    repair.issue_description,
                    repair.status.value,
                    repair.repair_cost,
                    repair.notes,
                    to_iso(repair.resolved_at),
                    repair.id,
                ),
            )
            logger.info("repair_updated", repair_id=repair.id, status=repair.status.value)
            return repair

    async def delete_repair(self, repair_id: int) -> bool:
        """Delete a repair log."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM repair_logs WHERE id = ?", (repair_id,))
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("repair_deleted", repair_id=repair_id)
            return deleted

    async def sum_in_repair(self, item_id: int) -> int:
        """Units of the item held by open repairs."""
        async with get_connection() as conn:
            return await fetch_in_repair(conn, item_id)

    @staticmethod
    def _row_to_repair(row: aiosqlite.Row) -> RepairLog:
        """Convert a database row to a RepairLog entity."""
        return RepairLog(
            id=row["id"],
            inventory_item_id=row["inventory_item_id"],
            quantity_affected=int(row["quantity_affected"]),
            issue_description=row["issue_description"],
            status=RepairStatus(row["status"]),
            repair_cost=row["repair_cost"],
            notes=row["notes"],
            reported_at=parse_datetime(row["reported_at"], datetime.utcnow()),
            resolved_at=parse_datetime(row["resolved_at"]),
        )
