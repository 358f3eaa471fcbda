"""SQLite implementation of equipment set storage."""

from datetime import datetime

import aiosqlite

from gearbook.config import get_logger
from gearbook.core.entities.equipment_set import EquipmentSet, EquipmentSetItem
from gearbook.core.interfaces.set_store import ISetStore
from gearbook.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gearbook.infrastructure.storage.sqlite.rows import parse_datetime

logger = get_logger(__name__)

_ITEM_SELECT = """
    SELECT esi.*, ii.name AS item_name, ii.category AS category,
           ii.rental_rate AS rental_rate, ii.quantity AS stock_quantity
    FROM equipment_set_items esi
    JOIN inventory_items ii ON ii.id = esi.inventory_item_id
"""


class SQLiteSetStore(ISetStore):
    """SQLite implementation of equipment set and set item storage."""

    async def create_set(self, equipment_set: EquipmentSet) -> EquipmentSet:
        """Create a set header."""
        now = datetime.utcnow()
        equipment_set.created_at = now
        equipment_set.updated_at = now
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO equipment_sets (name, description, notes, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    equipment_set.name,
                    equipment_set.description,
                    equipment_set.notes,
                    equipment_set.created_at.isoformat(),
                    equipment_set.updated_at.isoformat(),
                ),
            )
            equipment_set.id = cursor.lastrowid
            equipment_set.item_count = 0
            logger.info("equipment_set_created", set_id=equipment_set.id, name=equipment_set.name)
            return equipment_set

    async def get_set(self, set_id: int) -> EquipmentSet | None:
        """Get a set with its items joined to the catalog."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM equipment_sets WHERE id = ?", (set_id,))
            row = await cursor.fetchone()
            if row is None:
                return None

            cursor = await conn.execute(
                _ITEM_SELECT + " WHERE esi.set_id = ? ORDER BY ii.category, ii.name",
                (set_id,),
            )
            items = [self._row_to_set_item(r) for r in await cursor.fetchall()]

            equipment_set = self._row_to_set(row)
            equipment_set.items = items
            equipment_set.item_count = len(items)
            return equipment_set

    async def list_sets(self) -> list[EquipmentSet]:
        """List sets by name with item counts."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT es.*,
                       (SELECT COUNT(*) FROM equipment_set_items esi WHERE esi.set_id = es.id)
                           AS item_count
                FROM equipment_sets es
                ORDER BY es.name
                """
            )
            rows = await cursor.fetchall()
            sets = []
            for row in rows:
                equipment_set = self._row_to_set(row)
                equipment_set.item_count = int(row["item_count"])
                sets.append(equipment_set)
            return sets

    async def update_set(self, equipment_set: EquipmentSet) -> EquipmentSet:
        """Update set header fields."""
        equipment_set.updated_at = datetime.utcnow()
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE equipment_sets SET
                    name = ?,
                    description = ?,
                    notes = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    equipment_set.name,
                    equipment_set.description,
                    equipment_set.notes,
                    equipment_set.updated_at.isoformat(),
                    equipment_set.id,
                ),
            )
            logger.info("equipment_set_updated", set_id=equipment_set.id)
            return equipment_set

    async def delete_set(self, set_id: int) -> bool:
        """Delete a set; its items cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM equipment_sets WHERE id = ?", (set_id,))
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("equipment_set_deleted", set_id=set_id)
            return deleted

    async def add_set_item(self, set_item: EquipmentSetItem) -> EquipmentSetItem:
        """Add an item to a set, summing quantities if it is already present."""
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO equipment_set_items (set_id, inventory_item_id, quantity)
                VALUES (?, ?, ?)
                ON CONFLICT (set_id, inventory_item_id)
                DO UPDATE SET quantity = quantity + excluded.quantity
                """,
                (set_item.set_id, set_item.inventory_item_id, set_item.quantity),
            )
            await conn.execute(
                "UPDATE equipment_sets SET updated_at = ? WHERE id = ?",
                (datetime.utcnow().isoformat(), set_item.set_id),
            )
            cursor = await conn.execute(
                _ITEM_SELECT + " WHERE esi.set_id = ? AND esi.inventory_item_id = ?",
                (set_item.set_id, set_item.inventory_item_id),
            )
            row = await cursor.fetchone()
            stored = self._row_to_set_item(row)
            logger.info(
                "set_item_added",
                set_id=stored.set_id,
                item_id=stored.inventory_item_id,
                quantity=stored.quantity,
            )
            return stored

    async def get_set_item(self, set_id: int, set_item_id: int) -> EquipmentSetItem | None:
        """Get a set item that belongs to the given set."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                _ITEM_SELECT + " WHERE esi.id = ? AND esi.set_id = ?",
                (set_item_id, set_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_set_item(row)

    async def update_set_item(self, set_item: EquipmentSetItem) -> EquipmentSetItem:
        """Update the template quantity of a set item."""
        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE equipment_set_items SET quantity = ? WHERE id = ?",
                (set_item.quantity, set_item.id),
            )
            logger.info("set_item_updated", set_item_id=set_item.id, quantity=set_item.quantity)
            return set_item

    async def delete_set_item(self, set_item_id: int) -> bool:
        """Remove an item from a set."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM equipment_set_items WHERE id = ?", (set_item_id,)
            )
            return cursor.rowcount > 0

    @staticmethod
    def _row_to_set(row: aiosqlite.Row) -> EquipmentSet:
        """Convert a database row to an EquipmentSet header."""
        now = datetime.utcnow()
        return EquipmentSet(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            notes=row["notes"],
            created_at=parse_datetime(row["created_at"], now),
            updated_at=parse_datetime(row["updated_at"], now),
        )

    @staticmethod
    def _row_to_set_item(row: aiosqlite.Row) -> EquipmentSetItem:
        """Convert a joined database row to an EquipmentSetItem."""
        return EquipmentSetItem(
            id=row["id"],
            set_id=row["set_id"],
            inventory_item_id=row["inventory_item_id"],
            quantity=int(row["quantity"]),
            item_name=row["item_name"],
            category=row["category"],
            rental_rate=float(row["rental_rate"] or 0),
            stock_quantity=int(row["stock_quantity"]),
        )
