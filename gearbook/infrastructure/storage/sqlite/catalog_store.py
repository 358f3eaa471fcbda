"""SQLite implementation of the equipment catalog."""

from datetime import datetime

import aiosqlite

from gearbook.config import get_logger
from gearbook.core.entities.inventory import InventoryItem
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gearbook.infrastructure.storage.sqlite.rows import parse_datetime

logger = get_logger(__name__)


class SQLiteCatalogStore(ICatalogStore):
    """SQLite implementation of inventory item storage."""

    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new catalog item."""
        now = datetime.utcnow()
        item.created_at = now
        item.updated_at = now
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO inventory_items (
                    name, category, description, quantity, purchase_price,
                    rental_rate, barcode, notes, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.name,
                    item.category,
                    item.description,
                    item.quantity,
                    item.purchase_price,
                    item.rental_rate,
                    item.barcode,
                    item.notes,
                    item.created_at.isoformat(),
                    item.updated_at.isoformat(),
                ),
            )
            item.id = cursor.lastrowid
            logger.info(
                "inventory_item_created",
                item_id=item.id,
                name=item.name,
                quantity=item.quantity,
            )
            return item

    async def get_item(self, item_id: int) -> InventoryItem | None:
        """Get catalog item by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_item(row)

    async def list_items(
        self,
        category: str | None = None,
        search: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[InventoryItem]:
        """List items ordered by category and name."""
        sql = "SELECT * FROM inventory_items WHERE 1=1"
        params: list = []

        if category:
            sql += " AND category = ?"
            params.append(category)
        if search:
            pattern = f"%{search}%"
            sql += " AND (name LIKE ? OR description LIKE ? OR barcode LIKE ?)"
            params.extend([pattern, pattern, pattern])

        sql += " ORDER BY category, name LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        async with get_connection() as conn:
            cursor = await conn.execute(sql, params)
            rows = await cursor.fetchall()
            return [self._row_to_item(row) for row in rows]

    async def list_categories(self) -> list[str]:
        """Distinct category values, sorted."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT DISTINCT category FROM inventory_items ORDER BY category"
            )
            rows = await cursor.fetchall()
            return [row[0] for row in rows]

    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update catalog item."""
        item.updated_at = datetime.utcnow()
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE inventory_items SET
                    name = ?,
                    category = ?,
                    description = ?,
                    quantity = ?,
                    purchase_price = ?,
                    rental_rate = ?,
                    barcode = ?,
                    notes = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    item.name,
                    item.category,
                    item.description,
                    item.quantity,
                    item.purchase_price,
                    item.rental_rate,
                    item.barcode,
                    item.notes,
                    item.updated_at.isoformat(),
                    item.id,
                ),
            )
            logger.info("inventory_item_updated", item_id=item.id)
            return item

    async def delete_item(self, item_id: int) -> bool:
        """Delete an item; bookings, repairs and set entries cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM inventory_items WHERE id = ?", (item_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("inventory_item_deleted", item_id=item_id)
            return deleted

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> InventoryItem:
        """Convert a database row to an InventoryItem entity."""
        now = datetime.utcnow()
        return InventoryItem(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            description=row["description"],
            quantity=int(row["quantity"]),
            rental_rate=float(row["rental_rate"] or 0),
            purchase_price=row["purchase_price"],
            barcode=row["barcode"],
            notes=row["notes"],
            created_at=parse_datetime(row["created_at"], now),
            updated_at=parse_datetime(row["updated_at"], now),
        )
