"""
SQLite implementation of the booking ledger.

Writes that must respect capacity take the database write lock first
(``BEGIN IMMEDIATE``) and re-read stock, open repairs and overlapping
bookings on that same connection before inserting. Two concurrent
requests for the last units therefore serialise: the second one sees
the first one's line and is rejected.
"""

import aiosqlite

from gearbook.config import get_logger
from gearbook.core.entities.booking import EventInventoryLine
from gearbook.core.entities.equipment_set import EquipmentSetItem, SetApplyConflict
from gearbook.core.entities.event import EventStatus, OccupancyWindow
from gearbook.core.entities.inventory import InventoryItem
from gearbook.core.exceptions import InventoryItemNotFoundError, OverbookingConflictError
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.services.availability import calculate_availability
from gearbook.infrastructure.storage.sqlite.capacity import fetch_booked, fetch_in_repair
from gearbook.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gearbook.infrastructure.storage.sqlite.event_store import insert_history

logger = get_logger(__name__)

_LINE_SELECT = """
    SELECT eii.*, ii.name AS item_name, ii.category AS category, ii.rental_rate AS rental_rate
    FROM event_inventory_items eii
    JOIN inventory_items ii ON ii.id = eii.inventory_item_id
"""


class SQLiteBookingStore(IBookingStore):
    """SQLite implementation of event inventory line storage."""

    def __init__(self, closed_status: str = EventStatus.CLOSED.value):
        self.closed_status = closed_status

    async def sum_booked(
        self,
        item_id: int,
        window: OccupancyWindow | None = None,
        exclude_event_id: int | None = None,
    ) -> int:
        """Units of the item booked by open events."""
        async with get_connection() as conn:
            return await fetch_booked(
                conn,
                item_id,
                self.closed_status,
                window=window,
                exclude_event_id=exclude_event_id,
            )

    async def create_line(
        self,
        line: EventInventoryLine,
        window: OccupancyWindow | None,
        history_detail: str,
    ) -> EventInventoryLine:
        """Insert a booking line after re-validating capacity under the write lock."""
        async with get_transaction(immediate=True) as conn:
            item = await self._load_item(conn, line.inventory_item_id)
            if item is None:
                raise InventoryItemNotFoundError(line.inventory_item_id)

            if window is not None:
                availability = calculate_availability(
                    item,
                    in_repair=await fetch_in_repair(conn, item.id),  # type: ignore[arg-type]
                    booked=await fetch_booked(conn, item.id, self.closed_status, window=window),  # type: ignore[arg-type]
                )
                if not availability.can_fit(line.quantity):
                    logger.warning(
                        "overbooking_rejected",
                        event_id=line.event_id,
                        item_id=item.id,
                        needed=line.quantity,
                        available=availability.available,
                    )
                    raise OverbookingConflictError(
                        item_id=item.id,  # type: ignore[arg-type]
                        item_name=item.name,
                        needed=line.quantity,
                        available=availability.available,
                    )

            cursor = await conn.execute(
                """
                INSERT INTO event_inventory_items (
                    event_id, inventory_item_id, quantity, rental_days,
                    unit_price, notes, packed
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    line.event_id,
                    line.inventory_item_id,
                    line.quantity,
                    line.rental_days,
                    line.unit_price,
                    line.notes,
                    int(line.packed),
                ),
            )
            line.id = cursor.lastrowid
            line.item_name = item.name
            line.category = item.category
            line.rental_rate = item.rental_rate

            await insert_history(conn, line.event_id, "inventory_added", history_detail)

            logger.info(
                "booking_created",
                line_id=line.id,
                event_id=line.event_id,
                item_id=line.inventory_item_id,
                quantity=line.quantity,
                checked=window is not None,
            )
            return line

    async def get_line(self, event_id: int, line_id: int) -> EventInventoryLine | None:
        """Get a booking line that belongs to the given event."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                _LINE_SELECT + " WHERE eii.id = ? AND eii.event_id = ?",
                (line_id, event_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_line(row)

    async def list_lines(self, event_id: int) -> list[EventInventoryLine]:
        """Booking lines of an event ordered by category and item name."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                _LINE_SELECT + " WHERE eii.event_id = ? ORDER BY ii.category, ii.name, eii.id",
                (event_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_line(row) for row in rows]

    async def update_line(self, line: EventInventoryLine) -> EventInventoryLine:
        """Update a booking line in place. Capacity is not re-checked."""
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE event_inventory_items SET
                    quantity = ?,
                    rental_days = ?,
                    unit_price = ?,
                    notes = ?,
                    packed = ?
                WHERE id = ? AND event_id = ?
                """,
                (
                    line.quantity,
                    line.rental_days,
                    line.unit_price,
                    line.notes,
                    int(line.packed),
                    line.id,
                    line.event_id,
                ),
            )
            logger.info(
                "booking_updated",
                line_id=line.id,
                event_id=line.event_id,
                quantity=line.quantity,
            )
            return line

    async def delete_line(
        self, event_id: int, line_id: int, history_detail: str
    ) -> bool:
        """Delete a booking line and append a history entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM event_inventory_items WHERE id = ? AND event_id = ?",
                (line_id, event_id),
            )
            deleted = cursor.rowcount > 0
            if deleted:
                await insert_history(conn, event_id, "inventory_removed", history_detail)
                logger.info("booking_deleted", line_id=line_id, event_id=event_id)
            return deleted

    async def apply_set_lines(
        self,
        event_id: int,
        candidates: list[EquipmentSetItem],
        rental_days: int,
        window: OccupancyWindow | None,
        set_name: str,
    ) -> tuple[list[EventInventoryLine], list[SetApplyConflict]]:
        """Book set items onto an event in one transaction."""
        written: list[EventInventoryLine] = []
        late_conflicts: list[SetApplyConflict] = []

        async with get_transaction(immediate=True) as conn:
            for candidate in candidates:
                item = await self._load_item(conn, candidate.inventory_item_id)
                if item is None:
                    # Removed from the catalog since the set was read
                    logger.warning(
                        "set_item_vanished",
                        event_id=event_id,
                        item_id=candidate.inventory_item_id,
                        needed=candidate.quantity,
                    )
                    late_conflicts.append(
                        SetApplyConflict(
                            inventory_item_id=candidate.inventory_item_id,
                            item_name=candidate.item_name or f"#{candidate.inventory_item_id}",
                            needed=candidate.quantity,
                            available=0,
                        )
                    )
                    continue

                if window is not None:
                    availability = calculate_availability(
                        item,
                        in_repair=await fetch_in_repair(conn, item.id),  # type: ignore[arg-type]
                        booked=await fetch_booked(
                            conn,
                            item.id,  # type: ignore[arg-type]
                            self.closed_status,
                            window=window,
                            exclude_event_id=event_id,
                        ),
                    )
                    if candidate.quantity > availability.available:
                        late_conflicts.append(
                            SetApplyConflict(
                                inventory_item_id=item.id,  # type: ignore[arg-type]
                                item_name=item.name,
                                needed=candidate.quantity,
                                available=availability.available,
                            )
                        )
                        continue

                written.append(
                    await self._merge_line(conn, event_id, item, candidate.quantity, rental_days)
                )

            await insert_history(
                conn,
                event_id,
                "set_applied",
                f'Set "{set_name}" hinzugefügt ({len(written)} Artikel)',
            )

        logger.info(
            "set_lines_written",
            event_id=event_id,
            written=len(written),
            late_conflicts=len(late_conflicts),
        )
        return written, late_conflicts

    async def _merge_line(
        self,
        conn: aiosqlite.Connection,
        event_id: int,
        item: InventoryItem,
        quantity: int,
        rental_days: int,
    ) -> EventInventoryLine:
        """Add to the event's existing line for the item, or insert a new one."""
        cursor = await conn.execute(
            """
            SELECT * FROM event_inventory_items
            WHERE event_id = ? AND inventory_item_id = ?
            ORDER BY id LIMIT 1
            """,
            (event_id, item.id),
        )
        existing = await cursor.fetchone()

        if existing is not None:
            new_quantity = int(existing["quantity"]) + quantity
            await conn.execute(
                """
                UPDATE event_inventory_items
                SET quantity = ?, rental_days = ?
                WHERE id = ?
                """,
                (new_quantity, rental_days, existing["id"]),
            )
            return EventInventoryLine(
                id=existing["id"],
                event_id=event_id,
                inventory_item_id=item.id,  # type: ignore[arg-type]
                quantity=new_quantity,
                rental_days=rental_days,
                unit_price=float(existing["unit_price"] or 0),
                notes=existing["notes"],
                packed=bool(existing["packed"]),
                item_name=item.name,
                category=item.category,
                rental_rate=item.rental_rate,
            )

        line = EventInventoryLine(
            event_id=event_id,
            inventory_item_id=item.id,  # type: ignore[arg-type]
            quantity=quantity,
            rental_days=rental_days,
            unit_price=item.rental_rate,
            item_name=item.name,
            category=item.category,
            rental_rate=item.rental_rate,
        )
        cursor = await conn.execute(
            """
            INSERT INTO event_inventory_items (
                event_id, inventory_item_id, quantity, rental_days, unit_price
            ) VALUES (?, ?, ?, ?, ?)
            """,
            (event_id, item.id, quantity, rental_days, line.unit_price),
        )
        line.id = cursor.lastrowid
        return line

    @staticmethod
    async def _load_item(conn: aiosqlite.Connection, item_id: int) -> InventoryItem | None:
        cursor = await conn.execute(
            "SELECT id, name, category, quantity, rental_rate FROM inventory_items WHERE id = ?",
            (item_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return InventoryItem(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            quantity=int(row["quantity"]),
            rental_rate=float(row["rental_rate"] or 0),
        )

    @staticmethod
    def _row_to_line(row: aiosqlite.Row) -> EventInventoryLine:
        """Convert a joined database row to an EventInventoryLine entity."""
        return EventInventoryLine(
            id=row["id"],
            event_id=row["event_id"],
            inventory_item_id=row["inventory_item_id"],
            quantity=int(row["quantity"]),
            rental_days=int(row["rental_days"]),
            unit_price=float(row["unit_price"] or 0),
            notes=row["notes"],
            packed=bool(row["packed"]),
            item_name=row["item_name"],
            category=row["category"],
            rental_rate=float(row["rental_rate"] or 0),
        )
