"""
Capacity queries shared by the availability reads and the booking writes.

The booking store calls these on the connection that holds the write lock,
so the numbers it checks against are the numbers it commits against.
"""

import aiosqlite

from gearbook.core.entities.event import OccupancyWindow
from gearbook.core.entities.inventory import OPEN_REPAIR_STATUSES

_OPEN_STATUSES = sorted(status.value for status in OPEN_REPAIR_STATUSES)


async def fetch_in_repair(conn: aiosqlite.Connection, item_id: int) -> int:
    """Units of an item held by open repairs."""
    placeholders = ", ".join("?" for _ in _OPEN_STATUSES)
    cursor = await conn.execute(
        f"""
        SELECT COALESCE(SUM(quantity_affected), 0)
        FROM repair_logs
        WHERE inventory_item_id = ? AND status IN ({placeholders})
        """,
        (item_id, *_OPEN_STATUSES),
    )
    row = await cursor.fetchone()
    return int(row[0])


async def fetch_booked(
    conn: aiosqlite.Connection,
    item_id: int,
    closed_status: str,
    window: OccupancyWindow | None = None,
    exclude_event_id: int | None = None,
) -> int:
    """
    Units of an item booked by events that are not closed.

    With a window only events whose occupancy window overlaps it
    (inclusive bounds) count. Events without any dates never overlap.
    """
    sql = """
        SELECT COALESCE(SUM(eii.quantity), 0)
        FROM event_inventory_items eii
        JOIN events e ON e.id = eii.event_id
        WHERE eii.inventory_item_id = ? AND e.status != ?
    """
    params: list = [item_id, closed_status]

    if window is not None:
        sql += """
            AND COALESCE(e.teardown_date, e.event_date) >= ?
            AND COALESCE(e.setup_date, e.event_date) <= ?
        """
        params.extend([window.start.isoformat(), window.end.isoformat()])

    if exclude_event_id is not None:
        sql += " AND eii.event_id != ?"
        params.append(exclude_event_id)

    cursor = await conn.execute(sql, params)
    row = await cursor.fetchone()
    return int(row[0])
