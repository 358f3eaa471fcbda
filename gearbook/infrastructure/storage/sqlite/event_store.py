"""SQLite implementation of the event data used by the booking engine."""

from datetime import datetime

import aiosqlite

from gearbook.config import get_logger
from gearbook.core.entities.event import (
    CrewMember,
    EquipmentEntry,
    Event,
    EventHistoryEntry,
    EventStatus,
)
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gearbook.infrastructure.storage.sqlite.rows import parse_date, parse_datetime, to_iso

logger = get_logger(__name__)


async def insert_history(
    conn: aiosqlite.Connection,
    event_id: int,
    action: str,
    detail: str | None,
) -> EventHistoryEntry:
    """Append a history row on an open connection, inside the caller's transaction."""
    entry = EventHistoryEntry(event_id=event_id, action=action, detail=detail)
    cursor = await conn.execute(
        """
        INSERT INTO event_history (event_id, action, detail, changed_at)
        VALUES (?, ?, ?, ?)
        """,
        (event_id, action, detail, entry.changed_at.isoformat()),
    )
    entry.id = cursor.lastrowid
    return entry


class SQLiteEventStore(IEventStore):
    """SQLite implementation of event, history, crew and equipment storage."""

    async def create_event(self, event: Event) -> Event:
        """Create an event record."""
        now = datetime.utcnow()
        event.created_at = now
        event.updated_at = now
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO events (
                    title, status, client_name, event_date, setup_date,
                    teardown_date, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    event.title,
                    event.status.value,
                    event.client_name,
                    to_iso(event.event_date),
                    to_iso(event.setup_date),
                    to_iso(event.teardown_date),
                    event.created_at.isoformat(),
                    event.updated_at.isoformat(),
                ),
            )
            event.id = cursor.lastrowid
            await insert_history(conn, event.id, "created", f'Event "{event.title}" erstellt')
            logger.info("event_created", event_id=event.id, status=event.status.value)
            return event

    async def get_event(self, event_id: int) -> Event | None:
        """Get event by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM events WHERE id = ?", (event_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_event(row)

    async def update_event(self, event: Event) -> Event:
        """Update status, dates, title and client of an event."""
        event.updated_at = datetime.utcnow()
        async with get_transaction() as conn:
            cursor = await conn.execute("SELECT status FROM events WHERE id = ?", (event.id,))
            row = await cursor.fetchone()
            previous_status = row["status"] if row else None

            await conn.execute(
                """
                UPDATE events SET
                    title = ?,
                    status = ?,
                    client_name = ?,
                    event_date = ?,
                    setup_date = ?,
                    teardown_date = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    event.title,
                    event.status.value,
                    event.client_name,
                    to_iso(event.event_date),
                    to_iso(event.setup_date),
                    to_iso(event.teardown_date),
                    event.updated_at.isoformat(),
                    event.id,
                ),
            )
            if previous_status is not None and previous_status != event.status.value:
                await insert_history(
                    conn,
                    event.id,  # type: ignore[arg-type]
                    "status_changed",
                    f"Status: {previous_status} → {event.status.value}",
                )
            logger.info("event_updated", event_id=event.id, status=event.status.value)
            return event

    async def add_history(
        self, event_id: int, action: str, detail: str | None = None
    ) -> EventHistoryEntry:
        """Append an entry to the event history."""
        async with get_transaction() as conn:
            return await insert_history(conn, event_id, action, detail)

    async def list_history(self, event_id: int) -> list[EventHistoryEntry]:
        """History entries of an event, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM event_history
                WHERE event_id = ?
                ORDER BY changed_at DESC, id DESC
                """,
                (event_id,),
            )
            rows = await cursor.fetchall()
            return [
                EventHistoryEntry(
                    id=row["id"],
                    event_id=row["event_id"],
                    action=row["action"],
                    detail=row["detail"],
                    changed_at=parse_datetime(row["changed_at"], datetime.utcnow()),
                )
                for row in rows
            ]

    async def add_crew_member(self, member: CrewMember) -> CrewMember:
        """Assign a crew member to an event."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "INSERT INTO event_crew (event_id, name, role) VALUES (?, ?, ?)",
                (member.event_id, member.name, member.role),
            )
            member.id = cursor.lastrowid
            logger.info("crew_member_added", event_id=member.event_id, crew_id=member.id)
            return member

    async def list_crew(self, event_id: int) -> list[CrewMember]:
        """Crew members of an event."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM event_crew WHERE event_id = ? ORDER BY id", (event_id,)
            )
            rows = await cursor.fetchall()
            return [
                CrewMember(
                    id=row["id"],
                    event_id=row["event_id"],
                    name=row["name"],
                    role=row["role"],
                )
                for row in rows
            ]

    async def add_equipment_entry(self, entry: EquipmentEntry) -> EquipmentEntry:
        """Add a legacy free-text equipment entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO event_equipment (event_id, asset_name, booking_line_id)
                VALUES (?, ?, ?)
                """,
                (entry.event_id, entry.asset_name, entry.booking_line_id),
            )
            entry.id = cursor.lastrowid
            logger.info(
                "equipment_entry_added",
                event_id=entry.event_id,
                entry_id=entry.id,
                linked=entry.booking_line_id is not None,
            )
            return entry

    async def list_equipment_entries(self, event_id: int) -> list[EquipmentEntry]:
        """Legacy free-text equipment entries of an event."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM event_equipment WHERE event_id = ? ORDER BY id", (event_id,)
            )
            rows = await cursor.fetchall()
            return [
                EquipmentEntry(
                    id=row["id"],
                    event_id=row["event_id"],
                    asset_name=row["asset_name"],
                    booking_line_id=row["booking_line_id"],
                )
                for row in rows
            ]

    @staticmethod
    def _row_to_event(row: aiosqlite.Row) -> Event:
        """Convert a database row to an Event entity."""
        now = datetime.utcnow()
        return Event(
            id=row["id"],
            title=row["title"],
            status=EventStatus(row["status"]),
            client_name=row["client_name"],
            event_date=parse_date(row["event_date"]),
            setup_date=parse_date(row["setup_date"]),
            teardown_date=parse_date(row["teardown_date"]),
            created_at=parse_datetime(row["created_at"], now),
            updated_at=parse_datetime(row["updated_at"], now),
        )
