"""SQLite implementation of quote storage."""

from datetime import date, datetime

import aiosqlite

from gearbook.config import get_logger
from gearbook.core.entities.quote import Quote, QuoteItem, QuoteStatus, QuoteType
from gearbook.core.interfaces.quote_store import IQuoteStore
from gearbook.core.services.pricing import compute_totals, format_quote_number
from gearbook.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gearbook.infrastructure.storage.sqlite.rows import parse_date, parse_datetime, to_iso

logger = get_logger(__name__)


class SQLiteQuoteStore(IQuoteStore):
    """SQLite implementation of quote and quote item storage."""

    async def create_quote(self, quote: Quote) -> Quote:
        """Allocate the next quote number and insert the quote with its items."""
        now = datetime.utcnow()
        quote.created_at = now
        quote.updated_at = now

        async with get_transaction(immediate=True) as conn:
            quote.quote_number = await self._next_quote_number(
                conn, quote.quote_type, quote.issue_date.year
            )
            cursor = await conn.execute(
                """
                INSERT INTO quotes (
                    event_id, quote_number, quote_type, status, client_name,
                    client_address, issue_date, valid_until, tax_rate, notes,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    quote.event_id,
                    quote.quote_number,
                    quote.quote_type.value,
                    quote.status.value,
                    quote.client_name,
                    quote.client_address,
                    quote.issue_date.isoformat(),
                    to_iso(quote.valid_until),
                    quote.tax_rate,
                    quote.notes,
                    quote.created_at.isoformat(),
                    quote.updated_at.isoformat(),
                ),
            )
            quote.id = cursor.lastrowid

            for index, item in enumerate(quote.items, start=1):
                item.quote_id = quote.id
                if item.position is None:
                    item.position = index
                await self._insert_item(conn, item)

            await self._recalculate(conn, quote.id)  # type: ignore[arg-type]
            stored = await self._load_quote(conn, quote.id)  # type: ignore[arg-type]

        logger.info(
            "quote_created",
            quote_id=stored.id,
            quote_number=stored.quote_number,
            items=stored.item_count,
            total=stored.total,
        )
        return stored

    async def get_quote(self, quote_id: int) -> Quote | None:
        """Get quote by ID with items ordered by position."""
        async with get_connection() as conn:
            return await self._load_quote(conn, quote_id)

    async def list_quotes(
        self,
        event_id: int | None = None,
        status: str | None = None,
        quote_type: str | None = None,
    ) -> list[Quote]:
        """List quote headers newest first."""
        sql = "SELECT * FROM quotes WHERE 1=1"
        params: list = []

        if event_id is not None:
            sql += " AND event_id = ?"
            params.append(event_id)
        if status:
            sql += " AND status = ?"
            params.append(status)
        if quote_type:
            sql += " AND quote_type = ?"
            params.append(quote_type)

        sql += " ORDER BY created_at DESC, id DESC"

        async with get_connection() as conn:
            cursor = await conn.execute(sql, params)
            rows = await cursor.fetchall()
            return [self._row_to_quote(row) for row in rows]

    async def update_quote(self, quote: Quote, recalculate: bool = False) -> Quote:
        """Update header fields, optionally recomputing totals."""
        quote.updated_at = datetime.utcnow()
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE quotes SET
                    event_id = ?,
                    quote_type = ?,
                    status = ?,
                    client_name = ?,
                    client_address = ?,
                    issue_date = ?,
                    valid_until = ?,
                    tax_rate = ?,
                    notes = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    quote.event_id,
                    quote.quote_type.value,
                    quote.status.value,
                    quote.client_name,
                    quote.client_address,
                    quote.issue_date.isoformat(),
                    to_iso(quote.valid_until),
                    quote.tax_rate,
                    quote.notes,
                    quote.updated_at.isoformat(),
                    quote.id,
                ),
            )
            if recalculate:
                await self._recalculate(conn, quote.id)  # type: ignore[arg-type]
            stored = await self._load_quote(conn, quote.id)  # type: ignore[arg-type]

        logger.info("quote_updated", quote_id=quote.id, recalculated=recalculate)
        return stored

    async def delete_quote(self, quote_id: int) -> bool:
        """Delete a quote; items cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM quotes WHERE id = ?", (quote_id,))
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("quote_deleted", quote_id=quote_id)
            return deleted

    async def add_item(self, item: QuoteItem) -> QuoteItem:
        """Append a line item and recompute the quote totals."""
        async with get_transaction() as conn:
            if item.position is None:
                cursor = await conn.execute(
                    "SELECT COALESCE(MAX(position), 0) FROM quote_items WHERE quote_id = ?",
                    (item.quote_id,),
                )
                row = await cursor.fetchone()
                item.position = int(row[0]) + 1
            await self._insert_item(conn, item)
            await self._recalculate(conn, item.quote_id)  # type: ignore[arg-type]
            logger.info("quote_item_added", quote_id=item.quote_id, item_id=item.id)
            return item

    async def get_item(self, quote_id: int, item_id: int) -> QuoteItem | None:
        """Get a line item that belongs to the given quote."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM quote_items WHERE id = ? AND quote_id = ?",
                (item_id, quote_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_item(row)

    async def update_item(self, item: QuoteItem) -> QuoteItem:
        """Update a line item and recompute the quote totals."""
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE quote_items SET
                    position = ?,
                    description = ?,
                    quantity = ?,
                    unit = ?,
                    unit_price = ?,
                    total = ?
                WHERE id = ? AND quote_id = ?
                """,
                (
                    item.position,
                    item.description,
                    item.quantity,
                    item.unit,
                    item.unit_price,
                    item.total,
                    item.id,
                    item.quote_id,
                ),
            )
            await self._recalculate(conn, item.quote_id)  # type: ignore[arg-type]
            logger.info("quote_item_updated", quote_id=item.quote_id, item_id=item.id)
            return item

    async def delete_item(self, quote_id: int, item_id: int) -> bool:
        """Delete a line item and recompute the quote totals."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM quote_items WHERE id = ? AND quote_id = ?",
                (item_id, quote_id),
            )
            deleted = cursor.rowcount > 0
            if deleted:
                await self._recalculate(conn, quote_id)
                logger.info("quote_item_deleted", quote_id=quote_id, item_id=item_id)
            return deleted

    @staticmethod
    async def _next_quote_number(
        conn: aiosqlite.Connection, quote_type: QuoteType, year: int
    ) -> str:
        """Increment the (prefix, year) counter and format the number."""
        prefix = quote_type.number_prefix
        await conn.execute(
            """
            INSERT INTO quote_sequences (prefix, year, last_value) VALUES (?, ?, 1)
            ON CONFLICT (prefix, year) DO UPDATE SET last_value = last_value + 1
            """,
            (prefix, year),
        )
        cursor = await conn.execute(
            "SELECT last_value FROM quote_sequences WHERE prefix = ? AND year = ?",
            (prefix, year),
        )
        row = await cursor.fetchone()
        return format_quote_number(quote_type, year, int(row[0]))

    @staticmethod
    async def _insert_item(conn: aiosqlite.Connection, item: QuoteItem) -> None:
        cursor = await conn.execute(
            """
            INSERT INTO quote_items (
                quote_id, position, description, quantity, unit, unit_price, total
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                item.quote_id,
                item.position,
                item.description,
                item.quantity,
                item.unit,
                item.unit_price,
                item.total,
            ),
        )
        item.id = cursor.lastrowid

    @staticmethod
    async def _recalculate(conn: aiosqlite.Connection, quote_id: int) -> None:
        """Recompute cached totals from the stored item totals."""
        cursor = await conn.execute("SELECT tax_rate FROM quotes WHERE id = ?", (quote_id,))
        row = await cursor.fetchone()
        if row is None:
            return
        cursor = await conn.execute(
            "SELECT total FROM quote_items WHERE quote_id = ?", (quote_id,)
        )
        totals = compute_totals(
            (float(r[0]) for r in await cursor.fetchall()),
            float(row["tax_rate"]),
        )
        await conn.execute(
            """
            UPDATE quotes SET subtotal = ?, tax_amount = ?, total = ?, updated_at = ?
            WHERE id = ?
            """,
            (
                totals.subtotal,
                totals.tax_amount,
                totals.total,
                datetime.utcnow().isoformat(),
                quote_id,
            ),
        )

    async def _load_quote(self, conn: aiosqlite.Connection, quote_id: int) -> Quote | None:
        cursor = await conn.execute("SELECT * FROM quotes WHERE id = ?", (quote_id,))
        row = await cursor.fetchone()
        if row is None:
            return None
        quote = self._row_to_quote(row)
        cursor = await conn.execute(
            "SELECT * FROM quote_items WHERE quote_id = ? ORDER BY position, id",
            (quote_id,),
        )
        quote.items = [self._row_to_item(r) for r in await cursor.fetchall()]
        return quote

    @staticmethod
    def _row_to_quote(row: aiosqlite.Row) -> Quote:
        """Convert a database row to a Quote header."""
        now = datetime.utcnow()
        return Quote(
            id=row["id"],
            event_id=row["event_id"],
            quote_number=row["quote_number"],
            quote_type=QuoteType(row["quote_type"]),
            status=QuoteStatus(row["status"]),
            client_name=row["client_name"],
            client_address=row["client_address"],
            issue_date=parse_date(row["issue_date"]) or date.today(),
            valid_until=parse_date(row["valid_until"]),
            tax_rate=float(row["tax_rate"]),
            subtotal=float(row["subtotal"]),
            tax_amount=float(row["tax_amount"]),
            total=float(row["total"]),
            notes=row["notes"],
            created_at=parse_datetime(row["created_at"], now),
            updated_at=parse_datetime(row["updated_at"], now),
        )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> QuoteItem:
        """Convert a database row to a QuoteItem."""
        return QuoteItem(
            id=row["id"],
            quote_id=row["quote_id"],
            position=row["position"],
            description=row["description"],
            quantity=float(row["quantity"]),
            unit=row["unit"],
            unit_price=float(row["unit_price"]),
        )
