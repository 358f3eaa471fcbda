"""Abstract interface for quote storage."""

from abc import ABC, abstractmethod

from gearbook.core.entities.quote import Quote, QuoteItem


class IQuoteStore(ABC):
    """Interface for quote and quote item persistence.

    Every write that touches items recomputes the cached quote totals in
    the same transaction.
    """

    @abstractmethod
    async def create_quote(self, quote: Quote) -> Quote:
        """Allocate the next quote number and insert the quote with its items."""
        pass

    @abstractmethod
    async def get_quote(self, quote_id: int) -> Quote | None:
        """Get quote by ID with items ordered by position."""
        pass

    @abstractmethod
    async def list_quotes(
        self,
        event_id: int | None = None,
        status: str | None = None,
        quote_type: str | None = None,
    ) -> list[Quote]:
        """List quotes newest first."""
        pass

    @abstractmethod
    async def update_quote(self, quote: Quote, recalculate: bool = False) -> Quote:
        """Update header fields, optionally recomputing totals."""
        pass

    @abstractmethod
    async def delete_quote(self, quote_id: int) -> bool:
        """Delete a quote and its items."""
        pass

    @abstractmethod
    async def add_item(self, item: QuoteItem) -> QuoteItem:
        """Append a line item (position defaults to the next free slot)."""
        pass

    @abstractmethod
    async def get_item(self, quote_id: int, item_id: int) -> QuoteItem | None:
        """Get a line item that belongs to the given quote."""
        pass

    @abstractmethod
    async def update_item(self, item: QuoteItem) -> QuoteItem:
        """Update a line item."""
        pass

    @abstractmethod
    async def delete_item(self, quote_id: int, item_id: int) -> bool:
        """Delete a line item."""
        pass
