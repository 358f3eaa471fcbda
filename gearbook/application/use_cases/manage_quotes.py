"""Quote Use Cases: manual quotes and their line items."""

from datetime import date

from gearbook.application.dto.converters import quote_item_response, quote_response
from gearbook.application.dto.requests import (
    CreateQuoteRequest,
    QuoteItemRequest,
    UpdateQuoteItemRequest,
    UpdateQuoteRequest,
)
from gearbook.application.dto.responses import QuoteItemResponse, QuoteResponse
from gearbook.config import get_logger, get_settings
from gearbook.core.entities.quote import Quote, QuoteItem, QuoteStatus, QuoteType
from gearbook.core.exceptions import (
    EventNotFoundError,
    QuoteItemNotFoundError,
    QuoteNotFoundError,
)
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.interfaces.quote_store import IQuoteStore
from gearbook.core.services.validation import parse_enum, require_text

logger = get_logger(__name__)


def _build_item(request: QuoteItemRequest, quote_id: int | None = None) -> QuoteItem:
    return QuoteItem(
        quote_id=quote_id,
        position=request.position,
        description=require_text("description", request.description),
        quantity=request.quantity,
        unit=request.unit,
        unit_price=request.unit_price,
    )


class _QuoteUseCase:
    def __init__(
        self,
        quote_store: IQuoteStore | None = None,
        event_store: IEventStore | None = None,
    ):
        self._quote_store = quote_store
        self._event_store = event_store

    async def _get_quote_store(self) -> IQuoteStore:
        if self._quote_store is None:
            from gearbook.infrastructure.storage.sqlite import get_quote_store

            self._quote_store = await get_quote_store()
        return self._quote_store

    async def _get_event_store(self) -> IEventStore:
        if self._event_store is None:
            from gearbook.infrastructure.storage.sqlite import get_event_store

            self._event_store = await get_event_store()
        return self._event_store

    async def _require_quote(self, quote_id: int) -> Quote:
        store = await self._get_quote_store()
        quote = await store.get_quote(quote_id)
        if quote is None:
            raise QuoteNotFoundError(quote_id)
        return quote

    async def _require_event(self, event_id: int) -> None:
        event_store = await self._get_event_store()
        if await event_store.get_event(event_id) is None:
            raise EventNotFoundError(event_id)


class CreateQuoteUseCase(_QuoteUseCase):
    """Create a manual quote, optionally tied to an event."""

    async def execute(self, request: CreateQuoteRequest) -> Quote:
        quote_type = parse_enum(QuoteType, "quote_type", request.quote_type)
        status = parse_enum(QuoteStatus, "status", request.status)
        items = [_build_item(item) for item in request.items]

        if request.event_id is not None:
            await self._require_event(request.event_id)

        store = await self._get_quote_store()
        return await store.create_quote(
            Quote(
                event_id=request.event_id,
                quote_type=quote_type,
                status=status,
                client_name=request.client_name,
                client_address=request.client_address,
                issue_date=request.issue_date or date.today(),
                valid_until=request.valid_until,
                tax_rate=(
                    request.tax_rate
                    if request.tax_rate is not None
                    else get_settings().booking.default_tax_rate
                ),
                notes=request.notes,
                items=items,
            )
        )

    def to_response(self, quote: Quote) -> QuoteResponse:
        """Convert result to API response."""
        return quote_response(quote)


class UpdateQuoteUseCase(_QuoteUseCase):
    """
    Edit the quote header.

    The quote number is never reassigned. A changed tax rate recomputes
    the cached totals.
    """

    async def execute(self, quote_id: int, request: UpdateQuoteRequest) -> Quote:
        quote = await self._require_quote(quote_id)
        changes = request.model_dump(exclude_unset=True)
        recalculate = False

        if changes.get("quote_type") is not None:
            quote.quote_type = parse_enum(QuoteType, "quote_type", changes["quote_type"])
        if changes.get("status") is not None:
            quote.status = parse_enum(QuoteStatus, "status", changes["status"])
        if "event_id" in changes:
            if changes["event_id"] is not None:
                await self._require_event(changes["event_id"])
            quote.event_id = changes["event_id"]
        if changes.get("tax_rate") is not None and changes["tax_rate"] != quote.tax_rate:
            quote.tax_rate = changes["tax_rate"]
            recalculate = True
        if changes.get("issue_date") is not None:
            quote.issue_date = changes["issue_date"]
        for field in ("client_name", "client_address", "valid_until", "notes"):
            if field in changes:
                setattr(quote, field, changes[field])

        store = await self._get_quote_store()
        return await store.update_quote(quote, recalculate=recalculate)

    def to_response(self, quote: Quote) -> QuoteResponse:
        """Convert result to API response."""
        return quote_response(quote)


class AddQuoteItemUseCase(_QuoteUseCase):
    """Append a line item; the quote totals follow."""

    async def execute(self, quote_id: int, request: QuoteItemRequest) -> QuoteItem:
        item = _build_item(request, quote_id)
        await self._require_quote(quote_id)
        store = await self._get_quote_store()
        return await store.add_item(item)

    def to_response(self, item: QuoteItem) -> QuoteItemResponse:
        """Convert result to API response."""
        return quote_item_response(item)


class UpdateQuoteItemUseCase(_QuoteUseCase):
    async def execute(
        self, quote_id: int, item_id: int, request: UpdateQuoteItemRequest
    ) -> QuoteItem:
        store = await self._get_quote_store()
        item = await store.get_item(quote_id, item_id)
        if item is None:
            raise QuoteItemNotFoundError(item_id)

        changes = {k: v for k, v in request.model_dump(exclude_unset=True).items() if v is not None}
        if "description" in changes:
            changes["description"] = require_text("description", changes["description"])

        # Rebuilt so the line total is derived again
        updated = QuoteItem(**{**item.model_dump(), **changes})
        return await store.update_item(updated)

    def to_response(self, item: QuoteItem) -> QuoteItemResponse:
        """Convert result to API response."""
        return quote_item_response(item)


class DeleteQuoteItemUseCase(_QuoteUseCase):
    async def execute(self, quote_id: int, item_id: int) -> bool:
        store = await self._get_quote_store()
        if not await store.delete_item(quote_id, item_id):
            raise QuoteItemNotFoundError(item_id)
        return True
