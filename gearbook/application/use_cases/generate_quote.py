"""Generate Quote Use Case: price an event's bookings into a new quote."""

from gearbook.application.dto.converters import quote_response
from gearbook.application.dto.requests import GenerateQuoteRequest
from gearbook.application.dto.responses import QuoteResponse
from gearbook.config import get_logger, get_settings
from gearbook.core.entities.quote import Quote, QuoteType
from gearbook.core.exceptions import EventNotFoundError
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.event_store import IEventStore
from gearbook.core.interfaces.quote_store import IQuoteStore
from gearbook.core.services.pricing import build_event_quote_items
from gearbook.core.services.validation import parse_enum

logger = get_logger(__name__)


class GenerateQuoteUseCase:
    """
    Build a quote from the current state of an event.

    Items are, in order: one line per booking, a zero-cost placeholder per
    crew member, and a zero-cost line per legacy equipment entry that is
    not linked to one of the bookings. The quote is a snapshot; later
    booking edits do not touch it.
    """

    def __init__(
        self,
        event_store: IEventStore | None = None,
        booking_store: IBookingStore | None = None,
        quote_store: IQuoteStore | None = None,
    ):
        self._event_store = event_store
        self._booking_store = booking_store
        self._quote_store = quote_store

    async def _get_event_store(self) -> IEventStore:
        if self._event_store is None:
            from gearbook.infrastructure.storage.sqlite import get_event_store

            self._event_store = await get_event_store()
        return self._event_store

    async def _get_booking_store(self) -> IBookingStore:
        if self._booking_store is None:
            from gearbook.infrastructure.storage.sqlite import get_booking_store

            self._booking_store = await get_booking_store()
        return self._booking_store

    async def _get_quote_store(self) -> IQuoteStore:
        if self._quote_store is None:
            from gearbook.infrastructure.storage.sqlite import get_quote_store

            self._quote_store = await get_quote_store()
        return self._quote_store

    async def execute(self, event_id: int, request: GenerateQuoteRequest) -> Quote:
        """Execute generate quote use case."""
        quote_type = parse_enum(QuoteType, "quote_type", request.quote_type)
        tax_rate = (
            request.tax_rate
            if request.tax_rate is not None
            else get_settings().booking.default_tax_rate
        )

        event_store = await self._get_event_store()
        event = await event_store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        booking_store = await self._get_booking_store()
        items = build_event_quote_items(
            lines=await booking_store.list_lines(event_id),
            crew=await event_store.list_crew(event_id),
            equipment=await event_store.list_equipment_entries(event_id),
        )

        quote_store = await self._get_quote_store()
        quote = await quote_store.create_quote(
            Quote(
                event_id=event_id,
                quote_type=quote_type,
                client_name=event.client_name,
                tax_rate=tax_rate,
                notes=f'Automatisch aus Event "{event.title}" generiert',
                items=items,
            )
        )

        logger.info(
            "quote_generated",
            event_id=event_id,
            quote_id=quote.id,
            quote_number=quote.quote_number,
            items=quote.item_count,
            total=quote.total,
        )
        return quote

    def to_response(self, quote: Quote) -> QuoteResponse:
        """Convert result to API response."""
        return quote_response(quote)
