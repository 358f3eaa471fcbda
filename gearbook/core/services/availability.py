"""
Availability calculator.

Combines catalog quantity, open repairs and overlapping bookings into a
single answer: how many units of an item are free for a date range.

The arithmetic is pure; the service only gathers the three inputs from the
injected stores and never writes.
"""

from datetime import date

from gearbook.config import get_logger
from gearbook.core.entities.availability import Availability
from gearbook.core.entities.event import OccupancyWindow
from gearbook.core.entities.inventory import InventoryItem
from gearbook.core.exceptions import InventoryItemNotFoundError, ValidationError
from gearbook.core.interfaces.booking_store import IBookingStore
from gearbook.core.interfaces.catalog_store import ICatalogStore
from gearbook.core.interfaces.repair_store import IRepairStore

logger = get_logger(__name__)


def calculate_availability(item: InventoryItem, in_repair: int, booked: int) -> Availability:
    """Combine stock, repairs and bookings.

    ``usable`` may go negative when repairs exceed stock; ``available``
    is floored at zero.
    """
    usable = item.quantity - in_repair
    return Availability(
        item_id=item.id or 0,
        name=item.name,
        quantity=item.quantity,
        in_repair=in_repair,
        usable=usable,
        booked=booked,
        available=max(0, usable - booked),
    )


def query_window(date_from: date | None, date_to: date | None) -> OccupancyWindow | None:
    """Date filter for an availability query; both bounds or nothing."""
    if date_from is None or date_to is None:
        return None
    if date_to < date_from:
        raise ValidationError("date_to", "must not be before date_from", date_to)
    return OccupancyWindow(start=date_from, end=date_to)


class AvailabilityService:
    """
    Answers availability queries for catalog items.

    Safe to call concurrently: every call is a read.
    """

    def __init__(
        self,
        catalog_store: ICatalogStore,
        repair_store: IRepairStore,
        booking_store: IBookingStore,
    ) -> None:
        self._catalog_store = catalog_store
        self._repair_store = repair_store
        self._booking_store = booking_store

    async def check(
        self,
        item_id: int,
        date_from: date | None = None,
        date_to: date | None = None,
        exclude_event_id: int | None = None,
    ) -> Availability:
        """
        Availability of one item.

        Args:
            item_id: Catalog item.
            date_from: Start of the range (inclusive).
            date_to: End of the range (inclusive).
            exclude_event_id: Ignore this event's own bookings.

        Without both dates the booked count is system-wide.
        """
        item = await self._catalog_store.get_item(item_id)
        if item is None:
            raise InventoryItemNotFoundError(item_id)
        return await self.check_item(
            item, query_window(date_from, date_to), exclude_event_id
        )

    async def check_item(
        self,
        item: InventoryItem,
        window: OccupancyWindow | None,
        exclude_event_id: int | None = None,
    ) -> Availability:
        """Availability of an already loaded item for a window."""
        in_repair = await self._repair_store.sum_in_repair(item.id)  # type: ignore[arg-type]
        booked = await self._booking_store.sum_booked(
            item.id,  # type: ignore[arg-type]
            window=window,
            exclude_event_id=exclude_event_id,
        )
        availability = calculate_availability(item, in_repair, booked)
        logger.debug(
            "availability_checked",
            item_id=item.id,
            window=f"{window.start}..{window.end}" if window else None,
            exclude_event_id=exclude_event_id,
            available=availability.available,
        )
        return availability
