"""Abstract interface for the booking ledger."""

from abc import ABC, abstractmethod

from gearbook.core.entities.booking import EventInventoryLine
from gearbook.core.entities.equipment_set import EquipmentSetItem, SetApplyConflict
from gearbook.core.entities.event import OccupancyWindow


class IBookingStore(ABC):
    """Interface for event inventory line persistence."""

    @abstractmethod
    async def sum_booked(
        self,
        item_id: int,
        window: OccupancyWindow | None = None,
        exclude_event_id: int | None = None,
    ) -> int:
        """
        Units of the item booked by open events.

        With a window, only events whose occupancy window overlaps it are
        counted; without one the sum is system-wide.
        """
        pass

    @abstractmethod
    async def create_line(
        self,
        line: EventInventoryLine,
        window: OccupancyWindow | None,
        history_detail: str,
    ) -> EventInventoryLine:
        """
        Insert a booking line and its history entry atomically.

        When a window is given, capacity is re-validated inside the write
        transaction and OverbookingConflictError is raised without writing.
        """
        pass

    @abstractmethod
    async def get_line(self, event_id: int, line_id: int) -> EventInventoryLine | None:
        """Get a booking line that belongs to the given event."""
        pass

    @abstractmethod
    async def list_lines(self, event_id: int) -> list[EventInventoryLine]:
        """Booking lines of an event joined with catalog name and category."""
        pass

    @abstractmethod
    async def update_line(self, line: EventInventoryLine) -> EventInventoryLine:
        """Update quantity, rental days, price, notes and packed flag."""
        pass

    @abstractmethod
    async def delete_line(
        self, event_id: int, line_id: int, history_detail: str
    ) -> bool:
        """Delete a booking line and append a history entry."""
        pass

    @abstractmethod
    async def apply_set_lines(
        self,
        event_id: int,
        candidates: list[EquipmentSetItem],
        rental_days: int,
        window: OccupancyWindow | None,
        set_name: str,
    ) -> tuple[list[EventInventoryLine], list[SetApplyConflict]]:
        """
        Book set items onto an event in one transaction.

        Each candidate is re-checked against the window (excluding the
        event's own lines) under the write lock. One history entry names
        the set and the number of lines written.

        Existing lines for the same item get their quantity increased and
        rental days overwritten. Returns the written lines and the
        candidates that no longer fit when re-checked under the write lock.
        """
        pass
