"""Availability snapshot of a catalog item."""

from pydantic import BaseModel


class Availability(BaseModel):
    """How many units of an item are free for a date range.

    ``usable`` is not clamped: a negative value means open repairs exceed
    the physical stock.
    """

    item_id: int
    name: str
    quantity: int
    in_repair: int
    usable: int
    booked: int
    available: int

    def can_fit(self, needed: int) -> bool:
        """True when ``needed`` more units fit next to the existing bookings."""
        return self.booked + needed <= self.usable
