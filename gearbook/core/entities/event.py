"""Event entities consumed by the reservation engine.

Events are owned by the surrounding event-planning module. The engine
only reads their status and dates, appends to their history, and reads
crew and legacy equipment entries when pricing a quote.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class EventStatus(str, Enum):
    """Event lifecycle. Only the terminal status releases equipment."""

    REQUESTED = "angefragt"
    CONFIRMED = "bestätigt"
    PREPARED = "vorbereitet"
    HELD = "durchgeführt"
    CLOSED = "abgeschlossen"


@dataclass(frozen=True)
class OccupancyWindow:
    """Inclusive date range during which an event holds booked equipment."""

    start: date
    end: date

    def overlaps(self, other: "OccupancyWindow") -> bool:
        """Inclusive-bounds interval overlap."""
        return self.end >= other.start and self.start <= other.end


class Event(BaseModel):
    """Minimal view of an event: identity, status and dates."""

    id: int | None = None
    title: str
    status: EventStatus = EventStatus.REQUESTED
    client_name: str | None = None
    event_date: date | None = None
    setup_date: date | None = None
    teardown_date: date | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def occupancy_window(self) -> OccupancyWindow | None:
        """[setup or event date, teardown or event date], None without both bounds."""
        start = self.setup_date or self.event_date
        end = self.teardown_date or self.event_date
        if start is None or end is None:
            return None
        return OccupancyWindow(start=start, end=end)


class EventHistoryEntry(BaseModel):
    """Append-only audit entry on an event."""

    id: int | None = None
    event_id: int
    action: str
    detail: str | None = None
    changed_at: datetime = Field(default_factory=datetime.utcnow)


class CrewMember(BaseModel):
    """Staff assigned to an event."""

    id: int | None = None
    event_id: int
    name: str
    role: str | None = None


class EquipmentEntry(BaseModel):
    """Legacy free-text equipment entry on an event.

    ``booking_line_id`` links the entry to the booking line that
    represents it, so quotes do not list the same gear twice.
    """

    id: int | None = None
    event_id: int
    asset_name: str
    booking_line_id: int | None = None
