"""Abstract interface for the event data the engine reads and writes."""

from abc import ABC, abstractmethod

from gearbook.core.entities.event import (
    CrewMember,
    EquipmentEntry,
    Event,
    EventHistoryEntry,
)


class IEventStore(ABC):
    """Interface for event, history, crew and legacy equipment persistence."""

    @abstractmethod
    async def create_event(self, event: Event) -> Event:
        """Create an event record."""
        pass

    @abstractmethod
    async def get_event(self, event_id: int) -> Event | None:
        """Get event by ID."""
        pass

    @abstractmethod
    async def update_event(self, event: Event) -> Event:
        """Update status, dates, title and client of an event."""
        pass

    @abstractmethod
    async def add_history(
        self, event_id: int, action: str, detail: str | None = None
    ) -> EventHistoryEntry:
        """Append an entry to the event history."""
        pass

    @abstractmethod
    async def list_history(self, event_id: int) -> list[EventHistoryEntry]:
        """History entries of an event, newest first."""
        pass

    @abstractmethod
    async def add_crew_member(self, member: CrewMember) -> CrewMember:
        """Assign a crew member to an event."""
        pass

    @abstractmethod
    async def list_crew(self, event_id: int) -> list[CrewMember]:
        """Crew members of an event."""
        pass

    @abstractmethod
    async def add_equipment_entry(self, entry: EquipmentEntry) -> EquipmentEntry:
        """Add a legacy free-text equipment entry."""
        pass

    @abstractmethod
    async def list_equipment_entries(self, event_id: int) -> list[EquipmentEntry]:
        """Legacy free-text equipment entries of an event."""
        pass
