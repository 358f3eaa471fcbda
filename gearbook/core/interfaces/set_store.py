"""Abstract interface for equipment set storage."""

from abc import ABC, abstractmethod

from gearbook.core.entities.equipment_set import EquipmentSet, EquipmentSetItem


class ISetStore(ABC):
    """Interface for equipment set and set item persistence."""

    @abstractmethod
    async def create_set(self, equipment_set: EquipmentSet) -> EquipmentSet:
        """Create a set header."""
        pass

    @abstractmethod
    async def get_set(self, set_id: int) -> EquipmentSet | None:
        """Get a set with its items joined to the catalog."""
        pass

    @abstractmethod
    async def list_sets(self) -> list[EquipmentSet]:
        """List sets by name with item counts."""
        pass

    @abstractmethod
    async def update_set(self, equipment_set: EquipmentSet) -> EquipmentSet:
        """Update set header fields."""
        pass

    @abstractmethod
    async def delete_set(self, set_id: int) -> bool:
        """Delete a set and its items."""
        pass

    @abstractmethod
    async def add_set_item(self, set_item: EquipmentSetItem) -> EquipmentSetItem:
        """Add an item to a set, summing quantities if it is already present."""
        pass

    @abstractmethod
    async def get_set_item(self, set_id: int, set_item_id: int) -> EquipmentSetItem | None:
        """Get a set item that belongs to the given set."""
        pass

    @abstractmethod
    async def update_set_item(self, set_item: EquipmentSetItem) -> EquipmentSetItem:
        """Update the template quantity of a set item."""
        pass

    @abstractmethod
    async def delete_set_item(self, set_item_id: int) -> bool:
        """Remove an item from a set."""
        pass
