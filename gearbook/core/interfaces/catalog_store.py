"""Abstract interface for the equipment catalog."""

from abc import ABC, abstractmethod

from gearbook.core.entities.inventory import InventoryItem


class ICatalogStore(ABC):
    """Interface for inventory item persistence."""

    @abstractmethod
    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new catalog item."""
        pass

    @abstractmethod
    async def get_item(self, item_id: int) -> InventoryItem | None:
        """Get catalog item by ID."""
        pass

    @abstractmethod
    async def list_items(
        self,
        category: str | None = None,
        search: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[InventoryItem]:
        """List items ordered by category and name, optionally filtered."""
        pass

    @abstractmethod
    async def list_categories(self) -> list[str]:
        """Distinct category values, sorted."""
        pass

    @abstractmethod
    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update all editable fields of an item."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: int) -> bool:
        """Delete an item together with its bookings, repairs and set entries."""
        pass
