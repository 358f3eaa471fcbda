"""Abstract interface for the repair ledger."""

from abc import ABC, abstractmethod

from gearbook.core.entities.inventory import RepairLog


class IRepairStore(ABC):
    """Interface for repair log persistence."""

    @abstractmethod
    async def create_repair(self, repair: RepairLog) -> RepairLog:
        """Record a new defect report."""
        pass

    @abstractmethod
    async def get_repair(self, item_id: int, repair_id: int) -> RepairLog | None:
        """Get a repair log that belongs to the given item."""
        pass

    @abstractmethod
    async def list_repairs(self, item_id: int) -> list[RepairLog]:
        """Repair logs of an item, newest first."""
        pass

    @abstractmethod
    async def update_repair(self, repair: RepairLog) -> RepairLog:
        """Persist status, description, quantity, cost, notes and resolved_at."""
        pass

    @abstractmethod
    async def delete_repair(self, repair_id: int) -> bool:
        """Delete a repair log."""
        pass

    @abstractmethod
    async def sum_in_repair(self, item_id: int) -> int:
        """Units of the item held by open (defekt / in-reparatur) repairs."""
        pass
