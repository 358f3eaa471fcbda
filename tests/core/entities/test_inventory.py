"""Tests for catalog and repair entities."""

from gearbook.core.entities.availability import Availability
from gearbook.core.entities.booking import EventInventoryLine, PackingList
from gearbook.core.entities.inventory import InventoryItem, RepairLog, RepairStatus


class TestRepairStatus:
    def test_open_statuses(self):
        assert RepairStatus.DEFECTIVE.is_open
        assert RepairStatus.IN_REPAIR.is_open
        assert not RepairStatus.REPAIRED.is_open
        assert not RepairStatus.WRITTEN_OFF.is_open

    def test_resolved_statuses(self):
        assert RepairStatus.REPAIRED.is_resolved
        assert RepairStatus.WRITTEN_OFF.is_resolved
        assert not RepairStatus.DEFECTIVE.is_resolved

    def test_repair_log_defaults_to_open(self):
        repair = RepairLog(inventory_item_id=1, issue_description="Kabelbruch")
        assert repair.status == RepairStatus.DEFECTIVE
        assert repair.is_open
        assert repair.resolved_at is None


class TestInventoryItem:
    def test_defaults(self):
        item = InventoryItem(name="Kabeltrommel")
        assert item.category == "Sonstiges"
        assert item.quantity == 1
        assert item.rental_rate == 0.0


class TestAvailability:
    def test_can_fit(self):
        avail = Availability(
            item_id=1, name="x", quantity=4, in_repair=0, usable=4, booked=2, available=2
        )
        assert avail.can_fit(2)
        assert not avail.can_fit(3)

    def test_negative_usable_never_fits(self):
        avail = Availability(
            item_id=1, name="x", quantity=1, in_repair=2, usable=-1, booked=0, available=0
        )
        assert not avail.can_fit(1)


class TestPackingList:
    def test_counts(self):
        lines = [
            EventInventoryLine(event_id=1, inventory_item_id=1, packed=True),
            EventInventoryLine(event_id=1, inventory_item_id=2),
            EventInventoryLine(event_id=1, inventory_item_id=3),
        ]
        packing = PackingList(event_id=1, items=lines)
        assert packing.total == 3
        assert packing.packed == 1
        assert packing.unpacked == 2
