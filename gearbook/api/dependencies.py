"""
Dependency injection container for FastAPI.

Provides store, service and use case instances to route handlers. Tests
replace any of these through ``app.dependency_overrides``.
"""

from functools import lru_cache

from gearbook.application.services import get_availability_service
from gearbook.application.use_cases import (
    AddCrewMemberUseCase,
    AddEquipmentEntryUseCase,
    AddInventoryItemUseCase,
    AddQuoteItemUseCase,
    AddSetItemUseCase,
    ApplyEquipmentSetUseCase,
    BookEquipmentUseCase,
    CheckAvailabilityUseCase,
    CreateEquipmentSetUseCase,
    CreateEventUseCase,
    CreateQuoteUseCase,
    DeleteQuoteItemUseCase,
    GenerateQuoteUseCase,
    GetPackingListUseCase,
    RemoveBookingUseCase,
    ReportRepairUseCase,
    UpdateBookingUseCase,
    UpdateEquipmentSetUseCase,
    UpdateEventUseCase,
    UpdateInventoryItemUseCase,
    UpdateQuoteItemUseCase,
    UpdateQuoteUseCase,
    UpdateRepairUseCase,
    UpdateSetItemUseCase,
)
from gearbook.config import Settings, get_settings
from gearbook.core.services import AvailabilityService
from gearbook.infrastructure.storage.sqlite import (
    SQLiteBookingStore,
    SQLiteCatalogStore,
    SQLiteEventStore,
    SQLiteQuoteStore,
    SQLiteRepairStore,
    SQLiteSetStore,
    get_booking_store,
    get_catalog_store,
    get_event_store,
    get_quote_store,
    get_repair_store,
    get_set_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
async def get_availability() -> AvailabilityService:
    """Get availability service."""
    return await get_availability_service()


# Store dependencies
async def get_cat_store() -> SQLiteCatalogStore:
    """Get catalog store."""
    return await get_catalog_store()


async def get_rep_store() -> SQLiteRepairStore:
    """Get repair store."""
    return await get_repair_store()


async def get_evt_store() -> SQLiteEventStore:
    """Get event store."""
    return await get_event_store()


async def get_book_store() -> SQLiteBookingStore:
    """Get booking store."""
    return await get_booking_store()


async def get_eq_set_store() -> SQLiteSetStore:
    """Get equipment set store."""
    return await get_set_store()


async def get_qt_store() -> SQLiteQuoteStore:
    """Get quote store."""
    return await get_quote_store()


# Catalog use case dependencies
def get_add_inventory_item_use_case() -> AddInventoryItemUseCase:
    return AddInventoryItemUseCase()


def get_update_inventory_item_use_case() -> UpdateInventoryItemUseCase:
    return UpdateInventoryItemUseCase()


def get_report_repair_use_case() -> ReportRepairUseCase:
    return ReportRepairUseCase()


def get_update_repair_use_case() -> UpdateRepairUseCase:
    return UpdateRepairUseCase()


def get_check_availability_use_case() -> CheckAvailabilityUseCase:
    """Get check availability use case."""
    return CheckAvailabilityUseCase()


# Event and booking use case dependencies
def get_create_event_use_case() -> CreateEventUseCase:
    return CreateEventUseCase()


def get_update_event_use_case() -> UpdateEventUseCase:
    return UpdateEventUseCase()


def get_add_crew_member_use_case() -> AddCrewMemberUseCase:
    return AddCrewMemberUseCase()


def get_add_equipment_entry_use_case() -> AddEquipmentEntryUseCase:
    return AddEquipmentEntryUseCase()


def get_book_equipment_use_case() -> BookEquipmentUseCase:
    """Get book equipment use case."""
    return BookEquipmentUseCase()


def get_update_booking_use_case() -> UpdateBookingUseCase:
    return UpdateBookingUseCase()


def get_remove_booking_use_case() -> RemoveBookingUseCase:
    return RemoveBookingUseCase()


def get_packing_list_use_case() -> GetPackingListUseCase:
    return GetPackingListUseCase()


# Set use case dependencies
def get_create_set_use_case() -> CreateEquipmentSetUseCase:
    return CreateEquipmentSetUseCase()


def get_update_set_use_case() -> UpdateEquipmentSetUseCase:
    return UpdateEquipmentSetUseCase()


def get_add_set_item_use_case() -> AddSetItemUseCase:
    return AddSetItemUseCase()


def get_update_set_item_use_case() -> UpdateSetItemUseCase:
    return UpdateSetItemUseCase()


def get_apply_set_use_case() -> ApplyEquipmentSetUseCase:
    """Get apply equipment set use case."""
    return ApplyEquipmentSetUseCase()


# Quote use case dependencies
def get_generate_quote_use_case() -> GenerateQuoteUseCase:
    """Get generate quote use case."""
    return GenerateQuoteUseCase()


def get_create_quote_use_case() -> CreateQuoteUseCase:
    return CreateQuoteUseCase()


def get_update_quote_use_case() -> UpdateQuoteUseCase:
    return UpdateQuoteUseCase()


def get_add_quote_item_use_case() -> AddQuoteItemUseCase:
    return AddQuoteItemUseCase()


def get_update_quote_item_use_case() -> UpdateQuoteItemUseCase:
    return UpdateQuoteItemUseCase()


def get_delete_quote_item_use_case() -> DeleteQuoteItemUseCase:
    return DeleteQuoteItemUseCase()
