"""Application use cases."""

from gearbook.application.use_cases.apply_equipment_set import (
    ApplyEquipmentSetUseCase,
    ApplySetResult,
)
from gearbook.application.use_cases.book_equipment import BookEquipmentUseCase
from gearbook.application.use_cases.check_availability import CheckAvailabilityUseCase
from gearbook.application.use_cases.generate_quote import GenerateQuoteUseCase
from gearbook.application.use_cases.manage_bookings import (
    GetPackingListUseCase,
    RemoveBookingUseCase,
    UpdateBookingUseCase,
)
from gearbook.application.use_cases.manage_catalog import (
    AddInventoryItemUseCase,
    UpdateInventoryItemUseCase,
)
from gearbook.application.use_cases.manage_events import (
    AddCrewMemberUseCase,
    AddEquipmentEntryUseCase,
    CreateEventUseCase,
    UpdateEventUseCase,
)
from gearbook.application.use_cases.manage_quotes import (
    AddQuoteItemUseCase,
    CreateQuoteUseCase,
    DeleteQuoteItemUseCase,
    UpdateQuoteItemUseCase,
    UpdateQuoteUseCase,
)
from gearbook.application.use_cases.manage_sets import (
    AddSetItemUseCase,
    CreateEquipmentSetUseCase,
    UpdateEquipmentSetUseCase,
    UpdateSetItemUseCase,
)
from gearbook.application.use_cases.report_repair import (
    ReportRepairUseCase,
    UpdateRepairUseCase,
)

__all__ = [
    "AddInventoryItemUseCase",
    "UpdateInventoryItemUseCase",
    "ReportRepairUseCase",
    "UpdateRepairUseCase",
    "CheckAvailabilityUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "AddCrewMemberUseCase",
    "AddEquipmentEntryUseCase",
    "BookEquipmentUseCase",
    "UpdateBookingUseCase",
    "RemoveBookingUseCase",
    "GetPackingListUseCase",
    "CreateEquipmentSetUseCase",
    "UpdateEquipmentSetUseCase",
    "AddSetItemUseCase",
    "UpdateSetItemUseCase",
    "ApplyEquipmentSetUseCase",
    "ApplySetResult",
    "GenerateQuoteUseCase",
    "CreateQuoteUseCase",
    "UpdateQuoteUseCase",
    "AddQuoteItemUseCase",
    "UpdateQuoteItemUseCase",
    "DeleteQuoteItemUseCase",
]
