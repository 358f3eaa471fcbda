"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from gearbook.application.dto.requests import (
    AddCrewMemberRequest,
    AddEquipmentEntryRequest,
    ApplySetRequest,
    BookEquipmentRequest,
    CheckAvailabilityRequest,
    CreateEventRequest,
    CreateInventoryItemRequest,
    CreateQuoteRequest,
    CreateRepairRequest,
    CreateSetRequest,
    GenerateQuoteRequest,
    QuoteItemRequest,
    SetItemRequest,
    UpdateBookingRequest,
    UpdateEventRequest,
    UpdateInventoryItemRequest,
    UpdateQuoteItemRequest,
    UpdateQuoteRequest,
    UpdateRepairRequest,
    UpdateSetItemRequest,
    UpdateSetRequest,
)
from gearbook.application.dto.responses import (
    ApplySetResponse,
    AvailabilityResponse,
    BookingLineResponse,
    CrewMemberResponse,
    EquipmentEntryResponse,
    EquipmentSetResponse,
    ErrorResponse,
    EventHistoryResponse,
    EventResponse,
    HealthResponse,
    InventoryItemResponse,
    PackingListResponse,
    PackingSummaryResponse,
    QuoteItemResponse,
    QuoteResponse,
    RepairLogResponse,
    SetConflictResponse,
    SetItemResponse,
)

__all__ = [
    # Requests
    "AddCrewMemberRequest",
    "AddEquipmentEntryRequest",
    "ApplySetRequest",
    "BookEquipmentRequest",
    "CheckAvailabilityRequest",
    "CreateEventRequest",
    "CreateInventoryItemRequest",
    "CreateQuoteRequest",
    "CreateRepairRequest",
    "CreateSetRequest",
    "GenerateQuoteRequest",
    "QuoteItemRequest",
    "SetItemRequest",
    "UpdateBookingRequest",
    "UpdateEventRequest",
    "UpdateInventoryItemRequest",
    "UpdateQuoteItemRequest",
    "UpdateQuoteRequest",
    "UpdateRepairRequest",
    "UpdateSetItemRequest",
    "UpdateSetRequest",
    # Responses
    "ApplySetResponse",
    "AvailabilityResponse",
    "BookingLineResponse",
    "CrewMemberResponse",
    "EquipmentEntryResponse",
    "EquipmentSetResponse",
    "ErrorResponse",
    "EventHistoryResponse",
    "EventResponse",
    "HealthResponse",
    "InventoryItemResponse",
    "PackingListResponse",
    "PackingSummaryResponse",
    "QuoteItemResponse",
    "QuoteResponse",
    "RepairLogResponse",
    "SetConflictResponse",
    "SetItemResponse",
]
