"""
Domain exceptions for the Gearbook application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class GearbookError(Exception):
    """Base exception for all Gearbook errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(GearbookError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Not Found Exceptions
class NotFoundError(GearbookError):
    """Referenced record does not exist."""

    def __init__(self, entity: str, entity_id: int, code: str):
        super().__init__(
            f"{entity} not found: {entity_id}",
            code=code,
            details={"entity": entity, "id": entity_id},
        )


class InventoryItemNotFoundError(NotFoundError):
    """Catalog item not found."""

    def __init__(self, item_id: int):
        super().__init__("Inventory item", item_id, "INVENTORY_ITEM_NOT_FOUND")


class RepairLogNotFoundError(NotFoundError):
    """Repair log not found for the given item."""

    def __init__(self, repair_id: int):
        super().__init__("Repair log", repair_id, "REPAIR_LOG_NOT_FOUND")


class EventNotFoundError(NotFoundError):
    """Event not found."""

    def __init__(self, event_id: int):
        super().__init__("Event", event_id, "EVENT_NOT_FOUND")


class BookingLineNotFoundError(NotFoundError):
    """Booking line not found on the given event."""

    def __init__(self, line_id: int):
        super().__init__("Booking line", line_id, "BOOKING_LINE_NOT_FOUND")


class EquipmentSetNotFoundError(NotFoundError):
    """Equipment set not found."""

    def __init__(self, set_id: int):
        super().__init__("Equipment set", set_id, "EQUIPMENT_SET_NOT_FOUND")


class SetItemNotFoundError(NotFoundError):
    """Set item not found in the given set."""

    def __init__(self, set_item_id: int):
        super().__init__("Set item", set_item_id, "SET_ITEM_NOT_FOUND")


class QuoteNotFoundError(NotFoundError):
    """Quote not found."""

    def __init__(self, quote_id: int):
        super().__init__("Quote", quote_id, "QUOTE_NOT_FOUND")


class QuoteItemNotFoundError(NotFoundError):
    """Quote line item not found on the given quote."""

    def __init__(self, item_id: int):
        super().__init__("Quote item", item_id, "QUOTE_ITEM_NOT_FOUND")


# Validation Exceptions
class ValidationError(GearbookError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class CapacityExceededError(ValidationError):
    """Repair quantity exceeds the physical stock of the item."""

    def __init__(self, item_id: int, requested: int, quantity: int):
        super().__init__(
            field="quantity_affected",
            message=f"quantity_affected cannot exceed item quantity ({quantity})",
            value=requested,
        )
        self.code = "CAPACITY_EXCEEDED"
        self.details.update(
            {
                "item_id": item_id,
                "requested": requested,
                "quantity": quantity,
            }
        )


class InvalidEnumError(GearbookError):
    """Value outside a closed vocabulary."""

    def __init__(self, field: str, value: Any, allowed: list[str]):
        super().__init__(
            f"Invalid {field} '{value}'. Must be one of: {', '.join(allowed)}",
            code="INVALID_ENUM",
            details={"field": field, "value": value, "allowed": allowed},
        )


class InvalidStatusError(InvalidEnumError):
    """Status outside its closed vocabulary."""

    def __init__(self, value: Any, allowed: list[str]):
        super().__init__("status", value, allowed)
        self.code = "INVALID_STATUS"


# Reservation Exceptions
class OverbookingConflictError(GearbookError):
    """Booking would exceed the free capacity of an item for the event window."""

    def __init__(self, item_id: int, item_name: str, needed: int, available: int):
        super().__init__(
            f"Not enough '{item_name}' available: needed {needed}, available {available}",
            code="OVERBOOKING_CONFLICT",
            details={
                "item_id": item_id,
                "item_name": item_name,
                "needed": needed,
                "available": available,
            },
        )
        self.item_id = item_id
        self.needed = needed
        self.available = available


class ConfigurationError(GearbookError):
    """Configuration error."""

    pass
