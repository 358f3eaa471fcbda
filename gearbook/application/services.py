"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.
"""

from typing import TYPE_CHECKING

from gearbook.core.services import AvailabilityService

if TYPE_CHECKING:
    from gearbook.core.interfaces import IBookingStore, ICatalogStore, IRepairStore


# Singleton service instances
_availability_service: AvailabilityService | None = None


async def get_availability_service(
    catalog_store: "ICatalogStore | None" = None,
    repair_store: "IRepairStore | None" = None,
    booking_store: "IBookingStore | None" = None,
) -> AvailabilityService:
    """
    Get or create AvailabilityService instance.

    Creates infrastructure dependencies if not provided. Any override
    produces a fresh instance instead of the shared one.

    Args:
        catalog_store: Optional catalog store override
        repair_store: Optional repair store override
        booking_store: Optional booking store override

    Returns:
        Configured AvailabilityService
    """
    global _availability_service

    overridden = any(s is not None for s in (catalog_store, repair_store, booking_store))
    if _availability_service is not None and not overridden:
        return _availability_service

    # Lazy import infrastructure to avoid circular imports
    from gearbook.infrastructure.storage.sqlite import (
        get_booking_store,
        get_catalog_store,
        get_repair_store,
    )

    service = AvailabilityService(
        catalog_store=catalog_store or await get_catalog_store(),
        repair_store=repair_store or await get_repair_store(),
        booking_store=booking_store or await get_booking_store(),
    )

    if not overridden:
        _availability_service = service

    return service


def reset_services() -> None:
    """Reset all service singletons (for testing)."""
    global _availability_service
    _availability_service = None
