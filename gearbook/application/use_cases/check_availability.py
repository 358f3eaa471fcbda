"""Check Availability Use Case."""

from gearbook.application.dto.converters import availability_response
from gearbook.application.dto.requests import CheckAvailabilityRequest
from gearbook.application.dto.responses import AvailabilityResponse
from gearbook.core.entities.availability import Availability
from gearbook.core.services.availability import AvailabilityService


class CheckAvailabilityUseCase:
    """Answer how many units of an item are free for a date range."""

    def __init__(self, availability_service: AvailabilityService | None = None):
        self._availability_service = availability_service

    async def _get_availability_service(self) -> AvailabilityService:
        if self._availability_service is None:
            from gearbook.application.services import get_availability_service

            self._availability_service = await get_availability_service()
        return self._availability_service

    async def execute(self, request: CheckAvailabilityRequest) -> Availability:
        service = await self._get_availability_service()
        return await service.check(
            request.item_id,
            date_from=request.date_from,
            date_to=request.date_to,
            exclude_event_id=request.exclude_event_id,
        )

    def to_response(
        self, result: Availability, request: CheckAvailabilityRequest
    ) -> AvailabilityResponse:
        """Convert result to API response."""
        return availability_response(result, request.date_from, request.date_to)
