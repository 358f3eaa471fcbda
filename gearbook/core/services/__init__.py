"""Core business services (pure domain logic)."""

from gearbook.core.services.availability import (
    AvailabilityService,
    calculate_availability,
    query_window,
)
from gearbook.core.services.pricing import (
    QuoteTotals,
    build_event_quote_items,
    compute_totals,
    effective_day_rate,
    format_quote_number,
)
from gearbook.core.services.validation import parse_enum, require_min, require_text

__all__ = [
    "AvailabilityService",
    "calculate_availability",
    "query_window",
    "QuoteTotals",
    "build_event_quote_items",
    "compute_totals",
    "effective_day_rate",
    "format_quote_number",
    "parse_enum",
    "require_min",
    "require_text",
]
