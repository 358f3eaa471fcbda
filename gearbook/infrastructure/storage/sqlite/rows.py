"""Column conversions shared by the SQLite stores."""

from datetime import date, datetime


def parse_datetime(value: str | None, default: datetime | None = None) -> datetime | None:
    """Parse an ISO timestamp column, falling back to ``default``."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return default


def parse_date(value: str | None) -> date | None:
    """Parse an ISO date column."""
    if value:
        try:
            return date.fromisoformat(value[:10])
        except (ValueError, TypeError):
            pass
    return None


def to_iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value else None
