"""Input checks shared by the use cases. All raise before any write."""

from enum import Enum
from typing import TypeVar

from gearbook.core.exceptions import InvalidEnumError, InvalidStatusError, ValidationError

E = TypeVar("E", bound=Enum)


def require_text(field: str, value: str | None) -> str:
    """Non-blank string, stripped."""
    if value is None or not value.strip():
        raise ValidationError(field, f"{field} is required", value)
    return value.strip()


def require_min(field: str, value: int | float, minimum: int = 1) -> int | float:
    if value < minimum:
        raise ValidationError(field, f"{field} must be >= {minimum}", value)
    return value


def parse_enum(enum_cls: type[E], field: str, value: str) -> E:
    """
    Map a raw value onto a closed vocabulary.

    ``status`` fields raise InvalidStatusError, any other field
    InvalidEnumError.
    """
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        if field == "status":
            raise InvalidStatusError(value, allowed) from None
        raise InvalidEnumError(field, value, allowed) from None
