"""Infrastructure layer implementations."""

from gearbook.infrastructure import storage

__all__ = ["storage"]
