"""API middleware."""

from gearbook.api.middleware.error_handler import ErrorHandlerMiddleware
from gearbook.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
