"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores
3. Providing factory functions for dependency injection

Use cases are the entry point for API handlers that write.
"""

from gearbook.application.services import get_availability_service, reset_services

__all__ = [
    "get_availability_service",
    "reset_services",
]
