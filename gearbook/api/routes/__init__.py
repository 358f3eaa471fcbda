"""API route modules."""

from gearbook.api.routes.events import router as events_router
from gearbook.api.routes.health import router as health_router
from gearbook.api.routes.inventory import router as inventory_router
from gearbook.api.routes.quotes import router as quotes_router
from gearbook.api.routes.sets import router as sets_router

__all__ = [
    "health_router",
    "inventory_router",
    "events_router",
    "sets_router",
    "quotes_router",
]
