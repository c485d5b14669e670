"""API layer module.

Contains FastAPI routers, response schemas and serializers.
"""

from catalog_api.api.health import router as health_router
from catalog_api.api.items import router as items_router

__all__ = [
    "health_router",
    "items_router",
]
