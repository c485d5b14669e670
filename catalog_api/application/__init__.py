"""Application layer.

Catalog service, repository interfaces and pagination primitives.
"""

from catalog_api.application.catalog_service import CatalogService
from catalog_api.application.pagination import DataProvider, MapDataProvider, Pagination, Sort

__all__ = [
    "CatalogService",
    "DataProvider",
    "MapDataProvider",
    "Pagination",
    "Sort",
]
