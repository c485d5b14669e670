"""Demo catalog generation."""

from catalog_api.catalog.generator import CatalogGenerator, GeneratedCatalog, GeneratorConfig

__all__ = [
    "CatalogGenerator",
    "GeneratedCatalog",
    "GeneratorConfig",
]
