"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Storage
    storage_backend: Literal["memory", "database"] = "memory"
    database_url: str = "postgresql+asyncpg://catalog:catalog_dev_password@db:5432/catalog"
    seed_demo_catalog: bool = False

    # Authentication
    catalog_api_key: str = "dev-api-key-change-in-production"

    # Links
    static_base_url: str = "http://static.localhost"
    thumbnail_profile: str = "catalog_list"
    cart_add_path: str = "/cart/add"

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 50

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
