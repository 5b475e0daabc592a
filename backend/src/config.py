"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from typing import Optional
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storefront settings loaded from environment variables.

    All settings have sensible defaults for development.

    Environment Variables:
        CATALOGUE_API_URL: Base URL of the remote content API
        CATALOGUE_API_TIMEOUT: HTTP timeout in seconds for the content API
        CATALOGUE_PAGE_LIMIT: Records fetched per catalogue page
        CART_STORAGE_KEY: Key-value store key holding the serialized cart
        CONTACT_STORAGE_KEY: Key-value store key holding the last contact identity
        KV_STORE_BACKEND: memory | file | redis
        KV_STORE_PATH: JSON file used by the file backend
        REDIS_URL: Redis connection string for the redis backend
        SEARCH_MATCH_THRESHOLD: Minimum relevance score for a search hit
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Content API
    CATALOGUE_API_URL: str = "http://localhost:5000/api"
    CATALOGUE_API_TIMEOUT: float = 10.0
    CATALOGUE_PAGE_LIMIT: int = 100

    # Persistence
    CART_STORAGE_KEY: str = "price-inquiry-cart"
    CONTACT_STORAGE_KEY: str = "asb_customer_info"
    KV_STORE_BACKEND: str = "memory"
    KV_STORE_PATH: str = "storefront_state.json"
    REDIS_URL: Optional[str] = "redis://localhost:6379/0"

    # Search
    SEARCH_MATCH_THRESHOLD: float = 0.3

    # Application
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    @model_validator(mode="after")
    def validate_storage_keys(self) -> "Settings":
        """Cart and contact state must not share a store key"""
        if self.CART_STORAGE_KEY == self.CONTACT_STORAGE_KEY:
            raise ValueError("CART_STORAGE_KEY and CONTACT_STORAGE_KEY must differ")
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
