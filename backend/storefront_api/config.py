"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Settings are read once at application construction; handlers never read them

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for everything except the storefront client factory
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storefront client
    shop_client_factory: str = ""
    cache_ttl_ms: int | None = 60_000
    shop_domain_header: str = "x-shop-domain"

    # Error mapping
    not_found_status: int = 500

    @field_validator("not_found_status")
    @classmethod
    def check_error_status(cls, v: int) -> int:
        if not 400 <= v <= 599:
            raise ValueError("not_found_status must be a 4xx or 5xx status")
        return v

    # API reference
    api_title: str = "Better Shop API"
    api_version: str = "1.0.0"
    api_description: str = (
        "Type-safe endpoints for Shopify products, collections, store info, and checkout"
    )
    docs_path: str = "/api/reference"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
