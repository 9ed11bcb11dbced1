"""Application configuration with structured settings groups."""
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Nested Settings Models
# =============================================================================


class ApiSettings(BaseModel):
    """
    HTTP API surface settings.

    prefix: Path under which every client route is mounted.
    max_body_bytes: Largest accepted request body. Larger bodies are rejected with 413.
    """

    prefix: str = "/api/clients"
    max_body_bytes: int = 1024 * 1024


class CorsSettings(BaseModel):
    """CORS headers attached to every response."""

    allow_origin: str = "*"
    allow_methods: str = "GET, POST, PATCH, DELETE, OPTIONS"
    allow_headers: str = "Content-Type"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
        }


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: PORT=8080, API__MAX_BODY_BYTES=65536, CORS__ALLOW_ORIGIN=https://crm.example.com
    """

    # Application metadata
    app_name: str = "CRM Clients API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "sqlite+aiosqlite:///./database.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Nested settings groups
    api: ApiSettings = ApiSettings()
    cors: CorsSettings = CorsSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
