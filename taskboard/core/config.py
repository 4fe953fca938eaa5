"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SECRET_KEY is validated at load time.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults except secret_key, which must be set
    (it verifies bearer tokens on every request).
    """

    # App
    app_name: str = "taskboard"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: any SQLAlchemy async URL (postgresql+asyncpg://..., sqlite+aiosqlite://...)
    database_url: str = "sqlite+aiosqlite:///./taskboard.db"
    database_echo: bool = False
    # No migrations ship with the service; create tables on startup when True.
    database_auto_create: bool = True
    # Pool overrides (ignored for SQLite)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Security (token verification only; issuance lives in the auth service)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Real-time push: seconds one WebSocket send may take before the client is dropped
    ws_send_timeout_seconds: float = Field(default=5.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env: SECRET_KEY and a known token algorithm."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32. "
                "It must match the key used by the service that issues tokens."
            )
        if not self.algorithm.startswith("HS"):
            raise ValueError(
                f"Only HMAC token algorithms are supported, got: {self.algorithm!r}"
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        """allowed_origins split into a list (empty entries dropped)."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_sqlite(self) -> bool:
        """True when database_url points at SQLite."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
