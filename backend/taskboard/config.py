"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - admin_identity is only the initial owner: once persisted, the stored owner wins

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with a local SQLite file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from taskboard.core.storage_limits import StorageLimits


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./taskboard.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted PostgreSQL URLs come as postgresql://, asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Board
    admin_identity: str = "2vxsx-fae"
    max_entries: int = 100
    max_value_bytes: int = 1000

    @field_validator("admin_identity")
    @classmethod
    def admin_identity_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("admin_identity cannot be empty")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def storage_limits(self) -> StorageLimits:
        return StorageLimits(
            max_entries=self.max_entries, max_value_bytes=self.max_value_bytes,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
