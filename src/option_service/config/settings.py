from functools import lru_cache
from typing import Literal
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment.

    Add new settings here following this pattern:
    - Use type hints
    - Provide sensible defaults for optional settings
    - Use SecretStr for sensitive values
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Option Service"
    app_version: str = "0.1.0"
    environment: Literal["local", "dev", "staging", "prod"] = "local"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: SecretStr = SecretStr("sqlite+aiosqlite:///./options.db")
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo_sql: bool = False
    db_create_tables: bool = True  # create missing tables at startup (use Alembic in prod)

    # Observability
    log_level: int = 20  # INFO by default (DEBUG=10, INFO=20, WARNING=30, ERROR=40)
    log_format: Literal["json", "console"] = "json"

    # Sentry Error Tracking
    sentry_dsn: str | None = None
    sentry_environment: str | None = None
    sentry_sample_rate: float = 1.0
    sentry_traces_sample_rate: float = 0.0

    # CORS Settings
    cors_origins: list[str] = Field(default_factory=list)
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "OPTIONS"]
    )
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"])
    cors_max_age: int = 600

    # Option entities
    api_prefix: str = "/api"
    enabled_entities: list[str] = Field(default_factory=list)  # empty = every entity
    id_random_upper_bound: int = 10_000_000
    reject_duplicate_names_in_batch: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.get_secret_value().startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
