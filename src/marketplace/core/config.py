from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Project Marketplace API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_create_tables: bool = False  # Create tables at startup instead of running Alembic

    # CORS
    cors_origins: list[str] = ["*"]

    # Error reporting (Sentry)
    sentry_dsn: str | None = None  # If not set, errors are only logged
    sentry_traces_sample_rate: float = 0.0
    expose_error_details: bool | None = None  # Defaults to True outside production

    # Identity provider webhooks
    webhook_secret: str | None = None  # "whsec_..." - signatures are not checked if unset

    # Password hashing
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("DATABASE_URL must not be empty")
        return v

    @property
    def show_error_details(self) -> bool:
        """Whether 500 responses echo the exception text back to the caller."""
        if self.expose_error_details is not None:
            return self.expose_error_details
        return self.app_env != "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
