"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.enums import WeekStart


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Workout Tracker API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (hosted PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "postgres"
    database_ssl_mode: str = "require"
    # Full async URL; when set it wins over the host/port fields (e.g. sqlite+aiosqlite for local runs)
    database_url_override: str | None = None

    # Pool (production tuning)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Hosted auth provider (GoTrue-compatible REST API)
    auth_url: str = "http://localhost:9999"
    auth_anon_key: str = ""
    auth_service_role_key: str = ""  # Admin key, needed for account deletion
    auth_timeout_seconds: float = 10.0

    # Statistics
    week_starts_on: WeekStart = WeekStart.SUNDAY

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "sslmode=require") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?{ssl_query}"
        )

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (asyncpg driver)."""
        if self.database_url_override:
            return self.database_url_override
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={self.database_ssl_mode}")

    @property
    def sync_database_url(self) -> str:
        """URL for Alembic: the override with its async driver swapped out, else database_url."""
        if self.database_url_override:
            return self.database_url_override.replace("+asyncpg", "+psycopg2").replace("+aiosqlite", "")
        return self.database_url

    @property
    def is_postgres(self) -> bool:
        return self.async_database_url.startswith("postgresql")

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins: anything in debug, localhost in development, CORS_ORIGINS otherwise."""
        if self.debug:
            return ["*"]
        if self.environment == "development":
            return ["http://localhost:3000", "http://127.0.0.1:3000"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
