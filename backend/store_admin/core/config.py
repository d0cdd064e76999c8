"""Application configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings exposed via dependency injection throughout the app."""

    # Read .env with BOM tolerance; case-sensitive keys
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=True,
    )

    APP_NAME: str = "Store Admin API"
    ENV: str = "dev"  # dev | staging | prod
    DEBUG: bool = False

    # JWT issued by the identity provider
    SECRET_KEY: str  # set via env/.env
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "store-admin-idp"
    JWT_AUDIENCE: str = "store-admin-api"

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = Field(default_factory=list)

    # DB
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 3306
    DB_USER: str = "storeadmin"
    DB_PASSWORD: str = ""  # set via env/.env
    DB_NAME: str = "store_admin"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_ISOLATION_LEVEL: str = "READ COMMITTED"
    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set
    # (e.g. sqlite+aiosqlite:///./store_admin.db for local work).
    DB_URL: str | None = None

    # Maximum accepted request body size.
    MAX_BODY_BYTES: int = 1 * 1024 * 1024  # 1 MB

    # Rate limiting, see store_admin.core.rate_limit for syntax.
    RATE_LIMIT_ENABLED: bool = True
    API_RATE_LIMIT: str = "120/minute"

    # Message catalogue used by the field validator ("en" or "pt").
    VALIDATION_LOCALE: str = "en"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"mysql+aiomysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
        )


settings = Settings()
