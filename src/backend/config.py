# src/backend/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",            # auto-load .env (optional; process env wins)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str | None = None
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_HOST: str = "127.0.0.1"
    DB_PORT: str = "5432"
    DB_NAME: str = "employee_records"
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_TIMEOUT: int = 30                # seconds

    # Startup helpers
    AUTO_INIT_DB: bool = True           # create tables on startup (idempotent)
    AUTO_SEED_DB: bool = True           # seed directories/divisions if empty

    # Misc
    TIMEZONE: str = "Asia/Dhaka"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Console (HTTP client side)
    CONSOLE_BASE_URL: str = "http://localhost:8080/api/employees"
    CONSOLE_TIMEOUT: float = 10.0       # seconds, per request
    CONSOLE_PAGE_SIZE: int = 5

    @property
    def database_url(self) -> str:
        """DATABASE_URL wins; otherwise build it from the DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()
