from enum import Enum
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class LogLevel(str, Enum):
    """Level names understood by the standard `logging` module."""
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; values come from the
    environment or a local `.env` file.
    """

    # --- Application Meta ---
    APP_NAME: str = "hexagonal-users"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FORMAT: LogFormat = LogFormat.JSON
    OTEL_SERVICE_NAME: str = "hexagonal-users"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        # Accept `debug`, ` Info ` etc. from the environment
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def docs_enabled(self) -> bool:
        """Interactive API docs are served everywhere except production."""
        return self.APP_ENV != AppEnv.PRODUCTION

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
