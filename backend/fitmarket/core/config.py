# backend/fitmarket/core/config.py
import logging
import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_STORAGE_URL_MARKER


_BACKEND_ROOT = Path(__file__).resolve().parents[2]

logger = logging.getLogger(__name__)

# Load .env file only if not in CI
if not os.getenv("CI"):
    env_path = _BACKEND_ROOT / ".env"
    logger.debug("[CONFIG] Looking for .env at: %s (exists=%s)", env_path, env_path.exists())
    load_dotenv(env_path)


class Settings(BaseSettings):
    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Deployment environment name",
    )
    database_url: str = Field(
        default=f"sqlite:///{_BACKEND_ROOT / 'fitmarket.db'}",
        description="SQLAlchemy database URL",
    )
    database_echo: bool = Field(default=False, description="Echo SQL statements to the log")
    log_level: str = Field(default="INFO", description="Root log level")
    storage_url_marker: str = Field(
        default=DEFAULT_STORAGE_URL_MARKER,
        description="Substring identifying signed object-storage URLs",
    )
    slow_operation_threshold_seconds: float = Field(
        default=1.0,
        description="Service operations slower than this are logged as warnings",
    )

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("CI") else None,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        normalized = str(value or "INFO").strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            logger.warning("Unknown LOG_LEVEL=%s; defaulting to INFO", value)
            return "INFO"
        return normalized

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
