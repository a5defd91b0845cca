"""Application configuration module.

This module contains settings for the URL shortener client,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Set up basic logger for config module
logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent


DEFAULT_API_URL = "https://url-shortner-bchm.onrender.com"


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "URL Shortener"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Web client for a remote URL shortening service"
    DEBUG: bool = False

    # Server settings for ``python -m app``
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Remote shortening service
    API_URL: str = DEFAULT_API_URL
    API_TIMEOUT: float = 10.0  # seconds per request

    # Origin used to build displayed short links; request origin when unset
    PUBLIC_ORIGIN: Optional[str] = None

    # Delay before returning to the submission view after a failed resolve
    RECOVERY_DELAY_SECONDS: float = 2.0

    # How long a status banner stays up before hiding itself
    BANNER_AUTO_HIDE_SECONDS: float = 6.0

    # CORS settings
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "app.log"
    LOG_FILE_ENABLED: bool = True
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"
    LOG_JSON: bool = True
    REQUEST_LOGGING_ENABLED: bool = True

    # Validators
    @field_validator("API_URL")
    def validate_api_url(cls, v: str) -> str:
        """Fall back to the default service when the address is blank."""
        v = v.strip().rstrip("/")
        return v or DEFAULT_API_URL

    @field_validator("PUBLIC_ORIGIN")
    def validate_public_origin(cls, v: Optional[str]) -> Optional[str]:
        """Blank means the request origin is used."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @field_validator("RECOVERY_DELAY_SECONDS", "API_TIMEOUT", "BANNER_AUTO_HIDE_SECONDS")
    def validate_positive(cls, v: float) -> float:
        if v < 0:
            raise ValueError("must not be negative")
        return v

    @field_validator("CORS_ORIGINS")
    def validate_list_or_string(cls, v: Union[List[str], str]) -> List[str]:
        """Convert comma-separated string to list if needed."""
        if isinstance(v, str):
            if not v.strip():
                return []
            if v == "*":
                return ["*"]
            return [item.strip() for item in v.split(",")]
        return v

    def model_post_init(self, __context: Any) -> None:
        if self.ENVIRONMENT == EnvironmentType.PRODUCTION and self.DEBUG:
            logger.warning("DEBUG is enabled in production environment")


# Create a singleton instance of the settings
settings = Settings()
