"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the WanderPlan backend application.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MAX_DESTINATION_LENGTH = 100
MAX_TRAVELERS_LENGTH = 200
MAX_INTEREST_LENGTH = 50
MAX_INTERESTS_COUNT = 20
MAX_FEEDBACK_LENGTH = 1000
MIN_TRIP_DURATION = 1
MAX_TRIP_DURATION = 14
DEFAULT_TRIP_DURATION = 3
DEFAULT_TRAVELERS = "2 Adults, 1 Child"

# AI Model Configuration
GEMINI_MODEL = "gemini-2.5-flash"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "WanderPlan Backend"
    DEBUG: bool = False

    # AI Configuration
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = GEMINI_MODEL
    AI_REQUEST_TIMEOUT: int = 60  # seconds
    AI_TEMPERATURE: float = 0.7

    # Environment
    ENVIRONMENT: str = "development"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/wanderplan.log"
    LOG_LEVEL: str = "INFO"
    PRODUCTION_FRONTEND_URL: str | None = None


settings = Settings()
