# config/appconfig.py
"""
Application Configuration
Controls API surface, storage backend and logging
"""
from pathlib import Path
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Calculate the project root
BASE_DIR = Path(__file__).resolve().parent.parent


class AppSettings(BaseSettings):
    """Configuration for the MedScience API"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ============================================================================
    # API
    # ============================================================================
    APP_NAME: str = "MedScience API"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    # ============================================================================
    # STORAGE
    # ============================================================================
    # "memory" keeps everything in process memory (cleared on restart)
    # "database" uses SQLAlchemy with DATABASE_URL
    STORAGE_BACKEND: Literal["memory", "database"] = "memory"
    DATABASE_URL: str = f"sqlite+aiosqlite:///{BASE_DIR / 'medscience.db'}"
    DATABASE_ECHO: bool = False
    SEED_ON_STARTUP: bool = True

    # ============================================================================
    # PAGINATION
    # ============================================================================
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # ============================================================================
    # LOGGING
    # ============================================================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def LOGGING_CONFIG(self) -> dict:
        """dictConfig payload applied once at startup."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": self.LOG_LEVEL},
            "loggers": {
                "sqlalchemy.engine": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
                "openai": {"level": "WARNING"},
            },
        }


settings = AppSettings()
