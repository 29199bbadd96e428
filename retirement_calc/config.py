"""
Application settings.
Loaded from environment variables (prefix ``RETIREMENT_``) or a local ``.env``.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the API process."""

    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # rotating file sink is only added when a path is configured
    LOG_FILE: Optional[str] = None
    LOG_ROTATION: str = "10 MB"

    API_HOST: str = "127.0.0.1"
    API_PORT: int = 5000
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(
        env_prefix="RETIREMENT_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
