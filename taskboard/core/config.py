"""
Application settings loaded from environment variables (and `.env`).
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    MODE: str = "production"  # 'production', 'debug', 'test'
    PROJECT_NAME: str = "Task Board Service"

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://taskboard:taskboard@db:5432/taskboard"
    DATABASE_EXTERNAL_URL: Optional[str] = None  # localhost access while debugging

    # Observability
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: Optional[str] = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1
    SLOW_REQUEST_THRESHOLD: float = 1.0  # seconds

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 50052
    CORS_ORIGINS: List[str] = ["*"]


settings = Settings()
