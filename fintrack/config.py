"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Fintrack"
    log_level: str = "INFO"

    # Record store
    database_url: str = "sqlite:///./data/records.sqlite"

    # Dashboard
    dashboard_trend_months: int = 6

    # Server
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
