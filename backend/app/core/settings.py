"""Application settings loaded from the environment and an optional .env file."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Stockup"
    api_version: str = "1.0.0"
    environment: str = "development"
    secret_key: str = "CHANGE_ME"
    access_token_expire_minutes: int = 24 * 60
    database_url: str = "sqlite:///./stockup.db"
    # Upper bound for a single statement against the database.
    db_timeout_seconds: int = 3
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="STOCKUP_", extra="ignore")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
