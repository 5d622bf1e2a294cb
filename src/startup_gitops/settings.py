"""CLI settings."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tool settings, read from GITOPS_* environment variables."""

    # Configuration document
    config_path: str = "gitops.config.json"

    # Dotenv files searched for credentials, first definition wins
    env_files: List[str] = [".env.local", ".env"]

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="GITOPS_", extra="ignore")


# Global settings instance
settings = Settings()
