# app/core/config.py
"""
Application configuration.

Loads settings from environment variables and an optional .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the API and the catalog loader scripts.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        database_url: SQLAlchemy URL of the catalog database.
        sql_echo: Print emitted SQL to the log.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Jeep Sales Service"
    version: str = "0.1.0"
    database_url: str = "sqlite:///db.sqlite"  # file in project root
    sql_echo: bool = False
    log_level: str = "INFO"


settings = Settings()
