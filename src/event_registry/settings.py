"""Application settings configuration."""

import logging
import sys
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment (or a local .env file)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Debugging Configuration
    debug: bool = False
    environment: str = "development"  # development, production
    log_level: str = "INFO"

    # Application Configuration
    app_name: str = "Event Registry"
    app_version: str = "0.1.0"
    app_host: str = "127.0.0.1"  # Uvicorn bind address
    app_port: int = 8080  # Uvicorn port
    api_prefix: str = "/api"

    # CORS Configuration
    enable_cors: bool = True
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    # Persistence Configuration
    mongo_url: str = "mongodb://localhost:27017"
    database_name: str = "event_registry"

    # Event listing defaults
    default_sort_field: str = "title"
    default_page_size: int = 8
    strict_sort_fields: bool = False  # Reject sort fields that are not part of the event schema

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, value: list[str] | str) -> list[str]:
        """Allow both comma-separated strings and list inputs."""
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


app_settings = Settings()


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("fastapi").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
