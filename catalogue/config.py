"""
Configuration settings for the Book Catalogue API.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from catalogue.models import IdStrategy


class CatalogueConfig(BaseSettings):
    """
    Service configuration.
    Uses pydantic BaseSettings for environment variable management.
    """

    # API Settings
    api_title: str = "Book Catalogue API"
    api_version: str = "1.0.0"

    # Server Settings
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, description="Listening port (PORT)")
    debug: bool = False

    # Storage Settings
    books_file: str = Field(default="books.json", description="JSON file backing the store")
    id_strategy: IdStrategy = IdStrategy.RANDOM
    max_random_id: int = 1000

    # CORS Settings
    cors_origins: list = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["*"]
    cors_allow_headers: list = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Ensure the port is bindable."""
        if v < 1 or v > 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("max_random_id")
    @classmethod
    def validate_max_random_id(cls, v):
        """Ensure the random id range is not empty."""
        if v < 1:
            raise ValueError("max_random_id must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ["json", "console"]
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {valid_formats}")
        return v.lower()

    def get_books_file_path(self) -> Path:
        """Get books file path as Path object."""
        return Path(self.books_file)

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path as Path object."""
        if self.log_file:
            return Path(self.log_file)
        return None


# Global config instance
config = CatalogueConfig()
