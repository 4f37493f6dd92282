"""Configuration for the wizard, read from the environment and CLI options."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_METADATA_URL = "https://start.spring.io/metadata/client"
DEFAULT_DOWNLOAD_URL = "https://start.spring.io/starter.zip"


class WizardSettings(BaseSettings):
    """Settings for one wizard run.

    Every field can be overridden through an ``INITIALIZR_``-prefixed
    environment variable, e.g. ``INITIALIZR_METADATA_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="INITIALIZR_",
        extra="ignore",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    # Endpoints
    metadata_url: str = Field(
        default=DEFAULT_METADATA_URL, description="Metadata endpoint of the generator service"
    )
    download_url: str = Field(
        default=DEFAULT_DOWNLOAD_URL, description="Archive endpoint of the generator service"
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    # Project defaults
    default_group_id: str = Field(default="com.example", description="Default group id")
    default_artifact_id: str = Field(default="demo", description="Default artifact id")
    description: str = Field(
        default="Demo project for Spring Boot", description="Description sent with every project"
    )

    # Output
    output_dir: str = Field(default=".", description="Directory the archive is written to")
    fallback_archive_name: str = Field(
        default="starter", min_length=1, description="Archive name when no artifact id is set"
    )
    archive_extension: str = Field(default=".zip", description="Archive file extension")

    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("metadata_url", "download_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL: {v}. Must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Logging level as understood by the logging module."""
        return logging.getLevelName(self.log_level)
