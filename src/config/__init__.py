"""Configuration management for the Docker CLI client.

This module provides a unified Settings class that keeps flat, environment
friendly fields while organizing settings into logical groups.

Usage:
    from src.config import settings

    # Access grouped settings
    settings.docker.binary_paths
    settings.logging.level

    # Or use the flat access
    settings.docker_binary_paths
    settings.log_level
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Import grouped configurations
from .docker import DEFAULT_BINARY_PATHS, DockerConfig, normalize_host, split_paths
from .logging import LoggingConfig


class Settings(BaseSettings):
    """Application settings with environment variable support.

    This class provides both:
    1. Grouped access via nested configs (settings.docker.host)
    2. Flat access (settings.docker_host_address)
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Docker CLI Configuration
    docker_host_address: str | None = Field(
        default=None,
        description="Remote daemon address passed as --host tcp://<address> (empty = local daemon)",
    )
    docker_binary_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_BINARY_PATHS),
        description="Ordered candidate locations of the docker binary",
    )
    docker_binary_path_lookup: bool = Field(
        default=True,
        description="Fall back to a PATH lookup when no candidate location is executable",
    )
    docker_max_workers: int = Field(
        default=8,
        ge=1,
        le=256,
        description="Threads available to blocking docker CLI calls (one per in-flight command)",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: str | None = Field(default=None)
    log_max_size_mb: int = Field(default=100, ge=1)
    log_backup_count: int = Field(default=5, ge=1)

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator("docker_binary_paths", mode="before")
    @classmethod
    def parse_binary_paths(cls, v):
        """Parse comma-separated binary paths into a list."""
        return split_paths(v)

    @field_validator("docker_host_address", mode="before")
    @classmethod
    def normalize_host_address(cls, v):
        """Treat a blank host as the local daemon and strip a tcp:// scheme."""
        return normalize_host(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Only json and console rendering are supported."""
        if v.lower() not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return v.lower()

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def docker(self) -> DockerConfig:
        """Access Docker CLI configuration group."""
        return DockerConfig(
            docker_host_address=self.docker_host_address,
            docker_binary_paths=self.docker_binary_paths,
            docker_binary_path_lookup=self.docker_binary_path_lookup,
            docker_max_workers=self.docker_max_workers,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(
            log_level=self.log_level,
            log_format=self.log_format,
            log_file=self.log_file,
            log_max_size_mb=self.log_max_size_mb,
            log_backup_count=self.log_backup_count,
        )


# Global settings instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "DockerConfig",
    "LoggingConfig",
    "DEFAULT_BINARY_PATHS",
    "normalize_host",
]
