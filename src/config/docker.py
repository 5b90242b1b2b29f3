"""Docker CLI configuration."""

from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

# Standard installation locations, probed in order
DEFAULT_BINARY_PATHS = ("/usr/bin/docker", "/usr/local/bin/docker")


def split_paths(value):
    """Split a comma-separated path list, leaving sequences untouched."""
    if isinstance(value, str):
        return [path.strip() for path in value.split(",") if path.strip()]
    return value


class DockerConfig(BaseSettings):
    """Docker CLI invocation settings."""

    host: str | None = Field(default=None, alias="docker_host_address")
    binary_paths: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_BINARY_PATHS),
        alias="docker_binary_paths",
    )
    binary_path_lookup: bool = Field(default=True, alias="docker_binary_path_lookup")
    max_workers: int = Field(default=8, ge=1, le=256, alias="docker_max_workers")

    @field_validator("binary_paths", mode="before")
    @classmethod
    def parse_binary_paths(cls, v):
        """Accept a comma-separated string as well as a list."""
        return split_paths(v)

    class Config:
        env_prefix = ""
        extra = "ignore"


def normalize_host(value):
    """Strip a tcp:// scheme; a blank host means the local daemon."""
    if value is None:
        return None
    value = str(value).strip()
    if value.startswith("tcp://"):
        value = value[len("tcp://") :]
    return value or None
