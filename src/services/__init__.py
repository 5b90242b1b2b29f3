"""Services module for the Docker CLI client."""

from .interfaces import DockerApi
from .container import DockerClient, ProcessRunner, create_process_executor

__all__ = [
    "DockerApi",
    "DockerClient",
    "ProcessRunner",
    "create_process_executor",
]
