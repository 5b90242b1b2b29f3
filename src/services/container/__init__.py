"""Container management services.

This package provides the docker CLI client split into:
- client.py: Docker binary discovery and lifecycle commands
- process.py: Blocking process execution on a bounded executor
"""

from .client import DockerClient, NO_VALUE_SENTINEL, find_docker_binary
from .process import ProcessRunner, create_process_executor

__all__ = [
    "DockerClient",
    "NO_VALUE_SENTINEL",
    "find_docker_binary",
    "ProcessRunner",
    "create_process_executor",
]
