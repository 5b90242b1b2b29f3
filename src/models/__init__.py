"""Data models for the Docker CLI client."""

from .container import ContainerId, ContainerIp
from .errors import (
    ErrorType,
    ErrorDetail,
    ErrorResponse,
    DockerClientException,
    InitializationError,
    ValidationError,
    ResourceNotFoundError,
    ProcessRunningError,
)

__all__ = [
    # Container models
    "ContainerId",
    "ContainerIp",
    # Error models
    "ErrorType",
    "ErrorDetail",
    "ErrorResponse",
    "DockerClientException",
    "InitializationError",
    "ValidationError",
    "ResourceNotFoundError",
    "ProcessRunningError",
]
