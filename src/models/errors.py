"""Error models and exception classes for the Docker CLI client."""

import time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorType(str, Enum):
    """Error type enumeration."""

    INITIALIZATION = "initialization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PROCESS_FAILED = "process_failed"


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: Optional[str] = Field(None, description="Field name for validation errors")
    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(None, description="Machine-readable error code")


class ErrorResponse(BaseModel):
    """Structured error summary, suitable for logs and CLI output."""

    error: str = Field(..., description="Main error message")
    error_type: ErrorType = Field(..., description="Error category")
    details: Optional[List[ErrorDetail]] = Field(None, description="Additional error details")
    transaction_id: Optional[str] = Field(None, description="Transaction the failure belongs to")
    timestamp: float = Field(default_factory=time.time, description="Error timestamp")

    class Config:
        use_enum_values = True


# Custom Exception Classes


class DockerClientException(Exception):
    """Base exception for the Docker CLI client."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.PROCESS_FAILED,
        details: Optional[List[ErrorDetail]] = None,
        transaction_id: Optional[str] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or []
        self.transaction_id = transaction_id
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to error response model."""
        return ErrorResponse(
            error=self.message,
            error_type=self.error_type,
            details=self.details if self.details else None,
            transaction_id=self.transaction_id,
        )


class InitializationError(DockerClientException):
    """No usable docker binary could be located."""

    def __init__(self, probed_paths: List[str], message: str = None, **kwargs):
        self.probed_paths = list(probed_paths)
        error_message = message or (
            f"Couldn't locate docker binary (tried: {', '.join(self.probed_paths)})."
        )
        super().__init__(
            message=error_message,
            error_type=ErrorType.INITIALIZATION,
            **kwargs,
        )


class ValidationError(DockerClientException):
    """A value was rejected before reaching the docker binary."""

    def __init__(self, message: str = "Validation failed", field: str = None, **kwargs):
        if field and "details" not in kwargs:
            kwargs["details"] = [ErrorDetail(field=field, message=message)]
        super().__init__(message=message, error_type=ErrorType.VALIDATION, **kwargs)


class ResourceNotFoundError(DockerClientException):
    """A queried attribute is absent from the daemon's report."""

    def __init__(self, resource: str, resource_id: str = None, **kwargs):
        message = f"{resource} not found"
        if resource_id:
            message += f": {resource_id}"
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=message,
            error_type=ErrorType.RESOURCE_NOT_FOUND,
            **kwargs,
        )


class ProcessRunningError(DockerClientException):
    """The docker command exited non-zero or could not be spawned."""

    def __init__(self, exit_code: int, stdout: str = "", stderr: str = "", **kwargs):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            message=f"code: {exit_code}, stdout: {stdout}, stderr: {stderr}",
            error_type=ErrorType.PROCESS_FAILED,
            **kwargs,
        )
