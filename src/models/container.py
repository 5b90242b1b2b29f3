"""Container value types.

Both types wrap the opaque strings the docker daemon hands out. They are
immutable and can never hold an empty value.
"""

from dataclasses import dataclass

from .errors import ValidationError


@dataclass(frozen=True)
class ContainerId:
    """Identifier of a running or stopped container, as assigned by docker."""

    as_string: str

    def __post_init__(self):
        if not self.as_string:
            raise ValidationError("ContainerId must not be empty", field="as_string")

    def __str__(self) -> str:
        return self.as_string


@dataclass(frozen=True)
class ContainerIp:
    """IP address of a container within one network."""

    as_string: str

    def __post_init__(self):
        if not self.as_string:
            raise ValidationError("ContainerIp must not be empty", field="as_string")

    def __str__(self) -> str:
        return self.as_string
