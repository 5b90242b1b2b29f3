"""Transaction tracing for docker invocations.

Every docker command runs inside a span: it is opened with ``started`` and
closed exactly once with either ``finished`` or ``failed``. Spans are written
as structured log events that share the transaction id, so one logical
operation can be followed across calls.

Usage:
    transid = TransactionId.generate()
    start = transid.started(self, LoggingMarkers.invoker_docker_cmd("pull"), "running docker pull")
    try:
        ...
    except Exception as e:
        transid.failed(self, start, str(e), logging.ERROR)
        raise
    transid.finished(self, start)
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Protocol

import structlog

from ..utils.id_generator import generate_transaction_id

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LogMarkerToken:
    """Names one phase of a traced action, e.g. ``invoker_docker.pull_start``."""

    component: str
    action: str
    state: str

    def as_finish(self) -> "LogMarkerToken":
        return replace(self, state="finish")

    def as_error(self) -> "LogMarkerToken":
        return replace(self, state="error")

    def __str__(self) -> str:
        return f"{self.component}_{self.action}_{self.state}"


class LoggingMarkers:
    """Marker factory for the actions this package traces."""

    INVOKER = "invoker"

    @staticmethod
    def invoker_docker_cmd(cmd: str) -> LogMarkerToken:
        return LogMarkerToken(LoggingMarkers.INVOKER, f"docker.{cmd}", "start")


@dataclass(frozen=True)
class StartMarker:
    """Handle of an open span."""

    token: LogMarkerToken
    start: float = field(default_factory=time.monotonic)

    def elapsed_ms(self) -> float:
        return (time.monotonic() - self.start) * 1000


def _owner_name(owner: Any) -> str:
    if isinstance(owner, str):
        return owner
    if isinstance(owner, type):
        return owner.__name__
    return type(owner).__name__


@dataclass(frozen=True)
class TransactionId:
    """Correlation handle passed explicitly through every docker operation."""

    id: str

    @classmethod
    def generate(cls) -> "TransactionId":
        return cls(generate_transaction_id())

    def _bind(self, owner: Any, token: LogMarkerToken):
        return logger.bind(
            transaction_id=self.id,
            owner=_owner_name(owner),
            marker=str(token),
        )

    def started(
        self,
        owner: Any,
        token: LogMarkerToken,
        message: str = "",
        level: int = logging.INFO,
    ) -> StartMarker:
        """Open a span and log its start."""
        self._bind(owner, token).log(level, message or "started")
        return StartMarker(token=token)

    def finished(
        self,
        owner: Any,
        start: StartMarker,
        message: Optional[str] = None,
        level: int = logging.INFO,
    ) -> None:
        """Close a span successfully."""
        self._bind(owner, start.token.as_finish()).log(
            level,
            message or "finished",
            duration_ms=round(start.elapsed_ms(), 2),
        )

    def failed(
        self,
        owner: Any,
        start: StartMarker,
        message: Optional[str] = None,
        level: int = logging.WARNING,
    ) -> None:
        """Close a span with an error."""
        self._bind(owner, start.token.as_error()).log(
            level,
            message or "failed",
            duration_ms=round(start.elapsed_ms(), 2),
        )

    def __str__(self) -> str:
        return f"#tid_{self.id}"


class Tracer(Protocol):
    """What the docker client needs from a transaction handle."""

    def started(self, owner: Any, token: LogMarkerToken, message: str = "", level: int = ...) -> Any: ...

    def finished(self, owner: Any, start: Any, message: Optional[str] = None, level: int = ...) -> None: ...

    def failed(self, owner: Any, start: Any, message: Optional[str] = None, level: int = ...) -> None: ...
