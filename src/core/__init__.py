"""Core utilities for the Docker CLI client."""

from .tracing import LogMarkerToken, LoggingMarkers, StartMarker, Tracer, TransactionId

__all__ = ["LogMarkerToken", "LoggingMarkers", "StartMarker", "Tracer", "TransactionId"]
