"""Utility modules for the Docker CLI client."""

from .logging import setup_logging
from .id_generator import generate_transaction_id

__all__ = [
    "setup_logging",
    "generate_transaction_id",
]
