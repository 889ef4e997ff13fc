"""
Observability for Gridboard.

Provides structured and human-readable logging.
"""

from gridboard.observability.logging import (
    GridboardLogger,
    HumanReadableFormatter,
    StructuredFormatter,
    configure_logging,
    configure_logging_from_env,
    get_logger,
)

__all__ = [
    "GridboardLogger",
    "HumanReadableFormatter",
    "StructuredFormatter",
    "configure_logging",
    "configure_logging_from_env",
    "get_logger",
]
