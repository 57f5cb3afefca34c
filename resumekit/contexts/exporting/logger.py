"""
Exporting context logger.

Provides logging interface for the exporting context with automatic [export] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[export]"


def _log_warning(message: str) -> None:
    """Log warning message with [export] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_export_warning(message: str) -> None:
    """Log that the export gate flagged an incomplete resume."""
    _log_warning(f"Incomplete resume flagged: {message}")
