"""
Drafting context logger.

Provides logging interface for the drafting context with automatic [draft] prefix.
All drafting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumekit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[draft]"


def setup_drafting_logger(log_dir: Path, store_path: Path = None) -> Path:
    """
    Setup logger for drafting context.

    Args:
        log_dir: Directory for this drafting session
        store_path: Key-value store file backing the session, recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"Store": store_path} if store_path else None
    return _setup_logger(context_name="draft", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [draft] prefix


def _log_info(message: str) -> None:
    """Log info message with [draft] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [draft] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [draft] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [draft] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level drafting-specific logging helpers


def log_hydration_fallback(reason: str, raw_length: int) -> None:
    """Log that a stored draft was replaced by the default document."""
    _log_warning(f"Stored draft unusable ({reason}); using default document")
    _log_debug(f"Discarded payload length: {raw_length}")


def log_mutation(operation: str, detail: str = "") -> None:
    """Log a write-through edit."""
    suffix = f" {detail}" if detail else ""
    _log_debug(f"{operation}{suffix}")
