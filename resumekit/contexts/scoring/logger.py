"""
Scoring context logger.

Provides logging interface for the scoring context with automatic [score] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[score]"


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_score_result(result) -> None:
    """
    Log a score with its band and missing checks.

    Args:
        result: AtsResult from calculate_ats_score()
    """
    _log_debug(f"ATS score {result.score}/100 ({result.band}), {len(result.suggestions)} suggestion(s)")
