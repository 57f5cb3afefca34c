"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time for session directory names.

    Example:
        now()
        # "20261018_101500"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
