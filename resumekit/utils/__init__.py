"""
Shared utilities for resumekit.

Common functionality used across contexts:
- Logger setup
- Text helpers
"""

from resumekit.utils.text_processing import split_nonempty_lines, trim_value

__all__ = ["split_nonempty_lines", "trim_value"]
