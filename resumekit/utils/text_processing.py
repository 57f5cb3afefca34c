"""Text helpers shared by the drafting, scoring and exporting contexts."""

from typing import Any, List


def trim_value(value: Any) -> str:
    """
    Strip surrounding whitespace from a form value.

    Missing values (None, "") and anything that is not a string are treated as empty.

    Example:
        >>> trim_value("  Alex  ")
        'Alex'
        >>> trim_value(None)
        ''
    """
    if not isinstance(value, str):
        return ""
    return value.strip()


def split_nonempty_lines(text: Any) -> List[str]:
    """
    Split free text into trimmed, non-empty lines.

    Used for experience details and project descriptions, where each line is a bullet.

    Example:
        >>> split_nonempty_lines("Built X\\n\\n  Led Y  ")
        ['Built X', 'Led Y']
    """
    return [line.strip() for line in trim_value(text).split("\n") if line.strip()]
