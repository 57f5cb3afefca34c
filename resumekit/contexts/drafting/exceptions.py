"""Custom exceptions for the drafting context."""

from typing import Iterable, Optional


class UnknownSectionError(ValueError):
    """
    Exception raised when an editing operation names a section that does not exist.

    Attributes:
        section: The section name that was requested
        allowed: Names that would have been accepted
    """

    def __init__(self, section: str, allowed: Iterable[str]):
        self.section = section
        self.allowed = list(allowed)
        super().__init__(f"Unknown section '{section}'. Expected one of: {self.allowed}")


class UnknownFieldError(ValueError):
    """
    Exception raised when an editing operation names a field the record does not have.

    Attributes:
        field_name: The field name that was requested
        record_type: Name of the record type (e.g., 'Entry', 'Project')
    """

    def __init__(self, field_name: str, record_type: Optional[str] = None):
        self.field_name = field_name
        self.record_type = record_type

        message = f"Unknown field '{field_name}'"
        if record_type:
            message += f" for {record_type}"
        super().__init__(message)


class InvalidPreferenceError(ValueError):
    """
    Exception raised when a display preference (template, accent color) is not one of the
    offered options.
    """

    pass
