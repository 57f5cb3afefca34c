"""
Exporting Context

Responsibilities:
- Plain-text rendering of a resume document
- Export-readiness gate behind the incomplete-resume warning

Never: Blocks an export; the gate is advisory
"""

from resumekit.contexts.exporting.plaintext import (
    INCOMPLETE_WARNING,
    build_plaintext_resume,
    export_warning,
    has_minimum_export_data,
)

__all__ = [
    "INCOMPLETE_WARNING",
    "build_plaintext_resume",
    "export_warning",
    "has_minimum_export_data",
]
