"""
Entry classification for counting and validation.

An entry is "filled" when the user has typed anything into it, and "complete"
when all four core fields are present. Blank placeholder entries kept by the
editor are neither, and are skipped by scoring and export.
"""

from typing import List, Sequence, TypeVar, Union

from resumekit.contexts.drafting.resume_data_structure import Entry, Project
from resumekit.utils.text_processing import trim_value

Record = TypeVar("Record", Entry, Project)


def is_filled_entry(entry: Entry) -> bool:
    return any(trim_value(value) for value in (entry.title, entry.subtitle, entry.date_range, entry.details))


def is_filled_project(project: Project) -> bool:
    text_fields = (project.title, project.description, project.live_url, project.github_url)
    return any(trim_value(value) for value in text_fields) or bool(project.tech_stack)


def is_filled(record: Union[Entry, Project]) -> bool:
    """True if any field of an entry or project has content."""
    if isinstance(record, Project):
        return is_filled_project(record)
    return is_filled_entry(record)


def is_complete(entry: Entry) -> bool:
    """True only when title, subtitle, date range and details are all non-blank."""
    return all(trim_value(value) for value in (entry.title, entry.subtitle, entry.date_range, entry.details))


def filter_filled(records: Sequence[Record]) -> List[Record]:
    """Filled entries or projects, in their original order."""
    return [record for record in records if is_filled(record)]
