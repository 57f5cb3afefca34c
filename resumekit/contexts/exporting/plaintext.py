"""
Plain-Text Resume Export

Renders a ResumeDocument as the plain text used by "Copy Resume as Text", and decides
whether the export/print/copy actions should warn that the resume looks incomplete.

Layout (fixed order): Name, Contact, Summary, Education, Experience, Projects, Skills,
Links. Each section is a header line followed by its content, or "Not provided".
Sections are separated by a blank line. Within a section, entries go one per line with
their non-empty fields joined by " | ".

The output depends only on the document: no clock, locale or randomness.
"""

from typing import List, Optional, Sequence

from resumekit.contexts.drafting.entry_filters import filter_filled, is_filled
from resumekit.contexts.drafting.resume_data_structure import Entry, Project, ResumeDocument
from resumekit.contexts.exporting.logger import log_export_warning
from resumekit.utils.text_processing import trim_value

NOT_PROVIDED = "Not provided"
FIELD_SEPARATOR = " | "
INCOMPLETE_WARNING = "Your resume may look incomplete."

SKILL_GROUP_LABELS = (
    ("technical", "Technical Skills"),
    ("soft", "Soft Skills"),
    ("tools", "Tools & Technologies"),
)


def _join_fields(values: Sequence[str]) -> str:
    return FIELD_SEPARATOR.join(value for value in values if trim_value(value))


def format_entry_line(entry: Entry) -> str:
    return _join_fields([entry.title, entry.subtitle, entry.date_range, entry.details])


def format_project_line(project: Project) -> str:
    live_url = trim_value(project.live_url)
    github_url = trim_value(project.github_url)
    return _join_fields(
        [
            project.title,
            project.description,
            f"Tech: {', '.join(project.tech_stack)}" if project.tech_stack else "",
            f"Live: {live_url}" if live_url else "",
            f"GitHub: {github_url}" if github_url else "",
        ]
    )


def _format_contact(document: ResumeDocument) -> str:
    personal = document.personal
    values = [trim_value(personal.email), trim_value(personal.phone), trim_value(personal.location)]
    return FIELD_SEPARATOR.join(value for value in values if value)


def _format_skills(document: ResumeDocument) -> str:
    groups = document.skills
    if not (groups.technical or groups.soft or groups.tools):
        return ""
    return "\n".join(
        f"{label}: {', '.join(groups.get_group(name)) or 'None'}" for name, label in SKILL_GROUP_LABELS
    )


def _format_links(document: ResumeDocument) -> str:
    github = trim_value(document.links.github)
    linkedin = trim_value(document.links.linkedin)
    lines = [f"GitHub: {github}" if github else "", f"LinkedIn: {linkedin}" if linkedin else ""]
    return "\n".join(line for line in lines if line)


def build_plaintext_resume(document: ResumeDocument) -> str:
    """
    Render a document as plain text.

    Args:
        document: Canonical document; blank placeholder entries and projects are skipped

    Returns:
        Resume text, sections separated by blank lines, without a trailing newline
    """
    sections = [
        ("Name", trim_value(document.personal.name)),
        ("Contact", _format_contact(document)),
        ("Summary", trim_value(document.summary)),
        ("Education", "\n".join(format_entry_line(entry) for entry in filter_filled(document.education))),
        ("Experience", "\n".join(format_entry_line(entry) for entry in filter_filled(document.experience))),
        ("Projects", "\n".join(format_project_line(project) for project in filter_filled(document.projects))),
        ("Skills", _format_skills(document)),
        ("Links", _format_links(document)),
    ]

    lines: List[str] = []
    for index, (header, content) in enumerate(sections):
        if index:
            lines.append("")
        lines.append(header)
        lines.append(content or NOT_PROVIDED)

    return "\n".join(lines)


render = build_plaintext_resume


def has_minimum_export_data(document: ResumeDocument) -> bool:
    """True if the resume has a name and at least one filled experience entry or project."""
    has_name = bool(trim_value(document.personal.name))
    has_experience = any(is_filled(entry) for entry in document.experience)
    has_projects = any(is_filled(project) for project in document.projects)
    return has_name and (has_experience or has_projects)


def export_warning(document: ResumeDocument) -> Optional[str]:
    """
    Advisory warning shown before print, PDF download or copy.

    Returns:
        INCOMPLETE_WARNING if has_minimum_export_data() is False, otherwise None.
        The caller proceeds with the export either way.
    """
    if has_minimum_export_data(document):
        return None

    log_export_warning(INCOMPLETE_WARNING)
    return INCOMPLETE_WARNING
