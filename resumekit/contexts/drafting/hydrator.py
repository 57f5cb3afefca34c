"""
Draft Hydration

Turns the raw text persisted by the editor into a canonical ResumeDocument, and back.

Every historical payload shape is upgraded here and nowhere else:
- skills stored as one comma-separated string become the "technical" group
- projects that used subtitle/details (the Entry shape) get techStack/description
- missing, null or wrongly typed fields fall back to their defaults

A payload that is absent, unparsable or not a JSON object yields the default document.
Hydration never raises and never returns a partially applied draft.
"""

import json
from typing import Any, Dict, List, Optional

from resumekit.contexts.drafting.defaults import (
    create_blank_entry,
    create_blank_project,
    create_default_document,
)
from resumekit.contexts.drafting.logger import log_hydration_fallback
from resumekit.contexts.drafting.normalizer import normalize_tag_list, resolve_skill_groups
from resumekit.contexts.drafting.resume_data_structure import (
    Entry,
    Links,
    PersonalInfo,
    Project,
    ResumeDocument,
)


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _hydrate_personal(value: Any) -> PersonalInfo:
    data = _mapping(value)
    return PersonalInfo(
        name=_string(data.get("name")),
        email=_string(data.get("email")),
        phone=_string(data.get("phone")),
        location=_string(data.get("location")),
    )


def _hydrate_links(value: Any) -> Links:
    data = _mapping(value)
    return Links(github=_string(data.get("github")), linkedin=_string(data.get("linkedin")))


def _hydrate_entry(value: Any) -> Entry:
    data = _mapping(value)
    return Entry(
        title=_string(data.get("title")),
        subtitle=_string(data.get("subtitle")),
        date_range=_string(data.get("dateRange")),
        details=_string(data.get("details")),
    )


def _hydrate_project(value: Any) -> Project:
    """
    Map a stored project onto the current Project shape.

    Legacy projects were stored as entries: details held the description and subtitle
    held a comma-separated tech stack.
    """
    data = _mapping(value)

    tech_stack = data.get("techStack")
    if tech_stack is None or tech_stack == "":
        tech_stack = data.get("subtitle")

    return Project(
        title=_string(data.get("title")),
        description=_string(data.get("description")) or _string(data.get("details")),
        tech_stack=normalize_tag_list(tech_stack),
        live_url=_string(data.get("liveUrl")),
        github_url=_string(data.get("githubUrl")),
    )


def _hydrate_entries(value: Any) -> List[Entry]:
    if isinstance(value, list) and value:
        return [_hydrate_entry(item) for item in value]
    return [create_blank_entry()]


def _hydrate_projects(value: Any) -> List[Project]:
    if isinstance(value, list) and value:
        return [_hydrate_project(item) for item in value]
    return [create_blank_project()]


def hydrate(raw_value: Optional[str]) -> ResumeDocument:
    """
    Build a canonical ResumeDocument from a persisted draft.

    Args:
        raw_value: JSON text from the key-value store, or None if nothing is stored

    Returns:
        New ResumeDocument; education, experience and projects each hold at least one element

    Examples:
        >>> hydrate(None) == create_default_document()
        True
        >>> hydrate('{"skills": "React, Node"}').skills.technical
        ['React', 'Node']
    """
    if not raw_value:
        return create_default_document()

    try:
        parsed = json.loads(raw_value)
    except (TypeError, ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; deeply nested input raises RecursionError
        log_hydration_fallback(f"parse error: {e}", len(str(raw_value)))
        return create_default_document()

    if not isinstance(parsed, dict):
        log_hydration_fallback(f"expected a JSON object, got {type(parsed).__name__}", len(raw_value))
        return create_default_document()

    return ResumeDocument(
        personal=_hydrate_personal(parsed.get("personal")),
        summary=_string(parsed.get("summary")),
        education=_hydrate_entries(parsed.get("education")),
        experience=_hydrate_entries(parsed.get("experience")),
        projects=_hydrate_projects(parsed.get("projects")),
        skills=resolve_skill_groups(parsed.get("skills")),
        links=_hydrate_links(parsed.get("links")),
    )


def serialize(document: ResumeDocument) -> str:
    """
    Serialize a document to the JSON text stored under the draft key.

    hydrate(serialize(doc)) reproduces any document that came out of hydrate().
    """
    return json.dumps(document.to_dict(), ensure_ascii=False, separators=(",", ":"))
