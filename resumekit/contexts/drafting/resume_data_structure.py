"""
Resume Document Structure

Defines the canonical in-memory representation of a resume draft.
This structure is the interface between the Drafting, Scoring and Exporting contexts.

Drafting owns:
- Hydrating stored drafts into ResumeDocument instances
- Mutating ResumeDocument instances through the editing session

Scoring and Exporting only read ResumeDocument instances.

Field names are Python attributes; the persisted JSON keeps the editor's camelCase keys
(dateRange, techStack, liveUrl, githubUrl). Every field has a default, so downstream code
never checks for missing or legacy fields.
"""

import copy
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional

SKILL_GROUP_NAMES = ("technical", "soft", "tools")


def _record_to_dict(record: Any) -> Dict[str, Any]:
    """Convert a flat record dataclass to its persisted JSON shape."""
    json_keys = getattr(record, "JSON_KEYS", {})
    return {json_keys.get(f.name, f.name): getattr(record, f.name) for f in fields(record)}


def resolve_field_name(record_type: type, name: str) -> Optional[str]:
    """
    Resolve a field name given either as attribute name or as persisted JSON key.

    Args:
        record_type: Record dataclass (e.g., Entry, Project)
        name: "date_range" or "dateRange" style name

    Returns:
        Attribute name, or None if the record has no such field
    """
    attribute_names = [f.name for f in fields(record_type)]
    if name in attribute_names:
        return name
    for attribute, json_key in getattr(record_type, "JSON_KEYS", {}).items():
        if json_key == name:
            return attribute
    return None


@dataclass
class PersonalInfo:
    """Contact block at the top of the resume."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass
class Entry:
    """
    An education or experience record.

    Attributes:
        title: Degree or role (e.g., "B.Tech in Computer Science", "Frontend Developer")
        subtitle: Institution or company
        date_range: Free-text date range (e.g., "2019 - 2023")
        details: Free text, one bullet per line
    """

    JSON_KEYS: ClassVar[Dict[str, str]] = {"date_range": "dateRange"}

    title: str = ""
    subtitle: str = ""
    date_range: str = ""
    details: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass
class Project:
    """
    A portfolio item.

    Attributes:
        title: Project name
        description: Free text, one bullet per line
        tech_stack: Ordered list of technologies
        live_url: Deployed URL
        github_url: Repository URL
    """

    JSON_KEYS: ClassVar[Dict[str, str]] = {
        "tech_stack": "techStack",
        "live_url": "liveUrl",
        "github_url": "githubUrl",
    }

    title: str = ""
    description: str = ""
    tech_stack: List[str] = field(default_factory=list)
    live_url: str = ""
    github_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = _record_to_dict(self)
        data["techStack"] = list(self.tech_stack)
        return data


@dataclass
class SkillGroups:
    """Skills split into three ordered groups."""

    technical: List[str] = field(default_factory=list)
    soft: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)

    def get_group(self, name: str) -> List[str]:
        if name not in SKILL_GROUP_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def to_dict(self) -> Dict[str, Any]:
        return {name: list(getattr(self, name)) for name in SKILL_GROUP_NAMES}


@dataclass
class Links:
    """Profile links shown at the bottom of the resume."""

    github: str = ""
    linkedin: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _record_to_dict(self)


@dataclass
class ResumeDocument:
    """
    Structured representation of a complete resume draft.

    A freshly constructed ResumeDocument is the default empty draft: blank contact fields,
    one blank entry in education and experience, one blank project and no skills.

    Invariant: education, experience and projects are never empty. Hydration and the
    editing session both keep at least one (possibly blank) element in each list.
    """

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    education: List[Entry] = field(default_factory=lambda: [Entry()])
    experience: List[Entry] = field(default_factory=lambda: [Entry()])
    projects: List[Project] = field(default_factory=lambda: [Project()])
    skills: SkillGroups = field(default_factory=SkillGroups)
    links: Links = field(default_factory=Links)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the persisted JSON shape.

        Returns:
            Dict with keys personal, summary, education, experience, projects, skills, links
        """
        return {
            "personal": self.personal.to_dict(),
            "summary": self.summary,
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [project.to_dict() for project in self.projects],
            "skills": self.skills.to_dict(),
            "links": self.links.to_dict(),
        }

    def copy(self) -> "ResumeDocument":
        """Deep copy, so callers never share lists with this document."""
        return copy.deepcopy(self)
