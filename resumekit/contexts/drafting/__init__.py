"""
Drafting Context

Responsibilities:
- Canonical resume data model (ResumeDocument and its records)
- Hydration of stored drafts, including upgrades of legacy payload shapes
- Tag/skill normalization and entry classification
- Key-value store abstraction and display preferences
- Editing session with write-through persistence (resumekit.contexts.drafting.session)

Owns: ResumeDocument, the persisted JSON shape, storage keys
Never: Scores or renders documents (the session only delegates to Scoring/Exporting)
"""

from resumekit.contexts.drafting.defaults import (
    create_blank_entry,
    create_blank_project,
    create_default_document,
    create_sample_document,
)
from resumekit.contexts.drafting.entry_filters import (
    filter_filled,
    is_complete,
    is_filled,
    is_filled_entry,
    is_filled_project,
)
from resumekit.contexts.drafting.hydrator import hydrate, serialize
from resumekit.contexts.drafting.normalizer import (
    add_tag,
    add_unique_tags,
    get_all_skills,
    normalize_tag_list,
    resolve_skill_groups,
)
from resumekit.contexts.drafting.resume_data_structure import (
    Entry,
    Links,
    PersonalInfo,
    Project,
    ResumeDocument,
    SkillGroups,
)
from resumekit.contexts.drafting.store import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    # Data structure classes
    "ResumeDocument",
    "PersonalInfo",
    "Entry",
    "Project",
    "SkillGroups",
    "Links",
    # Defaults
    "create_blank_entry",
    "create_blank_project",
    "create_default_document",
    "create_sample_document",
    # Normalization and classification
    "normalize_tag_list",
    "resolve_skill_groups",
    "get_all_skills",
    "add_tag",
    "add_unique_tags",
    "is_filled",
    "is_filled_entry",
    "is_filled_project",
    "is_complete",
    "filter_filled",
    # Hydration
    "hydrate",
    "serialize",
    # Stores
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
]
