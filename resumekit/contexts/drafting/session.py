"""
Editing Session

Owns the ResumeDocument for one editing session. The document is hydrated once from the
injected store and written back after every mutation (write-through, no batching).

Each mutation replaces the affected record rather than editing it in place, so a document
handed out by `document` is never changed behind the caller's back.
"""

from dataclasses import replace
from typing import Dict, List, Optional

from resumekit.contexts.drafting.defaults import (
    ACCENT_COLOR_STORAGE_KEY,
    ACCENT_OPTIONS,
    PROJECT_DESCRIPTION_MAX_LENGTH,
    STORAGE_KEY,
    SUGGESTED_SKILLS,
    TEMPLATE_OPTIONS,
    TEMPLATE_STORAGE_KEY,
    create_blank_entry,
    create_blank_project,
    create_sample_document,
)
from resumekit.contexts.drafting.exceptions import (
    InvalidPreferenceError,
    UnknownFieldError,
    UnknownSectionError,
)
from resumekit.contexts.drafting.hydrator import hydrate, serialize
from resumekit.contexts.drafting.logger import _log_info, log_mutation
from resumekit.contexts.drafting.normalizer import (
    add_tag,
    add_unique_tags,
    normalize_tag_list,
    remove_tag,
    resolve_skill_groups,
)
from resumekit.contexts.drafting.resume_data_structure import (
    SKILL_GROUP_NAMES,
    Entry,
    Links,
    PersonalInfo,
    Project,
    ResumeDocument,
    SkillGroups,
    resolve_field_name,
)
from resumekit.contexts.drafting.store import (
    KeyValueStore,
    get_stored_accent_color,
    get_stored_template,
)
from resumekit.contexts.exporting.plaintext import build_plaintext_resume, export_warning
from resumekit.contexts.scoring.ats_scorer import AtsResult, calculate_ats_score

ENTRY_SECTIONS = ("education", "experience")


def _require_field(record_type: type, name: str) -> str:
    attribute = resolve_field_name(record_type, name)
    if attribute is None:
        raise UnknownFieldError(name, record_type.__name__)
    return attribute


class EditingSession:
    """
    Field-by-field editing of a resume draft backed by a key-value store.

    Example:
        store = InMemoryStore()
        session = EditingSession(store)
        session.update_personal("name", "Alex Carter")
        session.add_skill("technical", "React")
        print(session.ats_result.score)
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._raw_value: Optional[str] = store.get(STORAGE_KEY)
        self._document = hydrate(self._raw_value)

    @property
    def document(self) -> ResumeDocument:
        """Current draft (a copy; edit through the session methods)."""
        return self._document.copy()

    def _save(self, document: ResumeDocument, operation: str, detail: str = "") -> None:
        """Write a document to the store, then adopt it. A failed write leaves the session unchanged."""
        raw_value = serialize(document)
        self.store.set(STORAGE_KEY, raw_value)
        self._document = document
        self._raw_value = raw_value
        log_mutation(operation, detail)

    def sync_from_store(self) -> bool:
        """
        Re-read the stored draft and re-hydrate if another writer changed it.

        Returns:
            True if the document was replaced
        """
        latest = self.store.get(STORAGE_KEY)
        if latest == self._raw_value:
            return False

        self._raw_value = latest
        self._document = hydrate(latest)
        _log_info("Draft changed in store; reloaded")
        return True

    # =========================================================================
    # PERSONAL, SUMMARY, LINKS
    # =========================================================================

    def update_personal(self, field_name: str, value: str) -> None:
        attribute = _require_field(PersonalInfo, field_name)
        personal = replace(self._document.personal, **{attribute: value})
        self._save(replace(self._document, personal=personal), "update_personal", attribute)

    def update_summary(self, value: str) -> None:
        self._save(replace(self._document, summary=value), "update_summary")

    def update_links(self, field_name: str, value: str) -> None:
        attribute = _require_field(Links, field_name)
        links = replace(self._document.links, **{attribute: value})
        self._save(replace(self._document, links=links), "update_links", attribute)

    # =========================================================================
    # EDUCATION / EXPERIENCE
    # =========================================================================

    def _entries(self, section: str) -> List[Entry]:
        if section not in ENTRY_SECTIONS:
            raise UnknownSectionError(section, ENTRY_SECTIONS)
        return list(getattr(self._document, section))

    def update_entry(self, section: str, index: int, field_name: str, value: str) -> None:
        entries = self._entries(section)
        attribute = _require_field(Entry, field_name)
        entries[index] = replace(entries[index], **{attribute: value})
        self._save(replace(self._document, **{section: entries}), "update_entry", f"{section}[{index}].{attribute}")

    def add_entry(self, section: str) -> None:
        entries = self._entries(section)
        entries.append(create_blank_entry())
        self._save(replace(self._document, **{section: entries}), "add_entry", section)

    def delete_entry(self, section: str, index: int) -> None:
        """Remove an entry; removing the last one leaves a single blank entry."""
        entries = self._entries(section)
        del entries[index]
        if not entries:
            entries = [create_blank_entry()]
        self._save(replace(self._document, **{section: entries}), "delete_entry", f"{section}[{index}]")

    # =========================================================================
    # PROJECTS
    # =========================================================================

    def add_project(self) -> None:
        projects = [*self._document.projects, create_blank_project()]
        self._save(replace(self._document, projects=projects), "add_project")

    def delete_project(self, index: int) -> None:
        """Remove a project; removing the last one leaves a single blank project."""
        projects = list(self._document.projects)
        del projects[index]
        if not projects:
            projects = [create_blank_project()]
        self._save(replace(self._document, projects=projects), "delete_project", f"[{index}]")

    def update_project(self, index: int, field_name, value) -> None:
        """
        Set one project field.

        Descriptions are capped at PROJECT_DESCRIPTION_MAX_LENGTH characters and the tech
        stack accepts either a list or a comma-separated string. Text fields given anything
        other than a string are stored as "".
        """
        attribute = _require_field(Project, field_name)
        if attribute == "tech_stack":
            value = normalize_tag_list(value)
        elif not isinstance(value, str):
            value = ""
        elif attribute == "description":
            value = value[:PROJECT_DESCRIPTION_MAX_LENGTH]

        projects = list(self._document.projects)
        projects[index] = replace(projects[index], **{attribute: value})
        self._save(replace(self._document, projects=projects), "update_project", f"[{index}].{attribute}")

    def add_tech_tag(self, index: int, tag: str) -> None:
        tech_stack = add_tag(self._document.projects[index].tech_stack, tag)
        self.update_project(index, "tech_stack", tech_stack)

    def remove_tech_tag(self, index: int, tag: str) -> None:
        tech_stack = remove_tag(self._document.projects[index].tech_stack, tag)
        self.update_project(index, "tech_stack", tech_stack)

    # =========================================================================
    # SKILLS
    # =========================================================================

    def _skill_group(self, group: str) -> List[str]:
        if group not in SKILL_GROUP_NAMES:
            raise UnknownSectionError(group, SKILL_GROUP_NAMES)
        return self._document.skills.get_group(group)

    def update_skills(self, skills) -> None:
        """Replace all skill groups (SkillGroups, dict or legacy string)."""
        self._save(replace(self._document, skills=resolve_skill_groups(skills)), "update_skills")

    def add_skill(self, group: str, tag: str) -> None:
        """Add a skill unless the group already has it (case-insensitive)."""
        tags = add_tag(self._skill_group(group), tag)
        skills = replace(self._document.skills, **{group: tags})
        self._save(replace(self._document, skills=skills), "add_skill", f"{group}: {tag}")

    def remove_skill(self, group: str, tag: str) -> None:
        tags = remove_tag(self._skill_group(group), tag)
        skills = replace(self._document.skills, **{group: tags})
        self._save(replace(self._document, skills=skills), "remove_skill", f"{group}: {tag}")

    def suggest_skills(self, suggestions: Dict[str, List[str]] = None) -> None:
        """Merge suggested skills into each group, skipping ones already present."""
        suggestions = suggestions or SUGGESTED_SKILLS
        current = self._document.skills
        skills = SkillGroups(
            **{
                name: add_unique_tags(current.get_group(name), suggestions.get(name, []))
                for name in SKILL_GROUP_NAMES
            }
        )
        self._save(replace(self._document, skills=skills), "suggest_skills")

    def load_sample(self) -> None:
        self._save(create_sample_document(), "load_sample")

    # =========================================================================
    # DISPLAY PREFERENCES
    # =========================================================================

    @property
    def template(self) -> str:
        return get_stored_template(self.store)

    @property
    def accent_color(self) -> str:
        return get_stored_accent_color(self.store)

    def change_template(self, template: str) -> None:
        if template not in TEMPLATE_OPTIONS:
            raise InvalidPreferenceError(f"Unknown template '{template}'. Available: {TEMPLATE_OPTIONS}")
        self.store.set(TEMPLATE_STORAGE_KEY, template)
        log_mutation("change_template", template)

    def change_accent_color(self, color: str) -> None:
        """Select an accent color by token ("hsl(...)") or by name ("Navy")."""
        color = ACCENT_OPTIONS.get(color, color)
        if color not in ACCENT_OPTIONS.values():
            raise InvalidPreferenceError(
                f"Unknown accent color '{color}'. Available: {list(ACCENT_OPTIONS)}"
            )
        self.store.set(ACCENT_COLOR_STORAGE_KEY, color)
        log_mutation("change_accent_color", color)

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    @property
    def ats_result(self) -> AtsResult:
        return calculate_ats_score(self._document)

    @property
    def top_improvements(self) -> List[str]:
        return self.ats_result.top_improvements

    @property
    def plain_text(self) -> str:
        return build_plaintext_resume(self._document)

    def export_warning(self) -> Optional[str]:
        return export_warning(self._document)
