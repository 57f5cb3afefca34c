"""
Tag and Skill Normalization

Reconciles the shapes in which tag lists have been stored over time:
- Comma-separated strings ("React, Node") from the single-field skills editor
- Lists of strings from the tag editors
- Skills as one flat string vs. grouped technical/soft/tools categories

Normalization trims and drops empty tags but keeps duplicates. Case-insensitive
deduplication happens only when a tag is added through add_tag()/add_unique_tags().
"""

from typing import Any, Iterable, List, Union

from resumekit.contexts.drafting.resume_data_structure import SKILL_GROUP_NAMES, SkillGroups
from resumekit.utils.text_processing import trim_value


def normalize_tag_list(value: Any) -> List[str]:
    """
    Normalize a tag list given as a comma-separated string or a list of strings.

    Args:
        value: "React, Node" or ["React", " Node "]; anything else counts as empty

    Returns:
        Trimmed, non-empty tags in original order (duplicates kept)

    Examples:
        >>> normalize_tag_list("React, , Node ")
        ['React', 'Node']
        >>> normalize_tag_list([" React", "", "React"])
        ['React', 'React']
    """
    if isinstance(value, (list, tuple)):
        return [tag for tag in (trim_value(item) for item in value) if tag]
    return [tag.strip() for tag in trim_value(value).split(",") if tag.strip()]


def resolve_skill_groups(value: Any) -> SkillGroups:
    """
    Resolve stored skills into the three canonical groups.

    Args:
        value: Legacy flat string, dict with optional technical/soft/tools, a SkillGroups
            instance, or None

    Returns:
        New SkillGroups with each group normalized independently
    """
    if isinstance(value, str):
        return SkillGroups(technical=normalize_tag_list(value))

    if isinstance(value, SkillGroups):
        value = value.to_dict()
    elif not isinstance(value, dict):
        value = {}

    return SkillGroups(**{name: normalize_tag_list(value.get(name)) for name in SKILL_GROUP_NAMES})


def get_all_skills(skills: Union[SkillGroups, Any]) -> List[str]:
    """Technical, soft and tools skills concatenated in that order (not deduplicated)."""
    groups = skills if isinstance(skills, SkillGroups) else resolve_skill_groups(skills)
    return [*groups.technical, *groups.soft, *groups.tools]


def add_tag(tags: List[str], raw_tag: str) -> List[str]:
    """
    Append a tag unless it is blank or already present (case-insensitive).

    The first spelling wins: adding "react" to ["React"] leaves the list unchanged.

    Returns:
        New list; the input list is not modified
    """
    tag = trim_value(raw_tag)
    if not tag or any(item.lower() == tag.lower() for item in tags):
        return list(tags)
    return [*tags, tag]


def add_unique_tags(existing: List[str], incoming: Iterable[str]) -> List[str]:
    """Merge incoming tags into existing ones, skipping case-insensitive duplicates."""
    merged = list(existing)
    for tag in incoming:
        merged = add_tag(merged, tag)
    return merged


def remove_tag(tags: List[str], tag: str) -> List[str]:
    """Remove every exact occurrence of a tag."""
    return [item for item in tags if item != tag]
