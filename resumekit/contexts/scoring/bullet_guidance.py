"""
Authoring Guidance

Per-line hints shown under experience details and project descriptions, sharing the
action-verb vocabulary of the ATS rules:
- a line should start with an action verb ("Built", "Led", ...)
- a line should carry a measurable number ("32%", "3x", "10k", "14")
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from resumekit.contexts.drafting.entry_filters import is_complete, is_filled
from resumekit.contexts.drafting.resume_data_structure import Entry
from resumekit.contexts.scoring.rules import load_ats_rules
from resumekit.utils.text_processing import split_nonempty_lines, trim_value

ACTION_VERB_HINT = "Start with a strong action verb."
NUMBER_HINT = "Add measurable impact (numbers)."

# A numeral, optionally decimal, optionally followed by %, x or k
NUMBER_PATTERN = re.compile(r"\b\d+(?:\.\d+)?\s*(?:%|x|k)?\b", re.IGNORECASE)


def _action_verbs(action_verbs: Optional[Iterable[str]]) -> List[str]:
    if action_verbs is None:
        action_verbs = load_ats_rules()["action_verbs"]
    return [verb.lower() for verb in action_verbs]


def starts_with_action_verb(text: str, action_verbs: Optional[Iterable[str]] = None) -> bool:
    """
    True if the first whitespace-delimited word is an action verb (case-insensitive).

    Examples:
        >>> starts_with_action_verb("built a design system")
        True
        >>> starts_with_action_verb("Responsible for builds")
        False
    """
    words = trim_value(text).split()
    first_word = words[0].lower() if words else ""
    return first_word in _action_verbs(action_verbs)


def contains_action_verb(text: str, action_verbs: Optional[Iterable[str]] = None) -> bool:
    """True if any action verb appears as a whole word anywhere in the text."""
    alternatives = "|".join(re.escape(verb) for verb in _action_verbs(action_verbs))
    if not alternatives:
        return False
    return re.search(rf"\b(?:{alternatives})\b", trim_value(text), re.IGNORECASE) is not None


def has_number_in_text(text: str) -> bool:
    """
    True if the text contains a word-bounded numeral, optionally with %, x or k.

    Examples:
        >>> has_number_in_text("Cut load time by 40%")
        True
        >>> has_number_in_text("Improved load time")
        False
    """
    return NUMBER_PATTERN.search(trim_value(text)) is not None


@dataclass
class LineGuidance:
    """Hints for one line of free text."""

    line: str
    needs_action_verb: bool
    needs_number: bool

    @property
    def messages(self) -> List[str]:
        messages = []
        if self.needs_action_verb:
            messages.append(ACTION_VERB_HINT)
        if self.needs_number:
            messages.append(NUMBER_HINT)
        return messages


def bullet_guidance(text: str, action_verbs: Optional[Iterable[str]] = None) -> List[LineGuidance]:
    """
    Guidance for each non-empty line of free text that needs it.

    Lines that already start with an action verb and contain a number are omitted.

    Args:
        text: Experience details or project description
        action_verbs: Optional vocabulary override (defaults to the ATS rules)

    Returns:
        LineGuidance per line needing a hint, in line order
    """
    verbs = _action_verbs(action_verbs)
    guidance = []
    for line in split_nonempty_lines(text):
        needs_action_verb = not starts_with_action_verb(line, verbs)
        needs_number = not has_number_in_text(line)
        if needs_action_verb or needs_number:
            guidance.append(LineGuidance(line, needs_action_verb, needs_number))
    return guidance


def incomplete_entries(entries: Sequence[Entry]) -> List[int]:
    """Indexes of entries that have some content but lack one of the four core fields."""
    return [index for index, entry in enumerate(entries) if is_filled(entry) and not is_complete(entry)]
