"""
Scoring Context

Responsibilities:
- ATS readiness score, band and ordered improvement suggestions
- Rule set configuration (ats_rules.yaml)
- Per-line authoring guidance (action verbs, measurable impact)

Owns: Scoring rules and the action-verb vocabulary
Never: Modifies documents
"""

from resumekit.contexts.scoring.ats_scorer import AtsResult, calculate_ats_score, get_band
from resumekit.contexts.scoring.bullet_guidance import (
    LineGuidance,
    bullet_guidance,
    has_number_in_text,
    incomplete_entries,
    starts_with_action_verb,
)
from resumekit.contexts.scoring.rules import InvalidRulesError, load_ats_rules

__all__ = [
    "AtsResult",
    "calculate_ats_score",
    "get_band",
    "LineGuidance",
    "bullet_guidance",
    "has_number_in_text",
    "incomplete_entries",
    "starts_with_action_verb",
    "InvalidRulesError",
    "load_ats_rules",
]
