"""
ATS Readiness Scoring

Heuristic 0-100 score of how ready a resume draft is for applicant tracking systems,
with one improvement suggestion per unmet check.

Checks are independent and additive: each one looks only for the presence of content,
so adding content can raise the score but never lower it. Check order, points and
suggestion text come from ats_rules.yaml; the predicates are registered in CHECKS.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from resumekit.contexts.drafting.entry_filters import filter_filled
from resumekit.contexts.drafting.normalizer import get_all_skills
from resumekit.contexts.drafting.resume_data_structure import ResumeDocument
from resumekit.contexts.scoring.bullet_guidance import contains_action_verb
from resumekit.contexts.scoring.logger import log_score_result
from resumekit.contexts.scoring.rules import InvalidRulesError, load_ats_rules
from resumekit.utils.text_processing import split_nonempty_lines, trim_value

TOP_IMPROVEMENTS_COUNT = 3


@dataclass
class AtsResult:
    """
    Outcome of scoring one document.

    Attributes:
        score: Integer in [0, 100]
        label: Human-readable band label (e.g., "Getting There")
        band: Band identifier (needs-work, getting-there, strong)
        suggestions: One suggestion per unmet check, in check order
    """

    score: int
    label: str
    band: str
    suggestions: List[str] = field(default_factory=list)

    @property
    def top_improvements(self) -> List[str]:
        """Condensed view: the first three suggestions."""
        return self.suggestions[:TOP_IMPROVEMENTS_COUNT]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "band": self.band,
            "suggestions": list(self.suggestions),
        }


# =========================================================================
# CHECK PREDICATES
# =========================================================================


def _has_experience_bullets(document: ResumeDocument, rules: Dict[str, Any]) -> bool:
    return any(split_nonempty_lines(entry.details) for entry in filter_filled(document.experience))


def _has_long_summary(document: ResumeDocument, rules: Dict[str, Any]) -> bool:
    return len(trim_value(document.summary)) > rules["thresholds"]["summary_min_length"]


def _has_enough_skills(document: ResumeDocument, rules: Dict[str, Any]) -> bool:
    return len(get_all_skills(document.skills)) >= rules["thresholds"]["min_skills"]


def _summary_has_action_verb(document: ResumeDocument, rules: Dict[str, Any]) -> bool:
    return contains_action_verb(document.summary, rules["action_verbs"])


CHECKS: Dict[str, Callable[[ResumeDocument, Dict[str, Any]], bool]] = {
    "name": lambda document, rules: bool(trim_value(document.personal.name)),
    "email": lambda document, rules: bool(trim_value(document.personal.email)),
    "summary": _has_long_summary,
    "experience_bullets": _has_experience_bullets,
    "education": lambda document, rules: bool(filter_filled(document.education)),
    "skills": _has_enough_skills,
    "projects": lambda document, rules: bool(filter_filled(document.projects)),
    "phone": lambda document, rules: bool(trim_value(document.personal.phone)),
    "linkedin": lambda document, rules: bool(trim_value(document.links.linkedin)),
    "github": lambda document, rules: bool(trim_value(document.links.github)),
    "summary_action_verb": _summary_has_action_verb,
}


def get_band(score: int, rules: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """
    Band for a score: the first band whose max_score is >= score (null means unbounded).

    Returns:
        Dict with "band" and "label"
    """
    rules = rules or load_ats_rules()
    for band in rules["bands"]:
        if band["max_score"] is None or score <= band["max_score"]:
            return {"band": band["band"], "label": band["label"]}
    raise InvalidRulesError(f"ATS rules define no band for score {score}; the last band needs max_score: null")


def calculate_ats_score(document: ResumeDocument, rules: Optional[Dict[str, Any]] = None) -> AtsResult:
    """
    Score a resume draft for ATS readiness.

    Args:
        document: Canonical document (as produced by hydrate())
        rules: Optional rule set (defaults to load_ats_rules())

    Returns:
        AtsResult with score capped at thresholds.max_score and suggestions in check order

    Raises:
        InvalidRulesError: If the rule set names a check with no registered predicate
    """
    rules = rules or load_ats_rules()

    score = 0
    suggestions = []
    for check in rules["checks"]:
        predicate = CHECKS.get(check["key"])
        if predicate is None:
            raise InvalidRulesError(f"Unknown ATS check '{check['key']}'. Available: {list(CHECKS)}")

        if predicate(document, rules):
            score += int(check["points"])
        else:
            suggestions.append(check["suggestion"])

    score = min(score, int(rules["thresholds"]["max_score"]))
    band = get_band(score, rules)

    result = AtsResult(score=score, label=band["label"], band=band["band"], suggestions=suggestions)
    log_score_result(result)
    return result


score = calculate_ats_score
