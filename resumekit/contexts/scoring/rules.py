"""
ATS Rule Configuration

Loads the scoring rule set (check order, points, suggestions, band thresholds and the
action-verb vocabulary) from ats_rules.yaml. The bundled file is used unless the
ATS_RULES_PATH environment variable points elsewhere.
"""

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_RULES_PATH = Path(__file__).parent / "ats_rules.yaml"

REQUIRED_KEYS = ("checks", "thresholds", "bands", "action_verbs")


class InvalidRulesError(ValueError):
    """Raised when a rule file is missing required sections or names unknown checks."""

    pass


def get_rules_path() -> Path:
    env_path = os.getenv("ATS_RULES_PATH")
    return Path(env_path) if env_path else DEFAULT_RULES_PATH


@lru_cache(maxsize=None)
def _load_rules_cached(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"ATS rules not found at {config_path}")

    rules = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    missing = [key for key in REQUIRED_KEYS if key not in rules]
    if missing:
        raise InvalidRulesError(f"ATS rules at {config_path} missing sections: {missing}")

    return rules


def load_ats_rules(config_path: Path = None) -> Dict[str, Any]:
    """
    Load an ATS rule set. Files are parsed once; each call returns its own copy.

    Args:
        config_path: Optional path to a rules YAML (defaults to ATS_RULES_PATH or the bundled file)

    Returns:
        Dict with "checks", "thresholds", "bands" and "action_verbs"

    Raises:
        FileNotFoundError: If the rules file does not exist
        InvalidRulesError: If a required section is missing
    """
    if config_path is None:
        config_path = get_rules_path()
    return copy.deepcopy(_load_rules_cached(Path(config_path)))


def clear_rules_cache() -> None:
    _load_rules_cached.cache_clear()
