"""
Key-Value Store Abstraction

The editor persists everything through a flat string key-value store (browser local
storage in the web editor). The drafting core never reads storage on its own:
a store is injected wherever a draft or a display preference is loaded or saved.

Implementations:
- InMemoryStore: dict-backed, for tests and embedding
- JsonFileStore: a single JSON object on disk, used by the developer CLI
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from resumekit.contexts.drafting.defaults import (
    ACCENT_COLOR_STORAGE_KEY,
    ACCENT_OPTIONS,
    DEFAULT_ACCENT_COLOR,
    DEFAULT_TEMPLATE,
    STORAGE_KEY,
    TEMPLATE_OPTIONS,
    TEMPLATE_STORAGE_KEY,
)
from resumekit.contexts.drafting.hydrator import hydrate, serialize
from resumekit.contexts.drafting.resume_data_structure import ResumeDocument


class KeyValueStore(ABC):
    """Minimal string key-value capability: get(key) -> str or None, set(key, value)."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """
    Key-value store persisted as one JSON object in a file.

    The file is re-read on every get() so changes made by another process are visible,
    and rewritten on every set(). A missing file behaves as an empty store.
    """

    def __init__(self, path: Path):
        if type(path) is str:
            path = Path(path)
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        content = self.path.read_text(encoding="utf-8")
        if not content.strip():
            return {}

        data = json.loads(content)
        if not isinstance(data, dict):
            raise ValueError(f"Store file must contain a JSON object: {self.path}")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def load_document(store: KeyValueStore) -> ResumeDocument:
    """Hydrate the stored draft (default document if nothing usable is stored)."""
    return hydrate(store.get(STORAGE_KEY))


def save_document(store: KeyValueStore, document: ResumeDocument) -> str:
    """Serialize and store a draft. Returns the stored text."""
    raw_value = serialize(document)
    store.set(STORAGE_KEY, raw_value)
    return raw_value


def get_stored_template(store: KeyValueStore) -> str:
    """Selected preview template; unknown or missing values resolve to Classic."""
    value = store.get(TEMPLATE_STORAGE_KEY)
    return value if value in TEMPLATE_OPTIONS else DEFAULT_TEMPLATE


def get_stored_accent_color(store: KeyValueStore) -> str:
    """Selected accent color token; unknown or missing values resolve to Teal."""
    value = store.get(ACCENT_COLOR_STORAGE_KEY)
    return value if value in ACCENT_OPTIONS.values() else DEFAULT_ACCENT_COLOR
