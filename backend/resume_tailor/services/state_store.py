"""
State Store — explicit save / load of each flow's screen state.

One JSON blob per flow variant, kept in a key-value store. Nothing is
written implicitly; callers decide when to save.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from resume_tailor.models.tailor_models import TailorSavedState
from resume_tailor.models.wizard_models import WizardSavedState

logger = logging.getLogger(__name__)

TAILOR_STATE_KEY = "resumeTailorData"
WIZARD_STATE_KEY = "resumeWizardData"

# Characters allowed in a storage key (and so in an owner id)
OWNER_PATTERN = r"^[A-Za-z0-9_.-]+$"
_KEY_PATTERN = re.compile(OWNER_PATTERN)

StateT = TypeVar("StateT", bound=BaseModel)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed store, lost on restart."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """One `<key>.json` file per key under a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid state key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")


# ── Public API ───────────────────────────────────────────────────────────────


def state_key(flow_key: str, owner: str | None = None) -> str:
    """Storage key for a flow, optionally namespaced per owner (user or session)."""
    return f"{flow_key}.{owner}" if owner else flow_key


def save_state(store: KeyValueStore, key: str, state: BaseModel) -> None:
    store.set(key, state.model_dump_json())
    logger.info(f"Saved state: key={key}")


def load_state(store: KeyValueStore, key: str, model: type[StateT]) -> StateT | None:
    """
    Load a saved blob. Returns None when nothing is saved or the blob is
    unreadable (the caller then starts from an empty state).
    """
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Error loading saved data for {key}: {e.error_count()} validation errors")
        return None


def save_tailor_state(store: KeyValueStore, state: TailorSavedState, owner: str | None = None) -> None:
    save_state(store, state_key(TAILOR_STATE_KEY, owner), state)


def load_tailor_state(store: KeyValueStore, owner: str | None = None) -> TailorSavedState | None:
    return load_state(store, state_key(TAILOR_STATE_KEY, owner), TailorSavedState)


def save_wizard_state(store: KeyValueStore, state: WizardSavedState, owner: str | None = None) -> None:
    save_state(store, state_key(WIZARD_STATE_KEY, owner), state)


def load_wizard_state(store: KeyValueStore, owner: str | None = None) -> WizardSavedState | None:
    return load_state(store, state_key(WIZARD_STATE_KEY, owner), WizardSavedState)
