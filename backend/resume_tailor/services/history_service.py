"""
History Service — per-user log of generated résumés.

Persisted to a YAML file so history survives server restarts. Entries are
appended; queries return one user's entries newest-first.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

import yaml

from resume_tailor.models.history_models import ResumeHistoryEntry

logger = logging.getLogger(__name__)


class ResumeHistoryStore:
    """YAML-backed résumé history, loaded lazily on first access."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._entries: list[ResumeHistoryEntry] | None = None

    # ── YAML Persistence ─────────────────────────────────────────────────

    def _load_from_yaml(self) -> list[ResumeHistoryEntry]:
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            return []

        if not raw or not isinstance(raw, dict):
            return []

        items = raw.get("history", [])
        if not isinstance(items, list):
            return []

        entries: list[ResumeHistoryEntry] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            try:
                entries.append(ResumeHistoryEntry(**item))
            except ValueError as e:
                logger.warning(f"Skipping invalid history entry: {e}")
        logger.info(f"Loaded {len(entries)} history entries from {self.path}")
        return entries

    def _save_to_yaml(self) -> None:
        data = {"history": [e.model_dump(mode="json") for e in self._get_entries()]}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def _get_entries(self) -> list[ResumeHistoryEntry]:
        if self._entries is None:
            self._entries = self._load_from_yaml()
        return self._entries

    # ── Public API ───────────────────────────────────────────────────────

    def save_resume_to_history(
        self,
        user_id: str,
        resume_text: str,
        job_description: str,
        title: str = "Resume",
    ) -> str:
        """Append an entry and return its ID."""
        entry = ResumeHistoryEntry(
            id=str(uuid.uuid4()),
            user_id=user_id,
            resume_text=resume_text,
            job_description=job_description,
            timestamp=datetime.now(timezone.utc),
            title=title or "Resume",
        )
        self._get_entries().append(entry)
        self._save_to_yaml()
        logger.info(f"Saved resume to history: id={entry.id} title={entry.title!r}")
        return entry.id

    def get_user_resume_history(self, user_id: str) -> list[ResumeHistoryEntry]:
        """Return the user's entries, newest first."""
        # Insertion order breaks timestamp ties
        entries = [(i, e) for i, e in enumerate(self._get_entries()) if e.user_id == user_id]
        entries.sort(key=lambda pair: (pair[1].timestamp, pair[0]), reverse=True)
        return [e for _, e in entries]
