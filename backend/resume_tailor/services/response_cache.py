"""
Response Cache — suppress duplicate billed provider calls within a session.

Keys are fingerprints of (provider, section, job-description prefix,
content prefix). Only the first `prefix_length` characters of the two text
fields take part, so inputs that differ only past that point share a key.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from resume_tailor.config import settings
from resume_tailor.models.llm_models import ChatProvider
from resume_tailor.services.llm_service import NO_RESPONSE
from resume_tailor.utils.fingerprint import fingerprint, truncate

logger = logging.getLogger(__name__)


class ResponseCache:
    """In-memory reply cache. No expiry, no size bound, not persisted."""

    def __init__(self, prefix_length: int | None = None):
        self.prefix_length = prefix_length if prefix_length is not None else settings.cache_prefix_length
        self._entries: dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def key_for(
        self,
        *,
        provider: ChatProvider | str,
        section: str,
        job_description: str,
        content: str,
    ) -> str:
        return fingerprint(
            ChatProvider(provider).value,
            section,
            truncate(job_description, self.prefix_length),
            truncate(content, self.prefix_length),
        )

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    async def fetch(
        self,
        *,
        provider: ChatProvider | str,
        section: str,
        job_description: str,
        content: str,
        call: Callable[[], Awaitable[str]],
    ) -> str:
        """
        Return the cached reply for these inputs, or await `call()` and cache it.

        Exceptions from `call` propagate and nothing is stored. The
        no-response placeholder is returned but not stored either.
        """
        key = self.key_for(
            provider=provider,
            section=section,
            job_description=job_description,
            content=content,
        )
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            logger.info(f"Cache hit: section={section} key={key[:8]}")
            return cached

        self.misses += 1
        result = await call()
        if result != NO_RESPONSE:
            self._entries[key] = result
        return result
