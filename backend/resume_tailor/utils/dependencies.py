"""
Request-scoped helpers — extract API keys from headers, reach the app-owned
cache / wizard registry / stores.
"""

from __future__ import annotations

from fastapi import Header, HTTPException, Request
from typing import Optional

from resume_tailor.exceptions import (
    MissingCredentialError,
    MissingInputError,
    ProviderError,
    ResumeTailorError,
    WizardBusyError,
    WizardStateError,
)
from resume_tailor.models.llm_models import ChatProvider
from resume_tailor.services.history_service import ResumeHistoryStore
from resume_tailor.services.response_cache import ResponseCache
from resume_tailor.services.state_store import KeyValueStore
from resume_tailor.services.wizard_service import WizardRegistry


class APIKeys:
    """Container for per-request API keys extracted from headers."""

    def __init__(
        self,
        openai: str | None = None,
        deepseek: str | None = None,
    ):
        self.openai = openai
        self.deepseek = deepseek

    def get_key(self, provider: ChatProvider | str) -> str | None:
        """Get the key for a specific provider."""
        return getattr(self, ChatProvider(provider).value, None)

    def has_any(self) -> bool:
        return bool(self.openai or self.deepseek)

    def available_providers(self) -> list[str]:
        return [p.value for p in ChatProvider if self.get_key(p)]


async def get_api_keys(
    x_openai_key: Optional[str] = Header(None, alias="X-OpenAI-Key"),
    x_deepseek_key: Optional[str] = Header(None, alias="X-DeepSeek-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(
        openai=(x_openai_key or "").strip() or None,
        deepseek=(x_deepseek_key or "").strip() or None,
    )


# ── App-owned state ─────────────────────────────────────────────────────────


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.response_cache


def get_wizard_registry(request: Request) -> WizardRegistry:
    return request.app.state.wizards


def get_state_store(request: Request) -> KeyValueStore:
    return request.app.state.state_store


def get_history_store(request: Request) -> ResumeHistoryStore:
    return request.app.state.history


# ── Error translation ───────────────────────────────────────────────────────


def to_http_error(error: ResumeTailorError) -> HTTPException:
    """Map a service error to the HTTP status the frontend expects."""
    if isinstance(error, (MissingCredentialError, MissingInputError)):
        status_code = 400
    elif isinstance(error, (WizardBusyError, WizardStateError)):
        status_code = 409
    elif isinstance(error, ProviderError):
        status_code = 502
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=error.message or "Failed to process")
