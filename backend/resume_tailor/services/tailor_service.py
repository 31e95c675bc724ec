"""
Tailor Service — single-shot résumé optimization.

Pipeline:
  1. Validate credential and inputs
  2. Build the prompt for the chosen scope (summary / experience / skills / full)
  3. Call the provider through the response cache

`compose_resume` merges sections optimized one at a time into a final résumé.
"""

from __future__ import annotations

import json
import logging

from resume_tailor.exceptions import MissingCredentialError
from resume_tailor.models.llm_models import ChatProvider
from resume_tailor.models.tailor_models import (
    COMPOSE_SECTIONS,
    OptimizationScope,
    TailorResponse,
)
from resume_tailor.services import llm_service
from resume_tailor.services.prompt_builder import build_compose_prompt, build_tailor_prompt
from resume_tailor.services.response_cache import ResponseCache

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def tailor_resume(
    *,
    cache: ResponseCache,
    api_key: str | None,
    provider: ChatProvider | str,
    scope: OptimizationScope | str,
    job_description: str,
    resume_text: str,
) -> TailorResponse:
    """
    Optimize a résumé for a job description.

    Args:
        cache: Session response cache
        api_key: User's API key for the provider
        provider: "openai" | "deepseek"
        scope: Which part of the résumé to rewrite
        job_description: Raw job description text
        resume_text: Raw résumé text
    """
    if not api_key:
        raise MissingCredentialError()

    provider = ChatProvider(provider)
    scope = OptimizationScope(scope)
    prompt = build_tailor_prompt(scope, job_description, resume_text)

    logger.info(
        f"Tailoring resume: scope={scope.value} provider={provider.value} "
        f"jd={len(job_description)} chars resume={len(resume_text)} chars"
    )

    text = await cache.fetch(
        provider=provider,
        section=f"tailor:{scope.value}",
        job_description=job_description,
        content=resume_text,
        call=lambda: llm_service.complete(
            provider=provider,
            api_key=api_key,
            prompt=prompt,
            prompt_name="tailor_resume",
        ),
    )
    return TailorResponse(scope=scope.value, provider=provider, text=text)


async def compose_resume(
    *,
    cache: ResponseCache,
    api_key: str | None,
    provider: ChatProvider | str,
    job_description: str,
    resume_text: str,
    sections: dict[str, str],
) -> TailorResponse:
    """Combine separately optimized sections into one final résumé."""
    if not api_key:
        raise MissingCredentialError()

    provider = ChatProvider(provider)
    prompt = build_compose_prompt(job_description, resume_text, sections)
    ordered = {key: sections.get(key, "") for key in COMPOSE_SECTIONS}

    logger.info(
        f"Composing final resume: provider={provider.value} "
        f"sections={[k for k, v in ordered.items() if v]}"
    )

    text = await cache.fetch(
        provider=provider,
        section="tailor:compose",
        job_description=job_description,
        content=json.dumps(ordered, ensure_ascii=False) + "\n" + resume_text,
        call=lambda: llm_service.complete(
            provider=provider,
            api_key=api_key,
            prompt=prompt,
            prompt_name="tailor_compose",
        ),
    )
    return TailorResponse(scope="compose", provider=provider, text=text)
