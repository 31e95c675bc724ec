"""
LLM Service — provider adapter for OpenAI- and DeepSeek-compatible chat completions.

Responsibilities:
  • Accept an API key + provider per call (keys come from the caller, never stored)
  • Build the chat-completion request for the selected provider
  • POST it with httpx and extract the first choice's text
  • Map HTTP / transport failures to ProviderError; no retries
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from resume_tailor.config import DEFAULT_TEMPERATURE, PROMPT_CONFIG, PROVIDERS, settings
from resume_tailor.exceptions import MissingCredentialError, ProviderError
from resume_tailor.models.llm_models import (
    ChatProvider,
    PromptPair,
    ProviderModelInfo,
    ProviderRequest,
)

logger = logging.getLogger(__name__)

# Returned when the provider answers 2xx but the body has no usable choice
NO_RESPONSE = "No response generated"

# Request header the frontend uses to send each provider's key
PROVIDER_KEY_HEADER = {
    ChatProvider.OPENAI: "X-OpenAI-Key",
    ChatProvider.DEEPSEEK: "X-DeepSeek-Key",
}


# ── Request Building ─────────────────────────────────────────────────────────


def build_request(
    *,
    provider: ChatProvider | str,
    api_key: str,
    prompt: PromptPair,
    prompt_name: str | None = None,
    max_tokens: int | None = None,
) -> ProviderRequest:
    """Assemble the outgoing request for a provider. Raises MissingCredentialError on an empty key."""
    provider = ChatProvider(provider)
    if not api_key or not api_key.strip():
        raise MissingCredentialError()

    provider_config = PROVIDERS[provider]
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    model = config.get("models", {}).get(provider, provider_config.model)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 1000)

    return ProviderRequest(
        endpoint=provider_config.endpoint,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key.strip()}",
        },
        model=model,
        messages=prompt.to_messages(),
        temperature=DEFAULT_TEMPERATURE,
        max_tokens=tokens,
    )


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: ChatProvider | str,
    api_key: str,
    prompt: PromptPair,
    prompt_name: str | None = None,
    max_tokens: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    Send one chat-completion request and return the reply text.

    Args:
        provider:    "openai" | "deepseek"
        api_key:     User's API key for the provider
        prompt:      System + user prompt pair
        prompt_name: Optional key into PROMPT_CONFIG for model / token ceiling
        max_tokens:  Override max_tokens (takes precedence over prompt_name)
        client:      Optional shared httpx client (a fresh one is opened otherwise)

    Returns:
        The assistant's reply, stripped, or NO_RESPONSE when the provider
        returned no usable choice.

    Raises:
        MissingCredentialError: api_key is empty
        ProviderError: non-2xx status or transport failure
    """
    request = build_request(
        provider=provider,
        api_key=api_key,
        prompt=prompt,
        prompt_name=prompt_name,
        max_tokens=max_tokens,
    )
    provider = ChatProvider(provider)
    provider_name = PROVIDERS[provider].name

    logger.info(
        f"LLM call: provider={provider.value} model={request.model} "
        f"temp={request.temperature} tokens={request.max_tokens}"
    )

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.request_timeout) as owned:
                response = await owned.post(request.endpoint, json=request.body(), headers=request.headers)
        else:
            response = await client.post(request.endpoint, json=request.body(), headers=request.headers)
    except httpx.HTTPError as e:
        logger.error(f"LLM transport error ({provider.value}): {type(e).__name__}")
        raise ProviderError(f"Could not reach the {provider_name} API: {e}") from e

    if not response.is_success:
        message = _extract_error_message(response)
        logger.error(f"LLM error ({provider.value}): status={response.status_code} message={message}")
        raise ProviderError(
            message or f"Error calling {provider_name} API",
            status_code=response.status_code,
        )

    content = _extract_content(response)
    if content is None:
        logger.warning(f"LLM response from {provider.value} had no usable choice")
        return NO_RESPONSE

    logger.info(f"LLM response: {len(content)} chars")
    return content


# ── Helpers ──────────────────────────────────────────────────────────────────


def _extract_error_message(response: httpx.Response) -> str | None:
    """Pull error.message out of a provider error body, if it has one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


def _extract_content(response: httpx.Response) -> str | None:
    """Return choices[0].message.content, or None if the body is not shaped that way."""
    try:
        data: Any = response.json()
        content = data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        return None
    if not isinstance(content, str) or not content.strip():
        return None
    return content.strip()


# ── Provider Info ────────────────────────────────────────────────────────────


def get_providers_info() -> list[ProviderModelInfo]:
    """
    Return provider metadata for the frontend.
    No secrets are exposed: just names, default models and where to get a key.
    """
    return [
        ProviderModelInfo(
            id=provider.value,
            name=config.name,
            model=config.model,
            endpoint=config.endpoint,
            key_header=PROVIDER_KEY_HEADER[provider],
            key_url=config.key_url,
        )
        for provider, config in PROVIDERS.items()
    ]
