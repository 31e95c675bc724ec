from pydantic_settings import BaseSettings
from typing import Optional

from resume_tailor.models.llm_models import ChatProvider, ProviderConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Resume Tailor Wizard"
    debug: bool = True
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:5173"

    # Provider endpoints (API keys are never configured server-side; the
    # caller supplies them per request)
    openai_endpoint: str = "https://api.openai.com/v1/chat/completions"
    deepseek_endpoint: str = "https://api.deepseek.com/v1/chat/completions"
    request_timeout: float = 60.0

    # Response cache: long text fields are cut to this many characters
    # before fingerprinting
    cache_prefix_length: int = 500

    # Wizard auto-advance debounce, in seconds
    auto_advance_delay: float = 1.5

    # Persistence
    state_dir: str = "data/state"
    history_path: str = "data/resume_history.yaml"

    # Optional override of the default model for a provider
    openai_model: Optional[str] = None
    deepseek_model: Optional[str] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Provider Registry ───────────────────────────────────────────────────────

PROVIDERS: dict[ChatProvider, ProviderConfig] = {
    ChatProvider.OPENAI: ProviderConfig(
        name="OpenAI",
        endpoint=settings.openai_endpoint,
        model=settings.openai_model or "gpt-3.5-turbo",
        key_url="https://platform.openai.com/api-keys",
    ),
    ChatProvider.DEEPSEEK: ProviderConfig(
        name="DeepSeek",
        endpoint=settings.deepseek_endpoint,
        model=settings.deepseek_model or "deepseek-chat",
        key_url="https://platform.deepseek.com/api_keys",
    ),
}

# ── Prompt Configuration ────────────────────────────────────────────────────

# Every call uses temperature 0.7; only the token ceiling and, for the
# wizard, the OpenAI model differ by call site.
DEFAULT_TEMPERATURE = 0.7

PROMPT_CONFIG = {
    "tailor_resume": {"max_tokens": 2500},
    "tailor_compose": {"max_tokens": 2500},
    "wizard_step": {"max_tokens": 1000, "models": {ChatProvider.OPENAI: "gpt-4o"}},
    "wizard_final": {"max_tokens": 2000, "models": {ChatProvider.OPENAI: "gpt-4o"}},
}
