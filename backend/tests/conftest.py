import pytest
from fastapi.testclient import TestClient

from resume_tailor.services import llm_service
from resume_tailor.services.history_service import ResumeHistoryStore
from resume_tailor.services.response_cache import ResponseCache
from resume_tailor.services.state_store import InMemoryStore
from resume_tailor.services.wizard_service import WizardRegistry


class FakeLLM:
    """Stands in for llm_service.complete and records every call."""

    def __init__(self):
        self.calls = []
        self.reply = "FAKE REPLY"
        self.reply_fn = None
        self.errors = []  # raised, in order, before any reply is returned

    async def __call__(self, *, provider, api_key, prompt, prompt_name=None, max_tokens=None, client=None):
        self.calls.append(
            {
                "provider": provider,
                "api_key": api_key,
                "prompt": prompt,
                "prompt_name": prompt_name,
            }
        )
        if self.errors:
            raise self.errors.pop(0)
        if self.reply_fn is not None:
            return self.reply_fn(len(self.calls), prompt_name, prompt)
        return self.reply

    @property
    def call_count(self):
        return len(self.calls)

    def prompts(self, prompt_name=None):
        return [
            c["prompt"].user_prompt
            for c in self.calls
            if prompt_name is None or c["prompt_name"] == prompt_name
        ]


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr(llm_service, "complete", fake)
    return fake


@pytest.fixture
def cache():
    return ResponseCache(prefix_length=500)


@pytest.fixture
def client(tmp_path):
    """FastAPI TestClient with fresh in-memory state and an isolated history file."""
    from resume_tailor.main import app

    response_cache = ResponseCache()
    app.state.response_cache = response_cache
    app.state.wizards = WizardRegistry(response_cache)
    app.state.state_store = InMemoryStore()
    app.state.history = ResumeHistoryStore(tmp_path / "history.yaml")

    return TestClient(app)
