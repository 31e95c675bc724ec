from pydantic import BaseModel, Field
from enum import Enum


class ChatProvider(str, Enum):
    """Chat-completion providers the adapter can talk to."""

    OPENAI = "openai"
    DEEPSEEK = "deepseek"


class ProviderConfig(BaseModel):
    """Static configuration for one provider."""

    name: str
    endpoint: str
    model: str
    key_url: str = ""


class ChatMessage(BaseModel):
    role: str  # "system" | "user"
    content: str


class PromptPair(BaseModel):
    """System + user prompt produced by the prompt builder."""

    system_prompt: str
    user_prompt: str

    def to_messages(self) -> list[ChatMessage]:
        return [
            ChatMessage(role="system", content=self.system_prompt),
            ChatMessage(role="user", content=self.user_prompt),
        ]


class ProviderRequest(BaseModel):
    """A single outgoing chat-completion request. Built per call, never persisted."""

    endpoint: str
    headers: dict[str, str] = Field(repr=False)
    model: str
    messages: list[ChatMessage]
    temperature: float
    max_tokens: int

    def body(self) -> dict:
        return {
            "model": self.model,
            "messages": [m.model_dump() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


# ── Response Models ─────────────────────────────────────────────────────────


class ProviderModelInfo(BaseModel):
    id: str
    name: str
    model: str
    endpoint: str
    key_header: str
    key_url: str
