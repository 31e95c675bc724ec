from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

from resume_tailor.models.llm_models import ChatProvider


class OptimizationScope(str, Enum):
    """Which part of the résumé the single-shot flow rewrites."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    SKILLS = "skills"
    FULL = "full"


# Sections produced by optimizing one part at a time, later combined by the
# compose step
COMPOSE_SECTIONS = ("summary", "currentJob", "previousJob", "earlierJob")


# ── Request Models ──────────────────────────────────────────────────────────


class TailorRequest(BaseModel):
    """Request to optimize a résumé (or one part of it) for a job description."""

    job_description: str
    resume_text: str
    scope: OptimizationScope = OptimizationScope.FULL
    provider: ChatProvider = ChatProvider.OPENAI


class ComposeRequest(BaseModel):
    """Request to merge separately optimized sections into one résumé."""

    job_description: str
    resume_text: str
    sections: dict[str, str]  # summary / currentJob / previousJob / earlierJob
    provider: ChatProvider = ChatProvider.OPENAI


# ── Response Models ─────────────────────────────────────────────────────────


class TailorResponse(BaseModel):
    """Rewritten text for one tailor call."""

    scope: str
    provider: ChatProvider
    text: str


# ── Persisted State ─────────────────────────────────────────────────────────


class TailorSavedState(BaseModel):
    """Everything the single-shot screen keeps between sessions."""

    resume_text: str = ""
    job_description: str = ""
    provider: ChatProvider = ChatProvider.OPENAI
    api_key: Optional[str] = Field(default=None, repr=False)
    optimized_summary: str = ""
    optimized_current_job: str = ""
    optimized_previous_job: str = ""
    optimized_earlier_job: str = ""
    final_resume: str = ""
