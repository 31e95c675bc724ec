from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum

from resume_tailor.models.llm_models import ChatProvider


class WizardStep(BaseModel):
    """One fixed step of the wizard."""

    model_config = ConfigDict(frozen=True)

    index: int  # 1-based
    title: str
    description: str
    placeholder: str
    field_name: str


class WizardStatus(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FINISHED = "finished"


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        index=1,
        title="Job Description Analysis",
        description="Paste the job description below. We'll extract the top 5 key responsibilities and top 5 qualifications.",
        placeholder="Paste the full job description here...",
        field_name="jobDescription",
    ),
    WizardStep(
        index=2,
        title="Current Resume",
        description="Paste your current resume. We'll scan it to understand your experience and skills.",
        placeholder="Paste your current resume content here...",
        field_name="resume",
    ),
    WizardStep(
        index=3,
        title="Professional Summary",
        description="Let's rewrite your professional summary to be ATS-friendly and aligned with the job description.",
        placeholder="Your current professional summary section (if any)...",
        field_name="professionalSummary",
    ),
    WizardStep(
        index=4,
        title="Professional Skills",
        description="Review your skills to identify which to highlight and which to remove for this specific job application.",
        placeholder="List your current skills here...",
        field_name="skills",
    ),
    WizardStep(
        index=5,
        title="Experience Overview",
        description="We'll analyze your work experiences and suggest strategic edits to better align with the target job.",
        placeholder="Any specific concerns about your experience section...",
        field_name="experienceOverview",
    ),
    WizardStep(
        index=6,
        title="Current Role Optimization",
        description="Let's rewrite your current/most recent role experience to highlight achievements relevant to the job.",
        placeholder="Paste your current role description here...",
        field_name="currentRole",
    ),
    WizardStep(
        index=7,
        title="Previous Role Optimization",
        description="We'll rewrite your previous role to focus on the most impactful accomplishments.",
        placeholder="Paste your previous role description here...",
        field_name="previousRole",
    ),
    WizardStep(
        index=8,
        title="Earlier Role Optimization",
        description="Let's optimize your earlier role to align with the product leadership aspects of the target job.",
        placeholder="Paste your earlier role description here...",
        field_name="earlierRole",
    ),
    WizardStep(
        index=9,
        title="Tools & Technologies Update",
        description="Update your technical skills to reflect tools most relevant to the job.",
        placeholder="List your current tools & technologies...",
        field_name="tools",
    ),
    WizardStep(
        index=10,
        title="Final Resume QA",
        description="We'll perform a final check to identify any misalignments, weak keywords, or missed opportunities.",
        placeholder="Any specific areas you'd like us to focus on during QA?",
        field_name="finalQA",
    ),
)

# Outputs that are context for other steps rather than résumé sections
META_FIELDS = ("jobDescription", "resume", "finalQA")


# ── Request Models ──────────────────────────────────────────────────────────


class WizardCreateRequest(BaseModel):
    provider: ChatProvider = ChatProvider.OPENAI
    auto_advance: bool = False


class FieldUpdate(BaseModel):
    value: str


# ── Response Models ─────────────────────────────────────────────────────────


class WizardState(BaseModel):
    """Snapshot of a wizard session for the frontend."""

    id: str
    provider: ChatProvider
    status: WizardStatus
    current_step: int
    total_steps: int
    step: WizardStep
    form_data: dict[str, str]
    outputs: dict[str, str]
    final_resume: Optional[str] = None
    last_error: Optional[str] = None
    auto_advance: bool = False
    busy: bool = False


# ── Persisted State ─────────────────────────────────────────────────────────


class WizardSavedState(BaseModel):
    """Everything the wizard keeps between sessions."""

    provider: ChatProvider = ChatProvider.OPENAI
    api_key: Optional[str] = Field(default=None, repr=False)
    current_step: int = 1
    form_data: dict[str, str] = {}
    outputs: dict[str, str] = {}
    final_resume: Optional[str] = None
