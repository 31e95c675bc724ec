"""
Prompt Builder — turn user text (and prior wizard outputs) into prompt pairs.

Responsibilities:
  • Single-shot tailor prompts, one per optimization scope
  • Wizard step prompts (1-10) with prior outputs carried forward as context
  • Wizard final aggregation prompt
  • Reject empty required fields before any prompt is built

Everything here is pure: no network, no randomness, no side effects.
"""

from __future__ import annotations

from types import ModuleType
from typing import Mapping

from resume_tailor.exceptions import MissingInputError
from resume_tailor.models.llm_models import PromptPair
from resume_tailor.models.tailor_models import COMPOSE_SECTIONS, OptimizationScope
from resume_tailor.models.wizard_models import META_FIELDS, WIZARD_STEPS
from resume_tailor.prompts import (
    tailor_compose,
    tailor_experience,
    tailor_full,
    tailor_skills,
    tailor_summary,
    wizard_final,
    wizard_steps,
)

_TAILOR_PROMPTS: dict[OptimizationScope, ModuleType] = {
    OptimizationScope.SUMMARY: tailor_summary,
    OptimizationScope.EXPERIENCE: tailor_experience,
    OptimizationScope.SKILLS: tailor_skills,
    OptimizationScope.FULL: tailor_full,
}

_STEP_ORDER = [step.field_name for step in WIZARD_STEPS]


# ── Validation ───────────────────────────────────────────────────────────────


def require_text(value: str | None, message: str) -> str:
    """Return the value unchanged, or raise MissingInputError if it is blank."""
    if not value or not value.strip():
        raise MissingInputError(message)
    return value


# ── Single-shot ──────────────────────────────────────────────────────────────


def build_tailor_prompt(
    scope: OptimizationScope | str,
    job_description: str,
    resume_text: str,
) -> PromptPair:
    """Prompt pair for one optimization scope (summary / experience / skills / full)."""
    require_text(job_description, "Please enter a job description")
    require_text(resume_text, "Please enter your resume")

    module = _TAILOR_PROMPTS[OptimizationScope(scope)]
    return PromptPair(
        system_prompt=module.SYSTEM_PROMPT,
        user_prompt=module.USER_PROMPT_TEMPLATE.format(
            job_description=job_description,
            resume_text=resume_text,
        ),
    )


def build_compose_prompt(
    job_description: str,
    resume_text: str,
    sections: Mapping[str, str],
) -> PromptPair:
    """Prompt pair that merges separately optimized sections into one résumé."""
    require_text(job_description, "Please enter both job description and resume")
    require_text(resume_text, "Please enter both job description and resume")

    filled = [(key, sections.get(key, "")) for key in COMPOSE_SECTIONS]
    filled = [(key, text) for key, text in filled if text and text.strip()]
    if not filled:
        raise MissingInputError("Please optimize at least one section first")

    rendered = "\n\n".join(
        f"{tailor_compose.SECTION_LABELS[key]}:\n{text}" for key, text in filled
    )
    return PromptPair(
        system_prompt=tailor_compose.SYSTEM_PROMPT,
        user_prompt=tailor_compose.USER_PROMPT_TEMPLATE.format(
            job_description=job_description,
            resume_text=resume_text,
            sections=rendered,
        ),
    )


# ── Wizard ───────────────────────────────────────────────────────────────────


def build_step_prompt(
    step_number: int,
    current_input: str,
    previous_outputs: Mapping[str, str],
) -> PromptPair:
    """
    Prompt pair for a wizard step.

    Steps 3-10 receive step 1's output as "Job Description Analysis" (empty
    when step 1 has no output yet). Step 10 also receives every non-meta
    output. Step numbers outside 1-10 get a generic analysis prompt.
    """
    require_text(current_input, "Please enter input for this step first")

    template = wizard_steps.STEP_TEMPLATES.get(step_number)
    if template is None:
        user_prompt = wizard_steps.FALLBACK_TEMPLATE.format(
            step_number=step_number,
            current_input=current_input,
        )
    else:
        user_prompt = template.format(
            current_input=current_input,
            job_analysis=previous_outputs.get("jobDescription", ""),
            optimized_sections=render_sections(previous_outputs),
        )

    return PromptPair(system_prompt=wizard_steps.SYSTEM_PROMPT, user_prompt=user_prompt)


def build_final_prompt(job_description: str, outputs: Mapping[str, str]) -> PromptPair:
    """Aggregation prompt: job description + optimized sections + QA notes."""
    require_text(job_description, "Please enter a job description")
    return PromptPair(
        system_prompt=wizard_final.SYSTEM_PROMPT,
        user_prompt=wizard_final.USER_PROMPT_TEMPLATE.format(
            job_description=job_description,
            optimized_sections=render_sections(outputs),
            qa_notes=outputs.get("finalQA", ""),
        ),
    )


def render_sections(outputs: Mapping[str, str]) -> str:
    """Render non-meta outputs as "FIELD:\\ntext" blocks in step order."""
    keys = [k for k in _STEP_ORDER if k in outputs]
    keys += [k for k in outputs if k not in _STEP_ORDER]
    return "\n\n".join(
        f"{key.upper()}:\n{outputs[key]}" for key in keys if key not in META_FIELDS
    )
