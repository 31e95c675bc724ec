import pytest

from resume_tailor.exceptions import MissingInputError
from resume_tailor.models.tailor_models import OptimizationScope
from resume_tailor.services.prompt_builder import (
    build_compose_prompt,
    build_final_prompt,
    build_step_prompt,
    build_tailor_prompt,
    render_sections,
)

JD = "Senior PM role at Acme. Own the roadmap, run discovery, ship weekly."
RESUME = "John Doe, 10 years experience in product management at Initech and Globex."


# ── Single-shot ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("scope", list(OptimizationScope))
def test_tailor_prompt_embeds_inputs_verbatim(scope):
    prompt = build_tailor_prompt(scope, JD, RESUME)

    assert JD in prompt.user_prompt
    assert RESUME in prompt.user_prompt
    assert "ATS" in prompt.system_prompt


@pytest.mark.parametrize("scope", [OptimizationScope.EXPERIENCE, OptimizationScope.FULL])
def test_bullet_count_rules_for_experience_and_full(scope):
    prompt = build_tailor_prompt(scope, JD, RESUME).user_prompt

    assert "For the most recent job, include exactly 5 bullet points" in prompt
    assert "For the second most recent job, include exactly 4 bullet points" in prompt
    assert "For older jobs, include 3 or fewer bullet points" in prompt


@pytest.mark.parametrize("scope", [OptimizationScope.SUMMARY, OptimizationScope.SKILLS])
def test_no_bullet_count_rules_for_summary_and_skills(scope):
    prompt = build_tailor_prompt(scope, JD, RESUME).user_prompt

    assert "exactly 5 bullet points" not in prompt


def test_scope_accepts_plain_strings():
    prompt = build_tailor_prompt("skills", JD, RESUME)
    assert "Only rewrite the skills section" in prompt.user_prompt


def test_unknown_scope_is_rejected():
    with pytest.raises(ValueError):
        build_tailor_prompt("cover_letter", JD, RESUME)


@pytest.mark.parametrize("jd,resume", [("", RESUME), ("   \n", RESUME), (JD, ""), (JD, "\t")])
def test_tailor_prompt_requires_both_texts(jd, resume):
    with pytest.raises(MissingInputError):
        build_tailor_prompt(OptimizationScope.FULL, jd, resume)


def test_tailor_prompt_is_deterministic():
    assert build_tailor_prompt("full", JD, RESUME) == build_tailor_prompt("full", JD, RESUME)


def test_braces_in_user_text_are_kept():
    resume = "Built {templated} configs in JSON: {\"a\": 1}"
    prompt = build_tailor_prompt("summary", JD, resume)
    assert resume in prompt.user_prompt


# ── Compose ──────────────────────────────────────────────────────────────────


def test_compose_prompt_lists_filled_sections_only():
    prompt = build_compose_prompt(
        JD,
        RESUME,
        {"summary": "NEW SUMMARY", "currentJob": "", "earlierJob": "OLD JOB BULLETS"},
    ).user_prompt

    assert "PROFESSIONAL SUMMARY:\nNEW SUMMARY" in prompt
    assert "EARLIER JOB:\nOLD JOB BULLETS" in prompt
    assert "CURRENT JOB:" not in prompt
    assert RESUME in prompt


def test_compose_prompt_needs_one_section():
    with pytest.raises(MissingInputError, match="at least one section"):
        build_compose_prompt(JD, RESUME, {"summary": "  "})


# ── Wizard steps ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize("step", range(3, 10))
def test_steps_3_to_9_embed_job_analysis(step):
    prompt = build_step_prompt(step, "my input", {"jobDescription": "ANALYSIS-OF-JD"})

    assert "Job Description Analysis:\nANALYSIS-OF-JD" in prompt.user_prompt
    assert "my input" in prompt.user_prompt


def test_step_3_substitutes_empty_analysis_when_missing():
    prompt = build_step_prompt(3, "Current summary text", {})

    assert "Job Description Analysis:\n\n\nCurrent Professional Summary:\nCurrent summary text" in prompt.user_prompt


@pytest.mark.parametrize("step", [1, 2])
def test_first_two_steps_use_only_their_input(step):
    prompt = build_step_prompt(step, "raw text", {"jobDescription": "ANALYSIS-OF-JD"})

    assert "raw text" in prompt.user_prompt
    assert "ANALYSIS-OF-JD" not in prompt.user_prompt


def test_step_1_parses_job_description():
    prompt = build_step_prompt(1, JD, {})
    assert "top 5 key responsibilities" in prompt.user_prompt
    assert JD in prompt.user_prompt


def test_step_10_embeds_all_non_meta_outputs():
    outputs = {
        "jobDescription": "ANALYSIS",
        "resume": "RESUME-NOTES",
        "professionalSummary": "SUMMARY-OUT",
        "skills": "SKILLS-OUT",
        "tools": "TOOLS-OUT",
        "finalQA": "OLD-QA",
    }
    prompt = build_step_prompt(10, "focus on metrics", outputs).user_prompt

    assert "Job Description Analysis:\nANALYSIS" in prompt
    assert "PROFESSIONALSUMMARY:\nSUMMARY-OUT" in prompt
    assert "SKILLS:\nSKILLS-OUT" in prompt
    assert "TOOLS:\nTOOLS-OUT" in prompt
    assert "RESUME-NOTES" not in prompt
    assert "OLD-QA" not in prompt


@pytest.mark.parametrize("step", [0, 11, 42, -1])
def test_unknown_step_falls_back_to_generic_prompt(step):
    prompt = build_step_prompt(step, "something", {"jobDescription": "ANALYSIS"})

    assert prompt.user_prompt == f"Analyze the following input for step {step}: something"


def test_step_prompt_requires_input():
    with pytest.raises(MissingInputError):
        build_step_prompt(4, "  ", {})


def test_render_sections_uses_step_order():
    rendered = render_sections({"tools": "T", "professionalSummary": "S", "currentRole": "C"})

    assert rendered == "PROFESSIONALSUMMARY:\nS\n\nCURRENTROLE:\nC\n\nTOOLS:\nT"


# ── Wizard final ─────────────────────────────────────────────────────────────


def test_final_prompt_has_sections_and_qa_notes():
    outputs = {
        "jobDescription": "ANALYSIS",
        "resume": "RESUME-NOTES",
        "skills": "SKILLS-OUT",
        "finalQA": "QA-OUT",
    }
    prompt = build_final_prompt(JD, outputs).user_prompt

    assert f"JOB DESCRIPTION:\n{JD}" in prompt
    assert "SKILLS:\nSKILLS-OUT" in prompt
    assert "FINAL QA NOTES:\nQA-OUT" in prompt
    assert "ANALYSIS" not in prompt
    assert "RESUME-NOTES" not in prompt
