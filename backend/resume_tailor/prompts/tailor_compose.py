"""
Tailor prompt — Compose Final Resume

Merges separately optimized sections back into the original résumé.
Temperature: 0.7 | Max tokens: 2500
"""

from resume_tailor.prompts.tailor_summary import SYSTEM_PROMPT

USER_PROMPT_TEMPLATE = """\
Generate a complete, optimized resume. Start from the original resume and replace each section below with its optimized version. Keep every other section as it is.

Job Description:
{job_description}

Original Resume:
{resume_text}

Optimized Sections:
{sections}

Instructions:
1. Use the optimized sections verbatim where provided
2. Keep contact details, education and certifications from the original resume
3. Maintain clean formatting that will work well in MS Word"""

SECTION_LABELS = {
    "summary": "PROFESSIONAL SUMMARY",
    "currentJob": "CURRENT JOB",
    "previousJob": "PREVIOUS JOB",
    "earlierJob": "EARLIER JOB",
}

__all__ = ["SYSTEM_PROMPT", "USER_PROMPT_TEMPLATE", "SECTION_LABELS"]
