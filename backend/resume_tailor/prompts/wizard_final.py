"""
Wizard final prompt — Full Resume Generation

Combines the job description, every optimized section and the QA notes
into a submission-ready résumé.
Temperature: 0.7 | Max tokens: 2000
"""

SYSTEM_PROMPT = """\
You are an expert resume optimizer that helps tailor resumes to specific job descriptions. Generate a complete, optimized resume that is ATS-friendly and tailored to the job."""

USER_PROMPT_TEMPLATE = """\
Generate a complete, optimized resume based on the job description and the optimized sections below.
Format the resume in a clean, professional way that would be ready for submission.

JOB DESCRIPTION:
{job_description}

OPTIMIZED SECTIONS:
{optimized_sections}

FINAL QA NOTES:
{qa_notes}
"""
