"""
Tailor prompt — Skills Section

Optimizes the skills section for ATS matching.
Temperature: 0.7 | Max tokens: 2500
"""

from resume_tailor.prompts.tailor_summary import SYSTEM_PROMPT

USER_PROMPT_TEMPLATE = """\
Please optimize the skills section of the following resume to better match the job description. Prioritize technical skills and competencies mentioned in the job posting.

Job Description:
{job_description}

Resume:
{resume_text}

Instructions:
1. Only rewrite the skills section
2. Prioritize skills mentioned in the job description
3. Remove irrelevant skills
4. Organize skills by category if appropriate
5. Keep the format clean and ATS-friendly"""

__all__ = ["SYSTEM_PROMPT", "USER_PROMPT_TEMPLATE"]
