"""
Tailor prompt — Work Experience

Rewrites the work experience section with a fixed bullet budget per role.
Temperature: 0.7 | Max tokens: 2500
"""

from resume_tailor.prompts.tailor_summary import SYSTEM_PROMPT

USER_PROMPT_TEMPLATE = """\
Please optimize the work experience section of the following resume to better match the job description. For the most recent job, include 5 bullet points. For the second most recent job, include 4 bullet points. For older positions, include 3 or fewer bullet points as appropriate.

Job Description:
{job_description}

Resume:
{resume_text}

Instructions:
1. Only rewrite the work experience section
2. For the most recent job, include exactly 5 bullet points
3. For the second most recent job, include exactly 4 bullet points
4. For older jobs, include 3 or fewer bullet points
5. Focus on achievements relevant to the target job
6. Use action verbs and quantifiable results
7. Incorporate relevant keywords from the job description"""

__all__ = ["SYSTEM_PROMPT", "USER_PROMPT_TEMPLATE"]
