"""
Tailor prompt — Full Resume

Rewrites the entire résumé in one pass.
Temperature: 0.7 | Max tokens: 2500
"""

from resume_tailor.prompts.tailor_summary import SYSTEM_PROMPT

USER_PROMPT_TEMPLATE = """\
Please optimize the following resume to better match the job description and improve ATS compatibility. Follow these specific formatting requirements:

Job Description:
{job_description}

Resume:
{resume_text}

Instructions:
1. Rewrite the entire resume to better match the job description
2. Create a strong professional summary that highlights relevant qualifications
3. For the most recent job, include exactly 5 bullet points
4. For the second most recent job, include exactly 4 bullet points
5. For older jobs, include 3 or fewer bullet points
6. Prioritize skills mentioned in the job description
7. Use action verbs and quantifiable achievements
8. Maintain clean formatting that will work well in MS Word"""

__all__ = ["SYSTEM_PROMPT", "USER_PROMPT_TEMPLATE"]
