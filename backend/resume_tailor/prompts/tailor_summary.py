"""
Tailor prompt — Professional Summary

Rewrites only the summary/profile section.
Temperature: 0.7 | Max tokens: 2500
"""

SYSTEM_PROMPT = """\
You are a professional resume writer with expertise in optimizing resumes for ATS (Applicant Tracking Systems)."""

USER_PROMPT_TEMPLATE = """\
Please rewrite only the professional summary of the following resume to better match the job description. Focus on relevant keywords and quantifiable achievements:

Job Description:
{job_description}

Resume:
{resume_text}

Instructions:
1. Only rewrite the professional summary/profile section
2. Include relevant keywords from the job description
3. Be concise but impactful
4. Focus on achievements with metrics when possible"""
