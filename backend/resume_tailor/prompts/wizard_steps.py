"""
Wizard step prompts — one template per fixed step (1-10).

Every template takes {current_input}; steps 3-10 also take {job_analysis}
(step 1's output) and step 10 takes {optimized_sections}.
Temperature: 0.7 | Max tokens: 1000
"""

SYSTEM_PROMPT = """\
You are an expert resume optimizer that helps tailor resumes to specific job descriptions. Provide clear, concise, and actionable advice formatted in a clean, readable way."""

STEP_TEMPLATES: dict[int, str] = {
    1: """\
Parse the provided job description. Extract and list the top 5 key responsibilities and top 5 qualifications that the resume must reflect.

Job Description:
{current_input}""",
    2: """\
Scan the following resume. Remember its details for upcoming optimization tasks.

Resume:
{current_input}""",
    3: """\
Rewrite the professional summary section to be ATS-friendly, align with the job description, use relevant keywords, and be short, powerful, and enticing.

Job Description Analysis:
{job_analysis}

Current Professional Summary:
{current_input}""",
    4: """\
Review the user's skills and generate two lists: Skills to remove and Skills to add or emphasize. Ensure the new list is ATS-optimized and aligned with the role.

Job Description Analysis:
{job_analysis}

Current Skills:
{current_input}""",
    5: """\
Analyze the work experiences and suggest 5 strategic edits or rewrites to better align with the target job.

Job Description Analysis:
{job_analysis}

Experience Overview:
{current_input}""",
    6: """\
Rewrite this current role experience in present tense, using "Accomplished X as measured by Y doing Z" format. Each bullet point max 2 lines. Emphasize growth, leadership, and outcomes relevant to the job.

Job Description Analysis:
{job_analysis}

Current Role:
{current_input}""",
    7: """\
Rewrite this experience in past tense, focusing on top 4 impactful accomplishments using "Accomplished X as measured by Y doing Z" format. Each bullet point max 2 lines. Align with job requirements.

Job Description Analysis:
{job_analysis}

Previous Role:
{current_input}""",
    8: """\
Rewrite this experience in past tense, focusing on top 4 achievements using "Accomplished X as measured by Y doing Z" format. Each bullet point max 2 lines. Align with product leadership or digital transformation aspects if applicable.

Job Description Analysis:
{job_analysis}

Earlier Role:
{current_input}""",
    9: """\
Update the Tools & Technologies section to reflect tools most relevant to the job and be easy to scan and grouped logically (e.g., PM tools, analytics, dev, collaboration).

Job Description Analysis:
{job_analysis}

Current Tools & Technologies:
{current_input}""",
    10: """\
Perform a final check on the optimized resume. Identify any misalignments with the job description, weak or missing keywords, vague or outdated statements, or missed opportunities for improvement. Focus on content and job alignment.

Job Description Analysis:
{job_analysis}

Optimized Resume Sections:
{optimized_sections}""",
}

# Used for any step number outside 1-10
FALLBACK_TEMPLATE = "Analyze the following input for step {step_number}: {current_input}"
