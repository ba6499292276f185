"""
Prompt #4 - Career Summary

Writes a 2-3 sentence third-person professional summary.
Temperature: 0.7 | Max tokens: 300
"""

SYSTEM_PROMPT = """\
You are a professional resume writer. Create compelling career summaries.
"""

USER_PROMPT_TEMPLATE = """\
Create a compelling 2-3 sentence professional summary for:

Job Title: {job_title}
Years of Experience: {years_experience}
Key Skills: {key_skills}
Industry: {industry}

The summary should:
- Start with a strong professional identifier
- Highlight years of experience and key expertise
- Include 1-2 specific achievements or strengths
- End with career goals or value proposition
- Be concise, professional, and ATS-friendly

Write in third person without using "I" statements. Return only the summary.
"""
