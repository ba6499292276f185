"""
Prompt #3 - Skill Suggestions

Suggests 8-10 skills for a job title and industry as a comma-separated list.
Temperature: 0.8 | Max tokens: 400
"""

SYSTEM_PROMPT = """\
You are a career expert. Suggest relevant professional skills based on job title and experience.
"""

USER_PROMPT_TEMPLATE = """\
Suggest 8-10 relevant professional skills for this profile:

Job Title: {job_title}
Industry: {industry}
Experience Level: {experience_level}

Include a mix of:
- Technical skills relevant to the role
- Soft skills valued by employers
- Industry-specific competencies
- Leadership and communication skills

Format as a simple comma-separated list. Focus on skills that are in-demand, relevant to \
the job title and industry, appropriate for the experience level, and commonly searched by ATS.

Example format: JavaScript, Project Management, Team Leadership, Data Analysis
"""
