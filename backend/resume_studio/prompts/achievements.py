"""
Prompt #5 - Achievement Suggestions

Suggests 4-6 quantified achievements for a role as bullet points.
Temperature: 0.8 | Max tokens: 500
"""

SYSTEM_PROMPT = """\
You are a resume expert. Suggest professional achievements and accomplishments.
"""

USER_PROMPT_TEMPLATE = """\
Suggest 4-6 professional achievements for this role:

Job Title: {job_title}
Company: {company_name}
Responsibilities: {responsibilities}

Create realistic, quantified achievements that show leadership, process improvements, \
team results and measurable impact (percentages, numbers, timeframes).

Format as bullet points. Each achievement should:
- Begin with a powerful action verb
- Include specific, realistic metrics
- Show clear business impact

Example format:
• Spearheaded cross-functional project resulting in 25% efficiency improvement
• Mentored team of 8 junior staff, reducing onboarding time by 30%
"""
