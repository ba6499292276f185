"""
Cover Letter Service - AI-drafted and template cover letters.

Responsibilities:
  • Build a drafting prompt from resume highlights, omitting whatever is missing
  • Delegate drafting to the AI service manager; fall back to a fixed letter
  • Assemble deterministic template letters by tone, focus and length
  • Polish user-edited letter text paragraph by paragraph
"""

from __future__ import annotations

import logging

from resume_studio.models.cover_letter_models import (
    CoverLetterParts,
    CoverLetterRequest,
    CoverLetterTemplateRequest,
    ResumeData,
)
from resume_studio.models.enhancement_models import EnhancementContext
from resume_studio.prompts import cover_letter
from resume_studio.services.ai_service_manager import AIServiceManager, BackendSuccess
from resume_studio.services.rule_based_enhancer import polish_paragraph
from resume_studio.utils.text_cleanup import lower_first, strip_leading_pronoun

logger = logging.getLogger(__name__)

GREETING = "Dear Hiring Manager,"
_JOB_POSTING_CHARS = 500
_TOP_SKILLS = 5

_TONE_OPENERS = {
    "professional": "I am writing to express my strong interest in",
    "enthusiastic": "I am thrilled to apply for",
    "confident": "I am excited to bring my experience to",
}


class CoverLetterEngine:
    def __init__(self, ai_manager: AIServiceManager):
        self.ai_manager = ai_manager

    # ── AI Draft ─────────────────────────────────────────────────────────

    async def generate_cover_letter(self, request: CoverLetterRequest) -> str:
        """Draft a letter with the AI backend; any backend failure yields the fixed letter."""
        prompt = self.build_prompt(request)
        context = EnhancementContext(
            content_type="cover_letter",
            company_name=request.company_name,
            job_title=request.position_title,
        )
        result = await self.ai_manager.try_enhance_text(prompt, context)
        if isinstance(result, BackendSuccess):
            return result.text

        logger.warning(f"Cover letter drafting failed ({type(result.error).__name__}), using fallback letter")
        return self.fallback_cover_letter(request)

    def build_prompt(self, request: CoverLetterRequest) -> str:
        resume = request.resume_data
        experience = resume.most_recent_experience()

        candidate_lines = []
        if resume.personal.name:
            candidate_lines.append(f"Name: {resume.personal.name}")
        skills = resume.skill_names(_TOP_SKILLS)
        if skills:
            candidate_lines.append(f"Key Skills: {', '.join(skills)}")
        if experience and (experience.title or experience.company):
            role = " at ".join(p for p in (experience.title, experience.company) if p)
            candidate_lines.append(f"Recent Experience: {role}")
            if experience.description:
                candidate_lines.append(f"Responsibilities: {experience.description}")

        role_lines = []
        if request.position_title:
            role_lines.append(f"Position: {request.position_title}")
        if request.company_name:
            role_lines.append(f"Company: {request.company_name}")
        if request.job_posting:
            role_lines.append(f"Job Requirements: {request.job_posting[:_JOB_POSTING_CHARS]}")

        message_block = ""
        if request.personalized_message:
            message_block = f"\nPersonal Message: {request.personalized_message}\n"

        return cover_letter.USER_PROMPT_TEMPLATE.format(
            candidate_lines="\n".join(candidate_lines) or "No candidate details provided",
            role_lines="\n".join(role_lines) or "Not specified",
            message_block=message_block,
        )

    @staticmethod
    def fallback_cover_letter(request: CoverLetterRequest) -> str:
        resume = request.resume_data
        experience = resume.most_recent_experience()
        position = request.position_title or "[Position Title]"
        company = request.company_name or "[Company Name]"
        background = (experience.title if experience else None) or "relevant experience"
        message = request.personalized_message or "I believe my skills and experience align well with your requirements."
        name = resume.personal.name or "[Your Name]"

        return (
            f"{GREETING}\n\n"
            f"I am writing to express my strong interest in the {position} position at {company}. "
            f"With my background in {background}, I am confident I can contribute effectively to your team.\n\n"
            f"{message}\n\n"
            f"Thank you for your consideration. I look forward to hearing from you.\n\n"
            f"Sincerely,\n{name}"
        )

    # ── Template Letter ──────────────────────────────────────────────────

    def build_template_cover_letter(self, request: CoverLetterTemplateRequest) -> CoverLetterParts:
        resume = request.resume_data
        company = request.job_details.company_name or "[Company Name]"
        position = request.job_details.job_title or "[Position Title]"

        opening = self._opening(resume, position, company, request.tone)
        paragraphs = self._body_paragraphs(resume, position, company, request.focus)
        body_count = {"brief": 0, "standard": 1, "detailed": 2}[request.length]
        body = "\n\n".join(paragraphs[:body_count])
        closing = (
            f"I am excited about the opportunity to contribute to {company} and would welcome the chance "
            f"to discuss how my background, skills, and enthusiasm would make me a valuable addition to "
            f"your team. Thank you for considering my application. I look forward to hearing from you."
        )
        signature = self._signature(resume)

        sections = [GREETING, opening, body, closing, signature]
        return CoverLetterParts(
            opening=opening,
            body=body,
            closing=closing,
            signature=signature,
            full_text="\n\n".join(s for s in sections if s),
        )

    @staticmethod
    def _opening(resume: ResumeData, position: str, company: str, tone: str) -> str:
        lead = _TONE_OPENERS.get((tone or "").lower(), _TONE_OPENERS["professional"])
        opening = f"{lead} the {position} position at {company}."

        experience = resume.most_recent_experience()
        skills = resume.skill_names(_TOP_SKILLS)
        if experience and experience.title and experience.company:
            opening += (
                f" With my experience as {experience.title} at {experience.company}, "
                f"I am confident I can contribute effectively to your team."
            )
        elif skills:
            opening += f" With my skills in {', '.join(skills)}, I am confident I can contribute effectively to your team."
        else:
            opening += " I am confident I can contribute effectively to your team."
        return opening

    @staticmethod
    def _body_paragraphs(resume: ResumeData, position: str, company: str, focus: str) -> list[str]:
        """Candidate body paragraphs, the focus area first."""
        experience = resume.most_recent_experience()
        skills = ", ".join(resume.skill_names(_TOP_SKILLS))

        if experience and experience.description:
            duties = lower_first(strip_leading_pronoun(experience.description.strip().rstrip(".")))
            experience_paragraph = (
                f"In my current role, I {duties}. This experience has equipped me with the skills "
                f"and knowledge necessary to excel in the {position} position."
            )
        else:
            experience_paragraph = (
                f"My professional experience has equipped me with the skills and knowledge "
                f"necessary to excel in the {position} position."
            )

        if skills:
            skills_paragraph = (
                f"My key skills include {skills}. These qualifications align well with the requirements "
                f"for the {position} role and would enable me to make immediate contributions to {company}."
            )
        else:
            skills_paragraph = (
                f"My qualifications align well with the requirements for the {position} role and would "
                f"enable me to make immediate contributions to {company}."
            )

        achievements = experience.achievements[:3] if experience else []
        if achievements:
            highlights = "; ".join(lower_first(a.strip().rstrip(".")) for a in achievements)
            achievements_paragraph = (
                f"Highlights of my recent work include: {highlights}. I am excited to bring this "
                f"track record of results to {company}."
            )
        else:
            achievements_paragraph = (
                f"Throughout my career, I have consistently demonstrated the ability to deliver results "
                f"and exceed expectations. I am excited about the opportunity to bring my proven track "
                f"record of success to {company}."
            )

        by_focus = {
            "experience": [experience_paragraph, skills_paragraph],
            "skills": [skills_paragraph, experience_paragraph],
            "achievements": [achievements_paragraph, experience_paragraph],
            "balanced": [experience_paragraph, skills_paragraph, achievements_paragraph],
        }
        return by_focus.get(focus, by_focus["balanced"])

    @staticmethod
    def _signature(resume: ResumeData) -> str:
        personal = resume.personal
        lines = [
            "Sincerely,",
            personal.name or "[Your Name]",
            personal.email or "[Your Email]",
        ]
        lines.extend(v for v in (personal.phone, personal.location) if v)
        return "\n".join(lines)

    # ── Content Polish ───────────────────────────────────────────────────

    @staticmethod
    def enhance_cover_letter_content(content: str) -> str:
        """Polish each paragraph; greetings and sign-offs pass through untouched."""
        paragraphs = [p.strip() for p in content.split("\n\n")]
        polished = []
        for paragraph in paragraphs:
            if not paragraph:
                continue
            first_line = paragraph.splitlines()[0].rstrip()
            if first_line.endswith(","):
                polished.append(paragraph)
            else:
                polished.append(polish_paragraph(paragraph))
        return "\n\n".join(polished)
