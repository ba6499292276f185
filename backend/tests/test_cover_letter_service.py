"""Tests for AI-drafted, fallback and template cover letters."""

from unittest.mock import AsyncMock

import pytest

from resume_studio.models.cover_letter_models import CoverLetterRequest, CoverLetterTemplateRequest
from resume_studio.services.cover_letter_service import CoverLetterEngine
from resume_studio.utils.errors import BackendQuotaExceeded


def _template_request(resume_data: dict, **overrides) -> CoverLetterTemplateRequest:
    body = {
        "resumeData": resume_data,
        "jobDetails": {"companyName": "Acme", "jobTitle": "Senior Analyst"},
        **overrides,
    }
    return CoverLetterTemplateRequest.model_validate(body)


class TestGenerateCoverLetter:
    """Drafting through the AI service manager."""

    @pytest.mark.asyncio
    async def test_backend_draft(self, make_manager, sample_resume_data):
        completion = AsyncMock(return_value="  Dear Hiring Manager,\n\nI am a great fit.  ")
        engine = CoverLetterEngine(make_manager(completion, "deepseek"))
        request = CoverLetterRequest.model_validate({
            "resumeData": sample_resume_data,
            "companyName": "Acme",
            "positionTitle": "Senior Analyst",
            "jobPosting": "x" * 800,
        })

        letter = await engine.generate_cover_letter(request)

        assert letter == "Dear Hiring Manager,\n\nI am a great fit."
        call = completion.await_args
        assert call.kwargs["prompt_name"] == "cover_letter"
        prompt = call.kwargs["messages"][-1]["content"]
        assert "Name: Jane Doe" in prompt
        assert "Key Skills: Python, SQL, Tableau, Excel, Statistics" in prompt
        assert "Forecasting" not in prompt
        assert "Recent Experience: Data Analyst at Globex" in prompt
        assert "x" * 500 in prompt
        assert "x" * 501 not in prompt

    @pytest.mark.asyncio
    async def test_offline_uses_fallback_letter(self, offline_manager):
        request = CoverLetterRequest(company_name="Acme", position_title="Barista")
        letter = await CoverLetterEngine(offline_manager).generate_cover_letter(request)

        assert letter.startswith("Dear Hiring Manager,")
        assert "the Barista position at Acme" in letter
        assert letter.endswith("Sincerely,\n[Your Name]")

    @pytest.mark.asyncio
    async def test_quota_error_uses_fallback_letter(self, make_manager, sample_resume_data):
        manager = make_manager(AsyncMock(side_effect=BackendQuotaExceeded(backend="deepseek")), "deepseek")
        request = CoverLetterRequest.model_validate({"resumeData": sample_resume_data})

        letter = await CoverLetterEngine(manager).generate_cover_letter(request)
        assert "With my background in Data Analyst" in letter
        assert letter.endswith("Sincerely,\nJane Doe")


class TestPromptAndFallback:
    def test_missing_fields_are_omitted(self, offline_manager):
        prompt = CoverLetterEngine(offline_manager).build_prompt(CoverLetterRequest(position_title="Welder"))

        assert "Name:" not in prompt
        assert "Key Skills:" not in prompt
        assert "No candidate details provided" in prompt
        assert "Position: Welder" in prompt
        assert "Personal Message" not in prompt

    def test_personal_message_is_included(self, offline_manager):
        request = CoverLetterRequest(personalized_message="I have admired Acme for years.")
        prompt = CoverLetterEngine(offline_manager).build_prompt(request)
        assert "Personal Message: I have admired Acme for years." in prompt

    def test_fallback_with_empty_resume(self):
        letter = CoverLetterEngine.fallback_cover_letter(CoverLetterRequest())

        assert letter.startswith("Dear Hiring Manager,\n\n")
        assert "[Position Title] position at [Company Name]" in letter
        assert "background in relevant experience" in letter
        assert letter.endswith("Sincerely,\n[Your Name]")


class TestTemplateCoverLetter:
    """Deterministic letters by tone, focus and length."""

    def test_standard_letter(self, offline_manager, sample_resume_data):
        parts = CoverLetterEngine(offline_manager).build_template_cover_letter(_template_request(sample_resume_data))

        assert parts.opening.startswith(
            "I am writing to express my strong interest in the Senior Analyst position at Acme."
        )
        assert "With my experience as Data Analyst at Globex" in parts.opening
        assert parts.body.startswith("In my current role, I analyzed sales data weekly.")
        assert "\n\n" not in parts.body
        assert parts.signature == "Sincerely,\nJane Doe\njane@example.com\n555-0100"
        assert parts.full_text.startswith("Dear Hiring Manager,\n\n")
        assert parts.full_text.endswith(parts.signature)

    def test_tone_changes_opening(self, offline_manager, sample_resume_data):
        request = _template_request(sample_resume_data, tone="enthusiastic")
        parts = CoverLetterEngine(offline_manager).build_template_cover_letter(request)
        assert parts.opening.startswith("I am thrilled to apply for the Senior Analyst position at Acme.")

    def test_brief_letter_has_no_body(self, offline_manager, sample_resume_data):
        request = _template_request(sample_resume_data, length="brief")
        parts = CoverLetterEngine(offline_manager).build_template_cover_letter(request)

        assert parts.body == ""
        assert "\n\n\n" not in parts.full_text

    def test_detailed_skills_focus(self, offline_manager, sample_resume_data):
        request = _template_request(sample_resume_data, length="detailed", focus="skills")
        parts = CoverLetterEngine(offline_manager).build_template_cover_letter(request)

        first, second = parts.body.split("\n\n")
        assert first.startswith("My key skills include Python, SQL, Tableau, Excel, Statistics.")
        assert second.startswith("In my current role")

    def test_achievements_focus_uses_resume_achievements(self, offline_manager, sample_resume_data):
        request = _template_request(sample_resume_data, focus="achievements")
        parts = CoverLetterEngine(offline_manager).build_template_cover_letter(request)
        assert parts.body.startswith(
            "Highlights of my recent work include: cut reporting time by 40%; built the regional sales dashboard."
        )

    def test_empty_resume_uses_placeholders(self, offline_manager):
        request = CoverLetterTemplateRequest.model_validate({"resumeData": {}})
        parts = CoverLetterEngine(offline_manager).build_template_cover_letter(request)

        assert "[Position Title] position at [Company Name]" in parts.opening
        assert parts.signature == "Sincerely,\n[Your Name]\n[Your Email]"
        assert parts.body.startswith("My professional experience has equipped me")


class TestEnhanceContent:
    def test_paragraphs_are_polished_and_salutations_kept(self):
        content = "Dear Hiring Manager,\n\nI did a lot of good work at my last job\n\nSincerely,\nJane"
        result = CoverLetterEngine.enhance_cover_letter_content(content)

        assert result == (
            "Dear Hiring Manager,\n\n"
            "I executed numerous effective work at my last job.\n\n"
            "Sincerely,\nJane"
        )
