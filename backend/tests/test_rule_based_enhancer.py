"""Tests for the deterministic rule-based enhancer."""

import re

import pytest

from resume_studio.content.industry_defaults import GENERIC_SKILLS
from resume_studio.models.enhancement_models import EnhancementContext
from resume_studio.services.rule_based_enhancer import polish_paragraph
from resume_studio.utils.errors import InputError


class TestEnhanceText:
    """Single-bullet rewrites."""

    def test_weak_verb_and_customer_metric(self, rule_based):
        result = rule_based.enhance_text("I helped customers at the store and handled their complaints")
        assert result == (
            "Assisted customers at the store and handled their complaints, "
            "maintaining 95% satisfaction rate"
        )

    def test_weak_opener_is_upgraded(self, rule_based):
        result = rule_based.enhance_text("Handled customer complaints")
        assert result == "Managed customer complaints, maintaining 95% satisfaction rate"

    def test_quantified_text_gets_no_extra_clause(self, rule_based):
        result = rule_based.enhance_text("Managed 12 people on the night shift")
        assert result == "Supervised 12 people on the night shift"

    def test_team_clause_depends_on_job_title(self, rule_based):
        senior = EnhancementContext(job_title="Senior Engineer")
        manager = EnhancementContext(job_title="Store Manager")
        assert rule_based.enhance_text("Worked with the team on releases", senior).endswith(
            "leading team of 8+ members"
        )
        assert rule_based.enhance_text("Worked with the team on releases", manager).endswith(
            "overseeing 12+ direct reports"
        )

    def test_improvement_clause(self, rule_based):
        result = rule_based.enhance_text("Optimized the checkout flow to improve conversion")
        assert result.endswith(", resulting in 25% efficiency improvement")
        assert result.startswith("Optimized")

    def test_casual_language_is_cleaned(self, rule_based):
        result = rule_based.enhance_text("Did a lot of stuff for the project")
        assert "numerous materials" in result
        assert result.startswith("Executed")

    def test_output_is_capitalized(self, rule_based):
        assert rule_based.enhance_text("organized the stock room")[0].isupper()

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_raises(self, rule_based, text):
        with pytest.raises(InputError):
            rule_based.enhance_text(text)


class TestContentTypes:
    """Summary and achievement polish."""

    def test_summary_gets_years_prefix(self, rule_based):
        ctx = EnhancementContext(content_type="summary", years_experience=6)
        result = rule_based.enhance_text("Dedicated nurse focused on patient care", ctx)
        assert result == "Professional with 6+ years of experience. Dedicated nurse focused on patient care"

    def test_summary_mentioning_experience_is_left_alone(self, rule_based):
        ctx = EnhancementContext(content_type="summary", years_experience=4)
        result = rule_based.enhance_text("Nurse with hospital experience", ctx)
        assert not result.startswith("Professional with")

    def test_short_career_uses_plain_years(self, rule_based):
        ctx = EnhancementContext(content_type="summary", years_experience=3)
        result = rule_based.enhance_text("Reliable cashier", ctx)
        assert result.startswith("Professional with 3 years of experience.")

    def test_quantified_achievement_gets_impact_clause(self, rule_based):
        ctx = EnhancementContext(content_type="achievement")
        result = rule_based.enhance_text("Achieved 20% growth in sales", ctx)
        assert result == (
            "Achieved 20% growth in sales, demonstrating measurable impact on organizational goals"
        )


class TestMultipleTexts:
    def test_blank_entries_pass_through(self, rule_based):
        result = rule_based.enhance_multiple_texts(["Handled customer complaints", "", "   "])
        assert result == ["Managed customer complaints, maintaining 95% satisfaction rate", "", "   "]


class TestSuggestions:
    """Offline skill lists and career summaries."""

    def test_skills_from_job_title(self, rule_based):
        skills = rule_based.generate_skill_suggestions("Software Engineer")
        assert skills == [
            "API", "microservices", "cloud infrastructure",
            "Developed", "Architected", "Leadership", "Communication",
        ]

    def test_skills_without_vocabulary_are_generic(self, rule_based):
        assert rule_based.generate_skill_suggestions("Nurse", "Healthcare") == list(GENERIC_SKILLS)

    def test_career_summary(self, rule_based):
        summary = rule_based.generate_career_summary("Data Analyst", 4, ["SQL", "Python"], "finance")
        assert summary.startswith(
            "Results-driven Data Analyst with 4 years of experience in the finance industry. "
        )
        assert "Proven track record of SQL and Python." in summary

    def test_career_summary_without_skills(self, rule_based):
        summary = rule_based.generate_career_summary("Barista", 2, [])
        assert "Proven track record of delivering measurable results." in summary
        assert "leverage expertise in professional environments" in summary


class TestPolishParagraph:
    def test_prose_cleanup(self):
        assert polish_paragraph("We made good progress") == "We created effective progress."

    def test_existing_punctuation_is_kept(self):
        assert polish_paragraph("Thank you for your time!") == "Thank you for your time!"


class TestProperties:
    """Invariants that hold for any non-empty input."""

    SAMPLES = [
        "helped customers",
        "worked on the new project with the team",
        "did a lot of things for clients",
        "fixed bugs",
        "answered phones",
        "Increased sales by 15% in one quarter",
        "we took care of stuff",
        "x",
    ]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_is_non_empty_and_capitalized(self, rule_based, text):
        result = rule_based.enhance_text(text)
        assert result
        assert result[0].isupper()

    @pytest.mark.parametrize("text", SAMPLES)
    def test_second_pass_adds_no_metric_clause(self, rule_based, text):
        first = rule_based.enhance_text(text)
        second = rule_based.enhance_text(first)
        for clause in ("satisfaction rate", "efficiency improvement", "concurrent projects", "team members"):
            assert second.count(clause) == first.count(clause)

    @pytest.mark.parametrize("text", [*SAMPLES, "I", "We", "i"])
    def test_summary_output_is_non_empty_and_capitalized(self, rule_based, text):
        result = rule_based.enhance_text(text, EnhancementContext(content_type="summary"))
        assert result
        assert result[0].isupper()

    def test_summary_keeps_leading_pronoun(self, rule_based):
        ctx = EnhancementContext(content_type="summary")
        assert rule_based.enhance_text("I am a dedicated nurse", ctx) == "I am a dedicated nurse"
        assert rule_based.enhance_text("We", ctx) == "We"

    def test_customer_service_scenario(self, rule_based):
        ctx = EnhancementContext(industry="customer-service", role_level="mid-level")
        result = rule_based.enhance_text("I helped customers at the store and handled their complaints", ctx)
        assert "assisted" in result.lower()
        assert "helped" not in result.lower()
        assert re.search(r"\d+%", result)
