"""
Rule-Based Enhancer - deterministic bullet rewriting with no network calls.

Responsibilities:
  • Swap weak verbs and casual wording for professional phrasing
  • Append a plausible metric clause when the bullet has no numbers
  • Make sure the bullet opens with a strong action verb
  • Polish summaries and achievements
  • Offer offline skill suggestions and career summaries

Used directly by the rule-based endpoints and as the fallback whenever a
text-generation backend is unavailable.
"""

from __future__ import annotations

import logging
import re

from resume_studio.content.industry_defaults import GENERIC_SKILLS, INDUSTRY_VOCABULARY
from resume_studio.content.verbs import (
    CASUAL_REPLACEMENTS,
    DEFAULT_START_VERB,
    LEAD_VERB_UPGRADES,
    STRONG_START_RULES,
    STRONG_START_VERBS,
    WEAK_VERB_REPLACEMENTS,
)
from resume_studio.models.enhancement_models import EnhancementContext
from resume_studio.utils.errors import InputError
from resume_studio.utils.industry import resolve_industry_key
from resume_studio.utils.text_cleanup import (
    capitalize_first,
    lower_first,
    normalize_text,
    replace_phrase,
    strip_leading_pronoun,
)
from resume_studio.utils.text_metrics import has_quantification

logger = logging.getLogger(__name__)

_IMPACT_MARKERS = ("resulting in", "achieving")
_ACHIEVEMENT_CLAUSE = ", demonstrating measurable impact on organizational goals"


class RuleBasedEnhancer:
    """Stateless; one shared instance serves every request."""

    # ── Single Text ──────────────────────────────────────────────────────

    def enhance_text(self, text: str, context: EnhancementContext | None = None) -> str:
        if not text or not text.strip():
            raise InputError()
        ctx = context or EnhancementContext()
        # Summaries are first-person prose, not bullets
        is_bullet = ctx.content_type != "summary"

        normalized = normalize_text(text)
        enhanced = strip_leading_pronoun(normalized) if is_bullet else normalized
        enhanced = self._replace_weak_verbs(enhanced)
        enhanced = self._clean_casual_language(enhanced)

        if not has_quantification(enhanced):
            enhanced = self._add_quantification(enhanced, ctx)

        if is_bullet:
            enhanced = self._ensure_strong_start(enhanced)
        enhanced = self._add_professional_polish(enhanced, ctx).strip()
        return enhanced or capitalize_first(normalized)

    def enhance_multiple_texts(
        self, texts: list[str], context: EnhancementContext | None = None
    ) -> list[str]:
        """Enhance each non-empty text in order; blank entries pass through unchanged."""
        return [self.enhance_text(t, context) if t and t.strip() else t for t in texts]

    # ── Rewrite Steps ────────────────────────────────────────────────────

    @staticmethod
    def _replace_weak_verbs(text: str) -> str:
        for weak, strong in WEAK_VERB_REPLACEMENTS:
            text = replace_phrase(text, weak, strong)
        return text

    @staticmethod
    def _clean_casual_language(text: str) -> str:
        for casual, professional in CASUAL_REPLACEMENTS:
            text = replace_phrase(text, casual, professional)
        return text

    @staticmethod
    def _add_quantification(text: str, ctx: EnhancementContext) -> str:
        """Append at most one metric clause per theme; stops once the text is quantified."""
        role = (ctx.job_title or "").lower()
        lower = text.lower()

        if ctx.content_type == "achievement" or "team" in lower or "manage" in lower:
            if "senior" in role or "lead" in role:
                text += ", leading team of 8+ members"
            elif "manager" in role:
                text += ", overseeing 12+ direct reports"
            else:
                text += ", collaborating with 5+ team members"

        if has_quantification(text):
            return text
        if any(w in lower for w in ("improve", "increase", "optimize")):
            return text + ", resulting in 25% efficiency improvement"
        if "customer" in lower or "client" in lower:
            return text + ", maintaining 95% satisfaction rate"
        if "project" in lower:
            return text + ", completing 3+ concurrent projects"
        return text

    @staticmethod
    def _ensure_strong_start(text: str) -> str:
        first, _, rest = text.partition(" ")
        first_lower = first.lower().strip(",.;:")

        if first_lower in STRONG_START_VERBS:
            return text

        for weak, upgrade in LEAD_VERB_UPGRADES:
            if first_lower == weak:
                return f"{capitalize_first(upgrade)} {rest}".rstrip()

        lower = text.lower()
        for keywords, verb in STRONG_START_RULES:
            if any(k in lower for k in keywords):
                return f"{verb} {lower_first(text)}"
        return f"{DEFAULT_START_VERB} {lower_first(text)}"

    def _add_professional_polish(self, text: str, ctx: EnhancementContext) -> str:
        text = capitalize_first(text)

        if ctx.content_type == "summary":
            return self._add_summary_polish(text, ctx)
        if ctx.content_type == "achievement":
            if not any(m in text for m in _IMPACT_MARKERS) and has_quantification(text):
                text += _ACHIEVEMENT_CLAUSE
        return text

    @staticmethod
    def _add_summary_polish(text: str, ctx: EnhancementContext) -> str:
        years = ctx.years_experience
        lower = text.lower()
        if not years or years <= 0 or "experience" in lower or "years" in lower:
            return text
        years_display = f"{years:g}+ years" if years > 5 else f"{years:g} years"
        return f"Professional with {years_display} of experience. {text}"

    # ── Suggestions ──────────────────────────────────────────────────────

    def generate_skill_suggestions(self, job_title: str, industry: str = "") -> list[str]:
        """Offline skill list drawn from the industry vocabulary."""
        key = resolve_industry_key(industry, job_title)
        vocabulary = INDUSTRY_VOCABULARY.get(key)
        if vocabulary is None:
            return list(GENERIC_SKILLS)

        skills = [*vocabulary["technical"][:3], *vocabulary["actions"][:2], "Leadership", "Communication"]
        logger.debug(f"Rule-based skills for {job_title!r} ({key}): {skills}")
        return skills

    def generate_career_summary(
        self,
        job_title: str,
        years_experience: float,
        key_skills: list[str],
        industry: str = "",
    ) -> str:
        industry_context = f" in the {industry} industry" if industry else ""
        skills = [s.strip() for s in key_skills if s and s.strip()][:5]
        track_record = _join_human(skills) if skills else "delivering measurable results"
        years = f"{years_experience:g}"

        return (
            f"Results-driven {job_title} with {years} years of experience{industry_context}. "
            f"Proven track record of {track_record}. "
            f"Seeking opportunities to leverage expertise in {industry or 'professional'} "
            f"environments to drive organizational success and achieve measurable results."
        )


def _join_human(items: list[str]) -> str:
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} and {items[-1]}"


_SENTENCE_END = re.compile(r"[.!?]$")


def polish_paragraph(paragraph: str) -> str:
    """Verb and casual-language cleanup for prose (cover letters); no metric clauses."""
    text = paragraph.strip()
    if not text:
        return text
    for weak, strong in WEAK_VERB_REPLACEMENTS:
        text = replace_phrase(text, weak, strong)
    for casual, professional in CASUAL_REPLACEMENTS:
        text = replace_phrase(text, casual, professional)
    text = capitalize_first(text)
    if not _SENTENCE_END.search(text) and not text.endswith(","):
        text += "."
    return text
