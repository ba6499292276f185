"""
Enhancement Engine - full enhancement of one resume bullet.

Pipeline steps:
  1. Base rewrite from the AI service manager (local verb table when it fails)
  2. Industry and role-level alternative phrasings
  3. Fill-in-the-number suggestions detected in the original text
  4. Confidence score, strengthened words and added metrics

For non-empty input the engine always returns a result.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Optional

from resume_studio.content.engine_templates import (
    DEFAULT_PERCENTAGE_OPTIONS,
    DEFAULT_TEAM_SIZE_OPTIONS,
    DEFAULT_VOLUME_OPTIONS,
    ENGINE_INDUSTRY_ALIASES,
    ENGINE_INDUSTRY_TEMPLATES,
    FREQUENCY_OPTIONS,
    PERCENTAGE_OPTIONS,
    TEAM_SIZE_OPTIONS,
    VOLUME_OPTIONS,
)
from resume_studio.content.verbs import ENGINE_FALLBACK_REPLACEMENTS, ROLE_LEVEL_VERB_SWAPS
from resume_studio.models.enhancement_models import (
    EnhancementContext,
    EnhancementImprovements,
    EnhancementResult,
    QuantificationSuggestion,
)
from resume_studio.services.ai_service_manager import AIServiceManager, BackendFailure, BackendSuccess
from resume_studio.utils.errors import InputError
from resume_studio.utils.industry import normalize_role_level
from resume_studio.utils.text_cleanup import replace_phrase
from resume_studio.utils.text_metrics import (
    find_added_metrics,
    find_strengthened_words,
    score_confidence,
)

logger = logging.getLogger(__name__)

MAX_ALTERNATIVES = 3
MAX_SUGGESTIONS = 2

_INDUSTRY_VARIANT_VERBS = re.compile(r"\b(?:helped|worked|did|made)\b", re.IGNORECASE)


def engine_industry(industry: str | None) -> str:
    """Map a free-form industry onto an engine template key (default "general")."""
    cleaned = (industry or "").strip().lower().replace(" ", "_")
    if cleaned in ENGINE_INDUSTRY_TEMPLATES:
        return cleaned
    return ENGINE_INDUSTRY_ALIASES.get(cleaned, "general")


# ── Quantification Triggers ──────────────────────────────────────────────────

_SIZE = re.compile(r"\b(?:teams?|groups?|people)\b", re.IGNORECASE)
_VOLUME = re.compile(r"\b(?:customers?|clients?|users?)\b", re.IGNORECASE)
_PERCENTAGE = re.compile(r"\b(?:improv\w*|increas\w*|better)\b", re.IGNORECASE)
_FREQUENCY = re.compile(r"\b(?:daily|weekly|regular(?:ly)?)\b", re.IGNORECASE)

SuggestionBuilder = Callable[[str, str, str], QuantificationSuggestion]


def _escape_braces(text: str) -> str:
    """Double literal braces so the template keeps a single format placeholder."""
    return text.replace("{", "{{").replace("}", "}}")


def _size_suggestion(text: str, industry: str, role_level: str) -> QuantificationSuggestion:
    return QuantificationSuggestion(
        question="How many people did you work with?",
        template=_SIZE.sub("team of {size} members", _escape_braces(text), count=1),
        options=list(TEAM_SIZE_OPTIONS.get(role_level, DEFAULT_TEAM_SIZE_OPTIONS)),
        category="size",
    )


def _volume_suggestion(text: str, industry: str, role_level: str) -> QuantificationSuggestion:
    return QuantificationSuggestion(
        question="How many customers/clients did you serve?",
        template=_VOLUME.sub("{volume}+ customers", _escape_braces(text), count=1),
        options=list(VOLUME_OPTIONS.get(industry, DEFAULT_VOLUME_OPTIONS)),
        category="volume",
    )


def _percentage_suggestion(text: str, industry: str, role_level: str) -> QuantificationSuggestion:
    return QuantificationSuggestion(
        question="By what percentage did you improve things?",
        template=_PERCENTAGE.sub("improved by {percentage}%", _escape_braces(text), count=1),
        options=list(PERCENTAGE_OPTIONS.get(role_level, DEFAULT_PERCENTAGE_OPTIONS)),
        category="percentage",
    )


def _frequency_suggestion(text: str, industry: str, role_level: str) -> QuantificationSuggestion:
    return QuantificationSuggestion(
        question="How often did this happen?",
        template=_FREQUENCY.sub("{frequency}", _escape_braces(text), count=1),
        options=list(FREQUENCY_OPTIONS),
        category="frequency",
    )


# Evaluated in order; the first MAX_SUGGESTIONS matches are kept
QUANTIFICATION_TRIGGERS: tuple[tuple[re.Pattern[str], SuggestionBuilder], ...] = (
    (_SIZE, _size_suggestion),
    (_VOLUME, _volume_suggestion),
    (_PERCENTAGE, _percentage_suggestion),
    (_FREQUENCY, _frequency_suggestion),
)


# ── Engine ───────────────────────────────────────────────────────────────────


class EnhancementEngine:
    def __init__(self, ai_manager: AIServiceManager):
        self.ai_manager = ai_manager

    async def enhance(
        self,
        original_text: str,
        industry: str = "general",
        role_level: str = "entry",
        context: Optional[EnhancementContext] = None,
    ) -> EnhancementResult:
        if not original_text or not original_text.strip():
            raise InputError()

        industry = industry or "general"
        level = normalize_role_level(role_level)
        ctx = (context or EnhancementContext()).model_copy(update={
            "industry": (context.industry if context else None) or industry,
            "role_level": (context.role_level if context else None) or level,
        })

        enhanced = await self._base_enhancement(original_text, ctx)
        alternatives = self.generate_alternatives(original_text, enhanced, industry, level)
        suggestions = self.create_quantification_suggestions(original_text, industry, level)

        improvements = EnhancementImprovements(
            confidence=score_confidence(original_text, enhanced, suggestion_count=len(suggestions)),
            quantification_suggestions=suggestions,
            strengthened_words=find_strengthened_words(original_text, enhanced),
            added_metrics=find_added_metrics(original_text, enhanced),
        )
        logger.info(
            f"Engine enhancement: industry={industry} level={level} "
            f"alternatives={len(alternatives)} suggestions={len(suggestions)} "
            f"confidence={improvements.confidence}"
        )
        return EnhancementResult(
            enhanced_text=enhanced,
            alternatives=alternatives,
            improvements=improvements,
            original_text=original_text,
        )

    async def _base_enhancement(self, text: str, ctx: EnhancementContext) -> str:
        try:
            result = await self.ai_manager.try_enhance_text(text, ctx)
        except Exception:
            logger.exception("Base enhancement raised unexpectedly, using local fallback")
            return self.fallback_enhancement(text)

        if isinstance(result, BackendSuccess):
            return result.text
        error_name = type(result.error).__name__ if isinstance(result, BackendFailure) else "unknown"
        logger.warning(f"Base enhancement failed ({error_name}), using local fallback")
        return self.fallback_enhancement(text)

    @staticmethod
    def fallback_enhancement(text: str) -> str:
        enhanced = text
        for weak, strong in ENGINE_FALLBACK_REPLACEMENTS:
            enhanced = replace_phrase(enhanced, weak, strong)
        return enhanced

    # ── Alternatives ─────────────────────────────────────────────────────

    def generate_alternatives(self, original: str, enhanced: str, industry: str, role_level: str) -> list[str]:
        candidates = [
            self._industry_alternative(original, industry),
            self._role_level_alternative(original, role_level),
        ]
        alternatives: list[str] = []
        for alt in candidates:
            if alt and alt != original and alt != enhanced and alt not in alternatives:
                alternatives.append(alt)
        return alternatives[:MAX_ALTERNATIVES]

    @staticmethod
    def _industry_alternative(text: str, industry: str) -> str | None:
        verb = ENGINE_INDUSTRY_TEMPLATES[engine_industry(industry)]["verbs"][0]
        alt = _INDUSTRY_VARIANT_VERBS.sub(verb, text)
        return alt if alt != text else None

    @staticmethod
    def _role_level_alternative(text: str, role_level: str) -> str | None:
        swap = ROLE_LEVEL_VERB_SWAPS.get(role_level)
        if swap is None:
            return None
        weak_verbs, replacement = swap
        pattern = re.compile(r"\b(?:" + "|".join(re.escape(v) for v in weak_verbs) + r")\b", re.IGNORECASE)
        alt = pattern.sub(replacement, text)
        return alt if alt != text else None

    # ── Quantification ───────────────────────────────────────────────────

    def create_quantification_suggestions(
        self, text: str, industry: str, role_level: str
    ) -> list[QuantificationSuggestion]:
        key = engine_industry(industry)
        level = normalize_role_level(role_level)
        suggestions = [
            build(text, key, level)
            for pattern, build in QUANTIFICATION_TRIGGERS
            if pattern.search(text)
        ]
        return suggestions[:MAX_SUGGESTIONS]
