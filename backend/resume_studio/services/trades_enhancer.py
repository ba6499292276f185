"""
Trades Enhancer - bullet rewriting for plumbing, HVAC, electrical and construction work.

Responsibilities:
  • Swap weak verbs for the trade's own verbs
  • Normalize "customers" to "clients" once, with a professional-service framing
  • Suggest trade-specific metrics, skills and certifications
"""

from __future__ import annotations

import logging
import re

from resume_studio.content.trades import (
    DEFAULT_TRADE,
    TRADE_ALIASES,
    TRADE_METRIC_FILLS,
    TRADE_SPECIALTIES,
    TRADE_TEMPLATES,
    TRADE_TONE_REPLACEMENTS,
    TradeTemplate,
)
from resume_studio.models.trades_models import (
    TradeEnhanceResponse,
    TradeEnhancement,
    TradeSuggestions,
)
from resume_studio.utils.errors import InputError
from resume_studio.utils.text_cleanup import capitalize_first, normalize_text, replace_phrase

logger = logging.getLogger(__name__)

_PROFESSIONAL_SERVICE = "professional service"
_CUSTOMERS = re.compile(r"\bcustomer(s?)\b", re.IGNORECASE)
_ASSISTED_CLIENTS = re.compile(r"\bassisted\s+((?:(?:a|an|the)\s+)?clients?)\b", re.IGNORECASE)
# "helped (a) customer ..." already names who was helped
_HELPED_PEOPLE = re.compile(
    r"\bhelped(?=\s+(?:(?:a|an|the)\s+)?(?:customers?|clients?)\b)", re.IGNORECASE
)


def resolve_trade(trade: str | None) -> str:
    """Map a trade name or alias onto a template key; unknown trades become construction."""
    cleaned = (trade or "").strip().lower()
    if cleaned in TRADE_TEMPLATES:
        return cleaned
    return TRADE_ALIASES.get(cleaned, DEFAULT_TRADE)


class TradesEnhancer:
    def enhance_trade_description(self, text: str, trade: str | None = None) -> TradeEnhancement:
        if not text or not text.strip():
            raise InputError()

        key = resolve_trade(trade)
        template = TRADE_TEMPLATES[key]
        enhanced = normalize_text(text)
        improvements: list[str] = []
        metrics: list[str] = []

        enhanced = _HELPED_PEOPLE.sub("assisted", enhanced)
        for weak, strong in self._weak_verb_map(template):
            rewritten = replace_phrase(enhanced, weak, strong)
            if rewritten != enhanced:
                enhanced = rewritten
                improvements.append(f'Changed "{weak}" to "{strong}"')

        lower = enhanced.lower()
        if "customer" in lower and _PROFESSIONAL_SERVICE not in lower:
            enhanced = _CUSTOMERS.sub(r"client\1", enhanced)
            enhanced = _ASSISTED_CLIENTS.sub(r"provided professional service to \1", enhanced)
            improvements.append("Added professional service context")

        lower = enhanced.lower()
        if "daily" in lower or "every day" in lower:
            metrics.append("completed 8-12 service calls daily")
        if "install" in lower or "repair" in lower:
            metrics.append("maintained 95%+ customer satisfaction rating")
        for specialty_trade, keyword, line in TRADE_SPECIALTIES:
            if key == specialty_trade and keyword in lower:
                metrics.append(line)

        enhanced = self._improve_tone(enhanced)
        logger.debug(f"Trade enhancement ({key}): {len(improvements)} improvements, {len(metrics)} metrics")
        return TradeEnhancement(original=text, enhanced=enhanced, improvements=improvements, metrics=metrics)

    @staticmethod
    def _weak_verb_map(template: TradeTemplate) -> tuple[tuple[str, str], ...]:
        return (
            ("fixed", template.verbs[1]),
            ("worked on", template.verbs[0]),
            ("helped", "assisted customers with"),
            ("did", template.verbs[0]),
            ("made", "created"),
            ("handled", "managed"),
        )

    @staticmethod
    def _improve_tone(text: str) -> str:
        improved = capitalize_first(text.strip())
        if not improved.endswith((".", "!")):
            improved += "."
        for casual, professional in TRADE_TONE_REPLACEMENTS:
            improved = replace_phrase(improved, casual, professional)
        return improved

    # ── Suggestions ──────────────────────────────────────────────────────

    def get_trade_specific_suggestions(self, trade: str | None) -> dict[str, list[str]]:
        template = TRADE_TEMPLATES[resolve_trade(trade)]
        return {"skills": list(template.skills), "certifications": list(template.certifications)}

    def generate_metrics_options(self, trade: str | None, text: str = "") -> list[str]:
        """Trade metric templates with realistic numbers; options already in `text` are skipped."""
        key = resolve_trade(trade)
        lower = (text or "").lower()
        options: list[str] = []
        for metric in TRADE_TEMPLATES[key].metrics:
            filled = metric
            for placeholder, value in TRADE_METRIC_FILLS[key]:
                filled = filled.replace(placeholder, value, 1)
            if filled.lower() not in lower:
                options.append(filled)
        return options


def enhance_trade_text(text: str, trade: str | None = None, enhancer: TradesEnhancer | None = None) -> TradeEnhanceResponse:
    """Enhancement plus suggestions in the shape the trades endpoint returns."""
    enhancer = enhancer or TradesEnhancer()
    result = enhancer.enhance_trade_description(text, trade)
    extras = enhancer.get_trade_specific_suggestions(trade)
    metrics = list(result.metrics)
    metrics.extend(m for m in enhancer.generate_metrics_options(trade, text) if m not in metrics)
    return TradeEnhanceResponse(
        success=True,
        original=result.original,
        enhanced=result.enhanced,
        suggestions=TradeSuggestions(
            improvements=result.improvements,
            metrics=metrics,
            skills=extras["skills"],
            certifications=extras["certifications"],
        ),
    )
