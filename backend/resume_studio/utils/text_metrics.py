"""
Heuristics over bullet text: quantification detection, metric extraction,
and the improvement-confidence score.
"""

from __future__ import annotations

import re

from resume_studio.content.verbs import CONFIDENCE_STRONG_VERBS

# Any one of these means the text already carries a concrete number
QUANTIFICATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d+%"),
    re.compile(r"\d+\+"),
    re.compile(r"\$\d+"),
    re.compile(r"\d+\s*(hours|days|weeks|months|years)", re.IGNORECASE),
    re.compile(r"\d+\s*(people|members|clients|customers)", re.IGNORECASE),
    re.compile(r"\d+\s*(projects|tasks|cases)", re.IGNORECASE),
)

_METRIC_TOKEN = re.compile(r"\$?\d+(?:,\d{3})*(?:\.\d+)?(?:%|\+|[KMB]\b)?")
_PERCENTAGE = re.compile(r"\d+(?:\.\d+)?%")
_DOLLAR = re.compile(r"\$[\d,]+(?:\.\d+)?[KMB]?")
_NUMBER = re.compile(r"\d+(?:,\d{3})*(?:\.\d+)?")
_WORD_STRIP = ".,;:!?\"'()[]"

BASE_CONFIDENCE = 0.6
MAX_CONFIDENCE = 0.95


def has_quantification(text: str) -> bool:
    return any(p.search(text) for p in QUANTIFICATION_PATTERNS)


def metric_tokens(text: str) -> list[str]:
    """Numeric / percentage / currency tokens in order of appearance."""
    return _METRIC_TOKEN.findall(text)


def find_added_metrics(original: str, enhanced: str, limit: int = 2) -> list[str]:
    """Metric tokens present in `enhanced` but not in `original`."""
    seen = set(metric_tokens(original))
    added: list[str] = []
    for token in metric_tokens(enhanced):
        if token not in seen and token not in added:
            added.append(token)
    return added[:limit]


def find_strengthened_words(original: str, enhanced: str, limit: int = 3) -> list[str]:
    """Alphabetic words longer than 3 chars that the enhancement introduced."""
    original_words = {w.strip(_WORD_STRIP) for w in original.lower().split()}
    found: list[str] = []
    for raw in enhanced.lower().split():
        word = raw.strip(_WORD_STRIP)
        if len(word) > 3 and word.isascii() and word.isalpha() and word not in original_words:
            if word not in found:
                found.append(word)
    return found[:limit]


def word_count(text: str) -> int:
    return len(text.split())


def score_confidence(original: str, enhanced: str, suggestion_count: int = 0) -> float:
    """
    Deterministic improvement confidence in [0, 0.95].

    Base 0.6, plus 0.15 for a newly added metric, 0.10 for a strong verb,
    0.10 when quantification suggestions exist, and 0.05 when the rewrite
    grew to between 1.2x and 2x the original word count.
    """
    confidence = BASE_CONFIDENCE

    if find_added_metrics(original, enhanced, limit=1):
        confidence += 0.15

    enhanced_lower = enhanced.lower()
    if any(verb in enhanced_lower for verb in CONFIDENCE_STRONG_VERBS):
        confidence += 0.10

    if suggestion_count > 0:
        confidence += 0.10

    original_words = word_count(original)
    enhanced_words = word_count(enhanced)
    if original_words and original_words * 1.2 <= enhanced_words <= original_words * 2:
        confidence += 0.05

    return round(max(0.0, min(confidence, MAX_CONFIDENCE)), 2)


def extract_quantification(text: str) -> dict[str, object]:
    """Summarize the numbers an AI rewrite introduced."""
    return {
        "numbers": _NUMBER.findall(text),
        "percentages": _PERCENTAGE.findall(text),
        "dollarAmounts": _DOLLAR.findall(text),
        "hasQuantification": has_quantification(text),
    }
