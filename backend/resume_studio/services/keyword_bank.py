"""
Keyword Bank - industry vocabulary lookup and level-aware bullet rewriting.

Responsibilities:
  • Case-insensitive keyword search over the static industry dictionaries
  • Quantification fill-ins per industry and per category detected in text
  • A second enhancement entry point that scales verbs and numbers by
    role level and industry defaults
"""

from __future__ import annotations

import logging
import re

from resume_studio.content.engine_templates import FREQUENCY_OPTIONS
from resume_studio.content.industry_defaults import (
    DURATION_BY_LEVEL,
    INDUSTRY_DEFAULTS,
    RATE_BY_LEVEL,
    IndustryDefaults,
)
from resume_studio.content.keywords import (
    CONTENT_TEMPLATES,
    CONTEXT_CLAUSES,
    INDUSTRY_KEYWORDS,
    INDUSTRY_QUANTIFICATION,
    IndustryKeywords,
)
from resume_studio.content.verbs import (
    CASUAL_REPLACEMENTS,
    LEAD_VERB_UPGRADES,
    STRONG_START_RULES,
    STRONG_START_VERBS,
    DEFAULT_START_VERB,
    WEAK_VERB_REPLACEMENTS,
)
from resume_studio.models.keyword_models import KeywordEnhancement, KeywordSuggestions
from resume_studio.utils.errors import InputError
from resume_studio.utils.industry import (
    keyword_industry,
    level_index,
    normalize_role_level,
    resolve_industry_key,
)
from resume_studio.utils.text_cleanup import (
    capitalize_first,
    lower_first,
    normalize_text,
    replace_phrase,
    strip_leading_pronoun,
)
from resume_studio.utils.text_metrics import has_quantification, score_confidence

logger = logging.getLogger(__name__)

# Dictionary fields searched, in result order
_SEARCH_FIELDS = ("action_verbs", "skills", "responsibilities", "tools", "certifications", "metrics")
_STOPWORDS = frozenset({"and", "the", "for", "with", "of", "in", "on", "to", "a", "an"})
_RATE_WORDS = (
    "satisfaction", "accuracy", "compliance", "uptime", "pass rate", "safety record",
    "resolution", "quality score", "retained", "inspections",
)
_DURATION = re.compile(r"\{X\}(\s+(?:minutes|hours|days|weeks))")

# Category -> trigger words for text-detected quantification
_CATEGORY_TRIGGERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("size", ("team", "group", "people", "staff")),
    ("volume", ("customer", "client", "user", "patient", "student", "call", "ticket")),
    ("percentage", ("improve", "increase", "reduce", "better", "grow")),
    ("money", ("budget", "cost", "revenue", "sales", "saving", "$")),
    ("frequency", ("daily", "weekly", "monthly", "regular")),
    ("time", ("deadline", "schedule", "ahead", "timeline")),
)


class KeywordBank:
    """Read-only view over the industry keyword dictionaries."""

    def get_industry_keywords(self, industry: str | None) -> IndustryKeywords | None:
        key = keyword_industry(industry)
        return INDUSTRY_KEYWORDS[key] if key else None

    def get_all_industries(self) -> list[str]:
        return list(INDUSTRY_KEYWORDS)

    # ── Search ───────────────────────────────────────────────────────────

    def search_keywords(self, query: str, industry: str | None = None, limit: int = 25) -> list[str]:
        """
        Entries matching the whole query or any of its words, in dictionary order.

        An unknown or missing industry searches every dictionary.
        """
        query_lower = (query or "").strip().lower()
        if not query_lower:
            return []

        tokens = [
            t for t in re.findall(r"[a-z0-9+#./]+", query_lower)
            if len(t) >= 3 and t not in _STOPWORDS
        ]
        key = keyword_industry(industry)
        keys = [key] if key else list(INDUSTRY_KEYWORDS)

        results: list[str] = []
        for ind in keys:
            keywords = INDUSTRY_KEYWORDS[ind]
            for field in _SEARCH_FIELDS:
                for entry in getattr(keywords, field):
                    entry_lower = entry.lower()
                    if query_lower in entry_lower or any(t in entry_lower for t in tokens):
                        if entry not in results:
                            results.append(entry)

        logger.debug(f"Keyword search {query!r} in {keys}: {len(results)} hits")
        return results[:limit]

    # ── Quantification ───────────────────────────────────────────────────

    def get_quantification_suggestions(self, industry: str | None, text: str) -> dict[str, list[str]]:
        """Fill-ins for each category detected in `text`, then the industry's own table."""
        defaults = INDUSTRY_DEFAULTS[resolve_industry_key(industry)]
        suggestions = self._detected_categories(text, defaults)

        table_key = keyword_industry(industry)
        table = INDUSTRY_QUANTIFICATION.get(table_key or "general", INDUSTRY_QUANTIFICATION["general"])
        for category, options in table.items():
            suggestions.setdefault(category, list(options))
        return suggestions

    @staticmethod
    def _detected_categories(text: str, defaults: IndustryDefaults) -> dict[str, list[str]]:
        lower = (text or "").lower()
        options_by_category = {
            "size": _unique([defaults.team_size or "", "3-5", "5-10", "10+"]),
            "volume": [f"{n}+" for n in defaults.count_by_level],
            "percentage": [f"{p}%" for p in defaults.percent_by_level],
            "money": [f"${d}" for d in defaults.dollars_by_level],
            "frequency": list(FREQUENCY_OPTIONS),
            "time": _unique(["1 week", "2 weeks", "1 month", defaults.timeframe]),
        }
        detected: dict[str, list[str]] = {}
        for category, triggers in _CATEGORY_TRIGGERS:
            if any(t in lower for t in triggers):
                detected[category] = options_by_category[category]
        return detected

    # ── Enhancement ──────────────────────────────────────────────────────

    def enhance_text(self, text: str, industry: str | None, level: str | None = "entry") -> KeywordEnhancement:
        if not text or not text.strip():
            raise InputError()

        key = keyword_industry(industry)
        keywords = INDUSTRY_KEYWORDS[key] if key else None
        role_level = normalize_role_level(level)
        idx = level_index(role_level)
        defaults = INDUSTRY_DEFAULTS[resolve_industry_key(industry)]
        improvements: list[str] = []

        source = normalize_text(text)
        enhanced = self._apply_content_template(source, key, role_level, idx, defaults, improvements)
        if enhanced is None:
            enhanced = self._rewrite(strip_leading_pronoun(source), key, keywords, role_level, idx, improvements)
        if not has_quantification(enhanced):
            enhanced = self._add_scaled_metric(enhanced, keywords, defaults, idx, improvements)

        enhanced = capitalize_first(enhanced.strip())
        detected = self._detected_categories(source, defaults)
        confidence = score_confidence(source, enhanced, suggestion_count=len(detected))

        suggestions = KeywordSuggestions()
        if keywords is not None:
            suggestions = KeywordSuggestions(
                action_verbs=list(keywords.action_verbs[:8]),
                skills=list(keywords.skills[:10]),
                achievements=list(keywords.achievements[:6]),
                certifications=list(keywords.certifications[:5]),
            )

        logger.info(f"Keyword enhancement: industry={key or 'general'} level={role_level} steps={len(improvements)}")
        return KeywordEnhancement(
            enhanced=enhanced,
            improvements=improvements,
            suggestions=suggestions,
            confidence=confidence,
        )

    def _apply_content_template(
        self,
        text: str,
        key: str | None,
        role_level: str,
        idx: int,
        defaults: IndustryDefaults,
        improvements: list[str],
    ) -> str | None:
        for template in CONTENT_TEMPLATES:
            if role_level not in template.levels:
                continue
            if "all" not in template.industries and key not in template.industries:
                continue
            match = template.pattern.search(text)
            if not match:
                continue
            item = match.group(2).strip().rstrip(".") if match.lastindex and match.lastindex >= 2 else "systems"
            chosen = template.templates[idx % len(template.templates)]
            improvements.append(f"Applied {key or 'general'} industry template")
            return _fill_placeholders(chosen.replace("{item}", item), defaults, idx)
        return None

    def _rewrite(
        self,
        text: str,
        key: str | None,
        keywords: IndustryKeywords | None,
        role_level: str,
        idx: int,
        improvements: list[str],
    ) -> str:
        rewritten = text
        for weak, strong in (*WEAK_VERB_REPLACEMENTS, *CASUAL_REPLACEMENTS):
            rewritten = replace_phrase(rewritten, weak, strong)
        if rewritten != text:
            improvements.append("Replaced weak or casual wording")

        lower = rewritten.lower()
        for clause in CONTEXT_CLAUSES:
            if clause.industry == key and any(t in lower for t in clause.triggers):
                if clause.clause.strip() not in rewritten:
                    rewritten += clause.clause
                    improvements.append(clause.note)

        rewritten = self._ensure_opener(rewritten, keywords, idx, improvements)

        if role_level in ("senior", "executive") and not rewritten.lower().startswith("led "):
            rewritten = f"Led and {lower_first(rewritten)}"
            improvements.append(f"Added leadership context for {role_level} level")
        return rewritten

    @staticmethod
    def _ensure_opener(
        text: str, keywords: IndustryKeywords | None, idx: int, improvements: list[str]
    ) -> str:
        first, _, rest = text.partition(" ")
        first_lower = first.lower().strip(",.;:")
        if first_lower in STRONG_START_VERBS or (keywords and first_lower in keywords.action_verbs):
            return text

        for weak, upgrade in LEAD_VERB_UPGRADES:
            if first_lower == weak:
                improvements.append(f'Replaced "{first}" with "{upgrade}"')
                return f"{capitalize_first(upgrade)} {rest}".rstrip()

        if keywords is not None:
            verb = capitalize_first(keywords.action_verbs[idx % len(keywords.action_verbs)])
        else:
            lower = text.lower()
            verb = next(
                (v for words, v in STRONG_START_RULES if any(w in lower for w in words)),
                DEFAULT_START_VERB,
            )
        improvements.append(f'Opened with action verb "{verb}"')
        return f"{verb} {lower_first(text)}"

    @staticmethod
    def _add_scaled_metric(
        text: str,
        keywords: IndustryKeywords | None,
        defaults: IndustryDefaults,
        idx: int,
        improvements: list[str],
    ) -> str:
        if keywords is not None:
            achievement = keywords.achievements[idx % len(keywords.achievements)]
            clause = _fill_placeholders(achievement, defaults, idx)
        else:
            clause = f"delivered {defaults.percent_by_level[idx]}% improvement in {defaults.metrics[0]}"
        improvements.append("Added performance metrics")
        return f"{text.rstrip('.')}, and {clause}"


def _fill_placeholders(template: str, defaults: IndustryDefaults, idx: int) -> str:
    """Replace every {X} with a number sized for the role level and industry."""
    filled = template.replace("${X}", f"${defaults.dollars_by_level[idx]}")
    filled = _DURATION.sub(lambda m: f"{DURATION_BY_LEVEL[idx]}{m.group(1)}", filled)
    if "{X}%" in filled:
        lower = filled.lower()
        percent = RATE_BY_LEVEL[idx] if any(w in lower for w in _RATE_WORDS) else defaults.percent_by_level[idx]
        filled = filled.replace("{X}%", f"{percent}%")
    return filled.replace("{X}", str(defaults.count_by_level[idx]))


def _unique(items: list[str]) -> list[str]:
    out: list[str] = []
    for item in items:
        if item and item not in out:
            out.append(item)
    return out
