"""
Industry and role-level normalization shared by every enhancer.
"""

from __future__ import annotations

from resume_studio.content.industry_defaults import DEFAULT_INDUSTRY_KEY
from resume_studio.content.keywords import INDUSTRY_ALIASES, INDUSTRY_KEYWORDS

ROLE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "executive")

_ROLE_LEVEL_ALIASES = {
    "entry-level": "entry",
    "junior": "entry",
    "intern": "entry",
    "mid-level": "mid",
    "intermediate": "mid",
    "senior-level": "senior",
    "lead": "senior",
    "exec": "executive",
    "director": "executive",
}

# Ordered (needles in industry, needles in job title, key); first hit wins
_INDUSTRY_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...], str], ...] = (
    (("software", "tech"), ("developer", "engineer"), "software_engineering"),
    (("sales",), ("sales",), "sales"),
    (("marketing",), ("marketing",), "marketing"),
    (("customer", "support"), ("customer", "support"), "customer_service"),
    (("project",), ("project",), "project_management"),
    (("finance", "accounting"), ("finance", "accountant"), "finance"),
    (("health", "medical"), ("nurse", "doctor"), "healthcare"),
    (("education", "teaching"), ("teacher", "professor"), "education"),
)


def resolve_industry_key(industry: str | None, job_title: str | None = None) -> str:
    """Map a free-form industry / job title onto an industry-defaults key."""
    industry_lower = (industry or "").lower()
    title_lower = (job_title or "").lower()

    for industry_needles, title_needles, key in _INDUSTRY_RULES:
        if any(n in industry_lower for n in industry_needles):
            return key
        if any(n in title_lower for n in title_needles):
            return key
    return DEFAULT_INDUSTRY_KEY


def normalize_role_level(level: str | None, default: str = "entry") -> str:
    """Coerce "mid-level", "Senior", "exec" etc. onto one of ROLE_LEVELS."""
    if not level:
        return default
    cleaned = level.strip().lower().replace("_", "-")
    if cleaned in ROLE_LEVELS:
        return cleaned
    return _ROLE_LEVEL_ALIASES.get(cleaned, default)


def level_index(level: str | None) -> int:
    """Position of a role level in ROLE_LEVELS (entry=0 .. executive=3)."""
    return ROLE_LEVELS.index(normalize_role_level(level))


def keyword_industry(industry: str | None) -> str | None:
    """Return the keyword-bank dictionary key for `industry`, or None."""
    if not industry:
        return None
    cleaned = industry.strip().lower().replace("_", "-").replace(" ", "-")
    if cleaned in INDUSTRY_KEYWORDS:
        return cleaned
    alias = INDUSTRY_ALIASES.get(cleaned)
    if alias in INDUSTRY_KEYWORDS:
        return alias
    return None
