"""
Verb and phrasing tables shared by the rule-based rewriters.

All tables are immutable and ordered; rewrite steps apply them first to last.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Weak phrasing -> strong action verb
WEAK_VERB_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("helped", "assisted"),
    ("worked on", "developed"),
    ("worked with", "collaborated with"),
    ("made", "created"),
    ("did", "executed"),
    ("used", "utilized"),
    ("got", "achieved"),
    ("fixed", "resolved"),
    ("managed", "supervised"),
    ("was responsible for", "spearheaded"),
    ("took care of", "maintained"),
    ("dealt with", "handled"),
)

# Casual language -> professional wording
CASUAL_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("a lot of", "numerous"),
    ("stuff", "materials"),
    ("things", "tasks"),
    ("guys", "team members"),
    ("okay", "satisfactory"),
    ("good", "effective"),
    ("bad", "suboptimal"),
)

# A bullet that opens with one of these needs no prepended verb
STRONG_START_VERBS: frozenset[str] = frozenset({
    "spearheaded", "developed", "implemented", "optimized", "streamlined",
    "orchestrated", "executed", "delivered", "achieved", "enhanced",
    "collaborated", "supervised", "coordinated", "facilitated", "analyzed",
    # openers produced by WEAK_VERB_REPLACEMENTS and LEAD_VERB_UPGRADES
    "assisted", "created", "utilized", "resolved", "maintained",
    "managed", "led", "designed", "launched", "established",
})

# Leading verbs that are acceptable mid-sentence but weak as an opener
LEAD_VERB_UPGRADES: tuple[tuple[str, str], ...] = (
    ("handled", "managed"),
    ("worked", "contributed"),
    ("ran", "directed"),
    ("had", "held"),
    ("saw", "oversaw"),
)

# Keyword -> verb to prepend when the text lacks a strong opener
STRONG_START_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("team", "people"), "Collaborated with"),
    (("project", "develop"), "Spearheaded"),
    (("system", "process"), "Optimized"),
)
DEFAULT_START_VERB = "Executed"

# Engine-local fallback table, deliberately smaller than WEAK_VERB_REPLACEMENTS
ENGINE_FALLBACK_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("helped", "assisted"),
    ("worked on", "collaborated on"),
    ("did", "executed"),
    ("made", "created"),
    ("got", "achieved"),
)

# Role level -> (weak verbs, replacement) for alternative phrasings
ROLE_LEVEL_VERB_SWAPS: Mapping[str, tuple[tuple[str, ...], str]] = MappingProxyType({
    "entry": (("managed", "led", "directed"), "supported"),
    "mid": (("helped", "assisted"), "coordinated"),
    "senior": (("worked on", "did"), "spearheaded"),
    "executive": (("worked on", "managed"), "strategically directed"),
})

# Verbs whose presence signals a stronger rewrite (confidence scoring)
CONFIDENCE_STRONG_VERBS: tuple[str, ...] = (
    "achieved", "implemented", "optimized", "streamlined", "accelerated", "enhanced",
)
