"""
Skilled-trade templates. `X` in a metric marks the slot filled by
`TRADE_METRIC_FILLS` for that trade.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_TRADE = "construction"


@dataclass(frozen=True)
class TradeTemplate:
    verbs: tuple[str, ...]
    skills: tuple[str, ...]
    metrics: tuple[str, ...]
    certifications: tuple[str, ...]


TRADE_TEMPLATES: Mapping[str, TradeTemplate] = MappingProxyType({
    "plumbing": TradeTemplate(
        verbs=("installed", "repaired", "diagnosed", "maintained", "retrofitted", "inspected"),
        skills=("pipe fitting", "leak detection", "water pressure systems", "drain cleaning",
                "fixture installation"),
        metrics=("reduced service calls by X%", "completed X jobs per day",
                 "achieved X% customer satisfaction"),
        certifications=("licensed plumber", "backflow prevention", "gas line certified"),
    ),
    "hvac": TradeTemplate(
        verbs=("calibrated", "serviced", "optimized", "troubleshot", "commissioned", "balanced"),
        skills=("HVAC systems", "refrigeration", "ductwork", "thermostats", "air quality systems"),
        metrics=("improved efficiency by X%", "reduced energy costs by $X", "maintained X units"),
        certifications=("EPA 608 certified", "NATE certified", "refrigeration license"),
    ),
    "electrical": TradeTemplate(
        verbs=("wired", "installed", "tested", "troubleshot", "upgraded", "inspected"),
        skills=("electrical systems", "circuit analysis", "motor controls", "panel installation",
                "code compliance"),
        metrics=("completed X installations", "passed X% of inspections",
                 "reduced downtime by X hours"),
        certifications=("licensed electrician", "OSHA 10", "electrical code certified"),
    ),
    "construction": TradeTemplate(
        verbs=("constructed", "renovated", "demolished", "framed", "finished", "coordinated"),
        skills=("blueprints", "project management", "safety protocols", "quality control",
                "material ordering"),
        metrics=("completed projects X% under budget", "finished X weeks ahead of schedule",
                 "zero safety incidents"),
        certifications=("OSHA certified", "project management", "safety training"),
    ),
})

# trade -> ordered (placeholder, realistic value) pairs
TRADE_METRIC_FILLS: Mapping[str, tuple[tuple[str, str], ...]] = MappingProxyType({
    "plumbing": (("X%", "95%"), ("X jobs", "8-12 jobs"), ("$X", "$200-500")),
    "hvac": (("X%", "15-25%"), ("X units", "50+ units"), ("$X", "$300-800")),
    "electrical": (("X installations", "5-8 installations"), ("X%", "98%"), ("X hours", "4-6 hours")),
    "construction": (("X%", "20%"), ("X weeks", "2-3 weeks")),
})

TRADE_ALIASES: Mapping[str, str] = MappingProxyType({
    "plumber": "plumbing",
    "heating": "hvac",
    "hvac-r": "hvac",
    "electrician": "electrical",
    "general": "construction",
    "carpentry": "construction",
})

# Casual -> professional wording for trade bullets
TRADE_TONE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("stuff", "equipment"),
    ("things", "components"),
    ("a lot of", "numerous"),
    ("a lot", "numerous"),
    ("really good", "highly effective"),
    ("pretty much", "primarily"),
)

# Keyword -> trade-specific specialty line added to the metric suggestions
TRADE_SPECIALTIES: tuple[tuple[str, str, str], ...] = (
    ("plumbing", "pipe", "specialized in residential and commercial plumbing systems"),
    ("hvac", "system", "certified in multiple HVAC system types"),
    ("electrical", "wire", "compliant with NEC electrical codes"),
)
