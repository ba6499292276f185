"""
Enhancement engine tables: industry phrasing templates and the option lists
offered with each quantification suggestion.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

ENGINE_INDUSTRY_TEMPLATES: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "technology": MappingProxyType({
        "verbs": ("developed", "implemented", "optimized", "automated", "architected"),
        "metrics": ("performance", "efficiency", "scalability", "user engagement"),
        "buzzwords": ("agile", "cross-functional", "data-driven", "innovative"),
    }),
    "retail": MappingProxyType({
        "verbs": ("achieved", "exceeded", "maintained", "assisted", "processed"),
        "metrics": ("sales targets", "customer satisfaction", "inventory turnover"),
        "buzzwords": ("customer-focused", "results-driven", "detail-oriented"),
    }),
    "healthcare": MappingProxyType({
        "verbs": ("administered", "coordinated", "documented", "monitored", "treated"),
        "metrics": ("patient satisfaction", "compliance rates", "efficiency"),
        "buzzwords": ("patient-centered", "evidence-based", "collaborative"),
    }),
    "general": MappingProxyType({
        "verbs": ("delivered", "coordinated", "executed", "organized", "supported"),
        "metrics": ("efficiency", "quality", "turnaround time"),
        "buzzwords": ("results-driven", "collaborative", "detail-oriented"),
    }),
})

ENGINE_INDUSTRY_ALIASES: Mapping[str, str] = MappingProxyType({
    "tech": "technology",
    "software": "technology",
    "software_engineering": "technology",
    "it": "technology",
    "sales": "retail",
    "customer-service": "retail",
    "customer_service": "retail",
    "hospitality": "retail",
    "medical": "healthcare",
    "health": "healthcare",
})

TEAM_SIZE_OPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "entry": ("2-3", "3-5", "5-8"),
    "mid": ("5-8", "8-12", "12-15"),
    "senior": ("10-15", "15-25", "25+"),
    "executive": ("20+", "50+", "100+"),
})
DEFAULT_TEAM_SIZE_OPTIONS: tuple[str, ...] = ("3-5", "5-10", "10+")

VOLUME_OPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "retail": ("50", "100", "200", "500"),
    "technology": ("1,000", "5,000", "10,000", "50,000"),
    "healthcare": ("20", "50", "100", "200"),
})
DEFAULT_VOLUME_OPTIONS: tuple[str, ...] = ("50", "100", "200", "500")

PERCENTAGE_OPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "entry": ("15", "25", "35"),
    "mid": ("25", "35", "50"),
    "senior": ("40", "60", "80"),
    "executive": ("50", "100", "150"),
})
DEFAULT_PERCENTAGE_OPTIONS: tuple[str, ...] = ("20", "30", "40")

FREQUENCY_OPTIONS: tuple[str, ...] = ("daily", "weekly", "bi-weekly", "monthly")
