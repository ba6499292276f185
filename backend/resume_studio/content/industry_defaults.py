"""
Industry defaults: realistic numeric ranges used to size quantification.

Level-scaled tuples are ordered entry, mid, senior, executive.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

DEFAULT_INDUSTRY_KEY = "project_management"


@dataclass(frozen=True)
class IndustryDefaults:
    scope: str
    improvement: str
    timeframe: str
    metrics: tuple[str, ...]
    percent_by_level: tuple[int, int, int, int]
    count_by_level: tuple[int, int, int, int]
    dollars_by_level: tuple[str, str, str, str]
    team_size: Optional[str] = None


INDUSTRY_DEFAULTS: Mapping[str, IndustryDefaults] = MappingProxyType({
    "software_engineering": IndustryDefaults(
        team_size="5-8 members",
        scope="multiple features",
        improvement="15-25%",
        timeframe="quarterly",
        metrics=("code quality", "deployment frequency", "bug reduction"),
        percent_by_level=(15, 20, 25, 35),
        count_by_level=(3, 5, 8, 12),
        dollars_by_level=("10K", "50K", "250K", "1M"),
    ),
    "sales": IndustryDefaults(
        scope="50+ clients",
        improvement="20-30%",
        timeframe="monthly/quarterly",
        metrics=("revenue growth", "client acquisition", "deal size"),
        percent_by_level=(20, 25, 30, 40),
        count_by_level=(10, 25, 50, 100),
        dollars_by_level=("50K", "250K", "1M", "5M"),
    ),
    "marketing": IndustryDefaults(
        scope="10K+ audience",
        improvement="25-40%",
        timeframe="monthly",
        metrics=("campaign performance", "lead generation", "brand awareness"),
        percent_by_level=(25, 30, 40, 60),
        count_by_level=(5, 10, 20, 40),
        dollars_by_level=("10K", "50K", "200K", "1M"),
    ),
    "customer_service": IndustryDefaults(
        scope="100+ daily interactions",
        improvement="95%+ satisfaction",
        timeframe="daily/weekly",
        metrics=("customer satisfaction", "response time", "resolution rate"),
        percent_by_level=(15, 20, 25, 35),
        count_by_level=(50, 100, 200, 500),
        dollars_by_level=("5K", "20K", "100K", "500K"),
    ),
    "project_management": IndustryDefaults(
        team_size="8-15 members",
        scope="$100K-$500K budget",
        improvement="on-time delivery",
        timeframe="project lifecycle",
        metrics=("on-time delivery", "budget adherence", "stakeholder satisfaction"),
        percent_by_level=(10, 15, 25, 35),
        count_by_level=(3, 5, 8, 12),
        dollars_by_level=("100K", "250K", "500K", "2M"),
    ),
    "finance": IndustryDefaults(
        scope="$1M-$10M portfolio",
        improvement="8-15%",
        timeframe="quarterly/annually",
        metrics=("portfolio performance", "risk management", "compliance"),
        percent_by_level=(8, 10, 12, 15),
        count_by_level=(10, 25, 50, 100),
        dollars_by_level=("500K", "1M", "5M", "10M"),
    ),
    "healthcare": IndustryDefaults(
        scope="50-200 patients",
        improvement="20-30%",
        timeframe="monthly",
        metrics=("patient outcomes", "efficiency gains", "quality metrics"),
        percent_by_level=(20, 22, 25, 30),
        count_by_level=(20, 50, 100, 200),
        dollars_by_level=("10K", "50K", "100K", "500K"),
    ),
    "education": IndustryDefaults(
        scope="25-100 students",
        improvement="15-25%",
        timeframe="semester/academic year",
        metrics=("student performance", "engagement rates", "learning outcomes"),
        percent_by_level=(15, 18, 22, 25),
        count_by_level=(25, 50, 75, 100),
        dollars_by_level=("5K", "10K", "50K", "100K"),
    ),
})

# Vocabulary used for rule-based skill suggestions
INDUSTRY_VOCABULARY: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "software_engineering": MappingProxyType({
        "technical": ("API", "microservices", "cloud infrastructure", "CI/CD",
                      "agile methodology", "code review", "unit testing", "database optimization"),
        "actions": ("Developed", "Architected", "Implemented", "Optimized",
                    "Debugged", "Refactored", "Deployed", "Maintained"),
    }),
    "sales": MappingProxyType({
        "technical": ("CRM", "lead generation", "pipeline management", "client relationship",
                      "sales cycle", "prospecting", "negotiation"),
        "actions": ("Generated", "Secured", "Closed", "Negotiated",
                    "Developed", "Expanded", "Acquired", "Maintained"),
    }),
    "marketing": MappingProxyType({
        "technical": ("campaign management", "digital marketing", "SEO", "social media",
                      "content creation", "analytics", "brand awareness"),
        "actions": ("Developed", "Executed", "Optimized", "Analyzed",
                    "Created", "Managed", "Increased", "Generated"),
    }),
    "customer_service": MappingProxyType({
        "technical": ("customer support", "ticket management", "knowledge base",
                      "customer satisfaction", "resolution time", "service quality"),
        "actions": ("Resolved", "Assisted", "Supported", "Addressed",
                    "Processed", "Managed", "Improved", "Enhanced"),
    }),
    "project_management": MappingProxyType({
        "technical": ("project planning", "stakeholder management", "risk assessment",
                      "budget management", "timeline coordination", "resource allocation"),
        "actions": ("Led", "Managed", "Coordinated", "Oversaw",
                    "Delivered", "Executed", "Planned", "Implemented"),
    }),
})

GENERIC_SKILLS: tuple[str, ...] = (
    "Project Management", "Leadership", "Communication", "Problem Solving", "Team Collaboration",
)

# Rates (satisfaction, accuracy, uptime ...) and short durations, by level
RATE_BY_LEVEL: tuple[int, int, int, int] = (95, 97, 98, 99)
DURATION_BY_LEVEL: tuple[int, int, int, int] = (2, 3, 4, 6)
