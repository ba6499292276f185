"""
Keyword bank content: per-industry vocabularies, bullet rewrite templates,
industry context clauses and quantification fill-ins.

Loaded once at import and never mutated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class IndustryKeywords:
    """Vocabulary for one industry. `achievements` use `{X}` as the number slot."""

    action_verbs: tuple[str, ...]
    skills: tuple[str, ...]
    responsibilities: tuple[str, ...]
    achievements: tuple[str, ...]
    certifications: tuple[str, ...]
    tools: tuple[str, ...]
    metrics: tuple[str, ...]


@dataclass(frozen=True)
class ContentTemplate:
    """A whole-bullet rewrite applied when `pattern` matches the input."""

    pattern: re.Pattern[str]
    templates: tuple[str, ...]
    industries: tuple[str, ...]  # "all" matches any industry
    levels: tuple[str, ...]


@dataclass(frozen=True)
class ContextClause:
    """Clause appended for an industry when any trigger word appears."""

    industry: str
    triggers: tuple[str, ...]
    clause: str
    note: str


INDUSTRY_KEYWORDS: Mapping[str, IndustryKeywords] = MappingProxyType({
    "technology": IndustryKeywords(
        action_verbs=(
            "developed", "implemented", "architected", "optimized", "automated",
            "deployed", "designed", "engineered", "programmed", "integrated",
            "debugged", "tested", "maintained", "scaled", "refactored",
        ),
        skills=(
            "software development", "web development", "mobile development",
            "database design", "API development", "cloud computing", "DevOps",
            "machine learning", "data analysis", "cybersecurity", "UI/UX design",
        ),
        responsibilities=(
            "code review", "sprint planning", "technical documentation",
            "mentoring junior developers", "system architecture", "performance optimization",
            "security implementation", "quality assurance", "project management",
        ),
        achievements=(
            "reduced load time by {X}%", "increased user engagement by {X}%",
            "decreased bug reports by {X}%", "improved system performance by {X}%",
            "saved ${X} in operational costs", "delivered project {X} weeks ahead of schedule",
        ),
        certifications=(
            "AWS Certified", "Google Cloud Certified", "Microsoft Azure Certified",
            "Certified Scrum Master", "PMP", "CISSP", "CompTIA Security+",
        ),
        tools=(
            "JavaScript", "Python", "React", "Node.js", "Docker", "Kubernetes",
            "AWS", "Git", "Jenkins", "MongoDB", "PostgreSQL", "Redis",
        ),
        metrics=(
            "users served", "uptime percentage", "response time", "code coverage",
            "deployment frequency", "bug fix rate", "feature delivery time",
        ),
    ),
    "healthcare": IndustryKeywords(
        action_verbs=(
            "administered", "assessed", "diagnosed", "treated", "monitored",
            "documented", "coordinated", "educated", "collaborated", "implemented",
            "evaluated", "supervised", "maintained", "ensured", "provided",
        ),
        skills=(
            "patient care", "medical records", "clinical procedures", "patient education",
            "infection control", "medication administration", "vital signs monitoring",
            "emergency response", "care planning", "interdisciplinary collaboration",
        ),
        responsibilities=(
            "patient assessment", "treatment planning", "medication management",
            "documentation", "patient education", "quality improvement",
            "infection prevention", "emergency response", "staff supervision",
        ),
        achievements=(
            "improved patient satisfaction by {X}%", "reduced readmission rates by {X}%",
            "achieved {X}% compliance with safety protocols", "decreased wait times by {X} minutes",
            "managed caseload of {X} patients", "maintained {X}% accuracy in documentation",
        ),
        certifications=("RN", "LPN", "CNA", "BLS", "ACLS", "PALS", "CCRN", "CMA", "HIPAA Certified"),
        tools=(
            "EMR systems", "Epic", "Cerner", "medical devices", "diagnostic equipment",
            "HIPAA compliance tools", "patient monitoring systems",
        ),
        metrics=(
            "patient satisfaction scores", "infection rates", "medication errors",
            "patient outcomes", "response times", "compliance rates",
        ),
    ),
    "finance": IndustryKeywords(
        action_verbs=(
            "analyzed", "forecasted", "budgeted", "audited", "reconciled",
            "managed", "optimized", "evaluated", "reported", "assessed",
            "calculated", "projected", "monitored", "advised", "structured",
        ),
        skills=(
            "financial analysis", "budget management", "risk assessment", "investment analysis",
            "financial modeling", "regulatory compliance", "tax preparation", "auditing",
            "portfolio management", "financial reporting", "due diligence",
        ),
        responsibilities=(
            "financial reporting", "budget preparation", "variance analysis",
            "compliance monitoring", "risk management", "investment oversight",
            "client advisory", "process improvement", "team leadership",
        ),
        achievements=(
            "reduced costs by ${X}", "increased revenue by {X}%", "improved ROI by {X}%",
            "managed portfolio worth ${X}", "achieved {X}% accuracy in forecasting",
            "saved ${X} through process optimization",
        ),
        certifications=("CPA", "CFA", "FRM", "CIA", "CISA", "Series 7", "Series 66", "PMP"),
        tools=(
            "Excel", "SAP", "QuickBooks", "Bloomberg Terminal", "Tableau",
            "Power BI", "SQL", "Python", "R", "GAAP", "IFRS",
        ),
        metrics=(
            "portfolio performance", "cost savings", "revenue growth", "ROI",
            "accuracy rates", "compliance scores", "processing time",
        ),
    ),
    "sales": IndustryKeywords(
        action_verbs=(
            "achieved", "exceeded", "generated", "closed", "prospected",
            "negotiated", "converted", "built", "maintained", "expanded",
            "identified", "cultivated", "secured", "delivered", "maximized",
        ),
        skills=(
            "relationship building", "lead generation", "sales presentations", "negotiation",
            "CRM management", "market analysis", "customer retention", "pipeline management",
            "territory management", "consultative selling", "account management",
        ),
        responsibilities=(
            "lead qualification", "client presentations", "proposal development",
            "contract negotiation", "relationship management", "territory planning",
            "market research", "sales reporting", "team collaboration",
        ),
        achievements=(
            "exceeded quota by {X}%", "generated ${X} in new revenue",
            "closed {X} deals in a single quarter", "achieved {X}% conversion rate",
            "expanded territory by {X}%", "retained {X}% of client base",
        ),
        certifications=(
            "Salesforce Certified", "HubSpot Certified", "Challenger Sale Certified",
            "SPIN Selling Certified", "Miller Heiman Certified",
        ),
        tools=(
            "Salesforce", "HubSpot", "Pipedrive", "LinkedIn Sales Navigator",
            "Outreach", "ZoomInfo", "Gong", "Chorus", "Tableau",
        ),
        metrics=(
            "quota attainment", "conversion rates", "deal size", "sales cycle length",
            "pipeline value", "customer retention", "revenue growth",
        ),
    ),
    "plumbing": IndustryKeywords(
        action_verbs=(
            "installed", "repaired", "diagnosed", "maintained", "retrofitted",
            "inspected", "tested", "replaced", "upgraded", "troubleshot",
            "calibrated", "serviced", "assembled", "fabricated", "restored",
        ),
        skills=(
            "pipe fitting", "leak detection", "water pressure systems", "drain cleaning",
            "fixture installation", "backflow prevention", "gas line installation",
            "sewer repair", "water heater service", "plumbing codes", "blueprint reading",
        ),
        responsibilities=(
            "emergency repairs", "preventive maintenance", "system installation",
            "customer service", "code compliance", "safety protocols",
            "quality control", "material ordering", "project coordination",
        ),
        achievements=(
            "completed {X} service calls daily", "achieved {X}% customer satisfaction",
            "reduced callback rate by {X}%", "completed projects {X}% under budget",
            "maintained {X}% safety record", "passed {X}% of inspections on first try",
        ),
        certifications=(
            "Licensed Plumber", "Backflow Prevention Certified", "Gas Line Certified",
            "OSHA 10", "Green Plumber Certified", "Medical Gas Certified",
        ),
        tools=(
            "pipe wrenches", "drain snakes", "pressure testing equipment",
            "welding equipment", "pipe threading machines", "leak detection equipment",
        ),
        metrics=(
            "service calls completed", "customer satisfaction rating", "callback rate",
            "project completion time", "safety incidents", "inspection pass rate",
        ),
    ),
    "customer-service": IndustryKeywords(
        action_verbs=(
            "managed", "coordinated", "resolved", "assisted", "supported",
            "facilitated", "streamlined", "optimized", "enhanced", "improved",
            "maintained", "developed", "implemented", "monitored", "evaluated",
        ),
        skills=(
            "customer relationship management", "conflict resolution", "problem solving",
            "communication skills", "team leadership", "process improvement",
            "quality assurance", "training and development", "performance management",
            "data analysis", "customer satisfaction", "service delivery",
        ),
        responsibilities=(
            "customer support", "team supervision", "quality control", "process optimization",
            "staff training", "performance monitoring", "service delivery", "complaint resolution",
            "reporting and analytics", "continuous improvement", "stakeholder communication",
        ),
        achievements=(
            "improved customer satisfaction by {X}%", "reduced response time by {X}%",
            "increased team productivity by {X}%", "resolved {X}+ customer issues monthly",
            "achieved {X}% first-call resolution rate", "maintained {X}% service quality score",
        ),
        certifications=(
            "Customer Service Professional", "Six Sigma Green Belt", "Lean Management",
            "Project Management Professional", "Quality Management", "Leadership Training",
        ),
        tools=(
            "CRM systems", "Help Desk software", "Analytics platforms", "Communication tools",
            "Quality monitoring systems", "Training platforms", "Performance tracking tools",
        ),
        metrics=(
            "customer satisfaction scores", "response times", "resolution rates",
            "team productivity", "service quality", "employee retention",
        ),
    ),
    "hvac": IndustryKeywords(
        action_verbs=(
            "installed", "serviced", "calibrated", "diagnosed", "repaired",
            "maintained", "optimized", "commissioned", "balanced", "tested",
            "retrofitted", "upgraded", "monitored", "adjusted", "replaced",
        ),
        skills=(
            "HVAC systems", "refrigeration", "heat pumps", "ductwork design",
            "air quality systems", "energy efficiency", "control systems",
            "preventive maintenance", "system commissioning", "troubleshooting",
        ),
        responsibilities=(
            "system installation", "preventive maintenance", "emergency repairs",
            "energy audits", "customer service", "quality control",
            "safety compliance", "equipment testing", "technical documentation",
        ),
        achievements=(
            "improved energy efficiency by {X}%", "reduced service calls by {X}%",
            "maintained {X}+ units annually", "achieved {X}% uptime",
            "completed installations {X} days ahead of schedule", "saved customers ${X} annually",
        ),
        certifications=(
            "EPA 608 Certified", "NATE Certified", "HVAC Excellence Certified",
            "Refrigeration License", "OSHA 10", "Energy Star Certified",
        ),
        tools=(
            "refrigerant recovery equipment", "pressure gauges", "multimeters",
            "combustion analyzers", "ductwork tools", "brazing equipment",
        ),
        metrics=(
            "energy efficiency improvement", "system uptime", "maintenance schedules",
            "customer satisfaction", "emergency response time", "equipment lifespan",
        ),
    ),
    "electrical": IndustryKeywords(
        action_verbs=(
            "wired", "installed", "tested", "troubleshot", "upgraded",
            "maintained", "inspected", "repaired", "designed", "commissioned",
            "calibrated", "programmed", "configured", "integrated", "restored",
        ),
        skills=(
            "electrical systems", "circuit analysis", "motor controls", "panel installation",
            "code compliance", "power distribution", "lighting systems", "safety systems",
            "industrial controls", "renewable energy", "data/communication systems",
        ),
        responsibilities=(
            "electrical installation", "system maintenance", "code compliance",
            "safety inspections", "troubleshooting", "customer service",
            "project management", "quality assurance", "documentation",
        ),
        achievements=(
            "completed {X} installations monthly", "achieved {X}% inspection pass rate",
            "reduced downtime by {X} hours", "improved efficiency by {X}%",
            "completed projects {X}% under budget",
        ),
        certifications=(
            "Licensed Electrician", "OSHA 10", "NECA Certified", "IES Certified",
            "Solar Installation Certified", "Electrical Code Certified",
        ),
        tools=(
            "multimeters", "oscilloscopes", "wire strippers", "conduit benders",
            "power tools", "testing equipment", "PLCs", "motor drives",
        ),
        metrics=(
            "installations completed", "inspection pass rate", "downtime reduction",
            "safety record", "project completion time", "customer satisfaction",
        ),
    ),
})

# Free-form industry names that should land on a dictionary key
INDUSTRY_ALIASES: Mapping[str, str] = MappingProxyType({
    "tech": "technology",
    "software": "technology",
    "software-engineering": "technology",
    "it": "technology",
    "medical": "healthcare",
    "health": "healthcare",
    "accounting": "finance",
    "banking": "finance",
    "retail": "sales",
    "customer-support": "customer-service",
    "support": "customer-service",
    "customer-care": "customer-service",
    "heating-and-cooling": "hvac",
    "electrician": "electrical",
    "plumber": "plumbing",
})

CONTENT_TEMPLATES: tuple[ContentTemplate, ...] = (
    ContentTemplate(
        pattern=re.compile(r"^(?:i\s+)?(fixed|repaired|worked on)\s+(.+)", re.IGNORECASE),
        templates=(
            "Diagnosed and repaired {item} to restore optimal functionality",
            "Troubleshot and resolved {item} issues",
            "Performed comprehensive maintenance on {item}",
        ),
        industries=("plumbing", "hvac", "electrical"),
        levels=("entry", "mid", "senior"),
    ),
    ContentTemplate(
        pattern=re.compile(r"^(?:i\s+)?(managed|led)\s+(a team|people|staff)", re.IGNORECASE),
        templates=(
            "Led cross-functional team of {X} professionals to achieve project objectives",
            "Supervised and mentored {X} team members while maintaining operational efficiency",
            "Managed team performance and development resulting in {X}% productivity increase",
        ),
        industries=("all",),
        levels=("mid", "senior", "executive"),
    ),
    ContentTemplate(
        pattern=re.compile(r"^(?:i\s+)?(developed|built|created)\s+(.+)", re.IGNORECASE),
        templates=(
            "Developed and implemented {item}, improving operational efficiency",
            "Engineered {item} solutions to address complex business challenges",
            "Created a comprehensive {item} framework that expanded organizational capabilities",
        ),
        industries=("technology", "finance"),
        levels=("mid", "senior"),
    ),
)

CONTEXT_CLAUSES: tuple[ContextClause, ...] = (
    ContextClause("plumbing", ("install", "repair", "maintain"),
                  " in compliance with local plumbing codes and safety standards",
                  "Added code compliance context"),
    ContextClause("hvac", ("system", "hvac"),
                  " while ensuring optimal energy efficiency and performance",
                  "Added efficiency and performance context"),
    ContextClause("electrical", ("electrical", "wire", "install"),
                  " in accordance with NEC electrical codes and safety protocols",
                  "Added electrical code compliance"),
    ContextClause("technology", ("develop", "build", "create"),
                  " using industry best practices and modern development methodologies",
                  "Added development methodology context"),
    ContextClause("customer-service", ("customer", "service", "support"),
                  " while maintaining high quality standards and customer satisfaction",
                  "Added quality and satisfaction context"),
    ContextClause("customer-service", ("handle", "resolve", "complaint"),
                  " with professionalism and attention to detail",
                  "Added professionalism context"),
)

# Industry -> category -> candidate fill-ins
INDUSTRY_QUANTIFICATION: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "technology": MappingProxyType({
        "users": ("1K+", "10K+", "100K+", "1M+"),
        "performance": ("15%", "25%", "40%", "60%"),
        "time": ("2 weeks", "1 month", "3 months"),
    }),
    "sales": MappingProxyType({
        "percentage": ("110%", "125%", "150%", "200%"),
        "revenue": ("$50K", "$100K", "$500K", "$1M"),
        "deals": ("5", "10", "25", "50"),
    }),
    "plumbing": MappingProxyType({
        "calls": ("8-12", "10-15", "15-20"),
        "satisfaction": ("95%", "98%", "99%"),
        "projects": ("5", "10", "15", "25"),
    }),
    "hvac": MappingProxyType({
        "efficiency": ("15%", "20%", "25%", "30%"),
        "units": ("25", "50", "100", "200"),
        "uptime": ("95%", "98%", "99%", "99.5%"),
    }),
    "electrical": MappingProxyType({
        "installations": ("5", "8", "12", "20"),
        "passRate": ("95%", "98%", "100%"),
        "downtime": ("2", "4", "6", "8"),
    }),
    "general": MappingProxyType({
        "general": ("10%", "25%", "50%"),
        "projects": ("3", "5", "10", "15"),
    }),
})
