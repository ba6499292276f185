from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional


RoleLevel = Literal["entry", "mid", "senior", "executive"]
SuggestionCategory = Literal["size", "volume", "percentage", "time", "money", "frequency"]
ContentType = Literal["experience", "summary", "achievement", "skills", "education", "cover_letter"]


class _CamelModel(BaseModel):
    """Accepts both the camelCase names the UI sends and snake_case names."""

    model_config = ConfigDict(populate_by_name=True)


# ── Context ────────────────────────────────────────────────────────────────


class EnhancementContext(_CamelModel):
    """Optional hints that steer an enhancement. Unknown keys are rejected."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    industry: Optional[str] = None
    role_level: Optional[str] = Field(None, alias="roleLevel")
    job_title: Optional[str] = Field(None, alias="jobTitle")
    company_name: Optional[str] = Field(None, alias="companyName")
    experience_level: Optional[str] = Field(None, alias="experienceLevel")
    bulk_mode: bool = Field(False, alias="bulkMode")
    item_index: int = Field(0, alias="itemIndex", ge=0)
    total_items: int = Field(1, alias="totalItems", ge=1)
    content_type: Optional[ContentType] = Field(None, alias="type")
    years_experience: Optional[float] = Field(None, alias="yearsExperience", ge=0)
    company_size: Optional[str] = Field(None, alias="companySize")
    key_skills: list[str] = Field(default_factory=list, alias="keySkills")


# ── Engine Result ──────────────────────────────────────────────────────────


class QuantificationSuggestion(_CamelModel):
    """A fill-in question offered alongside an enhanced bullet."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question: str
    template: str  # contains exactly one of {size} {volume} {percentage} {frequency}
    options: list[str] = Field(min_length=1)
    category: SuggestionCategory


class EnhancementImprovements(_CamelModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    confidence: float = Field(ge=0, le=0.95)
    quantification_suggestions: list[QuantificationSuggestion] = Field(
        default_factory=list, alias="quantificationSuggestions", max_length=2
    )
    strengthened_words: list[str] = Field(default_factory=list, alias="strengthenedWords", max_length=3)
    added_metrics: list[str] = Field(default_factory=list, alias="addedMetrics", max_length=2)


class EnhancementResult(_CamelModel):
    """Full output of the enhancement engine for one bullet."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    enhanced_text: str = Field(alias="enhancedText")
    alternatives: list[str] = Field(default_factory=list, max_length=3)
    improvements: EnhancementImprovements
    original_text: str = Field(alias="originalText")


# ── Requests ───────────────────────────────────────────────────────────────


class EnhancementRequest(_CamelModel):
    """Request body for the enhancement engine endpoint."""

    original_text: str = Field("", alias="originalText")
    text: Optional[str] = None
    industry: str = "general"
    role_level: str = Field("entry", alias="roleLevel")
    context: EnhancementContext = Field(default_factory=EnhancementContext)

    @property
    def source_text(self) -> str:
        return self.original_text or self.text or ""


class KeywordEnhanceRequest(BaseModel):
    """Body of POST /api/enhance."""

    text: str = ""
    industry: Optional[str] = None
    level: Optional[str] = None
    type: Optional[Literal["search", "quantify"]] = None


class AIEnhanceRequest(BaseModel):
    """Body shared by the single-text AI / rule-based endpoints."""

    text: str = ""
    context: EnhancementContext = Field(default_factory=EnhancementContext)


class RuleBasedRequest(BaseModel):
    text: str = ""
    texts: list[str] = []
    type: Optional[Literal["bulk", "skills", "summary"]] = None
    context: EnhancementContext = Field(default_factory=EnhancementContext)


class SuggestContext(_CamelModel):
    job_title: Optional[str] = Field(None, alias="jobTitle")
    industry: Optional[str] = None
    experience_level: Optional[str] = Field(None, alias="experienceLevel")
    years_experience: Optional[str | float] = Field(None, alias="yearsExperience")
    key_skills: list[str] = Field(default_factory=list, alias="keySkills")
    company_name: Optional[str] = Field(None, alias="companyName")
    responsibilities: Optional[str] = None


class SuggestRequest(BaseModel):
    type: Literal["skills", "summary", "achievements"]
    context: SuggestContext = Field(default_factory=SuggestContext)
