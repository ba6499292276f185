from pydantic import BaseModel, ConfigDict, Field


class KeywordSuggestions(BaseModel):
    """Industry vocabulary offered next to a keyword-bank rewrite."""

    model_config = ConfigDict(populate_by_name=True)

    action_verbs: list[str] = Field(default_factory=list, alias="actionVerbs")
    skills: list[str] = []
    achievements: list[str] = []
    certifications: list[str] = []


class KeywordEnhancement(BaseModel):
    """Result of KeywordBank.enhance_text."""

    enhanced: str
    improvements: list[str] = []
    suggestions: KeywordSuggestions = Field(default_factory=KeywordSuggestions)
    confidence: float = Field(0.6, ge=0, le=0.95)
