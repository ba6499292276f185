from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Literal, Optional, Union


# ── Resume Data (subset a cover letter needs) ──────────────────────────────


class PersonalInfo(BaseModel):
    """Candidate contact block; the UI sends either `name` or `fullName`."""

    name: Optional[str] = Field(None, validation_alias=AliasChoices("name", "fullName"))
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None


class SkillEntry(BaseModel):
    name: str
    category: Optional[str] = None


class ExperienceItem(BaseModel):
    """A work experience entry, most recent first."""

    title: Optional[str] = Field(None, validation_alias=AliasChoices("title", "jobTitle"))
    company: Optional[str] = Field(None, validation_alias=AliasChoices("company", "companyName"))
    description: Optional[str] = Field(
        None, validation_alias=AliasChoices("description", "jobDescription")
    )
    achievements: list[str] = []


class ResumeData(BaseModel):
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    skills: list[Union[str, SkillEntry]] = []
    experience: list[ExperienceItem] = []

    def skill_names(self, limit: int | None = None) -> list[str]:
        names = [s if isinstance(s, str) else s.name for s in self.skills]
        names = [n.strip() for n in names if n and n.strip()]
        return names[:limit] if limit is not None else names

    def most_recent_experience(self) -> Optional[ExperienceItem]:
        return self.experience[0] if self.experience else None


# ── Requests ───────────────────────────────────────────────────────────────


class CoverLetterRequest(BaseModel):
    """Input to CoverLetterEngine.generate_cover_letter."""

    model_config = ConfigDict(populate_by_name=True)

    resume_data: ResumeData = Field(default_factory=ResumeData, alias="resumeData")
    job_posting: Optional[str] = Field(None, alias="jobPosting")
    company_name: Optional[str] = Field(None, alias="companyName")
    position_title: Optional[str] = Field(None, alias="positionTitle")
    personalized_message: Optional[str] = Field(None, alias="personalizedMessage")


class JobDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company_name: Optional[str] = Field(None, alias="companyName")
    job_title: Optional[str] = Field(None, alias="jobTitle")


class CoverLetterTemplateRequest(BaseModel):
    """Body of POST /api/cover-letter/template."""

    model_config = ConfigDict(populate_by_name=True)

    resume_data: ResumeData = Field(alias="resumeData")
    job_details: JobDetails = Field(default_factory=JobDetails, alias="jobDetails")
    tone: str = "professional"
    focus: Literal["balanced", "experience", "skills", "achievements"] = "balanced"
    length: Literal["brief", "standard", "detailed"] = "standard"


class CoverLetterEnhanceRequest(BaseModel):
    content: str = ""
    context: dict[str, Any] = {}


# ── Responses ──────────────────────────────────────────────────────────────


class CoverLetterParts(BaseModel):
    """A template cover letter split into the sections the editor shows."""

    model_config = ConfigDict(populate_by_name=True)

    opening: str
    body: str
    closing: str
    signature: str
    full_text: str = Field(alias="fullText")


class CoverLetterResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    cover_letter: str = Field(alias="coverLetter")
