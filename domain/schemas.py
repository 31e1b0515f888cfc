import math
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union


def _string_list(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, list):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    raise ValueError("expected a string or a list of strings")


class GroundingSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    title: str


class Recommendations(BaseModel):
    model_config = ConfigDict(frozen=True)

    certifications: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)

    @field_validator("certifications", "opportunities", mode="before")
    @classmethod
    def _ensure_list(cls, value):
        return _string_list(value)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    resumeScore: int = 0
    missingSkills: List[str] = Field(default_factory=list)
    recommendations: Recommendations = Field(default_factory=Recommendations)
    summary: str = ""
    timestamp: str
    careerGoal: str
    sources: List[GroundingSource] = Field(default_factory=list)

    @field_validator("resumeScore", mode="before")
    @classmethod
    def _clamp_score(cls, value):
        if value is None or value == "":
            return 0
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError("resumeScore must be numeric")
        if not math.isfinite(number):
            raise ValueError("resumeScore must be a finite number")
        return max(0, min(100, round(number)))

    @field_validator("missingSkills", mode="before")
    @classmethod
    def _ensure_skills(cls, value):
        return _string_list(value)

    @field_validator("recommendations", mode="before")
    @classmethod
    def _ensure_recommendations(cls, value):
        return value if value is not None else {}

    @field_validator("summary", mode="before")
    @classmethod
    def _ensure_summary(cls, value):
        return "" if value is None else str(value).strip()


class Course(BaseModel):
    title: str = Field(..., min_length=1)
    provider: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)
    cost: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[str] = None


class Opportunity(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    link: str = Field(..., min_length=1)
    difficulty: Optional[str] = None


class LearningResult(BaseModel):
    courses: List[Course] = Field(default_factory=list)
    opportunities: List[Opportunity] = Field(default_factory=list)
    sources: List[GroundingSource] = Field(default_factory=list)
    fallback: bool = False
    message: Optional[str] = None


class AnalyzeRequest(BaseModel):
    resumeText: Optional[str] = None
    careerGoal: Optional[str] = None
    userId: Optional[str] = None


class CoursesRequest(BaseModel):
    role: Optional[str] = None
    skills: Union[List[str], str, None] = None


class UploadResult(BaseModel):
    extractedText: str
    characterCount: int
    analysis: Optional[AnalysisResult] = None


class CatalogSlice(BaseModel):
    type: str
    items: List[dict]
