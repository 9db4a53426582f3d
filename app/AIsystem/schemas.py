# app/AIsystem/schemas.py

from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from app.medical_models.camel_schema import CamelModel


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================
class ChatMessage(CamelModel):
    role: Literal["user", "assistant", "system"]
    content: str


class UserInfo(CamelModel):
    age: Optional[int] = Field(None, ge=0)
    gender: Optional[str] = None
    medical_history: Optional[List[str]] = None


class SymptomCheckRequest(CamelModel):
    symptoms: List[str] = Field(..., min_length=1)
    user_info: Optional[UserInfo] = None

    @field_validator("symptoms")
    def drop_blank_symptoms(cls, v):
        cleaned = [s.strip() for s in v if s and s.strip()]
        if not cleaned:
            raise ValueError("At least one symptom is required")
        return cleaned


class ChatRequest(CamelModel):
    messages: List[ChatMessage] = Field(..., min_length=1)
    user_id: Optional[int] = None


class ChatResponse(CamelModel):
    response: str


# ============================================================================
# PYDANTIC OUTPUT SCHEMAS
# ============================================================================
class PossibleCondition(CamelModel):
    """One candidate condition from a symptom analysis."""

    name: str
    probability: Literal["High", "Medium", "Low"]
    description: str
    when_to_seek_care: str
    related_body_system: str = ""


class SymptomAnalysisResult(CamelModel):
    possible_conditions: List[PossibleCondition]
    disclaimer: str
    recommendations: List[str]


class DiseaseDetail(CamelModel):
    """Encyclopedia-style sections for a named disease."""

    overview: str
    causes: str = ""
    symptoms: str = ""
    diagnosis: str = ""
    treatments: str = ""
    prevention: str = ""
    research_updates: str = ""
    references: List[str] = Field(default_factory=list)


class NewsItem(CamelModel):
    title: str
    summary: str
    content: str
    source: str
    published_date: str
    category: str
    url: Optional[str] = None


class _ProviderModel(CamelModel):
    """Provider entries: a null optional field takes its default."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ProviderContact(_ProviderModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class Hospital(_ProviderModel):
    name: str
    location: str = ""
    specialties: List[str] = Field(default_factory=list)
    description: str = ""
    facilities: List[str] = Field(default_factory=list)
    accreditation: List[str] = Field(default_factory=list)
    contact: ProviderContact = Field(default_factory=ProviderContact)


class Doctor(_ProviderModel):
    name: str
    specialty: str = ""
    qualifications: List[str] = Field(default_factory=list)
    experience: str = ""
    hospital: str = ""
    location: str = ""
    languages: List[str] = Field(default_factory=list)
    expertise: List[str] = Field(default_factory=list)
    contact: ProviderContact = Field(default_factory=ProviderContact)


class HealthcareProviders(CamelModel):
    hospitals: List[Hospital] = Field(default_factory=list)
    doctors: List[Doctor] = Field(default_factory=list)
