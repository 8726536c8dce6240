"""Candidate profile models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from job_match.models._coerce import coerce_to_list, coerce_to_str


class Experience(BaseModel):
    """Work experience entry."""

    title: str
    company: str
    period: str
    description: str


class Education(BaseModel):
    """Education entry."""

    degree: str
    institution: str
    year: str


class CandidateProfile(BaseModel):
    """Candidate profile as consumed by the matcher.

    Every field is optional here: missing values degrade to zero-scored
    components at match time instead of failing.
    """

    title: str = ""
    skills: list[str] = Field(default_factory=list)
    location: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    about: str | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> list[str]:
        return coerce_to_list(v)

    @field_validator("title", "location", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return coerce_to_str(v)

    @field_validator("experience", "education", mode="before")
    @classmethod
    def coerce_entries(cls, v: Any) -> Any:
        return [] if v is None else v


class CandidateProfileSubmission(CandidateProfile):
    """Candidate profile as submitted through the profile form.

    Applies the submission rules: a 3-100 character title, at least one
    skill, a location and a 10-1000 character presentation.
    """

    title: str = Field(min_length=3, max_length=100)
    skills: list[str] = Field(min_length=1)
    location: str = Field(min_length=1)
    about: str = Field(min_length=10, max_length=1000)


def validate_candidate_profile(data: dict[str, Any]) -> CandidateProfileSubmission:
    """Validate a submitted candidate profile.

    Raises:
        pydantic.ValidationError: If the submission breaks any rule.
    """
    return CandidateProfileSubmission.model_validate(data)
