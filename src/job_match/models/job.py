"""Job posting models."""

from typing import Any, Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from job_match.models._coerce import coerce_to_list, coerce_to_str

ContractType = Literal["CDI", "CDD", "Stage", "Freelance"]


class Salary(BaseModel):
    """Salary range for a posting."""

    min: float | None = Field(default=None, ge=0)
    max: float | None = Field(default=None, ge=0)
    currency: str = "EUR"

    @model_validator(mode="after")
    def check_range(self) -> Self:
        if self.min is not None and self.max is not None and self.max < self.min:
            raise ValueError("salary max must not be below salary min")
        return self


class JobPosting(BaseModel):
    """Job posting as consumed by the matcher."""

    title: str = ""
    requirements: list[str] = Field(default_factory=list)
    location: str = ""
    company: str | None = None
    type: ContractType | None = None
    description: str | None = None
    salary: Salary | None = None

    @field_validator("requirements", mode="before")
    @classmethod
    def coerce_requirements(cls, v: Any) -> list[str]:
        return coerce_to_list(v)

    @field_validator("title", "location", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return coerce_to_str(v)


class JobOfferSubmission(JobPosting):
    """Job offer as submitted by a recruiter."""

    title: str = Field(min_length=3, max_length=100)
    requirements: list[str] = Field(min_length=1)
    location: str = Field(min_length=1)
    company: str = Field(min_length=1)
    type: ContractType
    description: str = Field(min_length=10)


def validate_job_offer(data: dict[str, Any]) -> JobOfferSubmission:
    """Validate a submitted job offer.

    Raises:
        pydantic.ValidationError: If the submission breaks any rule.
    """
    return JobOfferSubmission.model_validate(data)
