"""Pydantic models for candidate/job match scoring."""

import math
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MatchWeights(BaseModel):
    """Weights applied to each component of the overall score."""

    model_config = ConfigDict(frozen=True)

    skills: float = Field(default=0.6, ge=0, le=1)
    location: float = Field(default=0.3, ge=0, le=1)
    title: float = Field(default=0.1, ge=0, le=1)

    @model_validator(mode="after")
    def check_total(self) -> Self:
        total = self.skills + self.location + self.title
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"weights must sum to 1.0, got {total:.6f}")
        return self


class MatchResult(BaseModel):
    """Compatibility between one candidate and one job, as integer percentages."""

    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100)
    skills: int = Field(ge=0, le=100)
    location: int = Field(ge=0, le=100)
    title: int = Field(ge=0, le=100)


class RankedJob(BaseModel):
    """A job together with its score and position in the original listing."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    job: Any
    match: MatchResult
