"""Configuration management for Job Match."""

from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from job_match.matching.models import MatchWeights


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JOB_MATCH_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Scoring weights (must sum to 1.0, checked when building MatchWeights)
    weight_skills: float = Field(default=0.6, ge=0, le=1)
    weight_location: float = Field(default=0.3, ge=0, le=1)
    weight_title: float = Field(default=0.1, ge=0, le=1)

    # Ranking
    min_score: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Default overall-score threshold for ranked results",
    )

    @property
    def match_weights(self) -> "MatchWeights":
        """Get scoring weights as a MatchWeights object."""
        from job_match.matching.models import MatchWeights

        return MatchWeights(
            skills=self.weight_skills,
            location=self.weight_location,
            title=self.weight_title,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
