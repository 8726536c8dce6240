"""Weighted candidate/job compatibility scoring.

Combines three component scores (0-100 each) into an overall score:
skill overlap, exact location match and title token coverage.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from job_match.matching.models import MatchResult, MatchWeights, RankedJob
from job_match.matching.skills import skill_match
from job_match.matching.text import normalize

logger = logging.getLogger(__name__)


def _field(record: Any, name: str) -> Any:
    """Read an attribute from a model, dataclass or mapping record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13)."""
    return math.floor(value + 0.5)


def location_match(candidate_location: str | None, job_location: str | None) -> float:
    """Score 100 for a case-insensitive exact location match, else 0.

    A location missing on either side never matches.
    """
    if not candidate_location or not job_location:
        return 0.0
    return 100.0 if candidate_location.lower() == job_location.lower() else 0.0


def title_match(candidate_title: str | None, job_title: str | None) -> float:
    """Percentage of candidate title tokens found in the job title.

    Tokens must be equal after normalization; no substring matching here.
    """
    candidate_tokens = normalize(candidate_title)
    if not candidate_tokens:
        return 0.0

    job_tokens = set(normalize(job_title))
    matching = sum(1 for token in candidate_tokens if token in job_tokens)
    return matching / len(candidate_tokens) * 100


class JobMatcher:
    """Compute deterministic compatibility scores between candidates and jobs.

    Weights are fixed at construction time. Instances hold no other state and
    can be shared between threads.
    """

    # FUTURE: weights could be tuned per job type
    WEIGHTS = MatchWeights()

    def __init__(self, weights: MatchWeights | None = None):
        self.weights = weights or self.WEIGHTS

    def compute(self, candidate: Any, job: Any) -> MatchResult:
        """Score one candidate against one job.

        Args:
            candidate: Record exposing ``skills``, ``title`` and ``location``.
            job: Record exposing ``requirements``, ``title`` and ``location``.

        Returns:
            MatchResult with each field rounded independently.
        """
        skills = skill_match(_field(candidate, "skills"), _field(job, "requirements"))
        location = location_match(_field(candidate, "location"), _field(job, "location"))
        title = title_match(_field(candidate, "title"), _field(job, "title"))

        overall = (
            self.weights.skills * skills
            + self.weights.location * location
            + self.weights.title * title
        )

        logger.debug(
            "Match computed: overall=%.2f skills=%.2f location=%.2f title=%.2f",
            overall,
            skills,
            location,
            title,
        )

        return MatchResult(
            overall=_round_half_up(overall),
            skills=_round_half_up(skills),
            location=_round_half_up(location),
            title=_round_half_up(title),
        )

    def rank(self, candidate: Any, jobs: Iterable[Any], min_score: int = 0) -> list[RankedJob]:
        """Score every job for a candidate and sort by overall score.

        Jobs below ``min_score`` are dropped. Equal scores keep input order.
        """
        ranked = [
            RankedJob(index=index, job=job, match=self.compute(candidate, job))
            for index, job in enumerate(jobs)
        ]
        kept = [item for item in ranked if item.match.overall >= min_score]
        kept.sort(key=lambda item: item.match.overall, reverse=True)

        logger.debug("Ranked %d jobs, %d at or above %d", len(ranked), len(kept), min_score)
        return kept


_default_matcher = JobMatcher()


def job_match(candidate: Any, job: Any) -> MatchResult:
    """Score a candidate against a job with the default weights."""
    return _default_matcher.compute(candidate, job)


def rank_jobs(candidate: Any, jobs: Iterable[Any], min_score: int = 0) -> list[RankedJob]:
    """Rank jobs for a candidate with the default weights."""
    return _default_matcher.rank(candidate, jobs, min_score=min_score)
