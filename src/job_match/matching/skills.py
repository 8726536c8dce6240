"""Skill overlap scoring."""

from __future__ import annotations

from collections.abc import Sequence

from job_match.matching.text import normalize


def _normalize_all(phrases: Sequence[str]) -> list[str]:
    """Normalize every phrase and flatten the tokens into one list."""
    return [token for phrase in phrases for token in normalize(phrase)]


def tokens_overlap(a: str, b: str) -> bool:
    """Check whether two tokens are equal or one contains the other."""
    return a == b or a in b or b in a


def skill_match(
    candidate_skills: Sequence[str] | None,
    job_requirements: Sequence[str] | None,
) -> float:
    """Compute the skill overlap percentage between a candidate and a job.

    Each candidate token counts once per occurrence if it overlaps any job
    token (equality or substring either way). The union is taken over
    distinct tokens from both sides. A candidate listing the same skill
    twice can therefore push the ratio past 1, so the result is capped.

    Args:
        candidate_skills: Free-text skills of the candidate.
        job_requirements: Free-text requirements of the job.

    Returns:
        Score in [0, 100], unrounded. 0 when either side is missing or empty.
    """
    if not candidate_skills or not job_requirements:
        return 0.0

    candidate_tokens = _normalize_all(candidate_skills)
    job_tokens = _normalize_all(job_requirements)

    intersection = sum(
        1
        for token in candidate_tokens
        if any(tokens_overlap(token, req) for req in job_tokens)
    )
    union = set(candidate_tokens) | set(job_tokens)

    # Phrases made only of stopwords or short words leave nothing to compare
    if not union:
        return 0.0

    return min(100.0, intersection / len(union) * 100)
