"""Candidate/job matching.

Three layered stages, each pure and stateless:
- Text normalization (tokenize, filter stopwords, stem)
- Skill overlap scoring over normalized tokens
- Weighted aggregation of skills, location and title scores
"""

from job_match.matching.aggregator import (
    JobMatcher,
    job_match,
    location_match,
    rank_jobs,
    title_match,
)
from job_match.matching.models import MatchResult, MatchWeights, RankedJob
from job_match.matching.skills import skill_match
from job_match.matching.text import STOPWORDS, normalize

__all__ = [
    "STOPWORDS",
    "JobMatcher",
    "MatchResult",
    "MatchWeights",
    "RankedJob",
    "job_match",
    "location_match",
    "normalize",
    "rank_jobs",
    "skill_match",
    "title_match",
]
