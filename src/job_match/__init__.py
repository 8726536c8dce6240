"""Job Match - candidate/job compatibility scoring."""

from job_match.matching import job_match, normalize, rank_jobs, skill_match

__version__ = "0.1.0"

__all__ = ["__version__", "job_match", "normalize", "rank_jobs", "skill_match"]
