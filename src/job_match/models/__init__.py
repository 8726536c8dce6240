"""Data models for Job Match."""

from job_match.models.candidate import (
    CandidateProfile,
    CandidateProfileSubmission,
    Education,
    Experience,
    validate_candidate_profile,
)
from job_match.models.job import JobOfferSubmission, JobPosting, Salary, validate_job_offer

__all__ = [
    "CandidateProfile",
    "CandidateProfileSubmission",
    "Education",
    "Experience",
    "JobOfferSubmission",
    "JobPosting",
    "Salary",
    "validate_candidate_profile",
    "validate_job_offer",
]
