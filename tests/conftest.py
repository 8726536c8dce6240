"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from job_match.config import get_settings
from job_match.models.candidate import CandidateProfile, Education, Experience
from job_match.models.job import JobPosting, Salary


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_experience() -> Experience:
    """Create a sample Experience."""
    return Experience(
        title="Backend Developer",
        company="Tech Corp",
        period="2019 - 2023",
        description="Built REST APIs in Python and Django.",
    )


@pytest.fixture
def sample_education() -> Education:
    """Create a sample Education."""
    return Education(
        degree="Master Informatique",
        institution="Université de Lyon",
        year="2019",
    )


@pytest.fixture
def sample_candidate(
    sample_experience: Experience,
    sample_education: Education,
) -> CandidateProfile:
    """Create a sample CandidateProfile."""
    return CandidateProfile(
        title="Backend Engineer",
        skills=["Python", "Django", "PostgreSQL"],
        location="Paris",
        experience=[sample_experience],
        education=[sample_education],
        about="Backend engineer focused on APIs and data pipelines.",
    )


@pytest.fixture
def sample_job() -> JobPosting:
    """Create a sample JobPosting."""
    return JobPosting(
        title="Backend Engineer",
        company="Acme",
        location="Paris",
        type="CDI",
        description="Build and run our Python services.",
        requirements=["Python", "Django", "PostgreSQL"],
        salary=Salary(min=45000, max=60000),
    )


@pytest.fixture
def candidate_submission() -> dict:
    """Raw candidate profile submission that passes validation."""
    return {
        "title": "Backend Engineer",
        "skills": ["Python", "Django"],
        "location": "Paris",
        "about": "Five years building Python services.",
        "experience": [
            {
                "title": "Developer",
                "company": "Tech Corp",
                "period": "2019 - 2023",
                "description": "APIs",
            }
        ],
        "education": [{"degree": "Master", "institution": "Lyon 1", "year": "2019"}],
    }


@pytest.fixture
def job_submission() -> dict:
    """Raw job offer submission that passes validation."""
    return {
        "title": "Backend Engineer",
        "company": "Acme",
        "location": "Paris",
        "type": "CDI",
        "description": "Build and run our Python services.",
        "requirements": ["Python", "Django"],
        "salary": {"min": 45000, "max": 60000},
    }
