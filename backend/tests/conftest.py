"""Shared test fixtures: the reference candidate/job pair."""

import pytest

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_specification import JobSpecification


@pytest.fixture
def candidate() -> CandidateProfile:
    return CandidateProfile(
        skills=["React", "Node.js"],
        experience=[{"durationText": "3 years"}],
        education=[{"degreeText": "BSc"}],
        location="Cape Town",
    )


@pytest.fixture
def job() -> JobSpecification:
    return JobSpecification(
        required_skills=["react"],
        preferred_skills=["typescript"],
        min_experience_years=2,
        max_experience_years=5,
        education_requirement_text="degree",
        location_text="Cape Town",
    )
