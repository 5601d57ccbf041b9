"""Pydantic contracts for the CV-to-job match engine."""

from models.schemas.candidate_profile import CandidateProfile, EducationEntry, ExperienceEntry
from models.schemas.dimension_result import (
    DimensionResult,
    EducationResult,
    ExperienceResult,
    LocationResult,
    MatchStatus,
    SkillsResult,
)
from models.schemas.job_specification import JobSpecification, LocationType
from models.schemas.match_report import MatchReport, Recommendation

__all__ = [
    "CandidateProfile",
    "ExperienceEntry",
    "EducationEntry",
    "JobSpecification",
    "LocationType",
    "MatchStatus",
    "DimensionResult",
    "SkillsResult",
    "ExperienceResult",
    "EducationResult",
    "LocationResult",
    "MatchReport",
    "Recommendation",
]
