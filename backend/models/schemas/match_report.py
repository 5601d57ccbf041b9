"""Scoring output: one immutable report per candidate/job pair."""

from enum import Enum

from pydantic import Field

from models.schemas.base import FrozenModel
from models.schemas.dimension_result import (
    EducationResult,
    ExperienceResult,
    LocationResult,
    SkillsResult,
)


class Recommendation(str, Enum):
    HIGHLY_RECOMMENDED = "highly recommended"
    RECOMMENDED = "recommended"
    CONSIDER = "consider"
    BELOW_THRESHOLD = "below threshold"
    NOT_RECOMMENDED = "not recommended"


class MatchReport(FrozenModel):
    """Composite fitness of one candidate for one job.

    A pure projection of the two inputs: no identity, no timestamps.
    """
    overall_score: int = Field(ge=0, le=100)
    skills: SkillsResult
    experience: ExperienceResult
    education: EducationResult
    location: LocationResult
    strengths: tuple[str, ...] = ()
    gaps: tuple[str, ...] = ()
    recommendation: Recommendation = Recommendation.NOT_RECOMMENDED
