"""Per-dimension comparison results produced by the four matchers."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from models.schemas.base import FrozenModel
from models.schemas.job_specification import LocationType


class MatchStatus(str, Enum):
    """Fixed vocabulary describing a dimension's outcome."""
    MEETS_REQUIREMENT = "meets requirement"
    MISSING_REQUIRED_SKILLS = "missing required skills"
    UNDERQUALIFIED = "underqualified"
    OVERQUALIFIED = "overqualified"
    BELOW_REQUIREMENT = "below requirement"
    NO_REQUIREMENT = "no requirement"
    REMOTE_POSITION = "remote position"
    LOCATION_MATCHES = "location matches"
    DIFFERENT_LOCATION = "different location"
    LOCATION_UNKNOWN = "location unknown"


class SkillsResult(FrozenModel):
    dimension: Literal["skills"] = "skills"
    status: MatchStatus
    matched: bool
    score: int = 0  # 0-100, 80% required + 20% preferred coverage
    matched_required: tuple[str, ...] = ()
    missing_required: tuple[str, ...] = ()
    matched_preferred: tuple[str, ...] = ()
    missing_preferred: tuple[str, ...] = ()
    required_total: int = 0
    preferred_total: int = 0
    required_score: float = 100.0  # 0-100, share of required skills matched


class ExperienceResult(FrozenModel):
    dimension: Literal["experience"] = "experience"
    status: MatchStatus
    matched: bool
    score: int = 0
    total_years: int = 0  # sum of inferred years over all positions
    min_years: int = 0
    max_years: int | None = None  # None = unbounded
    gap: int = 0  # years short of min, or years beyond max


class EducationResult(FrozenModel):
    dimension: Literal["education"] = "education"
    status: MatchStatus
    matched: bool
    score: int = 0
    candidate_level: int = 0  # highest rank across listed degrees
    required_level: int = 0
    candidate_qualification: str = "unrecognized"
    required_qualification: str = "unrecognized"


class LocationResult(FrozenModel):
    dimension: Literal["location"] = "location"
    status: MatchStatus
    matched: bool
    score: int = 0
    candidate_location: str = ""
    job_location: str = ""
    location_type: LocationType | None = None


DimensionResult = Annotated[
    Union[SkillsResult, ExperienceResult, EducationResult, LocationResult],
    Field(discriminator="dimension"),
]
