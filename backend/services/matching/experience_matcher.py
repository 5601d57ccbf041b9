"""Experience Matcher: total inferred years against a job's experience band."""

from typing import Iterable

from models.schemas.candidate_profile import ExperienceEntry
from models.schemas.dimension_result import ExperienceResult, MatchStatus
from services.matching.duration import infer_years

# Score lost per year outside the band
UNDER_PENALTY_PER_YEAR = 15
OVER_PENALTY_PER_YEAR = 5
OVER_SCORE_FLOOR = 50


def total_years(entries: Iterable[ExperienceEntry]) -> int:
    """Sum the inferred duration of every position."""
    return sum(infer_years(entry.duration_text) for entry in entries)


def match_experience(
    entries: Iterable[ExperienceEntry],
    min_years: int = 0,
    max_years: int | None = None,
) -> ExperienceResult:
    """Compare total experience with the inclusive band [min_years, max_years]."""
    years = total_years(entries)
    # Reversed ranges can sum negative; the band compares against zero instead
    effective = max(0, years)

    if min_years <= 0 and max_years is None:
        gap = 0
        status = MatchStatus.NO_REQUIREMENT
        score = 100
    elif effective < min_years:
        gap = min_years - effective
        status = MatchStatus.UNDERQUALIFIED
        score = max(0, 100 - UNDER_PENALTY_PER_YEAR * gap)
    elif max_years is not None and effective > max_years:
        gap = effective - max_years
        status = MatchStatus.OVERQUALIFIED
        score = max(OVER_SCORE_FLOOR, 100 - OVER_PENALTY_PER_YEAR * gap)
    else:
        gap = 0
        status = MatchStatus.MEETS_REQUIREMENT
        score = 100

    return ExperienceResult(
        status=status,
        matched=gap == 0,
        score=score,
        total_years=years,
        min_years=min_years,
        max_years=max_years,
        gap=gap,
    )
