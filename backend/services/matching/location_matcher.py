"""Location Matcher: candidate location against an onsite job's location.

A blank candidate location is not penalised: it reads as "location unknown"
and scores like a match, so it ranks above a known different location.
"""

from models.schemas.dimension_result import LocationResult, MatchStatus
from models.schemas.job_specification import LocationType
from services.matching.normalizers import TextMatcher, contains_either, normalize_text

MATCH_SCORE = 100
MISMATCH_SCORE = 30


def match_location(
    candidate_location: str | None,
    job_location: str | None,
    location_type: LocationType | None = None,
    matcher: TextMatcher = contains_either,
) -> LocationResult:
    """Boolean location match; remote roles and unstated locations always pass."""
    candidate_text = (candidate_location or "").strip()
    job_text = (job_location or "").strip()

    if location_type is LocationType.REMOTE:
        status = MatchStatus.REMOTE_POSITION
    elif not normalize_text(job_text):
        status = MatchStatus.NO_REQUIREMENT
    elif not normalize_text(candidate_text):
        status = MatchStatus.LOCATION_UNKNOWN
    elif matcher(candidate_text, job_text):
        status = MatchStatus.LOCATION_MATCHES
    else:
        status = MatchStatus.DIFFERENT_LOCATION

    matched = status is not MatchStatus.DIFFERENT_LOCATION
    return LocationResult(
        status=status,
        matched=matched,
        score=MATCH_SCORE if matched else MISMATCH_SCORE,
        candidate_location=candidate_text,
        job_location=job_text,
        location_type=location_type,
    )
