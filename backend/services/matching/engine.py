"""Match engine entry points: score one pair, or every pair of two pools.

Flow:
    candidate + job
      ├─ match_skills(skills, required, preferred)     → SkillsResult
      ├─ match_experience(positions, min, max)         → ExperienceResult
      ├─ rank_education(degrees, requirement)          → EducationResult
      ├─ match_location(location, job location, type)  → LocationResult
      │                         ↓
      └─ build_report(...)                             → MatchReport

The four matchers share no state, so pairs can be scored in any order or
concurrently.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import product
from typing import Any, Mapping, NamedTuple, Sequence

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_specification import JobSpecification
from models.schemas.match_report import MatchReport
from services.matching.composer import SCORE_WEIGHTS, build_report
from services.matching.education_ranker import rank_education
from services.matching.experience_matcher import match_experience
from services.matching.location_matcher import match_location
from services.matching.skill_matcher import match_skills

logger = logging.getLogger(__name__)


class PairScore(NamedTuple):
    candidate_index: int
    job_index: int
    report: MatchReport


def score(
    candidate: CandidateProfile | Mapping[str, Any],
    job: JobSpecification | Mapping[str, Any],
    weights: Mapping[str, float] = SCORE_WEIGHTS,
) -> MatchReport:
    """Score one candidate against one job.

    Mappings are validated into models first; an invalid job specification
    raises ``pydantic.ValidationError`` before any matcher runs.
    """
    candidate = CandidateProfile.model_validate(candidate)
    job = JobSpecification.model_validate(job)

    return build_report(
        skills=match_skills(candidate.skills, job.required_skills, job.preferred_skills),
        experience=match_experience(
            candidate.experience, job.min_experience_years, job.max_experience_years
        ),
        education=rank_education(candidate.education, job.education_requirement_text),
        location=match_location(candidate.location, job.location_text, job.location_type),
        weights=weights,
    )


def score_matrix(
    candidates: Sequence[CandidateProfile | Mapping[str, Any]],
    jobs: Sequence[JobSpecification | Mapping[str, Any]],
    max_workers: int = 1,
    weights: Mapping[str, float] = SCORE_WEIGHTS,
) -> list[PairScore]:
    """Score every candidate against every job.

    Results are in candidate-major order (all jobs for candidate 0, then
    candidate 1, ...) whatever ``max_workers`` is. Inputs are validated
    up front so a bad job spec fails the batch before scoring starts.
    """
    profiles = [CandidateProfile.model_validate(c) for c in candidates]
    specs = [JobSpecification.model_validate(j) for j in jobs]
    pairs = list(product(range(len(profiles)), range(len(specs))))

    if not pairs:
        return []

    def _score_pair(pair: tuple[int, int]) -> PairScore:
        ci, ji = pair
        return PairScore(ci, ji, score(profiles[ci], specs[ji], weights))

    logger.info(
        "Scoring %d candidate(s) x %d job(s) = %d pair(s) with %d worker(s)",
        len(profiles), len(specs), len(pairs), max_workers,
    )

    if max_workers <= 1 or len(pairs) == 1:
        return [_score_pair(p) for p in pairs]

    # Executor.map yields in submission order
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_score_pair, pairs))
