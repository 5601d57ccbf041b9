"""Skill Matcher: required/preferred skill coverage for one candidate."""

from typing import Sequence

from models.schemas.dimension_result import MatchStatus, SkillsResult
from services.matching.normalizers import TextMatcher, contains_either, normalize_terms

# Share of the dimension score carried by each skill list
REQUIRED_SHARE = 80
PREFERRED_SHARE = 20


def _partition(
    job_skills: Sequence[str],
    candidate_skills: list[str],
    matcher: TextMatcher,
) -> tuple[list[str], list[str]]:
    """Split job skills into (satisfied, unsatisfied), keeping input order."""
    satisfied: list[str] = []
    unsatisfied: list[str] = []
    for skill in job_skills:
        if not skill or not skill.strip():
            continue
        if any(matcher(c, skill) for c in candidate_skills):
            satisfied.append(skill.strip())
        else:
            unsatisfied.append(skill.strip())
    return satisfied, unsatisfied


def _coverage(matched: int, total: int) -> float:
    """Fraction of a skill list covered; an empty list is fully covered."""
    return matched / total if total else 1.0


def match_skills(
    candidate_skills: Sequence[str],
    required_skills: Sequence[str],
    preferred_skills: Sequence[str] = (),
    matcher: TextMatcher = contains_either,
) -> SkillsResult:
    """Compare a candidate's skills against a job's skill lists.

    A job skill is satisfied when ``matcher(candidate_skill, job_skill)``
    holds for at least one candidate skill. ``required_score`` is the
    percentage of required skills satisfied, or 100 when the job lists no
    required skills.
    """
    candidate = normalize_terms(candidate_skills)

    matched_required, missing_required = _partition(required_skills, candidate, matcher)
    matched_preferred, missing_preferred = _partition(preferred_skills, candidate, matcher)

    required_total = len(matched_required) + len(missing_required)
    preferred_total = len(matched_preferred) + len(missing_preferred)

    required_fraction = _coverage(len(matched_required), required_total)
    preferred_fraction = _coverage(len(matched_preferred), preferred_total)

    if required_total == 0:
        status = MatchStatus.NO_REQUIREMENT
    elif missing_required:
        status = MatchStatus.MISSING_REQUIRED_SKILLS
    else:
        status = MatchStatus.MEETS_REQUIREMENT

    score = round(REQUIRED_SHARE * required_fraction + PREFERRED_SHARE * preferred_fraction)

    return SkillsResult(
        status=status,
        matched=not missing_required,
        score=score,
        matched_required=tuple(matched_required),
        missing_required=tuple(missing_required),
        matched_preferred=tuple(matched_preferred),
        missing_preferred=tuple(missing_preferred),
        required_total=required_total,
        preferred_total=preferred_total,
        required_score=100.0 * required_fraction,
    )
