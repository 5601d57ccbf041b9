"""Score Composer & Report Builder.

Combines the four dimension results into a MatchReport. The overall score is
a weighted average of the per-dimension scores:

    skills 30, experience 25, education 20, location 10   (sum 85)

so a perfect match on every dimension scores 100. Each dimension score is
non-decreasing in how well the candidate matches, and the weights are
non-negative, so improving one dimension never lowers the overall score.
"""

from typing import Mapping, Sequence

from models.schemas.dimension_result import (
    DimensionResult,
    EducationResult,
    ExperienceResult,
    LocationResult,
    MatchStatus,
    SkillsResult,
)
from models.schemas.match_report import MatchReport, Recommendation

SCORE_WEIGHTS: dict[str, float] = {
    "skills": 30,
    "experience": 25,
    "education": 20,
    "location": 10,
}

# Lower bound (inclusive) of the overall score for each recommendation
RECOMMENDATION_THRESHOLDS: tuple[tuple[int, Recommendation], ...] = (
    (85, Recommendation.HIGHLY_RECOMMENDED),
    (70, Recommendation.RECOMMENDED),
    (60, Recommendation.CONSIDER),
    (45, Recommendation.BELOW_THRESHOLD),
)

MAX_INSIGHTS = 5
STRONG_SKILLS_SCORE = 70

DimensionResults = tuple[SkillsResult, ExperienceResult, EducationResult, LocationResult]


def compose_overall_score(
    results: Sequence[DimensionResult],
    weights: Mapping[str, float] = SCORE_WEIGHTS,
) -> int:
    """Weighted average of dimension scores, rounded and clamped to 0-100."""
    if any(w < 0 for w in weights.values()):
        raise ValueError("Score weights must be non-negative")
    total_weight = sum(weights.get(r.dimension, 0) for r in results)
    if total_weight <= 0:
        raise ValueError("Score weights must have a positive total")

    weighted = sum(weights.get(r.dimension, 0) * r.score for r in results)
    return min(100, max(0, round(weighted / total_weight)))


def recommend(overall_score: int) -> Recommendation:
    for threshold, recommendation in RECOMMENDATION_THRESHOLDS:
        if overall_score >= threshold:
            return recommendation
    return Recommendation.NOT_RECOMMENDED


def _years(n: int) -> str:
    return f"{n} year" if n == 1 else f"{n} years"


def summarize(results: DimensionResults) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Human-readable strengths and gaps, at most five of each."""
    skills, experience, education, location = results
    strengths: list[str] = []
    gaps: list[str] = []

    matched_skills = skills.matched_required + skills.matched_preferred
    if skills.score > STRONG_SKILLS_SCORE and matched_skills:
        strengths.append(f"Strong skills match: {', '.join(matched_skills)}")
    if skills.missing_required:
        gaps.append(f"Missing required skills: {', '.join(skills.missing_required)}")

    if experience.status is MatchStatus.MEETS_REQUIREMENT:
        strengths.append(f"Experience within range: {_years(experience.total_years)}")
    elif experience.status is MatchStatus.UNDERQUALIFIED:
        gaps.append(f"{_years(experience.gap)} below minimum experience")
    elif experience.status is MatchStatus.OVERQUALIFIED:
        gaps.append(f"{_years(experience.gap)} above maximum experience (over-qualified)")

    if education.status is MatchStatus.MEETS_REQUIREMENT:
        strengths.append(f"Meets education requirement: {education.candidate_qualification}")
    elif education.status is MatchStatus.BELOW_REQUIREMENT:
        gaps.append(
            f"Education below requirement: {education.candidate_qualification} "
            f"vs {education.required_qualification}"
        )

    if location.status is MatchStatus.LOCATION_MATCHES:
        strengths.append(f"Based in {location.job_location}")
    elif location.status is MatchStatus.DIFFERENT_LOCATION:
        gaps.append(f"Located outside {location.job_location}")

    return tuple(strengths[:MAX_INSIGHTS]), tuple(gaps[:MAX_INSIGHTS])


def build_report(
    skills: SkillsResult,
    experience: ExperienceResult,
    education: EducationResult,
    location: LocationResult,
    weights: Mapping[str, float] = SCORE_WEIGHTS,
) -> MatchReport:
    """Assemble the four dimension results into an immutable MatchReport."""
    results = (skills, experience, education, location)
    overall = compose_overall_score(results, weights)
    strengths, gaps = summarize(results)

    return MatchReport(
        overall_score=overall,
        skills=skills,
        experience=experience,
        education=education,
        location=location,
        strengths=strengths,
        gaps=gaps,
        recommendation=recommend(overall),
    )
