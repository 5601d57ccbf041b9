"""Education Ranker: ordinal comparison of free-text qualifications."""

from enum import IntEnum
from typing import Iterable

from models.schemas.candidate_profile import EducationEntry
from models.schemas.dimension_result import EducationResult, MatchStatus
from services.matching.normalizers import normalize_text


class QualificationLevel(IntEnum):
    UNRECOGNIZED = 0
    CERTIFICATE = 1
    DIPLOMA = 2
    BACHELORS = 3
    HONOURS = 4
    MASTERS = 5
    DOCTORATE = 6


# Checked top-down: the first level with a contained keyword wins, so
# "Masters degree" ranks as MASTERS rather than BACHELORS ("degree").
QUALIFICATION_KEYWORDS: tuple[tuple[QualificationLevel, tuple[str, ...]], ...] = (
    (QualificationLevel.DOCTORATE, ("phd", "ph.d", "doctorate", "doctoral")),
    (QualificationLevel.MASTERS, ("master", "mba", "msc", "m.sc", "mcom", "mphil")),
    (QualificationLevel.HONOURS, ("honours", "honors", "hons")),
    (QualificationLevel.BACHELORS, (
        "bachelor", "bsc", "b.sc", "bcom", "b.com", "beng", "btech", "degree",
    )),
    (QualificationLevel.DIPLOMA, ("diploma",)),
    (QualificationLevel.CERTIFICATE, ("certificate",)),
)

# Score by how many levels the candidate falls short
_SHORTFALL_SCORES = {0: 100, 1: 70, 2: 40}
_FAR_BELOW_SCORE = 20


def classify_qualification(text: str | None) -> QualificationLevel:
    """Map free text onto the qualification scale by keyword containment."""
    normalized = normalize_text(text)
    if not normalized:
        return QualificationLevel.UNRECOGNIZED
    for level, keywords in QUALIFICATION_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return level
    return QualificationLevel.UNRECOGNIZED


def highest_qualification(entries: Iterable[EducationEntry]) -> QualificationLevel:
    """Highest level across all listed degrees (UNRECOGNIZED if none)."""
    levels = [classify_qualification(entry.degree_text) for entry in entries]
    return max(levels, default=QualificationLevel.UNRECOGNIZED)


def _label(level: QualificationLevel) -> str:
    return level.name.lower()


def rank_education(
    entries: Iterable[EducationEntry],
    requirement_text: str | None,
) -> EducationResult:
    """Check whether the candidate's best qualification meets the requirement."""
    candidate_level = highest_qualification(entries)

    if not normalize_text(requirement_text):
        return EducationResult(
            status=MatchStatus.NO_REQUIREMENT,
            matched=True,
            score=100,
            candidate_level=int(candidate_level),
            required_level=0,
            candidate_qualification=_label(candidate_level),
        )

    required_level = classify_qualification(requirement_text)
    shortfall = max(0, required_level - candidate_level)
    matched = shortfall == 0

    return EducationResult(
        status=MatchStatus.MEETS_REQUIREMENT if matched else MatchStatus.BELOW_REQUIREMENT,
        matched=matched,
        score=_SHORTFALL_SCORES.get(shortfall, _FAR_BELOW_SCORE),
        candidate_level=int(candidate_level),
        required_level=int(required_level),
        candidate_qualification=_label(candidate_level),
        required_qualification=_label(required_level),
    )
