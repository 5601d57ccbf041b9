"""Tests for the Experience Matcher."""

from models.schemas.candidate_profile import ExperienceEntry
from models.schemas.dimension_result import MatchStatus
from services.matching.experience_matcher import match_experience, total_years


def _entries(*durations: str) -> list[ExperienceEntry]:
    return [ExperienceEntry(duration_text=d) for d in durations]


def test_total_years_sums_positions():
    assert total_years(_entries("3 years", "2018 - 2020", "Intern")) == 6


def test_no_positions_is_zero_years():
    assert total_years([]) == 0


class TestBand:
    def test_within_band(self):
        result = match_experience(_entries("3 years"), 2, 5)
        assert result.status is MatchStatus.MEETS_REQUIREMENT
        assert result.matched is True
        assert result.gap == 0
        assert result.score == 100

    def test_exactly_min_meets_requirement(self):
        result = match_experience(_entries("2 years"), 2, 5)
        assert result.status is MatchStatus.MEETS_REQUIREMENT

    def test_exactly_max_meets_requirement(self):
        result = match_experience(_entries("5 years"), 2, 5)
        assert result.status is MatchStatus.MEETS_REQUIREMENT

    def test_underqualified(self):
        result = match_experience(_entries("1 year"), 4, 8)
        assert result.status is MatchStatus.UNDERQUALIFIED
        assert result.gap == 3
        assert result.matched is False
        assert result.score == 55  # 100 - 3 * 15

    def test_far_underqualified_floors_at_zero(self):
        result = match_experience([], 10)
        assert result.gap == 10
        assert result.score == 0

    def test_overqualified(self):
        result = match_experience(_entries("12 years"), 2, 5)
        assert result.status is MatchStatus.OVERQUALIFIED
        assert result.gap == 7
        assert result.score == 65  # 100 - 7 * 5

    def test_overqualified_floor(self):
        result = match_experience(_entries("40 years"), 0, 5)
        assert result.score == 50


class TestNoRequirement:
    def test_unbounded_band_always_satisfied(self):
        for durations in ((), ("1 year",), ("30 years",)):
            result = match_experience(_entries(*durations))
            assert result.status is MatchStatus.NO_REQUIREMENT
            assert result.matched is True
            assert result.max_years is None

    def test_min_only_is_open_ended(self):
        result = match_experience(_entries("30 years"), 3)
        assert result.status is MatchStatus.MEETS_REQUIREMENT
        assert result.gap == 0

    def test_reversed_range_with_no_requirement(self):
        result = match_experience(_entries("2022 - 2018"))
        assert result.total_years == -4
        assert result.status is MatchStatus.NO_REQUIREMENT
        assert result.matched is True
        assert result.gap == 0
        assert result.score == 100

    def test_negative_total_counts_as_zero_against_a_minimum(self):
        result = match_experience(_entries("2022 - 2018"), 2)
        assert result.status is MatchStatus.UNDERQUALIFIED
        assert result.gap == 2
        assert result.score == 70
