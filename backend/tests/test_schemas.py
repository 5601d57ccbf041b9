"""Tests for the candidate/job input contracts."""

import pytest
from pydantic import TypeAdapter, ValidationError

from models.schemas.candidate_profile import CandidateProfile, EducationEntry, ExperienceEntry
from models.schemas.dimension_result import DimensionResult, ExperienceResult, MatchStatus, SkillsResult
from models.schemas.job_specification import JobSpecification, LocationType


class TestCandidateProfile:
    def test_defaults(self):
        c = CandidateProfile()
        assert c.skills == ()
        assert c.experience == ()
        assert c.education == ()
        assert c.location == ""

    def test_none_fields_are_absent(self):
        c = CandidateProfile(skills=None, experience=None, education=None, location=None)
        assert c == CandidateProfile()

    def test_camel_case_keys(self):
        c = CandidateProfile.model_validate({
            "skills": ["Python"],
            "experience": [{"durationText": "2 years", "title": "Engineer"}],
            "education": [{"degreeText": "BSc"}],
        })
        assert c.experience[0].duration_text == "2 years"
        assert c.experience[0].title == "Engineer"
        assert c.education[0].degree_text == "BSc"

    def test_store_aliases(self):
        c = CandidateProfile.model_validate({
            "experience": [{"duration": "2019 - 2021"}],
            "education": [{"degree": "MSc"}],
        })
        assert c.experience[0] == ExperienceEntry(duration_text="2019 - 2021")
        assert c.education[0] == EducationEntry(degree_text="MSc")

    def test_comma_separated_skills(self):
        c = CandidateProfile(skills="Python, React ,, Docker")
        assert c.skills == ("Python", "React", "Docker")

    def test_bare_strings_and_year_count(self):
        c = CandidateProfile(experience=5, education="BCom")
        assert c.experience[0].duration_text == "5 years"
        assert c.education[0].degree_text == "BCom"

    def test_non_text_entries_are_read_as_text(self):
        c = CandidateProfile(experience=[3, 5], education=[2, None])
        assert [e.duration_text for e in c.experience] == ["3", "5"]
        assert [e.degree_text for e in c.education] == ["2", ""]

    def test_single_numeric_education(self):
        assert CandidateProfile(education=12).education == (EducationEntry(degree_text="12"),)

    def test_entry_instances_pass_through(self):
        entry = ExperienceEntry(duration_text="2 years", title="Engineer")
        assert CandidateProfile(experience=[entry]).experience == (entry,)

    def test_null_duration_is_blank(self):
        assert ExperienceEntry(duration_text=None).duration_text == ""


class TestJobSpecification:
    def test_defaults(self):
        j = JobSpecification()
        assert j.min_experience_years == 0
        assert j.max_experience_years is None
        assert j.education_requirement_text is None
        assert j.location_type is None

    def test_rejects_inverted_band(self):
        with pytest.raises(ValidationError, match="exceeds"):
            JobSpecification(min_experience_years=5, max_experience_years=3)

    def test_rejects_negative_min(self):
        with pytest.raises(ValidationError):
            JobSpecification(min_experience_years=-1)

    def test_equal_bounds_allowed(self):
        j = JobSpecification(min_experience_years=3, max_experience_years=3)
        assert j.max_experience_years == 3

    def test_store_keys_and_numeric_strings(self):
        j = JobSpecification.model_validate({
            "requiredSkills": "Python, SQL",
            "minExperience": "2",
            "maxExperience": "",
            "education": "Bachelor's degree",
            "location": "Durban",
            "locationType": "Remote",
        })
        assert j.required_skills == ("Python", "SQL")
        assert j.min_experience_years == 2
        assert j.max_experience_years is None
        assert j.education_requirement_text == "Bachelor's degree"
        assert j.location_text == "Durban"
        assert j.location_type is LocationType.REMOTE

    def test_blank_texts_are_none(self):
        j = JobSpecification(education_requirement_text="  ", location_text="")
        assert j.education_requirement_text is None
        assert j.location_text is None

    def test_unknown_location_type_is_ignored(self):
        assert JobSpecification(location_type="hybrid").location_type is None


def test_dimension_result_serializes_status_value():
    r = SkillsResult(status=MatchStatus.NO_REQUIREMENT, matched=True)
    assert r.model_dump(mode="json")["status"] == "no requirement"
    assert r.model_dump(by_alias=True)["requiredScore"] == 100.0


def test_dimension_result_is_tagged_by_dimension():
    adapter = TypeAdapter(DimensionResult)
    result = adapter.validate_python(
        {"dimension": "experience", "status": "underqualified", "matched": False, "gap": 2}
    )
    assert isinstance(result, ExperienceResult)
    assert result.status is MatchStatus.UNDERQUALIFIED
