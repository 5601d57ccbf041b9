"""Candidate profile: structured data extracted from one CV."""

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from models.schemas.base import FrozenModel, as_text, split_terms


class ExperienceEntry(FrozenModel):
    """A single position held. Only the free-text duration is scored."""
    duration_text: str = Field(
        "", validation_alias=AliasChoices("duration_text", "durationText", "duration")
    )
    title: str = ""
    company: str = ""

    @model_validator(mode="before")
    @classmethod
    def _from_bare_text(cls, data: Any) -> Any:
        if isinstance(data, (dict, cls)):
            return data
        # Numbers, lists and other stray values are read as duration text
        return {"duration_text": as_text(data)}

    @field_validator("duration_text", "title", "company", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: Any) -> str:
        return as_text(value)


class EducationEntry(FrozenModel):
    """A single qualification, e.g. "BSc Computer Science"."""
    degree_text: str = Field(
        "", validation_alias=AliasChoices("degree_text", "degreeText", "degree")
    )
    institution: str = ""

    @model_validator(mode="before")
    @classmethod
    def _from_bare_text(cls, data: Any) -> Any:
        if isinstance(data, (dict, cls)):
            return data
        return {"degree_text": as_text(data)}

    @field_validator("degree_text", "institution", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: Any) -> str:
        return as_text(value)


class CandidateProfile(FrozenModel):
    """Parsed CV data consumed by the match engine.

    Every field is optional; an absent field means "no information" and is
    never an error.
    """
    skills: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    location: str = ""

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> tuple[str, ...]:
        return split_terms(value)

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_experience(cls, value: Any) -> Any:
        if value is None:
            return ()
        # Older profiles store a plain year count instead of positions
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return ({"duration_text": f"{int(value)} years"},)
        if isinstance(value, (str, dict)):
            return (value,)
        return value

    @field_validator("education", mode="before")
    @classmethod
    def _coerce_education(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (str, dict, int, float)):
            return (value,)
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _coerce_location(cls, value: Any) -> str:
        return as_text(value)
