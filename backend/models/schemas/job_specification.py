"""Job specification: structured hiring requirements for one role."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from models.schemas.base import FrozenModel, as_text, split_terms


class LocationType(str, Enum):
    ONSITE = "onsite"
    REMOTE = "remote"


class JobSpecification(FrozenModel):
    """Hiring requirements a candidate is scored against.

    The experience band is inclusive; ``max_experience_years=None`` means
    unbounded. A band with ``min > max`` is rejected at construction.
    """
    required_skills: tuple[str, ...] = ()
    preferred_skills: tuple[str, ...] = ()
    min_experience_years: int = Field(
        0,
        ge=0,
        validation_alias=AliasChoices(
            "min_experience_years", "minExperienceYears", "minExperience"
        ),
    )
    max_experience_years: int | None = Field(
        None,
        ge=0,
        validation_alias=AliasChoices(
            "max_experience_years", "maxExperienceYears", "maxExperience"
        ),
    )
    education_requirement_text: str | None = Field(
        None,
        validation_alias=AliasChoices(
            "education_requirement_text", "educationRequirementText", "education"
        ),
    )
    location_text: str | None = Field(
        None, validation_alias=AliasChoices("location_text", "locationText", "location")
    )
    location_type: LocationType | None = None

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> tuple[str, ...]:
        return split_terms(value)

    @field_validator("min_experience_years", mode="before")
    @classmethod
    def _default_min(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("max_experience_years", mode="before")
    @classmethod
    def _default_max(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("education_requirement_text", "location_text", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> str | None:
        text = as_text(value).strip()
        return text or None

    @field_validator("location_type", mode="before")
    @classmethod
    def _coerce_location_type(cls, value: Any) -> LocationType | None:
        # Unknown arrangements (e.g. "hybrid") are scored like onsite roles
        if isinstance(value, LocationType):
            return value
        text = as_text(value).strip().lower()
        try:
            return LocationType(text)
        except ValueError:
            return None

    @model_validator(mode="after")
    def _check_experience_band(self) -> "JobSpecification":
        if (
            self.max_experience_years is not None
            and self.min_experience_years > self.max_experience_years
        ):
            raise ValueError(
                f"min_experience_years ({self.min_experience_years}) exceeds "
                f"max_experience_years ({self.max_experience_years})"
            )
        return self
