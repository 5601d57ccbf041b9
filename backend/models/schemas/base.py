"""Shared base model and coercion helpers for the matching contracts."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    """Immutable model that accepts both snake_case and camelCase keys.

    Parsed CVs and job specs are stored with camelCase keys
    (``requiredSkills``, ``durationText``); Python callers use field names.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


def as_text(value: Any) -> str:
    """Coerce an optional scalar to a string, treating None as blank."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def split_terms(value: Any) -> tuple[str, ...]:
    """Coerce a skill list into a tuple of stripped, non-blank strings.

    Accepts None, a single comma-separated string ("Python, React") or any
    iterable of values. Order is preserved.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = [as_text(v) for v in value]
    return tuple(s.strip() for s in items if s and s.strip())
