"""Free-text normalization and the fuzzy containment rule shared by matchers."""

import re
from typing import Callable, Iterable

# (candidate_text, requirement_text) -> satisfied?
TextMatcher = Callable[[str, str], bool]

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(value: str | None) -> str:
    """Lower-case, trim and collapse internal whitespace."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value.strip().lower())


def normalize_terms(values: Iterable[str | None]) -> list[str]:
    """Normalize every term, dropping blanks. Order is preserved."""
    normalized = (normalize_text(v) for v in values)
    return [v for v in normalized if v]


def contains_either(candidate: str, requirement: str) -> bool:
    """Bidirectional substring containment on normalized text.

    "react" satisfies "react.js" and vice versa. Short strings produce
    false positives ("c" is contained in "scala"); that is accepted in
    exchange for tolerating abbreviations and specializations. A blank side
    never matches.
    """
    a = normalize_text(candidate)
    b = normalize_text(requirement)
    if not a or not b:
        return False
    return a in b or b in a
