"""Duration Inferencer: year counts from free-text experience durations.

Rules, in priority order:
    1. "<n> year(s)" / "<n> yr(s)" anywhere in the text -> n
    2. two or more calendar years (1900-2099) -> last - first
    3. otherwise -> 1 (a terse entry still counts as at least a year)

Rule 2 takes the outermost years found, so text listing several ranges
("2015-2016, 2019-2021") is read as one span. "Present"/"Current" are not
resolved against today's date so that inference stays deterministic.
"""

import re

DEFAULT_YEARS = 1

EXPLICIT_YEARS_RE = re.compile(r"(\d+)\s*(?:year|yr)", re.IGNORECASE)
CALENDAR_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def infer_years(text: str | None) -> int:
    """Return the number of years a duration string describes. Never raises."""
    if not isinstance(text, str) or not text.strip():
        return DEFAULT_YEARS

    explicit = EXPLICIT_YEARS_RE.search(text)
    if explicit:
        return int(explicit.group(1))

    years = CALENDAR_YEAR_RE.findall(text)
    if len(years) >= 2:
        return int(years[-1]) - int(years[0])

    return DEFAULT_YEARS
