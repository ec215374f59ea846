"""Query parameter validation for the dashboard API."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from studypulse.categories import AGE_GROUPS, ALL, REGIONS, STUDY_TYPES, TIME_RANGES

# (query field, allowed values, accepts the "all" sentinel)
RULES: Sequence[Tuple[str, Sequence[str], bool]] = (
    ("timeRange", TIME_RANGES, False),
    ("studyType", STUDY_TYPES, True),
    ("ageGroup", AGE_GROUPS, True),
    ("region", REGIONS, True),
)


def _allowed(values: Sequence[str], accepts_all: bool) -> List[str]:
    return [ALL, *values] if accepts_all else list(values)


def validate_query(query: Optional[Mapping[str, Any]]) -> List[str]:
    """Return one message per query field outside its enumeration.

    ``None``, missing and empty values are always accepted. Matching is
    case-sensitive.
    """
    errors: List[str] = []
    query = query or {}
    for field, values, accepts_all in RULES:
        value = query.get(field)
        if value is None or value == "":
            continue
        allowed = _allowed(values, accepts_all)
        if value not in allowed:
            errors.append(
                f"Invalid {field}: {value}. Must be one of: {', '.join(allowed)}"
            )
    return errors


__all__ = ["validate_query"]
