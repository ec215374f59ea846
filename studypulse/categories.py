"""Fixed category sets shared by validation, aggregation and mock data."""

from __future__ import annotations

from typing import Dict, List

ALL = "all"

TIME_RANGES: List[str] = ["7d", "14d", "30d"]

STUDY_TYPES: List[str] = [
    "Clinical Trials",
    "Surveys",
    "Focus Groups",
    "Longitudinal Studies",
    "Interviews",
    "Observational Studies",
]

AGE_GROUPS: List[str] = ["18-24", "25-34", "35-44", "45-54", "55-64", "65+"]

REGIONS: List[str] = [
    "North America",
    "Europe",
    "Asia",
    "South America",
    "Africa",
    "Australia",
]

# Record column -> canonical category list, in output order
DIMENSIONS: Dict[str, List[str]] = {
    "studyType": STUDY_TYPES,
    "ageGroup": AGE_GROUPS,
    "region": REGIONS,
}


def filter_options() -> Dict[str, List[str]]:
    """Return the filter options payload built from the category sets."""
    return {
        "studyTypes": list(STUDY_TYPES),
        "ageGroups": list(AGE_GROUPS),
        "regions": list(REGIONS),
        "timeRanges": list(TIME_RANGES),
    }


__all__ = [
    "ALL",
    "TIME_RANGES",
    "STUDY_TYPES",
    "AGE_GROUPS",
    "REGIONS",
    "DIMENSIONS",
    "filter_options",
]
