"""Trend series label mapping."""

from __future__ import annotations

from typing import Dict, List, Optional

DEFAULT_SERIES: Dict[str, str] = {
    "applicationsCount": "Study Applications",
    "completionsCount": "Study Completions",
    "newParticipantsCount": "New Participants",
}


class Metrics:
    """Ordered mapping of counter columns to their chart labels."""

    def __init__(self, mapping: Optional[Dict[str, str]] = None):
        self.mapping = dict(mapping if mapping is not None else DEFAULT_SERIES)

    @property
    def columns(self) -> List[str]:
        return list(self.mapping.keys())

    def label(self, key: Optional[str]) -> str:
        if not key:
            return ""
        return self.mapping.get(key, key)


__all__ = ["Metrics", "DEFAULT_SERIES"]
