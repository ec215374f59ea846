# filter_params.py
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Mapping, Optional

import pandas as pd

from studypulse.categories import ALL

DATE_COL = "date"
DATE_FMT = "%Y-%m-%d"

# FilterCriteria attribute -> record column
CATEGORY_COLUMNS: Dict[str, str] = {
    "study_type": "studyType",
    "age_group": "ageGroup",
    "region": "region",
}


def range_days(time_range: str) -> int:
    """Leading integer of a range token, e.g. ``"30d" -> 30``."""
    match = re.match(r"\d+", str(time_range).strip())
    if not match:
        raise ValueError(f"Unparsable time range: {time_range!r}")
    return int(match.group())


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return value if value != "" else None


@dataclass(frozen=True)
class FilterCriteria:
    time_range: Optional[str] = None
    study_type: Optional[str] = None
    age_group: Optional[str] = None
    region: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Optional[str]]) -> "FilterCriteria":
        """Build criteria from request query args (blank values mean unset)."""
        return cls(
            time_range=_clean(args.get("timeRange")),
            study_type=_clean(args.get("studyType")),
            age_group=_clean(args.get("ageGroup")),
            region=_clean(args.get("region")),
        )

    def cutoff(self, today: Optional[date] = None) -> Optional[pd.Timestamp]:
        """First day inside the window; ``"7d"`` spans today and the six days before."""
        if not self.time_range:
            return None
        today = today or date.today()
        return pd.Timestamp(today - timedelta(days=range_days(self.time_range) - 1))

    def selections(self) -> Dict[str, str]:
        """Active categorical restrictions keyed by record column."""
        out: Dict[str, str] = {}
        for attr, col in CATEGORY_COLUMNS.items():
            value = getattr(self, attr)
            if value and value != ALL:
                out[col] = value
        return out

    def apply(self, df: pd.DataFrame, today: Optional[date] = None) -> pd.DataFrame:
        """
        Return the rows of ``df`` matching every active criterion.

        Applies INTERSECTION (AND) across:
          - the look-back window (``date > today - N days``)
          - exact, case-sensitive equality per categorical selection

        Rows with a missing or unparsable date are dropped whenever a time
        range is active. A selection on a column the frame lacks matches
        nothing. The input frame is never modified.
        """
        out = df

        cutoff = self.cutoff(today)
        if cutoff is not None:
            if DATE_COL not in out.columns:
                return out.iloc[0:0]
            parsed = pd.to_datetime(out[DATE_COL], errors="coerce", format=DATE_FMT)
            out = out[parsed >= cutoff]

        for col, value in self.selections().items():
            if col not in out.columns:
                return out.iloc[0:0]
            out = out[out[col] == value]

        return out


def filter_metrics(
    df: pd.DataFrame,
    criteria: Optional[FilterCriteria],
    today: Optional[date] = None,
) -> pd.DataFrame:
    """Apply ``criteria`` to ``df``; no criteria returns ``df`` itself."""
    if criteria is None:
        return df
    return criteria.apply(df, today=today)


__all__ = ["FilterCriteria", "filter_metrics", "range_days", "DATE_COL"]
