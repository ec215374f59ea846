"""Summary, trends and comparison aggregates over filtered daily metrics.

Every function here takes an already-filtered DataFrame (one row per daily
metric record) and returns plain dicts/lists ready for ``jsonify``. They are
total: missing counter columns count as zero, blank category keys are
skipped, and an empty frame yields zero-filled output.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from studypulse.categories import ALL, DIMENSIONS
from studypulse.services.metrics import Metrics
from studypulse.utils.filter_params import DATE_COL

ACTIVE_PARTICIPANT_RATIO = 0.7
ACTIVE_STUDY_RATIO = 0.6

# Range token -> trailing points kept (None keeps the whole series)
TREND_WINDOWS: Dict[str, Optional[int]] = {"7d": 7, "14d": 14, "30d": None}
TREND_INTERVAL = "day"

Number = Union[int, float]


def _counts(df: pd.DataFrame, col: str) -> pd.Series:
    """Counter column as int64, with missing/non-numeric values as 0."""
    if col not in df.columns:
        return pd.Series(0, index=df.index, dtype="int64")
    return pd.to_numeric(df[col], errors="coerce").fillna(0).astype("int64")


def _present(values: pd.Series) -> pd.Series:
    """Mask of non-null, non-empty keys."""
    return values.notna() & (values.astype(str) != "")


def round_rate(ratio: float) -> float:
    """Percentage rounded half-up to one decimal place."""
    return math.floor(ratio * 100 * 10 + 0.5) / 10


def count_studies(df: pd.DataFrame) -> int:
    if "studyId" not in df.columns:
        return 0
    ids = df["studyId"]
    return int(ids[_present(ids)].astype(str).nunique())


def summarize(
    df: pd.DataFrame,
    participant_ratio: float = ACTIVE_PARTICIPANT_RATIO,
    study_ratio: float = ACTIVE_STUDY_RATIO,
) -> Dict[str, Number]:
    """Headline statistics for the dashboard summary cards.

    ``activeParticipants`` and ``activeStudies`` are fixed fractions of the
    totals (``participant_ratio`` / ``study_ratio``).
    """
    summary: Dict[str, Number] = {
        "totalParticipants": 0,
        "activeParticipants": 0,
        "totalStudies": 0,
        "activeStudies": 0,
        "averageEligibilityRate": 0,
        "completionRate": 0,
    }
    if df is None or df.empty:
        return summary

    applications = int(_counts(df, "applicationsCount").sum())
    completions = int(_counts(df, "completionsCount").sum())
    new_participants = int(_counts(df, "newParticipantsCount").sum())
    studies = count_studies(df)

    summary["totalParticipants"] = new_participants
    summary["activeParticipants"] = math.floor(new_participants * participant_ratio)
    summary["totalStudies"] = studies
    summary["activeStudies"] = math.floor(studies * study_ratio)

    if applications + completions > 0:
        summary["averageEligibilityRate"] = round_rate(
            applications / (applications + completions)
        )
    if applications > 0:
        summary["completionRate"] = round_rate(completions / applications)

    return summary


def daily_totals(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Sum ``columns`` per date string, ascending by date."""
    cols = list(columns)
    if DATE_COL not in df.columns:
        return pd.DataFrame(columns=cols, dtype="int64")

    frame = pd.DataFrame({col: _counts(df, col) for col in cols}, index=df.index)
    dates = df[DATE_COL]
    keep = _present(dates)
    frame = frame[keep].assign(**{DATE_COL: dates[keep].astype(str)})
    return frame.groupby(DATE_COL, sort=True)[cols].sum()


def build_trends(df: pd.DataFrame, metrics: Optional[Metrics] = None) -> Dict[str, dict]:
    """Per-day series for each counter, sliced into look-back windows.

    ``"30d"`` carries the full series; the shorter windows keep the trailing
    points of that same series.
    """
    metrics = metrics or Metrics()
    totals = daily_totals(df, metrics.columns)

    series = [
        {
            "name": metrics.label(col),
            "data": [
                {"date": str(day), "value": int(value)}
                for day, value in totals[col].items()
            ],
        }
        for col in metrics.columns
    ]

    time_ranges: Dict[str, dict] = {}
    for key, points in TREND_WINDOWS.items():
        time_ranges[key] = {
            "interval": TREND_INTERVAL,
            "metrics": [
                {
                    "name": s["name"],
                    "data": s["data"][-points:] if points else list(s["data"]),
                }
                for s in series
            ],
        }

    return {"timeRanges": time_ranges}


def _dimension_totals(df: pd.DataFrame, col: str, categories: Sequence[str]) -> List[dict]:
    totals: Dict[str, Dict[str, int]] = {}
    if col in df.columns and not df.empty:
        frame = pd.DataFrame(
            {
                "applications": _counts(df, "applicationsCount"),
                "completions": _counts(df, "completionsCount"),
                "key": df[col],
            },
            index=df.index,
        )
        frame = frame[_present(frame["key"])]
        grouped = frame.groupby(frame["key"].astype(str))[["applications", "completions"]].sum()
        totals = grouped.to_dict("index")

    out = []
    for name in categories:
        data = totals.get(name, {})
        out.append(
            {
                "name": name,
                "applications": int(data.get("applications", 0)),
                "completions": int(data.get("completions", 0)),
            }
        )
    return out


def build_comparisons(df: pd.DataFrame, study_type: Optional[str] = None) -> Dict[str, dict]:
    """Applications/completions per category for every dimension.

    Each dimension lists its full canonical category set, zero-filled. When
    ``study_type`` names a single category the studyType dimension is
    narrowed to that entry alone.
    """
    comparisons = {
        col: {"dimension": col, "metrics": _dimension_totals(df, col, categories)}
        for col, categories in DIMENSIONS.items()
    }

    if study_type and study_type != ALL:
        comparisons["studyType"]["metrics"] = [
            m for m in comparisons["studyType"]["metrics"] if m["name"] == study_type
        ]

    return comparisons


__all__ = [
    "ACTIVE_PARTICIPANT_RATIO",
    "ACTIVE_STUDY_RATIO",
    "TREND_WINDOWS",
    "build_comparisons",
    "build_trends",
    "count_studies",
    "daily_totals",
    "round_rate",
    "summarize",
]
