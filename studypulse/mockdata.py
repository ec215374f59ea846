"""Mock daily-metrics generator.

Writes ``dailyMetrics.json`` and ``filterOptions.json`` for local development:
one candidate record per day and studyType x ageGroup x region combination,
kept with a fixed probability.

Usage:
    python -m studypulse.mockdata --days 30 --seed 7 --out data
"""

from __future__ import annotations

import argparse
import json
import logging
import uuid
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from studypulse.categories import AGE_GROUPS, REGIONS, STUDY_TYPES, filter_options

log = logging.getLogger("studypulse.mockdata")

# Inclusive upper bounds for the random counters
COUNT_MAX: Dict[str, int] = {
    "applicationsCount": 50,
    "completionsCount": 30,
    "newParticipantsCount": 20,
}


def generate_daily_metrics(
    days: int = 30,
    probability: float = 0.3,
    seed: Optional[int] = None,
    today: Optional[date] = None,
) -> List[Dict[str, Any]]:
    """Return mock records for ``today`` and the ``days - 1`` days before it."""
    rng = np.random.default_rng(seed)
    today = today or date.today()
    created_at = datetime.now(timezone.utc).isoformat()

    records: List[Dict[str, Any]] = []
    for offset in range(days):
        day = (today - timedelta(days=offset)).isoformat()
        for study_type in STUDY_TYPES:
            for age_group in AGE_GROUPS:
                for region in REGIONS:
                    if rng.random() >= probability:
                        continue
                    record: Dict[str, Any] = {
                        "date": day,
                        "studyId": str(uuid.UUID(bytes=rng.bytes(16), version=4)),
                        "studyType": study_type,
                        "ageGroup": age_group,
                        "region": region,
                    }
                    for col, high in COUNT_MAX.items():
                        record[col] = int(rng.integers(0, high, endpoint=True))
                    record["createdAt"] = created_at
                    records.append(record)
    return records


def write_mock_data(out_dir: Path, records: List[Dict[str, Any]]) -> Dict[str, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "dailyMetrics": out_dir / "dailyMetrics.json",
        "filterOptions": out_dir / "filterOptions.json",
    }
    paths["dailyMetrics"].write_text(json.dumps(records, indent=2), encoding="utf-8")
    paths["filterOptions"].write_text(json.dumps(filter_options(), indent=2), encoding="utf-8")
    return paths


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="studypulse-mockdata")
    p.add_argument("--days", type=int, default=30)
    p.add_argument("--probability", type=float, default=0.3)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--out", type=Path, default=Path("data"))
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point: generate records and write both JSON files."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    if args.days < 1:
        raise SystemExit("--days must be at least 1")
    if not 0.0 <= args.probability <= 1.0:
        raise SystemExit("--probability must be between 0 and 1")

    log.info("Generating daily metrics...")
    records = generate_daily_metrics(args.days, args.probability, args.seed)
    paths = write_mock_data(args.out, records)

    log.info("Generated %d daily metrics -> %s", len(records), paths["dailyMetrics"])
    log.info(
        "Generated filter options for %d study types, %d age groups, and %d regions -> %s",
        len(STUDY_TYPES),
        len(AGE_GROUPS),
        len(REGIONS),
        paths["filterOptions"],
    )


if __name__ == "__main__":
    main()
