from __future__ import annotations

import json
from datetime import date

from studypulse.categories import AGE_GROUPS, REGIONS, STUDY_TYPES, filter_options
from studypulse.mockdata import COUNT_MAX, generate_daily_metrics, main, write_mock_data
from studypulse.services.datastore import DataStore
from studypulse.utils.validation import validate_query

TODAY = date(2024, 3, 10)
COMBINATIONS = len(STUDY_TYPES) * len(AGE_GROUPS) * len(REGIONS)


def _strip_created(records):
    return [{k: v for k, v in r.items() if k != "createdAt"} for r in records]


def test_probability_one_emits_every_combination() -> None:
    records = generate_daily_metrics(days=2, probability=1.0, seed=1, today=TODAY)
    assert len(records) == 2 * COMBINATIONS
    assert {r["date"] for r in records} == {"2024-03-10", "2024-03-09"}


def test_probability_zero_emits_nothing() -> None:
    assert generate_daily_metrics(days=5, probability=0.0, seed=1, today=TODAY) == []


def test_records_use_known_categories_and_bounds() -> None:
    records = generate_daily_metrics(days=3, probability=0.5, seed=3, today=TODAY)
    assert records
    for r in records:
        query = {"studyType": r["studyType"], "ageGroup": r["ageGroup"], "region": r["region"]}
        assert validate_query(query) == []
        for col, high in COUNT_MAX.items():
            assert 0 <= r[col] <= high
        assert len(r["studyId"]) == 36


def test_seed_makes_output_reproducible() -> None:
    a = generate_daily_metrics(days=4, seed=42, today=TODAY)
    b = generate_daily_metrics(days=4, seed=42, today=TODAY)
    assert _strip_created(a) == _strip_created(b)


def test_written_files_load_through_datastore(tmp_path) -> None:
    records = generate_daily_metrics(days=2, probability=1.0, seed=5, today=TODAY)
    paths = write_mock_data(tmp_path / "out", records)

    store = DataStore(
        {
            "DATA_PATH": str(paths["dailyMetrics"]),
            "FILTER_OPTIONS_PATH": str(paths["filterOptions"]),
        }
    )
    assert len(store.get()) == len(records)
    assert store.load_filter_options() == filter_options()


def test_main_writes_both_files(tmp_path) -> None:
    main(["--days", "1", "--seed", "9", "--out", str(tmp_path)])
    metrics = json.loads((tmp_path / "dailyMetrics.json").read_text(encoding="utf-8"))
    options = json.loads((tmp_path / "filterOptions.json").read_text(encoding="utf-8"))
    assert isinstance(metrics, list)
    assert options == filter_options()
