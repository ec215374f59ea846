"""
Shared pytest fixtures.

Provides:
- ``records``: a small set of daily metrics dated relative to today
- ``data_dir``: a temporary data directory holding those records as JSON
- ``app`` / ``client``: a configured Flask app reading ``data_dir``
- ``auth_headers``: headers carrying the test API key
"""

from __future__ import annotations

import json
from datetime import date, timedelta

import pandas as pd
import pytest

from studypulse.app import create_app
from studypulse.categories import filter_options

TEST_API_KEY = "test-key"


def days_ago(n: int) -> str:
    return (date.today() - timedelta(days=n)).isoformat()


def record(day, study_type, age_group, region, apps, comps, new, study_id=None):
    rec = {
        "date": day,
        "studyType": study_type,
        "ageGroup": age_group,
        "region": region,
        "applicationsCount": apps,
        "completionsCount": comps,
        "newParticipantsCount": new,
    }
    if study_id is not None:
        rec["studyId"] = study_id
    return rec


@pytest.fixture
def records():
    return [
        record(days_ago(0), "Clinical Trials", "18-24", "North America", 10, 5, 4, "s1"),
        record(days_ago(0), "Surveys", "25-34", "Europe", 20, 10, 6, "s2"),
        record(days_ago(3), "Clinical Trials", "35-44", "Asia", 5, 5, 2, "s1"),
        record(days_ago(10), "Focus Groups", "45-54", "Africa", 8, 2, 3, "s3"),
        record(days_ago(20), "Interviews", "65+", "Australia", 7, 3, 5, "s4"),
        record(days_ago(40), "Surveys", "18-24", "Europe", 100, 50, 30, "s5"),
    ]


@pytest.fixture
def make_frame():
    def _make(rows):
        return pd.DataFrame(list(rows))

    return _make


@pytest.fixture
def data_dir(tmp_path, records):
    d = tmp_path / "data"
    d.mkdir()
    (d / "dailyMetrics.json").write_text(json.dumps(records), encoding="utf-8")
    (d / "filterOptions.json").write_text(json.dumps(filter_options()), encoding="utf-8")
    return d


@pytest.fixture
def app(tmp_path, data_dir):
    """Create test Flask application."""
    app = create_app(
        {
            "TESTING": True,
            "API_KEY": TEST_API_KEY,
            "DATA_PATH": str(data_dir / "dailyMetrics.json"),
            "FILTER_OPTIONS_PATH": str(data_dir / "filterOptions.json"),
            "DATA_URL": None,
            "FRONTEND_DIST": str(tmp_path / "dist"),
        }
    )
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"X-API-Key": TEST_API_KEY}
