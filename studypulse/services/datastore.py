"""Data access for daily metric records and filter options."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
import requests

from studypulse.categories import filter_options as default_filter_options

logger = logging.getLogger("studypulse")

COUNT_COLS = ["applicationsCount", "completionsCount", "newParticipantsCount"]
TEXT_COLS = ["date", "studyType", "ageGroup", "region"]
ID_COLS = ["studyId", "id"]


class DataSourceError(RuntimeError):
    """Backing data could not be read or has the wrong shape."""


class DataStore:
    """Load daily metrics on demand.

    Nothing is cached: every call re-reads the source so edits to the backing
    file show up on the next request.

    Sources, in order of precedence:
    - ``DATA_URL``: remote JSON document (optional ``apikey`` header)
    - ``DATA_PATH``: local JSON file
    """

    def __init__(self, config: Mapping[str, Any]):
        self.config = config

    # ---------- raw sources ----------

    def describe_source(self) -> str:
        url = self.config.get("DATA_URL")
        return str(url) if url else str(self.config.get("DATA_PATH"))

    def _fetch_remote(self, url: str) -> Any:
        key = self.config.get("DATA_URL_KEY")
        headers = {"apikey": key} if key else {}
        timeout = float(self.config.get("DATA_URL_TIMEOUT", 30))
        try:
            resp = requests.get(url, headers=headers, timeout=timeout)
            resp.raise_for_status()
            payload = resp.json()
        except ValueError as e:
            logger.error("DATA_URL did not return JSON: %s", e)
            raise DataSourceError(f"Invalid JSON from {url}") from e
        except requests.RequestException as e:
            logger.error("Failed to fetch daily metrics from DATA_URL: %s", e)
            raise DataSourceError(f"Could not fetch {url}") from e
        logger.info("Loaded daily metrics from DATA_URL.")
        return payload

    @staticmethod
    def _read_json(path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            raise DataSourceError(f"Could not read {path}") from e
        except ValueError as e:
            logger.error("Invalid JSON in %s: %s", path, e)
            raise DataSourceError(f"Invalid JSON in {path}") from e

    def load_records(self) -> List[Dict[str, Any]]:
        url = self.config.get("DATA_URL")
        if url:
            payload = self._fetch_remote(url)
        else:
            path = Path(self.config.get("DATA_PATH", "data/dailyMetrics.json"))
            payload = self._read_json(path)

        if not isinstance(payload, list) or not all(isinstance(r, dict) for r in payload):
            raise DataSourceError("Daily metrics must be a JSON array of objects")
        return payload

    # ---------- pandas ----------

    @staticmethod
    def _preprocess(df: pd.DataFrame) -> pd.DataFrame:
        for col in COUNT_COLS + TEXT_COLS + ID_COLS:
            if col not in df.columns:
                df[col] = None

        for numcol in COUNT_COLS:
            df[numcol] = pd.to_numeric(df[numcol], errors="coerce").fillna(0).astype("int64")

        for textcol in TEXT_COLS:
            df[textcol] = df[textcol].where(df[textcol].notna(), "").astype(str)

        return df

    def get(self) -> pd.DataFrame:
        """Fresh DataFrame of all records, one column per DailyMetric field."""
        records = self.load_records()
        df = pd.DataFrame.from_records(records)
        return self._preprocess(df)

    def load_filter_options(self) -> Dict[str, List[str]]:
        path = self.config.get("FILTER_OPTIONS_PATH")
        if not path:
            return default_filter_options()

        payload = self._read_json(Path(path))
        if not isinstance(payload, dict):
            raise DataSourceError("Filter options must be a JSON object")
        return payload

    def status(self) -> Dict[str, Any]:
        """Row count of the current source, for health checks."""
        df = self.get()
        return {"ok": True, "rows": int(len(df)), "source": self.describe_source()}


__all__ = ["DataStore", "DataSourceError"]
