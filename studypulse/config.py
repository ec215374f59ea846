"""Application configuration objects."""

import os
import sys
from typing import Dict
from dotenv import load_dotenv

from studypulse.services import aggregation
from studypulse.services.metrics import DEFAULT_SERIES

if getattr(sys, "frozen", False):
    load_dotenv(os.path.join(sys._MEIPASS, ".env"))
else:
    load_dotenv()


class Config:
    """Base configuration for the studypulse dashboard."""

    # -------------------------
    # Server
    # -------------------------
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3001"))

    # Allowed origin(s) for /api/*
    CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")

    # Shared secret expected in X-API-Key / Authorization: Bearer
    API_KEY = os.getenv("API_KEY", "your-secure-api-key-here")

    # -------------------------
    # Data paths
    # -------------------------
    DATA_PATH = os.getenv("STUDYPULSE_DATA_PATH", "data/dailyMetrics.json")

    # Empty value serves the built-in category lists instead of a file
    FILTER_OPTIONS_PATH = os.getenv("STUDYPULSE_FILTER_OPTIONS_PATH", "data/filterOptions.json")

    # Built React app (index.html + assets)
    FRONTEND_DIST = os.getenv("STUDYPULSE_FRONTEND_DIST", "dist")

    # -------------------------
    # External services
    # -------------------------
    # Remote JSON source; takes precedence over DATA_PATH when set
    DATA_URL = os.getenv("STUDYPULSE_DATA_URL")
    DATA_URL_KEY = os.getenv("STUDYPULSE_DATA_URL_KEY")
    DATA_URL_TIMEOUT = float(os.getenv("STUDYPULSE_DATA_URL_TIMEOUT", "30"))

    # -------------------------
    # Aggregation
    # -------------------------
    DEFAULT_TIME_RANGE = "30d"

    # Placeholder fractions of totals reported as "active"
    ACTIVE_PARTICIPANT_RATIO = float(
        os.getenv("STUDYPULSE_ACTIVE_PARTICIPANT_RATIO", aggregation.ACTIVE_PARTICIPANT_RATIO)
    )
    ACTIVE_STUDY_RATIO = float(
        os.getenv("STUDYPULSE_ACTIVE_STUDY_RATIO", aggregation.ACTIVE_STUDY_RATIO)
    )

    # Trend series, in output order
    METRICS: Dict[str, str] = dict(DEFAULT_SERIES)


__all__ = ["Config"]
