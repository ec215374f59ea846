"""Shared helper functions for API routes."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pandas as pd
from flask import current_app, jsonify

from studypulse.utils.filter_params import FilterCriteria, filter_metrics
from studypulse.utils.validation import validate_query

logger = logging.getLogger("studypulse.api")


def api_error(
    status: int,
    error: str,
    message: Optional[str] = None,
    details: Optional[List[str]] = None,
):
    body = {"error": error}
    if message:
        body["message"] = message
    if details:
        body["details"] = details
    return jsonify(body), status


def parse_criteria(args) -> Tuple[Optional[FilterCriteria], Optional[tuple]]:
    """Validate query args; return ``(criteria, None)`` or ``(None, error_response)``."""
    errors = validate_query(args)
    if errors:
        logger.warning("Rejected query parameters: %s", "; ".join(errors))
        return None, api_error(400, "Invalid query parameters", details=errors)
    return FilterCriteria.from_args(args), None


def load_filtered(criteria: FilterCriteria) -> pd.DataFrame:
    datastore = current_app.extensions["datastore"]
    return filter_metrics(datastore.get(), criteria)


__all__ = ["api_error", "parse_criteria", "load_filtered"]
