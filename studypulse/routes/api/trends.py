"""Trend series endpoint."""

from __future__ import annotations

import logging

from flask import current_app, jsonify, request

from studypulse.services.aggregation import build_trends
from studypulse.services.datastore import DataSourceError

from . import bp, get_metrics
from .helpers import api_error, load_filtered, parse_criteria

logger = logging.getLogger("studypulse.api")


@bp.route("/trends", methods=["GET"])
def trends():
    """Daily series for the requested look-back window only.

    Without ``timeRange`` no date cutoff is applied and the full-series
    ``DEFAULT_TIME_RANGE`` bucket is returned.
    """
    criteria, error = parse_criteria(request.args)
    if error:
        return error

    try:
        filtered = load_filtered(criteria)
    except DataSourceError:
        logger.exception("Trends data load failed")
        return api_error(500, "Failed to load trends data")

    data = build_trends(filtered, get_metrics())
    requested = criteria.time_range or current_app.config["DEFAULT_TIME_RANGE"]
    bucket = data["timeRanges"].get(requested)
    if bucket is None:
        return api_error(404, "Range not found")

    return jsonify({"timeRanges": {requested: bucket}})
