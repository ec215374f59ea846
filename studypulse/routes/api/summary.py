"""Summary metrics endpoint."""

from __future__ import annotations

import logging

from flask import current_app, jsonify, request

from studypulse.services.aggregation import summarize
from studypulse.services.datastore import DataSourceError

from . import bp
from .helpers import api_error, load_filtered, parse_criteria

logger = logging.getLogger("studypulse.api")


@bp.route("/summary", methods=["GET"])
def summary():
    criteria, error = parse_criteria(request.args)
    if error:
        return error

    try:
        filtered = load_filtered(criteria)
    except DataSourceError:
        logger.exception("Summary data load failed")
        return api_error(500, "Failed to load summary data")

    return jsonify(
        summarize(
            filtered,
            participant_ratio=current_app.config["ACTIVE_PARTICIPANT_RATIO"],
            study_ratio=current_app.config["ACTIVE_STUDY_RATIO"],
        )
    )
