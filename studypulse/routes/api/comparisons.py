"""Dimension comparison endpoint."""

from __future__ import annotations

import logging

from flask import jsonify, request

from studypulse.services.aggregation import build_comparisons
from studypulse.services.datastore import DataSourceError

from . import bp
from .helpers import api_error, load_filtered, parse_criteria

logger = logging.getLogger("studypulse.api")


@bp.route("/comparisons", methods=["GET"])
def comparisons():
    criteria, error = parse_criteria(request.args)
    if error:
        return error

    try:
        filtered = load_filtered(criteria)
    except DataSourceError:
        logger.exception("Comparisons data load failed")
        return api_error(500, "Failed to load comparisons data")

    return jsonify(build_comparisons(filtered, study_type=criteria.study_type))
