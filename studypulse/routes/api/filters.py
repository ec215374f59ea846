"""Filter options endpoint."""

from __future__ import annotations

import logging

from flask import jsonify

from studypulse.services.datastore import DataSourceError

from . import bp, get_datastore
from .helpers import api_error

logger = logging.getLogger("studypulse.api")


@bp.route("/filter-options", methods=["GET"])
def filter_options():
    try:
        options = get_datastore().load_filter_options()
    except DataSourceError:
        logger.exception("Filter options load failed")
        return api_error(500, "Failed to load filter options")
    return jsonify(options)
