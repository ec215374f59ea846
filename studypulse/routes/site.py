"""Healthcheck and built-frontend routes."""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

from studypulse.services.datastore import DataSourceError

logger = logging.getLogger("studypulse")

bp = Blueprint("site", __name__)


def _dist_dir() -> Path:
    return Path(current_app.config.get("FRONTEND_DIST", "dist")).resolve()


@bp.route("/health", methods=["GET"])
def health():
    datastore = current_app.extensions["datastore"]
    try:
        return jsonify(datastore.status()), 200
    except DataSourceError as exc:
        logger.exception("Healthcheck failed")
        return jsonify({"ok": False, "error": str(exc)}), 503


@bp.route("/", defaults={"path": ""}, methods=["GET"])
@bp.route("/<path:path>", methods=["GET"])
def frontend(path: str):
    """Serve built assets, falling back to index.html for client-side routes."""
    if path == "api" or path.startswith("api/"):
        abort(404)

    dist = _dist_dir()
    if path and (dist / path).is_file():
        return send_from_directory(dist, path)
    if (dist / "index.html").is_file():
        return send_from_directory(dist, "index.html")
    abort(404)
