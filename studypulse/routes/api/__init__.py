"""Dashboard API blueprint package."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, request

from .helpers import api_error

logger = logging.getLogger("studypulse.api")

bp = Blueprint("api", __name__, url_prefix="/api")

BEARER_PREFIX = "Bearer "


def get_metrics():
    return current_app.extensions["metrics"]


def get_datastore():
    return current_app.extensions["datastore"]


def supplied_api_key():
    """Key from X-API-Key, falling back to Authorization (Bearer stripped)."""
    key = request.headers.get("X-API-Key") or request.headers.get("Authorization")
    if key and key.startswith(BEARER_PREFIX):
        key = key[len(BEARER_PREFIX):]
    return key


@bp.before_request
def require_api_key():
    if request.method == "OPTIONS":
        return None

    key = supplied_api_key()
    if not key:
        return api_error(401, "Authentication required", message="API key is missing")
    if key != current_app.config["API_KEY"]:
        logger.warning("Rejected API key on %s from %s", request.path, request.remote_addr)
        return api_error(403, "Authentication failed", message="Invalid API key")
    return None


from . import comparisons, filters, summary, trends  # noqa: E402,F401

__all__ = ["bp", "get_metrics", "get_datastore"]
