"""Application factory for the studypulse dashboard."""

from __future__ import annotations

import logging

from typing import Any, Mapping, Optional, Union

from flask import Flask
from flask_cors import CORS

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("studypulse")

from .config import Config
from .routes.api import bp as api_bp
from .routes.site import bp as site_bp
from .services.datastore import DataStore
from .services.metrics import Metrics


def create_app(
    config_object: Optional[Union[str, Mapping[str, Any], type]] = None,
) -> Flask:
    """Create and configure the Flask application.

    ``Config`` is always loaded first; ``config_object`` (a mapping, object
    or import string) overrides individual keys.
    """
    app = Flask(__name__, static_folder=None)

    app.json.sort_keys = False

    app.config.from_object(Config)
    if isinstance(config_object, Mapping):
        app.config.from_mapping(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    metrics = Metrics(app.config["METRICS"])
    datastore = DataStore(app.config)

    app.extensions["metrics"] = metrics
    app.extensions["datastore"] = datastore

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGIN"]}})

    app.register_blueprint(api_bp)
    app.register_blueprint(site_bp)

    logger.info("studypulse app created (data source: %s)", datastore.describe_source())
    return app


__all__ = ["create_app"]
