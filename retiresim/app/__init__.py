"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from retiresim.app.api.routes import api_bp
from retiresim.core.depletion import SAFETY_CAP_YEARS
from retiresim.core.optimizer import DEFAULT_EPSILON


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from the defaults below, then ``RETIRESIM_*`` environment
    variables (``RETIRESIM_SAFETY_CAP_YEARS=200``), then ``config``.
    """
    app = Flask(__name__)
    app.config.from_mapping(
        SAFETY_CAP_YEARS=SAFETY_CAP_YEARS,
        WITHDRAWAL_EPSILON=DEFAULT_EPSILON,
        CORS_ORIGINS=["http://localhost:5173", "http://127.0.0.1:5173"],
    )
    app.config.from_prefixed_env("RETIRESIM")
    if config:
        app.config.update(config)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
