"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from wangku.app.api.routes import RATES_EXTENSION, api_bp
from wangku.config import Settings, load_settings
from wangku.core.rates import DividendRates, load_dividend_rates

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, rates: Optional[DividendRates] = None) -> Flask:
    """Build the Flask app instance.

    The rate tables are loaded once here and shared read-only by every request.
    """
    settings = settings or load_settings()

    app = Flask(__name__)
    app.extensions[RATES_EXTENSION] = rates or load_dividend_rates(settings.rates_path)

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("API ready (CORS origins: %s)", ", ".join(settings.cors_origins))
    return app
