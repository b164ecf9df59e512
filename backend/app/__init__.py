"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.config import AppConfig
from backend.logging_config import setup_logging


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or AppConfig()
    setup_logging(config.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = config.debug
    app.config["LUCRO_CESANTE"] = config

    CORS(
        app,
        resources={r"/api/*": {"origins": list(config.cors_origins)}},
        supports_credentials=True,
        expose_headers=["Content-Disposition"],
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
