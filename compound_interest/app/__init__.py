"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from compound_interest.app.api.routes import api_bp
from compound_interest.config import Settings, get_settings
from compound_interest.logging_setup import setup_logging
from compound_interest.storage import FormStateStore


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    store = FormStateStore(settings.state_db_path)
    store.init_db()
    app.extensions["form_state_store"] = store

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
