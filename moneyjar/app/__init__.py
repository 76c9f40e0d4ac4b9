"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from moneyjar.app.api.routes import api_bp
from moneyjar.app.log import configure_logging
from moneyjar.config import Settings, get_settings
from moneyjar.services.ai_gateway import AIGatewayClient

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def create_app(settings: Optional[Settings] = None, gateway: Optional[AIGatewayClient] = None) -> Flask:
    """Build the Flask app instance.

    Pass settings and gateway explicitly in tests; otherwise settings load from
    the environment and the gateway is built from them.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    app = Flask(__name__)
    app.extensions["moneyjar.settings"] = settings
    app.extensions["moneyjar.gateway"] = gateway or AIGatewayClient(settings)

    origins = settings.cors_origins_list
    CORS(
        app,
        resources={r"/api/*": {"origins": origins}},
        allow_headers=CORS_ALLOW_HEADERS,
        methods=["GET", "POST", "OPTIONS"],
        send_wildcard=origins == "*",
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
