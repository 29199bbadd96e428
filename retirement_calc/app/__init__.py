"""Application factory and app-wide configuration."""

from http import HTTPStatus
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from loguru import logger
from werkzeug.exceptions import InternalServerError

from retirement_calc.app.api.routes import api_bp
from retirement_calc.config import Settings, get_settings
from retirement_calc.logging_config import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.DEBUG
    app.config["APP_ENV"] = settings.APP_ENV

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.after_request
    def _log_request(response):
        logger.debug(f"{request.method} {request.path} -> {response.status_code}")
        return response

    @app.errorhandler(InternalServerError)
    def _handle_internal_error(exc: InternalServerError):
        original = getattr(exc, "original_exception", None) or exc
        logger.opt(exception=original).error(f"Unhandled error on {request.method} {request.path}")
        return jsonify({"detail": "Internal server error"}), HTTPStatus.INTERNAL_SERVER_ERROR

    logger.info(f"API ready ({settings.APP_ENV}), CORS origins: {', '.join(settings.CORS_ORIGINS)}")
    return app


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    app.run(host=settings.API_HOST, port=settings.API_PORT, debug=settings.DEBUG)


if __name__ == "__main__":
    main()
