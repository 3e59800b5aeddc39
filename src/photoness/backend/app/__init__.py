"""Application factory for the Photoness site server."""

import logging
import os
from warnings import warn

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from photoness.backend.config import ConfigurationError, load_site_configuration, site_root
from photoness.backend.version import get_project_version
from photoness.i18n import CatalogError

from .http import problem_response
from .routes import register_routes

logger = logging.getLogger(__name__)


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def create_app() -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    configuration = load_site_configuration()
    allowed_origins = _parse_allowed_origins(os.getenv("PHOTONESS_ALLOWED_ORIGINS"))

    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_routes(app)
    logger.debug("Serving site from %s", site_root())

    @app.route("/", methods=["GET"])
    def serve_index():
        """Return the site's landing page."""

        return send_from_directory(site_root(), "index.html")

    @app.route("/<path:filename>", methods=["GET"])
    def serve_site_file(filename: str):
        """Expose pages, catalogues and assets exactly as a static host would."""

        return send_from_directory(site_root(), filename)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "languages": list(configuration.languages),
            "default_language": configuration.default_language,
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed requests."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message)

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(error: ConfigurationError):
        logger.error("Site configuration error: %s", error)
        return problem_response("configuration_error", status=500, message=str(error))

    @app.errorhandler(CatalogError)
    def handle_catalog_error(error: CatalogError):
        """Report unusable published catalogues as server-side faults."""

        logger.error("Catalogue %s unusable: %s", error.url, error)
        return problem_response("catalogue_error", status=500, message=str(error))

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Surface domain validation errors as JSON."""

        return problem_response("validation_error", status=400, message=str(error))

    return app
