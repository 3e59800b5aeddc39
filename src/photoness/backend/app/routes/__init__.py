"""Blueprint registrations for application routes."""

from flask import Flask

from .localization import blueprint as translations_blueprint
from .pages import blueprint as pages_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(translations_blueprint)
    app.register_blueprint(pages_blueprint)
