"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers as _register_error_handlers
from .extensions import db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Attach console and rotating file handlers to ``app.logger``."""

    setup_logging(
        app,
        log_level=str(app.config.get("LOG_LEVEL", "INFO")),
        log_dir=app.config.get("LOG_DIR"),
        json_format=bool(app.config.get("LOG_JSON", False)),
    )
    app.logger.propagate = False


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)


def register_error_handlers(app: Flask) -> None:
    """Install the NOK envelope error handlers."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)

    @app.get("/health")
    def health():
        return {"status": "OK"}


def register_event_handlers(app: Flask) -> None:
    """Import modules whose signal receivers must be connected."""

    from ..modules.quiz import events as quiz_events  # noqa: F401

    app.logger.debug("Signal receivers connected.")


def initialize_database(app: Flask) -> None:
    """Create database tables if they do not exist yet."""

    from .. import models  # noqa: F401

    db.create_all()
    app.logger.info("Database tables ensured for %s", app.config.get("SQLALCHEMY_DATABASE_URI"))
