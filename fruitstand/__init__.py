"""Flask application factory."""

import logging
from typing import Any, Optional

from flask import Flask
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings, load_settings
from .extensions import db
from .middleware import MethodOverrideMiddleware, init_request_logging
from .services.fruit_store import FruitStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[Any] = None) -> Flask:
    """Configure and return the Flask application.

    ``store`` replaces the SQLAlchemy-backed :class:`FruitStore`; handlers only
    reach the store through ``current_app.fruit_store``.
    """

    if settings is None:
        settings = load_settings()

    app = Flask(__name__)
    app.settings = settings

    database_uri = settings.resolve_database_url(app.instance_path)
    app.config["SQLALCHEMY_DATABASE_URI"] = database_uri
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {"pool_pre_ping": True}
    app.config["SQLALCHEMY_ECHO"] = settings.sqlalchemy_echo
    app.config.setdefault("SQLALCHEMY_TRACK_MODIFICATIONS", False)

    # Ensure models are registered with SQLAlchemy before any table creation.
    from . import models  # noqa: F401

    db.init_app(app)

    if store is None:
        # Surface a bad DATABASE_URL at startup rather than on the first request.
        try:
            with app.app_context():
                db.create_all()
        except SQLAlchemyError as exc:  # pragma: no cover - network dependent
            raise RuntimeError("Could not connect to the fruit database") from exc
        logger.info(
            "Connected to database %s",
            make_url(database_uri).render_as_string(hide_password=True),
        )
        store = FruitStore(db)

    app.fruit_store = store

    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    init_request_logging(app)

    from .routes import fruits_bp, main_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(fruits_bp)

    return app
