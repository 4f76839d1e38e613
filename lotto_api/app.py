from __future__ import annotations

import logging

from flask import Flask, jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from .config import AppSettings, load_settings
from .db import init_engine
from .errors import AppError
from .models import ROLE_ADMIN, Base
from .routes.admin import bp as admin_bp
from .routes.health import bp as health_bp
from .routes.tickets import bp as tickets_bp
from .services.users import UserRepository


def configure_logging(settings: AppSettings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def _error_response(code: str, message: str, status_code: int, details=None):
    return jsonify({"error": message, "code": code, "details": details}), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(exc: AppError):
        return _error_response(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(PydanticValidationError)
    def handle_validation_error(exc: PydanticValidationError):
        # pydantic prefixes messages raised from validators.
        details = [
            {
                "loc": [str(part) for part in err.get("loc", ())],
                "msg": err.get("msg", "").removeprefix("Value error, "),
            }
            for err in exc.errors()
        ]
        message = details[0]["msg"] if details else "Validation error"
        return _error_response("validation_error", message, 400, details)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        status = int(exc.code or 500)
        if status == 404:
            return _error_response("not_found", "Not Found", 404)
        return _error_response("http_error", exc.description or exc.name, status)

    @app.errorhandler(Exception)
    def handle_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        return _error_response("internal_error", "Internal server error", 500)


def create_app() -> Flask:
    settings = load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.flask.secret_key
    app.config["DEBUG"] = settings.flask.debug

    engine = init_engine(settings.database_url)
    Base.metadata.create_all(engine)

    admin_username = settings.lottery.bootstrap_admin_username
    if admin_username:
        admin = UserRepository().ensure_user(admin_username, ROLE_ADMIN)
        app.logger.info("Bootstrap admin %s has id %s", admin.username, admin.id)

    register_error_handlers(app)
    app.register_blueprint(health_bp)
    app.register_blueprint(tickets_bp, url_prefix="/api/tickets")
    app.register_blueprint(admin_bp, url_prefix="/api")

    return app
