import logging
import os

import sentry_sdk
from dotenv import load_dotenv
from flask import Flask, jsonify
from pydantic import ValidationError
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from werkzeug.exceptions import HTTPException

# Import models to ensure they are registered with SQLAlchemy
from . import models
from .auth.tokens import TokenService
from .constants import ENV_DEVELOPMENT, ENV_PRODUCTION, ENV_STAGING, ENV_TESTING
from .exceptions import StaffSphereException, UnexpectedException

# Import extensions from the extensions module
from .extensions import cors, db, migrate


def _format_validation_errors(errors: list[dict]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def register_error_handlers(app: Flask):
    """Every error leaves the API as JSON with a ``message`` key."""

    @app.errorhandler(StaffSphereException)
    def handle_staffsphere_exception(e: StaffSphereException):
        if e.status_code >= 500:
            app.logger.error(f"{type(e).__name__}: {e.message}")
        return jsonify({"message": e.message}), e.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        # Inputs are left out so request bodies are never echoed back
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        app.logger.warning(f"Request body failed validation: {_format_validation_errors(errors)}")
        return jsonify({"message": _format_validation_errors(errors), "errors": errors}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_exception(e: Exception):
        db.session.rollback()
        app.logger.exception(f"Unhandled error: {e}")
        sentry_sdk.capture_exception(e)

        error = UnexpectedException()
        body = {"message": error.message}
        if app.config.get("EXPOSE_ERROR_DETAILS"):
            body["error"] = str(e)
        return jsonify(body), error.status_code


def create_app(config_class=None):
    """
    Application factory function to create and configure the Flask app.
    """
    app = Flask(__name__)

    # Load environment variables early
    load_dotenv()

    # --- Configuration ---
    if config_class is None:
        # Determine configuration based on FLASK_ENV environment variable
        env = os.getenv("FLASK_ENV", ENV_DEVELOPMENT)
        if env == ENV_PRODUCTION:
            from .config import ProductionConfig

            config_class = ProductionConfig
        elif env == ENV_STAGING:
            from .config import StagingConfig

            config_class = StagingConfig
        elif env == ENV_TESTING:
            from .config import TestingConfig

            config_class = TestingConfig
        else:  # Default to development
            from .config import DevelopmentConfig

            config_class = DevelopmentConfig

    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # --- Sentry Initialization ---
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(),
                SqlalchemyIntegration(),
            ],
            traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 1.0),
            profiles_sample_rate=app.config.get("SENTRY_PROFILES_SAMPLE_RATE", 1.0),
            environment=app.config.get("FLASK_ENV"),
            release=app.config.get("APP_VERSION", None),
        )
        app.logger.info(f"Sentry initialized for environment: {app.config.get('FLASK_ENV')}")
    else:
        app.logger.info("SENTRY_DSN not found. Sentry will not be initialized.")

    # --- Token Service ---
    jwt_secret = app.config.get("JWT_SECRET")
    if not jwt_secret:
        raise ValueError("JWT_SECRET environment variable must be set")
    app.token_service = TokenService(jwt_secret, app.config.get("JWT_EXPIRES_IN_SECONDS"))

    # --- Initialize Flask Extensions (after app config) ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- CORS Configuration ---
    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": app.config.get("CORS_ORIGINS", []),
                "supports_credentials": app.config.get("CORS_SUPPORTS_CREDENTIALS", True),
                "allow_headers": app.config.get("CORS_ALLOW_HEADERS", ["Content-Type", "Authorization"]),
            }
        },
    )

    register_error_handlers(app)

    # "/api/employees" and "/api/employees/" reach the same handler
    app.url_map.strict_slashes = False

    # --- Register Blueprints ---
    from .routes.attendance import bp as attendance_bp
    from .routes.auth import bp as auth_bp
    from .routes.dashboard import bp as dashboard_bp
    from .routes.departments import bp as departments_bp
    from .routes.employees import bp as employees_bp
    from .routes.leaves import bp as leaves_bp
    from .routes.main import bp as main_bp
    from .routes.manager import bp as manager_bp
    from .routes.payroll import bp as payroll_bp
    from .routes.performance import bp as performance_bp
    from .routes.profile import bp as profile_bp
    from .routes.projects import bp as projects_bp
    from .routes.tasks import bp as tasks_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(employees_bp)
    app.register_blueprint(departments_bp)
    app.register_blueprint(attendance_bp)
    app.register_blueprint(leaves_bp)
    app.register_blueprint(payroll_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(performance_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(manager_bp)
    app.register_blueprint(profile_bp)

    return app
