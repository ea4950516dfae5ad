import os

from .constants import AUTH_COOKIE_NAME, DEFAULT_TOKEN_LIFETIME_SECONDS


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _database_url(default=None):
    # Fix for Heroku's 'postgres://' scheme
    db_url = os.getenv("DATABASE_URL", default)
    if db_url and db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)
    return db_url


class Config:
    """Base configuration."""

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SENTRY_DSN = os.getenv("SENTRY_DSN")
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0"))
    SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "1.0"))
    APP_VERSION = os.getenv("APP_VERSION", "local")
    FRONTEND_DOMAIN = os.getenv("FRONTEND_DOMAIN", "http://localhost:5173")

    # Auth Configuration
    JWT_SECRET = os.getenv("JWT_SECRET")
    JWT_EXPIRES_IN_SECONDS = int(os.getenv("JWT_EXPIRES_IN_SECONDS", DEFAULT_TOKEN_LIFETIME_SECONDS))
    AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", AUTH_COOKIE_NAME)
    AUTH_COOKIE_SECURE = _env_bool("AUTH_COOKIE_SECURE", False)

    # Echo the underlying store error string in 500 responses
    EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS", True)

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    CORS_SUPPORTS_CREDENTIALS = True
    CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    SQLALCHEMY_DATABASE_URI = _database_url("sqlite:///staffsphere.db")  # Fallback for local
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    JWT_SECRET = "test-secret"
    JWT_EXPIRES_IN_SECONDS = DEFAULT_TOKEN_LIFETIME_SECONDS
    AUTH_COOKIE_SECURE = False
    EXPOSE_ERROR_DETAILS = True


class StagingConfig(Config):
    """Staging configuration."""

    DEBUG = True
    SQLALCHEMY_DATABASE_URI = _database_url()
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.5"))
    SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.25"))
    AUTH_COOKIE_SECURE = _env_bool("AUTH_COOKIE_SECURE", True)


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    SQLALCHEMY_DATABASE_URI = _database_url()
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1"))  # Lower sample rate for prod
    SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.05"))
    AUTH_COOKIE_SECURE = _env_bool("AUTH_COOKIE_SECURE", True)
    EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS", False)
