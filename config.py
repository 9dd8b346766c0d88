"""
Application configuration module.

This module defines configuration classes for the address book service
in different environments (development, testing, production). Values are
loaded from environment variables with sensible defaults.
"""

import os


class Config:
    """
    Base configuration with default settings.

    Attributes:
        SECRET_KEY: Flask session signing key (unused by the JSON API but
            required by some Flask extensions).
        LOG_LEVEL: Root logging level name.
        ENVIRONMENT: Free-form deployment label reported by ``/health``.
        APP_VERSION: Build identifier reported by ``/health``.
    """

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "unknown")
    APP_VERSION: str = os.environ.get("APP_VERSION", "unknown")


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True
    ENVIRONMENT: str = "testing"


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
