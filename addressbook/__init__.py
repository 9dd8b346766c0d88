"""
Flask application factory module.

This module creates and configures the address book service using the
factory pattern. Each application instance owns exactly one in-memory
``AddressBook``; callers (typically tests) may inject their own so they
can inspect and reset the store between requests.
"""

import logging

from flask import Flask, current_app

from addressbook.models import AddressBook, Person
from config import get_config

__all__ = ["AddressBook", "Person", "create_app", "get_address_book"]

# Key under which the store is registered in ``app.extensions``
EXTENSION_KEY = "address_book"

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    config_name: str | None = None,
    address_book: AddressBook | None = None,
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        address_book: Store to serve. A fresh, empty one is created
                      when omitted.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    logging.getLogger().setLevel(app.config["LOG_LEVEL"])

    logger.info("Creating app with config: %s", config_class.__name__)

    app.extensions[EXTENSION_KEY] = address_book if address_book is not None else AddressBook()

    # Register blueprints
    from addressbook.routes.api import api_bp, contacts_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(contacts_bp, url_prefix="/contacts")

    return app


def get_address_book() -> AddressBook:
    """Return the store owned by the application handling the current request."""
    return current_app.extensions[EXTENSION_KEY]
