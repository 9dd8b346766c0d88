"""WSGI entry point for the address book service."""

import os

from addressbook import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
