"""
Shared pytest fixtures for the address book test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by resetting the in-memory address book before each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Injecting the store into the application instead of using a global
- Test data factories
- Test client creation
"""

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from addressbook import create_app
from addressbook.models import AddressBook, Person


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def shared_address_book() -> AddressBook:
    """
    Provide the store served by the session-wide application.

    Tests should not use this directly; ``address_book`` hands out the
    same instance after resetting it.
    """
    return AddressBook()


@pytest.fixture(scope="session")
def app(shared_address_book):
    """
    Create application instance for the test session.

    The application is built around ``shared_address_book`` so that tests
    can arrange and inspect server state directly.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing", address_book=shared_address_book)
    yield application


@pytest.fixture(autouse=True)
def address_book(shared_address_book) -> AddressBook:
    """
    Reset the store before each test.

    The list is emptied and ``next_id`` restarts at 1, so every test
    begins from the same clean state regardless of execution order.

    Returns:
        The AddressBook served by ``app``.
    """
    shared_address_book.clear()
    return shared_address_book


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    The test client allows you to make requests to the app
    without running a real server.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def person_factory(address_book):
    """
    Factory fixture that inserts people straight into the store.

    Each person receives an id from ``address_book.issue_id()``, exactly
    as a server-side seeding step would, bypassing the HTTP layer.

    Example:
        def test_something(person_factory):
            person = person_factory(name="Salvador")
            assert person.id == 1
    """

    def _create_person(name: str | None = None) -> Person:
        person = Person(id=address_book.issue_id(), name=name or fake.name())
        return address_book.insert(person)

    return _create_person


@pytest.fixture
def salvador_and_juan(person_factory) -> list[Person]:
    """Seed the store with Salvador (id 1) and Juan (id 2)."""
    return [
        person_factory(name="Salvador"),
        person_factory(name="Juan"),
    ]


# -----------------------------------------------------------------------------
# API Helper Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def base_url() -> str:
    """
    Provide the origin the Flask test client issues requests against.

    Returns:
        Origin used when building absolute person URIs.
    """
    return "http://localhost"


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }


@pytest.fixture
def person_payload() -> dict[str, Any]:
    """Provide a valid body for POST/PUT requests."""
    return {"name": "Juan"}
