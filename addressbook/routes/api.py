"""
REST API endpoints for the address book.

This module exposes the people held by the application's ``AddressBook``
as JSON resources. Every person is addressed by the URI it was created
under, which is also returned as its ``href``.

Endpoints:
    GET    /health                - Health check
    GET    /contacts              - List every person (insertion order)
    POST   /contacts              - Create a person
    GET    /contacts/person/<id>  - Get a single person by ID
    PUT    /contacts/person/<id>  - Replace the name of a person
    DELETE /contacts/person/<id>  - Delete a person
"""

import logging

from flask import Blueprint, Response, current_app, jsonify, request, url_for
from werkzeug.exceptions import HTTPException

from addressbook import get_address_book
from addressbook.models import Person
from addressbook.schemas import PayloadError, PersonPayload, PersonResource

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)
contacts_bp = Blueprint("contacts", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def person_href(person_id: int) -> str:
    """Build the absolute URI of a person for the host serving the request."""
    return url_for("contacts.get_person", person_id=person_id, _external=True)


def render_person(person: Person) -> dict:
    """Render a stored person as its JSON resource."""
    return PersonResource.from_person(person, person_href(person.id)).to_dict()


def read_payload() -> PersonPayload:
    """
    Parse the current request body into a PersonPayload.

    Raises:
        PayloadError: If the body is missing, not JSON or has no name.
    """
    return PersonPayload.from_json(request.get_json(silent=True))


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "service": "addressbook",
        "environment": current_app.config["ENVIRONMENT"],
        "version": current_app.config["APP_VERSION"]
    }), 200


@contacts_bp.route("", methods=["GET"])
def list_people() -> tuple[Response, int]:
    """
    List every person in insertion order.

    Safe and idempotent: neither the list nor the id counter changes.

    Returns:
        JSON array of people and 200 status code.
    """
    logger.info("GET /contacts - Listing people")

    people, _ = get_address_book().snapshot()
    logger.info("Found %d people", len(people))

    return jsonify([render_person(person) for person in people]), 200


@contacts_bp.route("", methods=["POST"])
def create_person() -> tuple[Response, int] | tuple[Response, int, dict[str, str]]:
    """
    Create a new person.

    The server assigns the id; any ``id`` or ``href`` in the body is
    ignored. Repeating the request creates another, distinct person.

    Request Body (JSON):
        name: Name of the person (required)

    Returns:
        JSON person with 201 status code and a Location header pointing
        at the new resource, or an error message and 400.
    """
    logger.info("POST /contacts - Creating person")

    try:
        payload = read_payload()
    except PayloadError as exc:
        logger.warning("Validation failed: %s", exc)
        return jsonify({"error": str(exc)}), 400

    person = get_address_book().create(payload.name)
    href = person_href(person.id)

    logger.info("Created person with ID: %d", person.id)
    return jsonify(PersonResource.from_person(person, href).to_dict()), 201, {"Location": href}


@contacts_bp.route("/person/<int:person_id>", methods=["GET"])
def get_person(person_id: int) -> tuple[Response, int]:
    """
    Get a single person by ID.

    Args:
        person_id: The identifier of the person.

    Returns:
        JSON person and 200 status code, or an error message and 404.
    """
    logger.info("GET /contacts/person/%d - Fetching person", person_id)

    person = get_address_book().find(person_id)
    if person is None:
        logger.warning("Person %d not found", person_id)
        return jsonify({"error": "Person not found"}), 404

    return jsonify(render_person(person)), 200


@contacts_bp.route("/person/<int:person_id>", methods=["PUT"])
def update_person(person_id: int) -> tuple[Response | str, int]:
    """
    Replace the name of an existing person.

    The id and href are unchanged. Repeating the request leaves the same
    state behind.

    Args:
        person_id: The identifier of the person.

    Request Body (JSON):
        name: New name of the person (required)

    Returns:
        Empty 204 response, or an error message and 404/400.
    """
    logger.info("PUT /contacts/person/%d - Updating person", person_id)

    book = get_address_book()
    if book.find(person_id) is None:
        logger.warning("Person %d not found", person_id)
        return jsonify({"error": "Person not found"}), 404

    try:
        payload = read_payload()
    except PayloadError as exc:
        logger.warning("Validation failed: %s", exc)
        return jsonify({"error": str(exc)}), 400

    if book.update(person_id, payload.name) is None:
        # Deleted by a concurrent request between the lookup and the update
        logger.warning("Person %d not found", person_id)
        return jsonify({"error": "Person not found"}), 404

    logger.info("Updated person %d", person_id)
    return "", 204


@contacts_bp.route("/person/<int:person_id>", methods=["DELETE"])
def delete_person(person_id: int) -> tuple[Response | str, int]:
    """
    Delete a person.

    Repeating the request leaves the same state behind; the repeat
    reports 404 because the resource is already gone.

    Args:
        person_id: The identifier of the person.

    Returns:
        Empty 204 response, or an error message and 404.
    """
    logger.info("DELETE /contacts/person/%d - Deleting person", person_id)

    if not get_address_book().remove(person_id):
        logger.warning("Person %d not found", person_id)
        return jsonify({"error": "Person not found"}), 404

    logger.info("Deleted person %d", person_id)
    return "", 204


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@contacts_bp.app_errorhandler(HTTPException)
def http_error(error: HTTPException) -> tuple[Response, int]:
    """Render routing and protocol errors (404, 405, ...) as JSON."""
    return jsonify({"error": error.description}), error.code


@contacts_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
