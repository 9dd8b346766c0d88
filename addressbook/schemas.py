"""
Request and response payloads for the contacts API.

Incoming JSON is parsed into ``PersonPayload`` before it reaches the
address book, and outgoing people are rendered through
``PersonResource``. Only ``name`` is read from a request body; ``id`` and
``href`` are server-owned and any client-supplied value is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from addressbook.models import Person


class PayloadError(ValueError):
    """Raised when a request body does not describe a person."""


@dataclass(frozen=True)
class PersonPayload:
    """Body accepted by ``POST /contacts`` and ``PUT /contacts/person/<id>``."""

    name: str

    @classmethod
    def from_json(cls, data: Any) -> PersonPayload:
        """
        Build a payload from decoded JSON.

        Args:
            data: Result of decoding the request body, or None when the
                body was missing or not JSON.

        Returns:
            PersonPayload carrying the requested name.

        Raises:
            PayloadError: If the body is not an object or ``name`` is
                missing or not a string.
        """
        if not isinstance(data, dict):
            raise PayloadError("Request body must be a JSON object")
        if "name" not in data:
            raise PayloadError("'name' is required")
        name = data["name"]
        if not isinstance(name, str):
            raise PayloadError("'name' must be a string")
        return cls(name=name)


@dataclass(frozen=True)
class PersonResource:
    """A person as returned to clients, with its resource URI."""

    id: int
    name: str
    href: str

    @classmethod
    def from_person(cls, person: Person, href: str) -> PersonResource:
        return cls(id=person.id, name=person.name, href=href)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "href": self.href}
