"""
Data model for the address book service.

This module defines the ``Person`` record and the in-memory ``AddressBook``
that owns every person served by the API. The address book hands out
person ids from a monotonic counter: an id is issued exactly once and is
never reused, even after the person holding it has been deleted.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Person:
    """
    A single contact in the address book.

    Person records are immutable values. Updating a contact replaces the
    record held by the address book, so copies taken earlier keep
    describing the state they were taken from.

    Attributes:
        id: Server-assigned positive identifier.
        name: Display name of the contact.
    """

    id: int
    name: str

    def __repr__(self) -> str:
        return f"<Person {self.id}: {self.name}>"


class AddressBook:
    """
    Ordered, in-memory collection of people.

    Attributes:
        person_list: People in insertion order.
        next_id: Id the next created person will receive. Always greater
            than any id issued so far.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.person_list: list[Person] = []
        self.next_id: int = 1

    def __len__(self) -> int:
        return len(self.person_list)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self.person_list))

    def __repr__(self) -> str:
        return f"<AddressBook people={len(self.person_list)} next_id={self.next_id}>"

    def issue_id(self) -> int:
        """Return a fresh id and advance the counter."""
        with self._lock:
            issued = self.next_id
            self.next_id += 1
            return issued

    def create(self, name: str) -> Person:
        """
        Create a person with a freshly issued id and append it.

        Args:
            name: Name of the new contact.

        Returns:
            The stored Person.
        """
        with self._lock:
            person = Person(id=self.issue_id(), name=name)
            self.person_list.append(person)
            return person

    def insert(self, person: Person) -> Person:
        """
        Append a pre-built person, typically one built with ``issue_id()``.

        Args:
            person: Person to store.

        Returns:
            The stored Person.

        Raises:
            ValueError: If the id is not positive or is already in use.
        """
        with self._lock:
            if person.id < 1:
                raise ValueError(f"Person id must be positive, got {person.id}")
            if self._index_of(person.id) is not None:
                raise ValueError(f"Person id {person.id} is already in use")
            # Keep the counter ahead of every id that has entered the book
            if person.id >= self.next_id:
                self.next_id = person.id + 1
            self.person_list.append(person)
            return person

    def find(self, person_id: int) -> Person | None:
        """Return the person with the given id, or None."""
        with self._lock:
            index = self._index_of(person_id)
            return None if index is None else self.person_list[index]

    def update(self, person_id: int, name: str) -> Person | None:
        """
        Replace the name of an existing person.

        The id, and therefore the resource URI, is left untouched and the
        person keeps its position in the list.

        Returns:
            The updated Person, or None if no person has that id.
        """
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return None
            updated = replace(self.person_list[index], name=name)
            self.person_list[index] = updated
            return updated

    def remove(self, person_id: int) -> bool:
        """
        Remove the person with the given id.

        Returns:
            True if a person was removed, False if none had that id.
        """
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return False
            del self.person_list[index]
            return True

    def clear(self) -> None:
        """Forget every person and restart id allocation at 1."""
        with self._lock:
            self.person_list.clear()
            self.next_id = 1

    def snapshot(self) -> tuple[list[Person], int]:
        """Return a copy of the people and the current counter value."""
        with self._lock:
            return list(self.person_list), self.next_id

    def _index_of(self, person_id: int) -> int | None:
        for index, person in enumerate(self.person_list):
            if person.id == person_id:
                return index
        return None
