"""
Service layer for the phonebook.

``PersonDirectory`` owns the contact collection and implements every
operation the HTTP handlers expose.  The collection lives in process
memory only and starts from ``SEED_PERSONS`` each time a directory is
created; nothing is persisted.

Ids are produced by ``generate_id`` as one more than the largest
existing id.  Ids of deleted entries can therefore be handed out again
(delete the highest id, create a new entry and it receives the same
id).  Clients must not rely on ids being unique over time.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from phonebook_api.app.schemas.person import PersonCreate, PersonRead

logger = logging.getLogger(__name__)


SEED_PERSONS = (
    {"id": "1", "name": "Arto Hellas", "number": "040-123456"},
    {"id": "2", "name": "Ada Lovelace", "number": "39-44-5323523"},
    {"id": "3", "name": "Dan Abramov", "number": "12-43-234345"},
    {"id": "4", "name": "Mary Poppendieck", "number": "39-23-6423122"},
)


class ValidationError(Exception):
    """Raised when a create request is incomplete or conflicts with an existing entry."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PersonDirectory:
    """In‑memory collection of phonebook entries."""

    def __init__(self, persons: Optional[Iterable[dict]] = None) -> None:
        source = SEED_PERSONS if persons is None else persons
        self._persons: List[PersonRead] = [PersonRead(**person) for person in source]

    def list_persons(self) -> List[PersonRead]:
        """Return all entries in storage order."""
        return list(self._persons)

    def count(self) -> int:
        return len(self._persons)

    def get_person(self, person_id: str) -> Optional[PersonRead]:
        """Return the entry whose id equals ``person_id`` or ``None``."""
        for person in self._persons:
            if person.id == person_id:
                return person
        return None

    def delete_person(self, person_id: str) -> bool:
        """Remove the entry with ``person_id``.

        Deleting an unknown id is not an error.  Returns ``True`` if an
        entry was removed.
        """
        remaining = [person for person in self._persons if person.id != person_id]
        removed = len(remaining) != len(self._persons)
        self._persons = remaining
        if removed:
            logger.info("Deleted person %s", person_id)
        return removed

    def generate_id(self) -> str:
        if not self._persons:
            return "1"
        return str(max(int(person.id) for person in self._persons) + 1)

    def create_person(self, data: PersonCreate) -> PersonRead:
        """Validate ``data`` and append a new entry.

        Checks run in a fixed order: missing name, missing number, then
        duplicate name (exact, case‑sensitive match).  The first failing
        check raises ``ValidationError`` and leaves the collection
        untouched.
        """
        if not data.name:
            raise ValidationError("name is missing")
        if not data.number:
            raise ValidationError("number is missing")
        if any(person.name == data.name for person in self._persons):
            raise ValidationError("name must be unique")

        person = PersonRead(id=self.generate_id(), name=data.name, number=data.number)
        self._persons = self._persons + [person]
        logger.info("Created person %s", person.id)
        return person
