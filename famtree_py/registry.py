"""In-memory person registry.

The registry is the single owner of every Person in a run. Persons are
keyed by their exact name and kept in insertion order, which is also the
order every later phase walks them in. Cross references between persons
(father/mother) are names resolved through `lookup`, never owned objects.
"""
from __future__ import annotations
from typing import Dict, Iterator, Optional
import logging

from .models import Person


class Registry:
    def __init__(self) -> None:
        self.persons: Dict[str, Person] = {}

    def lookup(self, name: Optional[str]) -> Optional[Person]:
        if not name:
            return None
        return self.persons.get(name)

    def lookup_or_create(self, name: str) -> Person:
        person = self.persons.get(name)
        if person is None:
            person = Person(name=name)
            self.persons[name] = person
            logging.debug("registry: created person %r", name)
        return person

    def all_persons(self) -> Iterator[Person]:
        # a fresh iterator on every call, so callers can walk it again
        return iter(self.persons.values())

    def __len__(self) -> int:
        return len(self.persons)

    def __contains__(self, name: object) -> bool:
        return name in self.persons
