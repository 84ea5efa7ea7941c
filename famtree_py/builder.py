"""Relationship builder: applies parsed commands to a Registry.

The builder keeps one piece of interpreter state, the current subject,
set by every PERSON record. Relation and SEX records apply to that
subject. Every parent assertion also links the child into the parent's
children, in both directions of the relation, so the printer can reach
each child from its parents.

The first conflict aborts the build; the error carries the line number
of the record that caused it.
"""
from __future__ import annotations
from typing import Iterable, Optional
import logging

from .errors import FamtreeError, InvalidRecord
from .models import Person, ROLE_SEX
from .records import (
    Record,
    Command,
    PersonCommand,
    ParentOfCommand,
    ChildOfCommand,
    SexCommand,
    parse_command,
)
from .registry import Registry


class RelationshipBuilder:
    def __init__(self, registry: Optional[Registry] = None) -> None:
        self.registry = registry if registry is not None else Registry()
        self.subject: Optional[Person] = None

    def feed(self, records: Iterable[Record]) -> Registry:
        for record in records:
            command = parse_command(record)
            if command is None:
                logging.debug("line %d: ignoring unknown keyword %r", record.line, record.keyword)
                continue
            self.apply(command)
        return self.registry

    def apply(self, command: Command) -> None:
        try:
            if isinstance(command, PersonCommand):
                self.subject = self.registry.lookup_or_create(command.name)
            elif isinstance(command, ParentOfCommand):
                self._parent_of(command)
            elif isinstance(command, ChildOfCommand):
                self._child_of(command)
            elif isinstance(command, SexCommand):
                self._require_subject().set_sex(command.sex)
            else:
                raise TypeError(f"unsupported command {command!r}")
        except FamtreeError as exc:
            if exc.line is None:
                exc.line = command.line
            logging.debug("build aborted: %s", exc)
            raise

    def _require_subject(self) -> Person:
        if self.subject is None:
            raise InvalidRecord("no current person")
        return self.subject

    def _parent_of(self, command: ParentOfCommand) -> None:
        parent = self._require_subject()
        parent.set_sex(ROLE_SEX[command.role])
        child = self.registry.lookup_or_create(command.child)
        child.set_parent(parent, command.role)
        parent.add_child(child)

    def _child_of(self, command: ChildOfCommand) -> None:
        child = self._require_subject()
        parent = self.registry.lookup_or_create(command.parent)
        parent.set_sex(ROLE_SEX[command.role])
        child.set_parent(parent, command.role)
        parent.add_child(child)


def build_registry(records: Iterable[Record]) -> Registry:
    """Build a fresh Registry from records, raising on the first conflict."""
    return RelationshipBuilder().feed(records)
