"""Record tokenizer for the family description format.

Input is line oriented. Each line is split on whitespace; the first field
is a keyword and the remaining fields, joined by single spaces, form the
value:

    PERSON Alice Smith
    SEX F
    MOTHER_OF Bob Smith
    FATHER Carl Smith

Lines with fewer than two fields are skipped. Line numbers are 1-based and
count every physical line, skipped or not.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import InvalidRecord
from .models import FATHER, MOTHER, SEXES


@dataclass(frozen=True)
class Record:
    line: int
    fields: Tuple[str, ...]

    @property
    def keyword(self) -> str:
        return self.fields[0]

    @property
    def value(self) -> str:
        return " ".join(self.fields[1:])


@dataclass(frozen=True)
class PersonCommand:
    line: int
    name: str


@dataclass(frozen=True)
class ParentOfCommand:
    """The current subject is the father/mother of `child`."""

    line: int
    role: str
    child: str


@dataclass(frozen=True)
class ChildOfCommand:
    """The current subject is a child of `parent`."""

    line: int
    role: str
    parent: str


@dataclass(frozen=True)
class SexCommand:
    line: int
    sex: str


Command = Union[PersonCommand, ParentOfCommand, ChildOfCommand, SexCommand]

# keyword -> parent role for the two relation forms
_PARENT_OF = {"FATHER_OF": FATHER, "MOTHER_OF": MOTHER}
_CHILD_OF = {"FATHER": FATHER, "MOTHER": MOTHER}


def read_records(lines: Iterable[str]) -> Iterator[Record]:
    for lineno, raw in enumerate(lines, start=1):
        fields = raw.split()
        if len(fields) < 2:
            continue
        yield Record(line=lineno, fields=tuple(fields))


def parse_command(record: Record) -> Optional[Command]:
    """Turn a record into a command, or None for an unrecognised keyword."""
    kw = record.keyword
    if kw == "PERSON":
        return PersonCommand(record.line, record.value)
    if kw in _PARENT_OF:
        return ParentOfCommand(record.line, _PARENT_OF[kw], record.value)
    if kw in _CHILD_OF:
        return ChildOfCommand(record.line, _CHILD_OF[kw], record.value)
    if kw == "SEX":
        sex = record.value[0]
        if sex not in SEXES:
            raise InvalidRecord(f"unknown sex {record.value!r}", record.line)
        return SexCommand(record.line, sex)
    return None
