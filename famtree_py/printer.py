"""Report ordering and rendering.

`emission_order` yields persons so that nobody appears before a parent
that is present in the registry. It is a breadth-first worklist seeded with
every person in registry order. A person whose parent has not been emitted
yet is dropped from the worklist, not re-queued: it comes back when that
parent is emitted and appends its children to the tail. This relies on the
builder always linking a child into its parent's children whenever it sets
the child's father or mother.
"""
from __future__ import annotations
from collections import deque
from typing import Iterator, List, Set
import json

from .models import Person, sex_label
from .registry import Registry
from .templating import render_template

FORMATS = ("text", "json", "html")


def _parents_emitted(registry: Registry, person: Person, emitted: Set[str]) -> bool:
    for name in (person.father, person.mother):
        parent = registry.lookup(name)
        # a parent missing from the registry does not block emission
        if parent is not None and parent.name not in emitted:
            return False
    return True


def emission_order(registry: Registry) -> Iterator[Person]:
    emitted: Set[str] = set()
    queue = deque(registry.all_persons())
    while queue:
        person = queue.popleft()
        if person.name in emitted:
            continue
        if not _parents_emitted(registry, person, emitted):
            continue
        emitted.add(person.name)
        yield person
        queue.extend(person.children)


def format_person(person: Person) -> str:
    lines = [
        person.name,
        f" Sex: {sex_label(person.sex)}",
        f" Father: {person.father or 'Unknown'}",
        f" Mother: {person.mother or 'Unknown'}",
    ]
    if not person.children:
        lines.append(" Children: None")
    else:
        lines.append(" Children: ")
        lines.extend(f"\t{c.name}" for c in person.children)
    return "\n".join(lines) + "\n"


def render_text(registry: Registry) -> str:
    # every block, the last one included, is followed by a blank line
    return "".join(format_person(p) + "\n" for p in emission_order(registry))


def render_json(registry: Registry) -> str:
    return json.dumps([p.to_dict() for p in emission_order(registry)], indent=2, ensure_ascii=False) + "\n"


def render_html(registry: Registry, title: str = "Family report") -> str:
    persons: List[dict] = []
    for p in emission_order(registry):
        d = p.to_dict()
        d["sex"] = sex_label(p.sex)
        persons.append(d)
    return render_template("report.html", {"title": title, "persons": persons})


def render(registry: Registry, fmt: str = "text") -> str:
    if fmt == "text":
        return render_text(registry)
    if fmt == "json":
        return render_json(registry)
    if fmt == "html":
        return render_html(registry)
    raise ValueError(f"unknown output format {fmt!r}, expected one of {', '.join(FORMATS)}")
