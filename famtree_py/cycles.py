"""Cycle detection over the parent -> child graph.

A cycle means somebody is their own ancestor. Detection is a three-colour
depth-first search started from every person in registry order:

    unvisited -> in progress (on the current path) -> done

Reaching an in-progress person again closes a cycle. Reaching a done person
means everything below it was already proven acyclic. The traversal keeps
an explicit stack so deep pedigrees do not hit the interpreter's recursion
limit, and the colours live in a side table owned by the pass, not on the
Person objects.
"""
from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import CycleDetected
from .models import Person
from .registry import Registry

UNVISITED = 0
IN_PROGRESS = 1
DONE = 2


def find_cycle(registry: Registry) -> Optional[str]:
    """Return the name of a person closing a cycle, or None if acyclic."""
    state: Dict[str, int] = {}

    for root in registry.all_persons():
        if state.get(root.name, UNVISITED) != UNVISITED:
            continue
        state[root.name] = IN_PROGRESS
        # stack of (person, iterator over its remaining children)
        stack: List[Tuple[Person, Iterator[Person]]] = [(root, iter(root.children))]
        while stack:
            person, children = stack[-1]
            child = next(children, None)
            if child is None:
                state[person.name] = DONE
                stack.pop()
                continue
            st = state.get(child.name, UNVISITED)
            if st == IN_PROGRESS:
                return child.name
            if st == UNVISITED:
                state[child.name] = IN_PROGRESS
                stack.append((child, iter(child.children)))
    return None


def check_acyclic(registry: Registry) -> None:
    """Raise CycleDetected on the first cycle found anywhere in the registry."""
    name = find_cycle(registry)
    if name is not None:
        raise CycleDetected(name)
