"""One-shot pipeline: records -> registry -> cycle check -> report.

Phases run strictly in order. Any FamtreeError propagates to the caller
and the registry built so far is dropped with it.
"""
from __future__ import annotations
from typing import Iterable
import logging

from .builder import build_registry
from .cycles import check_acyclic
from .printer import render
from .records import read_records
from .registry import Registry


def load_family(lines: Iterable[str]) -> Registry:
    registry = build_registry(read_records(lines))
    logging.info("built registry with %d persons", len(registry))
    check_acyclic(registry)
    return registry


def generate_report(lines: Iterable[str], fmt: str = "text") -> str:
    return render(load_family(lines), fmt)
