"""Fatal input errors.

Every error is terminal for a run: the first one raised aborts the
pipeline and its string form is the single diagnostic line shown to the
user. `line` is the 1-based source line of the offending record, filled in
by the builder; it stays None for whole-graph errors such as cycles.
"""
from __future__ import annotations
from typing import Optional


class FamtreeError(Exception):
    kind = "error"

    def __init__(self, message: str = "", line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return f"Bad input - {self.message}"
        return f"Bad input - {self.message} on line {self.line}"

    def to_dict(self):
        return {"detail": str(self), "kind": self.kind, "line": self.line}


class SexMismatch(FamtreeError):
    kind = "sex_mismatch"

    def __init__(self, name: str, line: Optional[int] = None):
        super().__init__("sex mismatch", line)
        self.name = name


class DuplicateParent(FamtreeError):
    kind = "duplicate_parent"

    def __init__(self, name: str, role: str, line: Optional[int] = None):
        super().__init__(f"child with two {role}s", line)
        self.name = name
        self.role = role


class CycleDetected(FamtreeError):
    kind = "cycle"

    def __init__(self, name: str):
        super().__init__("cycle in specification")
        self.name = name


class InvalidRecord(FamtreeError):
    kind = "invalid_record"
