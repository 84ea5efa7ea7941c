from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .errors import SexMismatch, DuplicateParent

# sex stored as string everywhere: 'M', 'F' or None
MALE = "M"
FEMALE = "F"
SEXES = (MALE, FEMALE)

FATHER = "father"
MOTHER = "mother"

# sex a parent must have to fill a given role
ROLE_SEX = {FATHER: MALE, MOTHER: FEMALE}

SEX_LABELS = {MALE: "Male", FEMALE: "Female"}


def sex_label(sex: Optional[str]) -> str:
    return SEX_LABELS.get(sex, "Unknown")


@dataclass
class Person:
    name: str
    sex: Optional[str] = None
    # parents are referenced by name, the Registry owns the Person objects
    father: Optional[str] = None
    mother: Optional[str] = None
    children: List["Person"] = field(default_factory=list, repr=False)

    def set_sex(self, sex: str) -> None:
        """Record the person's sex. Re-asserting the same value is a no-op.

        Raises SexMismatch (without mutating) if a different sex is on record.
        """
        if self.sex and self.sex != sex:
            raise SexMismatch(self.name)
        self.sex = sex

    def set_parent(self, parent: "Person", role: str) -> None:
        """Record `parent` as this person's father or mother.

        The parent's sex is only checked here, never assigned; callers set it
        beforehand. A slot may be filled once; asserting the same name again
        is accepted, a different name raises DuplicateParent.
        """
        if parent.sex and parent.sex != ROLE_SEX[role]:
            raise SexMismatch(parent.name)

        current = getattr(self, role)
        if current is None:
            setattr(self, role, parent.name)
        elif current != parent.name:
            raise DuplicateParent(self.name, role)

    def has_child(self, name: str) -> bool:
        return any(c.name == name for c in self.children)

    def add_child(self, child: "Person") -> None:
        # first insertion order wins, duplicates by name are dropped
        if not self.has_child(child.name):
            self.children.append(child)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sex": SEX_LABELS.get(self.sex),
            "father": self.father,
            "mother": self.mother,
            "children": [c.name for c in self.children],
        }
