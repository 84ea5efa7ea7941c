import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


@pytest.fixture
def family_lines():
    """A small consistent three-generation family, as input lines."""
    return [
        "PERSON Grandpa Joe",
        "SEX M",
        "FATHER_OF Joe Junior",
        "",
        "PERSON Grandma Ann",
        "MOTHER_OF Joe Junior",
        "",
        "PERSON Joe Junior",
        "FATHER_OF Lily",
        "",
        "PERSON Lily",
        "MOTHER Mary",
        "SEX F",
    ]
