"""A growable text buffer appended to exactly once."""

from dataclasses import dataclass
from io import StringIO

ROOT_NAME = "r1"

APPENDED = "HELLO"


@dataclass(slots=True, eq=False)
class Object1:
    string_builder: StringIO | None = None


def build() -> Object1:
    r1 = Object1()
    r1.string_builder = StringIO()
    r1.string_builder.write(APPENDED)
    return r1
