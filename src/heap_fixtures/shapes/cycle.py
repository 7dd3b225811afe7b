"""Two records referencing each other.

Plain references are enough here: the cycle collector reclaims the pair once
the registry lets go of the root, so no weak or indexed back-link is needed.
"""

from __future__ import annotations

from dataclasses import dataclass

ROOT_NAME = "o1"


@dataclass(slots=True, eq=False)
class Object1:
    o2: Object2 | None = None


@dataclass(slots=True, eq=False)
class Object2:
    o1: Object1 | None = None


def build() -> Object1:
    o1 = Object1()
    o1.o2 = Object2()
    o1.o2.o1 = o1
    return o1
