"""An integer to integer mapping with three entries."""

from dataclasses import dataclass, field

ROOT_NAME = "o1"

ENTRIES: tuple[tuple[int, int], ...] = ((1, 2), (3, 4), (5, 6))


@dataclass(slots=True)
class Object1:
    map: dict[int, int] = field(default_factory=dict)


def build() -> Object1:
    o1 = Object1()
    for key, value in ENTRIES:
        o1.map[key] = value
    return o1
