"""Character array, array of distinct objects and a zero-length array."""

from dataclasses import dataclass, field

from ..fields import check_int64

ROOT_NAME = "o1"

ARRAY_LENGTH = 10
FILL_CHAR = "a"


@dataclass(slots=True, eq=False)
class Object2:
    n: int = 3893289

    def __post_init__(self) -> None:
        check_int64("n", self.n)


@dataclass(slots=True, eq=False)
class Object3:
    n: int = 3893289

    def __post_init__(self) -> None:
        check_int64("n", self.n)


def _chars() -> tuple[str, ...]:
    return (FILL_CHAR,) * ARRAY_LENGTH


def _objects() -> list[Object2]:
    # one fresh instance per slot, never the same object repeated
    return [Object2() for _ in range(ARRAY_LENGTH)]


@dataclass(slots=True, eq=False)
class Object1:
    r2: tuple[str, ...] = field(default_factory=_chars)
    o2: list[Object2] = field(default_factory=_objects)
    o3: list[Object3] = field(default_factory=list)


def build() -> Object1:
    return Object1()
