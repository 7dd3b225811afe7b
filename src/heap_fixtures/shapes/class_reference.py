"""A field referencing the type object of another fixture class."""

from dataclasses import dataclass

from ..fields import check_int64

ROOT_NAME = "o1"


@dataclass(slots=True)
class Object2:
    n: int = 3893289

    def __post_init__(self) -> None:
        check_int64("n", self.n)


@dataclass(slots=True)
class Object1:
    klass: type = Object2


def build() -> Object1:
    return Object1()
