"""One object nested in another, the inner one holding a boxed short."""

from dataclasses import dataclass, field

from ..fields import check_int16

ROOT_NAME = "o1"


@dataclass(slots=True)
class Object2:
    n: int = 5898

    def __post_init__(self) -> None:
        check_int16("n", self.n)


@dataclass(slots=True)
class Object1:
    o2: Object2 = field(default_factory=Object2)


def build() -> Object1:
    return Object1()
