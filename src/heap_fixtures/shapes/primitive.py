"""A single 32-bit integer field."""

from dataclasses import dataclass

from ..fields import check_int32

ROOT_NAME = "foo"


@dataclass(slots=True)
class IntHolder:
    n: int = 5963492

    def __post_init__(self) -> None:
        check_int32("n", self.n)


def build() -> IntHolder:
    return IntHolder()
