"""Primitive, text, null and nested-object fields on an inherited record."""

from dataclasses import dataclass, field

from ..fields import check_int16, check_int32

ROOT_NAME = "foo"


@dataclass(slots=True)
class Baz:
    baaaaz: int = 3920

    def __post_init__(self) -> None:
        check_int32("baaaaz", self.baaaaz)


@dataclass(slots=True)
class Bar:
    gokurosan: int = 5963

    def __post_init__(self) -> None:
        check_int32("gokurosan", self.gokurosan)


@dataclass(slots=True)
class Empty:
    pass


@dataclass(slots=True)
class Foo(Bar):
    """Subclass of Bar carrying ints, a short, text, a null and two nested objects."""

    a: int = 3
    b: int = 5
    c: int = 4189
    msg: str = "Hello"
    null_field: str | None = None
    baz: Baz = field(default_factory=Baz)
    empty: Empty = field(default_factory=Empty)

    def __post_init__(self) -> None:
        Bar.__post_init__(self)
        check_int32("a", self.a)
        check_int32("b", self.b)
        check_int16("c", self.c)


def build() -> Foo:
    return Foo()
