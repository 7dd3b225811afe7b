"""A record with no fields at all."""

from dataclasses import dataclass

ROOT_NAME = "foo"


@dataclass(slots=True)
class Empty:
    pass


def build() -> Empty:
    return Empty()
