"""A single literal string field."""

from dataclasses import dataclass

ROOT_NAME = "r1"


@dataclass(slots=True)
class Object1:
    string_entry: str = "abcdefghijklmnopqrstuvwxyz"


def build() -> Object1:
    return Object1()
