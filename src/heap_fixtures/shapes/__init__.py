"""Catalogue of fixture shapes.

Each shape lives in its own module and is independent of the others. A
module provides ``ROOT_NAME`` (the holder that keeps the graph reachable)
and ``build()``, which returns the fully constructed root object. Field
values are literal constants so snapshots of the same shape stay comparable
across runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType

from ..exceptions import UnknownShapeError
from . import (
    arrays,
    class_reference,
    cycle,
    empty,
    hello,
    mapping,
    nested,
    primitive,
    text,
    text_buffer,
)


@dataclass(frozen=True)
class Shape:
    """A named object-graph pattern the catalogue can construct.

    Attributes:
        name: Catalogue key, also the CLI argument
        description: One-line summary
        root_name: Name the root is held under
        builder: Zero-argument callable returning the root object
    """

    name: str
    description: str
    root_name: str
    builder: Callable[[], object]

    def build(self) -> object:
        """Construct a fresh instance of this shape's graph."""
        return self.builder()


def _from_module(name: str, module: ModuleType) -> Shape:
    doc = (module.__doc__ or name).strip().splitlines()[0]
    return Shape(name=name, description=doc, root_name=module.ROOT_NAME, builder=module.build)


SHAPES: dict[str, Shape] = {
    shape.name: shape
    for shape in (
        _from_module("hello", hello),
        _from_module("int", primitive),
        _from_module("empty", empty),
        _from_module("array", arrays),
        _from_module("object", nested),
        _from_module("class", class_reference),
        _from_module("hashmap", mapping),
        _from_module("string", text),
        _from_module("stringbuilder", text_buffer),
        _from_module("recursion", cycle),
    )
}


def get_shape(name: str) -> Shape:
    """
    Look up a shape by name.

    Raises:
        UnknownShapeError: If no shape has that name
    """
    try:
        return SHAPES[name]
    except KeyError:
        raise UnknownShapeError(name, sorted(SHAPES)) from None


__all__ = ["SHAPES", "Shape", "get_shape"]
