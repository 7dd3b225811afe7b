"""Reachability walk over fixture object graphs.

Objects are tracked by identity, so shared and cyclic references are visited
once and the walk always terminates.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from io import StringIO
from typing import Any


def _children(obj: Any, path: str) -> list[tuple[str, Any]]:
    """Outgoing references of ``obj`` in declaration order, ``None`` excluded."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        pairs = [(f"{path}.{f.name}", getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    elif isinstance(obj, (list, tuple)):
        pairs = [(f"{path}[{i}]", item) for i, item in enumerate(obj)]
    elif isinstance(obj, dict):
        pairs = []
        for key, value in obj.items():
            pairs.append((f"{path}<key {key!r}>", key))
            pairs.append((f"{path}[{key!r}]", value))
    else:
        pairs = []
    return [(p, child) for p, child in pairs if child is not None]


def walk(root: Any, name: str = "root") -> Iterator[tuple[str, Any]]:
    """
    Yield ``(path, obj)`` for every distinct object reachable from ``root``.

    Traversal is depth first in field declaration order. Dataclass fields,
    list and tuple elements, and dict keys and values are followed. Type
    objects, strings, numbers and text buffers are leaves.

    Args:
        root: Object to start from
        name: Path label for the root

    Yields:
        Tuples of dotted access path and the object found there
    """
    if root is None:
        return
    seen: set[int] = set()
    stack: list[tuple[str, Any]] = [(name, root)]
    while stack:
        path, obj = stack.pop()
        if id(obj) in seen:
            continue
        seen.add(id(obj))
        yield path, obj
        stack.extend(reversed(_children(obj, path)))


def _leaf_repr(obj: Any) -> str:
    if isinstance(obj, type):
        return f"type {obj.__qualname__}"
    if isinstance(obj, StringIO):
        return f"StringIO({obj.getvalue()!r})"
    return repr(obj)


def describe(root: Any, name: str = "root") -> list[str]:
    """
    Render the graph under ``root`` as indented lines.

    Containers show their type (and length for sequences and mappings);
    leaves show their value. A reference to an object already rendered
    appears as ``-> <path>``.

    Example for the two-node cycle::

        o1: Object1
          o2: Object2
            o1 -> o1
    """
    lines: list[str] = []
    rendered: dict[int, str] = {}

    def visit(label: str, obj: Any, path: str, depth: int) -> None:
        indent = "  " * depth
        if obj is None:
            lines.append(f"{indent}{label}: None")
            return
        if id(obj) in rendered:
            lines.append(f"{indent}{label} -> {rendered[id(obj)]}")
            return
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            rendered[id(obj)] = path
            lines.append(f"{indent}{label}: {type(obj).__name__}")
            for f in dataclasses.fields(obj):
                visit(f.name, getattr(obj, f.name), f"{path}.{f.name}", depth + 1)
        elif isinstance(obj, (list, tuple, dict)):
            rendered[id(obj)] = path
            lines.append(f"{indent}{label}: {type(obj).__name__}[{len(obj)}]")
            if isinstance(obj, dict):
                for key, value in obj.items():
                    visit(f"[{key!r}]", value, f"{path}[{key!r}]", depth + 1)
            else:
                for i, item in enumerate(obj):
                    visit(f"[{i}]", item, f"{path}[{i}]", depth + 1)
        else:
            lines.append(f"{indent}{label}: {_leaf_repr(obj)}")

    visit(name, root, name, 0)
    return lines
