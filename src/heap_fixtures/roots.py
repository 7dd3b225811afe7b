"""Explicit root registry keeping fixture graphs reachable."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from .exceptions import RootRegistryError
from .graph import walk
from .shapes import Shape

logger = logging.getLogger(__name__)


class RootRegistry:
    """
    Owned collection of named root handles.

    A registry is populated once at startup with a single fixture shape and
    held for the rest of the run; it is passed explicitly to the capture
    step so the graph is guaranteed live when the snapshot is requested.

    Example:
        roots = RootRegistry()
        roots.populate(get_shape("recursion"))
        outcome = capture("/tmp/recursion.hprof", roots)
    """

    def __init__(self) -> None:
        self._roots: dict[str, Any] = {}
        self._shape: Shape | None = None

    @property
    def shape_name(self) -> str | None:
        """Name of the shape this registry was populated with, if any."""
        return self._shape.name if self._shape is not None else None

    def populate(self, shape: Shape) -> Any:
        """
        Build ``shape`` and hold its root.

        Returns:
            The constructed root object

        Raises:
            RootRegistryError: If a shape was already populated
        """
        if self._shape is not None:
            raise RootRegistryError(
                f"Registry already holds shape {self._shape.name!r}; "
                f"capture one shape per run (got {shape.name!r})"
            )
        root = shape.build()
        self.add(shape.root_name, root)
        self._shape = shape
        logger.debug("Populated shape %s as root %s", shape.name, shape.root_name)
        return root

    def add(self, name: str, root: Any) -> None:
        """
        Hold ``root`` under ``name``.

        Raises:
            RootRegistryError: If ``root`` is None or ``name`` is taken
        """
        if root is None:
            raise RootRegistryError(f"Root {name!r} cannot be None")
        if name in self._roots:
            raise RootRegistryError(f"Root {name!r} is already registered")
        self._roots[name] = root

    def get(self, name: str) -> Any:
        try:
            return self._roots[name]
        except KeyError:
            raise RootRegistryError(f"No root named {name!r}") from None

    def names(self) -> list[str]:
        return list(self._roots)

    def check(self) -> None:
        """
        Verify the registry is ready for capture.

        ``add`` already rejects None roots, so only emptiness is left to check.

        Raises:
            RootRegistryError: If the registry is empty
        """
        if not self._roots:
            raise RootRegistryError("No roots registered; build a fixture before capture")

    def reachable(self) -> list[Any]:
        """Every distinct object reachable from the registered roots."""
        seen: set[int] = set()
        objects: list[Any] = []
        for name, root in self._roots.items():
            for _, obj in walk(root, name):
                if id(obj) not in seen:
                    seen.add(id(obj))
                    objects.append(obj)
        return objects

    def __len__(self) -> int:
        return len(self._roots)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._roots.items())

    def __contains__(self, name: object) -> bool:
        return name in self._roots
