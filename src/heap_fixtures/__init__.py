"""
heap-fixtures: object graph fixtures for heap dump analyzer tests.

This library provides:
- A catalogue of small, deliberately-shaped object graphs (primitives,
  arrays, strings, text buffers, mappings, nested objects, a reference cycle)
- An explicit root registry that keeps one shape reachable for the run
- A capture driver that asks an external diagnostic tool to write a heap
  snapshot of the current process and checks the file appeared

Example:
    from heap_fixtures import RootRegistry, capture, get_shape

    roots = RootRegistry()
    roots.populate(get_shape("hashmap"))
    outcome = capture("/tmp/hashmap.hprof", roots)
    outcome.raise_for_missing()
"""

from .capture import CaptureOutcome, capture
from .config import CaptureConfig
from .exceptions import (
    CaptureError,
    FixtureError,
    HeapFixturesError,
    RootRegistryError,
    SnapshotMissingError,
    ToolLaunchError,
    UnknownShapeError,
    ValidationError,
)
from .roots import RootRegistry
from .shapes import SHAPES, Shape, get_shape

__all__ = [
    # Catalogue
    "SHAPES",
    "Shape",
    "get_shape",
    "RootRegistry",
    # Capture
    "CaptureConfig",
    "CaptureOutcome",
    "capture",
    # Exceptions
    "HeapFixturesError",
    "ValidationError",
    "FixtureError",
    "UnknownShapeError",
    "RootRegistryError",
    "CaptureError",
    "ToolLaunchError",
    "SnapshotMissingError",
]
