"""Exceptions for heap-fixtures."""

from collections.abc import Sequence
from pathlib import Path

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class HeapFixturesError(Exception):
    """
    Base exception for all heap-fixtures errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


class ValidationError(HeapFixturesError):
    """
    Raised when a user-supplied value is invalid.

    Attributes:
        field: Name of the offending setting or argument
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class FixtureError(HeapFixturesError):
    """
    Base exception for fixture catalogue and root registry errors.
    """

    pass


class CaptureError(HeapFixturesError):
    """
    Base exception for snapshot capture errors.

    This includes failures to launch the external diagnostic tool and
    snapshots that never materialized on disk.
    """

    pass


# ---------------------------------------------------------------------------
# Fixture Exceptions
# ---------------------------------------------------------------------------


class UnknownShapeError(FixtureError):
    """Raised when a shape name is not in the catalogue."""

    def __init__(self, name: str, available: Sequence[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        msg = f"Unknown fixture shape: {name}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)


class RootRegistryError(FixtureError):
    """Raised when the root registry is misused or not ready for capture."""

    pass


# ---------------------------------------------------------------------------
# Capture Exceptions
# ---------------------------------------------------------------------------


class ToolLaunchError(CaptureError):
    """
    Raised when the external diagnostic tool cannot be started at all.

    No snapshot is possible without the tool, so this is fatal for the
    capture attempt.

    Attributes:
        argv: The argument vector that failed to launch
        cause: The underlying OS error
    """

    def __init__(self, argv: Sequence[str], cause: OSError) -> None:
        self.argv = list(argv)
        self.cause = cause
        tool = self.argv[0] if self.argv else "<empty>"
        super().__init__(f"Could not launch diagnostic tool {tool!r}: {cause}")


class SnapshotMissingError(CaptureError):
    """
    Raised when no snapshot file exists after the diagnostic tool finished.

    Attributes:
        path: Destination path that was expected to exist
        pid: Process identifier the snapshot was requested for
        exit_code: Exit status of the diagnostic tool
    """

    def __init__(self, path: Path, pid: int, exit_code: int) -> None:
        self.path = path
        self.pid = pid
        self.exit_code = exit_code
        super().__init__(f"dump file failed: PID={pid} (path={path}, exit code={exit_code})")
