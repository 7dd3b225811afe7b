"""Snapshot capture driver.

Capture is a two-phase sequence with no rollback. Clearing a stale file is
best effort; requesting the snapshot, waiting for the tool and checking that
the file now exists is the authoritative result. Snapshot contents are never
inspected.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import CaptureConfig
from .exceptions import SnapshotMissingError, ToolLaunchError
from .roots import RootRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaptureOutcome:
    """Result of one capture attempt.

    The tool's exit status and the existence of the snapshot file are kept
    apart: a tool may exit non-zero yet leave a usable file, or the reverse.

    Attributes:
        path: Destination path of the snapshot
        pid: Process identifier the snapshot was requested for
        exit_code: Exit status of the diagnostic tool
        removed_stale: Whether a pre-existing file was deleted first
        generated: Whether a regular file exists at ``path`` afterwards
        shape: Name of the fixture shape held by the registry, if known
        tool_output: What the tool printed to stdout
    """

    path: Path
    pid: int
    exit_code: int
    removed_stale: bool
    generated: bool
    shape: str | None = None
    tool_output: str = ""

    def raise_for_missing(self) -> None:
        """
        Raise if the snapshot file was not generated.

        Raises:
            SnapshotMissingError: If ``generated`` is False
        """
        if not self.generated:
            raise SnapshotMissingError(self.path, self.pid, self.exit_code)

    def as_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "path": str(self.path),
            "pid": self.pid,
            "exit_code": self.exit_code,
            "removed_stale": self.removed_stale,
            "generated": self.generated,
            "shape": self.shape,
            "tool_output": self.tool_output,
        }


def remove_stale(path: Path) -> bool:
    """
    Delete a file left at ``path`` by an earlier run.

    Failures are ignored; the snapshot step overwrites or fails on its own.

    Returns:
        True if a file was removed
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.debug("Could not remove stale dump file %s: %s", path, e)
        return False
    logger.info("dump file removed: %s", path)
    return True


def request_snapshot(argv: list[str]) -> subprocess.CompletedProcess[str]:
    """
    Run the diagnostic tool and block until it exits.

    There is no timeout; an unresponsive tool hangs the caller. The tool's
    output is captured so it never mixes with this process's stdout.

    Returns:
        The completed process with exit status, stdout and stderr

    Raises:
        ToolLaunchError: If the tool cannot be started
    """
    logger.debug("Running diagnostic tool: %s", argv)
    try:
        completed = subprocess.run(argv, check=False, capture_output=True, text=True)
    except OSError as e:
        raise ToolLaunchError(argv, e) from e
    if completed.stdout:
        logger.debug("Diagnostic tool stdout: %s", completed.stdout.rstrip())
    if completed.stderr:
        logger.debug("Diagnostic tool stderr: %s", completed.stderr.rstrip())
    return completed


def capture(
    path: Path | str,
    roots: RootRegistry,
    config: CaptureConfig | None = None,
) -> CaptureOutcome:
    """
    Snapshot this process's heap to ``path``.

    ``roots`` must already hold the fixture graph; it stays referenced for
    the whole call, so the graph is live while the tool runs.

    Args:
        path: Destination file for the snapshot
        roots: Populated root registry
        config: Tool invocation settings (default: from environment)

    Returns:
        CaptureOutcome with both the exit status and the existence check

    Raises:
        RootRegistryError: If ``roots`` is empty
        ToolLaunchError: If the diagnostic tool cannot be started
    """
    roots.check()
    config = config or CaptureConfig.from_environment()
    path = Path(path)

    removed = remove_stale(path)
    pid = os.getpid()
    completed = request_snapshot(config.argv(pid, path))
    exit_code = completed.returncode
    logger.info("Exit code: %d", exit_code)

    generated = path.is_file()
    if generated:
        logger.info("dump file generated: %s", path)
    else:
        logger.info("dump file failed: PID=%d", pid)

    return CaptureOutcome(
        path=path,
        pid=pid,
        exit_code=exit_code,
        removed_stale=removed,
        generated=generated,
        shape=roots.shape_name,
        tool_output=completed.stdout,
    )
