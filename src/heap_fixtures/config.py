"""Configuration for snapshot capture."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ValidationError

DEFAULT_TOOL = "jcmd"
"""Diagnostic tool used when none is configured."""

DEFAULT_COMMAND = "GC.heap_dump"
"""Diagnostic command that requests a full heap snapshot."""

TOOL_ENV_VAR = "HEAP_FIXTURES_TOOL"
"""Environment variable overriding the diagnostic tool (shell-split)."""

COMMAND_ENV_VAR = "HEAP_FIXTURES_COMMAND"
"""Environment variable overriding the diagnostic command."""


@dataclass(frozen=True)
class CaptureConfig:
    """How the external diagnostic tool is invoked.

    The tool is invoked as ``<tool...> <pid> <command> <path>``.

    Attributes:
        tool: Command prefix, e.g. ``("jcmd",)`` or ``("python", "stub.py")``
        command: Diagnostic command name passed after the pid
    """

    tool: tuple[str, ...] = (DEFAULT_TOOL,)
    command: str = DEFAULT_COMMAND

    def __post_init__(self) -> None:
        if not self.tool or not all(self.tool):
            raise ValidationError("tool", self.tool, "Diagnostic tool cannot be empty")
        if not self.command:
            raise ValidationError("command", self.command, "Diagnostic command cannot be empty")

    @classmethod
    def from_tool_string(cls, tool: str, command: str = DEFAULT_COMMAND) -> CaptureConfig:
        """Create a config from a shell-style tool string."""
        return cls(tool=tuple(shlex.split(tool)), command=command)

    @classmethod
    def from_environment(cls) -> CaptureConfig:
        """Create CaptureConfig from environment variables."""
        return cls.from_tool_string(
            os.environ.get(TOOL_ENV_VAR, DEFAULT_TOOL),
            command=os.environ.get(COMMAND_ENV_VAR, DEFAULT_COMMAND),
        )

    def argv(self, pid: int, path: Path | str) -> list[str]:
        """Full argument vector for a snapshot of ``pid`` written to ``path``."""
        return [*self.tool, str(pid), self.command, str(path)]
