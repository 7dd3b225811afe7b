"""Pytest fixtures for heap-fixtures tests."""

import shlex
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

from heap_fixtures import CaptureConfig, RootRegistry, get_shape

# The stub stands in for the diagnostic tool. It records its arguments,
# prints what a real tool prints, appends one line to the destination
# (unless STUB_CREATE=0) and exits with STUB_EXIT.
STUB_SCRIPT = """\
import os
import sys

with open({calls!r}, "a") as calls:
    calls.write(" ".join(sys.argv[1:]) + "\\n")

pid, command, path = sys.argv[1:4]
print(pid + ":")
if os.environ.get("STUB_CREATE", "1") == "1":
    with open(path, "a") as dump:
        dump.write(pid + " " + command + "\\n")
    print("Heap dump file created")
sys.exit(int(os.environ.get("STUB_EXIT", "0")))
"""


@dataclass
class StubTool:
    """A fake diagnostic tool backed by a Python script."""

    script: Path
    calls: Path

    @property
    def argv_prefix(self) -> tuple[str, ...]:
        return (sys.executable, str(self.script))

    @property
    def config(self) -> CaptureConfig:
        return CaptureConfig(tool=self.argv_prefix)

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv_prefix)

    def recorded(self) -> list[list[str]]:
        """Argument lists of every invocation so far."""
        if not self.calls.exists():
            return []
        return [line.split(" ") for line in self.calls.read_text().splitlines()]


@pytest.fixture
def stub_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> StubTool:
    """Stub diagnostic tool that creates the dump file and exits 0."""
    monkeypatch.delenv("STUB_EXIT", raising=False)
    monkeypatch.delenv("STUB_CREATE", raising=False)
    tool_dir = tmp_path / "tool"
    tool_dir.mkdir()
    calls = tool_dir / "calls.log"
    script = tool_dir / "fake_jcmd.py"
    script.write_text(STUB_SCRIPT.format(calls=str(calls)))
    return StubTool(script=script, calls=calls)


@pytest.fixture
def dump_path(tmp_path: Path) -> Path:
    """Destination path for snapshots."""
    return tmp_path / "test.snapshot"


@pytest.fixture
def roots() -> RootRegistry:
    """Registry populated with the cycle shape."""
    registry = RootRegistry()
    registry.populate(get_shape("recursion"))
    return registry
