"""Tests for capture configuration."""

import pytest

from heap_fixtures.config import CaptureConfig
from heap_fixtures.exceptions import ValidationError


class TestCaptureConfig:
    """Test CaptureConfig."""

    def test_defaults(self) -> None:
        config = CaptureConfig()
        assert config.tool == ("jcmd",)
        assert config.command == "GC.heap_dump"

    def test_argv(self) -> None:
        """The tool is invoked as <tool> <pid> <command> <path>."""
        argv = CaptureConfig().argv(4242, "/tmp/test.snapshot")
        assert argv == ["jcmd", "4242", "GC.heap_dump", "/tmp/test.snapshot"]

    def test_multi_word_tool(self) -> None:
        config = CaptureConfig.from_tool_string("'/opt/jdk 21/bin/jcmd' -J-Xmx64m")
        assert config.tool == ("/opt/jdk 21/bin/jcmd", "-J-Xmx64m")
        assert config.argv(1, "x")[:2] == ["/opt/jdk 21/bin/jcmd", "-J-Xmx64m"]

    def test_empty_tool_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CaptureConfig.from_tool_string("   ")
        assert exc_info.value.field == "tool"

    def test_empty_command_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CaptureConfig(command="")
        assert exc_info.value.field == "command"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEAP_FIXTURES_TOOL", "fake-jcmd --quiet")
        monkeypatch.setenv("HEAP_FIXTURES_COMMAND", "GC.class_histogram")
        config = CaptureConfig.from_environment()
        assert config.tool == ("fake-jcmd", "--quiet")
        assert config.command == "GC.class_histogram"

    def test_from_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HEAP_FIXTURES_TOOL", raising=False)
        monkeypatch.delenv("HEAP_FIXTURES_COMMAND", raising=False)
        assert CaptureConfig.from_environment() == CaptureConfig()
