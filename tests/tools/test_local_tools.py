import subprocess
import sys

import pytest

from react_agent.tools import (
    BashTool,
    ReadFileTool,
    ToolExecutionError,
    ToolNotFoundError,
    ToolRegistry,
    WriteFileTool,
    default_registry,
)


def _completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args="cmd", returncode=returncode, stdout=stdout, stderr=stderr)


def test_default_registry_exposes_fixed_tools():
    assert default_registry().names() == ["bash", "read_file", "write_file"]


def test_tool_summary_includes_usage_and_description():
    assert WriteFileTool().get_summary() == "write_file <path> <content>: write content to a file (content may span lines)"


def test_registry_rejects_duplicates_and_unknown_names():
    registry = ToolRegistry([ReadFileTool()])
    with pytest.raises(ValueError):
        registry.register(ReadFileTool())
    with pytest.raises(ToolNotFoundError):
        registry.get("bash")


def test_bash_passes_command_and_workdir_to_runner(tmp_path):
    calls = {}

    def runner(args, **kwargs):
        calls["args"] = args
        calls.update(kwargs)
        return _completed(stdout="hi\n")

    tool = BashTool(timeout=5, runner=runner)

    assert tool.run("echo hi", tmp_path) == "hi\n"
    assert calls["args"] == "echo hi"
    assert calls["shell"] is True
    assert calls["cwd"] == str(tmp_path)
    assert calls["timeout"] == 5


def test_bash_reports_stderr_and_nonzero_exit(tmp_path):
    tool = BashTool(runner=lambda args, **kw: _completed(stdout="", stderr="no such file\n", returncode=2))
    observation = tool.run("cat missing", tmp_path)
    assert "no such file" in observation
    assert observation.endswith("Exit code: 2")


def test_bash_timeout_is_a_tool_error(tmp_path):
    def runner(args, **kwargs):
        raise subprocess.TimeoutExpired(cmd=args, timeout=kwargs["timeout"])

    with pytest.raises(ToolExecutionError, match="timed out"):
        BashTool(timeout=1, runner=runner).run("sleep 10", tmp_path)


def test_bash_requires_a_command(tmp_path):
    with pytest.raises(ToolExecutionError):
        BashTool().run("   ", tmp_path)


@pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")
def test_bash_runs_real_shell(tmp_path):
    (tmp_path / "marker.txt").write_text("x")
    assert "marker.txt" in BashTool().run("ls", tmp_path)


def test_read_file_returns_contents(tmp_path):
    (tmp_path / "notes.txt").write_text("hello\nworld\n", encoding="utf-8")
    assert ReadFileTool().run("notes.txt", tmp_path) == "hello\nworld\n"


def test_read_file_missing_is_tool_error(tmp_path):
    with pytest.raises(ToolExecutionError, match="cannot read missing.txt"):
        ReadFileTool().run("missing.txt", tmp_path)


def test_write_file_creates_parents_and_reports_size(tmp_path):
    result = WriteFileTool().run("src/app.py print('hi')\nprint('bye')", tmp_path)

    assert result == "Wrote 24 bytes to src/app.py"
    assert (tmp_path / "src" / "app.py").read_text(encoding="utf-8") == "print('hi')\nprint('bye')"


def test_write_file_with_only_path_writes_empty_file(tmp_path):
    assert WriteFileTool().run("empty.txt", tmp_path) == "Wrote 0 bytes to empty.txt"
    assert (tmp_path / "empty.txt").read_text() == ""


def test_write_file_without_args_is_tool_error(tmp_path):
    with pytest.raises(ToolExecutionError):
        WriteFileTool().run("", tmp_path)
