"""Built-in local tools: ``bash``, ``read_file`` and ``write_file``."""
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from react_agent.tools.base import ToolBase, ToolRegistry
from react_agent.tools.exceptions import ToolExecutionError

from utils.logger import get_logger
logger = get_logger(__name__)

DEFAULT_BASH_TIMEOUT = 60.0


class _SubprocessRunner(Protocol):
    """Callable protocol mirroring `subprocess.run` for shell commands."""

    def __call__(
        self,
        args: str,
        *,
        shell: bool,
        cwd: str,
        capture_output: bool,
        text: bool,
        timeout: float | None = None,
    ) -> subprocess.CompletedProcess[str]:
        ...


class BashTool(ToolBase):
    """Run a shell command; a non-zero exit status is reported in the output."""

    TOOL_ID = "bash"

    def __init__(self, *, timeout: float = DEFAULT_BASH_TIMEOUT, runner: _SubprocessRunner = subprocess.run) -> None:
        super().__init__(self.TOOL_ID, "run a shell command in the working directory", "<command>")
        self.timeout = timeout
        self.runner = runner

    def run(self, args: str, workdir: Path) -> str:
        command = args.strip()
        if not command:
            raise ToolExecutionError("no command given", tool_id=self.id)
        try:
            completed = self.runner(
                command,
                shell=True,
                cwd=str(workdir),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise ToolExecutionError(f"command timed out after {self.timeout:g}s", tool_id=self.id) from None

        output = completed.stdout or ""
        if completed.stderr:
            output += completed.stderr
        if completed.returncode != 0:
            logger.info("bash_nonzero_exit", returncode=completed.returncode)
            output += f"\nExit code: {completed.returncode}"
        return output


class ReadFileTool(ToolBase):
    TOOL_ID = "read_file"

    def __init__(self) -> None:
        super().__init__(self.TOOL_ID, "return the contents of a file", "<path>")

    def run(self, args: str, workdir: Path) -> str:
        relative = args.strip()
        if not relative:
            raise ToolExecutionError("no path given", tool_id=self.id)
        path = workdir / relative
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ToolExecutionError(f"cannot read {relative}: {exc.strerror or exc}", tool_id=self.id) from exc


class WriteFileTool(ToolBase):
    """``<path> <content>``: the first whitespace-delimited token is the path."""

    TOOL_ID = "write_file"

    def __init__(self) -> None:
        super().__init__(self.TOOL_ID, "write content to a file (content may span lines)", "<path> <content>")

    @staticmethod
    def split_args(args: str) -> tuple[str, str]:
        parts = args.lstrip().split(None, 1)
        if not parts:
            raise ValueError("expected '<path> <content>'")
        path = parts[0]
        content = parts[1] if len(parts) > 1 else ""
        return path, content

    def run(self, args: str, workdir: Path) -> str:
        try:
            relative, content = self.split_args(args)
        except ValueError as exc:
            raise ToolExecutionError(str(exc), tool_id=self.id) from None
        path = workdir / relative
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ToolExecutionError(f"cannot write {relative}: {exc.strerror or exc}", tool_id=self.id) from exc
        return f"Wrote {len(content.encode('utf-8'))} bytes to {relative}"


def default_registry(*, bash_timeout: float = DEFAULT_BASH_TIMEOUT) -> ToolRegistry:
    return ToolRegistry([BashTool(timeout=bash_timeout), ReadFileTool(), WriteFileTool()])
