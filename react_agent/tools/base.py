"""Tool abstraction and the registry that dispatches tool calls by name."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List

from react_agent.tools.exceptions import ToolNotFoundError

from utils.logger import get_logger
logger = get_logger(__name__)


class ToolBase(ABC):
    """A named capability the agent can invoke with a raw argument string.

    Contract
    - ``run`` returns the observation text for a successful call.
    - Failures raise ``ToolExecutionError`` (or let the error propagate);
      the caller decides how to surface them.
    """

    def __init__(self, id: str, description: str = "", usage: str = "") -> None:
        self.id = id
        self.description = description
        self.usage = usage

    def get_summary(self) -> str:
        """One prompt line: ``id <usage>: description``."""
        head = f"{self.id} {self.usage}" if self.usage else self.id
        return f"{head}: {self.description}" if self.description else head

    @abstractmethod
    def run(self, args: str, workdir: Path) -> str:
        ...


class ToolRegistry:
    """Fixed set of tools keyed by id."""

    def __init__(self, tools: Iterable[ToolBase] = ()) -> None:
        self._tools: Dict[str, ToolBase] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: ToolBase) -> None:
        if tool.id in self._tools:
            raise ValueError(f"Tool '{tool.id}' is already registered")
        self._tools[tool.id] = tool

    def get(self, name: str) -> ToolBase:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name, self.names()) from None

    def names(self) -> List[str]:
        return sorted(self._tools)

    def execute(self, name: str, args: str, workdir: Path) -> str:
        tool = self.get(name)
        logger.debug("tool_dispatch", tool_id=tool.id, workdir=str(workdir))
        return tool.run(args, workdir)
