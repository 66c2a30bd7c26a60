"""Environment oracle backed by the local tool registry."""
from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, Optional

from react_agent.oracles.base import EnvOracle
from react_agent.tools.base import ToolRegistry
from react_agent.tools.exceptions import ToolError, ToolNotFoundError

from utils.logger import get_logger
logger = get_logger(__name__)

DEFAULT_MAX_OBSERVATION_CHARS = 20_000


class ToolEnvOracle(EnvOracle):
    """Executes tool calls in ``workdir`` and reports every failure as text.

    ``allowed`` restricts which registered tools may run (normally
    ``AgentConfig.tool_names``); ``None`` allows all of them.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        workdir: str | Path,
        *,
        allowed: Optional[AbstractSet[str]] = None,
        max_observation_chars: int = DEFAULT_MAX_OBSERVATION_CHARS,
    ) -> None:
        self.registry = registry
        self.workdir = Path(workdir)
        self.allowed = allowed
        self.max_observation_chars = max_observation_chars

    def execute(self, tool_name: str, args: str) -> str:
        try:
            if self.allowed is not None and tool_name not in self.allowed:
                raise ToolNotFoundError(tool_name, sorted(self.allowed))
            observation = self.registry.execute(tool_name, args, self.workdir)
        except ToolError as exc:
            logger.warning("tool_failed", tool_id=tool_name, error=exc.message)
            return f"Error: {exc}"
        except Exception as exc:
            logger.error("tool_unexpected_error", tool_id=tool_name, error=str(exc), exc_info=True)
            return f"Error: {type(exc).__name__}: {exc}"

        logger.info("tool_executed", tool_id=tool_name, observation_chars=len(observation))
        return self._truncate(observation)

    def _truncate(self, observation: str) -> str:
        limit = self.max_observation_chars
        if limit <= 0 or len(observation) <= limit:
            return observation
        dropped = len(observation) - limit
        return observation[:limit] + f"\n... [truncated {dropped} characters]"
