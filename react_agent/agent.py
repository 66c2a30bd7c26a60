"""
ReactAgent

Lightweight façade that wires together the runtime services (LLM client,
local tools, optional human channel) with the state-machine driver. The
agent owns the services; the driver only sees the oracles built from them.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from react_agent.driver import TransitionCallback, is_blocked, run
from react_agent.llm.base_llm import BaseLLM
from react_agent.models import AgentConfig, AgentState, Limits
from react_agent.oracles.base import Oracles, UserOracle
from react_agent.oracles.environment import DEFAULT_MAX_OBSERVATION_CHARS, ToolEnvOracle
from react_agent.oracles.model import DEFAULT_MAX_PARSE_RETRIES, ModelOracle
from react_agent.prompts import build_system_prompt, load_prompts
from react_agent.tools.base import ToolRegistry
from react_agent.tools.local import default_registry

from utils.logger import get_logger
logger = get_logger(__name__)


class AgentStatus(str, Enum):
    READY               = "READY"
    BUSY                = "BUSY"
    NEEDS_ATTENTION     = "NEEDS_ATTENTION"


class ReactAgent:
    """Top-level class that runs one think → act → observe loop per task."""

    def __init__(
        self,
        *,
        llm: BaseLLM,
        limits: Limits,
        tools: Optional[ToolRegistry] = None,
        workdir: str | Path = ".",
        user: Optional[UserOracle] = None,
        headless: bool = True,

        # Optionals
        max_parse_retries: int = DEFAULT_MAX_PARSE_RETRIES,
        max_observation_chars: int = DEFAULT_MAX_OBSERVATION_CHARS,
    ):
        """Initializes the agent.

        Args:
            llm: The language model client.
            limits: Step and cost budget applied to every task.
            tools: Registry of local tools; defaults to bash/read_file/write_file.
            workdir: Directory the tools operate in.
            user: Human channel, required when ``headless`` is False.
            headless: Forbid the agent from ever asking for input.

            max_parse_retries: Correction attempts for malformed model replies.
            max_observation_chars: Tool output beyond this length is truncated.
        """
        if not headless and user is None:
            raise ValueError("An interactive agent needs a user oracle")

        self.llm = llm
        self.limits = limits
        self.tools = tools if tools is not None else default_registry()
        self.workdir = Path(workdir)
        self.user = user
        self.headless = headless
        self.max_parse_retries = max_parse_retries
        self.max_observation_chars = max_observation_chars

        self._status: AgentStatus = AgentStatus.READY

    @property
    def status(self) -> AgentStatus:
        return self._status

    def build_config(self) -> AgentConfig:
        return AgentConfig(limits=self.limits, tool_names=frozenset(self.tools.names()), headless=self.headless)

    def build_oracles(self, task: str, config: AgentConfig) -> Oracles:
        allowed_tools = [self.tools.get(name) for name in config.tool_names]
        system_prompt = build_system_prompt(task, allowed_tools, interactive=not config.headless)
        return Oracles(
            llm=ModelOracle(self.llm, system_prompt, max_parse_retries=self.max_parse_retries),
            env=ToolEnvOracle(
                self.tools,
                self.workdir,
                allowed=config.tool_names,
                max_observation_chars=self.max_observation_chars,
            ),
            user=None if config.headless else self.user,
        )

    def solve(self, task: str, *, on_transition: Optional[TransitionCallback] = None) -> AgentState:
        """Run the agent loop for ``task`` and return the final state."""
        config = self.build_config()
        oracles = self.build_oracles(task, config)
        self._status = AgentStatus.BUSY
        logger.info("task_started", task=task, workdir=str(self.workdir), tools=sorted(config.tool_names))

        try:
            final_state = run(oracles, AgentState.initial(config), on_transition=on_transition)
        except Exception:
            self._status = AgentStatus.NEEDS_ATTENTION
            raise

        self._status = AgentStatus.NEEDS_ATTENTION if is_blocked(final_state) else AgentStatus.READY
        return final_state


def prompt_once(llm: BaseLLM, text: str) -> BaseLLM.LLMResponse:
    """Single completion of ``text`` with no agent loop."""
    return llm.prompt(text)


class ChatSession:
    """Plain multi-turn chat that keeps the message history between turns."""

    def __init__(self, llm: BaseLLM, *, system_prompt: Optional[str] = None) -> None:
        self.llm = llm
        if system_prompt is None:
            system_prompt = load_prompts("agent", required_keys=["chat"])["chat"].strip()
        self.messages: List[Dict[str, str]] = [{"role": "system", "content": system_prompt}]
        self.total_tokens = 0

    def send(self, text: str) -> str:
        self.messages.append({"role": "user", "content": text})
        reply = self.llm.completion(list(self.messages))
        self.total_tokens += reply.cost
        self.messages.append({"role": "assistant", "content": reply.text})
        return reply.text
