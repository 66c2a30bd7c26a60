"""Pure, in-memory oracles for tests and offline simulation."""
from __future__ import annotations

from typing import Callable, Iterable, List, Mapping, Tuple, Union

from react_agent.models import Trace
from react_agent.oracles.base import EnvOracle, LlmFailure, LlmOracle, LlmOutcome, UserOracle


class ScriptedLlmOracle(LlmOracle):
    """Replays a fixed list of responses; records every trace it was shown.

    Once the script is exhausted it keeps answering with ``fallback`` (if
    given) or returns an ``LlmFailure``.
    """

    def __init__(self, responses: Iterable[LlmOutcome], *, fallback: LlmOutcome | None = None) -> None:
        self._responses: List[LlmOutcome] = list(responses)
        self.fallback = fallback
        self.calls: List[Trace] = []

    def respond(self, trace: Trace) -> LlmOutcome:
        self.calls.append(trace)
        if self._responses:
            return self._responses.pop(0)
        if self.fallback is not None:
            return self.fallback
        return LlmFailure("script exhausted")


class ScriptedEnvOracle(EnvOracle):
    """Answers tool calls from a mapping keyed by tool name, or a handler."""

    def __init__(
        self,
        observations: Union[Mapping[str, str], Callable[[str, str], str], None] = None,
        *,
        default: str = "",
    ) -> None:
        self._observations = observations if observations is not None else {}
        self.default = default
        self.calls: List[Tuple[str, str]] = []

    def execute(self, tool_name: str, args: str) -> str:
        self.calls.append((tool_name, args))
        if callable(self._observations):
            return self._observations(tool_name, args)
        return self._observations.get(tool_name, self.default)


class ScriptedUserOracle(UserOracle):
    def __init__(self, replies: Iterable[str] = (), *, default: str = "") -> None:
        self._replies: List[str] = list(replies)
        self.default = default
        self.prompts: List[str] = []

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if self._replies:
            return self._replies.pop(0)
        return self.default


__all__ = ["ScriptedLlmOracle", "ScriptedEnvOracle", "ScriptedUserOracle"]
