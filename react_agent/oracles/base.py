"""Oracle interfaces: the only places nondeterminism enters the engine."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from react_agent.models import Action, Trace


@dataclass(frozen=True)
class LlmResponse:
    """A structured model turn plus the marginal cost of producing it."""

    thought: str
    action: Action
    cost: int = 0

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")


@dataclass(frozen=True)
class LlmFailure:
    """The model oracle gave up on this turn; the run ends with an error."""

    message: str
    cost: int = 0

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")


LlmOutcome = Union[LlmResponse, LlmFailure]


class LlmOracle(ABC):
    """Produce the next thought/action pair from the history so far.

    Contract
    - Must not mutate ``trace``.
    - Parse problems are handled internally (retry, or return ``LlmFailure``).
    - Unrecoverable transport errors may be raised; they end the run.
    """

    @abstractmethod
    def respond(self, trace: Trace) -> LlmOutcome:
        ...


class EnvOracle(ABC):
    """Execute a tool invocation and describe the result.

    Contract
    - Never raises. Failures are encoded in the returned text, e.g. ``"Error: ..."``.
    """

    @abstractmethod
    def execute(self, tool_name: str, args: str) -> str:
        ...


class UserOracle(ABC):
    """Ask a human and return their reply. Only called for non-headless runs."""

    @abstractmethod
    def prompt(self, text: str) -> str:
        ...


@dataclass
class Oracles:
    """The capability set handed to the driver loop."""

    llm: LlmOracle
    env: EnvOracle
    user: Optional[UserOracle] = None
