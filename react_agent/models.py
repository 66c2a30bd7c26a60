"""Data models for the agent state machine.

Every value here is immutable. Closed variants (``Action``, ``TerminationReason``
and ``Phase``) are unions of frozen dataclasses so callers can ``match`` on them.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Tuple, Union

__all__ = [
    "ToolCall",
    "Submit",
    "RequestInput",
    "Action",
    "Step",
    "Trace",
    "Limits",
    "AgentConfig",
    "Submitted",
    "StepLimitReached",
    "CostLimitReached",
    "Error",
    "TerminationReason",
    "Thinking",
    "Acting",
    "NeedsInput",
    "Done",
    "Phase",
    "AgentState",
]


# ----------------------------- Actions ---------------------------------


@dataclass(frozen=True)
class ToolCall:
    """Invoke a named tool with a raw argument string."""

    name: str
    args: str


@dataclass(frozen=True)
class Submit:
    """Finish the run with a final answer."""

    output: str


@dataclass(frozen=True)
class RequestInput:
    """Ask the human operator a question."""

    prompt: str


Action = Union[ToolCall, Submit, RequestInput]


@dataclass(frozen=True)
class Step:
    """One completed think → act → observe iteration."""

    thought: str
    action: Action
    observation: str


Trace = Tuple[Step, ...]


# ----------------------------- Configuration ---------------------------


@dataclass(frozen=True)
class Limits:
    max_steps: int
    max_cost: int

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")
        if self.max_cost < 0:
            raise ValueError(f"max_cost must be >= 0, got {self.max_cost}")


@dataclass(frozen=True)
class AgentConfig:
    """Run configuration. ``headless=True`` forbids ever asking a human."""

    limits: Limits
    tool_names: FrozenSet[str] = field(default_factory=frozenset)
    headless: bool = True

    def __post_init__(self) -> None:
        # accept any iterable of names but always store a frozenset
        if not isinstance(self.tool_names, frozenset):
            object.__setattr__(self, "tool_names", frozenset(self.tool_names))


# ----------------------------- Termination -----------------------------


@dataclass(frozen=True)
class Submitted:
    output: str


@dataclass(frozen=True)
class StepLimitReached:
    pass


@dataclass(frozen=True)
class CostLimitReached:
    pass


@dataclass(frozen=True)
class Error:
    message: str


TerminationReason = Union[Submitted, StepLimitReached, CostLimitReached, Error]


# ----------------------------- Phases ----------------------------------


@dataclass(frozen=True)
class Thinking:
    """Awaiting a model response."""


@dataclass(frozen=True)
class Acting:
    """Holding a thought/action pair that has not been executed yet."""

    thought: str
    action: Action


@dataclass(frozen=True)
class NeedsInput:
    """Awaiting a human reply. Never reachable for headless runs."""

    prompt: str


@dataclass(frozen=True)
class Done:
    """Terminal phase."""

    reason: TerminationReason


Phase = Union[Thinking, Acting, NeedsInput, Done]


# ----------------------------- State -----------------------------------


@dataclass(frozen=True)
class AgentState:
    """The single unit of truth threaded through every transition."""

    phase: Phase
    trace: Trace
    step_count: int
    cost: int
    config: AgentConfig

    def __post_init__(self) -> None:
        if self.step_count < 0 or self.cost < 0:
            raise ValueError("step_count and cost must be non-negative")
        if not isinstance(self.trace, tuple):
            object.__setattr__(self, "trace", tuple(self.trace))

    @classmethod
    def initial(cls, config: AgentConfig) -> AgentState:
        return cls(phase=Thinking(), trace=(), step_count=0, cost=0, config=config)

    @property
    def is_done(self) -> bool:
        return isinstance(self.phase, Done)

    def evolve(self, **changes) -> AgentState:
        """Return a copy with ``changes`` applied; ``config`` can never change."""
        if "config" in changes:
            raise TypeError("AgentState.config is fixed for the lifetime of a run")
        return replace(self, **changes)
