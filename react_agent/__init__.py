"""Think → act → observe agent engine built around a deterministic state machine."""
from react_agent.driver import exit_code, is_blocked, run
from react_agent.models import (
    Acting,
    AgentConfig,
    AgentState,
    CostLimitReached,
    Done,
    Error,
    Limits,
    NeedsInput,
    RequestInput,
    Step,
    StepLimitReached,
    Submit,
    Submitted,
    Thinking,
    ToolCall,
)
from react_agent.oracles.base import EnvOracle, LlmFailure, LlmOracle, LlmResponse, Oracles, UserOracle
from react_agent.stepper import advance, step

__all__ = [
    "Acting",
    "AgentConfig",
    "AgentState",
    "CostLimitReached",
    "Done",
    "Error",
    "Limits",
    "NeedsInput",
    "RequestInput",
    "Step",
    "StepLimitReached",
    "Submit",
    "Submitted",
    "Thinking",
    "ToolCall",
    "EnvOracle",
    "LlmFailure",
    "LlmOracle",
    "LlmResponse",
    "Oracles",
    "UserOracle",
    "advance",
    "step",
    "run",
    "exit_code",
    "is_blocked",
]
