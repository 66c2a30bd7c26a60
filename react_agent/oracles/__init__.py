from react_agent.oracles.base import (
    EnvOracle,
    LlmFailure,
    LlmOracle,
    LlmOutcome,
    LlmResponse,
    Oracles,
    UserOracle,
)
from react_agent.oracles.scripted import ScriptedEnvOracle, ScriptedLlmOracle, ScriptedUserOracle

__all__ = [
    "EnvOracle",
    "LlmFailure",
    "LlmOracle",
    "LlmOutcome",
    "LlmResponse",
    "Oracles",
    "UserOracle",
    "ScriptedEnvOracle",
    "ScriptedLlmOracle",
    "ScriptedUserOracle",
]
