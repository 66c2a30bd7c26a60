"""Exceptions raised by the agent engine."""
from __future__ import annotations


class AgentError(Exception):
    """Base exception for all agent engine errors."""


class MissingOracleError(AgentError):
    """The current phase needs an oracle that was not provided."""

    def __init__(self, oracle: str, phase: object) -> None:
        self.oracle = oracle
        self.phase = phase
        super().__init__(f"Phase {phase!r} requires the '{oracle}' oracle, but none was configured")


class ResponseParseError(AgentError):
    """Model output does not follow the Thought/Action convention."""

    def __init__(self, message: str, raw: str = "") -> None:
        self.raw = raw
        super().__init__(message)


class ConfigError(AgentError):
    """A configuration file could not be read or is invalid."""
