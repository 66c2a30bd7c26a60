"""
Tool-related exceptions. The environment oracle turns every one of these into
observation text, so they never reach the stepper.
"""
from react_agent.exceptions import AgentError


class ToolError(AgentError):
    """Base class for tool failures."""

    def __init__(self, message: str, *, tool_id: str):
        self.tool_id = tool_id
        self.message = message
        super().__init__(f"Tool '{tool_id}': {message}")


class ToolNotFoundError(ToolError):
    """Raised when the requested tool is not registered or not allowed."""

    def __init__(self, tool_id: str, available: list[str] | None = None):
        hint = f" (available: {', '.join(available)})" if available else ""
        super().__init__(f"unknown tool{hint}", tool_id=tool_id)


class ToolExecutionError(ToolError):
    """Raised when a tool fails to execute for any reason."""
