from react_agent.tools.base import ToolBase, ToolRegistry
from react_agent.tools.exceptions import ToolError, ToolExecutionError, ToolNotFoundError
from react_agent.tools.local import BashTool, ReadFileTool, WriteFileTool, default_registry

__all__ = [
    "ToolBase",
    "ToolRegistry",
    "ToolError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "BashTool",
    "ReadFileTool",
    "WriteFileTool",
    "default_registry",
]
