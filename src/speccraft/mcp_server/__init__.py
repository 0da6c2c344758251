"""MCP server for SpecCraft."""

from speccraft.mcp_server.stdio import SpecCraftMCPServer, run_stdio
from speccraft.mcp_server.tools import (
    TOOL_DEFINITIONS,
    TOOL_REGISTRY,
    Tool,
    ToolContext,
    ToolExecutionError,
    execute_tool,
)

__all__ = [
    "SpecCraftMCPServer",
    "run_stdio",
    "TOOL_DEFINITIONS",
    "TOOL_REGISTRY",
    "Tool",
    "ToolContext",
    "ToolExecutionError",
    "execute_tool",
]
