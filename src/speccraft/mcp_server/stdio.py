"""Stdio MCP server.

Stdout carries protocol frames only; logging goes to stderr.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions

from speccraft import __version__
from speccraft.config import get_store
from speccraft.mcp_server.tools import TOOL_REGISTRY, ToolContext, execute_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "speccraft"


class SpecCraftMCPServer:
    """Exposes the tool registry over the MCP stdio transport."""

    def __init__(
        self,
        data_dir: str | None = None,
        config_path: str | Path | None = None,
    ) -> None:
        self.context = ToolContext(
            store=get_store(data_dir, config_path),
            data_dir=data_dir,
            config_path=config_path,
        )
        self.server: Server = Server(SERVER_NAME)
        self._register_tools()

    def _register_tools(self) -> None:
        # The SDK's call_tool decorator takes a single handler for every tool
        @self.server.call_tool()
        async def handle_all_tools(
            tool_name: str, arguments: dict[str, Any]
        ) -> list[types.TextContent]:
            text = await execute_tool(tool_name, arguments, self.context)
            return [types.TextContent(type="text", text=text)]

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [
                types.Tool(
                    name=tool.name,
                    description=tool.description,
                    inputSchema=tool.parameters,
                )
                for tool in TOOL_REGISTRY.values()
            ]

    async def run(self) -> None:
        init_options = InitializationOptions(
            server_name=SERVER_NAME,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )
        logger.info("Starting SpecCraft MCP server %s", __version__)
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, init_options)


def run_stdio(data_dir: str | None = None, config_path: str | Path | None = None) -> None:
    """Run the server until the client disconnects."""
    asyncio.run(SpecCraftMCPServer(data_dir, config_path).run())
