"""MCP server initialization for ghl_community_mcp.

This module registers all available MCP tools with the server at startup.
"""

from typing import Any, Dict

from mcp.types import CallToolResult

from ..utils.config_types import Settings
from .facade import CommunityFacade, Gateway
from .server import CommunityMCPServer, ToolCallable
from .tools import AVAILABLE_TOOLS
from .tools.base import ToolHandler


def register_all_tools(server: CommunityMCPServer, facade: CommunityFacade) -> None:
    """
    Register all available MCP tools with the server.

    Args:
        server: CommunityMCPServer instance
        facade: CommunityFacade instance
    """

    # Wrapper to inject facade into tool handler
    def make_tool_handler(tool_func: ToolHandler) -> ToolCallable:
        async def handler(arguments: Dict[str, Any]) -> CallToolResult:
            return await tool_func(arguments, facade)

        return handler

    for tool_info in AVAILABLE_TOOLS.values():
        server.register_tool(
            name=tool_info["name"],
            description=tool_info["description"],
            handler=make_tool_handler(tool_info["handler"]),
            input_schema=tool_info.get("input_schema"),
        )


def create_server(settings: Settings, gateway: Gateway) -> CommunityMCPServer:
    """Build a server with every tool bound to a facade over ``gateway``."""
    server = CommunityMCPServer(settings)
    register_all_tools(server, CommunityFacade(settings, gateway))
    return server
