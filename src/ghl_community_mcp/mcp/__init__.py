"""MCP integration module for ghl_community_mcp.

Provides the Model Context Protocol server and the community post, pin and
channel tools it serves.
"""

from .facade import CommunityFacade
from .server import CommunityMCPServer
from .server_init import create_server, register_all_tools

__all__ = [
    "CommunityFacade",
    "CommunityMCPServer",
    "create_server",
    "register_all_tools",
]
