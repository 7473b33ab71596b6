"""Pinning and comment tools for MCP server."""

from typing import Any, Dict

from mcp.types import CallToolResult

from ..facade import CommunityFacade
from ..schemas.moderation import (
    PinPostToChannelRequest,
    PinPostToHomeRequest,
    TogglePostCommentsRequest,
    UnpinPostFromChannelRequest,
    UnpinPostFromHomeRequest,
)
from .base import run_tool, tool_info


async def pin_post_to_channel(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(PinPostToChannelRequest, arguments, facade)


async def pin_post_to_home(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(PinPostToHomeRequest, arguments, facade)


async def unpin_post_from_channel(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(UnpinPostFromChannelRequest, arguments, facade)


async def unpin_post_from_home(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(UnpinPostFromHomeRequest, arguments, facade)


async def toggle_post_comments(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool turning comments on (``enable: true``) or off for a post."""
    return await run_tool(TogglePostCommentsRequest, arguments, facade)


# Tool registration information
PIN_POST_TO_CHANNEL_TOOL_INFO = tool_info(PinPostToChannelRequest, pin_post_to_channel)
PIN_POST_TO_HOME_TOOL_INFO = tool_info(PinPostToHomeRequest, pin_post_to_home)
UNPIN_POST_FROM_CHANNEL_TOOL_INFO = tool_info(
    UnpinPostFromChannelRequest, unpin_post_from_channel
)
UNPIN_POST_FROM_HOME_TOOL_INFO = tool_info(UnpinPostFromHomeRequest, unpin_post_from_home)
TOGGLE_POST_COMMENTS_TOOL_INFO = tool_info(TogglePostCommentsRequest, toggle_post_comments)


__all__ = [
    "pin_post_to_channel",
    "pin_post_to_home",
    "unpin_post_from_channel",
    "unpin_post_from_home",
    "toggle_post_comments",
    "PIN_POST_TO_CHANNEL_TOOL_INFO",
    "PIN_POST_TO_HOME_TOOL_INFO",
    "UNPIN_POST_FROM_CHANNEL_TOOL_INFO",
    "UNPIN_POST_FROM_HOME_TOOL_INFO",
    "TOGGLE_POST_COMMENTS_TOOL_INFO",
]
