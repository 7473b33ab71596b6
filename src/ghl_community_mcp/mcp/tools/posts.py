"""Read-only post tools for MCP server.

Provides MCP tool implementations for listing and fetching community posts.
"""

from typing import Any, Dict

from mcp.types import CallToolResult

from ..facade import CommunityFacade
from ..schemas.posts import (
    GetChannelPinnedPostsRequest,
    GetChannelPostsRequest,
    GetHomePinnedPostsRequest,
    GetPostRequest,
    GetPostsByUserRequest,
    GetPublicPostsRequest,
    GetUserHomeTimelineRequest,
)
from .base import run_tool, tool_info


async def get_channel_posts(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool listing the posts of one channel.

    Args:
        arguments: Tool arguments containing:
            - channelId: Channel to read (required)
            - limit, offset: Pagination (optional)
            - locationId, groupId: Identifier overrides (optional)
        facade: CommunityFacade instance executing the request

    Returns:
        CallToolResult with the API response as pretty-printed JSON
    """
    return await run_tool(GetChannelPostsRequest, arguments, facade)


async def get_post(arguments: Dict[str, Any], facade: CommunityFacade) -> CallToolResult:
    """MCP tool fetching a single post by ID."""
    return await run_tool(GetPostRequest, arguments, facade)


async def get_public_posts(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool listing the public posts of a group."""
    return await run_tool(GetPublicPostsRequest, arguments, facade)


async def get_posts_by_user(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool listing group posts, optionally filtered by author."""
    return await run_tool(GetPostsByUserRequest, arguments, facade)


async def get_user_home_timeline(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool returning the home timeline of one user."""
    return await run_tool(GetUserHomeTimelineRequest, arguments, facade)


async def get_channel_pinned_posts(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(GetChannelPinnedPostsRequest, arguments, facade)


async def get_home_pinned_posts(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(GetHomePinnedPostsRequest, arguments, facade)


# Tool registration information
GET_CHANNEL_POSTS_TOOL_INFO = tool_info(GetChannelPostsRequest, get_channel_posts)
GET_POST_TOOL_INFO = tool_info(GetPostRequest, get_post)
GET_PUBLIC_POSTS_TOOL_INFO = tool_info(GetPublicPostsRequest, get_public_posts)
GET_POSTS_BY_USER_TOOL_INFO = tool_info(GetPostsByUserRequest, get_posts_by_user)
GET_USER_HOME_TIMELINE_TOOL_INFO = tool_info(
    GetUserHomeTimelineRequest, get_user_home_timeline
)
GET_CHANNEL_PINNED_POSTS_TOOL_INFO = tool_info(
    GetChannelPinnedPostsRequest, get_channel_pinned_posts
)
GET_HOME_PINNED_POSTS_TOOL_INFO = tool_info(
    GetHomePinnedPostsRequest, get_home_pinned_posts
)


__all__ = [
    "get_channel_posts",
    "get_post",
    "get_public_posts",
    "get_posts_by_user",
    "get_user_home_timeline",
    "get_channel_pinned_posts",
    "get_home_pinned_posts",
    "GET_CHANNEL_POSTS_TOOL_INFO",
    "GET_POST_TOOL_INFO",
    "GET_PUBLIC_POSTS_TOOL_INFO",
    "GET_POSTS_BY_USER_TOOL_INFO",
    "GET_USER_HOME_TIMELINE_TOOL_INFO",
    "GET_CHANNEL_PINNED_POSTS_TOOL_INFO",
    "GET_HOME_PINNED_POSTS_TOOL_INFO",
]
