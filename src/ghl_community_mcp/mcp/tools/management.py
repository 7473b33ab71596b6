"""Post management tools for MCP server.

Provides MCP tool implementations that create, edit, move, publish and
delete posts.
"""

from typing import Any, Dict

from mcp.types import CallToolResult

from ..facade import CommunityFacade
from ..schemas.moderation import UpdatePostChannelRequest, UpdatePostStatusRequest
from ..schemas.posts import (
    CreatePostRequest,
    DeletePostRequest,
    MarkPostsReadBulkRequest,
    UpdatePostRequest,
)
from .base import run_tool, tool_info


async def create_post(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool creating a post in a channel.

    Args:
        arguments: Tool arguments containing:
            - channelId: Target channel (required)
            - body: Post content, HTML allowed (required)
            - title: Post title (optional)
            - mediaUrls: Media to attach (optional)
            - locationId, groupId: Identifier overrides (optional)
        facade: CommunityFacade instance executing the request

    Returns:
        CallToolResult with the created post as pretty-printed JSON
    """
    return await run_tool(CreatePostRequest, arguments, facade)


async def update_post(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool editing the title, body or media of a post.

    Only the fields present in ``arguments`` are changed.
    """
    return await run_tool(UpdatePostRequest, arguments, facade)


async def update_post_channel(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool moving a post to another channel."""
    return await run_tool(UpdatePostChannelRequest, arguments, facade)


async def update_post_status(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    """MCP tool changing the live status of a post."""
    return await run_tool(UpdatePostStatusRequest, arguments, facade)


async def delete_post(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(DeletePostRequest, arguments, facade)


async def mark_posts_read_bulk(
    arguments: Dict[str, Any], facade: CommunityFacade
) -> CallToolResult:
    return await run_tool(MarkPostsReadBulkRequest, arguments, facade)


# Tool registration information
CREATE_POST_TOOL_INFO = tool_info(CreatePostRequest, create_post)
UPDATE_POST_TOOL_INFO = tool_info(UpdatePostRequest, update_post)
UPDATE_POST_CHANNEL_TOOL_INFO = tool_info(UpdatePostChannelRequest, update_post_channel)
UPDATE_POST_STATUS_TOOL_INFO = tool_info(UpdatePostStatusRequest, update_post_status)
DELETE_POST_TOOL_INFO = tool_info(DeletePostRequest, delete_post)
MARK_POSTS_READ_BULK_TOOL_INFO = tool_info(MarkPostsReadBulkRequest, mark_posts_read_bulk)


__all__ = [
    "create_post",
    "update_post",
    "update_post_channel",
    "update_post_status",
    "delete_post",
    "mark_posts_read_bulk",
    "CREATE_POST_TOOL_INFO",
    "UPDATE_POST_TOOL_INFO",
    "UPDATE_POST_CHANNEL_TOOL_INFO",
    "UPDATE_POST_STATUS_TOOL_INFO",
    "DELETE_POST_TOOL_INFO",
    "MARK_POSTS_READ_BULK_TOOL_INFO",
]
