"""MCP tools for ghl_community_mcp.

One tool per community API operation, in the order they are advertised.
"""

from .management import (
    CREATE_POST_TOOL_INFO,
    DELETE_POST_TOOL_INFO,
    MARK_POSTS_READ_BULK_TOOL_INFO,
    UPDATE_POST_CHANNEL_TOOL_INFO,
    UPDATE_POST_STATUS_TOOL_INFO,
    UPDATE_POST_TOOL_INFO,
)
from .pins import (
    PIN_POST_TO_CHANNEL_TOOL_INFO,
    PIN_POST_TO_HOME_TOOL_INFO,
    TOGGLE_POST_COMMENTS_TOOL_INFO,
    UNPIN_POST_FROM_CHANNEL_TOOL_INFO,
    UNPIN_POST_FROM_HOME_TOOL_INFO,
)
from .posts import (
    GET_CHANNEL_PINNED_POSTS_TOOL_INFO,
    GET_CHANNEL_POSTS_TOOL_INFO,
    GET_HOME_PINNED_POSTS_TOOL_INFO,
    GET_POST_TOOL_INFO,
    GET_POSTS_BY_USER_TOOL_INFO,
    GET_PUBLIC_POSTS_TOOL_INFO,
    GET_USER_HOME_TIMELINE_TOOL_INFO,
)

# Available tools registry
AVAILABLE_TOOLS = {
    info["name"]: info
    for info in (
        GET_CHANNEL_POSTS_TOOL_INFO,
        GET_POST_TOOL_INFO,
        GET_PUBLIC_POSTS_TOOL_INFO,
        GET_POSTS_BY_USER_TOOL_INFO,
        GET_USER_HOME_TIMELINE_TOOL_INFO,
        GET_CHANNEL_PINNED_POSTS_TOOL_INFO,
        GET_HOME_PINNED_POSTS_TOOL_INFO,
        CREATE_POST_TOOL_INFO,
        UPDATE_POST_TOOL_INFO,
        UPDATE_POST_CHANNEL_TOOL_INFO,
        UPDATE_POST_STATUS_TOOL_INFO,
        PIN_POST_TO_CHANNEL_TOOL_INFO,
        PIN_POST_TO_HOME_TOOL_INFO,
        UNPIN_POST_FROM_CHANNEL_TOOL_INFO,
        UNPIN_POST_FROM_HOME_TOOL_INFO,
        TOGGLE_POST_COMMENTS_TOOL_INFO,
        DELETE_POST_TOOL_INFO,
        MARK_POSTS_READ_BULK_TOOL_INFO,
    )
}


__all__ = ["AVAILABLE_TOOLS"]
