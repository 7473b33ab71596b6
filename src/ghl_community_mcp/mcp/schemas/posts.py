"""Schema definitions for the post reading and writing tools."""

from dataclasses import dataclass
from typing import List, Optional

from . import CommunityRequest, arg

LIMIT_DESCRIPTION = "Max number of posts to return"
OFFSET_DESCRIPTION = "Offset for pagination"


@dataclass
class GetChannelPostsRequest(CommunityRequest):
    tool_name = "get_channel_posts"
    description = "Get posts from a specific channel"

    channel_id: Optional[str] = arg(
        "channelId", "Channel ID to fetch posts from", required=True
    )
    limit: Optional[float] = arg("limit", LIMIT_DESCRIPTION, kind="number")
    offset: Optional[float] = arg("offset", OFFSET_DESCRIPTION, kind="number")


@dataclass
class GetPostRequest(CommunityRequest):
    tool_name = "get_post"
    description = "Get a single post by ID"

    post_id: Optional[str] = arg("postId", "Post ID to fetch", required=True)


@dataclass
class GetPublicPostsRequest(CommunityRequest):
    tool_name = "get_public_posts"
    description = "Get public posts for a group"

    limit: Optional[float] = arg("limit", LIMIT_DESCRIPTION, kind="number")
    offset: Optional[float] = arg("offset", OFFSET_DESCRIPTION, kind="number")


@dataclass
class GetPostsByUserRequest(CommunityRequest):
    tool_name = "get_posts_by_user"
    description = "Get posts filtered by user"

    user_id: Optional[str] = arg("userId", "User ID to filter posts by")
    limit: Optional[float] = arg("limit", LIMIT_DESCRIPTION, kind="number")
    offset: Optional[float] = arg("offset", OFFSET_DESCRIPTION, kind="number")


@dataclass
class GetUserHomeTimelineRequest(CommunityRequest):
    tool_name = "get_user_home_timeline"
    description = "Get home timeline for a specific user"

    user_id: Optional[str] = arg(
        "userId", "User ID for the home timeline", required=True
    )
    limit: Optional[float] = arg("limit", LIMIT_DESCRIPTION, kind="number")
    offset: Optional[float] = arg("offset", OFFSET_DESCRIPTION, kind="number")


@dataclass
class GetChannelPinnedPostsRequest(CommunityRequest):
    tool_name = "get_channel_pinned_posts"
    description = "Get pinned posts for a specific channel"

    channel_id: Optional[str] = arg("channelId", "Channel ID", required=True)


@dataclass
class GetHomePinnedPostsRequest(CommunityRequest):
    tool_name = "get_home_pinned_posts"
    description = "Get pinned posts for the group home feed"


@dataclass
class CreatePostRequest(CommunityRequest):
    """Request schema for create_post.

    Example:
        request = CreatePostRequest(
            channel_id="ch_1", body="<p>hello</p>", title="Welcome"
        )
    """

    tool_name = "create_post"
    description = "Create a new post in a channel"

    channel_id: Optional[str] = arg(
        "channelId", "Channel ID to create the post in", required=True
    )
    title: Optional[str] = arg("title", "Post title")
    body: Optional[str] = arg(
        "body", "Post body content (HTML supported)", required=True
    )
    media_urls: Optional[List[str]] = arg(
        "mediaUrls", "Array of media URLs to attach", kind="string_list"
    )


@dataclass
class UpdatePostRequest(CommunityRequest):
    """Request schema for update_post.

    Only the content fields that were passed are sent; an explicit empty
    title, body or media list is forwarded as such.
    """

    tool_name = "update_post"
    description = "Update an existing post's content"

    channel_id: Optional[str] = arg(
        "channelId", "Channel ID the post belongs to", required=True
    )
    post_id: Optional[str] = arg("postId", "Post ID to update", required=True)
    title: Optional[str] = arg("title", "Updated post title")
    body: Optional[str] = arg("body", "Updated post body content (HTML supported)")
    media_urls: Optional[List[str]] = arg(
        "mediaUrls", "Updated media URLs", kind="string_list"
    )


@dataclass
class DeletePostRequest(CommunityRequest):
    tool_name = "delete_post"
    description = "Delete a post"

    post_id: Optional[str] = arg("postId", "Post ID to delete", required=True)


@dataclass
class MarkPostsReadBulkRequest(CommunityRequest):
    tool_name = "mark_posts_read_bulk"
    description = "Mark multiple posts as read in bulk"

    post_ids: Optional[List[str]] = arg(
        "postIds",
        "Array of post IDs to mark as read",
        kind="string_list",
        required=True,
    )


__all__ = [
    "GetChannelPostsRequest",
    "GetPostRequest",
    "GetPublicPostsRequest",
    "GetPostsByUserRequest",
    "GetUserHomeTimelineRequest",
    "GetChannelPinnedPostsRequest",
    "GetHomePinnedPostsRequest",
    "CreatePostRequest",
    "UpdatePostRequest",
    "DeletePostRequest",
    "MarkPostsReadBulkRequest",
]
