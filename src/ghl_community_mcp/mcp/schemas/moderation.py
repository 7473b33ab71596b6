"""Schema definitions for the post status, placement and pinning tools."""

from dataclasses import dataclass
from typing import Optional

from . import CommunityRequest, arg


@dataclass
class UpdatePostChannelRequest(CommunityRequest):
    tool_name = "update_post_channel"
    description = "Move a post to a different channel"

    post_id: Optional[str] = arg("postId", "Post ID to move", required=True)
    new_channel_id: Optional[str] = arg(
        "newChannelId", "Destination channel ID", required=True
    )


@dataclass
class UpdatePostStatusRequest(CommunityRequest):
    tool_name = "update_post_status"
    description = "Update the live status of a post (e.g. draft, published)"

    post_id: Optional[str] = arg("postId", "Post ID", required=True)
    status: Optional[str] = arg("status", "New status for the post", required=True)


@dataclass
class PostActionRequest(CommunityRequest):
    """A post addressed through its channel, for the action endpoint."""

    channel_id: Optional[str] = arg(
        "channelId", "Channel ID the post belongs to", required=True
    )
    post_id: Optional[str] = arg("postId", "Post ID", required=True)


@dataclass
class PinPostToChannelRequest(PostActionRequest):
    tool_name = "pin_post_to_channel"
    description = "Pin a post to its channel"


@dataclass
class PinPostToHomeRequest(PostActionRequest):
    tool_name = "pin_post_to_home"
    description = "Pin a post to the group home feed"


@dataclass
class UnpinPostFromChannelRequest(PostActionRequest):
    tool_name = "unpin_post_from_channel"
    description = "Unpin a post from its channel"


@dataclass
class UnpinPostFromHomeRequest(PostActionRequest):
    tool_name = "unpin_post_from_home"
    description = "Unpin a post from the group home feed"


@dataclass
class TogglePostCommentsRequest(PostActionRequest):
    tool_name = "toggle_post_comments"
    description = "Enable or disable comments on a post"

    enable: Optional[bool] = arg(
        "enable",
        "true to enable comments, false to disable",
        kind="boolean",
        required=True,
    )


__all__ = [
    "UpdatePostChannelRequest",
    "UpdatePostStatusRequest",
    "PostActionRequest",
    "PinPostToChannelRequest",
    "PinPostToHomeRequest",
    "UnpinPostFromChannelRequest",
    "UnpinPostFromHomeRequest",
    "TogglePostCommentsRequest",
]
