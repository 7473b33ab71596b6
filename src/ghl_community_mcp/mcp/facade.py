"""MCP facade over the community REST API.

Each public coroutine is one tool operation: it resolves the location/group
identifiers, maps the request onto a single ``RequestDescriptor`` and hands it
to the gateway. Every outcome, including errors, comes back as an
``OperationResult``; nothing raised below this layer reaches the MCP runtime.
"""

import dataclasses
import logging
import time
from typing import Any, Callable, Optional, Protocol

from ..core.errors import CommunityMCPError
from ..core.gateway import RequestDescriptor
from ..core.identifiers import CallContext, resolve_identifiers
from ..utils.config_types import Settings
from .schemas import CommunityRequest, OperationResult
from .schemas.moderation import (
    PinPostToChannelRequest,
    PinPostToHomeRequest,
    PostActionRequest,
    TogglePostCommentsRequest,
    UnpinPostFromChannelRequest,
    UnpinPostFromHomeRequest,
    UpdatePostChannelRequest,
    UpdatePostStatusRequest,
)
from .schemas.posts import (
    CreatePostRequest,
    DeletePostRequest,
    GetChannelPinnedPostsRequest,
    GetChannelPostsRequest,
    GetHomePinnedPostsRequest,
    GetPostRequest,
    GetPostsByUserRequest,
    GetPublicPostsRequest,
    GetUserHomeTimelineRequest,
    MarkPostsReadBulkRequest,
    UpdatePostRequest,
)

logger = logging.getLogger(__name__)

DescriptorBuilder = Callable[[CallContext], RequestDescriptor]


class Gateway(Protocol):
    async def send(self, request: RequestDescriptor) -> Any: ...


def _page(limit: Optional[float], offset: Optional[float]) -> dict:
    return {"limit": limit, "offset": offset}


def _action_path(ctx: CallContext, request: PostActionRequest) -> str:
    return f"{ctx.group_path}/channels/{request.channel_id}/posts/{request.post_id}"


class CommunityFacade:
    """Catalog of the community post, pin and channel operations."""

    def __init__(self, settings: Settings, gateway: Gateway):
        """
        Args:
            settings: Immutable process settings (identifier defaults)
            gateway: Anything with an async ``send(RequestDescriptor)``
        """
        self.settings = settings
        self.gateway = gateway

    async def _execute(
        self, request: CommunityRequest, build: DescriptorBuilder
    ) -> OperationResult:
        start_time = time.time()
        tool_name = request.tool_name

        def elapsed() -> int:
            return int((time.time() - start_time) * 1000)

        try:
            ctx = resolve_identifiers(
                request.location_id, request.group_id, self.settings
            )
            descriptor = dataclasses.replace(build(ctx), location_id=ctx.location_id)
            data = await self.gateway.send(descriptor)
        except CommunityMCPError as e:
            logger.info(f"{tool_name} failed: {e}")
            return OperationResult.failure(
                tool_name,
                e.message,
                error_code=e.error_code,
                request_id=request.request_id,
                execution_time_ms=elapsed(),
            )
        except Exception as e:
            logger.exception(f"Unexpected error in {tool_name}")
            return OperationResult.failure(
                tool_name,
                str(e) or type(e).__name__,
                request_id=request.request_id,
                execution_time_ms=elapsed(),
            )

        return OperationResult.ok(
            tool_name,
            data,
            request_id=request.request_id,
            execution_time_ms=elapsed(),
        )

    # --- Reading posts ---

    async def get_channel_posts(self, request: GetChannelPostsRequest) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(
                f"{ctx.group_path}/channels/{request.channel_id}/posts",
                _page(request.limit, request.offset),
            ),
        )

    async def get_post(self, request: GetPostRequest) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(f"{ctx.group_path}/posts/{request.post_id}"),
        )

    async def get_public_posts(self, request: GetPublicPostsRequest) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(
                f"{ctx.group_path}/public/posts", _page(request.limit, request.offset)
            ),
        )

    async def get_posts_by_user(self, request: GetPostsByUserRequest) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(
                f"{ctx.group_path}/posts",
                {"userId": request.user_id, **_page(request.limit, request.offset)},
            ),
        )

    async def get_user_home_timeline(
        self, request: GetUserHomeTimelineRequest
    ) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(
                f"{ctx.group_path}/{request.user_id}/home-timeline",
                _page(request.limit, request.offset),
            ),
        )

    async def get_channel_pinned_posts(
        self, request: GetChannelPinnedPostsRequest
    ) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(
                f"{ctx.group_path}/channels/{request.channel_id}/posts/pinned"
            ),
        )

    async def get_home_pinned_posts(
        self, request: GetHomePinnedPostsRequest
    ) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.get(f"{ctx.group_path}/posts/pinned"),
        )

    # --- Writing posts ---

    async def create_post(self, request: CreatePostRequest) -> OperationResult:
        body: dict = {"body": request.body}
        if request.title is not None:
            body["title"] = request.title
        if request.media_urls is not None:
            body["mediaUrls"] = request.media_urls

        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.post(
                f"{ctx.group_path}/channels/{request.channel_id}/posts", body
            ),
        )

    async def update_post(self, request: UpdatePostRequest) -> OperationResult:
        body: dict = {"action": "UPDATE_POST"}
        if request.title is not None:
            body["title"] = request.title
        if request.body is not None:
            body["body"] = request.body
        if request.media_urls is not None:
            body["mediaUrls"] = request.media_urls

        return await self._execute(
            request, lambda ctx: RequestDescriptor.patch(_action_path(ctx, request), body)
        )

    async def update_post_channel(
        self, request: UpdatePostChannelRequest
    ) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.post(
                f"{ctx.group_path}/posts/{request.post_id}/update-channel",
                {"channelId": request.new_channel_id},
            ),
        )

    async def update_post_status(self, request: UpdatePostStatusRequest) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.patch(
                f"{ctx.group_path}/posts/{request.post_id}/live-status",
                {"status": request.status},
            ),
        )

    async def delete_post(self, request: DeletePostRequest) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.delete(f"{ctx.group_path}/posts/{request.post_id}"),
        )

    async def mark_posts_read_bulk(
        self, request: MarkPostsReadBulkRequest
    ) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.post(
                f"{ctx.group_path}/posts/read-bulk", {"postIds": request.post_ids}
            ),
        )

    # --- Pins and comments ---

    async def _post_action(self, request: PostActionRequest, action: str) -> OperationResult:
        return await self._execute(
            request,
            lambda ctx: RequestDescriptor.patch(
                _action_path(ctx, request), {"action": action}
            ),
        )

    async def pin_post_to_channel(self, request: PinPostToChannelRequest) -> OperationResult:
        return await self._post_action(request, "PIN_TO_CHANNEL")

    async def pin_post_to_home(self, request: PinPostToHomeRequest) -> OperationResult:
        return await self._post_action(request, "PIN_TO_HOME")

    async def unpin_post_from_channel(
        self, request: UnpinPostFromChannelRequest
    ) -> OperationResult:
        return await self._post_action(request, "UNPIN_FROM_CHANNEL")

    async def unpin_post_from_home(
        self, request: UnpinPostFromHomeRequest
    ) -> OperationResult:
        return await self._post_action(request, "UNPIN_FROM_HOME")

    async def toggle_post_comments(
        self, request: TogglePostCommentsRequest
    ) -> OperationResult:
        action = "ENABLE_COMMENTS" if request.enable else "DISABLE_COMMENTS"
        return await self._post_action(request, action)
