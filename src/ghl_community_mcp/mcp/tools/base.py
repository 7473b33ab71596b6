"""Shared plumbing for the MCP tool handlers."""

import time
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from mcp.types import CallToolResult

from ..facade import CommunityFacade
from ..logging import mcp_logger
from ..schemas import CommunityRequest, OperationResult

ToolHandler = Callable[[Dict[str, Any], CommunityFacade], Awaitable[CallToolResult]]


async def run_tool(
    request_cls: Type[CommunityRequest],
    arguments: Optional[Dict[str, Any]],
    facade: CommunityFacade,
) -> CallToolResult:
    """Validate the arguments, run the matching facade operation, build the envelope."""
    start_time = time.time()
    request = request_cls.from_arguments(arguments)

    errors = request.validate()
    if errors:
        result = OperationResult.failure(
            request.tool_name,
            f"Validation errors: {', '.join(errors)}",
            request_id=request.request_id,
        )
    else:
        operation = getattr(facade, request.tool_name)
        result = await operation(request)

    mcp_logger.log_tool_execution(
        tool_name=request.tool_name,
        duration_ms=(time.time() - start_time) * 1000,
        success=result.success,
        error=result.error_message,
    )
    return result.to_call_tool_result()


def tool_info(request_cls: Type[CommunityRequest], handler: ToolHandler) -> Dict[str, Any]:
    """Tool registration information derived from the request schema."""
    return {
        "name": request_cls.tool_name,
        "description": request_cls.description,
        "input_schema": request_cls.input_schema(),
        "handler": handler,
    }
