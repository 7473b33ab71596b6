"""MCP server implementation for ghl_community_mcp."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from ..core.error_handling import error_context, error_handler
from ..utils.config_types import Settings
from .logging import mcp_logger

ToolCallable = Callable[[Dict[str, Any]], Awaitable[CallToolResult]]


class CommunityMCPServer:
    """MCP server exposing the community API tools.

    Owns the low-level ``mcp`` server, keeps the tool registry and dispatches
    ``tools/call`` requests by name. Argument validation against each tool's
    input schema happens in the ``mcp`` runtime before dispatch.
    """

    def __init__(self, settings: Settings):
        """Initialize the MCP server.

        Args:
            settings: Application settings instance (includes MCP configuration)
        """
        self.settings = settings
        self.mcp_settings = settings.mcp
        self.logger = logging.getLogger(self.__class__.__name__)

        self.mcp_server = Server(
            name=self.mcp_settings.server_name,
            version=self.mcp_settings.server_version,
            instructions=(
                "Tools for reading and managing GoHighLevel community posts, "
                "pins and channels"
            ),
        )

        # Server state
        self._running = False
        self._shutdown_event = asyncio.Event()
        self._registered_tools: Dict[str, Tool] = {}
        self._tool_handlers: Dict[str, ToolCallable] = {}

        self._setup_tool_handlers()

        self.logger.debug(
            f"Initialized MCP server '{self.mcp_settings.server_name}' "
            f"with {self.mcp_settings.transport_type} transport"
        )

    @property
    def transport_type(self) -> str:
        return self.mcp_settings.transport_type

    @error_handler("tool_registration", ValueError, reraise=True)
    def register_tool(
        self,
        name: str,
        description: str,
        handler: ToolCallable,
        input_schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Register a tool with the MCP server.

        Args:
            name: Tool name
            description: Tool description
            handler: Coroutine taking the call arguments and returning a CallToolResult
            input_schema: Input schema for the tool

        Raises:
            ValueError: If tool name already exists or invalid parameters
        """
        if name in self._registered_tools:
            raise ValueError(f"Tool '{name}' already registered")

        with error_context("tool_registration", self.logger, ValueError):
            tool = Tool(
                name=name,
                description=description,
                inputSchema=input_schema or {"type": "object", "properties": {}},
            )
            self._registered_tools[name] = tool
            self._tool_handlers[name] = handler
            self.logger.debug(f"Registered tool: {name}")

    def get_registered_tools(self) -> Dict[str, Tool]:
        """Get all registered tools."""
        return self._registered_tools.copy()

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> CallToolResult:
        """Dispatch one tool call. Never raises."""
        mcp_logger.log_protocol_message(
            "RECV", {"tool": name, "arguments": arguments or {}}
        )
        handler = self._tool_handlers.get(name)
        if handler is None:
            self.logger.warning(f"Call to unknown tool: {name}")
            return CallToolResult(
                content=[TextContent(type="text", text=f"Unknown tool: {name}")],
                isError=True,
            )

        try:
            return await handler(arguments or {})
        except Exception as e:
            self.logger.exception(f"Tool {name} raised")
            return CallToolResult(
                content=[TextContent(type="text", text=f"Tool execution failed: {e}")],
                isError=True,
            )

    def _setup_tool_handlers(self) -> None:
        """Install the list/call handlers on the low-level server."""

        @self.mcp_server.list_tools()
        async def handle_list_tools() -> List[Tool]:
            return list(self._registered_tools.values())

        @self.mcp_server.call_tool()
        async def handle_call_tool(
            name: str, arguments: Dict[str, Any]
        ) -> CallToolResult:
            return await self.call_tool(name, arguments)

    @asynccontextmanager
    async def lifespan(self):
        """Async context manager for server lifespan."""
        try:
            self.logger.info("Starting MCP server lifespan")
            yield self
        except Exception as e:
            self.logger.error(f"Error during server lifespan: {e}")
            raise
        finally:
            await self.stop()
            self.logger.info("Ending MCP server lifespan")

    async def start(self) -> None:
        """Serve until the client disconnects.

        Raises:
            RuntimeError: If server is already running
        """
        if self._running:
            raise RuntimeError("Server is already running")

        self.logger.info(
            f"Starting MCP server with {self.transport_type} transport "
            f"({len(self._registered_tools)} tools)"
        )
        self._running = True
        self._shutdown_event.clear()
        try:
            await self._start_stdio()
        finally:
            self._running = False
            self._shutdown_event.set()

    async def _start_stdio(self) -> None:
        """Start server with STDIO transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.mcp_server.run(
                read_stream,
                write_stream,
                self.mcp_server.create_initialization_options(),
            )

    async def stop(self) -> None:
        """Mark the server stopped and release the tool registry."""
        if not self._running and not self._registered_tools:
            return

        self.logger.info("Stopping MCP server")
        self._running = False
        self._shutdown_event.set()
        self._registered_tools.clear()
        self._tool_handlers.clear()

    @property
    def is_running(self) -> bool:
        """Check if server is running."""
        return self._running

    async def wait_for_shutdown(self) -> None:
        """Wait for shutdown signal."""
        await self._shutdown_event.wait()

    def __str__(self) -> str:
        return f"CommunityMCPServer(transport={self.transport_type}, running={self._running})"

    def __repr__(self) -> str:
        return (
            f"CommunityMCPServer("
            f"name='{self.mcp_settings.server_name}', "
            f"transport_type='{self.transport_type}', "
            f"running={self._running}, "
            f"tools={len(self._registered_tools)}"
            f")"
        )
