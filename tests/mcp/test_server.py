"""Tests for the CommunityMCPServer registry, dispatch and lifecycle."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from mcp.types import (
    CallToolRequest,
    CallToolResult,
    ListToolsRequest,
    TextContent,
)

from ghl_community_mcp.mcp.server import CommunityMCPServer
from ghl_community_mcp.mcp.server_init import create_server


def ok_result(text="done"):
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


@pytest.fixture
def server(settings):
    return CommunityMCPServer(settings)


class TestRegistration:
    def test_initial_state(self, server):
        """A new server is idle and has no tools."""
        assert server.is_running is False
        assert server.get_registered_tools() == {}
        assert server.transport_type == "stdio"
        assert server.mcp_server.name == "ghl-community"

    def test_register_tool(self, server):
        """Registered tools keep their name, description and schema."""
        schema = {"type": "object", "properties": {"postId": {"type": "string"}}}
        server.register_tool("get_post", "Get a post", AsyncMock(), schema)

        tool = server.get_registered_tools()["get_post"]
        assert tool.description == "Get a post"
        assert tool.inputSchema == schema

    def test_register_duplicate_tool(self, server):
        """Registering the same name twice is rejected."""
        server.register_tool("get_post", "Get a post", AsyncMock())

        with pytest.raises(ValueError, match="already registered"):
            server.register_tool("get_post", "Again", AsyncMock())

    def test_default_schema(self, server):
        server.register_tool("noop", "No arguments", AsyncMock())

        assert server.get_registered_tools()["noop"].inputSchema == {
            "type": "object",
            "properties": {},
        }

    def test_create_server_registers_all_tools(self, settings, stub_gateway):
        """create_server wires every catalog tool to a facade."""
        server = create_server(settings, stub_gateway)

        assert len(server.get_registered_tools()) == 18
        assert "tools=18" in repr(server)


class TestDispatch:
    async def test_dispatch_by_name(self, server):
        handler = AsyncMock(return_value=ok_result())
        server.register_tool("get_post", "Get a post", handler)

        result = await server.call_tool("get_post", {"postId": "p1"})

        handler.assert_awaited_once_with({"postId": "p1"})
        assert result.content[0].text == "done"

    async def test_unknown_tool(self, server):
        result = await server.call_tool("nope", {})

        assert result.isError is True
        assert result.content[0].text == "Unknown tool: nope"

    async def test_handler_exception_becomes_error_result(self, server):
        server.register_tool(
            "broken", "Raises", AsyncMock(side_effect=RuntimeError("bad handler"))
        )

        result = await server.call_tool("broken", None)

        assert result.isError is True
        assert result.content[0].text == "Tool execution failed: bad handler"

    async def test_dispatch_through_facade(self, settings, stub_gateway):
        stub_gateway.send.return_value = {"id": "p1"}
        server = create_server(settings, stub_gateway)

        result = await server.call_tool("get_post", {"postId": "p1"})

        assert result.isError is False
        assert '"id": "p1"' in result.content[0].text


class TestProtocolHandlers:
    async def test_list_tools_handler_installed(self, settings, stub_gateway):
        """The low-level server answers tools/list from the registry."""
        server = create_server(settings, stub_gateway)
        handler = server.mcp_server.request_handlers[ListToolsRequest]

        response = await handler(ListToolsRequest(method="tools/list"))

        names = [tool.name for tool in response.root.tools]
        assert len(names) == 18
        assert names[0] == "get_channel_posts"

    async def test_call_tool_handler_installed(self, server):
        """tools/call requests reach the name-based dispatcher."""
        server.register_tool(
            "noop", "No arguments", AsyncMock(return_value=ok_result("hi"))
        )
        handler = server.mcp_server.request_handlers[CallToolRequest]

        response = await handler(
            CallToolRequest(
                method="tools/call", params={"name": "noop", "arguments": {}}
            )
        )

        assert response.root.isError is False
        assert response.root.content[0].text == "hi"


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_lifespan_stops_server(self, server):
        """Leaving the lifespan context clears the registry."""
        server.register_tool("get_post", "Get a post", AsyncMock())

        async with server.lifespan() as running:
            assert running is server

        assert server.get_registered_tools() == {}
        assert server.is_running is False

    @pytest.mark.asyncio
    async def test_start_runs_stdio(self, server):
        """start() serves over stdio and resets state when the client leaves."""
        read_stream, write_stream = MagicMock(), MagicMock()
        stdio_cm = AsyncMock()
        stdio_cm.__aenter__.return_value = (read_stream, write_stream)

        with patch(
            "ghl_community_mcp.mcp.server.stdio_server", return_value=stdio_cm
        ), patch.object(server.mcp_server, "run", new_callable=AsyncMock) as mock_run:
            await server.start()

        mock_run.assert_awaited_once()
        assert mock_run.call_args.args[:2] == (read_stream, write_stream)
        assert server.is_running is False

    @pytest.mark.asyncio
    async def test_start_when_running(self, server):
        """Starting twice is an error."""
        server._running = True

        with pytest.raises(RuntimeError, match="already running"):
            await server.start()

    @pytest.mark.asyncio
    async def test_wait_for_shutdown(self, server):
        with patch.object(server, "_start_stdio", new_callable=AsyncMock):
            await server.start()

        await server.wait_for_shutdown()

    def test_string_representations(self, server):
        assert "running=False" in str(server)
        assert "name='ghl-community'" in repr(server)
