"""Tests for the community REST gateway."""

import json

import httpx
import pytest

from ghl_community_mcp.core.errors import (
    InvalidResponseError,
    RemoteRequestFailedError,
    TransportFailureError,
)
from ghl_community_mcp.core.gateway import (
    CommunityRestGateway,
    RequestDescriptor,
    build_query,
)
from ghl_community_mcp.utils.config_types import Settings

HOST = "services.leadconnectorhq.com"
BASE_URL = f"https://{HOST}/communities"


@pytest.fixture
async def gateway():
    async with CommunityRestGateway("tok_123") as gw:
        yield gw


class TestBuildQuery:
    def test_absent_values_dropped(self):
        assert build_query({"limit": None, "offset": None}) == {}

    def test_zero_and_empty_string_kept(self):
        assert build_query({"offset": 0, "userId": ""}) == {"offset": "0", "userId": ""}

    def test_integral_floats_rendered_as_ints(self):
        assert build_query({"limit": 20.0, "offset": 2.5}) == {
            "limit": "20",
            "offset": "2.5",
        }

    def test_none_params(self):
        assert build_query(None) == {}


class TestHeaders:
    def test_location_header_present(self):
        gw = CommunityRestGateway("tok_123")

        assert gw.build_headers("loc_1") == {
            "Token-Id": "tok_123",
            "Content-Type": "application/json",
            "x-location-id": "loc_1",
        }

    def test_location_header_omitted(self):
        gw = CommunityRestGateway("tok_123")

        assert "x-location-id" not in gw.build_headers(None)
        assert "x-location-id" not in gw.build_headers("")

    def test_from_settings_uses_base_url(self):
        gw = CommunityRestGateway.from_settings(
            Settings(ghl_token="tok", base_url="http://localhost:9000/communities/")
        )

        assert gw.build_url("/l/groups/g/posts") == (
            "http://localhost:9000/communities/l/groups/g/posts"
        )

    def test_from_settings_without_token(self):
        with pytest.raises(ValueError):
            CommunityRestGateway.from_settings(Settings())


class TestSend:
    async def test_get_with_query(self, gateway, respx_mock):
        route = respx_mock.get(host=HOST, path="/communities/l1/groups/g1/posts").mock(
            return_value=httpx.Response(200, json={"posts": []})
        )

        result = await gateway.get(
            "/l1/groups/g1/posts",
            {"userId": "u1", "limit": 5, "offset": 0},
            location_id="l1",
        )

        assert result == {"posts": []}
        request = route.calls.last.request
        assert dict(request.url.params) == {"userId": "u1", "limit": "5", "offset": "0"}
        assert request.headers["Token-Id"] == "tok_123"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["x-location-id"] == "l1"
        assert request.content == b""

    async def test_omitted_params_not_sent(self, gateway, respx_mock):
        route = respx_mock.get(host=HOST, path="/communities/l1/groups/g1/public/posts").mock(
            return_value=httpx.Response(200, json=[])
        )

        await gateway.get("/l1/groups/g1/public/posts", {"limit": None, "offset": None})

        assert route.calls.last.request.url.query == b""

    async def test_post_sends_json_body(self, gateway, respx_mock):
        route = respx_mock.post(f"{BASE_URL}/l1/groups/g1/posts/read-bulk").mock(
            return_value=httpx.Response(201, json={"success": True})
        )

        result = await gateway.post(
            "/l1/groups/g1/posts/read-bulk", {"postIds": ["a", "b"]}, location_id="l1"
        )

        assert result == {"success": True}
        assert json.loads(route.calls.last.request.content) == {"postIds": ["a", "b"]}

    async def test_patch_sends_json_body(self, gateway, respx_mock):
        route = respx_mock.patch(f"{BASE_URL}/l1/groups/g1/posts/p1/live-status").mock(
            return_value=httpx.Response(200, json={"status": "published"})
        )

        await gateway.patch("/l1/groups/g1/posts/p1/live-status", {"status": "published"})

        request = route.calls.last.request
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"status": "published"}
        assert "x-location-id" not in request.headers

    async def test_delete_has_no_body(self, gateway, respx_mock):
        route = respx_mock.delete(f"{BASE_URL}/l1/groups/g1/posts/p1").mock(
            return_value=httpx.Response(200, json={"deleted": True})
        )

        result = await gateway.send(
            RequestDescriptor.delete("/l1/groups/g1/posts/p1", location_id="l1")
        )

        assert result == {"deleted": True}
        assert route.calls.last.request.content == b""

    async def test_empty_success_body_returns_none(self, gateway, respx_mock):
        respx_mock.delete(f"{BASE_URL}/l1/groups/g1/posts/p1").mock(
            return_value=httpx.Response(204)
        )

        assert await gateway.delete("/l1/groups/g1/posts/p1") is None

    async def test_non_success_status(self, gateway, respx_mock):
        respx_mock.get(f"{BASE_URL}/l1/groups/g1/posts/p404").mock(
            return_value=httpx.Response(404, text="not found")
        )

        with pytest.raises(RemoteRequestFailedError) as exc_info:
            await gateway.get("/l1/groups/g1/posts/p404")

        error = exc_info.value
        assert error.status_code == 404
        assert error.body == "not found"
        assert error.message == "GET /l1/groups/g1/posts/p404 failed (404): not found"

    async def test_server_error_is_not_retried(self, gateway, respx_mock):
        route = respx_mock.post(f"{BASE_URL}/l1/groups/g1/channels/c1/posts").mock(
            return_value=httpx.Response(503, text="unavailable")
        )

        with pytest.raises(RemoteRequestFailedError):
            await gateway.post("/l1/groups/g1/channels/c1/posts", {"body": "hi"})

        assert route.call_count == 1

    async def test_transport_failure(self, gateway, respx_mock):
        respx_mock.get(f"{BASE_URL}/l1/groups/g1/posts/pinned").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        with pytest.raises(TransportFailureError) as exc_info:
            await gateway.get("/l1/groups/g1/posts/pinned")

        assert isinstance(exc_info.value.original_exception, httpx.ConnectError)
        assert "connection refused" in exc_info.value.message

    async def test_invalid_json_body(self, gateway, respx_mock):
        respx_mock.get(f"{BASE_URL}/l1/groups/g1/posts/p1").mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )

        with pytest.raises(InvalidResponseError):
            await gateway.get("/l1/groups/g1/posts/p1")


async def test_injected_client_is_not_closed():
    client = httpx.AsyncClient()
    async with CommunityRestGateway("tok", http_client=client):
        pass

    assert not client.is_closed
    await client.aclose()
