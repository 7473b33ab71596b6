"""HTTP gateway to the GoHighLevel communities REST API."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..utils.config_types import DEFAULT_BASE_URL, Settings
from ..utils.logging_config import log_performance, mask_sensitive_data
from .errors import InvalidResponseError, RemoteRequestFailedError, TransportFailureError

logger = logging.getLogger(__name__)

QueryValue = Union[str, int, float, None]

GET = "GET"
POST = "POST"
PATCH = "PATCH"
DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """One outbound call, built by an operation and consumed by the gateway."""

    method: str
    path: str
    params: Optional[Mapping[str, QueryValue]] = None
    body: Optional[Any] = None
    location_id: Optional[str] = None

    @classmethod
    def get(
        cls,
        path: str,
        params: Optional[Mapping[str, QueryValue]] = None,
        location_id: Optional[str] = None,
    ) -> "RequestDescriptor":
        return cls(GET, path, params=params, location_id=location_id)

    @classmethod
    def post(
        cls, path: str, body: Optional[Any] = None, location_id: Optional[str] = None
    ) -> "RequestDescriptor":
        return cls(POST, path, body=body, location_id=location_id)

    @classmethod
    def patch(
        cls, path: str, body: Optional[Any] = None, location_id: Optional[str] = None
    ) -> "RequestDescriptor":
        return cls(PATCH, path, body=body, location_id=location_id)

    @classmethod
    def delete(cls, path: str, location_id: Optional[str] = None) -> "RequestDescriptor":
        return cls(DELETE, path, location_id=location_id)


def build_query(params: Optional[Mapping[str, QueryValue]]) -> Dict[str, str]:
    """Drop parameters that were not given. ``0`` and ``""`` are kept."""
    if not params:
        return {}
    query = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        query[key] = str(value)
    return query


class CommunityRestGateway:
    """Issues single-attempt requests against the community API.

    Every non-2xx status becomes a ``RemoteRequestFailedError``; every
    transport-level failure becomes a ``TransportFailureError``. Success
    bodies are returned as parsed JSON without interpretation.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            token: Value sent verbatim in the ``Token-Id`` header
            base_url: Address every path is appended to
            http_client: Shared httpx client; one is created (and owned) if omitted
        """
        self._token = token
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None
    ) -> "CommunityRestGateway":
        if not settings.ghl_token:
            raise ValueError("settings.ghl_token is required to build a gateway")
        return cls(settings.ghl_token, settings.base_url, http_client=http_client)

    async def __aenter__(self) -> "CommunityRestGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def build_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def build_headers(self, location_id: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Token-Id": self._token,
            "Content-Type": "application/json",
        }
        if location_id:
            headers["x-location-id"] = location_id
        return headers

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, QueryValue]] = None,
        location_id: Optional[str] = None,
    ) -> Any:
        return await self.send(RequestDescriptor.get(path, params, location_id))

    async def post(
        self, path: str, body: Optional[Any] = None, location_id: Optional[str] = None
    ) -> Any:
        return await self.send(RequestDescriptor.post(path, body, location_id))

    async def patch(
        self, path: str, body: Optional[Any] = None, location_id: Optional[str] = None
    ) -> Any:
        return await self.send(RequestDescriptor.patch(path, body, location_id))

    async def delete(self, path: str, location_id: Optional[str] = None) -> Any:
        return await self.send(RequestDescriptor.delete(path, location_id))

    @log_performance("community_api_request")
    async def send(self, request: RequestDescriptor) -> Any:
        """Perform one request and return the parsed JSON body.

        Raises:
            RemoteRequestFailedError: On any non-success status
            TransportFailureError: When no response was received
            InvalidResponseError: When a success body is not JSON
        """
        headers = self.build_headers(request.location_id)
        content = None
        if request.body is not None and request.method in (POST, PATCH):
            content = json.dumps(request.body)

        logger.debug(
            f"{request.method} {request.path}",
            extra={
                "extra_data": {
                    "headers": mask_sensitive_data(headers),
                    "params": build_query(request.params),
                }
            },
        )

        try:
            response = await self._client.request(
                request.method,
                self.build_url(request.path),
                params=build_query(request.params),
                headers=headers,
                content=content,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{request.method} {request.path} transport error: {e!r}")
            raise TransportFailureError(request.method, request.path, e) from e

        if not response.is_success:
            logger.info(
                f"{request.method} {request.path} returned {response.status_code}"
            )
            raise RemoteRequestFailedError(
                request.method, request.path, response.status_code, response.text
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(request.method, request.path, e) from e
