"""Identifier resolution, REST gateway and error types."""

from .errors import (
    BaseError,
    CommunityMCPError,
    ConfigurationError,
    ConfigurationMissingError,
    InvalidResponseError,
    MissingIdentifierError,
    RemoteRequestFailedError,
    TransportFailureError,
)
from .gateway import CommunityRestGateway, RequestDescriptor
from .identifiers import CallContext, resolve_identifiers

__all__ = [
    "BaseError",
    "CallContext",
    "CommunityMCPError",
    "CommunityRestGateway",
    "ConfigurationError",
    "ConfigurationMissingError",
    "InvalidResponseError",
    "MissingIdentifierError",
    "RemoteRequestFailedError",
    "RequestDescriptor",
    "TransportFailureError",
    "resolve_identifiers",
]
