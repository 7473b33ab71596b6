"""Tests for the error hierarchy."""

import logging

import httpx
import pytest

from ghl_community_mcp.core.error_handling import error_context, error_handler
from ghl_community_mcp.core.errors import (
    CommunityMCPError,
    ConfigurationError,
    ConfigurationMissingError,
    RemoteRequestFailedError,
    TransportFailureError,
)


def test_remote_request_failed_message():
    error = RemoteRequestFailedError("PATCH", "/l/groups/g/posts/p/live-status", 422, "bad status")

    assert error.message == "PATCH /l/groups/g/posts/p/live-status failed (422): bad status"
    assert error.status_code == 422
    assert error.body == "bad status"
    assert isinstance(error, CommunityMCPError)


def test_str_includes_code_and_context():
    error = RemoteRequestFailedError("GET", "/x", 500, "boom")

    text = str(error)
    assert text.startswith("[REMOTE_001]")
    assert "status_code=500" in text


def test_transport_failure_wraps_original():
    cause = httpx.ConnectError("connection refused")
    error = TransportFailureError("GET", "/x", cause)

    assert error.original_exception is cause
    assert error.message == "GET /x transport error: connection refused"
    assert "Caused by: ConnectError" in str(error)


def test_configuration_missing():
    error = ConfigurationMissingError()

    assert error.message == "GHL_TOKEN environment variable is required"
    assert error.error_code == "CONFIG_002"


class TestErrorHandler:
    def test_matching_error_passes_through(self):
        @error_handler("lookup", KeyError)
        def lookup():
            raise KeyError("k")

        with pytest.raises(KeyError):
            lookup()

    def test_other_errors_are_translated(self):
        @error_handler("load", ConfigurationError)
        def load():
            raise OSError("disk gone")

        with pytest.raises(ConfigurationError) as exc_info:
            load()

        assert exc_info.value.message == "Operation 'load' failed"
        assert isinstance(exc_info.value.original_exception, OSError)

    def test_no_reraise_returns_none(self):
        @error_handler("optional", ValueError, reraise=False)
        def optional():
            raise ValueError("ignored")

        assert optional() is None

    def test_error_context_translates(self):
        with pytest.raises(ValueError, match="parse failed: bad"):
            with error_context("parse", logging.getLogger("test"), ValueError):
                raise TypeError("bad")
