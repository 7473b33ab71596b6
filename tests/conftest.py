"""Pytest configuration for the ghl_community_mcp tests."""

from unittest.mock import AsyncMock

import pytest

from ghl_community_mcp.mcp.facade import CommunityFacade
from ghl_community_mcp.utils.config_types import Settings

BASE_URL = "https://services.leadconnectorhq.com/communities"


@pytest.fixture
def settings():
    """Settings with a token and both identifier defaults."""
    return Settings(
        ghl_token="test-token",
        ghl_location_id="loc_default",
        ghl_group_id="grp_default",
    )


@pytest.fixture
def bare_settings():
    """Settings with a token but no identifier defaults."""
    return Settings(ghl_token="test-token")


@pytest.fixture
def stub_gateway():
    """Gateway double that records every RequestDescriptor it is sent."""
    gateway = AsyncMock()
    gateway.send.return_value = {"ok": True}
    return gateway


@pytest.fixture
def facade(settings, stub_gateway):
    return CommunityFacade(settings, stub_gateway)


@pytest.fixture
def bare_facade(bare_settings, stub_gateway):
    return CommunityFacade(bare_settings, stub_gateway)
