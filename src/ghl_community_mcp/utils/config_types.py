# This file defines the structure of configuration objects using Pydantic.
# It is kept apart from the loader so the models can be imported without
# touching the environment.

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://services.leadconnectorhq.com/communities"


class MCPSettings(BaseModel):
    """Configuration settings for the MCP server."""

    model_config = ConfigDict(frozen=True)

    server_name: str = "ghl-community"
    server_version: str = "1.0.0"
    transport_type: str = "stdio"  # Only stdio is served

    @field_validator("transport_type")
    @classmethod
    def validate_transport_type(cls, v: str) -> str:
        """Validate transport type."""
        if v != "stdio":
            raise ValueError(f"Invalid transport_type: '{v}'. Must be 'stdio'")
        return v


class Settings(BaseModel):
    """Process-wide settings, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    # Community API access
    ghl_token: Optional[str] = None  # Sent verbatim as the Token-Id header
    ghl_location_id: Optional[str] = None  # Default location for every call
    ghl_group_id: Optional[str] = None  # Default group for every call
    base_url: str = DEFAULT_BASE_URL

    # Logging
    log_level: str = "INFO"
    structured_logging: bool = False
    log_file: Optional[str] = None

    mcp: MCPSettings = Field(default_factory=MCPSettings)

    @field_validator("ghl_token", "ghl_location_id", "ghl_group_id", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """An empty value is the same as an unset one."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log_level: '{v}'")
        return level
