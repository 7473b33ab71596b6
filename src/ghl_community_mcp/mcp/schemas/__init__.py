"""MCP schema definitions for ghl_community_mcp.

Every tool has a request dataclass. Fields are declared with :func:`arg`, which
records the tool-argument name (camelCase, as the community API spells it),
its JSON type, a description and whether it is required. The same metadata
drives the tool's JSON input schema, ``from_arguments`` and ``validate``, so
the declared shape and the checked shape cannot drift apart.
"""

import json
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional
from uuid import uuid4

from mcp.types import CallToolResult, TextContent

# JSON schema type for each argument kind
_JSON_TYPES = {
    "string": {"type": "string"},
    "number": {"type": "number", "minimum": 0},
    "boolean": {"type": "boolean"},
    "string_list": {"type": "array", "items": {"type": "string"}},
}


def arg(
    name: str,
    description: str,
    kind: str = "string",
    required: bool = False,
) -> Any:
    """Declare a request field bound to the tool argument ``name``."""
    if kind not in _JSON_TYPES:
        raise ValueError(f"Unknown argument kind: {kind}")
    return field(
        default=None,
        metadata={
            "arg": name,
            "description": description,
            "kind": kind,
            "required": required,
        },
    )


def _check_kind(value: Any, kind: str) -> bool:
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == "boolean":
        return isinstance(value, bool)
    if kind == "string_list":
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return False


@dataclass
class CommunityRequest:
    """Base request: every tool accepts optional location/group overrides."""

    tool_name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    location_id: Optional[str] = arg(
        "locationId", "GHL location ID (falls back to GHL_LOCATION_ID env var)"
    )
    group_id: Optional[str] = arg(
        "groupId", "GHL group ID (falls back to GHL_GROUP_ID env var)"
    )
    request_id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def _argument_fields(cls):
        return [f for f in fields(cls) if "arg" in f.metadata]

    @classmethod
    def from_arguments(cls, arguments: Optional[Dict[str, Any]]) -> "CommunityRequest":
        """Build a request from raw tool arguments.

        Keys that are absent stay ``None``; explicit empty values are kept.
        """
        arguments = arguments or {}
        values = {
            f.name: arguments[f.metadata["arg"]]
            for f in cls._argument_fields()
            if f.metadata["arg"] in arguments
        }
        return cls(**values)

    @classmethod
    def input_schema(cls) -> Dict[str, Any]:
        """JSON schema advertised to MCP clients."""
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for f in cls._argument_fields():
            meta = f.metadata
            properties[meta["arg"]] = {
                **_JSON_TYPES[meta["kind"]],
                "description": meta["description"],
            }
            if meta["required"]:
                required.append(meta["arg"])
        schema: Dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def validate(self) -> List[str]:
        """Validate field presence and types."""
        errors = []
        for f in self._argument_fields():
            meta = f.metadata
            value = getattr(self, f.name)
            if value is None:
                if meta["required"]:
                    errors.append(f"{meta['arg']} is required")
                continue
            if not _check_kind(value, meta["kind"]):
                errors.append(
                    f"{meta['arg']} must be of type {_JSON_TYPES[meta['kind']]['type']}"
                    + (" of strings" if meta["kind"] == "string_list" else "")
                )
            elif meta["kind"] == "number" and value < 0:
                errors.append(f"{meta['arg']} must not be negative")
            elif meta["required"] and meta["kind"] == "string" and not value:
                errors.append(f"{meta['arg']} must not be empty")
        return errors


@dataclass
class OperationResult:
    """Outcome of one operation: either a JSON payload or an error message."""

    success: bool
    tool_name: str
    data: Any = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None
    request_id: str = field(default_factory=lambda: str(uuid4()))
    execution_time_ms: int = 0

    @classmethod
    def ok(cls, tool_name: str, data: Any, **kwargs: Any) -> "OperationResult":
        return cls(success=True, tool_name=tool_name, data=data, **kwargs)

    @classmethod
    def failure(
        cls,
        tool_name: str,
        message: str,
        error_code: Optional[str] = None,
        **kwargs: Any,
    ) -> "OperationResult":
        return cls(
            success=False,
            tool_name=tool_name,
            error_message=message,
            error_code=error_code,
            **kwargs,
        )

    def to_text(self) -> str:
        if self.success:
            return json.dumps(self.data, indent=2, ensure_ascii=False)
        return self.error_message or "Unknown error"

    def to_call_tool_result(self) -> CallToolResult:
        """The response envelope handed back to the MCP runtime."""
        return CallToolResult(
            content=[TextContent(type="text", text=self.to_text())],
            isError=not self.success,
        )


__all__ = [
    "CommunityRequest",
    "OperationResult",
    "arg",
]
