"""
Centralized error handling module for ghl_community_mcp.

This module defines the exception hierarchy shared by the configuration layer,
the identifier resolver and the REST gateway. Every error carries a message,
an error code, optional context and the original exception it wraps. The
``message`` attribute is what ends up in a failure envelope; ``str(error)``
adds the code and context for logs.
"""

from typing import Any, Dict, Optional


class BaseError(Exception):
    """Base class for all custom exceptions in the application."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize the BaseError.

        Args:
            message: The primary error message.
            error_code: A unique code for this error type (e.g., 'CONFIG_001').
            context: A dictionary of contextual information related to the error.
            original_exception: The original exception that was caught and wrapped.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        """Create a string representation of the error."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}]")
        parts.append(self.message)

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"Context: ({context_str})")

        if self.original_exception:
            parts.append(
                f"--> Caused by: {type(self.original_exception).__name__}: {self.original_exception}"
            )

        return " ".join(parts)


class CommunityMCPError(BaseError):
    """Base exception class for all ghl_community_mcp errors."""

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message or "An error occurred while talking to the community API",
            error_code=error_code,
            context=context,
            original_exception=original_exception,
        )


class ConfigurationError(CommunityMCPError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
        error_code: str = "CONFIG_001",
    ):
        super().__init__(
            message or "Invalid configuration specified",
            error_code=error_code,
            context=context,
            original_exception=original_exception,
        )


class ConfigurationMissingError(ConfigurationError):
    """A required setting (the API token) is absent. Fatal at startup."""

    def __init__(self, setting: str = "GHL_TOKEN"):
        super().__init__(
            f"{setting} environment variable is required",
            context={"setting": setting},
            error_code="CONFIG_002",
        )
        self.setting = setting


class MissingIdentifierError(CommunityMCPError):
    """Neither a per-call value nor a configured default exists for an identifier."""

    def __init__(self, identifier: str, env_var: str):
        super().__init__(
            f"{identifier} is required (pass it or set {env_var})",
            error_code="IDENT_001",
            context={"identifier": identifier},
        )
        self.identifier = identifier
        self.env_var = env_var


class RemoteRequestFailedError(CommunityMCPError):
    """The community API answered with a non-success HTTP status."""

    def __init__(self, method: str, path: str, status_code: int, body: str):
        super().__init__(
            f"{method} {path} failed ({status_code}): {body}",
            error_code="REMOTE_001",
            context={"method": method, "path": path, "status_code": status_code},
        )
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


class TransportFailureError(CommunityMCPError):
    """The request never produced an HTTP response (DNS, reset, timeout...)."""

    def __init__(self, method: str, path: str, original_exception: Exception):
        detail = str(original_exception) or type(original_exception).__name__
        super().__init__(
            f"{method} {path} transport error: {detail}",
            error_code="REMOTE_002",
            context={"method": method, "path": path},
            original_exception=original_exception,
        )
        self.method = method
        self.path = path


class InvalidResponseError(CommunityMCPError):
    """A success response whose body is not valid JSON."""

    def __init__(self, method: str, path: str, original_exception: Exception):
        super().__init__(
            f"{method} {path} returned a response that is not valid JSON",
            error_code="REMOTE_003",
            context={"method": method, "path": path},
            original_exception=original_exception,
        )
        self.method = method
        self.path = path
