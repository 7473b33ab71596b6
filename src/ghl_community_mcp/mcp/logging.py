"""MCP-specific logging.

Records per-tool execution metrics and logs protocol payloads with secrets
masked.
"""

import json
import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..utils.logging_config import mask_sensitive_data


@dataclass
class MCPMetrics:
    """Metrics for the last execution of a tool."""

    operation: str
    start_time: float
    end_time: float
    duration_ms: float
    success: bool
    error: Optional[str] = None


class MCPLogger:
    """Specialized logger for MCP tool calls."""

    def __init__(self, name: str = "ghl_community_mcp.mcp"):
        self.logger = logging.getLogger(name)
        self.metrics: Dict[str, MCPMetrics] = {}

    def sanitize_message(self, message: Any) -> str:
        return json.dumps(mask_sensitive_data(message), default=str)

    def log_protocol_message(
        self, direction: str, message: Any, level: int = logging.DEBUG
    ) -> None:
        """Log an MCP payload with sensitive fields masked."""
        self.logger.log(
            level,
            f"MCP {direction}: {self.sanitize_message(message)}",
            extra={"extra_data": {"mcp_direction": direction}},
        )

    def log_tool_execution(
        self,
        tool_name: str,
        duration_ms: float,
        success: bool,
        error: Optional[str] = None,
    ) -> None:
        """Log tool execution with metrics."""
        end_time = time.time()
        metrics = MCPMetrics(
            operation=f"tool_{tool_name}",
            start_time=end_time - (duration_ms / 1000),
            end_time=end_time,
            duration_ms=duration_ms,
            success=success,
            error=error,
        )
        self.metrics[tool_name] = metrics

        log_level = logging.INFO if success else logging.WARNING
        self.logger.log(
            log_level,
            f"Tool execution: {tool_name} ({'success' if success else 'failed'}) "
            f"duration={duration_ms:.2f}ms{f' error={error}' if error else ''}",
            extra={"extra_data": {"metrics": asdict(metrics)}},
        )

    def get_metrics(self) -> Dict[str, MCPMetrics]:
        """Get collected metrics."""
        return self.metrics.copy()


# Global MCP logger instance
mcp_logger = MCPLogger()
