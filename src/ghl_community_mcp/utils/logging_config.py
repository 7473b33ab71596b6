import contextvars
import json
import logging
import sys
import time
import traceback
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import structlog

from .config_types import Settings

# Type variable for decorator
F = TypeVar("F", bound=Callable[..., Any])

operation_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "operation", default=None
)

# Keys whose values never reach a log line
SENSITIVE_PATTERNS = {
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
    "credentials",
    "cookie",
    "bearer",
}

MASK = "***MASKED***"


def mask_sensitive_data(data: Any, additional_patterns: Optional[set] = None) -> Any:
    """
    Recursively mask sensitive information in data structures.

    Args:
        data: Data to sanitize
        additional_patterns: Additional sensitive field patterns

    Returns:
        Sanitized data with sensitive fields masked
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns.union(additional_patterns)

    def _mask_recursive(obj: Any) -> Any:
        if isinstance(obj, dict):
            return {
                k: MASK
                if isinstance(k, str) and any(p in k.lower() for p in patterns)
                else _mask_recursive(v)
                for k, v in obj.items()
            }
        elif isinstance(obj, list):
            return [_mask_recursive(item) for item in obj]
        elif isinstance(obj, tuple):
            return tuple(_mask_recursive(item) for item in obj)
        else:
            return obj

    return _mask_recursive(data)


class JsonFormatter(logging.Formatter):
    """JSON formatter with the current operation and sensitive data masking."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "operation": operation_var.get(),
        }

        if record.exc_info:
            log_record["exception"] = "".join(
                traceback.format_exception(*record.exc_info)
            )

        extra_data = getattr(record, "extra_data", None)
        if isinstance(extra_data, dict):
            log_record.update(extra_data)

        return json.dumps(mask_sensitive_data(log_record), default=str)


def log_performance(
    operation_name: Optional[str] = None,
    min_duration_ms: float = 0.0,
) -> Callable[[F], F]:
    """
    Decorator to log coroutine execution time at DEBUG level.

    Args:
        operation_name: Name of the operation (defaults to the function name)
        min_duration_ms: Minimum duration in ms to log a successful call
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            op_name = operation_name or f"{func.__module__}.{func.__name__}"
            start_time = time.time()
            token = operation_var.set(op_name)
            logger = logging.getLogger(func.__module__)

            try:
                result = await func(*args, **kwargs)
                duration_ms = (time.time() - start_time) * 1000
                if duration_ms >= min_duration_ms:
                    logger.debug(
                        f"Completed {op_name}",
                        extra={
                            "extra_data": {
                                "duration_ms": round(duration_ms, 2),
                                "success": True,
                            }
                        },
                    )
                return result
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                logger.debug(
                    f"Failed {op_name}",
                    extra={
                        "extra_data": {
                            "duration_ms": round(duration_ms, 2),
                            "success": False,
                            "error_type": type(e).__name__,
                        }
                    },
                )
                raise
            finally:
                operation_var.reset(token)

        return async_wrapper  # type: ignore

    return decorator


def configure_logging(
    settings: Settings,
    log_file: Optional[str] = None,
    structured: Optional[bool] = None,
    log_level_override: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Everything goes to stderr: stdout carries the MCP stdio transport.

    Args:
        settings: Application settings.
        log_file: Optional path to a log file (defaults to ``settings.log_file``).
        structured: If True, logs will be in JSON format (defaults to settings).
        log_level_override: Optional log level string to override settings.
    """
    level_name = (log_level_override or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    structured = settings.structured_logging if structured is None else structured
    log_file = log_file or settings.log_file

    # structlog's default factory prints to stdout, so it is always configured
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer()
            if structured
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    if structured:
        console_formatter: logging.Formatter = JsonFormatter()
        file_formatter: logging.Formatter = JsonFormatter()
    else:
        console_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
        )
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - [%(levelname)s] - %(filename)s:%(lineno)d - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    # httpx logs every request URL at INFO
    for lib_name in ("httpx", "httpcore"):
        logging.getLogger(lib_name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={
            "extra_data": {
                "level": logging.getLevelName(log_level),
                "structured": structured,
                "file_logging": log_file is not None,
            }
        },
    )
