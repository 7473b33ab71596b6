import functools
import logging
from contextlib import contextmanager
from typing import Any, Callable, Generator, Optional, Type, TypeVar

from .errors import BaseError

# Default logger for utilities if no specific logger is provided
module_logger = logging.getLogger(__name__)

_R = TypeVar("_R")  # Return type variable for error_handler


def _translate(
    error: Exception, error_type: Type[Exception], message: str, context: dict
) -> Exception:
    if issubclass(error_type, BaseError):
        try:
            return error_type(message, context=context, original_exception=error)
        except TypeError:
            # Subclasses with a narrower constructor
            return error_type(message)
    return error_type(f"{message}: {error}")


@contextmanager
def error_context(
    operation_name: str,
    logger: logging.Logger,
    error_type: Type[Exception],
    reraise: bool = True,
) -> Generator[None, None, None]:
    """Synchronous context manager for consistent error handling."""
    logger.debug(f"Starting operation: {operation_name}")
    try:
        yield
        logger.debug(f"Successfully completed operation: {operation_name}")
    except Exception as e:
        logger.error(f"Error during operation '{operation_name}': {e}", exc_info=True)
        if reraise:
            if isinstance(e, error_type):
                raise
            raise _translate(
                e, error_type, f"{operation_name} failed", {"operation": operation_name}
            ) from e


def error_handler(
    operation_name: str,
    error_type: Type[Exception],
    reraise: bool = True,
    logger: Optional[logging.Logger] = None,
) -> Callable[[Callable[..., _R]], Callable[..., Optional[_R]]]:
    """Decorator for consistent error handling in synchronous functions."""
    effective_logger = logger or module_logger

    def decorator(func: Callable[..., _R]) -> Callable[..., Optional[_R]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Optional[_R]:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                effective_logger.error(
                    f"Error in '{func.__name__}' during '{operation_name}': {e}",
                    exc_info=True,
                )
                if reraise:
                    if isinstance(e, error_type):
                        raise
                    raise _translate(
                        e,
                        error_type,
                        f"Operation '{operation_name}' failed",
                        {"function": func.__name__},
                    ) from e
                return None

        return wrapper

    return decorator
