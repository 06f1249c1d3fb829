"""Structured logging utilities with context support."""

import functools
import logging
import threading
import time
import uuid
from typing import Any, Callable, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def generate_correlation_id() -> str:
    """
    Generate a unique correlation ID for tracking requests.

    Returns:
        UUID string to use as correlation ID
    """
    return str(uuid.uuid4())


def _current_context() -> Dict[str, Any]:
    return getattr(_thread_local, "context", {})


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields live in thread-local storage for the duration of the block and
    are attached to every record by ContextFilter.

    Example:
        with LogContext(driver="Jane Doe", period="03/2024"):
            logger.info("Building report")
    """

    def __init__(self, **kwargs):
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        self.previous_context = dict(_current_context())
        _thread_local.context = {**self.previous_context, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _current_context().items():
            setattr(record, key, value)
        return True


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


def log_rpc_call(method: str) -> Callable:
    """
    Decorator logging the outcome and duration of an RPC handler.

    Every call runs inside a LogContext carrying a fresh correlation ID and
    the method name. Success is logged at INFO, failures at ERROR with the
    error message; the exception is re-raised unchanged.

    Args:
        method: Fully-qualified RPC method name

    Example:
        @log_rpc_call("WorkdayService.GenerateMonthlyWorkdayReport")
        def generate_monthly_workday_report(self, request):
            ...
    """

    def decorator(f: Callable) -> Callable:
        logger = logging.getLogger(f.__module__)

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            with LogContext(
                correlation_id=generate_correlation_id(), rpc_method=method
            ):
                start = time.perf_counter()
                try:
                    result = f(*args, **kwargs)
                except Exception as e:
                    duration_ms = (time.perf_counter() - start) * 1000
                    logger.error(
                        f"RPC Method: {method} | Status: ERROR | "
                        f"Duration: {duration_ms:.0f}ms | Error: {_error_message(e)}"
                    )
                    raise

                duration_ms = (time.perf_counter() - start) * 1000
                logger.info(
                    f"RPC Method: {method} | Status: OK | Duration: {duration_ms:.0f}ms"
                )
                return result

        return wrapper

    return decorator
