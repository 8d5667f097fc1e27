"""Debug tracing utilities for the grid engine.

Set GRIDENGINE_DEBUG=1 to send engine logs to the console. The DEBUG_PERF flag
controls whether performance timing is logged.

Usage:
    from .debug_trace import logger, perf_timer

    # Simple logging
    logger.debug("Commit rejected: %s", message)

    # Performance timing (only logs if DEBUG_PERF is True)
    with perf_timer("view_pipeline", row_count=5000):
        rows = pipeline.run(...)

    # Or use the decorator
    @log_perf
    def expensive_function():
        pass
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Callable
from contextlib import contextmanager
from functools import wraps
from typing import Any

DEBUG_ENV_VAR = "GRIDENGINE_DEBUG"

# Global flag to enable/disable performance tracing
DEBUG_PERF = os.environ.get(DEBUG_ENV_VAR, "") not in ("", "0")

# Create package logger
logger = logging.getLogger("gridengine")


def setup_debug_logging(force: bool = False) -> None:
    """Configure console logging for debug mode.

    Does nothing unless GRIDENGINE_DEBUG is set or force is True, so an
    embedding application keeps control of its own logging setup.

    Args:
        force: Configure even when the environment variable is unset
    """
    # Only configure if not already configured
    if logger.handlers:
        return

    is_debug = force or DEBUG_PERF
    if not is_debug or sys.stdout is None:
        return

    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _log_elapsed(label: str, start: float) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug(f"PERF: {label} took {elapsed_ms:.2f}ms")


@contextmanager
def perf_timer(operation: str, row_count: int | None = None):
    """Context manager for timing operations.

    Args:
        operation: Name of the operation being timed
        row_count: Optional row count for context

    Example:
        with perf_timer("display_rows", row_count=5000):
            engine.display_rows
    """
    if not DEBUG_PERF:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        label = operation if row_count is None else f"{operation} ({row_count} rows)"
        _log_elapsed(label, start)


def log_perf(func: Callable) -> Callable:
    """Decorator to log function performance.

    Example:
        @log_perf
        def reparent(self, ...):
            ...
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not DEBUG_PERF:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func.__qualname__, start)

    return wrapper


# Initialize logging when module is imported
setup_debug_logging()
