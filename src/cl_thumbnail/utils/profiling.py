"""Timing helpers for thumbnail operations."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to log how long a call took, at DEBUG level.

    The elapsed time is logged on every exit path, including when the
    wrapped function raises.

    Usage:
        @timed
        def generate_from_file(path):
            ...
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.debug(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")

    return wrapper
