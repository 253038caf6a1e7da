"""Timing utilities for measuring code execution time."""

import logging
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar

from micrometa.logger import logger

__all__ = ["timeit", "timer"]

P = ParamSpec("P")
R = TypeVar("R")


@contextmanager
def timer(name: str = "Operation", log_level: int = logging.INFO) -> Generator[None]:
    """Context manager for timing code blocks.

    Args:
        name: Name of the operation being timed
        log_level: Logging level to use (default: INFO)

    Example:
        >>> with timer("Document fetch"):
        ...     fetched = fetcher.fetch(url)

        >>> with timer("mf2 parse", logging.DEBUG):
        ...     result = document.parse()

    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed_time = time.perf_counter() - start_time
        logger.log(log_level, "%s took %.4f seconds", name, elapsed_time)


def timeit(
    name: str | None = None, log_level: int = logging.INFO
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Time function execution.

    Args:
        name: Custom name for the operation (default: uses function name)
        log_level: Logging level to use (default: INFO)

    Example:
        >>> @timeit()
        ... def refine_everything():
        ...     pass

        >>> @timeit("Microformats2 parsing", logging.DEBUG)
        ... def parse(self):
        ...     pass

    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            operation_name = name or f"{func.__module__}.{func.__name__}"
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_time = time.perf_counter() - start_time
                logger.log(log_level, "%s took %.4f seconds", operation_name, elapsed_time)
        return wrapper
    return decorator
