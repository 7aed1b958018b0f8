"""Timing helpers for build steps."""

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar, overload

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


@contextmanager
def stopwatch(label: str) -> Iterator[None]:
    """Log ``[PROFILE] <label> took Xs`` at INFO when the block exits, even on error."""
    start_time = time.perf_counter()
    try:
        yield
    finally:
        logger.info(f"[PROFILE] {label} took {time.perf_counter() - start_time:.3f}s")


@overload
def timed(func: Callable[P, R], /) -> Callable[P, R]: ...
@overload
def timed(label: str, /) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def timed(arg, /):
    """Decorator timing every call of a build step.

    Usage:
        @timed
        def apply_copy_rules(rules): ...

        @timed("image build")
        def run_build(): ...

    The label defaults to the function's qualified name.
    """

    def decorate(func: Callable[P, R], label: str) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with stopwatch(label):
                return func(*args, **kwargs)

        return wrapper

    if isinstance(arg, str):
        return lambda func: decorate(func, arg)
    return decorate(arg, arg.__qualname__)
