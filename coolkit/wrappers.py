"""
Higher-order helpers that wrap plain callables.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)


def create_random_function_caller(
    functions: Sequence[Callable[..., Any]],
    rng: Optional[random.Random] = None,
) -> Callable[..., Any]:
    """
    Return a function that forwards each call to one of *functions*.

    The target is drawn uniformly and independently on every call; all
    arguments are passed through untouched. Pass *rng* for reproducible
    selection.
    """
    candidates = list(functions)
    if not candidates:
        raise ValueError("create_random_function_caller() needs at least one function")
    source = rng if rng is not None else random

    def random_function_caller(*args: Any, **kwargs: Any) -> Any:
        index = math.floor(source.random() * len(candidates))
        return candidates[index](*args, **kwargs)

    return random_function_caller


class BreakerFunction:
    """
    Rate-limiting wrapper: forwards at most *limit* calls until reset.

    Calls beyond the limit are dropped silently and return None.
    """

    def __init__(self, fn: Callable[..., Any], limit: int) -> None:
        self.fn = fn
        self.limit = limit
        self.call_count = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.call(*args, **kwargs)

    def call(self, *args: Any, **kwargs: Any) -> Any:
        if self.call_count >= self.limit:
            logger.debug("Breaker for %r tripped; dropping call", self.fn)
            return None
        self.call_count += 1
        return self.fn(*args, **kwargs)

    def reset(self) -> None:
        self.call_count = 0

    @property
    def remaining(self) -> int:
        return max(self.limit - self.call_count, 0)

    @property
    def tripped(self) -> bool:
        return self.call_count >= self.limit

    def __repr__(self) -> str:
        return f"BreakerFunction({self.fn!r}, limit={self.limit}, call_count={self.call_count})"


def create_breaker_function(fn: Callable[..., Any], limit: int) -> BreakerFunction:
    """Wrap *fn* so it runs at most *limit* times between resets."""
    return BreakerFunction(fn, limit)
