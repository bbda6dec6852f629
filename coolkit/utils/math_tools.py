"""
Reusable numeric helpers shared by the easing and plotting modules.

Only lightweight utilities are placed here. The gate built by
`create_number_gate` is NumPy-agnostic: scalars stay scalars, while arrays,
pandas Series and other sequences are clipped element-wise and returned as
ndarrays.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

Number = Union[int, float]
Gateable = Union[Number, Sequence[float], np.ndarray]


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Clamp *value* to the inclusive range [low, high].

    Values already inside the range (bounds included) are returned unchanged,
    so ``clamp(clamp(x, a, b), a, b) == clamp(x, a, b)``.
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def create_number_gate(minimum: Number, maximum: Number) -> Callable[[Gateable], Gateable]:
    """
    Return a reusable function that limits numbers to [minimum, maximum].

    A number below *minimum* returns *minimum*, a number above *maximum*
    returns *maximum*, anything else passes through untouched.

    Precondition: ``minimum <= maximum``. This is not validated; an inverted
    range gives unspecified results.
    """
    logger.debug("Creating number gate over [%s, %s]", minimum, maximum)

    def gate(value: Gateable) -> Gateable:
        if np.ndim(value) > 0:
            return np.clip(np.asarray(value, dtype=float), minimum, maximum)
        return clamp(value, minimum, maximum)

    return gate
