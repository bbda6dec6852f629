"""
Trigonometric easing curves and the easer factory.

Each curve maps normalised progress in [0, 1] to an eased value in [0, 1].
Easers gate their input to [0, 1] before applying the curve, so any real
input (or array of inputs) yields a result inside the unit interval.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, Union

import numpy as np

from coolkit.utils.math_tools import Gateable, create_number_gate

logger = logging.getLogger(__name__)

HALF_PI = math.pi / 2.0


class EasingCurve(str, Enum):
    """Closed set of named easing curves."""

    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"


def ease_in(p: Gateable) -> Gateable:
    """sin(p * pi/2): fast start, slow finish."""
    return np.sin(p * HALF_PI)


def ease_out(p: Gateable) -> Gateable:
    """cos(p * pi/2 + pi) + 1: slow start, fast finish."""
    return np.cos(p * HALF_PI + math.pi) + 1.0


def ease_in_out(p: Gateable) -> Gateable:
    """(cos(p * pi + pi) + 1) / 2: slow at both ends."""
    return (np.cos(p * math.pi + math.pi) + 1.0) / 2.0


EASING_CURVES: Dict[EasingCurve, Callable[[Gateable], Gateable]] = {
    EasingCurve.EASE_IN: ease_in,
    EasingCurve.EASE_OUT: ease_out,
    EasingCurve.EASE_IN_OUT: ease_in_out,
}


def resolve_curve(name: Union[str, EasingCurve]) -> EasingCurve:
    """Map a curve name onto `EasingCurve`, raising ValueError for unknown names."""
    try:
        return EasingCurve(name)
    except ValueError:
        valid = ", ".join(curve.value for curve in EasingCurve)
        raise ValueError(f"Unknown easing curve {name!r}; expected one of: {valid}") from None


def create_easer(curve_name: Union[str, EasingCurve]) -> Callable[[Gateable], Gateable]:
    """
    Return a reusable function for easing a changing value.

    The generated function is passed a number (or array) that is first gated
    to [0, 1] and then run through the selected curve. Unknown curve names
    fail here, at construction, rather than when the easer is first called.
    """
    curve = resolve_curve(curve_name)
    easing_function = EASING_CURVES[curve]
    number_gate = create_number_gate(0.0, 1.0)
    logger.debug("Creating easer for curve %s", curve.value)

    def easer(uneased_percentage: Gateable) -> Gateable:
        return easing_function(number_gate(uneased_percentage))

    return easer
