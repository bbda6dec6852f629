"""
Tabulate easing curves and gates into DataFrames for plotting and export.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from config.toolkit_config import CONFIG
from coolkit.easing import EasingCurve, create_easer, resolve_curve
from coolkit.utils.math_tools import create_number_gate


def sample_easing_curves(
    steps: int = CONFIG.SAMPLE_STEPS,
    curves: Optional[Iterable[Union[str, EasingCurve]]] = None,
) -> pd.DataFrame:
    """Return a `progress` column over [0, 1] plus one eased column per curve."""
    if steps < 2:
        raise ValueError("steps must be at least 2")
    selected = [resolve_curve(name) for name in curves] if curves is not None else list(EasingCurve)
    progress = np.linspace(0.0, 1.0, steps)
    frame = pd.DataFrame({"progress": progress})
    for curve in selected:
        frame[curve.value] = create_easer(curve)(progress)
    return frame


def sample_gate(
    minimum: float,
    maximum: float,
    start: float,
    stop: float,
    steps: int = CONFIG.SAMPLE_STEPS,
) -> pd.DataFrame:
    """Return `input`/`output` columns showing a gate over [start, stop]."""
    if steps < 2:
        raise ValueError("steps must be at least 2")
    inputs = np.linspace(start, stop, steps)
    gate = create_number_gate(minimum, maximum)
    return pd.DataFrame({"input": inputs, "output": gate(inputs)})
