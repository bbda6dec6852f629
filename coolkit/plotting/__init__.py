"""
plotly figure builders used by the dashboard.
"""

from __future__ import annotations

__all__ = [
    "easing_curves",
]
