"""
Small, stateless helpers for client-side visual programming.

Modules cover numeric gating and easing, text plotting, call wrappers,
batched image preloading, runtime type assertions, and array
classification, plus sampling/figure tooling for previewing curves.
"""

from __future__ import annotations

__all__ = [
    "classify",
    "easing",
    "image_loader",
    "plotter",
    "preview",
    "sampling",
    "validation",
    "wrappers",
]
