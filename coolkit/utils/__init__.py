"""
Shared numeric and filesystem helpers.
"""

from __future__ import annotations

__all__ = [
    "io",
    "math_tools",
]
