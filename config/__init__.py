"""
Configuration package holding the toolkit-wide defaults.
"""

from __future__ import annotations

__all__ = [
    "toolkit_config",
]
