"""
Central configuration for the toolkit helpers, preview runs, and dashboard.

Defaults that influence rendering, image loading, and output locations are
defined here so there is a single source of truth. Every factory still takes
plain function parameters; these values are only the fallbacks used when a
caller does not pass one.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ToolkitConfig:
    """Container for rendering, loading, and output defaults."""

    # Plotting ---------------------------------------------------------------
    PLOT_WIDTH: int = 40  # Glyph count rendered at 100 %
    BAR_GLYPH: str = "█"  # Full block
    DOT_GLYPH: str = "●"  # Black circle
    BLANK_GLYPH: str = " "
    SAMPLE_STEPS: int = 21  # Rows per curve in previews

    # Image loading ----------------------------------------------------------
    HTTP_TIMEOUT_S: float = 10.0
    HTTP_FOLLOW_REDIRECTS: bool = True
    IMAGE_LOAD_TIMEOUT_S: Optional[float] = None  # None keeps the stall-forever behaviour
    COUNT_FAILED_LOADS: bool = False

    # Output & logging -------------------------------------------------------
    OUTPUT_DIR: str = "curve_out"
    LOG_LEVEL: str = "INFO"

    def as_dict(self) -> Dict[str, Any]:
        """Return configuration values as a mutable dictionary copy."""
        return dict(asdict(self))


CONFIG = ToolkitConfig()


def get_config() -> ToolkitConfig:
    """Convenience accessor for importing modules."""
    return CONFIG
