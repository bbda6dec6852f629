"""
Text renderers for quick visual checks of numeric sequences.

A plotter turns a percentage into a fixed-width bar or dotted-line segment
and hands the string to an output sink (``print``, ``logger.info``,
``list.append`` ...). Useful for eyeballing animations and easing curves
in a terminal or log file.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from config.toolkit_config import CONFIG

logger = logging.getLogger(__name__)

Sink = Callable[[str], object]


class GraphKind(str, Enum):
    """Closed set of supported graph renderings."""

    BAR = "bar"
    LINE = "line"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return int(math.floor(value + 0.5))


def render_bar(length: int, glyph: str = CONFIG.BAR_GLYPH) -> str:
    """Solid run of *length* glyphs; never shorter than one glyph."""
    return glyph * max(length - 1, 0) + glyph


def render_line(length: int, dot: str = CONFIG.DOT_GLYPH, blank: str = CONFIG.BLANK_GLYPH) -> str:
    """Dot placed at position *length*; never shorter than one glyph."""
    return blank * max(length - 1, 0) + dot


GRAPH_RENDERERS: Dict[GraphKind, Callable[[int], str]] = {
    GraphKind.BAR: render_bar,
    GraphKind.LINE: render_line,
}


def resolve_graph_kind(kind: Union[str, GraphKind]) -> GraphKind:
    """Map a graph name onto `GraphKind`, raising ValueError for unknown names."""
    try:
        return GraphKind(kind)
    except ValueError:
        valid = ", ".join(item.value for item in GraphKind)
        raise ValueError(f"Unknown graph kind {kind!r}; expected one of: {valid}") from None


def create_plotter(
    graph_kind: Union[str, GraphKind],
    graph_width: float,
    output_function: Sink,
) -> Callable[[float], None]:
    """
    Return a reusable function that draws a bar or dotted-line segment.

    The generated function takes a percentage of *graph_width*, renders
    ``round(percentage * graph_width)`` glyphs and passes the string to
    *output_function* exactly once. Percentages are not clamped here; compose
    with a number gate when the input may leave [0, 1].
    """
    kind = resolve_graph_kind(graph_kind)
    renderer = GRAPH_RENDERERS[kind]
    logger.debug("Creating %s plotter with width %s", kind.value, graph_width)

    def plot(percentage_of_graph_width: float) -> None:
        line_size = round_half_up(percentage_of_graph_width * graph_width)
        output_function(renderer(line_size))

    return plot


def render_series(
    values: Iterable[float],
    graph_kind: Union[str, GraphKind] = GraphKind.BAR,
    graph_width: float = CONFIG.PLOT_WIDTH,
) -> List[str]:
    """Render every percentage in *values* and return the rows in order."""
    rows: List[str] = []
    plot = create_plotter(graph_kind, graph_width, rows.append)
    for value in values:
        plot(float(value))
    return rows
