"""
Plotting helpers for the easing gallery.

All functions operate on DataFrames produced by `coolkit.sampling` to keep
the plotting logic pure and side-effect free.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

CURVE_COLORS = {
    "easeIn": "#1f77b4",
    "easeOut": "#ff7f0e",
    "easeInOut": "#2ca02c",
}


def build_easing_figure(samples: pd.DataFrame, highlight: Optional[str] = None) -> go.Figure:
    """Line chart of every curve column against `progress`."""
    if samples.empty or "progress" not in samples.columns:
        return go.Figure()

    fig = go.Figure()
    for column in samples.columns:
        if column == "progress":
            continue
        emphasised = highlight is None or column == highlight
        fig.add_trace(
            go.Scatter(
                x=samples["progress"],
                y=samples[column],
                name=column,
                mode="lines+markers",
                line=dict(color=CURVE_COLORS.get(column, "#7f7f7f"), width=3 if emphasised else 1),
                opacity=1.0 if emphasised else 0.35,
            )
        )
    fig.update_layout(
        title="Easing Curves",
        xaxis_title="Progress",
        yaxis_title="Eased value",
        yaxis=dict(range=[-0.05, 1.05]),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0.0),
        height=360,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    return fig


def build_gate_figure(samples: pd.DataFrame, minimum: float, maximum: float) -> go.Figure:
    """Input vs gated output, with the gate bounds drawn as dashed lines."""
    if samples.empty:
        return go.Figure()

    fig = go.Figure(
        data=[
            go.Scatter(x=samples["input"], y=samples["input"], name="input", line=dict(color="#7f7f7f", dash="dot")),
            go.Scatter(x=samples["input"], y=samples["output"], name="gated", line=dict(color="#d62728")),
        ]
    )
    for bound in (minimum, maximum):
        fig.add_hline(y=bound, line=dict(color="#9467bd", dash="dash", width=1))
    fig.update_layout(
        title=f"Number Gate [{minimum:g}, {maximum:g}]",
        xaxis_title="Input",
        yaxis_title="Output",
        height=320,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    return fig
