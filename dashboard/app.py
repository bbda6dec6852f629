"""
Dash application providing an interactive easing and plotter gallery.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# Allow running this module directly via `python dashboard/app.py`
if __package__ in {None, ""}:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

import plotly.graph_objects as go
from dash import Dash, Input, Output, dcc, html

from config.toolkit_config import CONFIG
from coolkit.easing import EasingCurve
from coolkit.plotter import GraphKind, render_series
from coolkit.plotting.easing_curves import build_easing_figure, build_gate_figure
from coolkit.preview import format_charts, render_curve_charts
from coolkit.sampling import sample_easing_curves, sample_gate
from coolkit.utils import io as io_utils

logger = logging.getLogger(__name__)

PANEL_STYLE = {
    "border": "1px solid #dee2e6",
    "borderRadius": "8px",
    "padding": "12px 16px",
    "backgroundColor": "#fff",
}

RUNS_ROOT = Path(CONFIG.OUTPUT_DIR)
SETTINGS_FIELDS = [
    ("SAMPLE_STEPS", "Samples per curve"),
    ("PLOT_WIDTH", "Plot width"),
    ("GRAPH_KIND", "Graph kind"),
]


def build_ascii_chart(curve: str, graph_kind: str, width: int, steps: int = CONFIG.SAMPLE_STEPS) -> str:
    """Render one curve as rows of text, prefixed with the progress value."""
    samples = sample_easing_curves(steps, [curve])
    rows = render_series(samples[curve].to_numpy(), graph_kind, width)
    return "\n".join(f"{p:5.2f} | {row}" for p, row in zip(samples["progress"], rows))


def build_gallery(curve: str, graph_kind: str, width: int) -> Tuple[go.Figure, str]:
    samples = sample_easing_curves(CONFIG.SAMPLE_STEPS)
    return build_easing_figure(samples, highlight=curve), build_ascii_chart(curve, graph_kind, width)


def _run_options(root: Path = RUNS_ROOT) -> List[Dict[str, str]]:
    return [{"label": path.name, "value": path.name} for path in io_utils.list_run_directories(root)]


def load_run(run_name: str, root: Path = RUNS_ROOT) -> Dict[str, Any]:
    run_path = root / run_name
    if not run_path.exists():
        return {}
    return {
        "path": run_path,
        "samples": io_utils.load_csv(run_path / "curves.csv"),
        "settings": io_utils.load_json(run_path / "settings.json"),
    }


def _settings_table(settings: Dict[str, Any]) -> html.Table:
    rows = [
        html.Tr([html.Td(label), html.Td(str(settings.get(key, getattr(CONFIG, key, "N/A"))))])
        for key, label in SETTINGS_FIELDS
    ]
    return html.Table([html.Tbody(rows)], style={"width": "100%", "borderCollapse": "collapse"})


def build_run_panel(run_data: Dict[str, Any]) -> html.Div:
    """Saved curves, their text rendering, and the settings that produced them."""
    if not run_data:
        return html.Div("Preview run could not be loaded.", style={"color": "red"})

    settings = run_data.get("settings", {})
    samples = run_data.get("samples")
    children: List[Any] = [html.Div(f"Run folder: {run_data['path'].name}", style={"fontWeight": "600"})]
    if samples is None or samples.empty:
        children.append(html.Div("No curve samples stored for this run.", style={"color": "#6c757d"}))
    else:
        graph_kind = settings.get("GRAPH_KIND", GraphKind.BAR.value)
        width = int(settings.get("PLOT_WIDTH", CONFIG.PLOT_WIDTH))
        charts = render_curve_charts(samples, graph_kind, width)
        children.append(dcc.Graph(figure=build_easing_figure(samples)))
        children.append(html.Pre("\n".join(format_charts(samples, charts)), style={"fontFamily": "monospace"}))
    children.append(_settings_table(settings))
    return html.Div(children, style={**PANEL_STYLE, "display": "grid", "gap": "12px"})


def _control(label: str, component: Any) -> html.Div:
    return html.Div(
        [html.Div(label, style={"fontSize": "0.85rem", "color": "#6c757d"}), component],
        style={"minWidth": "220px"},
    )


curve_options: List[dict] = [{"label": curve.value, "value": curve.value} for curve in EasingCurve]
kind_options: List[dict] = [{"label": kind.value, "value": kind.value} for kind in GraphKind]
run_options = _run_options()

app = Dash(__name__)
app.title = "Easing Gallery"

app.layout = html.Div(
    [
        html.H1("Easing Gallery"),
        html.Div(
            [
                _control(
                    "Curve",
                    dcc.Dropdown(id="curve-selector", options=curve_options, value=EasingCurve.EASE_IN.value, clearable=False),
                ),
                _control(
                    "Graph kind",
                    dcc.RadioItems(id="kind-selector", options=kind_options, value=GraphKind.BAR.value, inline=True),
                ),
                _control(
                    "Width",
                    dcc.Slider(id="width-slider", min=10, max=80, step=5, value=CONFIG.PLOT_WIDTH),
                ),
            ],
            style={"display": "flex", "gap": "16px", "marginBottom": "16px", "flexWrap": "wrap"},
        ),
        html.Div(
            [
                dcc.Graph(id="curve-graph"),
                dcc.Graph(figure=build_gate_figure(sample_gate(0.0, 1.0, -0.5, 1.5), 0.0, 1.0)),
            ],
            style={"display": "grid", "gridTemplateColumns": "repeat(auto-fit, minmax(320px, 1fr))", "gap": "16px"},
        ),
        html.Div(
            [
                html.H4("Text rendering", style={"marginTop": "0"}),
                html.Pre(id="ascii-chart", style={"fontFamily": "monospace", "lineHeight": "1.1"}),
            ],
            style={**PANEL_STYLE, "marginTop": "16px"},
        ),
        html.H2("Saved Previews", style={"marginTop": "24px"}),
        html.Div(
            [
                html.Span("Select run:", style={"fontWeight": "600"}),
                dcc.Dropdown(
                    id="run-selector",
                    options=run_options,
                    value=run_options[0]["value"] if run_options else None,
                    style={"minWidth": "280px"},
                ),
            ],
            style={"display": "flex", "alignItems": "center", "gap": "12px", "marginBottom": "16px"},
        ),
        html.Div(id="run-content"),
    ],
    style={"maxWidth": "1280px", "margin": "0 auto", "padding": "24px"},
)


@app.callback(
    Output("curve-graph", "figure"),
    Output("ascii-chart", "children"),
    Input("curve-selector", "value"),
    Input("kind-selector", "value"),
    Input("width-slider", "value"),
)
def render_gallery(curve: str, graph_kind: str, width: int) -> Tuple[go.Figure, str]:
    logger.debug("Rendering gallery: curve=%s kind=%s width=%s", curve, graph_kind, width)
    return build_gallery(curve, graph_kind, int(width))


@app.callback(Output("run-content", "children"), Input("run-selector", "value"))
def render_run(run_name: Optional[str]) -> Any:
    if not run_name:
        return html.Div(
            "No preview run selected. Execute `python -m coolkit.preview` to generate one.",
            style={"color": "#6c757d"},
        )
    return build_run_panel(load_run(run_name))


if __name__ == "__main__":
    logging.basicConfig(level=CONFIG.LOG_LEVEL)
    app.run(debug=False)
