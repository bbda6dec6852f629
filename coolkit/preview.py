"""
Preview entrypoint: samples every easing curve, renders ASCII charts, and
stores the results in a timestamped folder.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from config.toolkit_config import CONFIG, ToolkitConfig
from coolkit.easing import EasingCurve
from coolkit.plotter import GraphKind, create_plotter
from coolkit.sampling import sample_easing_curves
from coolkit.utils import io as io_utils

logger = logging.getLogger(__name__)


def render_curve_charts(
    samples: pd.DataFrame,
    graph_kind: GraphKind = GraphKind.BAR,
    graph_width: int = CONFIG.PLOT_WIDTH,
) -> Dict[str, List[str]]:
    """Render each curve column of *samples* into rows of text."""
    charts: Dict[str, List[str]] = {}
    for column in samples.columns:
        if column == "progress":
            continue
        rows: List[str] = []
        plot = create_plotter(graph_kind, graph_width, rows.append)
        for value in samples[column].to_numpy():
            plot(float(value))
        charts[column] = rows
    return charts


def format_charts(samples: pd.DataFrame, charts: Dict[str, List[str]]) -> List[str]:
    """Lay out charts with a header per curve and the progress value per row."""
    lines: List[str] = []
    progress = samples["progress"].to_numpy()
    for name, rows in charts.items():
        lines.append(f"== {name}")
        for p, row in zip(progress, rows):
            lines.append(f"{p:5.2f} | {row}")
        lines.append("")
    return lines


def run_preview(
    cfg: ToolkitConfig = CONFIG,
    output_dir: Optional[Path] = None,
    graph_kind: GraphKind = GraphKind.BAR,
) -> Path:
    """Execute a full preview run and return the output directory."""
    samples = sample_easing_curves(cfg.SAMPLE_STEPS, list(EasingCurve))
    charts = render_curve_charts(samples, graph_kind, cfg.PLOT_WIDTH)
    lines = format_charts(samples, charts)
    for line in lines:
        logger.info(line)

    run_path = output_dir or io_utils.create_run_directory(root=Path(cfg.OUTPUT_DIR))
    io_utils.clear_load_caches()
    io_utils.save_dataframe(run_path / "curves.csv", samples)
    io_utils.save_text(run_path / "charts.txt", lines)
    settings = cfg.as_dict()
    settings["GRAPH_KIND"] = GraphKind(graph_kind).value
    io_utils.save_json(run_path / "settings.json", settings)
    return run_path


if __name__ == "__main__":
    logging.basicConfig(level=CONFIG.LOG_LEVEL, format="%(message)s")
    run_dir = run_preview()
    print(f"Preview complete. Results stored in: {run_dir}")
