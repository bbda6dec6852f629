import json

import pandas as pd

from config.toolkit_config import CONFIG, get_config
from coolkit.plotter import GraphKind
from coolkit.preview import format_charts, render_curve_charts, run_preview
from coolkit.sampling import sample_easing_curves
from coolkit.utils import io as io_utils

BLOCK = "█"


def test_render_curve_charts_scale_to_width():
    samples = sample_easing_curves(3)
    charts = render_curve_charts(samples, GraphKind.BAR, 8)
    assert set(charts) == {"easeIn", "easeOut", "easeInOut"}
    assert charts["easeIn"][0] == BLOCK
    assert charts["easeIn"][-1] == BLOCK * 8
    assert charts["easeInOut"][1] == BLOCK * 4


def test_format_charts_prefixes_progress():
    samples = sample_easing_curves(2, ["easeIn"])
    lines = format_charts(samples, {"easeIn": ["a", "b"]})
    assert lines == ["== easeIn", " 0.00 | a", " 1.00 | b", ""]


def test_run_preview_writes_outputs(tmp_path):
    run_path = run_preview(output_dir=tmp_path, graph_kind=GraphKind.LINE)
    assert run_path == tmp_path

    curves = pd.read_csv(tmp_path / "curves.csv")
    assert len(curves) == CONFIG.SAMPLE_STEPS
    charts = (tmp_path / "charts.txt").read_text(encoding="utf-8")
    assert "== easeInOut" in charts
    settings = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert settings["PLOT_WIDTH"] == CONFIG.PLOT_WIDTH
    assert settings["GRAPH_KIND"] == "line"


def test_run_directories_are_unique(tmp_path):
    first = io_utils.create_run_directory(timestamp="2024-01-01_00-00-00", root=tmp_path)
    second = io_utils.create_run_directory(timestamp="2024-01-01_00-00-00", root=tmp_path)
    assert first.name == "preview_2024-01-01_00-00-00"
    assert second.name == "preview_2024-01-01_00-00-00_1"
    assert io_utils.list_run_directories(tmp_path) == [second, first]


def test_loaders_handle_missing_files(tmp_path):
    io_utils.clear_load_caches()
    assert io_utils.load_json(tmp_path / "nope.json") == {}
    assert io_utils.load_csv(tmp_path / "nope.csv").empty


def test_config_accessor():
    assert get_config() is CONFIG
    assert CONFIG.as_dict()["BAR_GLYPH"] == BLOCK
