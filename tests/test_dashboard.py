from dash import dcc, html

from config.toolkit_config import CONFIG
from coolkit.utils import io as io_utils
from dashboard.app import _run_options, app, build_ascii_chart, build_gallery, build_run_panel, load_run


def test_ascii_chart_has_one_row_per_sample():
    chart = build_ascii_chart("easeIn", "bar", 10)
    rows = chart.splitlines()
    assert len(rows) == CONFIG.SAMPLE_STEPS
    assert rows[0] == " 0.00 | █"
    assert rows[-1] == " 1.00 | " + "█" * 10


def test_gallery_highlights_selected_curve():
    figure, chart = build_gallery("easeInOut", "line", 20)
    widths = {trace.name: trace.line.width for trace in figure.data}
    assert widths == {"easeIn": 1, "easeOut": 1, "easeInOut": 3}
    assert chart.splitlines()[-1].endswith("●")


def test_app_layout_is_built():
    assert app.title == "Easing Gallery"
    assert app.layout is not None


def _saved_run(tmp_path):
    from coolkit.plotter import GraphKind
    from coolkit.preview import run_preview

    io_utils.clear_load_caches()
    run_path = io_utils.create_run_directory(timestamp="2024-05-01_10-00-00", root=tmp_path)
    return run_preview(output_dir=run_path, graph_kind=GraphKind.LINE)


def test_saved_previews_are_listed_and_loaded(tmp_path):
    run_path = _saved_run(tmp_path)

    assert _run_options(tmp_path) == [{"label": run_path.name, "value": run_path.name}]
    run_data = load_run(run_path.name, root=tmp_path)
    assert run_data["path"] == run_path
    assert list(run_data["samples"].columns) == ["progress", "easeIn", "easeOut", "easeInOut"]
    assert run_data["settings"]["GRAPH_KIND"] == "line"


def test_run_panel_rebuilds_charts_from_saved_settings(tmp_path):
    run_path = _saved_run(tmp_path)
    panel = build_run_panel(load_run(run_path.name, root=tmp_path))

    graphs = [child for child in panel.children if isinstance(child, dcc.Graph)]
    assert len(graphs) == 1
    assert [trace.name for trace in graphs[0].figure.data] == ["easeIn", "easeOut", "easeInOut"]
    text = next(child for child in panel.children if isinstance(child, html.Pre)).children
    assert "== easeIn" in text
    assert " 1.00 | " + " " * (CONFIG.PLOT_WIDTH - 1) + "●" in text


def test_missing_run_reports_load_failure(tmp_path):
    assert load_run("nope", root=tmp_path) == {}
    assert build_run_panel({}).children == "Preview run could not be loaded."
