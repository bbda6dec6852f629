import math

import pytest

from coolkit.plotting.easing_curves import build_easing_figure, build_gate_figure
from coolkit.sampling import sample_easing_curves, sample_gate


def test_sample_easing_curves_layout_and_values():
    samples = sample_easing_curves(5)
    assert list(samples.columns) == ["progress", "easeIn", "easeOut", "easeInOut"]
    assert samples["progress"].tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert samples["easeIn"].iloc[2] == pytest.approx(math.sin(math.pi / 4))
    assert samples["easeInOut"].iloc[2] == pytest.approx(0.5)


def test_sample_selected_curves_only():
    samples = sample_easing_curves(3, ["easeOut"])
    assert list(samples.columns) == ["progress", "easeOut"]


def test_sampling_rejects_bad_input():
    with pytest.raises(ValueError):
        sample_easing_curves(1)
    with pytest.raises(ValueError):
        sample_easing_curves(5, ["wobble"])
    with pytest.raises(ValueError):
        sample_gate(0.0, 1.0, -1.0, 2.0, steps=1)


def test_sample_gate_clips_outputs():
    samples = sample_gate(0.0, 1.0, -1.0, 2.0, steps=7)
    assert samples["output"].min() == 0.0
    assert samples["output"].max() == 1.0
    assert samples["input"].iloc[0] == -1.0


def test_easing_figure_has_one_trace_per_curve_and_highlights():
    fig = build_easing_figure(sample_easing_curves(11), highlight="easeOut")
    assert [trace.name for trace in fig.data] == ["easeIn", "easeOut", "easeInOut"]
    widths = {trace.name: trace.line.width for trace in fig.data}
    assert widths["easeOut"] == 3
    assert widths["easeIn"] == 1


def test_figures_handle_empty_frames():
    import pandas as pd

    assert len(build_easing_figure(pd.DataFrame()).data) == 0
    assert len(build_gate_figure(pd.DataFrame(), 0.0, 1.0).data) == 0


def test_gate_figure_traces():
    fig = build_gate_figure(sample_gate(0.0, 1.0, -0.5, 1.5), 0.0, 1.0)
    assert [trace.name for trace in fig.data] == ["input", "gated"]
    assert fig.layout.title.text == "Number Gate [0, 1]"
