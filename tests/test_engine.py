"""Tests for the plotly engine and its defaults."""

from __future__ import annotations

import logging

import plotly.graph_objects as go
import pytest

import chartbridge
from chartbridge import Chart, Defaults, PlotlyEngine
from chartbridge.styleparam import DrawingStyle, MarkerSymbol, Mode, PatternShape, TextPosition


@pytest.fixture
def plotly_engine():
    return PlotlyEngine(defaults=Defaults(template=None, width=640, height=480))


def _trace(chart):
    assert isinstance(chart, Chart)
    assert len(chart.traces) == 1
    return chart.traces[0]


def test_scatter_uses_given_mode(plotly_engine):
    trace = _trace(plotly_engine.scatter([1, 2], [3, 4], Mode.LINES_MARKERS, name="run"))

    assert trace.type == "scatter"
    assert trace.mode == "lines+markers"
    assert trace.name == "run"
    assert tuple(trace.x) == (1, 2)
    assert tuple(trace.y) == (3, 4)


def test_point_mode_follows_text_position(plotly_engine):
    assert _trace(plotly_engine.point([1], [2])).mode == "markers"
    trace = _trace(plotly_engine.point([1], [2], text="a", text_position=TextPosition.TOP_CENTER))
    assert trace.mode == "markers+text"
    assert trace.textposition == "top center"


@pytest.mark.parametrize("options,mode", [
    ({}, "lines"),
    ({'show_markers': False}, "lines"),
    ({'show_markers': True}, "lines+markers"),
    ({'show_markers': True, 'multi_text_position': ["top left"]}, "lines+markers+text"),
])
def test_line_mode(plotly_engine, options, mode):
    assert _trace(plotly_engine.line([0, 1], [0, 1], **options)).mode == mode


def test_webgl_switches_trace_type(plotly_engine):
    assert _trace(plotly_engine.point([1], [2], use_webgl=True)).type == "scattergl"
    assert _trace(plotly_engine.point([1], [2], use_webgl=False)).type == "scatter"


def test_webgl_drops_stacking_options_with_warning(plotly_engine, caplog):
    with caplog.at_level(logging.WARNING, logger="chartbridge.engine"):
        trace = _trace(plotly_engine.point(
            [1, 2], [3, 4], use_webgl=True,
            stack_group="a", orientation="h", group_norm="percent", name="fast",
        ))

    assert trace.type == "scattergl"
    assert trace.name == "fast"
    assert "stack_group" in caplog.text
    assert "group_norm" in caplog.text


def test_webgl_line_keeps_fill(plotly_engine):
    trace = _trace(plotly_engine.line([0, 1], [0, 1], use_webgl=True, stack_group="a", fill="tozeroy"))

    assert trace.type == "scattergl"
    assert trace.fill == "tozeroy"


def test_one_shot_iterables_are_materialised(plotly_engine):
    trace = _trace(plotly_engine.line((v for v in [0, 1, 2]), map(float, [3, 4, 5])))
    assert tuple(trace.x) == (0, 1, 2)
    assert tuple(trace.y) == (3.0, 4.0, 5.0)

    bar = _trace(plotly_engine.column(iter([10, 20]), keys=(k for k in "ab")))
    assert tuple(bar.y) == (10, 20)
    assert tuple(bar.x) == ("a", "b")


def test_iterables_are_length_checked(plotly_engine):
    with pytest.raises(ValueError, match="same length"):
        plotly_engine.point((v for v in [1, 2, 3]), iter([1]))


def test_marker_options_layer_on_marker_object(plotly_engine):
    trace = _trace(plotly_engine.point(
        [1, 2], [3, 4],
        marker=go.scatter.Marker(size=12, color="blue"),
        marker_color="red",
        marker_symbol=MarkerSymbol.DIAMOND,
        marker_outline={"width": 2, "color": "black"},
        multi_opacity=[0.5, 1.0],
    ))

    assert trace.marker.size == 12
    assert trace.marker.color == "red"
    assert trace.marker.symbol == "diamond"
    assert trace.marker.line.width == 2
    assert tuple(trace.marker.opacity) == (0.5, 1.0)


def test_line_options_layer_on_line_object(plotly_engine):
    trace = _trace(plotly_engine.line(
        [0, 1], [0, 1],
        line={"shape": "spline", "width": 1},
        line_width=2.0,
        line_dash=DrawingStyle.DASH,
        line_color="green",
    ))

    assert trace.line.shape == "spline"
    assert trace.line.width == 2.0
    assert trace.line.dash == "dash"
    assert trace.line.color == "green"


def test_multi_value_wins_over_single_value(plotly_engine):
    trace = _trace(plotly_engine.point(
        [1, 2], [3, 4],
        text="both", multi_text=["a", "b"],
        marker_symbol="circle", multi_marker_symbol=["square", "x"],
    ))

    assert tuple(trace.text) == ("a", "b")
    assert tuple(trace.marker.symbol) == ("square", "x")


def test_scatter_stacking_and_fill(plotly_engine):
    trace = _trace(plotly_engine.scatter(
        [1, 2], [3, 4], "lines",
        stack_group="one", group_norm="percent", fill="tonexty", fill_color="rgba(0,0,0,0.2)",
        show_legend=False, opacity=0.5,
    ))

    assert trace.stackgroup == "one"
    assert trace.groupnorm == "percent"
    assert trace.fill == "tonexty"
    assert trace.fillcolor == "rgba(0,0,0,0.2)"
    assert trace.showlegend is False
    assert trace.opacity == 0.5


def test_line_color_scale_is_ignored_with_warning(plotly_engine, caplog):
    with caplog.at_level(logging.WARNING, logger="chartbridge.engine"):
        trace = _trace(plotly_engine.line([0, 1], [0, 1], line_color_scale="Viridis"))

    assert "line_color_scale" in caplog.text
    assert trace.mode == "lines"


def test_bar_is_horizontal(plotly_engine):
    trace = _trace(plotly_engine.bar([10, 20], keys=["A", "B"], name="totals"))

    assert trace.type == "bar"
    assert trace.orientation == "h"
    assert tuple(trace.x) == (10, 20)
    assert tuple(trace.y) == ("A", "B")
    assert trace.name == "totals"


def test_column_is_vertical(plotly_engine):
    trace = _trace(plotly_engine.column([10, 20], keys=["A", "B"]))

    assert trace.orientation == "v"
    assert tuple(trace.x) == ("A", "B")
    assert tuple(trace.y) == (10, 20)


def test_bar_without_keys_is_indexed_by_plotly(plotly_engine):
    trace = _trace(plotly_engine.column([10, 20]))

    assert trace.x is None
    assert tuple(trace.y) == (10, 20)


def test_bar_styling(plotly_engine):
    trace = _trace(plotly_engine.bar(
        [1, 2], keys=["a", "b"],
        marker_color="orange",
        marker_pattern={"fillmode": "overlay"},
        marker_pattern_shape=PatternShape.DIAGONAL_DESCENDING,
        base=1,
        multi_width=[0.2, 0.4],
        width=0.8,
        multi_text=["x", "y"],
        text_position=TextPosition.OUTSIDE,
    ))

    assert trace.marker.color == "orange"
    assert trace.marker.pattern.shape == "/"
    assert trace.marker.pattern.fillmode == "overlay"
    assert trace.base == 1
    assert tuple(trace.width) == (0.2, 0.4)
    assert tuple(trace.text) == ("x", "y")
    assert trace.textposition == "outside"


@pytest.mark.parametrize("build", [
    lambda engine: engine.bar([1, 2, 3], keys=["a"]),
    lambda engine: engine.point([1, 2], [1]),
])
def test_length_mismatch_raises(plotly_engine, build):
    with pytest.raises(ValueError):
        build(plotly_engine)


def test_unknown_option_raises(plotly_engine):
    with pytest.raises(TypeError, match="line_width"):
        plotly_engine.point([1], [2], line_width=2)
    with pytest.raises(TypeError, match="keys"):
        plotly_engine.line([1], [2], keys=["a"])


def test_defaults_apply_unless_disabled(plotly_engine):
    chart = plotly_engine.point([1], [2])
    assert chart.figure.layout.width == 640
    assert chart.figure.layout.height == 480

    plain = plotly_engine.point([1], [2], use_defaults=False)
    assert plain.figure.layout.width is None
    assert plain.figure.layout.height is None


def test_engine_reads_global_defaults_per_call():
    engine = PlotlyEngine()
    assert engine.point([1], [2]).figure.layout.width is None

    chartbridge.configure_defaults(width=300)
    assert chartbridge.get_defaults().width == 300
    assert engine.point([1], [2]).figure.layout.width == 300

    chartbridge.reset_defaults()
    assert chartbridge.get_defaults() == Defaults()


def test_configure_defaults_rejects_unknown_name():
    with pytest.raises(TypeError):
        chartbridge.configure_defaults(colour="red")


def test_defaults_layout():
    assert Defaults().layout() == {'template': "plotly_white"}
    assert Defaults(template=None, width=10).layout() == {'width': 10}


def test_engine_value_errors_reach_the_caller():
    previous = chartbridge.set_default_engine(PlotlyEngine())
    try:
        with pytest.raises(ValueError):
            chartbridge.point([1], [2], opacity=5)
    finally:
        chartbridge.set_default_engine(previous)


def test_end_to_end_line_chart():
    previous = chartbridge.set_default_engine(PlotlyEngine())
    try:
        chart = chartbridge.line([0, 1], [0, 1], show_markers=True, line_width=2.0)
    finally:
        chartbridge.set_default_engine(previous)

    trace = _trace(chart)
    assert chart.kind == "line"
    assert trace.mode == "lines+markers"
    assert trace.line.width == 2.0
