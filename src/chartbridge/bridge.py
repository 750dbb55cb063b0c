"""
Chart bridge - keyword style entry points over the chart engine.

Every function here takes the required data positionally and styling
options as keyword arguments that default to ``None``. A ``None`` option is
not passed on to the engine at all, any other value is passed on exactly as
given. The engine's result (a ``Chart``) is returned unchanged and the
engine's exceptions propagate unchanged.
"""

from typing import Any, Dict, Optional, Sequence, Union

from .chart import Chart
from .engine import PlotlyEngine
from .options import (
    OPTIONS_BY_KIND,
    BarOptions,
    Color,
    ColorscaleLike,
    ColumnOptions,
    Convertible,
    LineOptions,
    PointOptions,
    ScatterOptions,
    StyleObject,
    TraceOptions,
    to_options,
)
from .styleparam import (
    DrawingStyle,
    Fill,
    GroupNorm,
    MarkerSymbol,
    Mode,
    Orientation,
    PatternShape,
    TextPosition,
)

# Global engine instance used by the module level functions
_default_engine = None


def _get_default_engine():
    """Get or create the default engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PlotlyEngine()
    return _default_engine


def set_default_engine(engine):
    """
    Replace the engine the module level functions delegate to.

    Args:
        engine: Object with ``scatter``, ``point``, ``line``, ``bar`` and
            ``column`` methods, or None to fall back to a fresh PlotlyEngine

    Returns:
        The previously installed engine (None if none was created yet)
    """
    global _default_engine
    previous = _default_engine
    _default_engine = engine
    return previous


def _with_keys(keys, options: Dict[str, Any]) -> Dict[str, Any]:
    if keys is not None:
        options = {'keys': keys, **options}
    return options


def scatter(
    x: Sequence[Convertible],
    y: Sequence[Convertible],
    mode: Union[Mode, str],
    *,
    name: Optional[str] = None,
    show_legend: Optional[bool] = None,
    opacity: Optional[float] = None,
    multi_opacity: Optional[Sequence[float]] = None,
    text: Optional[Convertible] = None,
    multi_text: Optional[Sequence[Convertible]] = None,
    text_position: Optional[Union[TextPosition, str]] = None,
    multi_text_position: Optional[Sequence[Union[TextPosition, str]]] = None,
    marker_color: Optional[Color] = None,
    marker_color_scale: Optional[ColorscaleLike] = None,
    marker_outline: Optional[StyleObject] = None,
    marker_symbol: Optional[Union[MarkerSymbol, str]] = None,
    multi_marker_symbol: Optional[Sequence[Union[MarkerSymbol, str]]] = None,
    marker: Optional[StyleObject] = None,
    line_color: Optional[Color] = None,
    line_color_scale: Optional[ColorscaleLike] = None,
    line_width: Optional[float] = None,
    line_dash: Optional[Union[DrawingStyle, str]] = None,
    line: Optional[StyleObject] = None,
    stack_group: Optional[str] = None,
    orientation: Optional[Union[Orientation, str]] = None,
    group_norm: Optional[Union[GroupNorm, str]] = None,
    fill: Optional[Union[Fill, str]] = None,
    fill_color: Optional[Color] = None,
    use_webgl: Optional[bool] = None,
    use_defaults: Optional[bool] = None,
) -> Chart:
    """
    Create a scatter chart.

    Scatter charts are the basis of point and line charts, see ``point`` and
    ``line`` for those shortcuts.

    Args:
        x: X coordinates of the plotted data
        y: Y coordinates of the plotted data
        mode: Drawing mode of the trace (``Mode.MARKERS``, ``"lines+markers"``...)
        name: Trace name, shown in the legend and on hover
        show_legend: Whether the trace gets a legend item
        opacity: Opacity of the whole trace
        multi_opacity: Opacity of the individual markers
        text: Text associated with every datum
        multi_text: Individual text for each datum
        text_position: Position of the text associated with every datum
        multi_text_position: Position of the text of each datum
        marker_color: Marker color (one color or one per datum)
        marker_color_scale: Colorscale of the markers
        marker_outline: Outline of the markers (plotly marker line or dict)
        marker_symbol: Marker symbol for every datum
        multi_marker_symbol: Marker symbol for each datum
        marker: Full marker object; the marker options above are layered on top
        line_color: Line color
        line_color_scale: Line colorscale
        line_width: Line width in pixels
        line_dash: Drawing style of the line
        line: Full line object; the line options above are layered on top
        stack_group: Traces sharing a stack group get their values stacked
        orientation: Stacking direction, only relevant with ``stack_group``
        group_norm: Normalization of the stack group sum
        fill: Area to fill with a solid color
        fill_color: Fill color
        use_webgl: Render with WebGL (``scattergl``), for many points
        use_defaults: Set to False to ignore the global chart defaults

    Returns:
        Chart handle produced by the engine
    """
    options = ScatterOptions(
        name=name,
        show_legend=show_legend,
        opacity=opacity,
        multi_opacity=multi_opacity,
        text=text,
        multi_text=multi_text,
        text_position=text_position,
        multi_text_position=multi_text_position,
        marker_color=marker_color,
        marker_color_scale=marker_color_scale,
        marker_outline=marker_outline,
        marker_symbol=marker_symbol,
        multi_marker_symbol=multi_marker_symbol,
        marker=marker,
        line_color=line_color,
        line_color_scale=line_color_scale,
        line_width=line_width,
        line_dash=line_dash,
        line=line,
        stack_group=stack_group,
        orientation=orientation,
        group_norm=group_norm,
        fill=fill,
        fill_color=fill_color,
        use_webgl=use_webgl,
        use_defaults=use_defaults,
    )
    return _get_default_engine().scatter(x, y, mode, **to_options(options))


def point(
    x: Sequence[Convertible],
    y: Sequence[Convertible],
    *,
    name: Optional[str] = None,
    show_legend: Optional[bool] = None,
    opacity: Optional[float] = None,
    multi_opacity: Optional[Sequence[float]] = None,
    text: Optional[Convertible] = None,
    multi_text: Optional[Sequence[Convertible]] = None,
    text_position: Optional[Union[TextPosition, str]] = None,
    multi_text_position: Optional[Sequence[Union[TextPosition, str]]] = None,
    marker_color: Optional[Color] = None,
    marker_color_scale: Optional[ColorscaleLike] = None,
    marker_outline: Optional[StyleObject] = None,
    marker_symbol: Optional[Union[MarkerSymbol, str]] = None,
    multi_marker_symbol: Optional[Sequence[Union[MarkerSymbol, str]]] = None,
    marker: Optional[StyleObject] = None,
    stack_group: Optional[str] = None,
    orientation: Optional[Union[Orientation, str]] = None,
    group_norm: Optional[Union[GroupNorm, str]] = None,
    use_webgl: Optional[bool] = None,
    use_defaults: Optional[bool] = None,
) -> Chart:
    """
    Create a point chart, which plots markers at the given coordinates.

    Takes the same marker, text and stacking options as ``scatter``.

    Examples:
        chartbridge.point([1, 2, 3], [4, 5, 6])
        chartbridge.point(xs, ys, multi_text=labels, text_position="top center")
    """
    options = PointOptions(
        name=name,
        show_legend=show_legend,
        opacity=opacity,
        multi_opacity=multi_opacity,
        text=text,
        multi_text=multi_text,
        text_position=text_position,
        multi_text_position=multi_text_position,
        marker_color=marker_color,
        marker_color_scale=marker_color_scale,
        marker_outline=marker_outline,
        marker_symbol=marker_symbol,
        multi_marker_symbol=multi_marker_symbol,
        marker=marker,
        stack_group=stack_group,
        orientation=orientation,
        group_norm=group_norm,
        use_webgl=use_webgl,
        use_defaults=use_defaults,
    )
    return _get_default_engine().point(x, y, **to_options(options))


def line(
    x: Sequence[Convertible],
    y: Sequence[Convertible],
    *,
    show_markers: Optional[bool] = None,
    name: Optional[str] = None,
    show_legend: Optional[bool] = None,
    opacity: Optional[float] = None,
    multi_opacity: Optional[Sequence[float]] = None,
    text: Optional[Convertible] = None,
    multi_text: Optional[Sequence[Convertible]] = None,
    text_position: Optional[Union[TextPosition, str]] = None,
    multi_text_position: Optional[Sequence[Union[TextPosition, str]]] = None,
    marker_color: Optional[Color] = None,
    marker_color_scale: Optional[ColorscaleLike] = None,
    marker_outline: Optional[StyleObject] = None,
    marker_symbol: Optional[Union[MarkerSymbol, str]] = None,
    multi_marker_symbol: Optional[Sequence[Union[MarkerSymbol, str]]] = None,
    marker: Optional[StyleObject] = None,
    line_color: Optional[Color] = None,
    line_color_scale: Optional[ColorscaleLike] = None,
    line_width: Optional[float] = None,
    line_dash: Optional[Union[DrawingStyle, str]] = None,
    line: Optional[StyleObject] = None,
    stack_group: Optional[str] = None,
    orientation: Optional[Union[Orientation, str]] = None,
    group_norm: Optional[Union[GroupNorm, str]] = None,
    fill: Optional[Union[Fill, str]] = None,
    fill_color: Optional[Color] = None,
    use_webgl: Optional[bool] = None,
    use_defaults: Optional[bool] = None,
) -> Chart:
    """
    Create a line chart, typically the evolution of y depending on x.

    Args:
        x: X coordinates of the plotted data
        y: Y coordinates of the plotted data
        show_markers: Whether to draw markers at the individual data points
        Every other option behaves as in ``scatter``.

    Examples:
        chartbridge.line([0, 1], [0, 1], show_markers=True, line_width=2.0)
    """
    options = LineOptions(
        show_markers=show_markers,
        name=name,
        show_legend=show_legend,
        opacity=opacity,
        multi_opacity=multi_opacity,
        text=text,
        multi_text=multi_text,
        text_position=text_position,
        multi_text_position=multi_text_position,
        marker_color=marker_color,
        marker_color_scale=marker_color_scale,
        marker_outline=marker_outline,
        marker_symbol=marker_symbol,
        multi_marker_symbol=multi_marker_symbol,
        marker=marker,
        line_color=line_color,
        line_color_scale=line_color_scale,
        line_width=line_width,
        line_dash=line_dash,
        line=line,
        stack_group=stack_group,
        orientation=orientation,
        group_norm=group_norm,
        fill=fill,
        fill_color=fill_color,
        use_webgl=use_webgl,
        use_defaults=use_defaults,
    )
    return _get_default_engine().line(x, y, **to_options(options))


def bar(
    values: Sequence[Convertible],
    keys: Optional[Sequence[Convertible]] = None,
    *,
    name: Optional[str] = None,
    show_legend: Optional[bool] = None,
    opacity: Optional[float] = None,
    multi_opacity: Optional[Sequence[float]] = None,
    text: Optional[Convertible] = None,
    multi_text: Optional[Sequence[Convertible]] = None,
    marker_color: Optional[Color] = None,
    marker_color_scale: Optional[ColorscaleLike] = None,
    marker_outline: Optional[StyleObject] = None,
    marker_pattern_shape: Optional[Union[PatternShape, str]] = None,
    multi_marker_pattern_shape: Optional[Sequence[Union[PatternShape, str]]] = None,
    marker_pattern: Optional[StyleObject] = None,
    marker: Optional[StyleObject] = None,
    base: Optional[Convertible] = None,
    width: Optional[Convertible] = None,
    multi_width: Optional[Sequence[Convertible]] = None,
    text_position: Optional[Union[TextPosition, str]] = None,
    multi_text_position: Optional[Sequence[Union[TextPosition, str]]] = None,
    use_defaults: Optional[bool] = None,
) -> Chart:
    """
    Create a bar chart, with bars plotted horizontally.

    Bar lengths are proportional to ``values``; ``keys`` label the bars.

    Args:
        values: Bar values (lengths along the x axis)
        keys: Category of each bar (optional, bars are indexed when omitted)
        marker_pattern_shape: Fill pattern of every bar
        multi_marker_pattern_shape: Fill pattern of each bar
        marker_pattern: Full pattern object; the pattern shape is layered on top
        base: Where the bars start
        width: Width of every bar in axis units
        multi_width: Width of each bar
        Name, legend, opacity, text and marker options behave as in ``scatter``.

    Examples:
        chartbridge.bar([10, 20, 15], ["A", "B", "C"])
        chartbridge.bar(values, keys, marker_pattern_shape=PatternShape.DOTS)
    """
    options = BarOptions(
        name=name,
        show_legend=show_legend,
        opacity=opacity,
        multi_opacity=multi_opacity,
        text=text,
        multi_text=multi_text,
        marker_color=marker_color,
        marker_color_scale=marker_color_scale,
        marker_outline=marker_outline,
        marker_pattern_shape=marker_pattern_shape,
        multi_marker_pattern_shape=multi_marker_pattern_shape,
        marker_pattern=marker_pattern,
        marker=marker,
        base=base,
        width=width,
        multi_width=multi_width,
        text_position=text_position,
        multi_text_position=multi_text_position,
        use_defaults=use_defaults,
    )
    return _get_default_engine().bar(values, **_with_keys(keys, to_options(options)))


def column(
    values: Sequence[Convertible],
    keys: Optional[Sequence[Convertible]] = None,
    *,
    name: Optional[str] = None,
    show_legend: Optional[bool] = None,
    opacity: Optional[float] = None,
    multi_opacity: Optional[Sequence[float]] = None,
    text: Optional[Convertible] = None,
    multi_text: Optional[Sequence[Convertible]] = None,
    marker_color: Optional[Color] = None,
    marker_color_scale: Optional[ColorscaleLike] = None,
    marker_outline: Optional[StyleObject] = None,
    marker_pattern_shape: Optional[Union[PatternShape, str]] = None,
    multi_marker_pattern_shape: Optional[Sequence[Union[PatternShape, str]]] = None,
    marker_pattern: Optional[StyleObject] = None,
    marker: Optional[StyleObject] = None,
    base: Optional[Convertible] = None,
    width: Optional[Convertible] = None,
    multi_width: Optional[Sequence[Convertible]] = None,
    text_position: Optional[Union[TextPosition, str]] = None,
    multi_text_position: Optional[Sequence[Union[TextPosition, str]]] = None,
    use_defaults: Optional[bool] = None,
) -> Chart:
    """Create a column chart, with bars plotted vertically. Options as in ``bar``."""
    options = ColumnOptions(
        name=name,
        show_legend=show_legend,
        opacity=opacity,
        multi_opacity=multi_opacity,
        text=text,
        multi_text=multi_text,
        marker_color=marker_color,
        marker_color_scale=marker_color_scale,
        marker_outline=marker_outline,
        marker_pattern_shape=marker_pattern_shape,
        multi_marker_pattern_shape=multi_marker_pattern_shape,
        marker_pattern=marker_pattern,
        marker=marker,
        base=base,
        width=width,
        multi_width=multi_width,
        text_position=text_position,
        multi_text_position=multi_text_position,
        use_defaults=use_defaults,
    )
    return _get_default_engine().column(values, **_with_keys(keys, to_options(options)))


def chart(options: TraceOptions, *data) -> Chart:
    """
    Create a chart from an options record instead of keyword arguments.

    The chart kind follows from the record type. ``data`` is what the
    matching function takes positionally: ``x, y, mode`` for scatter,
    ``x, y`` for point and line, ``values[, keys]`` for bar and column.

    Examples:
        chartbridge.chart(LineOptions(show_markers=True), [0, 1], [0, 1])
        chartbridge.chart(BarOptions(name="Totals"), [10, 20], ["A", "B"])

    Raises:
        TypeError: If ``options`` is not one of the per-kind records
    """
    kind = getattr(options, 'kind', None)
    if not isinstance(kind, str) or OPTIONS_BY_KIND.get(kind) is not type(options):
        raise TypeError(f"Unsupported options record: {type(options).__name__}")

    engine = _get_default_engine()
    forwarded = to_options(options)
    if options.kind in ('bar', 'column'):
        if len(data) not in (1, 2):
            raise TypeError(f"{options.kind} takes values and optional keys, got {len(data)} arguments")
        values, *rest = data
        keys = rest[0] if rest else None
        return getattr(engine, options.kind)(values, **_with_keys(keys, forwarded))
    return getattr(engine, options.kind)(*data, **forwarded)
