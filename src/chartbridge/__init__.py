"""
chartbridge - keyword style chart functions over plotly

Thin functional surface for 2D charts: every chart kind is one function
taking its data positionally and styling options as keyword arguments.
Options that are not given are left entirely to the engine.

Features:
- Scatter charts: the general trace with an explicit drawing mode
- Point charts: markers at the given coordinates
- Line charts: evolution of y over x, optionally with markers
- Bar charts: horizontal bars for categorical data
- Column charts: vertical bars for categorical data
- Options records: the same options as one frozen dataclass per chart kind
- Overlay composition with the * operator
- HTML, JSON and static image export

Usage:
    import chartbridge
    from chartbridge import Mode, LineOptions

    chart1 = chartbridge.point([1, 2, 3], [4, 5, 6], name="samples")
    chart2 = chartbridge.line([0, 1], [0, 1], show_markers=True, line_width=2.0)
    chart3 = chartbridge.scatter(xs, ys, Mode.LINES_MARKERS, fill="tozeroy")
    chart4 = chartbridge.column([10, 20, 15], ["A", "B", "C"])

    # Same chart from an options record
    chart5 = chartbridge.chart(LineOptions(show_markers=True), [0, 1], [0, 1])

    # Display and export
    chart1.show()
    (chart1 * chart2).save("overlay.html")
"""

from .bridge import bar, chart, column, line, point, scatter, set_default_engine
from .chart import Chart
from .engine import Defaults, PlotlyEngine, configure_defaults, get_defaults, reset_defaults
from .options import (
    BarOptions,
    ColumnOptions,
    LineOptions,
    PointOptions,
    ScatterOptions,
    TraceOptions,
    to_options,
)
from .styleparam import (
    Colorscale,
    DrawingStyle,
    Fill,
    GroupNorm,
    MarkerSymbol,
    Mode,
    Orientation,
    PatternShape,
    TextPosition,
)

__version__ = "0.1.0"

__all__ = [
    'scatter', 'point', 'line', 'bar', 'column', 'chart', 'set_default_engine',
    'Chart', 'PlotlyEngine', 'Defaults', 'get_defaults', 'configure_defaults', 'reset_defaults',
    'TraceOptions', 'ScatterOptions', 'PointOptions', 'LineOptions', 'BarOptions', 'ColumnOptions',
    'to_options',
    'Mode', 'TextPosition', 'MarkerSymbol', 'DrawingStyle', 'Orientation', 'GroupNorm', 'Fill',
    'PatternShape', 'Colorscale',
]
