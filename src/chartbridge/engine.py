"""
Plotly engine - builds traces and figures from engine keyword options.

The engine receives option-wrapped keywords: a given option is present in
``**options``, an option that was not given is simply missing. It maps those
onto plotly trace properties, applies the configured defaults and returns a
``Chart`` handle.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import plotly.graph_objects as go

from .chart import Chart
from .options import OPTIONS_BY_KIND
from .styleparam import Mode, Orientation, to_plotly

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Defaults:
    """Layout defaults applied to every chart built with ``use_defaults``."""
    template: Optional[str] = "plotly_white"
    width: Optional[int] = None
    height: Optional[int] = None

    def layout(self) -> Dict[str, Any]:
        layout = {}
        if self.template is not None:
            layout['template'] = self.template
        if self.width is not None:
            layout['width'] = self.width
        if self.height is not None:
            layout['height'] = self.height
        return layout


_defaults = Defaults()


def get_defaults() -> Defaults:
    """Return the current global engine defaults."""
    return _defaults


def configure_defaults(**changes) -> Defaults:
    """
    Update the global engine defaults.

    Args:
        **changes: Any of ``template``, ``width``, ``height``

    Returns:
        The new Defaults

    Raises:
        TypeError: For an unknown default name
    """
    global _defaults
    _defaults = dataclasses.replace(_defaults, **changes)
    return _defaults


def reset_defaults() -> Defaults:
    """Restore the built-in engine defaults."""
    global _defaults
    _defaults = Defaults()
    return _defaults


def _style_dict(obj) -> Dict[str, Any]:
    """Plain dict view of a plotly style object or mapping."""
    if obj is None:
        return {}
    if hasattr(obj, 'to_plotly_json'):
        return dict(obj.to_plotly_json())
    return dict(obj)


def _layer(base, **props) -> Dict[str, Any]:
    """Layer the given properties on top of a fine grained style object."""
    style = _style_dict(base)
    for key, value in props.items():
        if value is not None:
            style[key] = to_plotly(value)
    return style


def _pick(options: Mapping[str, Any], single: str, multi: str):
    """Multi valued variant of an option wins over the single valued one."""
    if multi in options:
        return options[multi]
    return options.get(single)


def _as_sequence(data):
    """Materialise one-shot iterables (generators, map objects) into a list."""
    if data is None or hasattr(data, '__len__'):
        return data
    return list(data)


def _check_lengths(first: Sequence, second: Sequence, first_name: str, second_name: str):
    if hasattr(first, '__len__') and hasattr(second, '__len__') and len(first) != len(second):
        raise ValueError(
            f"{first_name} and {second_name} must have the same length "
            f"(got {len(first)} and {len(second)})"
        )


# option name -> plotly trace property, copied over as-is
_COMMON_PROPS = (
    ('name', 'name'),
    ('show_legend', 'showlegend'),
    ('opacity', 'opacity'),
)

# scatter properties scattergl does not have
_STACKING_PROPS = (
    ('stack_group', 'stackgroup'),
    ('orientation', 'orientation'),
    ('group_norm', 'groupnorm'),
)

_SCATTER_PROPS = _COMMON_PROPS + _STACKING_PROPS + (
    ('fill', 'fill'),
    ('fill_color', 'fillcolor'),
)

_BAR_PROPS = _COMMON_PROPS + (
    ('base', 'base'),
)


class PlotlyEngine:
    """
    Chart engine backed by plotly graph objects.

    Every public method takes the required data positionally and styling
    options as keywords, where only options that were actually given are
    passed.
    """

    def __init__(self, defaults: Optional[Defaults] = None):
        """
        Initialize the engine.

        Args:
            defaults: Fixed defaults for this engine. When omitted the global
                defaults (see ``configure_defaults``) are read on every call.
        """
        self._defaults = defaults

    @property
    def defaults(self) -> Defaults:
        return self._defaults if self._defaults is not None else get_defaults()

    # --- chart kinds ---------------------------------------------------

    def scatter(self, x, y, mode, **options) -> Chart:
        """Create a scatter chart, the base of point and line charts."""
        self._check_options('scatter', options)
        return self._build('scatter', self._scatter_trace(x, y, mode, options), options)

    def point(self, x, y, **options) -> Chart:
        """Create a point chart: markers, plus text when a text position is set."""
        self._check_options('point', options)
        mode = Mode.MARKERS.with_text(self._has_text_position(options))
        return self._build('point', self._scatter_trace(x, y, mode, options), options)

    def line(self, x, y, **options) -> Chart:
        """Create a line chart, optionally with markers at the data points."""
        self._check_options('line', options)
        mode = (Mode.LINES
                .with_markers(bool(options.get('show_markers', False)))
                .with_text(self._has_text_position(options)))
        return self._build('line', self._scatter_trace(x, y, mode, options), options)

    def bar(self, values, **options) -> Chart:
        """Create a bar chart with horizontal bars (values on the x axis)."""
        self._check_options('bar', options)
        trace = self._bar_trace(values, Orientation.HORIZONTAL, options)
        return self._build('bar', trace, options)

    def column(self, values, **options) -> Chart:
        """Create a column chart with vertical bars (values on the y axis)."""
        self._check_options('column', options)
        trace = self._bar_trace(values, Orientation.VERTICAL, options)
        return self._build('column', trace, options)

    # --- trace construction --------------------------------------------

    def _scatter_trace(self, x, y, mode, options: Mapping[str, Any]):
        x, y = _as_sequence(x), _as_sequence(y)
        _check_lengths(x, y, 'x', 'y')
        use_webgl = bool(options.get('use_webgl'))
        if use_webgl:
            dropped = [option for option, _ in _STACKING_PROPS if option in options]
            if dropped:
                logger.warning("%s not supported by WebGL scatter traces; ignored", ", ".join(dropped))
        props = {'x': x, 'y': y, 'mode': to_plotly(mode)}
        for option, prop in _SCATTER_PROPS:
            if use_webgl and (option, prop) in _STACKING_PROPS:
                continue
            if option in options:
                props[prop] = to_plotly(options[option])

        text = _pick(options, 'text', 'multi_text')
        if text is not None:
            props['text'] = text
        text_position = _pick(options, 'text_position', 'multi_text_position')
        if text_position is not None:
            props['textposition'] = to_plotly(text_position)

        marker = _layer(
            options.get('marker'),
            color=options.get('marker_color'),
            colorscale=options.get('marker_color_scale'),
            line=_style_dict(options.get('marker_outline')) or None,
            symbol=_pick(options, 'marker_symbol', 'multi_marker_symbol'),
            opacity=options.get('multi_opacity'),
        )
        if marker:
            props['marker'] = marker

        if 'line_color_scale' in options:
            logger.warning("line_color_scale has no effect on plotly scatter lines; ignored")
        line = _layer(
            options.get('line'),
            color=options.get('line_color'),
            width=options.get('line_width'),
            dash=options.get('line_dash'),
        )
        if line:
            props['line'] = line

        trace_cls = go.Scattergl if use_webgl else go.Scatter
        return trace_cls(**props)

    def _bar_trace(self, values, orientation: Orientation, options: Mapping[str, Any]):
        values = _as_sequence(values)
        keys = _as_sequence(options.get('keys'))
        if keys is not None:
            _check_lengths(values, keys, 'values', 'keys')

        props = {'orientation': orientation.value}
        if orientation is Orientation.HORIZONTAL:
            props['x'] = values
            if keys is not None:
                props['y'] = keys
        else:
            props['y'] = values
            if keys is not None:
                props['x'] = keys

        for option, prop in _BAR_PROPS:
            if option in options:
                props[prop] = to_plotly(options[option])

        text = _pick(options, 'text', 'multi_text')
        if text is not None:
            props['text'] = text
        text_position = _pick(options, 'text_position', 'multi_text_position')
        if text_position is not None:
            props['textposition'] = to_plotly(text_position)
        width = _pick(options, 'width', 'multi_width')
        if width is not None:
            props['width'] = width

        pattern = _layer(
            options.get('marker_pattern'),
            shape=_pick(options, 'marker_pattern_shape', 'multi_marker_pattern_shape'),
        )
        marker = _layer(
            options.get('marker'),
            color=options.get('marker_color'),
            colorscale=options.get('marker_color_scale'),
            line=_style_dict(options.get('marker_outline')) or None,
            opacity=options.get('multi_opacity'),
            pattern=pattern or None,
        )
        if marker:
            props['marker'] = marker

        return go.Bar(**props)

    # --- helpers -------------------------------------------------------

    @staticmethod
    def _has_text_position(options: Mapping[str, Any]) -> bool:
        return 'text_position' in options or 'multi_text_position' in options

    @staticmethod
    def _check_options(kind: str, options: Mapping[str, Any]):
        known = {field.name for field in dataclasses.fields(OPTIONS_BY_KIND[kind])}
        if kind in ('bar', 'column'):
            known.add('keys')
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"Unknown {kind} option(s): {', '.join(unknown)}")

    def _build(self, kind: str, trace, options: Mapping[str, Any]) -> Chart:
        layout = self.defaults.layout() if options.get('use_defaults', True) else {}
        figure = go.Figure(data=[trace], layout=layout)
        logger.debug("Built %s chart (%s) with options: %s",
                     kind, type(trace).__name__, ', '.join(sorted(options)) or 'none')
        return Chart(figure, kind=kind)
