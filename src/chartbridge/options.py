"""
Per-chart-kind option records and the boundary translation to the engine.

Each chart kind has one frozen dataclass listing the named styling options
it recognises. Every field defaults to ``None``, which means "not given".
``to_options`` turns a record into the keyword mapping the engine consumes:
given values appear under their option name, everything else is left out.
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Union

from .styleparam import (
    Colorscale,
    DrawingStyle,
    Fill,
    GroupNorm,
    MarkerSymbol,
    Orientation,
    PatternShape,
    TextPosition,
)

# Anything the engine can turn into a number or a label
Convertible = Union[str, int, float, bool]
Color = Union[str, Sequence[Any]]
ColorscaleLike = Union[Colorscale, str, Sequence[Any]]
# fine grained plotly objects (go.scatter.Marker, ...) or plain dicts
StyleObject = Union[Mapping[str, Any], Any]


def to_options(record) -> Dict[str, Any]:
    """Translate an options record into engine keyword options.

    ``None`` maps to "absent" (the key is omitted), any other value maps to
    "present" and is forwarded untouched, falsy values included.
    """
    options = {}
    for field in fields(record):
        value = getattr(record, field.name)
        if value is not None:
            options[field.name] = value
    return options


@dataclass(frozen=True)
class TraceOptions:
    """Options shared by every chart kind."""

    kind: ClassVar[str] = ""

    name: Optional[str] = None
    show_legend: Optional[bool] = None
    opacity: Optional[float] = None
    multi_opacity: Optional[Sequence[float]] = None
    text: Optional[Convertible] = None
    multi_text: Optional[Sequence[Convertible]] = None
    text_position: Optional[Union[TextPosition, str]] = None
    multi_text_position: Optional[Sequence[Union[TextPosition, str]]] = None
    marker_color: Optional[Color] = None
    marker_color_scale: Optional[ColorscaleLike] = None
    marker_outline: Optional[StyleObject] = None
    marker: Optional[StyleObject] = None
    use_defaults: Optional[bool] = None

    def to_options(self) -> Dict[str, Any]:
        return to_options(self)


@dataclass(frozen=True)
class PointOptions(TraceOptions):
    kind: ClassVar[str] = "point"

    marker_symbol: Optional[Union[MarkerSymbol, str]] = None
    multi_marker_symbol: Optional[Sequence[Union[MarkerSymbol, str]]] = None
    stack_group: Optional[str] = None
    orientation: Optional[Union[Orientation, str]] = None
    group_norm: Optional[Union[GroupNorm, str]] = None
    use_webgl: Optional[bool] = None


@dataclass(frozen=True)
class ScatterOptions(PointOptions):
    kind: ClassVar[str] = "scatter"

    line_color: Optional[Color] = None
    line_color_scale: Optional[ColorscaleLike] = None
    line_width: Optional[float] = None
    line_dash: Optional[Union[DrawingStyle, str]] = None
    line: Optional[StyleObject] = None
    fill: Optional[Union[Fill, str]] = None
    fill_color: Optional[Color] = None


@dataclass(frozen=True)
class LineOptions(ScatterOptions):
    kind: ClassVar[str] = "line"

    show_markers: Optional[bool] = None


@dataclass(frozen=True)
class BarOptions(TraceOptions):
    kind: ClassVar[str] = "bar"

    marker_pattern_shape: Optional[Union[PatternShape, str]] = None
    multi_marker_pattern_shape: Optional[Sequence[Union[PatternShape, str]]] = None
    marker_pattern: Optional[StyleObject] = None
    base: Optional[Convertible] = None
    width: Optional[Convertible] = None
    multi_width: Optional[Sequence[Convertible]] = None


@dataclass(frozen=True)
class ColumnOptions(BarOptions):
    kind: ClassVar[str] = "column"


OPTIONS_BY_KIND = {
    cls.kind: cls
    for cls in (ScatterOptions, PointOptions, LineOptions, BarOptions, ColumnOptions)
}
