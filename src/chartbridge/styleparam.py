"""
Style parameters understood by the charting engine.

Every enumeration is a ``str`` enum whose values are the plotly.js
attribute strings, so members can be mixed freely with raw strings.
"""

from enum import Enum
from typing import Any


class StyleParam(str, Enum):
    """Base class for engine style enumerations."""

    def __str__(self) -> str:
        return self.value


class Mode(StyleParam):
    """Drawing mode of a scatter trace."""
    NONE = "none"
    LINES = "lines"
    MARKERS = "markers"
    TEXT = "text"
    LINES_MARKERS = "lines+markers"
    LINES_TEXT = "lines+text"
    MARKERS_TEXT = "markers+text"
    LINES_MARKERS_TEXT = "lines+markers+text"

    @property
    def flags(self) -> frozenset:
        if self is Mode.NONE:
            return frozenset()
        return frozenset(self.value.split("+"))

    @classmethod
    def from_flags(cls, flags) -> "Mode":
        parts = [flag for flag in ("lines", "markers", "text") if flag in flags]
        if not parts:
            return cls.NONE
        return cls("+".join(parts))

    def with_text(self, show: bool = True) -> "Mode":
        """Return this mode with the text flag switched on (or off)."""
        flags = set(self.flags)
        if show:
            flags.add("text")
        else:
            flags.discard("text")
        return Mode.from_flags(flags)

    def with_markers(self, show: bool = True) -> "Mode":
        """Return this mode with the markers flag switched on (or off)."""
        flags = set(self.flags)
        if show:
            flags.add("markers")
        else:
            flags.discard("markers")
        return Mode.from_flags(flags)


class TextPosition(StyleParam):
    TOP_LEFT = "top left"
    TOP_CENTER = "top center"
    TOP_RIGHT = "top right"
    MIDDLE_LEFT = "middle left"
    MIDDLE_CENTER = "middle center"
    MIDDLE_RIGHT = "middle right"
    BOTTOM_LEFT = "bottom left"
    BOTTOM_CENTER = "bottom center"
    BOTTOM_RIGHT = "bottom right"
    # bar traces only
    INSIDE = "inside"
    OUTSIDE = "outside"
    AUTO = "auto"


class MarkerSymbol(StyleParam):
    """Common marker symbols; any plotly symbol string is accepted as well."""
    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"
    CROSS = "cross"
    X = "x"
    TRIANGLE_UP = "triangle-up"
    TRIANGLE_DOWN = "triangle-down"
    TRIANGLE_LEFT = "triangle-left"
    TRIANGLE_RIGHT = "triangle-right"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    STAR = "star"
    HOURGLASS = "hourglass"
    CIRCLE_OPEN = "circle-open"
    SQUARE_OPEN = "square-open"
    DIAMOND_OPEN = "diamond-open"


class DrawingStyle(StyleParam):
    """Dash style of a line."""
    SOLID = "solid"
    DOT = "dot"
    DASH = "dash"
    LONG_DASH = "longdash"
    DASH_DOT = "dashdot"
    LONG_DASH_DOT = "longdashdot"


class Orientation(StyleParam):
    VERTICAL = "v"
    HORIZONTAL = "h"


class GroupNorm(StyleParam):
    NONE = ""
    FRACTION = "fraction"
    PERCENT = "percent"


class Fill(StyleParam):
    NONE = "none"
    TO_ZERO_Y = "tozeroy"
    TO_ZERO_X = "tozerox"
    TO_NEXT_Y = "tonexty"
    TO_NEXT_X = "tonextx"
    TO_SELF = "toself"
    TO_NEXT = "tonext"


class PatternShape(StyleParam):
    NONE = ""
    DIAGONAL_DESCENDING = "/"
    DIAGONAL_ASCENDING = "\\"
    DIAGONAL_CHECKED = "x"
    HORIZONTAL_LINES = "-"
    VERTICAL_LINES = "|"
    SQUARE_CHECKED = "+"
    DOTS = "."


class Colorscale(StyleParam):
    """Named colorscales; a list of ``(position, color)`` pairs also works."""
    GREYS = "Greys"
    YLGNBU = "YlGnBu"
    GREENS = "Greens"
    YLORRD = "YlOrRd"
    BLUERED = "Bluered"
    RDBU = "RdBu"
    REDS = "Reds"
    BLUES = "Blues"
    PICNIC = "Picnic"
    RAINBOW = "Rainbow"
    PORTLAND = "Portland"
    JET = "Jet"
    HOT = "Hot"
    BLACKBODY = "Blackbody"
    EARTH = "Earth"
    ELECTRIC = "Electric"
    VIRIDIS = "Viridis"
    CIVIDIS = "Cividis"


def to_plotly(value: Any) -> Any:
    """Reduce style enums (also inside lists and tuples) to plain strings."""
    if isinstance(value, StyleParam):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_plotly(item) for item in value]
    return value
