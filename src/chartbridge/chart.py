"""
Chart handle returned by the engine.

Wraps a plotly figure and adds notebook display, overlay composition and
file export.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import plotly.graph_objects as go

# Optional imports for Jupyter notebook support
try:
    import ipywidgets  # noqa: F401  (plotly FigureWidget backend)
    from IPython.display import display
    JUPYTER_AVAILABLE = True
except ImportError:
    display = None
    JUPYTER_AVAILABLE = False

# Optional import for static image export
try:
    import kaleido  # noqa: F401
    KALEIDO_AVAILABLE = True
except ImportError:
    KALEIDO_AVAILABLE = False

logger = logging.getLogger(__name__)

IMAGE_FORMATS = ('.png', '.svg', '.pdf', '.jpg', '.jpeg', '.webp')


class Chart:
    """
    Constructed but unrendered chart.

    Charts overlay with ``*``: ``point_chart * line_chart`` draws both traces
    on one set of axes, keeping the layout of the left chart.
    """

    def __init__(self, figure: go.Figure, kind: Optional[str] = None):
        self._figure = figure
        self.kind = kind

    @property
    def figure(self) -> go.Figure:
        """The underlying plotly figure."""
        return self._figure

    @property
    def traces(self) -> Tuple:
        return tuple(self._figure.data)

    def combine(self, *others: 'Chart') -> 'Chart':
        """Overlay the traces of ``others`` onto a copy of this chart."""
        data = [trace.to_plotly_json() for trace in self._figure.data]
        for other in others:
            data.extend(trace.to_plotly_json() for trace in other.figure.data)
        figure = go.Figure(data=data, layout=self._figure.layout.to_plotly_json())
        return Chart(figure, kind='combined')

    def __mul__(self, other: 'Chart') -> 'Chart':
        if not isinstance(other, Chart):
            return NotImplemented
        return self.combine(other)

    def with_layout(self, **layout) -> 'Chart':
        """
        Return a copy of this chart with an updated layout.

        Example:
            chart.with_layout(title_text="Growth", xaxis_title="day")
        """
        figure = go.Figure(self._figure)
        figure.update_layout(**layout)
        return Chart(figure, kind=self.kind)

    # --- output --------------------------------------------------------

    def to_html(self, full_html: bool = False) -> str:
        return self._figure.to_html(full_html=full_html, include_plotlyjs='cdn')

    def to_json(self) -> str:
        return self._figure.to_json()

    def _repr_html_(self):
        """Enable direct display in Jupyter notebooks via display()."""
        return self.to_html()

    def __repr__(self):
        return f"<Chart {self.kind or 'chart'} traces={len(self._figure.data)}>"

    def show(self, display_width: Optional[int] = None, display_height: Optional[int] = None):
        """
        Display the chart.

        Inside Jupyter the chart is shown as a plotly FigureWidget (plotly's
        ipywidgets integration), elsewhere plotly's default renderer is used.

        Args:
            display_width: Figure width in pixels (Jupyter only)
            display_height: Figure height in pixels (Jupyter only)

        Returns:
            The FigureWidget when Jupyter is available, otherwise None
        """
        if not JUPYTER_AVAILABLE:
            logger.info("Jupyter not available, using plotly's default renderer")
            self._figure.show()
            return None

        widget = go.FigureWidget(self._figure)
        if display_width is not None:
            widget.layout.width = display_width
        if display_height is not None:
            widget.layout.height = display_height
        display(widget)
        return widget

    def save(self, filepath: str, **kwargs) -> Path:
        """
        Save chart with format auto-detected from file extension.

        Args:
            filepath: Path to save the file (extension determines format)
            **kwargs: Passed to plotly's image export (``scale``, ``width``...)

        Supported formats:
            .html - standalone page loading plotly.js from the CDN
            .json - plotly figure JSON
            .png, .svg, .pdf, .jpg, .jpeg, .webp - static images (needs kaleido)

        Returns:
            Resolved path of the written file
        """
        full_path = Path(filepath).expanduser().resolve()
        extension = full_path.suffix.lower()

        if extension not in ('.html', '.json') + IMAGE_FORMATS:
            supported = ['.html', '.json', *IMAGE_FORMATS]
            raise ValueError(f"Unsupported file format '{extension}'. "
                             f"Supported formats: {', '.join(supported)}")
        if extension in IMAGE_FORMATS and not KALEIDO_AVAILABLE:
            raise ImportError("Static image export requires kaleido. "
                              "Install with: pip install 'chartbridge[export]'")

        full_path.parent.mkdir(parents=True, exist_ok=True)
        if extension == '.html':
            self._figure.write_html(str(full_path), include_plotlyjs='cdn')
        elif extension == '.json':
            full_path.write_text(self.to_json(), encoding='utf-8')
        else:
            self._figure.write_image(str(full_path), **kwargs)
        logger.debug("Saved %s chart to %s", self.kind or 'chart', full_path)
        return full_path
