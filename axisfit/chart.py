from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from axisfit import theme
from axisfit.axis import Axis, AxisStyle
from axisfit.errors import LayoutNotComputedError
from axisfit.raster import RasterContext
from axisfit.render import RGBA, RenderContext, TextMeasurer
from axisfit.ticker import Ticker
from axisfit.trace import Trace


LOGGER = logging.getLogger(__name__)

# Fitting normally settles after two passes.
MAX_LAYOUT_PASSES = 10


@dataclass(frozen=True)
class ChartLayout:
    chart_w: float
    chart_h: float
    # top-left corner of the chart area inside the whole chart
    origin: tuple[float, float]


@dataclass
class Chart:
    """Axes on up to four sides of a chart area, with traces drawn inside it.

    `width`/`height` bound everything, axes and labels included.
    """

    width: int
    height: int
    top_axis: Axis | None = None
    bottom_axis: Axis | None = None
    left_axis: Axis | None = None
    right_axis: Axis | None = None
    traces: list[Trace] = field(default_factory=list)
    show_horizontal_grid: bool = True
    show_vertical_grid: bool = False
    grid_color: RGBA = theme.GRID_COLOR
    background: RGBA = theme.BACKGROUND_COLOR
    _layout: ChartLayout | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")

    def set_top_axis(self, ticker: Ticker, style: AxisStyle | None = None) -> "Chart":
        self.top_axis = Axis("horizontal", "before", ticker, style or AxisStyle())
        self._layout = None
        return self

    def set_bottom_axis(self, ticker: Ticker, style: AxisStyle | None = None) -> "Chart":
        self.bottom_axis = Axis("horizontal", "after", ticker, style or AxisStyle())
        self._layout = None
        return self

    def set_left_axis(self, ticker: Ticker, style: AxisStyle | None = None) -> "Chart":
        self.left_axis = Axis("vertical", "before", ticker, style or AxisStyle())
        self._layout = None
        return self

    def set_right_axis(self, ticker: Ticker, style: AxisStyle | None = None) -> "Chart":
        self.right_axis = Axis("vertical", "after", ticker, style or AxisStyle())
        self._layout = None
        return self

    def set_grid(self, *, horizontal: bool | None = None, vertical: bool | None = None) -> "Chart":
        if horizontal is not None:
            self.show_horizontal_grid = bool(horizontal)
        if vertical is not None:
            self.show_vertical_grid = bool(vertical)
        return self

    def add_trace(self, trace: Trace) -> "Chart":
        self.traces.append(trace)
        self._layout = None
        return self

    def layout(self, rc: TextMeasurer) -> None:
        """Find a chart area that leaves room for the axes, then lay out the traces.

        Must be called before `draw`, after creation and after anything changes.
        """
        self._layout = None
        # Start from the whole area: far too big, but it gives first axis sizes.
        chart_w = float(self.width)
        chart_h = float(self.height)
        for _ in range(MAX_LAYOUT_PASSES):
            self._layout_axes(chart_w, chart_h, rc)
            axes_w, axes_h = self._axes_size()
            if axes_w + chart_w < self.width and axes_h + chart_h < self.height:
                break
            # Shrink to what would fit around the current axes; the small delta
            # keeps float error out of the comparison above.
            chart_w = max(0.0, self.width - axes_w - 1e-8)
            chart_h = max(0.0, self.height - axes_h - 1e-8)
        else:
            LOGGER.warning("no chart area fits inside %dx%d; the chart may overflow", self.width, self.height)
            chart_w *= 0.9
            chart_h *= 0.9
            self._layout_axes(chart_w, chart_h, rc)

        for trace in self.traces:
            trace.layout(chart_w, chart_h, rc)
        left_w = self.left_axis.size()[0] if self.left_axis is not None else 0.0
        top_h = self.top_axis.size()[1] if self.top_axis is not None else 0.0
        self._layout = ChartLayout(chart_w=chart_w, chart_h=chart_h, origin=(left_w, top_h))

    def chart_area(self) -> tuple[float, float, float, float]:
        """`(x, y, width, height)` of the area the traces draw into."""
        layout = self._require_layout()
        x, y = layout.origin
        return (x, y, layout.chart_w, layout.chart_h)

    def draw(self, rc: RenderContext) -> None:
        layout = self._require_layout()
        x0, y0 = layout.origin
        w, h = layout.chart_w, layout.chart_h
        self._draw_grid(rc, x0, y0, w, h)
        for trace in self.traces:
            trace.draw((x0, y0), rc)
        if self.top_axis is not None:
            self.top_axis.draw((x0, y0), rc)
        if self.bottom_axis is not None:
            self.bottom_axis.draw((x0, y0 + h), rc)
        if self.left_axis is not None:
            self.left_axis.draw((x0, y0), rc)
        if self.right_axis is not None:
            self.right_axis.draw((x0 + w, y0), rc)

    def to_rgba(self, **raster_kwargs: object) -> np.ndarray:
        """Lay out and draw onto a fresh raster canvas of the chart's size."""
        rc = RasterContext(self.width, self.height, background=self.background, **raster_kwargs)  # type: ignore[arg-type]
        self.layout(rc)
        self.draw(rc)
        return rc.to_rgba()

    def _layout_axes(self, chart_w: float, chart_h: float, rc: TextMeasurer) -> None:
        for axis in (self.top_axis, self.bottom_axis):
            if axis is not None:
                axis.layout(chart_w, rc)
        for axis in (self.left_axis, self.right_axis):
            if axis is not None:
                axis.layout(chart_h, rc)

    def _axes_size(self) -> tuple[float, float]:
        width = sum(axis.size()[0] for axis in (self.left_axis, self.right_axis) if axis is not None)
        height = sum(axis.size()[1] for axis in (self.top_axis, self.bottom_axis) if axis is not None)
        return (width, height)

    def _draw_grid(self, rc: RenderContext, x0: float, y0: float, w: float, h: float) -> None:
        row_axis = self.left_axis or self.right_axis
        if self.show_horizontal_grid and row_axis is not None:
            for tick in row_axis.ticks():
                rc.stroke_line(x0, y0 + tick.pos, x0 + w, y0 + tick.pos, self.grid_color, 1.0)
        column_axis = self.bottom_axis or self.top_axis
        if self.show_vertical_grid and column_axis is not None:
            for tick in column_axis.ticks():
                rc.stroke_line(x0 + tick.pos, y0, x0 + tick.pos, y0 + h, self.grid_color, 1.0)

    def _require_layout(self) -> ChartLayout:
        if self._layout is None:
            raise LayoutNotComputedError("Chart.layout() must be called before draw")
        return self._layout
