from axisfit.api import histogram, scatter
from axisfit.axis import Axis, AxisLayout, AxisStyle, fit_labels
from axisfit.chart import Chart
from axisfit.errors import ChartDataError, LayoutError, LayoutNotComputedError
from axisfit.interval import Interval
from axisfit.raster import RasterContext
from axisfit.render import RenderContext, TextMeasurer
from axisfit.sequence import Categorical, Numeric, Sequence
from axisfit.spacing import calc_next_tick, calc_prev_tick, calc_tick_spacing, format_tick
from axisfit.ticker import IntervalTicker, ReverseTicker, SpaceAround, SpaceBetween, Tick, Ticker
from axisfit.trace import HistogramTrace, ScatterTrace, Trace

__all__ = [
    "Axis",
    "AxisLayout",
    "AxisStyle",
    "Categorical",
    "Chart",
    "ChartDataError",
    "HistogramTrace",
    "Interval",
    "IntervalTicker",
    "LayoutError",
    "LayoutNotComputedError",
    "Numeric",
    "RasterContext",
    "RenderContext",
    "ReverseTicker",
    "ScatterTrace",
    "Sequence",
    "SpaceAround",
    "SpaceBetween",
    "TextMeasurer",
    "Tick",
    "Ticker",
    "Trace",
    "calc_next_tick",
    "calc_prev_tick",
    "calc_tick_spacing",
    "fit_labels",
    "format_tick",
    "histogram",
    "scatter",
]
