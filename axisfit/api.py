from __future__ import annotations

from typing import Any

import numpy as np

from axisfit.adapters import coerce_values, normalize_points
from axisfit.chart import Chart
from axisfit.errors import ChartDataError
from axisfit.interval import Interval
from axisfit.sequence import Categorical
from axisfit.trace import HistogramTrace, ScatterTrace


DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 400


def histogram(labels: Any, values: Any, *, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Chart:
    """Bar chart with one bar per category; values must be >= 0 and the value axis starts at zero."""
    categories = Categorical(labels)
    arr = coerce_values(values, label="values")
    if arr.size != len(categories):
        raise ChartDataError(f"labels and values length mismatch: {len(categories)} != {arr.size}")
    if arr.size == 0 or not np.any(arr != 0):
        raise ChartDataError("histogram needs at least one non-zero value")
    # zero joins the fold so a single bar still spans an interval
    value_interval = Interval.from_values(np.append(arr, 0.0))
    trace = HistogramTrace(arr, full_value=value_interval.max)
    return (
        Chart(width=width, height=height)
        .set_bottom_axis(categories.space_around())
        .set_left_axis(value_interval.ticker().reverse())
        .add_trace(trace)
    )


def scatter(points: Any, *, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Chart:
    """Scatter plot of `(x, y)` pairs over intervals rounded out to nice values."""
    x, y = normalize_points(points)
    x_interval = _rounded_interval(x, label="x")
    y_interval = _rounded_interval(y, label="y")
    trace = ScatterTrace(x, y, x_interval, y_interval)
    return (
        Chart(width=width, height=height)
        .set_left_axis(y_interval.ticker().reverse())
        .set_bottom_axis(x_interval.ticker())
        .set_grid(horizontal=True, vertical=True)
        .add_trace(trace)
    )


def _rounded_interval(values: np.ndarray, *, label: str) -> Interval:
    lo = float(np.min(values))
    hi = float(np.max(values))
    if lo == hi:
        # a single distinct value still needs some room either side
        delta = max(1.0, abs(lo) * 0.05)
        lo -= delta
        hi += delta
    try:
        return Interval(lo, hi).to_rounded()
    except ValueError as exc:
        raise ChartDataError(f"{label} values cannot span an axis: {exc}") from exc
