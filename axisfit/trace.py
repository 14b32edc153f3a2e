from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from axisfit import theme
from axisfit.adapters import coerce_values
from axisfit.errors import ChartDataError, LayoutNotComputedError
from axisfit.interval import Interval
from axisfit.render import RGBA, RenderContext, TextMeasurer


def _with_alpha(color: RGBA, alpha: float) -> RGBA:
    r, g, b, a = color
    return (r, g, b, int(max(0.0, min(1.0, alpha)) * a))


class Trace(ABC):
    """Something drawn inside the chart area, which spans (0, 0) to (width, height)."""

    def __init__(self) -> None:
        self._size: tuple[float, float] | None = None

    @property
    def size(self) -> tuple[float, float]:
        if self._size is None:
            raise LayoutNotComputedError(f"{type(self).__name__}.layout() must be called first")
        return self._size

    def layout(self, width: float, height: float, rc: TextMeasurer) -> None:
        self._size = (float(width), float(height))

    @abstractmethod
    def draw(self, origin: tuple[float, float], rc: RenderContext) -> None:
        raise NotImplementedError


class HistogramTrace(Trace):
    """Bars, one per value, centred in equal-width slots unless positions are given."""

    # how fast bars narrow relative to their slot as slots get wider
    BAR_SCALE_F = 0.004

    def __init__(
        self,
        values: Any,
        *,
        bar_color: RGBA = theme.BAR_COLOR,
        bar_width: float | None = None,
        full_value: float | None = None,
    ) -> None:
        super().__init__()
        arr = coerce_values(values, label="values")
        if arr.size == 0:
            raise ChartDataError("empty series")
        if not np.all(np.isfinite(arr)):
            raise ChartDataError("histogram values must be finite")
        if np.any(arr < 0):
            raise ChartDataError("histogram values must be >= 0; bars grow up from the bottom edge")
        if bar_width is not None and bar_width <= 0:
            raise ValueError("bar width must be > 0")
        self._values = arr
        self.bar_color = bar_color
        self.bar_width = bar_width
        self.full_value = full_value
        self._positions: np.ndarray | None = None
        self._resolved: tuple[float, float, np.ndarray] | None = None

    @property
    def values(self) -> np.ndarray:
        return self._values

    def set_positions(self, positions: Any) -> "HistogramTrace":
        """Pin bar centres (chart-area pixels) instead of spacing them evenly."""
        arr = coerce_values(positions, label="positions")
        if arr.shape != self._values.shape:
            raise ChartDataError(f"positions and values length mismatch: {arr.size} != {self._values.size}")
        self._positions = arr
        self._resolved = None
        return self

    def layout(self, width: float, height: float, rc: TextMeasurer) -> None:
        super().layout(width, height, rc)
        n = self._values.size
        full = self.full_value
        if full is None:
            full = float(np.max(self._values))
        if not full > 0:
            full = 1.0
        slot = width / n
        bar_width = self.bar_width
        if bar_width is None:
            bar_width = (1.0 - math.atan(self.BAR_SCALE_F * slot) * (2.0 / math.pi)) * slot
        positions = self._positions
        if positions is None:
            positions = slot * (np.arange(n, dtype=np.float64) + 0.5)
        self._resolved = (full, bar_width, positions)

    def draw(self, origin: tuple[float, float], rc: RenderContext) -> None:
        if self._resolved is None:
            raise LayoutNotComputedError("HistogramTrace.layout() must be called first")
        _, height = self.size
        full, bar_width, positions = self._resolved
        ox, oy = origin
        half = bar_width * 0.5
        fill = _with_alpha(self.bar_color, 0.8)
        for value, pos in zip(self._values.tolist(), positions.tolist(), strict=True):
            x0 = ox + pos - half
            x1 = ox + pos + half
            y0 = oy + height * (1.0 - value / full)
            y1 = oy + height
            rc.fill_rect(x0, y0, x1, y1, fill)
            rc.stroke_rect(x0, y0, x1, y1, self.bar_color, 2.0)


class ScatterTrace(Trace):
    """Dots at `(x, y)` mapped through the given intervals; larger y is drawn higher."""

    def __init__(
        self,
        x: Any,
        y: Any,
        x_interval: Interval,
        y_interval: Interval,
        *,
        point_color: RGBA = theme.POINT_COLOR,
        radius: float = 2.0,
    ) -> None:
        super().__init__()
        xs = coerce_values(x, label="x")
        ys = coerce_values(y, label="y")
        if xs.shape != ys.shape:
            raise ChartDataError(f"x and y length mismatch: {xs.size} != {ys.size}")
        if radius <= 0:
            raise ValueError("radius must be > 0")
        mask = np.isfinite(xs) & np.isfinite(ys)
        self._x = xs[mask]
        self._y = ys[mask]
        self.x_interval = x_interval
        self.y_interval = y_interval
        self.point_color = point_color
        self.radius = float(radius)

    @property
    def values(self) -> list[tuple[float, float]]:
        return list(zip(self._x.tolist(), self._y.tolist()))

    def draw(self, origin: tuple[float, float], rc: RenderContext) -> None:
        width, height = self.size
        ox, oy = origin
        for x, y in zip(self._x.tolist(), self._y.tolist()):
            px = ox + self.x_interval.t(x) * width
            py = oy + (1.0 - self.y_interval.t(y)) * height
            rc.fill_circle(px, py, self.radius, self.point_color)
