from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np

from axisfit.adapters import coerce_values
from axisfit.spacing import nice_scale

if TYPE_CHECKING:
    from axisfit.ticker import IntervalTicker


def _check_bounds(lo: float, hi: float) -> None:
    if not (math.isfinite(lo) and math.isfinite(hi) and lo < hi):
        raise ValueError(f"interval must satisfy -inf < min < max < inf, got {lo}..{hi}")


class Interval:
    """A continuous range of real numbers, `-inf < min < max < inf`.

    Whether the ends are open or closed is ignored. The operations below return
    new intervals; only `set_min`/`set_max` mutate, and they re-check the
    invariant. Intervals compare by value but are unhashable, since they can
    be mutated.
    """

    __slots__ = ("_min", "_max")

    def __init__(self, min: float, max: float) -> None:
        lo = float(min)
        hi = float(max)
        _check_bounds(lo, hi)
        self._min = lo
        self._max = hi

    @classmethod
    def from_values(cls, values: Any) -> "Interval":
        """Smallest interval containing every value. NaN and missing values are skipped."""
        arr = coerce_values(values, label="values")
        arr = arr[~np.isnan(arr)]
        if np.any(np.isinf(arr)):
            raise ValueError("can only extend to a finite value")
        # Fold seed; never a valid interval on its own.
        lo, hi = math.inf, -math.inf
        if arr.size:
            lo = float(np.min(arr))
            hi = float(np.max(arr))
        return cls(lo, hi)

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    def set_min(self, value: float) -> "Interval":
        value = float(value)
        _check_bounds(value, self._max)
        self._min = value
        return self

    def set_max(self, value: float) -> "Interval":
        value = float(value)
        _check_bounds(self._min, value)
        self._max = value
        return self

    def as_tuple(self) -> tuple[float, float]:
        return (self._min, self._max)

    def size(self) -> float:
        return self._max - self._min

    def center(self) -> float:
        return (self._max + self._min) * 0.5

    def t(self, value: float) -> float:
        """Position of `value` between min (0.0) and max (1.0)."""
        return (value - self._min) / (self._max - self._min)

    def extend_to(self, value: float) -> "Interval":
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("can only extend to a finite value")
        return Interval(min(self._min, value), max(self._max, value))

    def include_zero(self) -> "Interval":
        return self.extend_to(0.0)

    def scale_center(self, factor: float) -> "Interval":
        """Scale the interval by `factor` about its center."""
        center = self.center()
        lo = (self._min - center) * factor + center
        hi = (self._max - center) * factor + center
        return Interval(lo, hi)

    def to_rounded(self) -> "Interval":
        """Extend outwards to multiples of a 1/2/5 x 10^n step.

        The upper bound always moves to the next multiple strictly above max.
        """
        scale = nice_scale(self.size())
        lo = math.floor(self._min / scale) * scale
        hi = math.floor((self._max + scale) / scale) * scale
        return Interval(lo, hi)

    def ticker(self, **kwargs: Any) -> "IntervalTicker":
        from axisfit.ticker import IntervalTicker

        return IntervalTicker(self, **kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __repr__(self) -> str:
        return f"{self._min}..{self._max}"
