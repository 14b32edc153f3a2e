from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from axisfit.interval import Interval


# Remainders this close (relative to the spacing) to 0 or to the spacing itself
# are float drift from values that already sit on a tick.
_SNAP_RTOL = 1e-9

# Ideal gaps outside this range leave no room to step a power of ten up or down.
_MIN_IDEAL = sys.float_info.min
_MAX_IDEAL = sys.float_info.max / 100.0


def calc_tick_spacing(interval: Interval, target_count: int) -> float:
    """Returns the gap between ticks, in value units, that gives at most
    `target_count` ticks and is 1, 2 or 5 x 10^n for some integer n.

    Returns NaN when no spacing exists: fewer than 2 ticks requested, or an
    interval too large or too small for a power-of-ten step to be represented.
    Callers treat NaN as "no ticks can be placed".
    """
    if target_count <= 1:
        return math.nan
    ideal = interval.size() / float(target_count - 1)
    if not _MIN_IDEAL <= ideal <= _MAX_IDEAL:
        return math.nan
    power = _pow10_just_too_many(interval, target_count, ideal)
    for factor in (2.0, 5.0):
        spacing = factor * 10.0**power
        if count_ticks(interval, spacing) <= target_count:
            return spacing
    return 10.0 ** (power + 1)


def _pow10_just_too_many(interval: Interval, target_count: int, ideal: float) -> int:
    # Exponent of a power of ten whose ticks overshoot `target_count`, while
    # ten times that spacing does not.
    gaps = float(target_count - 1)
    power = math.floor(math.log10(ideal))
    spacing = 10.0**power
    first = calc_next_tick(interval.min, spacing)
    if first + gaps * spacing < calc_prev_tick(interval.max, spacing):
        return power
    # Losing room at the ends leaves too few, so drop an order of magnitude.
    return power - 1


def _rem_euclid(v: float, spacing: float) -> float:
    rem = v % spacing
    if rem <= spacing * _SNAP_RTOL or spacing - rem <= spacing * _SNAP_RTOL:
        return 0.0
    return rem


def calc_next_tick(v: float, spacing: float) -> float:
    """Smallest multiple of `spacing` that is >= `v`."""
    rem = _rem_euclid(v, spacing)
    if rem == 0.0:
        return v
    return v - rem + spacing


def calc_prev_tick(v: float, spacing: float) -> float:
    """Largest multiple of `spacing` that is <= `v`."""
    return v - _rem_euclid(v, spacing)


def count_ticks(interval: Interval, spacing: float) -> int:
    first = calc_next_tick(interval.min, spacing)
    last = calc_prev_tick(interval.max, spacing)
    if last < first:
        return 0
    # fence posts, not fences
    return int(math.floor((last - first) / spacing + _SNAP_RTOL)) + 1


def tick_values(interval: Interval, spacing: float) -> np.ndarray:
    count = count_ticks(interval, spacing)
    if count == 0:
        return np.zeros(0, dtype=np.float64)
    first = calc_next_tick(interval.min, spacing)
    ticks = first + np.arange(count, dtype=np.float64) * spacing
    # -4.4e-16 and friends are zero
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=spacing * 1e-9)] = 0.0
    return ticks


def nice_scale(size: float) -> float:
    """The 1/2/5 x 10^n step used to round an interval of `size` outwards.

    Raises `ValueError` when no such step is representable for `size`.
    """
    if not (math.isfinite(size) and size > 0):
        raise ValueError(f"cannot pick a rounding step for size {size}")
    exponent = math.log10(size) - 1.0
    power = math.floor(exponent)
    frac = exponent - power
    if frac < math.log10(2.0):
        mantissa = 2.0
    elif frac < math.log10(5.0):
        mantissa = 5.0
    else:
        mantissa = 10.0
    scale = mantissa * 10.0**power
    if not scale > 0:
        raise ValueError(f"cannot pick a rounding step for size {size}")
    return scale


def format_tick(value: float, *, step: float | None = None) -> str:
    """Label text for a tick value.

    With `step`, labels get the decimals the step needs and values within
    float drift of zero print as "0". Very large or tiny values switch to
    exponent notation.
    """
    if not math.isfinite(value):
        return str(value)
    has_step = step is not None and math.isfinite(step) and step > 0
    if has_step and abs(value) <= step * _SNAP_RTOL:
        value = 0.0
    magnitude = abs(value)
    if magnitude and (magnitude >= 1e6 or magnitude < 1e-6 or (has_step and step < 1e-4)):
        return f"{value:.4e}"
    places = _step_decimals(step) if has_step else 6
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_ticks(values: Iterable[float]) -> list[str]:
    """Format evenly spaced ticks with the decimals their spacing needs."""
    ticks = [float(v) for v in values]
    step = abs(ticks[1] - ticks[0]) if len(ticks) > 1 else None
    return [format_tick(v, step=step) for v in ticks]


def _step_decimals(step: float) -> int:
    # digits after the point in the shortest repr of step
    exponent = Decimal(repr(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exponent)))
