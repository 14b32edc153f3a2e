from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from axisfit.errors import LayoutNotComputedError
from axisfit.interval import Interval
from axisfit.sequence import Sequence
from axisfit.spacing import calc_tick_spacing, format_tick, tick_values


LOGGER = logging.getLogger(__name__)

# Rough room a numeric label needs along the axis. Should follow the font size.
DEFAULT_PIXELS_PER_TICK = 60.0

_L = TypeVar("_L")


@dataclass(frozen=True)
class Tick:
    """A position on an axis that gets a mark and a label."""

    # distance along the axis, in 0..=axis_len
    pos: float
    label: str


class Ticker(ABC, Generic[_L]):
    """Turns an axis length (device-independent pixels) into ticks.

    `layout(axis_len)` must run before `len`, `get` or `ticks`; those raise
    `LayoutNotComputedError` otherwise. Layout is cached per axis length.
    """

    def __init__(self) -> None:
        self._layout: _L | None = None

    def layout(self, axis_len: float) -> None:
        axis_len = float(axis_len)
        if not math.isfinite(axis_len) or axis_len < 0:
            raise ValueError("axis_len must be finite and >= 0")
        if self._layout is not None and self.axis_len == axis_len:
            return
        self._layout = self._compute_layout(axis_len)

    def invalidate(self) -> None:
        self._layout = None

    @property
    def is_laid_out(self) -> bool:
        return self._layout is not None

    @property
    def axis_len(self) -> float:
        return self._require_layout().axis_len  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return self._tick_count(self._require_layout())

    def get(self, idx: int) -> Tick | None:
        layout = self._require_layout()
        if idx < 0 or idx >= self._tick_count(layout):
            return None
        return self._tick(layout, idx)

    def ticks(self) -> list[Tick]:
        layout = self._require_layout()
        return [self._tick(layout, idx) for idx in range(self._tick_count(layout))]

    def reverse(self) -> "ReverseTicker":
        return ReverseTicker(self)

    def _require_layout(self) -> _L:
        if self._layout is None:
            raise LayoutNotComputedError(f"{type(self).__name__}.layout() must be called first")
        return self._layout

    @abstractmethod
    def _compute_layout(self, axis_len: float) -> _L:
        raise NotImplementedError

    @abstractmethod
    def _tick_count(self, layout: _L) -> int:
        raise NotImplementedError

    @abstractmethod
    def _tick(self, layout: _L, idx: int) -> Tick:
        raise NotImplementedError


@dataclass(frozen=True)
class IntervalLayout:
    axis_len: float
    values: tuple[float, ...]
    # NaN when the ticks are just the interval ends
    step: float
    # 1-D affine transform from value space to axis space
    scale: float
    translate: float


class IntervalTicker(Ticker[IntervalLayout]):
    """Ticks at "nice" values (1, 2 or 5 x 10^n apart) inside a continuous interval."""

    def __init__(self, interval: Interval, *, pixels_per_tick: float = DEFAULT_PIXELS_PER_TICK) -> None:
        super().__init__()
        if pixels_per_tick <= 0:
            raise ValueError("pixels_per_tick must be > 0")
        self._interval = interval
        self.pixels_per_tick = float(pixels_per_tick)

    @property
    def interval(self) -> Interval:
        return self._interval

    def set_interval(self, interval: Interval) -> "IntervalTicker":
        self._interval = interval
        self.invalidate()
        return self

    def _compute_layout(self, axis_len: float) -> IntervalLayout:
        interval = self._interval
        max_count = int(axis_len / self.pixels_per_tick)
        step = math.nan
        if max_count == 0:
            values: tuple[float, ...] = ()
        elif max_count == 1:
            values = (interval.min,)
        elif max_count == 2:
            values = (interval.min, interval.max)
        else:
            step = calc_tick_spacing(interval, max_count)
            # NaN: the interval is too wide or too narrow for any representable step
            values = () if math.isnan(step) else tuple(tick_values(interval, step).tolist())
            LOGGER.debug("interval %r: %d ticks every %g for axis_len=%g", interval, len(values), step, axis_len)
        scale = axis_len / interval.size()
        # The axis starts at 0, so only the interval start needs removing.
        translate = -interval.min * scale
        return IntervalLayout(axis_len=axis_len, values=values, step=step, scale=scale, translate=translate)

    def _tick_count(self, layout: IntervalLayout) -> int:
        return len(layout.values)

    def _tick(self, layout: IntervalLayout, idx: int) -> Tick:
        value = layout.values[idx]
        step = None if math.isnan(layout.step) else layout.step
        return Tick(pos=value * layout.scale + layout.translate, label=format_tick(value, step=step))

    def __repr__(self) -> str:
        return f"IntervalTicker({self._interval!r})"


@dataclass(frozen=True)
class SequenceLayout:
    axis_len: float
    count: int
    gap: float
    labels: tuple[str, ...]


class _SequenceTicker(Ticker[SequenceLayout]):
    def __init__(self, sequence: Sequence) -> None:
        super().__init__()
        self._sequence = sequence

    @property
    def sequence(self) -> Sequence:
        return self._sequence

    def set_sequence(self, sequence: Sequence) -> "_SequenceTicker":
        self._sequence = sequence
        self.invalidate()
        return self

    def _compute_layout(self, axis_len: float) -> SequenceLayout:
        seq = self._sequence
        labels = tuple(seq.label(item) for item in seq)
        count = len(labels)
        return SequenceLayout(axis_len=axis_len, count=count, gap=self._gap(axis_len, count), labels=labels)

    def _tick_count(self, layout: SequenceLayout) -> int:
        return layout.count

    def _tick(self, layout: SequenceLayout, idx: int) -> Tick:
        return Tick(pos=self._pos(layout, idx), label=layout.labels[idx])

    @abstractmethod
    def _gap(self, axis_len: float, count: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def _pos(self, layout: SequenceLayout, idx: int) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._sequence!r})"


class SpaceAround(_SequenceTicker):
    """Each item centred in its own equal-width slot."""

    def _gap(self, axis_len: float, count: int) -> float:
        return axis_len / count if count else 0.0

    def _pos(self, layout: SequenceLayout, idx: int) -> float:
        return layout.gap * (idx + 0.5)


class SpaceBetween(_SequenceTicker):
    """Items on the slot boundaries; the first at 0, the last at axis_len."""

    def _gap(self, axis_len: float, count: int) -> float:
        return axis_len / max(count - 1, 1)

    def _pos(self, layout: SequenceLayout, idx: int) -> float:
        return layout.gap * idx


class ReverseTicker(Ticker[Any]):
    """Mirrors another ticker about the middle of the axis.

    Used to point larger values up a vertical axis whose coordinates grow
    downwards.
    """

    def __init__(self, inner: Ticker[Any]) -> None:
        super().__init__()
        self.inner = inner

    def layout(self, axis_len: float) -> None:
        self.inner.layout(axis_len)

    def invalidate(self) -> None:
        self.inner.invalidate()

    @property
    def is_laid_out(self) -> bool:
        return self.inner.is_laid_out

    def _compute_layout(self, axis_len: float) -> Any:
        return self.inner._compute_layout(axis_len)

    def _require_layout(self) -> Any:
        return self.inner._require_layout()

    def _tick_count(self, layout: Any) -> int:
        return self.inner._tick_count(layout)

    def _tick(self, layout: Any, idx: int) -> Tick:
        tick = self.inner._tick(layout, idx)
        return Tick(pos=layout.axis_len - tick.pos, label=tick.label)

    def __repr__(self) -> str:
        return f"ReverseTicker({self.inner!r})"
