from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from axisfit.spacing import format_tick

if TYPE_CHECKING:
    from axisfit.ticker import SpaceAround, SpaceBetween


class Sequence(ABC):
    """The discrete analogue of `Interval`: a finite, ordered run of items to label."""

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def get(self, idx: int) -> Any | None:
        """Item at `idx`, or None when there is no such item."""
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def label(self, item: Any) -> str:
        return str(item)

    def space_around(self) -> "SpaceAround":
        from axisfit.ticker import SpaceAround

        return SpaceAround(self)

    def space_between(self) -> "SpaceBetween":
        from axisfit.ticker import SpaceBetween

        return SpaceBetween(self)


class Numeric(Sequence):
    """Arithmetic progression `min, min + step, ...` up to and including `max`.

    `len()` counts whole steps in the range, so iteration yields one item more
    than `len()` when the range is an exact multiple of step.
    """

    __slots__ = ("_min", "_max", "_step")

    def __init__(self, min: float, max: float, step: float) -> None:
        lo = float(min)
        hi = float(max)
        step = float(step)
        if not (math.isfinite(step) and step > 0):
            raise ValueError(f"step must satisfy 0 < step < inf, got {step}")
        if not (math.isfinite(lo) and math.isfinite(hi) and lo <= hi):
            raise ValueError(f"range must satisfy -inf < min <= max < inf, got {lo}..{hi}")
        self._min = lo
        self._max = hi
        self._step = step

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    @property
    def step(self) -> float:
        return self._step

    def last(self) -> float:
        """Largest value in the progression; below `max` unless the range is a multiple of step."""
        return self._min + self._step * math.floor((self._max - self._min) / self._step)

    def __len__(self) -> int:
        return int(math.floor((self._max - self._min) / self._step))

    def get(self, idx: int) -> float | None:
        if idx < 0:
            return None
        value = self._min + idx * self._step
        if value > self._max:
            return None
        return value

    def __iter__(self) -> Iterator[float]:
        idx = 0
        value = self.get(idx)
        while value is not None:
            yield value
            idx += 1
            value = self.get(idx)

    def label(self, item: Any) -> str:
        return format_tick(float(item), step=self._step)

    def __repr__(self) -> str:
        return f"Numeric({self._min}..{self._max} step {self._step})"


class Categorical(Sequence):
    """An ordered list of displayable items.

    Items are held in a tuple, so the same categories can be shared between
    tickers and charts without copying.
    """

    __slots__ = ("_categories",)

    def __init__(self, categories: Iterable[Any]) -> None:
        self._categories = tuple(categories)

    @property
    def categories(self) -> tuple[Any, ...]:
        return self._categories

    def set_categories(self, categories: Iterable[Any]) -> tuple[Any, ...]:
        """Replace the categories, returning the old ones."""
        old = self._categories
        self._categories = tuple(categories)
        return old

    def __len__(self) -> int:
        return len(self._categories)

    def get(self, idx: int) -> Any | None:
        if 0 <= idx < len(self._categories):
            return self._categories[idx]
        return None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._categories)

    def __repr__(self) -> str:
        return f"Categorical({list(self._categories)!r})"
