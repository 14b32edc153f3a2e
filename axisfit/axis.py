from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Literal, Sequence

from axisfit import theme
from axisfit.errors import LayoutError, LayoutNotComputedError
from axisfit.render import RGBA, RenderContext, TextMeasurer
from axisfit.ticker import Tick, Ticker


LOGGER = logging.getLogger(__name__)

Direction = Literal["horizontal", "vertical"]
# "before" is above / left of the axis line, "after" is below / right of it.
LabelPosition = Literal["before", "after"]


def fit_labels(positions: Sequence[float], extents: Sequence[float]) -> list[int]:
    """Indices of the largest evenly strided label subset that does not overlap.

    `positions` are label centres along the axis (in tick order) and `extents`
    the label sizes along the same direction. Every `step`-th label is tried,
    starting from step 1 and always keeping index 0, up to `ceil(n / 2)`. If no
    stride fits, nothing is selected.
    """
    if len(positions) != len(extents):
        raise ValueError("positions and extents must have the same length")
    n = len(positions)
    for step in range(1, (n + 1) // 2 + 1):
        candidate = list(range(0, n, step))
        # TODO: spread the leftover gap when n - 1 is not a multiple of step.
        if _labels_fit(positions, extents, candidate):
            return candidate
    return []


def _labels_fit(positions: Sequence[float], extents: Sequence[float], indices: Sequence[int]) -> bool:
    prev_end = -math.inf
    # reversed tickers hand over positions in descending order
    for idx in sorted(indices, key=lambda i: positions[i]):
        half = extents[idx] * 0.5
        if prev_end >= positions[idx] - half:
            return False
        prev_end = positions[idx] + half
    return True


@dataclass(frozen=True)
class AxisStyle:
    font_size_px: float = theme.FONT_SIZE_PX
    tick_length: float = theme.SCALE_MARGIN
    # distance from the axis line to the nearest edge of a label
    label_margin: float = theme.SCALE_MARGIN
    axis_color: RGBA = theme.AXIS_COLOR
    axis_width: float = 2.0
    tick_color: RGBA = theme.TICK_COLOR
    tick_width: float = 1.0
    label_color: RGBA = theme.LABEL_COLOR

    def __post_init__(self) -> None:
        if self.font_size_px <= 0:
            raise ValueError("font_size_px must be > 0")
        if self.tick_length < 0 or self.label_margin < 0:
            raise ValueError("tick_length/label_margin must be >= 0")


@dataclass(frozen=True)
class AxisLayout:
    axis_len: float
    ticks: tuple[Tick, ...]
    # (width, height) per tick label
    label_sizes: tuple[tuple[float, float], ...]
    labels_to_draw: tuple[int, ...]


@dataclass
class Axis:
    """Retained layout for one axis: its ticks, measured labels and which labels fit.

    Call `layout` whenever the axis length, the ticker's data or the font
    changes, and before `draw`.
    """

    direction: Direction
    label_pos: LabelPosition
    ticker: Ticker
    style: AxisStyle = field(default_factory=AxisStyle)
    _layout: AxisLayout | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.direction not in ("horizontal", "vertical"):
            raise ValueError(f"unsupported axis direction: {self.direction}")
        if self.label_pos not in ("before", "after"):
            raise ValueError(f"unsupported label position: {self.label_pos}")

    def set_ticker(self, ticker: Ticker) -> "Axis":
        self.ticker = ticker
        self._layout = None
        return self

    def set_style(self, style: AxisStyle) -> "Axis":
        self.style = style
        self._layout = None
        return self

    def set_direction(self, direction: Direction) -> "Axis":
        if direction != self.direction:
            self.direction = direction
            self._layout = None
        return self

    def set_label_pos(self, label_pos: LabelPosition) -> "Axis":
        if label_pos != self.label_pos:
            self.label_pos = label_pos
            self._layout = None
        return self

    def invalidate(self) -> None:
        self._layout = None

    @property
    def is_laid_out(self) -> bool:
        return self._layout is not None

    def layout(self, axis_len: float, rc: TextMeasurer) -> None:
        """Lay out ticks and fit labels for an axis `axis_len` long.

        Raises `LayoutError` if the render context fails to measure a label.
        """
        self._layout = None
        self.ticker.invalidate()
        self.ticker.layout(axis_len)
        ticks = tuple(self.ticker.ticks())
        sizes: list[tuple[float, float]] = []
        for tick in ticks:
            try:
                w, h = rc.measure_text(tick.label, self.style.font_size_px)
            except Exception as exc:
                raise LayoutError(f"failed to measure tick label {tick.label!r}") from exc
            sizes.append((float(w), float(h)))

        extent_idx = 1 if self.direction == "vertical" else 0
        selected = fit_labels([t.pos for t in ticks], [s[extent_idx] for s in sizes])
        if ticks and not selected:
            LOGGER.warning("no tick labels fit on a %s axis %.1f long; drawing ticks only", self.direction, axis_len)
        elif len(selected) < len(ticks):
            LOGGER.debug("showing %d of %d tick labels", len(selected), len(ticks))
        self._layout = AxisLayout(
            axis_len=float(axis_len),
            ticks=ticks,
            label_sizes=tuple(sizes),
            labels_to_draw=tuple(selected),
        )

    @property
    def axis_len(self) -> float:
        return self._require_layout().axis_len

    def ticks(self) -> tuple[Tick, ...]:
        return self._require_layout().ticks

    def labels_to_draw(self) -> tuple[int, ...]:
        return self._require_layout().labels_to_draw

    def label_positions(self) -> list[tuple[float, float, str]]:
        """Top-left corner and text of every drawn label, relative to the axis line origin."""
        layout = self._require_layout()
        margin = self.style.label_margin
        out: list[tuple[float, float, str]] = []
        for idx in layout.labels_to_draw:
            tick = layout.ticks[idx]
            w, h = layout.label_sizes[idx]
            if self.direction == "horizontal":
                x = tick.pos - w * 0.5
                y = margin if self.label_pos == "after" else -margin - h
            else:
                y = tick.pos - h * 0.5
                x = margin if self.label_pos == "after" else -margin - w
            out.append((x, y, tick.label))
        return out

    def size(self) -> tuple[float, float]:
        """`(width, height)` the axis needs, labels included."""
        layout = self._require_layout()
        margin = self.style.label_margin
        if self.direction == "horizontal":
            max_h = max((h for _, h in layout.label_sizes), default=0.0)
            return (layout.axis_len, margin + max_h)
        max_w = max((w for w, _ in layout.label_sizes), default=0.0)
        return (margin + max_w, layout.axis_len)

    def draw(self, origin: tuple[float, float], rc: RenderContext) -> None:
        """Draw the axis line, tick marks and fitted labels with the line starting at `origin`."""
        layout = self._require_layout()
        ox, oy = origin
        style = self.style
        horizontal = self.direction == "horizontal"

        # extend by one so ticks at the ends are fully covered
        if horizontal:
            rc.stroke_line(ox - 1.0, oy, ox + layout.axis_len + 1.0, oy, style.axis_color, style.axis_width)
        else:
            rc.stroke_line(ox, oy - 1.0, ox, oy + layout.axis_len + 1.0, style.axis_color, style.axis_width)

        # tick marks go on the side opposite the labels
        sign = -1.0 if self.label_pos == "after" else 1.0
        mark = sign * style.tick_length
        for tick in layout.ticks:
            if horizontal:
                rc.stroke_line(ox + tick.pos, oy, ox + tick.pos, oy + mark, style.tick_color, style.tick_width)
            else:
                rc.stroke_line(ox, oy + tick.pos, ox + mark, oy + tick.pos, style.tick_color, style.tick_width)

        for x, y, text in self.label_positions():
            rc.draw_text_at(text, ox + x, oy + y, style.label_color, style.font_size_px)

    def _require_layout(self) -> AxisLayout:
        if self._layout is None:
            raise LayoutNotComputedError("Axis.layout() must be called before it is drawn or queried")
        return self._layout
