from __future__ import annotations

from typing import Protocol


RGBA = tuple[int, int, int, int]


class TextMeasurer(Protocol):
    def measure_text(self, text: str, font_size_px: float) -> tuple[float, float]:
        """Return the `(width, height)` the text would take up when drawn."""
        ...


class RenderContext(TextMeasurer, Protocol):
    """Drawing capability the axes and traces draw through.

    Coordinates are device-independent pixels with y growing downwards.
    """

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float = 1.0) -> None:
        ...

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float, color: RGBA) -> None:
        ...

    def stroke_rect(self, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float = 1.0) -> None:
        ...

    def draw_text_at(self, text: str, x: float, y: float, color: RGBA, font_size_px: float) -> None:
        """Draw text with its bounding box's top-left corner at `(x, y)`."""
        ...

    def fill_circle(self, cx: float, cy: float, radius: float, color: RGBA) -> None:
        ...
