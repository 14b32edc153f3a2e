from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from axisfit.raster.canvas import draw_hline, draw_vline, fill_rect, new_canvas
from axisfit.raster.draw_lines import draw_line
from axisfit.raster.draw_markers import fill_disc
from axisfit.raster.draw_text import DEFAULT_FONT_FAMILY, Font, draw_text, load_font, text_size
from axisfit.render import RGBA


class RasterContext:
    """Render context drawing into an RGBA `uint8` array of shape (H, W, 4).

    Coordinates are rounded to whole pixels.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = (255, 255, 255, 255),
        font_family: str = DEFAULT_FONT_FAMILY,
        font_path: str | None = None,
    ) -> None:
        self.canvas = new_canvas(width, height, color=background)
        self.font_family = font_family
        self.font_path = font_path

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def measure_text(self, text: str, font_size_px: float) -> tuple[float, float]:
        w, h = text_size(text, font=self._font(font_size_px))
        return (float(w), float(h))

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float = 1.0) -> None:
        ax, ay = self._to_px(x0, y0)
        bx, by = self._to_px(x1, y1)
        brush = max(1, int(round(width)))
        if brush == 1 and ay == by:
            draw_hline(self.canvas, ax, bx, ay, color)
        elif brush == 1 and ax == bx:
            draw_vline(self.canvas, ax, ay, by, color)
        else:
            draw_line(self.canvas, ax, ay, bx, by, color, width=brush)

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float, color: RGBA) -> None:
        ax, ay = self._to_px(x0, y0)
        bx, by = self._to_px(x1, y1)
        fill_rect(self.canvas, ax, ay, bx, by, color)

    def stroke_rect(self, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float = 1.0) -> None:
        self.stroke_line(x0, y0, x1, y0, color, width)
        self.stroke_line(x1, y0, x1, y1, color, width)
        self.stroke_line(x1, y1, x0, y1, color, width)
        self.stroke_line(x0, y1, x0, y0, color, width)

    def draw_text_at(self, text: str, x: float, y: float, color: RGBA, font_size_px: float) -> None:
        px, py = self._to_px(x, y)
        draw_text(self.canvas, px, py, text, color, font=self._font(font_size_px))

    def fill_circle(self, cx: float, cy: float, radius: float, color: RGBA) -> None:
        fill_disc(self.canvas, cx, cy, radius, color)

    def to_rgba(self) -> np.ndarray:
        return self.canvas.copy()

    def save(self, path: str | Path) -> None:
        Image.fromarray(self.canvas).save(path)

    def _font(self, font_size_px: float) -> Font:
        return load_font(self.font_family, float(font_size_px), self.font_path)

    def _to_px(self, x: float, y: float) -> tuple[int, int]:
        return (int(round(x)), int(round(y)))
