from __future__ import annotations

from typing import Iterator

import numpy as np

from axisfit.raster.canvas import blend
from axisfit.render import RGBA


def draw_line(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    """Bresenham line stamped with a square brush `width` pixels across.

    Stamps are merged before blending, so each pixel is composited once and
    translucent lines come out even.
    """
    brush = max(1, width)
    lo = -((brush - 1) // 2)
    covered: set[tuple[int, int]] = set()
    for x, y in _bresenham(x0, y0, x1, y1):
        for dy in range(lo, lo + brush):
            for dx in range(lo, lo + brush):
                covered.add((x + dx, y + dy))

    h, w = dst.shape[:2]
    inside = [(x, y) for x, y in covered if 0 <= x < w and 0 <= y < h]
    if not inside:
        return
    xs = np.fromiter((p[0] for p in inside), dtype=np.intp, count=len(inside))
    ys = np.fromiter((p[1] for p in inside), dtype=np.intp, count=len(inside))
    pixels = dst[ys, xs]
    blend(pixels, color)
    dst[ys, xs] = pixels


def _bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield (x0, y0)
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
