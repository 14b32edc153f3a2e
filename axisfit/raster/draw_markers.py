from __future__ import annotations

import numpy as np

from axisfit.raster.canvas import blend
from axisfit.render import RGBA


def fill_disc(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    if radius <= 0:
        return
    h, w = dst.shape[:2]
    x0 = max(0, int(np.floor(cx - radius)))
    x1 = min(w - 1, int(np.ceil(cx + radius)))
    y0 = max(0, int(np.floor(cy - radius)))
    y1 = min(h - 1, int(np.ceil(cy + radius)))
    if x1 < x0 or y1 < y0:
        return
    yy, xx = np.mgrid[y0 : y1 + 1, x0 : x1 + 1]
    inside = (xx - cx) ** 2 + (yy - cy) ** 2 <= radius * radius
    if np.any(inside):
        blend(dst[y0 : y1 + 1, x0 : x1 + 1], color, coverage=inside)
