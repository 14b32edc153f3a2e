from __future__ import annotations

import numpy as np

from axisfit.render import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    return np.tile(np.asarray(color, dtype=np.uint8), (height, width, 1))


def blend(region: np.ndarray, color: RGBA, coverage: np.ndarray | None = None) -> None:
    """Composite `color` over an (..., 4) region in place.

    `coverage` (0..1, shaped like the region without its channel axis) scales
    the source alpha per pixel; pixels with no coverage are left as they are.
    """
    src_a: float | np.ndarray = color[3] / 255.0
    if coverage is not None:
        src_a = src_a * coverage.astype(np.float32)[..., None]
    src_rgb = np.asarray(color[:3], dtype=np.float32)
    dst_rgb = region[..., :3].astype(np.float32)
    dst_a = region[..., 3:4].astype(np.float32) / 255.0

    out_a = src_a + dst_a * (1.0 - src_a)
    out_rgb = (src_rgb * src_a + dst_rgb * dst_a * (1.0 - src_a)) / np.where(out_a > 1e-6, out_a, 1.0)
    region[..., :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    region[..., 3:4] = np.clip(np.rint(out_a * 255.0), 0, 255).astype(np.uint8)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if not 0 <= y < dst.shape[0]:
        return
    span = _clip_span(x0, x1, dst.shape[1])
    if span is not None:
        blend(dst[y, span[0] : span[1] + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if not 0 <= x < dst.shape[1]:
        return
    span = _clip_span(y0, y1, dst.shape[0])
    if span is not None:
        blend(dst[span[0] : span[1] + 1, x], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Fill the inclusive pixel box spanned by the two corners, clipped to `dst`."""
    cols = _clip_span(x0, x1, dst.shape[1])
    rows = _clip_span(y0, y1, dst.shape[0])
    if cols is None or rows is None:
        return
    blend(dst[rows[0] : rows[1] + 1, cols[0] : cols[1] + 1], color)


def _clip_span(a: int, b: int, limit: int) -> tuple[int, int] | None:
    lo = max(0, min(a, b))
    hi = min(limit - 1, max(a, b))
    if lo > hi:
        return None
    return (lo, hi)
