from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from axisfit.raster.canvas import blend
from axisfit.render import RGBA


DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 12.0
# Tried in order after the requested family.
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "liberationsans",
    "arial",
    "helvetica",
    "menlo",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path.home() / ".fonts",
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def draw_text(dst: np.ndarray, x: int, y: int, text: str, color: RGBA, *, font: Font) -> None:
    """Blend `text` so its bounding box's top-left corner lands on `(x, y)`."""
    if not text:
        return
    mask = _glyph_mask(text, font)
    mh, mw = mask.shape
    # clip the mask against the canvas
    left, top = max(0, x), max(0, y)
    right, bottom = min(dst.shape[1], x + mw), min(dst.shape[0], y + mh)
    if right <= left or bottom <= top:
        return
    coverage = mask[top - y : bottom - y, left - x : right - x].astype(np.float32) / 255.0
    if np.any(coverage > 0):
        blend(dst[top:bottom, left:right], color, coverage=coverage)


def text_size(text: str, *, font: Font) -> tuple[int, int]:
    if not text:
        ascent, descent = font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


@lru_cache(maxsize=64)
def load_font(font_family: str, font_size_px: float, font_path: str | None = None) -> Font:
    """Load a TrueType font.

    An explicit `font_path` must load; otherwise the family is looked up in the
    usual font directories, falling back to Pillow's bundled font.
    """
    size = max(1, int(round(font_size_px)))
    if font_path is not None:
        return ImageFont.truetype(font_path, size=size)
    found = _find_font_file(font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower())
    if found is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(str(found), size=size)


@lru_cache(maxsize=256)
def _glyph_mask(text: str, font: Font) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=1)
def _installed_font_files() -> tuple[Path, ...]:
    files: list[Path] = []
    for base in FONT_DIRS:
        if base.is_dir():
            files.extend(sorted(p for p in base.rglob("*") if p.suffix.lower() in (".ttf", ".otf")))
    return tuple(files)


def _find_font_file(family: str) -> Path | None:
    files = _installed_font_files()
    for pattern in (family.replace(" ", ""),) + FONT_FALLBACK_PATTERNS:
        for path in files:
            stem = path.stem.lower().replace(" ", "")
            # "DejaVuSans" and "DejaVuSans-Book" match; "DejaVuSansMono" does not
            if stem == pattern or stem.startswith(pattern + "-"):
                return path
    return None
