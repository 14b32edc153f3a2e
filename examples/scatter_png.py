from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from axisfit import Categorical, Interval, scatter
from axisfit.raster import RasterContext


def _points() -> np.ndarray:
    x = np.linspace(-3.0, 11.5, 60, dtype=np.float64)
    y = 0.4 * x**2 - 2.0 * x + np.sin(x * 1.7) * 3.0
    return np.column_stack([x, y])


def _render(out_path: Path, *, width: int, height: int) -> None:
    chart = scatter(_points(), width=width, height=height)
    # Extra axes: a mirrored value scale on the right, named bands on top.
    chart.set_right_axis(Interval(0.0, 1.0).ticker(pixels_per_tick=40.0).reverse())
    chart.set_top_axis(Categorical(["low", "mid", "high"]).space_around())
    rc = RasterContext(width, height)
    chart.layout(rc)
    chart.draw(rc)
    rc.save(out_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a scatter plot with axes on all four sides to PNG.")
    parser.add_argument("--out", default="examples/output/scatter.png")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=400)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    _render(out_path, width=args.width, height=args.height)
    print(f"wrote {out_path}")


if __name__ == "__main__":
    main()
