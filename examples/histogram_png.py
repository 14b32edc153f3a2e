from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from axisfit import histogram
from axisfit.raster import RasterContext


def _render(out_path: Path, *, width: int, height: int) -> None:
    labels = [f"week-{idx:02d}" for idx in range(1, 13)]
    rng = np.random.default_rng(7)
    values = rng.integers(low=5, high=120, size=len(labels))

    chart = histogram(labels, values, width=width, height=height)
    rc = RasterContext(width, height)
    chart.layout(rc)
    chart.draw(rc)
    rc.save(out_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a histogram with fitted axis labels to PNG.")
    parser.add_argument("--out", default="examples/output/histogram.png")
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
