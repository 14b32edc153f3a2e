from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np

from axisfit.errors import ChartDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


_NUMERIC_KINDS = frozenset("iufb")


def coerce_values(value: Any, *, label: str = "values") -> np.ndarray:
    """Turn 1-D numeric input into a float64 array; missing entries become NaN.

    Accepts numpy arrays, pandas Series, torch tensors and any other iterable
    of numbers (Decimal and None included). Text is rejected.
    """
    if torch is not None and isinstance(value, torch.Tensor):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return value.detach().cpu().to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _to_float64(value, label=label)

    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")
    items = list(value)
    arr = np.empty(len(items), dtype=object)
    for i, item in enumerate(items):
        arr[i] = item
    return _to_float64(arr, label=label)


def normalize_points(points: Any) -> tuple[np.ndarray, np.ndarray]:
    """Split `(x, y)` pairs (or an (N, 2) array / two-column DataFrame) into x and y arrays.

    Pairs where either coordinate is missing are dropped.
    """
    if pd is not None and isinstance(points, pd.DataFrame):
        numeric = [c for c in points.columns if pd.api.types.is_numeric_dtype(points[c])]
        if len(numeric) != 2:
            raise ChartDataError("point DataFrame must contain exactly two numeric columns")
        x = coerce_values(points[numeric[0]], label="x")
        y = coerce_values(points[numeric[1]], label="y")
    else:
        table = points if isinstance(points, np.ndarray) else np.asarray(list(points), dtype=object)
        if table.size == 0:
            raise ChartDataError("empty series")
        if table.ndim != 2 or table.shape[1] != 2:
            raise ChartDataError("points must be (x, y) pairs")
        x = _to_float64(table[:, 0], label="x")
        y = _to_float64(table[:, 1], label="y")

    keep = np.isfinite(x) & np.isfinite(y)
    if not keep.any():
        raise ChartDataError("series contains no finite points")
    return x[keep], y[keep]


def _to_float64(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in _NUMERIC_KINDS:
        return arr.astype(np.float64, copy=False)
    out = np.full(arr.shape[0], np.nan, dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
