from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from rasterplot.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


NUMERIC_KINDS = frozenset("iufb")


def normalize_xy(y: Any, *, x: Any = None) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Coerce parallel x/y inputs to float64 arrays plus a finiteness mask.

    Accepts plain sequences, numpy arrays, pandas Series (or a DataFrame with a
    single numeric column) and torch tensors. ``None`` entries become NaN and
    are masked out. When ``x`` is omitted the sample index is used.
    """
    if y is None:
        raise PlotDataError("y input is required")
    y_arr = to_float_array(y, label="y")
    if not y_arr.size:
        raise PlotDataError("empty series")
    x_arr = np.arange(y_arr.size, dtype=np.float64) if x is None else to_float_array(x, label="x")
    if x_arr.size != y_arr.size:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not mask.any():
        raise PlotDataError("series contains no finite points")
    return x_arr, y_arr, mask


def to_float_array(value: Any, *, label: str) -> np.ndarray:
    if pd is not None and isinstance(value, pd.DataFrame):
        value = _single_numeric_column(value, label=label)

    if torch is not None and isinstance(value, torch.Tensor):
        arr = value.detach().cpu().to(torch.float64).numpy()
    elif pd is not None and isinstance(value, pd.Series):
        arr = value.to_numpy()
    elif isinstance(value, np.ndarray):
        arr = value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
    else:
        raise PlotDataError(f"unsupported {label} input type: {type(value).__name__}")

    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D, got shape {arr.shape}")
    if arr.dtype.kind in NUMERIC_KINDS:
        return arr.astype(np.float64, copy=False)
    return np.fromiter((_scalar(raw, label, i) for i, raw in enumerate(arr.tolist())), dtype=np.float64, count=arr.size)


def _single_numeric_column(frame: Any, *, label: str) -> Any:
    numeric = frame.select_dtypes(include="number")
    if numeric.shape[1] != 1:
        raise PlotDataError(f"{label} DataFrame input must contain exactly one numeric column")
    return numeric.iloc[:, 0]


def _scalar(raw: Any, label: str, index: int) -> float:
    if raw is None:
        return float("nan")
    if isinstance(raw, (str, bytes)):
        raise PlotDataError(f"{label} contains non-numeric value at index {index}: {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
