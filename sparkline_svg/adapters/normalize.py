from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from sparkline_svg.errors import SparklineDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_samples(samples: Any, *, column: str | None = None) -> np.ndarray:
    """Coerce sample input into a 1-D float64 array of finite values.

    Accepts ``(timestamp, value)`` pairs or bare values as Python sequences,
    numpy arrays, torch tensors, pandas Series or DataFrames. Pairs keep only
    their value; NaN/inf/None entries are dropped while order is preserved.
    """

    if samples is None:
        raise SparklineDataError("samples input is required")

    values = _coerce_values(_resolve_frame(samples, column=column))
    return values[np.isfinite(values)]


def _resolve_frame(samples: Any, *, column: str | None) -> Any:
    if pd is not None and isinstance(samples, pd.DataFrame):
        if column is not None:
            if column not in samples.columns:
                raise SparklineDataError(f"column not found: {column}")
            return samples[column]
        numeric_cols = [c for c in samples.columns if _is_numeric_dtype(samples[c])]
        if len(numeric_cols) != 1:
            raise SparklineDataError("DataFrame input must contain exactly one numeric column or name `column=`")
        return samples[numeric_cols[0]]
    if column is not None:
        raise SparklineDataError("`column` is only supported for pandas DataFrame input")
    return samples


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_values(value: Any) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _take_value_column(tensor.to(torch.float64).numpy())

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy())

    if isinstance(value, np.ndarray):
        return _take_value_column(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if not value:
            return np.empty(0, dtype=np.float64)
        if all(_is_pair(item) for item in value):
            return _coerce_ndarray(np.asarray([item[1] for item in value], dtype=object))
        return _coerce_ndarray(np.asarray(list(value), dtype=object))

    raise SparklineDataError(f"unsupported samples input type: {type(value)!r}")


def _is_pair(item: Any) -> bool:
    return isinstance(item, (Sequence, np.ndarray)) and not isinstance(item, (str, bytes, bytearray)) and len(item) == 2


def _take_value_column(arr: np.ndarray) -> np.ndarray:
    if arr.ndim == 1:
        return _coerce_ndarray(arr)
    if arr.ndim == 2 and arr.shape[1] == 2:
        return _coerce_ndarray(arr[:, 1])
    raise SparklineDataError(f"samples array must be 1-D or N x 2, got shape {arr.shape}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise SparklineDataError("sample values must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError, OverflowError) as exc:
            raise SparklineDataError(f"samples contain non-numeric value at index {i}: {raw!r}") from exc
    return out
