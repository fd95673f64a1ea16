from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sparkline_svg.errors import SparklineDataError


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ValueLimits:
    vmin: float
    vmax: float

    @property
    def span(self) -> float:
        return self.vmax - self.vmin


def compute_limits(values: np.ndarray) -> ValueLimits:
    vmin = float(np.min(values))
    vmax = float(np.max(values))
    if vmin == vmax:
        # Unit span centered on the value keeps a flat series on the mid-line.
        return ValueLimits(vmin=vmin - 0.5, vmax=vmax + 0.5)
    return ValueLimits(vmin=vmin, vmax=vmax)


def normalize_values(values: np.ndarray, limits: ValueLimits) -> np.ndarray:
    """Position of each value within ``limits`` as a fraction in [0, 1]."""

    span = limits.span
    if np.isfinite(span):
        if span == 0.0:
            # Magnitudes where the +/-0.5 expansion is below float resolution.
            return np.full(values.shape, 0.5, dtype=np.float64)
        return (values - limits.vmin) / span

    # Span overflows float64; rescale before subtracting.
    scale = max(abs(limits.vmin), abs(limits.vmax))
    lo = limits.vmin / scale
    return (values / scale - lo) / (limits.vmax / scale - lo)


def map_points(values: np.ndarray, *, width: float, height: float, padding: float) -> list[Point]:
    """Place values on an inset canvas, evenly spaced by index, y growing downward."""

    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1 or arr.size < 2:
        raise SparklineDataError("at least two values are required to map a sparkline")

    limits = compute_limits(arr)
    plot_width = width - 2.0 * padding
    plot_height = height - 2.0 * padding

    steps = np.arange(arr.size, dtype=np.float64) / float(arr.size - 1)
    xs = padding + steps * plot_width
    ys = padding + plot_height - normalize_values(arr, limits) * plot_height
    return [Point(float(x), float(y)) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)]
