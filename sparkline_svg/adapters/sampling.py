from __future__ import annotations

from typing import Literal, Sequence, TypeVar

T = TypeVar("T")

IntervalLabel = Literal["5m", "15m", "1h", "4h"]

# Source series arrive at 5-minute resolution; each label keeps every n-th sample.
INTERVAL_SAMPLES: dict[str, int] = {
    "5m": 1,
    "15m": 3,
    "1h": 12,
    "4h": 48,
}


def sample_every(samples: Sequence[T], interval: int) -> list[T]:
    """Keep the samples whose position is a multiple of ``interval``."""

    if interval <= 1:
        return list(samples)
    return [sample for i, sample in enumerate(samples) if i % interval == 0]


def sample_for_interval(samples: Sequence[T], label: IntervalLabel | str) -> list[T]:
    try:
        interval = INTERVAL_SAMPLES[label]
    except KeyError:
        raise ValueError(f"Unknown sampling interval: {label}") from None
    return sample_every(samples, interval)
