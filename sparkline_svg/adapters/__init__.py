from .normalize import normalize_samples
from .sampling import INTERVAL_SAMPLES, sample_every, sample_for_interval

__all__ = [
    "INTERVAL_SAMPLES",
    "normalize_samples",
    "sample_every",
    "sample_for_interval",
]
