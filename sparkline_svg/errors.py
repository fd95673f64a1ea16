from __future__ import annotations


class SparklineDataError(ValueError):
    """Raised when sample input cannot be coerced into a numeric series."""
