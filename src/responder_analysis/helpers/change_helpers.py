"""Seizure-change arithmetic shared by the classifier and descriptive stats."""

from collections.abc import Sequence

import numpy as np


def seizure_change_rate(baseline: float, latest: float) -> float:
    """Fractional seizure reduction from baseline to latest.

    A zero baseline cannot show a reduction, so it maps to 0 rather than a
    division error. Negative values mean seizures increased.
    """
    if baseline > 0:
        return (baseline - latest) / baseline
    return 0.0


def median(values: Sequence[float]) -> float:
    """Median with the even-length rule: mean of the two central values."""
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        raise ValueError("median of empty sequence")
    mid = n // 2
    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; raises on an empty sequence like ``median``."""
    if len(values) == 0:
        raise ValueError("mean of empty sequence")
    return float(np.mean(values))
