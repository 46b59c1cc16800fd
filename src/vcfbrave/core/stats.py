"""
Distribution Calculator: per-sample summary statistics.

Quantiles use linear interpolation between the two order statistics that
bracket the fractional rank ``p / 100 * (n - 1)``.

Missing per-sample values (``.`` in the file, ``None`` through pysam) are
dropped before anything is computed; they are never coerced to a number.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from ..errors import EmptyDistributionError
from ..models.core import Distribution

__all__ = ["quantile", "calc_distribution", "per_sample_values"]


def quantile(values: Sequence[float], p: float) -> float:
    """
    Value at percentile ``p`` (0-100) of an ascending-sorted sequence.

    Args:
        values: Sorted values.
        p: Percentile in the closed range [0, 100].

    Returns:
        The interpolated value.
    """
    n = len(values)
    if n == 0:
        raise EmptyDistributionError()
    if not 0 <= p <= 100:
        raise ValueError(f"Percentile must be within [0, 100], got {p}")

    if n == 1:
        return float(values[0])
    if p == 100:
        return float(values[-1])

    rank = p / 100 * (n - 1)
    lo = math.floor(rank)
    frac = rank - lo
    return float(values[lo] + (values[lo + 1] - values[lo]) * frac)


def calc_distribution(values: Iterable[Any], tag: str | None = None) -> Distribution:
    """
    Summarize raw per-sample values into a Distribution.

    Args:
        values: Raw values, possibly containing ``None`` for missing entries.
        tag: FORMAT tag name, used in the error message only.

    Raises:
        EmptyDistributionError: If no non-missing value remains.
    """
    present = [v for v in values if v is not None]
    if not present:
        raise EmptyDistributionError(tag)

    data = np.sort(np.asarray(present, dtype=np.float64))

    return Distribution(
        min=float(data[0]),
        q25=quantile(data, 25),
        median=quantile(data, 50),
        q75=quantile(data, 75),
        max=float(data[-1]),
        mean=float(data.mean()),
    )


def per_sample_values(record: Any, tag: str) -> list[Any]:
    """
    Collect the first value of a FORMAT tag for every sample of a record.

    Samples without the tag (or a record whose FORMAT lacks it) yield ``None``.
    """
    values = []
    for sample in record.samples.values():
        value = sample.get(tag)
        if isinstance(value, tuple):
            value = value[0] if value else None
        values.append(value)
    return values
