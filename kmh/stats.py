"""Numeric helpers for aggregating probe samples."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import NoSamplesError


def average(values: Sequence[int | float]) -> float:
    """Return the arithmetic mean of ``values``.

    Raises:
        NoSamplesError: If ``values`` is empty. An empty mean is never
            returned as NaN so it cannot leak into a report.
    """
    if not values:
        raise NoSamplesError("cannot average an empty sample set")
    total = 0.0
    for value in values:
        total += float(value)
    return total / len(values)


__all__ = ["average"]
