"""Up-front precondition checks for the checked entry points."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatch, InvalidAxis, TableSizeMismatch


def check_axis(knots: Sequence[float], axis: int = 0) -> None:
    xd = np.asarray(knots, dtype=np.float64)
    if xd.ndim != 1:
        raise InvalidAxis(axis, "knots must be a 1-D sequence")
    if xd.shape[0] < 2:
        raise InvalidAxis(axis, "at least 2 knots are required")
    if not np.isfinite(xd).all():
        raise InvalidAxis(axis, "knots must be finite")
    if np.any(np.diff(xd) <= 0.0):
        raise InvalidAxis(axis, "knots must be strictly increasing")


def check_table(values: Any, axis_counts: Sequence[int]) -> None:
    expected = 1
    for n in axis_counts:
        expected *= int(n)
    if np.ndim(values) != 1:
        raise TableSizeMismatch(expected, int(np.size(values)))
    actual = len(values)
    if actual != expected:
        raise TableSizeMismatch(expected, actual)


def check_inputs(
    axis_counts: Sequence[int],
    query_count: int,
    values: Any,
    results: Any,
    axes: Sequence[Tuple[Sequence[float], Sequence[float]]],
) -> None:
    """Raise the first violated precondition of an interpolation call."""
    counts = [int(n) for n in axis_counts]
    if not counts:
        raise DimensionMismatch("at least one axis is required")
    if len(axes) != len(counts):
        raise DimensionMismatch(
            f"{len(axes)} (knots, queries) pairs supplied for {len(counts)} axes"
        )
    if query_count < 0:
        raise DimensionMismatch("query_count must be >= 0")

    for k, (xd, xi) in enumerate(axes):
        check_axis(xd, axis=k)
        if len(xd) != counts[k]:
            raise DimensionMismatch(f"axis {k} has {len(xd)} knots, axis_counts says {counts[k]}")
        if len(xi) != query_count:
            raise DimensionMismatch(f"axis {k} has {len(xi)} query coordinates, expected {query_count}")

    if len(results) != query_count:
        raise DimensionMismatch(f"output has {len(results)} entries, expected {query_count}")
    check_table(values, counts)
