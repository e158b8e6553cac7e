"""Vectorized NumPy backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..engine_core import store_results, value_epsilon
from ..ordering import Order, strides
from .base import AxisPairs


def resolve_brackets(knots: np.ndarray, x: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Vectorized ``resolve_axis``: bracket indices and lower-knot weights."""
    n = knots.shape[0]
    mid = np.clip(np.searchsorted(knots, x, side="right") - 1, 0, n - 2)
    x0 = knots[mid]
    x1 = knots[mid + 1]
    weight = (x1 - x) / (x1 - x0)
    weight = np.where(x <= knots[0], 1.0, weight)
    weight = np.where(x >= knots[n - 1], 0.0, weight)
    return mid, weight


def interp_numpy(
    axis_counts: Sequence[int],
    query_count: int,
    values: Any,
    axes: AxisPairs,
    order: Order,
) -> np.ndarray:
    table = np.asarray(values)
    eps = value_epsilon(table)
    flat_strides = strides(order, axis_counts)

    mids = []
    weights = []
    for k, (xd, xi) in enumerate(axes):
        knots = np.asarray(xd, dtype=np.float64)[: int(axis_counts[k])]
        x = np.asarray(xi, dtype=np.float64)[:query_count]
        mid, weight = resolve_brackets(knots, x)
        mids.append(mid)
        weights.append(weight)

    acc = np.zeros(query_count, dtype=np.float64)
    for bitmask in range(1 << len(mids)):
        factor = np.ones(query_count, dtype=np.float64)
        offset = np.zeros(query_count, dtype=np.int64)
        bits = bitmask
        for k in range(len(mids)):
            if bits & 1:
                factor = factor * (1.0 - weights[k])
                offset += (mids[k] + 1) * flat_strides[k]
            else:
                factor = factor * weights[k]
                offset += mids[k] * flat_strides[k]
            bits >>= 1
        keep = factor > eps
        acc += np.where(keep, factor * table[np.where(keep, offset, 0)], 0.0)
    return acc


@dataclass
class NumpyBackend:
    """Resolves every axis once per query point and blends all corners at once."""

    name: str = "numpy"

    def run(
        self,
        axis_counts: Sequence[int],
        query_count: int,
        values: Any,
        results: Any,
        axes: AxisPairs,
        order: Order,
    ) -> None:
        out = interp_numpy(axis_counts, int(query_count), values, axes, order)
        store_results(results, out, int(query_count))


def build_numpy_backend() -> NumpyBackend:
    return NumpyBackend()
