"""Reference interpolation loop shared by the pure-Python backend."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np

from .axis import AxisChain
from .ordering import Order, natural_index, reverse_index


def value_epsilon(values: Any) -> float:
    """Machine epsilon of the table's floating dtype (float64 otherwise)."""
    dtype = getattr(values, "dtype", None)
    if dtype is not None and np.issubdtype(dtype, np.floating):
        return float(np.finfo(dtype).eps)
    return float(np.finfo(np.float64).eps)


def store_results(results: Any, out: np.ndarray, query_count: int) -> None:
    if isinstance(results, np.ndarray):
        results[:query_count] = out
    else:
        results[:query_count] = out.tolist()


def run_interp_loop(
    axis_counts: Sequence[int],
    query_count: int,
    values: Any,
    results: Any,
    axes: Sequence[Tuple[Sequence[float], Sequence[float]]],
    order: Order | str = Order.NATURAL,
) -> Any:
    """Blend the ``2**D`` bracketing corners of every query point.

    Each axis is re-resolved for every corner, exactly as the chained
    resolvers describe it. Corners whose blend factor does not exceed the
    table's machine epsilon are skipped.
    """
    chain = AxisChain.from_pairs(axes)
    counts = tuple(int(n) for n in axis_counts)
    mux = natural_index if Order.coerce(order) is Order.NATURAL else reverse_index
    power = 1 << chain.dimension
    eps = value_epsilon(values)

    for n in range(int(query_count)):
        acc = 0.0
        for bitmask in range(power):
            indices, factor = chain.run(n, bitmask, 1.0)
            if factor > eps:
                acc += factor * float(values[mux(indices, counts)])
        results[n] = acc
    return results
