"""Backend protocol and input packing shared by compiled kernels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, Tuple

import numpy as np

from ..engine_core import value_epsilon
from ..ordering import Order, strides

AxisPairs = Sequence[Tuple[Sequence[float], Sequence[float]]]


class InterpolationBackend(Protocol):
    name: str

    def run(
        self,
        axis_counts: Sequence[int],
        query_count: int,
        values: Any,
        results: Any,
        axes: AxisPairs,
        order: Order,
    ) -> None:
        ...


@dataclass
class PackedInputs:
    """Contiguous float64/intp buffers for loop kernels that cannot take ragged axes."""

    knots: np.ndarray
    knot_offsets: np.ndarray
    counts: np.ndarray
    queries: np.ndarray
    values: np.ndarray
    strides: np.ndarray
    eps: float

    @classmethod
    def pack(
        cls,
        axis_counts: Sequence[int],
        query_count: int,
        values: Any,
        axes: AxisPairs,
        order: Order,
    ) -> "PackedInputs":
        counts = np.asarray([int(n) for n in axis_counts], dtype=np.intp)
        knots = [np.asarray(xd, dtype=np.float64)[: counts[k]] for k, (xd, _) in enumerate(axes)]
        offsets = np.zeros(len(knots), dtype=np.intp)
        if len(knots) > 1:
            offsets[1:] = np.cumsum(counts[:-1])
        queries = np.empty((len(axes), int(query_count)), dtype=np.float64)
        for k, (_, xi) in enumerate(axes):
            queries[k, :] = np.asarray(xi, dtype=np.float64)[:query_count]
        return cls(
            knots=np.ascontiguousarray(np.concatenate(knots)),
            knot_offsets=offsets,
            counts=counts,
            queries=queries,
            values=np.ascontiguousarray(np.asarray(values, dtype=np.float64)),
            strides=strides(order, counts).astype(np.intp),
            eps=value_epsilon(values),
        )
