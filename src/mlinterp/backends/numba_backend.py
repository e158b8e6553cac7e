"""Numba-accelerated interpolation backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..engine_core import store_results
from ..ordering import Order
from .base import AxisPairs, PackedInputs

logger = logging.getLogger(__name__)

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _interp_numba(
        knots: np.ndarray,
        knot_offsets: np.ndarray,
        counts: np.ndarray,
        queries: np.ndarray,
        values: np.ndarray,
        flat_strides: np.ndarray,
        eps: float,
        out: np.ndarray,
    ) -> None:
        dim = counts.shape[0]
        m = queries.shape[1]
        power = 1 << dim
        mids = np.empty(dim, dtype=np.int64)
        weights = np.empty(dim, dtype=np.float64)
        for n in range(m):
            for k in range(dim):
                base = knot_offsets[k]
                nk = counts[k]
                x = queries[k, n]
                mid = 0
                w = 0.0
                if x <= knots[base]:
                    w = 1.0
                elif x >= knots[base + nk - 1]:
                    mid = nk - 2
                else:
                    lo = 0
                    hi = nk - 2
                    while lo <= hi:
                        mid = lo + (hi - lo) // 2
                        if x < knots[base + mid]:
                            hi = mid - 1
                        elif x >= knots[base + mid + 1]:
                            lo = mid + 1
                        else:
                            x0 = knots[base + mid]
                            x1 = knots[base + mid + 1]
                            w = (x1 - x) / (x1 - x0)
                            break
                mids[k] = mid
                weights[k] = w

            acc = 0.0
            for bitmask in range(power):
                factor = 1.0
                offset = 0
                bits = bitmask
                for k in range(dim):
                    if bits & 1:
                        factor *= 1.0 - weights[k]
                        offset += (mids[k] + 1) * flat_strides[k]
                    else:
                        factor *= weights[k]
                        offset += mids[k] * flat_strides[k]
                    bits >>= 1
                if factor > eps:
                    acc += factor * values[offset]
            out[n] = acc


def _warm_up() -> None:
    # Compile once up front to avoid a latency spike on the first real call.
    knots = np.array([0.0, 1.0], dtype=np.float64)
    out = np.empty(1, dtype=np.float64)
    _interp_numba(
        knots,
        np.zeros(1, dtype=np.intp),
        np.array([2], dtype=np.intp),
        np.array([[0.5]], dtype=np.float64),
        knots,
        np.ones(1, dtype=np.intp),
        float(np.finfo(np.float64).eps),
        out,
    )


@dataclass
class NumbaBackend:
    name: str = "numba"

    def run(
        self,
        axis_counts: Sequence[int],
        query_count: int,
        values: Any,
        results: Any,
        axes: AxisPairs,
        order: Order,
    ) -> None:
        packed = PackedInputs.pack(axis_counts, query_count, values, axes, order)
        out = np.empty(int(query_count), dtype=np.float64)
        _interp_numba(
            packed.knots,
            packed.knot_offsets,
            packed.counts,
            packed.queries,
            packed.values,
            packed.strides,
            packed.eps,
            out,
        )
        store_results(results, out, int(query_count))


_WARMED_UP = False


def build_numba_backend() -> NumbaBackend:
    global _WARMED_UP
    if njit is None:
        raise RuntimeError(f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}") from _NUMBA_IMPORT_ERROR
    if not _WARMED_UP:
        logger.debug("compiling numba interpolation kernel")
        _warm_up()
        _WARMED_UP = True
    return NumbaBackend()
