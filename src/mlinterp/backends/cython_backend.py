"""Cython-accelerated interpolation backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..engine_core import store_results
from ..ordering import Order
from .base import AxisPairs, PackedInputs

try:
    from .. import _cykernel  # type: ignore
except Exception as exc:  # pragma: no cover - optional compiled extension
    _cykernel = None
    _CYTHON_IMPORT_ERROR = exc
else:
    _CYTHON_IMPORT_ERROR = None


@dataclass
class CythonBackend:
    name: str = "cython"

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
        _cykernel.interp_into(
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


def build_cython_backend() -> CythonBackend:
    if _cykernel is None:
        raise RuntimeError(
            "Cython backend unavailable; build it with: python setup.py build_ext --inplace"
        ) from _CYTHON_IMPORT_ERROR
    return CythonBackend()
