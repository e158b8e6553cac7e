"""Reference backend running the plain per-corner loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ..engine_core import run_interp_loop
from ..ordering import Order
from .base import AxisPairs


@dataclass
class PythonBackend:
    name: str = "python"

    def run(
        self,
        axis_counts: Sequence[int],
        query_count: int,
        values: Any,
        results: Any,
        axes: AxisPairs,
        order: Order,
    ) -> None:
        run_interp_loop(axis_counts, query_count, values, results, axes, order)


def build_python_backend() -> PythonBackend:
    return PythonBackend()
