"""Grid value object and a callable interpolator bound to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from .axis import Axis
from .backends.factory import build_backend
from .config import InterpConfig
from .errors import DimensionMismatch
from .ordering import Order, flat_index
from .validation import check_axis, check_table


@dataclass(frozen=True)
class Grid:
    """Axes of a rectilinear grid and its flat value table."""

    axes: tuple[Axis, ...]
    values: np.ndarray
    order: Order = Order.NATURAL

    def __post_init__(self) -> None:
        axes = tuple(a if isinstance(a, Axis) else Axis(a) for a in self.axes)
        object.__setattr__(self, "axes", axes)
        object.__setattr__(self, "values", np.asarray(self.values))
        object.__setattr__(self, "order", Order.coerce(self.order))

    @classmethod
    def from_array(cls, knots: Sequence[Sequence[float]], values: Any) -> "Grid":
        """Build a grid from an array indexed ``values[i_0, ..., i_m]``."""
        table = np.asarray(values)
        return cls(tuple(Axis(xd) for xd in knots), table.ravel(order="C"), Order.REVERSE)

    @property
    def counts(self) -> tuple[int, ...]:
        return tuple(a.count for a in self.axes)

    @property
    def dimension(self) -> int:
        return len(self.axes)

    def validate(self) -> "Grid":
        for k, axis in enumerate(self.axes):
            check_axis(axis.knots, axis=k)
        check_table(self.values, self.counts)
        return self

    def value_at(self, indices: Sequence[int]) -> float:
        return float(self.values[flat_index(self.order, indices, self.counts)])

    def as_array(self) -> np.ndarray:
        """Value table reshaped so that ``out[i_0, ..., i_m]`` is the knot value."""
        layout = "F" if self.order is Order.NATURAL else "C"
        return self.values.reshape(self.counts, order=layout)

    def reorder(self, order: Order | str) -> "Grid":
        """Same grid with its value table stored in ``order``."""
        order = Order.coerce(order)
        if order is self.order:
            return self
        layout = "F" if order is Order.NATURAL else "C"
        return Grid(self.axes, self.as_array().ravel(order=layout), order)


@dataclass
class Interpolator:
    """Evaluate the multilinear interpolant of a :class:`Grid`."""

    grid: Grid
    config: InterpConfig = field(default_factory=InterpConfig)

    def __post_init__(self) -> None:
        if self.config.checked:
            self.grid.validate()
        self._backend = build_backend(self.config.backend)

    def evaluate_into(self, coords: Sequence[Sequence[float]], results: Any) -> Any:
        grid = self.grid
        if len(coords) != grid.dimension:
            raise DimensionMismatch(f"{len(coords)} coordinate arrays supplied for {grid.dimension} axes")
        query_count = len(results)
        if self.config.checked:
            for k, xi in enumerate(coords):
                if len(xi) != query_count:
                    raise DimensionMismatch(
                        f"axis {k} has {len(xi)} query coordinates, expected {query_count}"
                    )
        axes = [(axis.knots, xi) for axis, xi in zip(grid.axes, coords)]
        self._backend.run(grid.counts, query_count, grid.values, results, axes, grid.order)
        return results

    def __call__(self, *coords: Any) -> np.ndarray:
        columns = [np.atleast_1d(np.asarray(xi, dtype=np.float64)) for xi in coords]
        query_count = int(columns[0].shape[0]) if columns else 0
        out = np.empty(query_count, dtype=np.float64)
        return self.evaluate_into(columns, out)

    def at(self, point: Sequence[float]) -> float:
        out = self(*[[x] for x in point])
        return float(out[0])
