"""Per-axis bracket resolution and the per-corner axis chain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


def resolve_axis(knots: Sequence[float], x: float) -> Tuple[int, float]:
    """Return ``(mid, weight)`` bracketing ``x`` on a strictly ascending axis.

    Knot ``mid`` receives ``weight`` and knot ``mid + 1`` receives
    ``1 - weight``. Coordinates outside the knots are clamped to the nearest
    boundary knot. If the search exhausts its range without a bracket (only
    possible for unsorted knots) the last probed ``mid`` is returned with a
    weight of ``0.0``.
    """
    n = len(knots)
    x = float(x)
    if x <= knots[0]:
        return 0, 1.0
    if x >= knots[n - 1]:
        return n - 2, 0.0

    lo = 0
    hi = n - 2
    mid = 0
    weight = 0.0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if x < knots[mid]:
            hi = mid - 1
        elif x >= knots[mid + 1]:
            lo = mid + 1
        else:
            x0 = float(knots[mid])
            x1 = float(knots[mid + 1])
            weight = (x1 - x) / (x1 - x0)
            break
    return mid, weight


@dataclass(frozen=True)
class Axis:
    """Knot coordinates of one grid axis."""

    knots: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "knots", np.asarray(self.knots, dtype=np.float64))

    @property
    def count(self) -> int:
        return int(self.knots.shape[0])

    def resolve(self, x: float) -> Tuple[int, float]:
        return resolve_axis(self.knots, x)


@dataclass
class AxisChain:
    """One resolver per axis, evaluated together for a single hypercube corner."""

    knots: tuple[np.ndarray, ...]
    queries: tuple[np.ndarray, ...]

    @classmethod
    def from_pairs(cls, axes: Sequence[Tuple[Sequence[float], Sequence[float]]]) -> "AxisChain":
        knots = tuple(np.asarray(xd, dtype=np.float64) for xd, _ in axes)
        queries = tuple(np.asarray(xi, dtype=np.float64) for _, xi in axes)
        return cls(knots, queries)

    @property
    def dimension(self) -> int:
        return len(self.knots)

    def run(self, n: int, bitmask: int, factor: float = 1.0) -> Tuple[Tuple[int, ...], float]:
        """Knot indices of corner ``bitmask`` for query point ``n``.

        Bit ``k`` of ``bitmask`` selects the lower (0) or upper (1) bracket
        knot on axis ``k``. ``factor`` is multiplied by the matching per-axis
        weight and returned with the indices.
        """
        indices = []
        for xd, xi in zip(self.knots, self.queries):
            mid, weight = resolve_axis(xd, xi[n])
            if bitmask & 1:
                indices.append(mid + 1)
                factor *= 1.0 - weight
            else:
                indices.append(mid)
                factor *= weight
            bitmask >>= 1
        return tuple(indices), factor

    def resolve(self, n: int) -> list[Tuple[int, float]]:
        """Brackets of every axis for query point ``n``, independent of corner."""
        return [resolve_axis(xd, xi[n]) for xd, xi in zip(self.knots, self.queries)]

    @staticmethod
    def corner(
        brackets: Sequence[Tuple[int, float]], bitmask: int, factor: float = 1.0
    ) -> Tuple[Tuple[int, ...], float]:
        """Same result as :meth:`run` but from brackets resolved once per point."""
        indices = []
        for mid, weight in brackets:
            if bitmask & 1:
                indices.append(mid + 1)
                factor *= 1.0 - weight
            else:
                indices.append(mid)
                factor *= weight
            bitmask >>= 1
        return tuple(indices), factor
