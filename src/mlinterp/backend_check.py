"""Compare the available backends against the reference loop on random grids."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass

import numpy as np

from .backends.factory import available_backends
from .interpolation import interp
from .ordering import Order


@dataclass
class BackendCheckResult:
    backend: str
    order: str
    n_points: int
    max_abs_diff: float
    mean_abs_diff: float
    ok: bool


def random_grid(rng: np.random.Generator, dims: int, knots: int) -> list[np.ndarray]:
    axes = []
    for _ in range(dims):
        steps = rng.uniform(0.1, 1.0, size=knots - 1)
        start = rng.uniform(-1.0, 1.0)
        axes.append(np.concatenate([[start], start + np.cumsum(steps)]))
    return axes


def check_backends(
    *,
    dims: int = 3,
    knots: int = 6,
    points: int = 1000,
    seed: int = 0,
    tol: float = 1.0e-12,
    backends: list[str] | None = None,
) -> list[BackendCheckResult]:
    if dims < 1:
        raise ValueError("dims must be >= 1")
    if knots < 2:
        raise ValueError("knots must be >= 2")

    rng = np.random.default_rng(seed)
    grid = random_grid(rng, dims, knots)
    counts = [knots] * dims
    values = rng.normal(size=knots**dims)
    # Reach a little past both boundaries so clamping is exercised.
    queries = [rng.uniform(xd[0] - 0.25, xd[-1] + 0.25, size=points) for xd in grid]
    axes = list(zip(grid, queries))
    names = available_backends() if backends is None else backends

    out = []
    for order in Order:
        ref = interp(counts, points, values, np.empty(points), axes, order=order, backend="python")
        for name in names:
            if name == "python":
                continue
            got = interp(counts, points, values, np.empty(points), axes, order=order, backend=name)
            diff = np.abs(got - ref)
            out.append(
                BackendCheckResult(
                    backend=name,
                    order=order.value,
                    n_points=points,
                    max_abs_diff=float(np.max(diff)) if points else 0.0,
                    mean_abs_diff=float(np.mean(diff)) if points else 0.0,
                    ok=bool(np.all(diff <= tol)),
                )
            )
    return out


def main() -> None:
    ap = argparse.ArgumentParser(description="Check interpolation backends against the reference loop.")
    ap.add_argument("--dims", type=int, default=3, help="Number of grid axes")
    ap.add_argument("--knots", type=int, default=6, help="Knots per axis")
    ap.add_argument("--points", type=int, default=1000, help="Number of query points")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--tol", type=float, default=1.0e-12)
    ap.add_argument("--backend", action="append", dest="backends", help="Backend to check (repeatable)")
    args = ap.parse_args()

    res = check_backends(
        dims=args.dims,
        knots=args.knots,
        points=args.points,
        seed=args.seed,
        tol=args.tol,
        backends=args.backends,
    )
    print(json.dumps([r.__dict__ for r in res], indent=2, sort_keys=True))
    if not all(r.ok for r in res):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
