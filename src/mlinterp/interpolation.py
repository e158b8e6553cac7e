"""Public entry points for multilinear interpolation on rectilinear grids."""

from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

import numpy as np

from .backends.factory import build_backend
from .errors import DimensionMismatch, MlinterpError, TableSizeMismatch
from .ordering import Order
from .validation import check_inputs

logger = logging.getLogger(__name__)


def interp(
    axis_counts: Sequence[int],
    query_count: int,
    values: Any,
    results: Any,
    axes: Sequence[Tuple[Sequence[float], Sequence[float]]],
    *,
    order: Order | str = Order.NATURAL,
    backend: str = "python",
) -> Any:
    """Multilinear interpolation of a function known at the knots of a grid.

    ``axes`` holds one ``(knots_k, queries_k)`` pair per axis: ``knots_k`` are
    the ``axis_counts[k]`` ascending knot coordinates of axis ``k`` and the
    ``j``-th query point has coordinates ``(queries_0[j], ..., queries_m[j])``.
    ``values`` is the flat table of function values laid out in ``order``:
    with ``Order.NATURAL`` the knot ``(j_0, ..., j_m)`` sits at
    ``j_0 + j_1 * n_0 + ... + j_m * n_0 * ... * n_{m-1}``.

    The first ``query_count`` entries of ``results`` are overwritten and
    ``results`` is returned. Coordinates outside an axis are clamped to its
    boundary knots. No input is validated; see :func:`interp_checked`.

    Example::

        xd = [-1.0, 0.0, 1.0]
        yd = [1.0, 0.0, 1.0]
        xi = [-1.0, -0.5, 0.0, 0.5, 1.0]
        yi = np.empty(len(xi))
        interp([len(xd)], len(xi), yd, yi, [(xd, xi)])
        # yi == [1.0, 0.5, 0.0, 0.5, 1.0]
    """
    kernel = build_backend(backend)
    kernel.run(axis_counts, int(query_count), values, results, axes, Order.coerce(order))
    return results


def interp_checked(
    axis_counts: Sequence[int],
    query_count: int,
    values: Any,
    results: Any,
    axes: Sequence[Tuple[Sequence[float], Sequence[float]]],
    *,
    order: Order | str = Order.NATURAL,
    backend: str = "python",
) -> Any:
    """Same as :func:`interp` after validating every precondition.

    Raises :class:`~mlinterp.errors.InvalidAxis`,
    :class:`~mlinterp.errors.DimensionMismatch` or
    :class:`~mlinterp.errors.TableSizeMismatch`.
    """
    try:
        check_inputs(axis_counts, int(query_count), values, results, axes)
    except MlinterpError as exc:
        logger.debug("rejected interpolation inputs: %s", exc)
        raise
    return interp(axis_counts, query_count, values, results, axes, order=order, backend=backend)


def _query_columns(points: Any, dimension: int) -> list[np.ndarray]:
    if isinstance(points, np.ndarray):
        if points.ndim == 1 and dimension == 1:
            return [np.asarray(points, dtype=np.float64)]
        if points.ndim == 2 and points.shape[1] == dimension:
            return [np.ascontiguousarray(points[:, k], dtype=np.float64) for k in range(dimension)]
        raise DimensionMismatch(f"points of shape {points.shape} do not match {dimension} axes")
    columns = [np.asarray(c, dtype=np.float64) for c in points]
    if len(columns) != dimension:
        raise DimensionMismatch(f"{len(columns)} coordinate arrays supplied for {dimension} axes")
    return columns


def interpn(
    knots: Sequence[Sequence[float]],
    values: Any,
    points: Any,
    *,
    order: Order | str | None = None,
    backend: str = "numpy",
    checked: bool = True,
) -> np.ndarray:
    """Interpolate at ``points`` and return a new array of results.

    ``values`` is either a flat table laid out in ``order`` (natural by
    default) or an array of shape ``(len(knots[0]), ..., len(knots[-1]))``.
    ``points`` is either one coordinate array per axis or an ``(m, D)``
    array of points.
    """
    knots = [np.asarray(xd, dtype=np.float64) for xd in knots]
    counts = [int(xd.shape[0]) for xd in knots]
    table = np.asarray(values)

    if table.ndim > 1:
        if table.shape != tuple(counts):
            raise TableSizeMismatch(int(np.prod(counts)), int(table.size))
        resolved = Order.REVERSE if order is None else Order.coerce(order)
        table = table.ravel(order="F" if resolved is Order.NATURAL else "C")
    else:
        resolved = Order.NATURAL if order is None else Order.coerce(order)

    columns = _query_columns(points, len(knots))
    query_count = int(columns[0].shape[0]) if columns else 0
    results = np.empty(query_count, dtype=np.float64)
    axes = list(zip(knots, columns))
    run = interp_checked if checked else interp
    return run(counts, query_count, table, results, axes, order=resolved, backend=backend)
