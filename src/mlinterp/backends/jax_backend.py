"""JAX-backed interpolation backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..engine_core import store_results, value_epsilon
from ..ordering import Order, strides
from .base import AxisPairs

try:
    import jax
    from jax import config as jax_config
    import jax.numpy as jnp
except Exception as exc:  # pragma: no cover - optional dependency
    jax = None
    jax_config = None
    jnp = None
    _JAX_IMPORT_ERROR = exc
else:
    _JAX_IMPORT_ERROR = None
    # Match the float64 arithmetic of the other backends.
    jax_config.update("jax_enable_x64", True)


if jax is not None:

    @jax.jit
    def _interp_jax(
        knots: tuple[jnp.ndarray, ...],
        queries: tuple[jnp.ndarray, ...],
        values: jnp.ndarray,
        flat_strides: jnp.ndarray,
        eps: float,
    ) -> jnp.ndarray:
        mids = []
        weights = []
        for xd, x in zip(knots, queries):
            n = xd.shape[0]
            mid = jnp.clip(jnp.searchsorted(xd, x, side="right") - 1, 0, n - 2)
            x0 = xd[mid]
            x1 = xd[mid + 1]
            w = (x1 - x) / (x1 - x0)
            w = jnp.where(x <= xd[0], 1.0, w)
            w = jnp.where(x >= xd[n - 1], 0.0, w)
            mids.append(mid)
            weights.append(w)

        acc = jnp.zeros_like(queries[0])
        for bitmask in range(1 << len(knots)):
            factor = jnp.ones_like(queries[0])
            offset = jnp.zeros_like(mids[0])
            bits = bitmask
            for k in range(len(knots)):
                if bits & 1:
                    factor = factor * (1.0 - weights[k])
                    offset = offset + (mids[k] + 1) * flat_strides[k]
                else:
                    factor = factor * weights[k]
                    offset = offset + mids[k] * flat_strides[k]
                bits >>= 1
            acc = acc + jnp.where(factor > eps, factor * values[offset], 0.0)
        return acc


@dataclass
class JaxBackend:
    name: str = "jax"

    def run(
        self,
        axis_counts: Sequence[int],
        query_count: int,
        values: Any,
        results: Any,
        axes: AxisPairs,
        order: Order,
    ) -> None:
        query_count = int(query_count)
        knots = tuple(
            jnp.asarray(np.asarray(xd, dtype=np.float64)[: int(axis_counts[k])])
            for k, (xd, _) in enumerate(axes)
        )
        queries = tuple(jnp.asarray(np.asarray(xi, dtype=np.float64)[:query_count]) for _, xi in axes)
        out = _interp_jax(
            knots,
            queries,
            jnp.asarray(np.asarray(values, dtype=np.float64)),
            jnp.asarray(strides(order, axis_counts)),
            value_epsilon(values),
        )
        store_results(results, np.asarray(out, dtype=np.float64), query_count)


def build_jax_backend() -> JaxBackend:
    if jax is None:
        raise RuntimeError(f"JAX backend unavailable: {_JAX_IMPORT_ERROR}") from _JAX_IMPORT_ERROR
    return JaxBackend()
