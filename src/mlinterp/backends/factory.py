"""Backend factory for interpolation kernels."""

from __future__ import annotations

import logging

from .cython_backend import build_cython_backend
from .jax_backend import build_jax_backend
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend
from .python_backend import build_python_backend

logger = logging.getLogger(__name__)

_BUILDERS = {
    "python": build_python_backend,
    "numpy": build_numpy_backend,
    "numba": build_numba_backend,
    "jax": build_jax_backend,
    "cython": build_cython_backend,
}

_AUTO_PREFERENCE = ("cython", "numba")


def build_backend(name: str = "python"):
    if name == "auto":
        for candidate in _AUTO_PREFERENCE:
            try:
                backend = _BUILDERS[candidate]()
            except RuntimeError as exc:
                logger.debug("backend %s skipped: %s", candidate, exc)
                continue
            logger.debug("auto selected backend %s", candidate)
            return backend
        return build_numpy_backend()
    try:
        builder = _BUILDERS[name]
    except KeyError:
        raise ValueError(f"Unknown backend: {name}") from None
    return builder()


def available_backends() -> list[str]:
    """Names of the backends that can be built in this environment."""
    names = []
    for name, builder in _BUILDERS.items():
        try:
            builder()
        except RuntimeError as exc:
            logger.debug("backend %s unavailable: %s", name, exc)
            continue
        names.append(name)
    return names
