"""Configuration for grid interpolators."""

from __future__ import annotations

from dataclasses import dataclass

BACKENDS = ("python", "numpy", "numba", "jax", "cython", "auto")


@dataclass(frozen=True)
class InterpConfig:
    """Container for user-controlled interpolation parameters."""

    backend: str = "python"
    checked: bool = False

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: " + ", ".join(BACKENDS))
        if not isinstance(self.checked, bool):
            raise ValueError("checked must be a bool")
