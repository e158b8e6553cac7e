"""Interchangeable interpolation kernels."""

from .factory import available_backends, build_backend

__all__ = ["available_backends", "build_backend"]
