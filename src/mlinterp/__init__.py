"""Multilinear interpolation of functions sampled on rectilinear grids."""

from .axis import Axis, AxisChain, resolve_axis
from .backends.factory import available_backends, build_backend
from .config import InterpConfig
from .errors import DimensionMismatch, InvalidAxis, MlinterpError, TableSizeMismatch
from .grid import Grid, Interpolator
from .interpolation import interp, interp_checked, interpn
from .ordering import Order, flat_index, natural_index, reverse_index, strides

__all__ = [
    "Axis",
    "AxisChain",
    "resolve_axis",
    "available_backends",
    "build_backend",
    "InterpConfig",
    "DimensionMismatch",
    "InvalidAxis",
    "MlinterpError",
    "TableSizeMismatch",
    "Grid",
    "Interpolator",
    "interp",
    "interp_checked",
    "interpn",
    "Order",
    "flat_index",
    "natural_index",
    "reverse_index",
    "strides",
]
