"""Exceptions raised by the checked interpolation entry points."""

from __future__ import annotations


class MlinterpError(ValueError):
    """Base class for rejected interpolation inputs."""


class InvalidAxis(MlinterpError):
    """An axis has fewer than 2 knots or is not strictly ascending."""

    def __init__(self, axis: int, reason: str) -> None:
        super().__init__(f"axis {axis}: {reason}")
        self.axis = axis
        self.reason = reason


class DimensionMismatch(MlinterpError):
    """Axis, query or output arrays disagree on dimensionality or length."""


class TableSizeMismatch(MlinterpError):
    """The value table length differs from the product of axis counts."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"value table has {actual} entries, expected {expected}")
        self.expected = expected
        self.actual = actual
