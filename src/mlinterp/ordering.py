"""Flat-index mapping between per-axis knot indices and the value table."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np


class Order(str, Enum):
    """Storage layout of the flat value table.

    ``NATURAL`` lets axis 0 vary fastest, ``REVERSE`` lets the last axis vary
    fastest (the layout of a C-ordered ``numpy`` array).
    """

    NATURAL = "natural"
    REVERSE = "reverse"

    @classmethod
    def coerce(cls, value: "Order | str") -> "Order":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError("order must be one of: natural, reverse") from None


def natural_index(indices: Sequence[int], counts: Sequence[int]) -> int:
    index = 0
    product = 1
    for i, n in zip(indices, counts):
        index += i * product
        product *= n
    return index


def reverse_index(indices: Sequence[int], counts: Sequence[int]) -> int:
    index = 0
    product = 1
    for k in range(len(indices) - 1, -1, -1):
        index += indices[k] * product
        product *= counts[k]
    return index


def flat_index(order: Order | str, indices: Sequence[int], counts: Sequence[int]) -> int:
    """Offset of knot ``indices`` in a table laid out in ``order``."""
    if Order.coerce(order) is Order.NATURAL:
        return natural_index(indices, counts)
    return reverse_index(indices, counts)


def strides(order: Order | str, counts: Sequence[int]) -> np.ndarray:
    """Per-axis multipliers such that ``flat_index == dot(indices, strides)``."""
    counts = [int(n) for n in counts]
    out = np.ones(len(counts), dtype=np.int64)
    if Order.coerce(order) is Order.NATURAL:
        for k in range(1, len(counts)):
            out[k] = out[k - 1] * counts[k - 1]
    else:
        for k in range(len(counts) - 2, -1, -1):
            out[k] = out[k + 1] * counts[k + 1]
    return out
