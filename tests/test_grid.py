from __future__ import annotations

import itertools
import unittest

import numpy as np

from mlinterp.config import InterpConfig
from mlinterp.errors import DimensionMismatch, InvalidAxis, TableSizeMismatch
from mlinterp.grid import Grid, Interpolator
from mlinterp.ordering import Order


def _grid() -> Grid:
    xd = np.array([0.0, 1.0, 3.0])
    yd = np.array([-1.0, 1.0])
    cube = np.add.outer(2.0 * xd, yd)
    return Grid.from_array([xd, yd], cube)


class TestGrid(unittest.TestCase):
    def test_from_array_uses_reverse_order(self) -> None:
        grid = _grid()
        self.assertEqual(grid.order, Order.REVERSE)
        self.assertEqual(grid.counts, (3, 2))
        self.assertEqual(grid.dimension, 2)
        self.assertEqual(grid.value_at((2, 0)), 5.0)

    def test_reorder_keeps_knot_values(self) -> None:
        grid = _grid()
        natural = grid.reorder("natural")
        self.assertEqual(natural.order, Order.NATURAL)
        self.assertIs(grid.reorder(Order.REVERSE), grid)
        for idx in itertools.product(range(3), range(2)):
            self.assertEqual(natural.value_at(idx), grid.value_at(idx))
        np.testing.assert_array_equal(natural.as_array(), grid.as_array())

    def test_validate(self) -> None:
        grid = _grid()
        self.assertIs(grid.validate(), grid)
        with self.assertRaises(InvalidAxis):
            Grid(([0.0, 0.0], [0.0, 1.0]), np.zeros(4)).validate()
        with self.assertRaises(TableSizeMismatch):
            Grid(([0.0, 1.0], [0.0, 1.0]), np.zeros(3)).validate()


class TestInterpolator(unittest.TestCase):
    def test_recovers_knot_values(self) -> None:
        grid = _grid()
        f = Interpolator(grid)
        for i, j in itertools.product(range(3), range(2)):
            x = grid.axes[0].knots[i]
            y = grid.axes[1].knots[j]
            self.assertEqual(f.at((x, y)), grid.value_at((i, j)))

    def test_layout_does_not_change_results(self) -> None:
        grid = _grid()
        xs = np.linspace(-1.0, 4.0, 21)
        ys = np.linspace(-2.0, 2.0, 21)
        a = Interpolator(grid)(xs, ys)
        b = Interpolator(grid.reorder(Order.NATURAL))(xs, ys)
        np.testing.assert_array_equal(a, b)
        np.testing.assert_allclose(a, 2.0 * np.clip(xs, 0.0, 3.0) + np.clip(ys, -1.0, 1.0))

    def test_backend_from_config(self) -> None:
        grid = _grid()
        f = Interpolator(grid, InterpConfig(backend="numpy", checked=True))
        np.testing.assert_allclose(f([0.5], [0.0]), [1.0])

    def test_evaluate_into(self) -> None:
        out = [0.0, 0.0]
        Interpolator(_grid()).evaluate_into([[1.0, 2.0], [1.0, -1.0]], out)
        np.testing.assert_allclose(out, [3.0, 3.0])

    def test_checked_rejects_bad_grid_and_coords(self) -> None:
        with self.assertRaises(InvalidAxis):
            Interpolator(Grid(([1.0, 0.0],), np.zeros(2)), InterpConfig(checked=True))
        f = Interpolator(_grid(), InterpConfig(checked=True))
        with self.assertRaises(DimensionMismatch):
            f.evaluate_into([[0.5, 1.0], [0.0]], np.empty(2))
        with self.assertRaises(DimensionMismatch):
            f([0.5])


class TestInterpConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = InterpConfig()
        self.assertEqual(cfg.backend, "python")
        self.assertFalse(cfg.checked)

    def test_rejects_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            InterpConfig(backend="fortran")

    def test_rejects_non_bool_checked(self) -> None:
        with self.assertRaises(ValueError):
            InterpConfig(checked="yes")


if __name__ == "__main__":
    unittest.main()
