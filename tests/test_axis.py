from __future__ import annotations

import itertools
import unittest

import numpy as np

from mlinterp.axis import Axis, AxisChain, resolve_axis


class TestResolveAxis(unittest.TestCase):
    def setUp(self) -> None:
        self.knots = np.array([-1.0, 0.0, 2.0, 3.0])

    def test_clamps_below_left_boundary(self) -> None:
        self.assertEqual(resolve_axis(self.knots, -7.0), (0, 1.0))
        self.assertEqual(resolve_axis(self.knots, -1.0), (0, 1.0))

    def test_clamps_above_right_boundary(self) -> None:
        self.assertEqual(resolve_axis(self.knots, 3.0), (2, 0.0))
        self.assertEqual(resolve_axis(self.knots, 42.0), (2, 0.0))

    def test_interior_weight_favors_lower_knot(self) -> None:
        mid, weight = resolve_axis(self.knots, 0.5)
        self.assertEqual(mid, 1)
        self.assertAlmostEqual(weight, 0.75)

    def test_interior_knot_starts_its_interval(self) -> None:
        self.assertEqual(resolve_axis(self.knots, 0.0), (1, 1.0))
        self.assertEqual(resolve_axis(self.knots, 2.0), (2, 1.0))

    def test_two_knot_axis(self) -> None:
        mid, weight = resolve_axis([10.0, 20.0], 12.5)
        self.assertEqual(mid, 0)
        self.assertAlmostEqual(weight, 0.75)

    def test_brackets_every_interval(self) -> None:
        knots = np.cumsum(np.linspace(0.1, 1.0, 17))
        for i in range(knots.shape[0] - 1):
            x = 0.5 * (knots[i] + knots[i + 1])
            mid, weight = resolve_axis(knots, x)
            self.assertEqual(mid, i)
            self.assertGreater(weight, 0.0)
            self.assertLess(weight, 1.0)

    def test_axis_wraps_knots(self) -> None:
        axis = Axis([0, 1, 4])
        self.assertEqual(axis.count, 3)
        self.assertEqual(axis.knots.dtype, np.float64)
        self.assertEqual(axis.resolve(2.5), (1, 0.5))


class TestAxisChain(unittest.TestCase):
    def setUp(self) -> None:
        self.chain = AxisChain.from_pairs(
            [
                ([0.0, 1.0, 2.0], [0.25, -1.0, 1.5]),
                ([0.0, 10.0], [2.5, 5.0, 99.0]),
                ([-1.0, 0.0, 1.0, 2.0], [0.5, 0.5, -3.0]),
            ]
        )

    def test_bit_selects_lower_or_upper_knot(self) -> None:
        indices, factor = self.chain.run(0, 0b000)
        self.assertEqual(indices, (0, 0, 1))
        self.assertAlmostEqual(factor, 0.75 * 0.75 * 0.5)

        indices, factor = self.chain.run(0, 0b011)
        self.assertEqual(indices, (1, 1, 1))
        self.assertAlmostEqual(factor, 0.25 * 0.25 * 0.5)

    def test_running_factor_is_multiplied(self) -> None:
        _, base = self.chain.run(0, 0b101, 1.0)
        _, scaled = self.chain.run(0, 0b101, 4.0)
        self.assertAlmostEqual(scaled, 4.0 * base)

    def test_weights_sum_to_one(self) -> None:
        for n in range(3):
            total = sum(self.chain.run(n, mask)[1] for mask in range(1 << self.chain.dimension))
            self.assertAlmostEqual(total, 1.0, places=14)

    def test_corner_from_cached_brackets_matches_run(self) -> None:
        for n, mask in itertools.product(range(3), range(8)):
            brackets = self.chain.resolve(n)
            self.assertEqual(AxisChain.corner(brackets, mask), self.chain.run(n, mask))

    def test_clamped_axis_has_one_zero_weight_corner(self) -> None:
        # Point 1 clamps axis 0 at its left boundary.
        zero = [mask for mask in range(8) if self.chain.run(1, mask)[1] == 0.0]
        self.assertTrue(all(mask & 1 for mask in zero))


if __name__ == "__main__":
    unittest.main()
