from __future__ import annotations

import unittest

import numpy as np

from sparkline_svg.compose import overlay_padding
from sparkline_svg.config import RenderConfig
from sparkline_svg.errors import SparklineDataError
from sparkline_svg.scales import Point, compute_limits, map_points


class SparklineScalesTests(unittest.TestCase):
    def test_map_points_spaces_by_index_and_inverts_y(self) -> None:
        values = np.asarray([100.0, 100.0, 150.0])
        points = map_points(values, width=100, height=50, padding=4)
        self.assertEqual(points, [Point(4.0, 46.0), Point(50.0, 46.0), Point(96.0, 4.0)])

    def test_flat_series_sits_on_vertical_midpoint(self) -> None:
        points = map_points(np.asarray([5.0, 5.0, 5.0, 5.0]), width=100, height=50, padding=4)
        self.assertEqual({p.y for p in points}, {25.0})
        self.assertTrue(all(np.isfinite([p.x for p in points])))

    def test_extreme_magnitudes_stay_finite(self) -> None:
        points = map_points(np.asarray([-1e308, 1e308]), width=100, height=50, padding=4)
        self.assertEqual(points, [Point(4.0, 46.0), Point(96.0, 4.0)])

    def test_huge_flat_series_sits_on_vertical_midpoint(self) -> None:
        points = map_points(np.asarray([1e308, 1e308, 1e308]), width=100, height=50, padding=4)
        self.assertEqual({p.y for p in points}, {25.0})

    def test_compute_limits_expands_degenerate_range_to_unit_span(self) -> None:
        limits = compute_limits(np.asarray([7.0, 7.0]))
        self.assertEqual(limits.span, 1.0)
        self.assertEqual((limits.vmin, limits.vmax), (6.5, 7.5))

    def test_map_points_requires_two_values(self) -> None:
        with self.assertRaises(SparklineDataError):
            map_points(np.asarray([1.0]), width=100, height=50, padding=4)

    def test_overlay_padding_defaults_to_base_padding(self) -> None:
        self.assertEqual(overlay_padding(RenderConfig(width=100, height=50, fill=False)), 4.0)

    def test_overlay_padding_widens_for_knob(self) -> None:
        config = RenderConfig(width=100, height=50, fill=False, show_knob=True, knob_size=8, stroke_width=2)
        self.assertEqual(overlay_padding(config), 5.0)

    def test_overlay_padding_keeps_larger_base_padding(self) -> None:
        config = RenderConfig(width=100, height=50, fill=False, show_knob=True, knob_size=4, padding=10)
        self.assertEqual(overlay_padding(config), 10.0)

    def test_overlay_padding_adds_spline_overshoot(self) -> None:
        config = RenderConfig(width=100, height=50, fill=False, smooth=True, smooth_tension=0.5)
        self.assertAlmostEqual(overlay_padding(config), 4.0 + 42.0 * 0.5 * 0.15)

    def test_overlay_padding_compounds_knob_then_smoothing(self) -> None:
        config = RenderConfig(
            width=100, height=50, fill=False, show_knob=True, knob_size=8, smooth=True, smooth_tension=0.5
        )
        self.assertAlmostEqual(overlay_padding(config), 5.0 + 40.0 * 0.5 * 0.15)

    def test_overlay_padding_is_monotonic_in_knob_size(self) -> None:
        previous = 0.0
        for knob_size in (2, 4, 8, 12, 16, 24):
            config = RenderConfig(width=300, height=100, fill=True, show_knob=True, knob_size=knob_size)
            padding = overlay_padding(config)
            self.assertGreaterEqual(padding, previous)
            previous = padding

    def test_smoothing_never_decreases_padding(self) -> None:
        for show_knob in (False, True):
            for tension in (0.1, 0.5, 1.0):
                base = RenderConfig(width=300, height=100, fill=True, show_knob=show_knob, smooth_tension=tension)
                smooth = RenderConfig(
                    width=300, height=100, fill=True, show_knob=show_knob, smooth=True, smooth_tension=tension
                )
                self.assertGreaterEqual(overlay_padding(smooth), overlay_padding(base))


if __name__ == "__main__":
    unittest.main()
