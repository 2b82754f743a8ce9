from __future__ import annotations

import math
import unittest

from chartscale.api import create_scale
from chartscale.layout import AxisBox
from chartscale.linear import LinearTickRequest, generate_linear_ticks, relative_label_size
from chartscale.options import resolve_scale_options
from chartscale.scale import Scale


HORIZONTAL_BOX = AxisBox(0, 0, 500, 30)
VERTICAL_BOX = AxisBox(0, 0, 30, 500)


def _linear(data_min: float, data_max: float, *, orientation: str = "horizontal", **kwargs) -> Scale:
    box = HORIZONTAL_BOX if orientation == "horizontal" else VERTICAL_BOX
    options = resolve_scale_options(orientation=orientation, data_min=data_min, data_max=data_max, **kwargs)
    return create_scale("linear", options, box)


def _values(scale: Scale) -> list[float]:
    return [t.value for t in scale.build_ticks()]


class LinearLimitsTests(unittest.TestCase):
    def test_data_max_is_rounded_up(self) -> None:
        scale = _linear(0.5, 9.2)
        self.assertEqual(scale.get_extent(), (0.5, 10.0))

    def test_begin_at_zero_pulls_positive_min_down(self) -> None:
        self.assertEqual(_linear(3.0, 7.2, begin_at_zero=True).get_extent(), (0.0, 8.0))
        self.assertEqual(_linear(-3.0, 7.0, begin_at_zero=True).get_extent(), (-3.0, 7.0))

    def test_pinned_max_is_not_rounded(self) -> None:
        self.assertEqual(_linear(0.0, 1.0, user_max=7.2).get_extent(), (0.0, 7.2))

    def test_min_never_exceeds_max(self) -> None:
        scale = _linear(0.0, 5.0, user_min=10.0)
        vmin, vmax = scale.get_extent()
        self.assertLessEqual(vmin, vmax)
        self.assertEqual((vmin, vmax), (5.0, 5.0))


class LinearTickTests(unittest.TestCase):
    def test_zero_to_hundred_gives_eleven_ticks(self) -> None:
        self.assertEqual(_values(_linear(0.0, 100.0)), [float(v) for v in range(0, 101, 10)])

    def test_degenerate_pinned_range_gives_two_ticks(self) -> None:
        self.assertEqual(_values(_linear(0.0, 1.0, user_min=2.0, user_max=2.0)), [2.0, 2.0])

    def test_degenerate_unpinned_request_gives_two_ticks(self) -> None:
        ticks = generate_linear_ticks(LinearTickRequest(max_ticks=11), 2.0, 2.0)
        self.assertEqual([t.value for t in ticks], [2.0, 2.0])
        tiny = generate_linear_ticks(LinearTickRequest(max_ticks=11), 1.0, 1.0 + 1e-14)
        self.assertEqual([t.value for t in tiny], [1.0, 1.0 + 1e-14])

    def test_step_with_pinned_bounds_clips_last_tick_to_max(self) -> None:
        scale = _linear(0.0, 1.0, user_min=0.0, user_max=23.0, ticks={"step": 5})
        self.assertEqual(_values(scale), [0.0, 5.0, 10.0, 15.0, 20.0, 23.0])

    def test_step_dividing_pinned_range_evenly(self) -> None:
        scale = _linear(0.0, 1.0, user_min=0.0, user_max=20.0, ticks={"step": 5})
        self.assertEqual(_values(scale), [0.0, 5.0, 10.0, 15.0, 20.0])

    def test_explicit_count_divides_range(self) -> None:
        scale = _linear(0.0, 100.0, ticks={"count": 5})
        self.assertEqual(_values(scale), [0.0, 25.0, 50.0, 75.0, 100.0])

    def test_fractional_ticks_have_no_float_noise(self) -> None:
        values = _values(_linear(0.0, 1.0, user_max=1.0))
        self.assertEqual(values, [i / 10 for i in range(11)])

    def test_max_ticks_limit(self) -> None:
        values = _values(_linear(0.0, 100.0, ticks={"max_ticks_limit": 6}))
        self.assertEqual(values, [0.0, 20.0, 40.0, 60.0, 80.0, 100.0])

    def test_huge_step_count_is_capped_and_logged(self) -> None:
        scale = _linear(0.0, 10000.0, ticks={"step": 1})
        with self.assertLogs("chartscale.linear", level="WARNING") as captured:
            ticks = scale.build_ticks()
        self.assertIn("limiting to 1000", captured.output[0])
        self.assertLessEqual(len(ticks), 1001)

    def test_include_bounds_on_vertical_axis_keeps_neighbours(self) -> None:
        scale = _linear(0.0, 1.0, orientation="vertical", user_min=0.5, user_max=99.5, bounds="ticks")
        expected = [0.5] + [float(v) for v in range(10, 100, 10)] + [99.5]
        self.assertEqual(_values(scale), expected)

    def test_include_bounds_on_horizontal_axis_drops_colliding_ticks(self) -> None:
        scale = _linear(0.0, 1.0, user_min=0.5, user_max=99.5, bounds="ticks")
        expected = [0.5] + [float(v) for v in range(20, 90, 10)] + [99.5]
        self.assertEqual(_values(scale), expected)

    def test_without_include_bounds_only_grid_ticks_remain(self) -> None:
        scale = _linear(
            0.0,
            1.0,
            orientation="vertical",
            user_min=0.5,
            user_max=99.5,
            bounds="ticks",
            ticks={"include_bounds": False},
        )
        self.assertEqual(_values(scale), [float(v) for v in range(10, 100, 10)])

    def test_ticks_are_strictly_increasing_and_include_pinned_bounds(self) -> None:
        domains = [(0.0, 100.0), (-37.2, 4123.9), (0.001, 0.0173), (-5.0, 5.0), (3.0, 97.0)]
        for orientation in ("horizontal", "vertical"):
            for lo, hi in domains:
                with self.subTest(orientation=orientation, domain=(lo, hi)):
                    values = _values(_linear(lo, hi, orientation=orientation, user_min=lo, user_max=hi))
                    self.assertGreaterEqual(len(values), 2)
                    for a, b in zip(values, values[1:]):
                        self.assertLess(a, b)
                    self.assertEqual(values[0], lo)
                    self.assertEqual(values[-1], hi)

    def test_non_finite_domain_has_no_ticks(self) -> None:
        ticks = generate_linear_ticks(LinearTickRequest(max_ticks=11), 0.0, math.inf)
        self.assertEqual(ticks, [])


class RelativeLabelSizeTests(unittest.TestCase):
    def test_vertical_unrotated_is_bounded_by_spacing(self) -> None:
        self.assertEqual(relative_label_size(0.5, 10.0, "vertical", 0.0), 10.0)

    def test_horizontal_unrotated_uses_label_length(self) -> None:
        self.assertAlmostEqual(relative_label_size(0.5, 10.0, "horizontal", 0.0), 22.5)
        self.assertAlmostEqual(relative_label_size(2.0, 10.0, "horizontal", 0.0), 7.5)

    def test_rotation_swaps_the_bound(self) -> None:
        self.assertAlmostEqual(relative_label_size(0.5, 10.0, "horizontal", 90.0), 10.0)
        self.assertAlmostEqual(relative_label_size(0.5, 10.0, "vertical", 90.0), 22.5)


class LinearMappingTests(unittest.TestCase):
    def test_pixel_round_trip(self) -> None:
        scale = _linear(0.0, 100.0)
        for value in (0.5, 25.0, 61.8, 99.9):
            pixel = scale.get_pixel_for_value(value)
            self.assertAlmostEqual(scale.get_value_for_pixel(pixel), value, places=9)

    def test_pixel_positions(self) -> None:
        scale = _linear(0.0, 100.0)
        self.assertEqual(scale.get_pixel_for_value(25.0), 125.0)
        vscale = _linear(0.0, 100.0, orientation="vertical")
        self.assertEqual(vscale.get_pixel_for_value(25.0), 375.0)

    def test_zero_range_falls_back(self) -> None:
        scale = _linear(0.0, 100.0)
        scale.set_extent(5.0, 5.0)
        self.assertEqual(scale.get_pixel_for_value(5.0), 0.0)
        self.assertEqual(scale.get_value_for_pixel(123.0), 5.0)

    def test_non_finite_values_map_to_nan(self) -> None:
        scale = _linear(0.0, 100.0)
        self.assertTrue(math.isnan(scale.get_pixel_for_value(math.nan)))
        self.assertTrue(math.isnan(scale.get_pixel_for_value(math.inf)))
        self.assertTrue(math.isnan(scale.get_pixel_for_value(None)))


class LinearLabelTests(unittest.TestCase):
    def test_locale_formatting(self) -> None:
        self.assertEqual(_linear(0.0, 1.0).get_label_for_value(1234.5), "1,234.5")
        self.assertEqual(_linear(0.0, 1.0, locale="de-DE").get_label_for_value(1234.5), "1.234,5")

    def test_custom_formatter_wins(self) -> None:
        scale = _linear(0.0, 1.0, formatter=lambda v: f"{v:.1f}%")
        self.assertEqual(scale.get_label_for_value(12.0), "12.0%")

    def test_format_pattern(self) -> None:
        scale = _linear(0.0, 1.0, ticks={"format": "0.00"})
        self.assertEqual(scale.get_label_for_value(2.0), "2.00")


if __name__ == "__main__":
    unittest.main()
