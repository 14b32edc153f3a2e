from __future__ import annotations

import unittest

from axisfit import Axis, AxisStyle, Categorical, LayoutError, LayoutNotComputedError, fit_labels


class FixedWidthMeasurer:
    """Every glyph is `char_w` wide; every line is `line_h` tall."""

    def __init__(self, char_w: float = 6.0, line_h: float = 10.0) -> None:
        self.char_w = char_w
        self.line_h = line_h

    def measure_text(self, text: str, font_size_px: float) -> tuple[float, float]:
        return (len(text) * self.char_w, self.line_h)


class RecordingContext(FixedWidthMeasurer):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple] = []

    def stroke_line(self, x0, y0, x1, y1, color, width=1.0) -> None:
        self.calls.append(("line", x0, y0, x1, y1, width))

    def fill_rect(self, x0, y0, x1, y1, color) -> None:
        self.calls.append(("fill_rect", x0, y0, x1, y1))

    def stroke_rect(self, x0, y0, x1, y1, color, width=1.0) -> None:
        self.calls.append(("stroke_rect", x0, y0, x1, y1, width))

    def draw_text_at(self, text, x, y, color, font_size_px) -> None:
        self.calls.append(("text", text, x, y))

    def fill_circle(self, cx, cy, radius, color) -> None:
        self.calls.append(("circle", cx, cy, radius))


class FailingMeasurer:
    def measure_text(self, text: str, font_size_px: float) -> tuple[float, float]:
        raise RuntimeError("font backend unavailable")


class FitLabelsTests(unittest.TestCase):
    def test_all_labels_fit(self) -> None:
        self.assertEqual(fit_labels([0.0, 10.0, 20.0, 30.0], [5.0] * 4), [0, 1, 2, 3])

    def test_every_other_label_when_neighbours_overlap(self) -> None:
        positions = [0.0, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0]
        self.assertEqual(fit_labels(positions, [15.0] * 7), [0, 2, 4, 6])

    def test_descending_positions(self) -> None:
        positions = [60.0, 50.0, 40.0, 30.0, 20.0, 10.0, 0.0]
        self.assertEqual(fit_labels(positions, [15.0] * 7), [0, 2, 4, 6])

    def test_touching_labels_count_as_overlap(self) -> None:
        self.assertEqual(fit_labels([0.0, 10.0, 20.0], [10.0] * 3), [0, 2])

    def test_nothing_fits(self) -> None:
        self.assertEqual(fit_labels([0.0, 10.0, 20.0], [100.0] * 3), [])

    def test_single_label_always_fits(self) -> None:
        self.assertEqual(fit_labels([5.0], [1000.0]), [0])

    def test_empty(self) -> None:
        self.assertEqual(fit_labels([], []), [])

    def test_length_mismatch(self) -> None:
        with self.assertRaises(ValueError):
            fit_labels([0.0, 1.0], [1.0])


class AxisTests(unittest.TestCase):
    def _seven_label_axis(self, direction: str = "horizontal", label_pos: str = "after") -> Axis:
        ticker = Categorical(["aaaa"] * 7).space_between()
        return Axis(direction, label_pos, ticker)  # type: ignore[arg-type]

    def test_horizontal_axis_thins_wide_labels(self) -> None:
        axis = self._seven_label_axis()
        axis.layout(120.0, FixedWidthMeasurer())
        self.assertEqual(len(axis.ticks()), 7)
        self.assertEqual(axis.labels_to_draw(), (0, 2, 4, 6))

    def test_vertical_axis_measures_label_height(self) -> None:
        axis = self._seven_label_axis("vertical", "before")
        axis.layout(120.0, FixedWidthMeasurer())
        self.assertEqual(axis.labels_to_draw(), tuple(range(7)))

    def test_warns_when_no_label_fits(self) -> None:
        axis = Axis("horizontal", "after", Categorical(["x" * 10] * 3).space_between())
        with self.assertLogs("axisfit.axis", level="WARNING"):
            axis.layout(20.0, FixedWidthMeasurer())
        self.assertEqual(axis.labels_to_draw(), ())
        self.assertEqual(len(axis.ticks()), 3)

    def test_measure_failure_becomes_layout_error(self) -> None:
        axis = self._seven_label_axis()
        with self.assertRaises(LayoutError) as ctx:
            axis.layout(120.0, FailingMeasurer())
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)
        self.assertFalse(axis.is_laid_out)

    def test_queries_before_layout_raise(self) -> None:
        axis = self._seven_label_axis()
        with self.assertRaises(LayoutNotComputedError):
            axis.size()
        with self.assertRaises(LayoutNotComputedError):
            axis.draw((0.0, 0.0), RecordingContext())

    def test_label_positions_below_horizontal_axis(self) -> None:
        axis = self._seven_label_axis()
        axis.layout(120.0, FixedWidthMeasurer())
        positions = axis.label_positions()
        self.assertEqual(positions[0], (-12.0, 5.0, "aaaa"))
        self.assertEqual(positions[1], (28.0, 5.0, "aaaa"))

    def test_label_positions_above_horizontal_axis(self) -> None:
        axis = self._seven_label_axis("horizontal", "before")
        axis.layout(120.0, FixedWidthMeasurer())
        self.assertEqual(axis.label_positions()[0], (-12.0, -15.0, "aaaa"))

    def test_label_positions_left_and_right_of_vertical_axis(self) -> None:
        left = Axis("vertical", "before", Categorical(["ab"]).space_around())
        left.layout(100.0, FixedWidthMeasurer())
        self.assertEqual(left.label_positions(), [(-17.0, 45.0, "ab")])
        right = Axis("vertical", "after", Categorical(["ab"]).space_around())
        right.layout(100.0, FixedWidthMeasurer())
        self.assertEqual(right.label_positions(), [(5.0, 45.0, "ab")])

    def test_size_reserves_room_for_labels(self) -> None:
        horizontal = self._seven_label_axis()
        horizontal.layout(120.0, FixedWidthMeasurer())
        self.assertEqual(horizontal.size(), (120.0, 15.0))
        vertical = Axis("vertical", "before", Categorical(["ab", "abcd"]).space_around())
        vertical.layout(100.0, FixedWidthMeasurer())
        self.assertEqual(vertical.size(), (29.0, 100.0))

    def test_draw_emits_line_ticks_and_fitted_labels(self) -> None:
        axis = self._seven_label_axis()
        rc = RecordingContext()
        axis.layout(120.0, rc)
        axis.draw((10.0, 50.0), rc)
        lines = [c for c in rc.calls if c[0] == "line"]
        texts = [c for c in rc.calls if c[0] == "text"]
        self.assertEqual(lines[0][1:5], (9.0, 50.0, 131.0, 50.0))
        # one axis line plus a mark per tick, drawn above the line
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[1][1:5], (10.0, 50.0, 10.0, 45.0))
        self.assertEqual([t[1] for t in texts], ["aaaa"] * 4)
        self.assertEqual(texts[0][2:], (-2.0, 55.0))

    def test_setters_drop_layout(self) -> None:
        axis = self._seven_label_axis()
        axis.layout(120.0, FixedWidthMeasurer())
        axis.set_style(AxisStyle(font_size_px=20.0))
        self.assertFalse(axis.is_laid_out)
        axis.layout(120.0, FixedWidthMeasurer())
        axis.set_label_pos("after")
        self.assertTrue(axis.is_laid_out)
        axis.set_label_pos("before")
        self.assertFalse(axis.is_laid_out)

    def test_rejects_unknown_direction_and_bad_style(self) -> None:
        with self.assertRaises(ValueError):
            Axis("diagonal", "after", Categorical(["a"]).space_around())  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            AxisStyle(font_size_px=0.0)


if __name__ == "__main__":
    unittest.main()
