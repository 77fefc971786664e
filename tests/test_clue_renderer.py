# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for the clue list renderer."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from clue_renderer import ClueListRenderer, ClueStyle, format_clue
from drawing import RecordingSurface
from layout_wrapper import LayoutWrapper
from models import ClueOverflowError, Layout, Orientation, PlacedWord


def shuffled_layout() -> LayoutWrapper:
    """Across positions [3, 1, 2] and down positions [5, 4], out of order."""
    return LayoutWrapper(Layout.from_words([
        PlacedWord("tea", "Hot drink", Orientation.ACROSS, 3, 1, 5),
        PlacedWord("ant", "Small insect", Orientation.ACROSS, 1, 1, 1),
        PlacedWord("eel", "Slippery fish", Orientation.DOWN, 5, 3, 1),
        PlacedWord("nut", "", Orientation.ACROSS, 2, 1, 3),
        PlacedWord("ate", "Consumed", Orientation.DOWN, 4, 1, 1),
    ]))


class TestFormatClues(unittest.TestCase):
    """Tests for clue formatting and ordering."""

    def test_format_clue(self):
        word = PlacedWord("ant", "Small insect", Orientation.ACROSS, 7, 1, 1)
        self.assertEqual(format_clue(word), "7. Small insect")

    def test_sorted_by_position(self):
        lines = ClueListRenderer(RecordingSurface()).format_clues(shuffled_layout())

        self.assertEqual(lines, [
            "Across:",
            "1. Small insect",
            "2. ",
            "3. Hot drink",
            "",
            "Down:",
            "4. Consumed",
            "5. Slippery fish",
        ])

    def test_input_order_is_not_changed(self):
        layout = shuffled_layout()
        ClueListRenderer(RecordingSurface()).format_clues(layout)

        self.assertEqual(
            [w.position for w in layout.words(Orientation.ACROSS)], [3, 1, 2]
        )

    def test_custom_labels(self):
        style = ClueStyle(across_label="waagerecht", down_label="senkrecht")
        lines = ClueListRenderer(RecordingSurface(), style).format_clues(shuffled_layout())

        self.assertEqual(lines[0], "waagerecht:")
        self.assertEqual(lines[5], "senkrecht:")


class TestClueListRenderer(unittest.TestCase):
    """Tests for drawing the clue column."""

    def test_lines_drawn_top_to_bottom(self):
        surface = RecordingSurface()
        style = ClueStyle(font_size=6, line_height_ratio=1.5)

        ClueListRenderer(surface, style).render(shuffled_layout(), 10, 10, 500, 500)

        calls = surface.calls_named("draw_text")
        self.assertEqual(calls[0].args[0], "Across:")
        self.assertEqual([c.args[2] for c in calls[:3]], [10, 19, 28])
        self.assertTrue(all(c.args[1] == 10 for c in calls))

    def test_long_clue_is_wrapped(self):
        surface = RecordingSurface()
        renderer = ClueListRenderer(surface, ClueStyle(font_size=10))
        line = "1. " + " ".join(["word"] * 30)

        wrapped = renderer.wrap_line(line, 100, 10)

        self.assertGreater(len(wrapped), 1)
        for part in wrapped:
            self.assertLessEqual(surface.text_width(part, 10), 100)
        self.assertTrue(wrapped[1].startswith("  "))

    def test_word_wider_than_column_is_broken(self):
        surface = RecordingSurface()
        renderer = ClueListRenderer(surface, ClueStyle(font_size=10))
        line = "1. " + "X" * 120

        wrapped = renderer.wrap_line(line, 60, 10)

        self.assertGreater(len(wrapped), 2)
        for part in wrapped:
            self.assertLessEqual(surface.text_width(part, 10), 60)
        self.assertEqual("".join(part.strip() for part in wrapped), "1." + "X" * 120)

    def test_short_line_is_not_wrapped(self):
        renderer = ClueListRenderer(RecordingSurface())
        self.assertEqual(renderer.wrap_line("1. Cat", 100, 6), ["1. Cat"])

    def test_font_shrinks_to_fit_height(self):
        renderer = ClueListRenderer(
            RecordingSurface(), ClueStyle(font_size=10, min_font_size=4)
        )
        lines = [f"{i}. Clue" for i in range(20)]

        # 20 lines at 1.2 line height fit 121pt only at 5pt
        self.assertEqual(renderer.fit_font_size(lines, 500, 121), 5)

    def test_font_not_below_minimum(self):
        renderer = ClueListRenderer(
            RecordingSurface(), ClueStyle(font_size=10, min_font_size=4)
        )
        lines = [f"{i}. Clue" for i in range(100)]

        with self.assertLogs('clue_renderer', level='WARNING'):
            self.assertEqual(renderer.fit_font_size(lines, 500, 50), 4)

    def test_render_returns_font_size(self):
        renderer = ClueListRenderer(RecordingSurface())
        self.assertEqual(renderer.render(shuffled_layout(), 0, 0, 150, 500), 5.9)


class TestClueContinuation(unittest.TestCase):
    """Tests for clue blocks taller than their column."""

    def setUp(self):
        self.surface = RecordingSurface()
        # 8 lines, 2 per column at a fixed 6pt font
        self.renderer = ClueListRenderer(
            self.surface, ClueStyle(font_size=6, min_font_size=6)
        )

    def test_overflow_without_continuation_raises(self):
        with self.assertRaises(ClueOverflowError):
            self.renderer.render(shuffled_layout(), 0, 0, 150, 15)
        self.assertEqual(self.surface.calls, [])

    def test_overflow_continues_in_further_columns(self):
        origins = iter([(200, 5), (400, 5), (600, 5)])

        self.renderer.render(
            shuffled_layout(), 0, 5, 150, 15, next_column=lambda: next(origins)
        )

        calls = self.surface.calls_named("draw_text")
        self.assertEqual([c.args[1] for c in calls], [0, 0, 200, 200, 400, 400, 600, 600])
        self.assertEqual([c.args[0] for c in calls][-2:], ["4. Consumed", "5. Slippery fish"])
        for call in calls:
            self.assertLessEqual(call.args[2] + 6 * 1.2, 5 + 15)

    def test_fitting_block_never_asks_for_a_column(self):
        def no_column():
            raise AssertionError("unexpected continuation column")

        self.renderer.render(shuffled_layout(), 0, 0, 150, 500, next_column=no_column)
        self.assertEqual(len(self.surface.calls_named("draw_text")), 8)

if __name__ == '__main__':
    unittest.main()
