# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for the data model and layout accessor."""

import json
import os
import random
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from layout_wrapper import LayoutWrapper
from models import EmptyLayoutError, Layout, Orientation, PlacedWord


def cat_cow_layout() -> LayoutWrapper:
    """CAT across and COW down, sharing the C at (1, 1)."""
    return LayoutWrapper(Layout.from_words([
        PlacedWord("cat", "Feline", Orientation.ACROSS, 1, 1, 1),
        PlacedWord("cow", "Farm animal", Orientation.DOWN, 1, 1, 1),
    ]))


class TestPlacedWord(unittest.TestCase):
    """Tests for PlacedWord."""

    def test_across_cells(self):
        word = PlacedWord("cat", "", Orientation.ACROSS, 1, start_x=2, start_y=3)
        self.assertEqual(word.cells(), [(3, 2), (3, 3), (3, 4)])

    def test_down_cells(self):
        word = PlacedWord("cow", "", Orientation.DOWN, 1, start_x=2, start_y=3)
        self.assertEqual(word.cells(), [(3, 2), (4, 2), (5, 2)])

    def test_unplaced_word_has_no_cells(self):
        word = PlacedWord("dog", "Pet")
        self.assertFalse(word.is_placed())
        self.assertEqual(word.cells(), [])

    def test_letters_are_uppercased(self):
        self.assertEqual(PlacedWord("Dog").letters(), ["D", "O", "G"])

    def test_orientation_from_string(self):
        word = PlacedWord("dog", orientation="Down")
        self.assertEqual(word.orientation, Orientation.DOWN)

    def test_interchange_keys(self):
        data = {
            "answer": "cat", "clue": "Feline", "orientation": "across",
            "position": 3, "startx": 4, "starty": 5,
        }
        word = PlacedWord.from_dict(data)

        self.assertEqual(word.start_x, 4)
        self.assertEqual(word.start_y, 5)
        self.assertEqual(word.to_dict(), data)

    def test_missing_clue_is_empty_string(self):
        word = PlacedWord.from_dict({"answer": "cat", "clue": None})
        self.assertEqual(word.clue, "")


class TestLayout(unittest.TestCase):
    """Tests for building the character table."""

    def test_table_from_words(self):
        layout = cat_cow_layout().layout

        self.assertEqual(len(layout.table), 3)
        self.assertEqual(layout.table[0], ("C", "A", "T"))
        self.assertEqual(layout.table[1], ("O", "-", "-"))
        self.assertEqual(layout.table[2], ("W", "-", "-"))

    def test_unplaced_words_kept_but_not_in_table(self):
        layout = Layout.from_words([
            PlacedWord("cat", "", Orientation.ACROSS, 1, 1, 1),
            PlacedWord("zebra", "", Orientation.NONE),
        ])

        self.assertEqual(len(layout.words), 2)
        self.assertEqual(layout.table, (("C", "A", "T"),))


class TestLayoutWrapper(unittest.TestCase):
    """Tests for LayoutWrapper."""

    def test_rows_and_cols(self):
        layout = cat_cow_layout()

        self.assertEqual(layout.cols(), 3)
        self.assertEqual(layout.rows(), 3)

    def test_words_in_layout_order(self):
        layout = cat_cow_layout()
        self.assertEqual([w.answer for w in layout.words()], ["cat", "cow"])

    def test_words_filtered_by_orientation(self):
        layout = cat_cow_layout()

        self.assertEqual([w.answer for w in layout.words(Orientation.ACROSS)], ["cat"])
        self.assertEqual([w.answer for w in layout.words(Orientation.DOWN)], ["cow"])
        self.assertEqual(layout.words(Orientation.NONE), [])

    def test_rows_without_down_words(self):
        layout = LayoutWrapper(Layout.from_words([
            PlacedWord("cat", "", Orientation.ACROSS, 1, 1, 1),
        ]))

        self.assertEqual(layout.cols(), 3)
        with self.assertRaises(EmptyLayoutError):
            layout.rows()

    def test_cols_without_across_words(self):
        layout = LayoutWrapper(Layout.from_words([
            PlacedWord("cow", "", Orientation.DOWN, 1, 1, 1),
        ]))

        self.assertEqual(layout.rows(), 3)
        with self.assertRaises(EmptyLayoutError):
            layout.cols()

    def test_render_text(self):
        layout = cat_cow_layout()

        self.assertEqual(layout.render(), "CAT\nO--\nW--")
        self.assertEqual(str(layout), layout.render())

    def test_to_json(self):
        data = json.loads(cat_cow_layout().to_json())

        self.assertEqual(len(data), 2)
        self.assertEqual(data[1]["orientation"], "down")
        self.assertEqual(data[1]["startx"], 1)

    def test_letter_cells_counts_shared_cell_once(self):
        cells = cat_cow_layout().letter_cells()

        self.assertEqual(len(cells), 5)
        self.assertEqual(cells[(1, 1)], "C")

    def test_stats(self):
        stats = cat_cow_layout().stats()

        self.assertEqual(stats["rows"], 3)
        self.assertEqual(stats["cols"], 3)
        self.assertEqual(stats["across_count"], 1)
        self.assertEqual(stats["down_count"], 1)
        self.assertEqual(stats["letter_cells"], 5)

    def test_extents_match_brute_force(self):
        """Row/column counts equal the furthest letter of any word."""
        rng = random.Random(1234)
        for _ in range(200):
            words = []
            for i in range(rng.randint(2, 12)):
                orientation = Orientation.ACROSS if i % 2 == 0 else Orientation.DOWN
                words.append(PlacedWord(
                    answer="X" * rng.randint(1, 9),
                    orientation=orientation,
                    position=i + 1,
                    start_x=rng.randint(1, 15),
                    start_y=rng.randint(1, 15),
                ))
            layout = LayoutWrapper(Layout.from_words(words))

            expected_cols = max(
                w.start_x + len(w.answer) - 1
                for w in words if w.orientation == Orientation.ACROSS
            )
            expected_rows = max(
                w.start_y + len(w.answer) - 1
                for w in words if w.orientation == Orientation.DOWN
            )
            self.assertEqual(layout.cols(), expected_cols)
            self.assertEqual(layout.rows(), expected_rows)


if __name__ == '__main__':
    unittest.main()
