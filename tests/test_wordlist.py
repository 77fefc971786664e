# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for wordlist parsing and layout generation."""

import json
import os
import sys
import unittest
from unittest.mock import MagicMock

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import (
    EmptyWordlistError, Layout, Orientation, PlacedWord, WordlistFormatError
)
from wordlist import (
    csv_to_wordlist, json_to_wordlist, load_generator, parse_wordlist,
    precomputed_layout, wordlist_to_layout, yaml_to_wordlist
)


PLACED_ENTRIES = [
    {"clue": "Feline", "answer": "cat", "orientation": "across",
     "startx": 1, "starty": 1, "position": 1},
    {"clue": "Farm animal", "answer": "cow", "orientation": "down",
     "startx": 1, "starty": 1, "position": 1},
]


class TestCsvWordlist(unittest.TestCase):
    """Tests for CSV input."""

    def test_sorted_by_answer_length(self):
        words = csv_to_wordlist("Big cat,tiger\nFeline,cat\nBird,emu\n")

        self.assertEqual([w.answer for w in words], ["cat", "emu", "tiger"])
        self.assertEqual(words[0].clue, "Feline")
        self.assertEqual(words[0].orientation, Orientation.NONE)

    def test_blank_lines_skipped(self):
        words = csv_to_wordlist("\nFeline,cat\n\n  ,  \nBird,emu\n")
        self.assertEqual(len(words), 2)

    def test_placement_columns(self):
        words = csv_to_wordlist("Feline,cat,across,2,3,4\n")

        word = words[0]
        self.assertEqual(word.orientation, Orientation.ACROSS)
        self.assertEqual((word.start_x, word.start_y, word.position), (2, 3, 4))

    def test_quoted_clue_with_comma(self):
        words = csv_to_wordlist('"Small, furry",cat\n')
        self.assertEqual(words[0].clue, "Small, furry")

    def test_single_column_rejected(self):
        with self.assertRaises(WordlistFormatError) as ctx:
            csv_to_wordlist("Feline,cat\njustone\n")
        self.assertIn("line 2", str(ctx.exception))

    def test_bad_orientation_rejected(self):
        with self.assertRaises(WordlistFormatError):
            csv_to_wordlist("Feline,cat,diagonal,1,1,1\n")

    def test_bad_coordinate_rejected(self):
        with self.assertRaises(WordlistFormatError):
            csv_to_wordlist("Feline,cat,across,x,1,1\n")


class TestStructuredWordlists(unittest.TestCase):
    """Tests for JSON and YAML input."""

    def test_json(self):
        words = json_to_wordlist(json.dumps(PLACED_ENTRIES))

        self.assertEqual(len(words), 2)
        self.assertEqual(words[1].orientation, Orientation.DOWN)
        self.assertEqual(words[1].clue, "Farm animal")

    def test_json_keeps_order(self):
        words = json_to_wordlist('[{"answer": "tiger"}, {"answer": "cat"}]')
        self.assertEqual([w.answer for w in words], ["tiger", "cat"])

    def test_json_invalid(self):
        with self.assertRaises(WordlistFormatError):
            json_to_wordlist("[{")

    def test_json_not_a_list(self):
        with self.assertRaises(WordlistFormatError):
            json_to_wordlist('{"answer": "cat"}')

    def test_missing_answer(self):
        with self.assertRaises(WordlistFormatError) as ctx:
            json_to_wordlist('[{"answer": "cat"}, {"clue": "No answer"}]')
        self.assertIn("entry 2", str(ctx.exception))

    def test_entry_not_mapping(self):
        with self.assertRaises(WordlistFormatError):
            json_to_wordlist('["cat"]')

    def test_yaml_list(self):
        words = yaml_to_wordlist(
            "- clue: Feline\n"
            "  answer: cat\n"
            "  orientation: across\n"
            "  startx: 1\n"
            "  starty: 1\n"
            "  position: 1\n"
        )
        self.assertEqual(words[0].orientation, Orientation.ACROSS)

    def test_yaml_words_key(self):
        words = yaml_to_wordlist("words:\n  - clue: Feline\n    answer: cat\n")
        self.assertEqual(words[0].answer, "cat")

    def test_yaml_invalid(self):
        with self.assertRaises(WordlistFormatError):
            yaml_to_wordlist("words: [unclosed")

    def test_parse_wordlist_dispatch(self):
        self.assertEqual(parse_wordlist("Feline,cat\n", "csv")[0].answer, "cat")
        self.assertEqual(parse_wordlist('[{"answer": "cat"}]', "json")[0].answer, "cat")
        with self.assertRaises(WordlistFormatError):
            parse_wordlist("", "xml")


class TestLayoutGeneration(unittest.TestCase):
    """Tests for the layout generator boundary."""

    def test_precomputed_layout(self):
        words = [PlacedWord.from_dict(e) for e in PLACED_ENTRIES]

        layout = precomputed_layout(words)

        self.assertEqual(layout.table[0], ("C", "A", "T"))
        self.assertEqual(len(layout.words), 2)

    def test_precomputed_requires_placement(self):
        with self.assertRaises(WordlistFormatError):
            precomputed_layout([PlacedWord("cat", "Feline")])

    def test_precomputed_rejects_zero_coordinates(self):
        with self.assertRaises(WordlistFormatError):
            precomputed_layout([PlacedWord("cat", "Feline", Orientation.ACROSS, 1, 0, 1)])

    def test_empty_wordlist(self):
        with self.assertRaises(EmptyWordlistError) as ctx:
            wordlist_to_layout([])
        self.assertIn("at least one entry", str(ctx.exception))

    def test_generator_is_used(self):
        words = [PlacedWord("cat", "Feline")]
        placed = PlacedWord("cat", "Feline", Orientation.ACROSS, 1, 1, 1)
        generator = MagicMock(return_value=Layout.from_words([placed]))

        wrapper = wordlist_to_layout(words, generator)

        generator.assert_called_once_with(words)
        self.assertEqual(wrapper.render(), "CAT")

    def test_load_generator(self):
        self.assertIs(load_generator("wordlist:precomputed_layout"), precomputed_layout)

    def test_load_generator_bad_target(self):
        with self.assertRaises(ValueError):
            load_generator("wordlist")
        with self.assertRaises(ValueError):
            load_generator("wordlist:CSV_COLUMNS")

    def test_load_generator_missing_module(self):
        with self.assertRaises(ImportError):
            load_generator("no_such_module_here:place")


if __name__ == '__main__':
    unittest.main()
