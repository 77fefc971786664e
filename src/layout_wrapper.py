# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Read-only accessor over a placed crossword layout.
"""

import json
from typing import Dict, List, Optional, Tuple

from models import EmptyLayoutError, Layout, Orientation, PlacedWord


class LayoutWrapper:
    """
    Derived queries over a Layout.

    Usage:
        wrapper = LayoutWrapper(layout)
        wrapper.rows(), wrapper.cols()
        across = wrapper.words(Orientation.ACROSS)
    """

    def __init__(self, layout: Layout):
        self.layout = layout

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """Plain-text dump of the character table, one line per row."""
        return "\n".join("".join(row) for row in self.layout.table)

    def words(self, orientation: Optional[Orientation] = None) -> List[PlacedWord]:
        """Words in layout order, optionally filtered by orientation."""
        if orientation is not None:
            return [w for w in self.layout.words if w.orientation == orientation]
        return list(self.layout.words)

    def rows(self) -> int:
        """Number of grid rows, derived from the DOWN words."""
        down = self.words(Orientation.DOWN)
        if not down:
            raise EmptyLayoutError("Cannot count rows: the layout has no down words")
        return max(w.start_y + w.length - 1 for w in down)

    def cols(self) -> int:
        """Number of grid columns, derived from the ACROSS words."""
        across = self.words(Orientation.ACROSS)
        if not across:
            raise EmptyLayoutError("Cannot count columns: the layout has no across words")
        return max(w.start_x + w.length - 1 for w in across)

    def letter_cells(self) -> Dict[Tuple[int, int], str]:
        """(row, col) -> letter for every occupied cell, first visit order."""
        cells = {}
        for word in self.words():
            for cell, letter in zip(word.cells(), word.letters()):
                cells.setdefault(cell, letter)
        return cells

    def stats(self) -> Dict[str, int]:
        """Grid statistics used for logging and the dry-run summary."""
        return {
            "rows": self.rows(),
            "cols": self.cols(),
            "across_count": len(self.words(Orientation.ACROSS)),
            "down_count": len(self.words(Orientation.DOWN)),
            "unplaced_count": len(self.words(Orientation.NONE)),
            "letter_cells": len(self.letter_cells()),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Machine-readable dump of the placed words."""
        return json.dumps([w.to_dict() for w in self.words()], indent=indent)

