# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Solution word overlay.

Threads a secondary word through the grid: every character of the solution
is bound to exactly one grid cell carrying the same letter. Cells are offered
in the order the grid renderer visits them and each one takes the earliest
unmatched solution character it equals (first fit, no backtracking).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from drawing import DrawingSurface
from models import UnplaceableSolutionError


logger = logging.getLogger(__name__)


class SolutionPool:
    """
    Solution characters that have not been placed yet.

    Entries are (ordinal, character) pairs, ordinals 1-based in the order
    the characters appear in the solution string.
    """

    def __init__(self, solution: str = ""):
        self.entries: List[Tuple[int, str]] = [
            (i + 1, char) for i, char in enumerate(solution.upper())
        ]

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def take(self, letter: str) -> Optional[int]:
        """Remove the earliest entry equal to letter and return its ordinal."""
        letter = letter.upper()
        for index, (ordinal, char) in enumerate(self.entries):
            if char == letter:
                del self.entries[index]
                return ordinal
        return None


class SolutionOverlay:
    """
    Matches solution characters against grid cells during one render.

    Usage:
        overlay = SolutionOverlay("HELLO")
        ordinal = overlay.match(row, col, letter)  # per visited cell
        overlay.ensure_complete()                  # after the whole grid
    """

    def __init__(self, solution: Optional[str] = None):
        self.solution = (solution or "").upper()
        self.pool = SolutionPool(self.solution)
        self.claimed: Set[Tuple[int, int]] = set()

    @property
    def active(self) -> bool:
        return bool(self.solution)

    def match(self, row: int, col: int, letter: str) -> Optional[int]:
        """
        Offer a cell to the overlay.

        Returns the ordinal of the solution character bound to the cell, or
        None if the cell is left to default rendering. A cell already bound
        earlier in the pass (shared by an across and a down word) declines.
        """
        if not self.pool or (row, col) in self.claimed:
            return None
        ordinal = self.pool.take(letter)
        if ordinal is not None:
            self.claimed.add((row, col))
            logger.debug(f"Solution letter #{ordinal} '{letter.upper()}' -> cell ({row}, {col})")
        return ordinal

    def ensure_complete(self):
        """Raise if any solution character is still unplaced."""
        if self.pool:
            logger.error(
                f"{len(self.pool)} of {len(self.solution)} solution letters could not be placed"
            )
            raise UnplaceableSolutionError(self.pool.entries)
        if self.active:
            logger.info(f"All {len(self.solution)} solution letters placed")


@dataclass
class SolutionStripStyle:
    """Colours and proportions of the solution strip."""
    label: str = "Solution"
    label_font_size: float = 8.0
    max_box: float = 20.0
    box_color: str = "#000000"
    ordinal_color: str = "#FF0000"
    label_color: str = "#000000"
    border_ratio: float = 0.02
    underline_width: float = 1.0
    number_ratio: float = 0.45


class SolutionStripRenderer:
    """Draws one empty, numbered box per solution character."""

    def __init__(self, surface: DrawingSurface, style: Optional[SolutionStripStyle] = None):
        self.surface = surface
        self.style = style or SolutionStripStyle()

    def strip_height(self, box: float) -> float:
        """Vertical space the strip needs for a given box size."""
        return box + self.style.label_font_size * 1.5

    def box_size(self, solution: str, width: float, max_box: float) -> float:
        """Box size that fits the whole solution into width, capped at max_box."""
        if not solution:
            return 0.0
        return min(max_box, self.style.max_box, width / len(solution))

    def render(self, solution: str, x: float, y: float, box: float):
        """Render the strip with its caption starting at (x, y)."""
        if not solution:
            return
        style = self.style
        surface = self.surface

        surface.draw_text(style.label, x, y, style.label_font_size, style.label_color)
        top = y + style.label_font_size * 1.5
        number_size = box * style.number_ratio

        for ordinal in range(1, len(solution) + 1):
            box_x = x + (ordinal - 1) * box
            surface.stroke_rect(box_x, top, box, box, style.box_color, box * style.border_ratio)
            surface.draw_text(str(ordinal), box_x + 1, top + 0.5, number_size, style.ordinal_color)
            surface.draw_line(
                box_x, top + box, box_x + box, top + box,
                style.box_color, style.underline_width,
            )
