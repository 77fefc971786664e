# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Grid rendering: letter boxes, clue numbers and solution markers.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Set

from drawing import DrawingSurface
from layout_wrapper import LayoutWrapper
from models import InvalidGridError, Orientation, PlacedWord
from solution_overlay import SolutionOverlay


logger = logging.getLogger(__name__)


def box_size(width: float, height: float, cols: int, rows: int) -> float:
    """
    Largest square cell size that fits a cols x rows grid into the region.

    Raises:
        InvalidGridError: If cols or rows is not positive
    """
    if cols <= 0 or rows <= 0:
        raise InvalidGridError(f"Cannot size a {cols}x{rows} grid")
    return min(width / cols, height / rows)


@dataclass
class GridStyle:
    """Colours and size ratios for grid cells (ratios relative to box size)."""
    box_color: str = "#000000"
    letter_color: str = "#000000"
    number_color: str = "#000000"
    solution_color: str = "#FF0000"
    solution_fill: str = "#FFE5E5"

    border_ratio: float = 0.02
    letter_ratio: float = 0.85
    letter_offset_ratio: float = 0.20
    number_ratio: float = 0.45
    number_inset: float = 0.5
    circle_ratio: float = 1 / 2.1


class GridRenderer:
    """
    Draws every placed word of a layout as a run of square cells.

    Usage:
        renderer = GridRenderer(surface, visible_letters={"A", "E"})
        size = renderer.render(layout, x, y, width, height, overlay)
    """

    def __init__(
        self,
        surface: DrawingSurface,
        visible_letters: Optional[Iterable[str]] = None,
        style: Optional[GridStyle] = None,
    ):
        self.surface = surface
        self.visible_letters: Set[str] = {c.upper() for c in (visible_letters or [])}
        self.style = style or GridStyle()

    def render(
        self,
        layout: LayoutWrapper,
        x: float,
        y: float,
        width: float,
        height: float,
        overlay: Optional[SolutionOverlay] = None,
    ) -> float:
        """
        Render the grid into the given region.

        Returns:
            Box size used for the cells
        """
        size = box_size(width, height, layout.cols(), layout.rows())
        logger.debug(
            f"Grid {layout.cols()}x{layout.rows()} in {width:.1f}x{height:.1f}pt, "
            f"box size {size:.2f}pt"
        )

        for word in layout.words():
            self.render_word(word, size, x, y, overlay)
        for word in layout.words():
            self.render_word_position(word, size, x, y)

        return size

    def displayed_char(self, letter: str) -> str:
        letter = letter.upper()
        return letter if letter in self.visible_letters else ""

    def render_word(
        self,
        word: PlacedWord,
        size: float,
        x: float = 0,
        y: float = 0,
        overlay: Optional[SolutionOverlay] = None,
    ):
        """Render the cells of one word, offering each to the overlay first."""
        if word.orientation == Orientation.NONE:
            logger.debug(f"Skipping unplaced word {word.answer!r}")
            return

        for (row, col), letter in zip(word.cells(), word.letters()):
            cell_x = x + (col - 1) * size
            cell_y = y + (row - 1) * size
            char = self.displayed_char(letter)

            ordinal = overlay.match(row, col, letter) if overlay is not None else None
            if ordinal is None:
                self.render_letter_box(cell_x, cell_y, size, char)
            else:
                self.render_solution_box(cell_x, cell_y, size, char, ordinal)

    def render_letter_box(self, x: float, y: float, size: float, char: str = ""):
        style = self.style
        self.surface.stroke_rect(x, y, size, size, style.box_color, size * style.border_ratio)
        if char:
            self.surface.draw_text(
                char,
                x,
                y + size * style.letter_offset_ratio,
                size * style.letter_ratio,
                style.letter_color,
                width=size,
                align="center",
            )

    def render_solution_box(self, x: float, y: float, size: float, char: str, ordinal: int):
        """Matched cell: highlighted fill, circle and the solution ordinal."""
        style = self.style
        self.surface.fill_rect(x, y, size, size, style.solution_fill)
        self.render_letter_box(x, y, size, char)

        self.surface.stroke_circle(
            x + size / 2,
            y + size / 2,
            size * style.circle_ratio,
            style.solution_color,
            size * style.border_ratio,
        )
        font_size = size * style.number_ratio
        self.surface.draw_text(
            str(ordinal),
            x,
            y + size - font_size,
            font_size,
            style.solution_color,
            width=size - 1,
            align="right",
        )

    def render_word_position(self, word: PlacedWord, size: float, x: float = 0, y: float = 0):
        """Clue number in the top-left corner of the word's first cell."""
        if word.orientation == Orientation.NONE:
            return
        style = self.style
        cell_x = x + (word.start_x - 1) * size
        cell_y = y + (word.start_y - 1) * size
        self.surface.draw_text(
            str(word.position),
            cell_x + style.number_inset,
            cell_y + style.number_inset,
            size * style.number_ratio,
            style.number_color,
        )
