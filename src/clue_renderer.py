# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Clue list rendering (across and down blocks, sorted by clue number).
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from drawing import DrawingSurface
from layout_wrapper import LayoutWrapper
from models import ClueOverflowError, Orientation, PlacedWord


logger = logging.getLogger(__name__)


# Returns the (x, y) origin of the next continuation column
NextColumn = Callable[[], Tuple[float, float]]


@dataclass
class ClueStyle:
    """Typography of the clue column."""
    font_size: float = 5.9
    min_font_size: float = 4.0
    line_height_ratio: float = 1.2
    color: str = "#000000"
    across_label: str = "Across"
    down_label: str = "Down"


def format_clue(word: PlacedWord) -> str:
    return f"{word.position}. {word.clue or ''}"


def sorted_by_position(words: List[PlacedWord]) -> List[PlacedWord]:
    return sorted(words, key=lambda w: w.position)


class ClueListRenderer:
    """
    Renders the across and down clue blocks into a text column.

    Usage:
        renderer = ClueListRenderer(surface)
        renderer.render(layout, x, y, width, height)
    """

    def __init__(self, surface: DrawingSurface, style: Optional[ClueStyle] = None):
        self.surface = surface
        self.style = style or ClueStyle()

    def format_clues(self, layout: LayoutWrapper) -> List[str]:
        """Header and clue lines for both orientations, blank line between."""
        across = sorted_by_position(layout.words(Orientation.ACROSS))
        down = sorted_by_position(layout.words(Orientation.DOWN))
        return [
            f"{self.style.across_label}:",
            *[format_clue(w) for w in across],
            "",
            f"{self.style.down_label}:",
            *[format_clue(w) for w in down],
        ]

    def wrap_line(self, line: str, width: float, font_size: float) -> List[str]:
        """
        Greedy word wrap of one line to the column width.

        Continuation lines are indented. A word wider than the column is
        broken between characters.
        """
        if not line or self.surface.text_width(line, font_size) <= width:
            return [line]

        lines = []
        current = ""
        for word in line.split(" "):
            candidate = f"{current} {word}" if current else word
            if self.surface.text_width(candidate, font_size) <= width:
                current = candidate
                continue
            if current:
                lines.append(current)
                current = "  " + word  # Indent continuation
            else:
                current = word
            while self.surface.text_width(current, font_size) > width:
                head, rest = self.split_at_width(current, width, font_size)
                lines.append(head)
                if not rest:
                    current = ""
                    break
                current = "  " + rest
        if current:
            lines.append(current)
        return lines

    def split_at_width(self, text: str, width: float, font_size: float) -> Tuple[str, str]:
        """Split text after the last character that fits width (at least one visible character)."""
        cut = len(text) - len(text.lstrip()) + 1
        while cut < len(text) and self.surface.text_width(text[:cut + 1], font_size) <= width:
            cut += 1
        return text[:cut], text[cut:]

    def layout_lines(self, lines: List[str], width: float, font_size: float) -> List[str]:
        wrapped = []
        for line in lines:
            wrapped.extend(self.wrap_line(line, width, font_size))
        return wrapped

    def fit_font_size(self, lines: List[str], width: float, height: float) -> float:
        """
        Largest font size (in 0.5pt steps down from the configured size) at
        which the wrapped block fits the column height.
        """
        style = self.style
        font_size = style.font_size
        while font_size > style.min_font_size:
            wrapped = self.layout_lines(lines, width, font_size)
            if len(wrapped) <= self.lines_per_column(height, font_size):
                return font_size
            font_size = max(style.min_font_size, font_size - 0.5)

        wrapped = self.layout_lines(lines, width, font_size)
        if len(wrapped) > self.lines_per_column(height, font_size):
            logger.warning(
                f"Clue list needs {len(wrapped)} lines and overflows the "
                f"{height:.0f}pt column even at {font_size}pt"
            )
        return font_size

    def lines_per_column(self, height: float, font_size: float) -> int:
        """Number of lines a column of the given height holds (at least one)."""
        line_height = font_size * self.style.line_height_ratio
        return max(1, int(height // line_height))

    def render(
        self,
        layout: LayoutWrapper,
        x: float,
        y: float,
        width: float,
        height: float,
        next_column: Optional[NextColumn] = None,
    ) -> float:
        """
        Draw the clue blocks into the region.

        Lines that do not fit the region even at the minimum font size
        continue in further columns of the same size, each placed at the
        origin returned by next_column.

        Returns:
            Font size used

        Raises:
            ClueOverflowError: If the block overflows and next_column is None
        """
        lines = self.format_clues(layout)
        font_size = self.fit_font_size(lines, width, height)
        if font_size != self.style.font_size:
            logger.info(f"Clue font reduced to {font_size}pt to fit the column")

        wrapped = self.layout_lines(lines, width, font_size)
        per_column = self.lines_per_column(height, font_size)
        columns = [wrapped[i:i + per_column] for i in range(0, len(wrapped), per_column)]

        if len(columns) > 1:
            if next_column is None:
                raise ClueOverflowError(
                    f"Clue list needs {len(wrapped)} lines but the column holds "
                    f"{per_column} at {font_size}pt"
                )
            logger.info(f"Clue list continues in {len(columns) - 1} further column(s)")

        self.draw_column(columns[0] if columns else [], x, y, font_size)
        for column in columns[1:]:
            column_x, column_y = next_column()
            self.draw_column(column, column_x, column_y, font_size)
        return font_size

    def draw_column(self, lines: List[str], x: float, y: float, font_size: float):
        line_height = font_size * self.style.line_height_ratio
        current_y = y
        for line in lines:
            self.surface.draw_text(line, x, current_y, font_size, self.style.color)
            current_y += line_height
