# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for the crossword document renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


EMPTY_CELL = "-"


class CrosswordError(Exception):
    """Base class for all rendering errors."""
    pass


class EmptyLayoutError(CrosswordError):
    """Raised when grid dimensions are requested but an orientation has no words."""
    pass


class InvalidGridError(CrosswordError):
    """Raised for degenerate grid dimensions (zero rows or columns)."""
    pass


class UnplaceableSolutionError(CrosswordError):
    """Raised when solution letters could not all be marked in the grid."""

    def __init__(self, remaining: List[Tuple[int, str]]):
        self.remaining = list(remaining)
        letters = ", ".join(f"{char!r} (#{ordinal})" for ordinal, char in self.remaining)
        super().__init__(
            "The letters from the solution could not all be marked in the "
            f"crossword answers. Unplaced: {letters}"
        )


class EmptyWordlistError(CrosswordError):
    """Raised when an empty wordlist is handed to the layout generator."""
    pass


class ClueOverflowError(CrosswordError):
    """Raised when the clue list does not fit its region and cannot continue elsewhere."""
    pass


class WordlistFormatError(CrosswordError):
    """Raised when wordlist input cannot be parsed."""
    pass


class RenderTimeoutError(CrosswordError):
    """Raised when a render exceeds the configured time limit."""
    pass


class Orientation(Enum):
    ACROSS = "across"
    DOWN = "down"
    NONE = "none"


@dataclass
class PlacedWord:
    """One word positioned in the grid (1-based coordinates)."""
    answer: str
    clue: str = ""
    orientation: Orientation = Orientation.NONE
    position: int = 0  # Clue number
    start_x: int = 0   # Column of the first letter
    start_y: int = 0   # Row of the first letter

    def __post_init__(self):
        if isinstance(self.orientation, str):
            self.orientation = Orientation(self.orientation.lower())
        if self.clue is None:
            self.clue = ""

    @property
    def length(self) -> int:
        return len(self.answer)

    def is_placed(self) -> bool:
        return self.orientation != Orientation.NONE

    def letters(self) -> List[str]:
        """Uppercased letters of the answer, in order."""
        return list(self.answer.upper())

    def cells(self) -> List[Tuple[int, int]]:
        """(row, col) of every letter; empty for unplaced words."""
        cells = []
        for i in range(self.length):
            if self.orientation == Orientation.ACROSS:
                cells.append((self.start_y, self.start_x + i))
            elif self.orientation == Orientation.DOWN:
                cells.append((self.start_y + i, self.start_x))
        return cells

    def to_dict(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "clue": self.clue,
            "orientation": self.orientation.value,
            "position": self.position,
            "startx": self.start_x,
            "starty": self.start_y,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlacedWord':
        """Build from the interchange format (startx/starty keys)."""
        return cls(
            answer=str(data["answer"]),
            clue=data.get("clue") or "",
            orientation=data.get("orientation") or Orientation.NONE,
            position=int(data.get("position") or 0),
            start_x=int(data.get("startx") or 0),
            start_y=int(data.get("starty") or 0),
        )


@dataclass(frozen=True)
class Layout:
    """Result of upstream word placement: character table plus placed words."""
    table: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)
    words: Tuple[PlacedWord, ...] = field(default_factory=tuple)

    @classmethod
    def from_words(cls, words: Iterable[PlacedWord]) -> 'Layout':
        """
        Build the character table from placed words.

        The table is sized to the furthest extent any placed word reaches;
        cells no word covers hold EMPTY_CELL. Letters written later win on
        conflicting cells, since upstream correctness is not checked here.
        """
        words = tuple(words)
        rows = 0
        cols = 0
        for word in words:
            for row, col in word.cells():
                rows = max(rows, row)
                cols = max(cols, col)

        grid = [[EMPTY_CELL] * cols for _ in range(rows)]
        for word in words:
            for (row, col), letter in zip(word.cells(), word.letters()):
                grid[row - 1][col - 1] = letter

        return cls(table=tuple(tuple(row) for row in grid), words=words)
