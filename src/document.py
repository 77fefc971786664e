# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Crossword document composer.

Lays out the first page with two regions:
- Clue column on the left (across and down clues)
- Grid region on the right, with the solution strip below the grid
  when a solution word is configured

Clues that do not fit the first page continue in columns on further pages.

The whole document is drawn into an in-memory surface and only serialized once
every step succeeded, so a failed render never produces partial output.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, List, Optional, Tuple

from clue_renderer import ClueListRenderer, ClueStyle
from drawing import DrawingSurface, create_surface, page_dimensions
from grid_renderer import GridRenderer, GridStyle
from layout_wrapper import LayoutWrapper
from solution_overlay import SolutionOverlay, SolutionStripRenderer, SolutionStripStyle


logger = logging.getLogger(__name__)


SurfaceFactory = Callable[[str, float, float, str], DrawingSurface]


@dataclass
class PageConfig:
    """Configuration for page layout."""
    # Page dimensions
    page_size: str = "A4"
    orientation: str = "landscape"

    # Margins
    margin: float = 10

    # Clue column (left of the grid)
    clue_column_width: float = 170
    clue_gutter: float = 20

    # Fonts
    font_name: str = "Helvetica"

    grid: GridStyle = field(default_factory=GridStyle)
    clues: ClueStyle = field(default_factory=ClueStyle)
    solution_strip: SolutionStripStyle = field(default_factory=SolutionStripStyle)

    def dimensions(self) -> Tuple[float, float]:
        return page_dimensions(self.page_size, self.orientation)


@dataclass
class RenderOptions:
    """Per-render content options."""
    visible_letters: List[str] = field(default_factory=list)
    solution: Optional[str] = None


@dataclass
class Region:
    x: float
    y: float
    width: float
    height: float


class CrosswordDocument:
    """
    Renders a laid-out crossword to a PDF or SVG document.

    Usage:
        document = CrosswordDocument(layout, RenderOptions(solution="HELLO"))
        pdf_bytes = document.render("pdf")
        document.write("puzzle.pdf")
    """

    def __init__(
        self,
        layout: LayoutWrapper,
        options: Optional[RenderOptions] = None,
        config: Optional[PageConfig] = None,
        surface_factory: SurfaceFactory = create_surface,
    ):
        self.layout = layout
        self.options = options or RenderOptions()
        self.config = config or PageConfig()
        self.surface_factory = surface_factory

    def regions(self, page_width: float, page_height: float) -> Tuple[Region, Region]:
        """Split the page into (clue region, grid region)."""
        cfg = self.config
        clues = Region(
            x=cfg.margin,
            y=cfg.margin,
            width=cfg.clue_column_width - cfg.clue_gutter,
            height=page_height - 2 * cfg.margin,
        )
        grid_x = cfg.margin + cfg.clue_column_width
        grid = Region(
            x=grid_x,
            y=cfg.margin,
            width=page_width - grid_x - cfg.margin,
            height=page_height - 2 * cfg.margin,
        )
        return clues, grid

    def render(self, fmt: str = "pdf") -> bytes:
        """
        Compose the page and return the serialized document.

        Raises:
            CrosswordError subclasses from layout access, box sizing or the
            solution overlay. No bytes are produced in that case.
        """
        surface = self.draw(self.surface_factory(
            fmt, *self.config.dimensions(), self.config.font_name
        ))
        content = surface.finish()
        logger.info(f"Rendered {fmt.upper()} document ({len(content)} bytes)")
        return content

    def draw(self, surface: DrawingSurface) -> DrawingSurface:
        """Issue every drawing call for the page onto surface."""
        cfg = self.config
        solution = (self.options.solution or "").upper()
        clue_region, grid_region = self.regions(surface.width, surface.height)

        strip = SolutionStripRenderer(surface, cfg.solution_strip)
        if solution:
            grid_region.height -= strip.strip_height(cfg.solution_strip.max_box) + cfg.margin

        visible = "".join(sorted({c.upper() for c in self.options.visible_letters}))
        logger.info(
            f"Rendering {len(self.layout.words())} words, "
            f"visible letters: {visible or 'none'}, solution: {solution or 'none'}"
        )

        overlay = SolutionOverlay(solution)
        grid = GridRenderer(surface, self.options.visible_letters, cfg.grid)
        size = grid.render(
            self.layout,
            grid_region.x,
            grid_region.y,
            grid_region.width,
            grid_region.height,
            overlay,
        )
        overlay.ensure_complete()

        if solution:
            strip_box = strip.box_size(solution, grid_region.width, size)
            strip.render(
                solution,
                grid_region.x,
                grid_region.y + grid_region.height + cfg.margin,
                strip_box,
            )

        columns = self.continuation_columns(surface, clue_region)
        ClueListRenderer(surface, cfg.clues).render(
            self.layout,
            clue_region.x,
            clue_region.y,
            clue_region.width,
            clue_region.height,
            next_column=lambda: next(columns),
        )
        return surface

    def continuation_columns(
        self, surface: DrawingSurface, clue_region: Region
    ) -> Iterator[Tuple[float, float]]:
        """
        Origins of clue columns on further pages.

        Each page is started lazily and filled left to right with columns
        the size of the clue region.
        """
        cfg = self.config
        usable = surface.width - 2 * cfg.margin + cfg.clue_gutter
        per_page = max(1, int(usable // cfg.clue_column_width))
        while True:
            surface.new_page()
            logger.debug(f"Clue continuation page {surface.page_count}")
            for index in range(per_page):
                yield clue_region.x + index * cfg.clue_column_width, clue_region.y

    def write(self, path: str, fmt: Optional[str] = None) -> str:
        """
        Render and save to a file; the format defaults to the file suffix.

        Returns:
            Path written
        """
        fmt = fmt or Path(path).suffix.lstrip(".").lower() or "pdf"
        content = self.render(fmt)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)
        logger.info(f"Saved document: {path}")
        return path

    def write_stream(self, stream: BinaryIO, fmt: str = "pdf"):
        """Render and write the finished document to a binary stream."""
        stream.write(self.render(fmt))
        stream.flush()
