#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Crossword document renderer

Reads a wordlist (CSV, JSON or YAML), obtains its layout and writes:
1. txt  - the grid as plain text
2. json - the placed words for machine consumption
3. pdf  - printable puzzle page with clues and optional solution word
4. svg  - the same page as SVG

Usage:
    crossword-pdf json pdf --solution Hello < words.json > puzzle.pdf
    crossword-pdf csv txt --input words.csv
    crossword-pdf --config render.yaml --output puzzle.pdf
"""

import logging
import os
import signal
import sys
from typing import BinaryIO, Optional, TextIO

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    RenderConfig, ConfigValidationError, create_argument_parser, load_config
)
from document import CrosswordDocument
from drawing import RecordingSurface
from layout_wrapper import LayoutWrapper
from logging_config import setup_logging
from models import CrosswordError, RenderTimeoutError, WordlistFormatError
from wordlist import load_generator, parse_wordlist, wordlist_to_layout


def _timeout_handler(signum, frame):
    """Signal handler for timeout."""
    raise RenderTimeoutError("Rendering exceeded time limit")


class CrosswordRenderJob:
    """
    One render from wordlist input to output document.

    Workflow:
    1. Read and parse the wordlist
    2. Obtain the layout (precomputed or via a layout generator)
    3. Produce the requested output, fully buffered
    4. Write it to the output file or stdout
    """

    def __init__(self, config: RenderConfig):
        self.config = config
        self.logger = logging.getLogger(__name__)

    def run(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[BinaryIO] = None,
        dry_run: bool = False,
    ) -> Optional[bytes]:
        """
        Run the job with the configured time limit.

        Returns:
            The rendered output, or None for a dry run
        """
        timeout_seconds = self.config.timeout_seconds
        old_handler = None
        use_alarm = bool(timeout_seconds) and hasattr(signal, 'alarm')

        try:
            if use_alarm:
                self.logger.debug(f"Setting render timeout: {timeout_seconds} seconds")
                old_handler = signal.signal(signal.SIGALRM, _timeout_handler)
                signal.alarm(timeout_seconds)
            elif timeout_seconds:
                self.logger.warning("Timeout not supported on this platform (requires Unix/Linux/Mac)")

            layout = self.load_layout(stdin)
            if dry_run:
                self.dry_run(layout)
                return None
            content = self.render(layout)

        finally:
            if use_alarm:
                signal.alarm(0)
                if old_handler is not None:
                    signal.signal(signal.SIGALRM, old_handler)

        self.write(content, stdout)
        return content

    def read_input(self, stdin: Optional[TextIO] = None) -> str:
        path = self.config.input.path
        if path:
            self.logger.info(f"Reading {self.config.input.format.upper()} wordlist from {path}")
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()

        stdin = stdin or sys.stdin
        if stdin.isatty():
            raise WordlistFormatError(
                f"Expected program to receive the wordlist in "
                f"{self.config.input.format.upper()} format on stdin"
            )
        return stdin.read()

    def load_layout(self, stdin: Optional[TextIO] = None) -> LayoutWrapper:
        words = parse_wordlist(self.read_input(stdin), self.config.input.format)
        generator = None
        if self.config.input.generator:
            generator = load_generator(self.config.input.generator)
            self.logger.info(f"Using layout generator {self.config.input.generator}")
        return wordlist_to_layout(words, generator)

    def document(self, layout: LayoutWrapper) -> CrosswordDocument:
        return CrosswordDocument(
            layout,
            options=self.config.render_options(),
            config=self.config.page_config(),
        )

    def render(self, layout: LayoutWrapper) -> bytes:
        """Produce the configured output format."""
        fmt = self.config.output.format
        if self.config.puzzle.solution and fmt not in ("pdf", "svg"):
            self.logger.warning(f"Solution word is ignored for {fmt} output")

        if fmt == "txt":
            return layout.render().encode("utf-8")
        if fmt == "json":
            return layout.to_json().encode("utf-8")
        return self.document(layout).render(fmt)

    def dry_run(self, layout: LayoutWrapper):
        """Run the full page composition without serializing anything."""
        stats = layout.stats()
        self.logger.info(
            f"Layout: {stats['cols']}x{stats['rows']} grid, "
            f"{stats['across_count']} across, {stats['down_count']} down, "
            f"{stats['letter_cells']} letter cells"
        )
        if stats['unplaced_count']:
            self.logger.warning(f"{stats['unplaced_count']} words were not placed")

        document = self.document(layout)
        width, height = document.config.dimensions()
        surface = document.draw(RecordingSurface(width, height, document.config.font_name))
        self.logger.info(f"Dry run OK: {len(surface.calls)} drawing operations")

    def write(self, content: bytes, stdout: Optional[BinaryIO] = None):
        path = self.config.output.path
        if path:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, 'wb') as f:
                f.write(content)
            self.logger.info(f"Saved {self.config.output.format} output: {path}")
            return

        stdout = stdout or sys.stdout.buffer
        stdout.write(content)
        stdout.flush()


def main(argv=None):
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config(args)
    except ConfigValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(
        output_dir=config.logging.directory,
        log_level=config.logging.level,
        log_file_prefix=config.logging.file_prefix,
    )
    logger = logging.getLogger(__name__)

    try:
        CrosswordRenderJob(config).run(dry_run=args.dry_run)

    except CrosswordError as e:
        logger.error(str(e))
        sys.exit(1)
    except (OSError, ValueError, ImportError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Rendering cancelled.")
        sys.exit(0)


if __name__ == "__main__":
    main()
