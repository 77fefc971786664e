# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Wordlist parsing and the boundary to the word placement algorithm.

Wordlists come in as CSV, JSON or YAML. Each entry carries a clue and an
answer, and may already carry its placement (orientation, startx, starty,
position) when it was produced by an external layout tool.

Placement itself happens outside this package: a layout generator is any
callable taking the wordlist and returning a Layout. Without one, the
entries must already be placed.
"""

import csv
import importlib
import io
import json
import logging
from typing import Any, Callable, Dict, List, Optional

import yaml

from layout_wrapper import LayoutWrapper
from models import EmptyWordlistError, Layout, PlacedWord, WordlistFormatError


logger = logging.getLogger(__name__)


LayoutGenerator = Callable[[List[PlacedWord]], Layout]

CSV_COLUMNS = ["clue", "answer", "orientation", "startx", "starty", "position"]
INPUT_FORMATS = ["csv", "json", "yaml"]


def csv_to_wordlist(raw: str) -> List[PlacedWord]:
    """
    Parse CSV rows of clue,answer[,orientation,startx,starty,position].

    Empty lines are skipped. Entries are sorted by answer length (shortest
    first, stable for equal lengths).
    """
    records = []
    for line_no, row in enumerate(csv.reader(io.StringIO(raw)), start=1):
        if not row or all(not col.strip() for col in row):
            continue
        if len(row) < 2:
            raise WordlistFormatError(
                f"CSV line {line_no}: expected at least clue and answer, got {row}"
            )
        records.append(dict(zip(CSV_COLUMNS, (col.strip() for col in row))))

    records.sort(key=lambda r: len(r["answer"]))
    return [_entry_to_word(r, f"CSV record {i}") for i, r in enumerate(records, start=1)]


def json_to_wordlist(raw: str) -> List[PlacedWord]:
    """Parse a JSON array of wordlist objects."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise WordlistFormatError(f"Invalid JSON wordlist: {e}")
    return _entries_to_wordlist(data, "JSON")


def yaml_to_wordlist(raw: str) -> List[PlacedWord]:
    """Parse a YAML list of wordlist objects (or a mapping with a 'words' key)."""
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise WordlistFormatError(f"Invalid YAML wordlist: {e}")
    if isinstance(data, dict):
        data = data.get("words")
    return _entries_to_wordlist(data, "YAML")


def parse_wordlist(raw: str, fmt: str) -> List[PlacedWord]:
    """Parse raw input in one of INPUT_FORMATS."""
    parsers = {
        "csv": csv_to_wordlist,
        "json": json_to_wordlist,
        "yaml": yaml_to_wordlist,
    }
    if fmt not in parsers:
        raise WordlistFormatError(
            f"Unsupported input format '{fmt}'. Must be one of: {INPUT_FORMATS}"
        )
    words = parsers[fmt](raw)
    logger.info(f"Parsed {len(words)} {fmt.upper()} wordlist entries")
    return words


def _entries_to_wordlist(data: Any, source: str) -> List[PlacedWord]:
    if not isinstance(data, list):
        raise WordlistFormatError(
            f"{source} wordlist must be a list of entries, got {type(data).__name__}"
        )
    return [_entry_to_word(entry, f"{source} entry {i}") for i, entry in enumerate(data, start=1)]


def _entry_to_word(entry: Dict[str, Any], where: str) -> PlacedWord:
    if not isinstance(entry, dict):
        raise WordlistFormatError(f"{where}: expected a mapping, got {entry!r}")
    if not entry.get("answer"):
        raise WordlistFormatError(f"{where}: missing answer")
    try:
        return PlacedWord.from_dict(entry)
    except (TypeError, ValueError) as e:
        raise WordlistFormatError(f"{where}: {e}")


def precomputed_layout(words: List[PlacedWord]) -> Layout:
    """
    Layout generator for wordlists that already carry their placement.

    Raises:
        WordlistFormatError: If an entry has no orientation or coordinates
    """
    for word in words:
        if not word.is_placed() or word.start_x < 1 or word.start_y < 1:
            raise WordlistFormatError(
                f"Word {word.answer!r} has no placement; supply orientation, "
                "startx and starty, or configure a layout generator"
            )
    return Layout.from_words(words)


def load_generator(target: str) -> LayoutGenerator:
    """
    Import a layout generator given as 'package.module:function'.

    Raises:
        ValueError: If the target is malformed or does not name a callable
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Layout generator must be 'module:function', got '{target}'")
    module = importlib.import_module(module_name)
    generator = getattr(module, attr, None)
    if not callable(generator):
        raise ValueError(f"Layout generator '{target}' is not callable")
    return generator


def wordlist_to_layout(
    words: List[PlacedWord],
    generator: Optional[LayoutGenerator] = None,
) -> LayoutWrapper:
    """
    Hand the wordlist to the placement algorithm and wrap the result.

    Raises:
        EmptyWordlistError: If the wordlist has no entries
    """
    if not words:
        raise EmptyWordlistError(
            "Expected a wordlist with at least one entry, instead an empty list was given"
        )
    generator = generator or precomputed_layout
    layout = generator(words)
    logger.debug(f"Layout generated with {len(layout.words)} words")
    return LayoutWrapper(layout)
