# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the crossword document renderer.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
import copy
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from clue_renderer import ClueStyle
from document import PageConfig, RenderOptions
from drawing import PAGE_SIZES
from solution_overlay import SolutionStripStyle
from wordlist import INPUT_FORMATS


# Valid configuration values
VALID_INPUT_FORMATS = INPUT_FORMATS
VALID_OUTPUT_FORMATS = ["txt", "json", "pdf", "svg"]
VALID_PAGE_SIZES = list(PAGE_SIZES)
VALID_ORIENTATIONS = ["landscape", "portrait"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class PuzzleSettings:
    """What the document shows."""
    visible_letters: List[str] = field(default_factory=list)
    solution: Optional[str] = None
    solution_label: str = "Solution"
    across_label: str = "Across"
    down_label: str = "Down"


@dataclass
class InputConfig:
    """Where the wordlist comes from."""
    format: str = "csv"
    path: Optional[str] = None  # None reads stdin
    generator: Optional[str] = None  # 'module:function' layout generator


@dataclass
class OutputConfig:
    """Configuration for output."""
    format: str = "txt"
    path: Optional[str] = None  # None writes stdout


@dataclass
class PageSettings:
    """Page geometry."""
    size: str = "A4"
    orientation: str = "landscape"
    margin: float = 10
    clue_column_width: float = 170
    clue_font_size: float = 5.9


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    directory: Optional[str] = None  # None disables the log file
    file_prefix: str = "crossword_pdf"


@dataclass
class RenderConfig:
    """Complete configuration for one render."""
    puzzle: PuzzleSettings = field(default_factory=PuzzleSettings)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    page: PageSettings = field(default_factory=PageSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    timeout_seconds: int = 0

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.puzzle, dict):
            self.puzzle = PuzzleSettings(**self.puzzle)
        if isinstance(self.input, dict):
            self.input = InputConfig(**self.input)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)
        if isinstance(self.page, dict):
            self.page = PageSettings(**self.page)
        if isinstance(self.logging, dict):
            self.logging = LoggingConfig(**self.logging)

    @classmethod
    def from_yaml(cls, path: str) -> 'RenderConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            RenderConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'RenderConfig':
        """Create RenderConfig from dictionary."""
        sections = {
            'puzzle': PuzzleSettings,
            'input': InputConfig,
            'output': OutputConfig,
            'page': PageSettings,
            'logging': LoggingConfig,
        }
        kwargs = {}
        for name, section_cls in sections.items():
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ConfigValidationError(f"Section '{name}' must be a mapping")
            try:
                kwargs[name] = section_cls(**section)
            except TypeError as e:
                raise ConfigValidationError(f"Invalid key in section '{name}': {e}")

        config = cls(**kwargs)
        if 'timeout_seconds' in data:
            config.timeout_seconds = data['timeout_seconds']

        # A bare string is accepted as a list of letters
        letters = config.puzzle.visible_letters
        if letters is None:
            config.puzzle.visible_letters = []
        elif isinstance(letters, str):
            config.puzzle.visible_letters = list(letters)

        return config

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        base: Optional['RenderConfig'] = None,
    ) -> 'RenderConfig':
        """
        Create configuration from command-line arguments.

        Only arguments given on the command line (argparse leaves the others
        at None) are applied, so an explicit value always wins over base even
        when it equals the built-in default.

        Args:
            args: Parsed command-line arguments
            base: Configuration to override, usually loaded from YAML

        Returns:
            RenderConfig instance (base is not modified)
        """
        config = copy.deepcopy(base) if base is not None else cls()

        # Map CLI arguments to config
        if getattr(args, 'input_format', None) is not None:
            config.input.format = args.input_format
        if getattr(args, 'output_format', None) is not None:
            config.output.format = args.output_format
        if getattr(args, 'letters', None) is not None:
            config.puzzle.visible_letters = list(args.letters)
        if getattr(args, 'solution', None) is not None:
            config.puzzle.solution = args.solution
        if getattr(args, 'input', None) is not None:
            config.input.path = args.input
        if getattr(args, 'output', None) is not None:
            config.output.path = args.output
        if getattr(args, 'generator', None) is not None:
            config.input.generator = args.generator
        if getattr(args, 'page_size', None) is not None:
            config.page.size = args.page_size
        if getattr(args, 'orientation', None) is not None:
            config.page.orientation = args.orientation
        if getattr(args, 'log_dir', None) is not None:
            config.logging.directory = args.log_dir
        if getattr(args, 'verbose', False):
            config.logging.level = "DEBUG"
        if getattr(args, 'timeout', None) is not None:
            config.timeout_seconds = args.timeout

        return config

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Values from YAML arrive untyped, so every field is type-checked
        before its range is.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Text fields
        text_fields = {
            'input.format': self.input.format,
            'output.format': self.output.format,
            'page.size': self.page.size,
            'page.orientation': self.page.orientation,
            'logging.level': self.logging.level,
            'logging.file_prefix': self.logging.file_prefix,
            'puzzle.solution_label': self.puzzle.solution_label,
            'puzzle.across_label': self.puzzle.across_label,
            'puzzle.down_label': self.puzzle.down_label,
        }
        for name, value in text_fields.items():
            if not isinstance(value, str):
                errors.append(f"{name} must be a string, got {value!r}")

        optional_text_fields = {
            'puzzle.solution': self.puzzle.solution,
            'input.path': self.input.path,
            'input.generator': self.input.generator,
            'output.path': self.output.path,
            'logging.directory': self.logging.directory,
        }
        for name, value in optional_text_fields.items():
            if value is not None and not isinstance(value, str):
                errors.append(f"{name} must be a string, got {value!r}")

        if isinstance(self.input.format, str) and self.input.format not in VALID_INPUT_FORMATS:
            errors.append(
                f"Invalid input format '{self.input.format}'. "
                f"Must be one of: {VALID_INPUT_FORMATS}"
            )

        if isinstance(self.output.format, str) and self.output.format not in VALID_OUTPUT_FORMATS:
            errors.append(
                f"Invalid output format '{self.output.format}'. "
                f"Must be one of: {VALID_OUTPUT_FORMATS}"
            )

        if isinstance(self.page.size, str) and self.page.size not in VALID_PAGE_SIZES:
            errors.append(
                f"Invalid page size '{self.page.size}'. "
                f"Must be one of: {VALID_PAGE_SIZES}"
            )

        if (isinstance(self.page.orientation, str)
                and self.page.orientation not in VALID_ORIENTATIONS):
            errors.append(
                f"Invalid orientation '{self.page.orientation}'. "
                f"Must be one of: {VALID_ORIENTATIONS}"
            )

        # Page geometry
        if not _is_number(self.page.margin):
            errors.append(f"margin must be a number, got {self.page.margin!r}")
        elif self.page.margin < 0:
            errors.append("margin must be non-negative")

        if not _is_number(self.page.clue_column_width):
            errors.append(
                f"clue_column_width must be a number, got {self.page.clue_column_width!r}"
            )
        elif self.page.clue_column_width <= 0:
            errors.append("clue_column_width must be positive")

        if not _is_number(self.page.clue_font_size):
            errors.append(f"clue_font_size must be a number, got {self.page.clue_font_size!r}")
        elif self.page.clue_font_size <= 0:
            errors.append("clue_font_size must be positive")

        if not isinstance(self.puzzle.visible_letters, list):
            errors.append(
                f"visible_letters must be a list, got {self.puzzle.visible_letters!r}"
            )
        else:
            for letter in self.puzzle.visible_letters:
                if not isinstance(letter, str) or len(letter) != 1:
                    errors.append(f"Visible letter '{letter}' must be a single character")

        if (isinstance(self.logging.level, str)
                and self.logging.level.upper() not in VALID_LOG_LEVELS):
            errors.append(
                f"Invalid log level '{self.logging.level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        if not isinstance(self.timeout_seconds, int) or isinstance(self.timeout_seconds, bool):
            errors.append(
                f"timeout_seconds must be an integer, got {self.timeout_seconds!r}"
            )
        elif self.timeout_seconds < 0:
            errors.append("timeout_seconds must be non-negative")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': asdict(self.puzzle),
            'input': asdict(self.input),
            'output': asdict(self.output),
            'page': asdict(self.page),
            'logging': asdict(self.logging),
            'timeout_seconds': self.timeout_seconds,
        }

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            visible_letters=list(self.puzzle.visible_letters),
            solution=self.puzzle.solution,
        )

    def page_config(self) -> PageConfig:
        """Build the document page configuration."""
        return PageConfig(
            page_size=self.page.size,
            orientation=self.page.orientation,
            margin=self.page.margin,
            clue_column_width=self.page.clue_column_width,
            clues=ClueStyle(
                font_size=self.page.clue_font_size,
                across_label=self.puzzle.across_label,
                down_label=self.puzzle.down_label,
            ),
            solution_strip=SolutionStripStyle(label=self.puzzle.solution_label),
        )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Render a laid-out crossword wordlist as text, JSON, PDF or SVG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # show only certain letters
  crossword-pdf json pdf --letters A E I O U < words.json > puzzle.pdf

  # mark a solution word through the crossword
  crossword-pdf json pdf --solution Hello < words.json > puzzle.pdf

  # plain text grid / machine-readable word dump
  crossword-pdf csv txt < words.csv
  crossword-pdf csv json < words.csv

  # YAML configuration, CLI arguments override it
  crossword-pdf --config render.yaml --output puzzle.pdf
"""
    )

    parser.add_argument(
        "input_format",
        nargs="?",
        choices=VALID_INPUT_FORMATS,
        help="Wordlist input format (default: csv)"
    )
    parser.add_argument(
        "output_format",
        nargs="?",
        choices=VALID_OUTPUT_FORMATS,
        help="Output format (default: txt)"
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--letters",
        nargs="*",
        metavar="LETTER",
        help="Letters that should be shown in the grid"
    )
    parser.add_argument(
        "--solution",
        metavar="WORD",
        help="For PDF/SVG output only: solution word marked through the "
             "crossword; all its letters must occur in the answers"
    )
    parser.add_argument(
        "--generator",
        metavar="MODULE:FUNCTION",
        help="Layout generator used to place unplaced wordlists"
    )

    # Input/output
    parser.add_argument(
        "--input", "-i",
        metavar="PATH",
        help="Wordlist file (default: stdin)"
    )
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--page-size",
        choices=VALID_PAGE_SIZES,
        help="Page size (default: A4)"
    )
    parser.add_argument(
        "--orientation",
        choices=VALID_ORIENTATIONS,
        help="Page orientation (default: landscape)"
    )

    # Other options
    parser.add_argument(
        "--timeout",
        type=int,
        metavar="SECONDS",
        help="Abort rendering after this many seconds"
    )
    parser.add_argument(
        "--log-dir",
        metavar="PATH",
        help="Directory for the log file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config and input without writing output"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> RenderConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved RenderConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = RenderConfig.from_yaml(args.config)

    # CLI arguments override the YAML values
    config = RenderConfig.from_args(args, base=yaml_config)

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
