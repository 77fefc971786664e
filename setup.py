#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Setup script for crossword document renderer package.
"""

from setuptools import setup
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name="crossword-pdf",
    version="1.0.0",
    author="TrailLensCo",
    description="Render laid-out crossword wordlists as printable PDF/SVG puzzles with an optional solution word",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/TrailLensCo/crossword-pdf",
    package_dir={"": "src"},
    py_modules=[
        "clue_renderer",
        "config",
        "crossword_pdf",
        "document",
        "drawing",
        "grid_renderer",
        "layout_wrapper",
        "logging_config",
        "models",
        "solution_overlay",
        "wordlist",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0.2",
        "reportlab>=4.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "crossword-pdf=crossword_pdf:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
)
