#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
cli_parser.py - Command-line argument parsing for the ebook catalog
===================================================================

Handles parsing and validation of command-line arguments. Defaults shown in
the help come from the loaded configuration file.
"""

from __future__ import annotations

import argparse
from typing import Any

from . import __version__
from .catalog_constants import DEFAULT_CONFIG_FILE
from .sort_engine import SORT_KEY_NAMES

APP_DESCRIPTION = "Ebook Catalog - keep a plain text table of the EPUB files in your library"


def get_epilog_text() -> str:
    """Get the epilog help text with usage examples."""
    return """
==============================================================================
USAGE EXAMPLES:
==============================================================================

  Scan the library and update the catalog:
    $ ebook-catalog

  Show the catalog sorted by author without saving it:
    $ ebook-catalog --sort author --no-save

  Biggest books first:
    $ ebook-catalog -s p -r

  Scan another directory into another catalog:
    $ ebook-catalog --library ~/Downloads/epub --catalog ~/downloads.txt

  Edit the catalog (mark books as read, fill in series):
    $ ebook-catalog --open-db

SORT KEYS:
  date (d), read (r), title (t), author (a), pages (p), series (s)

CATALOG FORMAT:
  Lines starting with '#' and blank lines are ignored. Put any character in
  the R column to mark a book as read. Keep the '  /' column separators.
"""


def _add_location_args(parser: argparse.ArgumentParser, config: dict[str, Any]) -> None:
    """Add config, library and catalog location arguments."""
    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG_FILE),
        help=f"Path to configuration file, created with defaults if missing (default: {DEFAULT_CONFIG_FILE})",
    )

    parser.add_argument(
        "-l",
        "--library",
        type=str,
        help=f"Directory scanned recursively for .epub files (default: {config['library']['root']})",
    )

    parser.add_argument(
        "-c",
        "--catalog",
        type=str,
        help=f"Catalog file to read and update (default: {config['library']['catalog']})",
    )


def _add_output_args(parser: argparse.ArgumentParser, config: dict[str, Any]) -> None:
    """Add sorting and output arguments."""
    parser.add_argument(
        "-s",
        "--sort",
        type=str.lower,
        choices=sorted(SORT_KEY_NAMES),
        metavar="KEY",
        help=f"Sort by date, read, title, author, pages or series, or their first letter (default: {config['sorting']['key']})",
    )

    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Reverse the sort order",
    )

    parser.add_argument(
        "-n",
        "--no-save",
        action="store_true",
        help="Print the updated catalog instead of saving it",
    )

    parser.add_argument(
        "--no-backup",
        action="store_true",
        help="Don't keep a copy of the previous catalog when saving",
    )

    parser.add_argument(
        "-o",
        "--open-db",
        action="store_true",
        help="Open the catalog file in the configured viewer and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug messages",
    )


def create_parser(config: dict[str, Any]) -> argparse.ArgumentParser:
    """Create the argument parser with all command-line options.

    Args:
        config: Configuration dictionary for default values

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="ebook-catalog",
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=get_epilog_text(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    _add_location_args(parser, config)
    _add_output_args(parser, config)

    return parser


def validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Reject option combinations that make no sense.

    Raises:
        SystemExit: If validation fails
    """
    if args.open_db:
        conflicting = [
            flag
            for flag, value in (
                ("--library", args.library),
                ("--sort", args.sort),
                ("--reverse", args.reverse),
                ("--no-save", args.no_save),
                ("--no-backup", args.no_backup),
            )
            if value
        ]
        if conflicting:
            parser.error(f"--open-db can't be combined with {', '.join(conflicting)}")
