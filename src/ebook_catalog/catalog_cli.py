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
catalog_cli.py - Command-line entry point of the ebook catalog
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rich.markup import escape

from .catalog_viewer import open_catalog
from .cli_parser import create_parser, validate_args
from .cli_setup import setup_configuration, setup_logging
from .common_print_utils import print_catalog, print_error, print_warning, safe_print
from .errors import CatalogError
from .library_service import LibraryService

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the ebook-catalog command."""
    config_manager = setup_configuration(argv)

    parser = create_parser(config_manager.config)
    args = parser.parse_args(argv)
    validate_args(args, parser)

    config = config_manager.update_with_args(args)
    tolog = setup_logging(config)
    library_config = config_manager.to_library_config(no_save=args.no_save)

    try:
        if args.open_db:
            open_catalog(library_config.catalog_path, library_config.viewer_command)
            return

        tolog.info(f"Scanning {library_config.library_root} into {library_config.catalog_path}")
        service = LibraryService(library_config, on_warning=print_warning)
        summary = service.run()

    except CatalogError as e:
        tolog.debug("Run aborted", exc_info=True)
        print_error(str(e))
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        print_error("interrupted")
        sys.exit(EXIT_INTERRUPTED)

    if summary.saved:
        safe_print(
            f"[bold green]Catalog saved:[/bold green] {len(summary.records)} books "
            f"({summary.added} added, {summary.removed} removed) in {escape(str(library_config.catalog_path))}"
        )
    else:
        print_catalog(summary.text)


if __name__ == "__main__":
    main()
