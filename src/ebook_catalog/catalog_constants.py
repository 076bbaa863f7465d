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
Constants shared by the catalog codec, the page counter and the library service.

This module centralizes the on-disk format details so that the reader and the
writer of the catalog file can never disagree.
"""

from pathlib import Path

# CATALOG FILE FORMAT
# Column delimiter, double space so it can't be confused with path slashes
DELIMITER = "  /"

# Marker written in the R column for books already read
READ_SYMBOL = "*"

# Lines starting with this prefix are ignored when reading the catalog
COMMENT_PREFIX = "#"

# Header labels, in column order
HEADER_LABELS = ("DATE", "R", "TITLE", "AUTHOR", "PG", "SERIES", "PATH")

# Number of fields in a data line (full layout and legacy layout without R)
FIELD_COUNT = len(HEADER_LABELS)
LEGACY_FIELD_COUNT = FIELD_COUNT - 1

# Fixed widths for the columns that don't depend on content
TIMESTAMP_WIDTH = 6  # YYMMDD
READ_WIDTH = 2

# Fallbacks used when a numeric field can't be parsed
TIMESTAMP_SENTINEL = 999_999
PAGES_SENTINEL = 0

# PAGE ESTIMATION
CHARS_PER_PAGE = 2000

# EPUB DEFAULTS
EPUB_EXTENSION = ".epub"
UNKNOWN_TITLE = "Unknown title"
UNKNOWN_AUTHOR = "Unknown author"

# DEFAULT LOCATIONS
DEFAULT_APP_DIR = Path("~/.ebook_catalog")
DEFAULT_CONFIG_FILE = DEFAULT_APP_DIR / "catalog_config.yml"
DEFAULT_CATALOG_FILE = DEFAULT_APP_DIR / "library.txt"
DEFAULT_LIBRARY_ROOT = Path("~/Books")
DEFAULT_BACKUP_SUFFIX = ".bak"
