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
file_scanner.py - Discovery of EPUB files under a directory tree
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .catalog_constants import EPUB_EXTENSION
from .errors import LibraryError

logger = logging.getLogger(__name__)


def resolve_root(root_path: str | Path) -> str:
    """Expand ``~`` and make the scan root absolute."""
    return os.path.abspath(os.path.expanduser(str(root_path)))


def ensure_scan_root(root_path: str | Path) -> str:
    """
    Check that the scan root is a readable directory.

    A root that doesn't exist would look like a library where every book was
    deleted, so it's an error instead of an empty scan.

    Raises:
        LibraryError: If the root is missing, not a directory or unreadable
    """
    root = resolve_root(root_path)
    if not os.path.isdir(root):
        raise LibraryError(f"library directory '{root}' not found or not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise LibraryError(f"no read permission for library directory '{root}'")
    return root


def find_epub_files(root_path: str | Path) -> list[str]:
    """
    Return the absolute path of every EPUB file under ``root_path``.

    The search is recursive (``<root>/**/*.epub``) and the result sorted, so
    two scans of an unchanged tree give the same list.

    Args:
        root_path: Directory to scan

    Returns:
        Sorted list of path strings

    Raises:
        LibraryError: If the root isn't a readable directory
    """
    root = ensure_scan_root(root_path)
    # rglob also descends into hidden directories
    paths = sorted(str(p) for p in Path(root).rglob(f"*{EPUB_EXTENSION}") if p.is_file())
    logger.debug(f"Found {len(paths)} EPUB files under {root}")
    return paths
