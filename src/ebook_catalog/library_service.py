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
library_service.py - Load, reconcile, sort and save the catalog
===============================================================

One pass of the tool:

1. scan the library directory for EPUB files
2. decode the saved catalog (an absent catalog is an empty one)
3. reconcile the two
4. sort
5. encode and either print or save, copying the old catalog to a backup
   first when asked to

Nothing on disk is touched until the new catalog text is fully built.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .catalog_codec import decode, encode
from .errors import LibraryError
from .file_scanner import find_epub_files
from .models import Record, SortKey
from .reconciler import Extractor, WarningCallback, reconcile
from .sort_engine import sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibraryConfig:
    """Settings for one run, resolved once from the config file and CLI."""

    catalog_path: Path
    library_root: Path
    sort_key: SortKey = SortKey.DATE
    reverse: bool = False
    no_save: bool = False
    backup_path: Path | None = None
    viewer_command: str = ""


@dataclass
class RunSummary:
    """Outcome of a load/write pass."""

    records: list[Record]
    text: str
    added: int
    removed: int
    skipped: list[str]
    saved: bool


def read_catalog(catalog_path: Path) -> str:
    """
    Return the catalog file content, or an empty string if it doesn't exist.

    Raises:
        LibraryError: If the file exists but can't be read
    """
    if not catalog_path.exists():
        logger.info(f"No catalog at {catalog_path}, starting an empty one")
        return ""
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LibraryError(f"unable to read library DB '{catalog_path}': {e}") from e


def backup_catalog(catalog_path: Path, backup_path: Path) -> Path | None:
    """
    Copy the current catalog to ``backup_path``, replacing any older backup.

    Returns:
        The backup path, or None when there was no catalog to back up

    Raises:
        LibraryError: If the copy fails
    """
    if not catalog_path.exists():
        return None
    try:
        shutil.copy2(catalog_path, backup_path)
    except OSError as e:
        raise LibraryError(f"unable to back up library DB to '{backup_path}': {e}") from e
    logger.debug(f"Backed up {catalog_path} to {backup_path}")
    return backup_path


def load_library(
    catalog_path: Path,
    scan_root: Path,
    sort_key: SortKey = SortKey.DATE,
    reverse: bool = False,
    extractor: Extractor | None = None,
    on_warning: WarningCallback | None = None,
    persisted: Sequence[Record] | None = None,
) -> list[Record]:
    """
    Build the up-to-date, sorted record list.

    Args:
        catalog_path: Saved catalog file (may not exist yet)
        scan_root: Directory searched recursively for EPUB files
        sort_key: Field to sort by
        reverse: Reverse the sorted order
        extractor: EPUB metadata reader, for tests
        on_warning: Receives a message for each file that couldn't be read
        persisted: Records already decoded from ``catalog_path``. The file
            is read when not given.

    Returns:
        Sorted records

    Raises:
        FormatError: If the catalog is malformed
        LibraryError: If the catalog or the library directory can't be read
    """
    epub_paths = find_epub_files(scan_root)
    if persisted is None:
        persisted = decode(read_catalog(catalog_path))
    library = reconcile(persisted, epub_paths, extractor=extractor, on_warning=on_warning)
    return sort_records(library, sort_key, reverse)


def write_library(
    records: Sequence[Record],
    catalog_path: Path,
    no_save: bool = False,
    backup_path: Path | None = None,
) -> str:
    """
    Encode the records and save them unless ``no_save`` is set.

    The text is encoded to UTF-8 before anything on disk changes, then the
    catalog is truncated and rewritten. When ``backup_path`` is given the
    previous catalog is copied there before it's overwritten.

    Args:
        records: Records in the order they should be written
        catalog_path: Destination catalog file
        no_save: Only encode, leave the disk alone
        backup_path: Where to keep a copy of the previous catalog

    Returns:
        The encoded catalog text

    Raises:
        LibraryError: If the text isn't valid UTF-8, or the directory, the
            backup or the catalog can't be written
    """
    text = encode(records)
    if no_save:
        return text

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise LibraryError(f"unable to encode library DB '{catalog_path}': {e}") from e

    try:
        catalog_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LibraryError(f"unable to create directory '{catalog_path.parent}': {e}") from e

    if backup_path is not None:
        backup_catalog(catalog_path, backup_path)

    try:
        with open(catalog_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise LibraryError(f"unable to write library to DB '{catalog_path}': {e}") from e

    logger.info(f"Saved {len(records)} books to {catalog_path}")
    return text


class LibraryService:
    """Runs load/write passes for one LibraryConfig."""

    def __init__(
        self,
        config: LibraryConfig,
        extractor: Extractor | None = None,
        on_warning: WarningCallback | None = None,
    ):
        self.config = config
        self.extractor = extractor
        self.on_warning = on_warning
        self._skipped: list[str] = []

    def _warn(self, message: str) -> None:
        self._skipped.append(message)
        if self.on_warning is not None:
            self.on_warning(message)

    def load(self, persisted: Sequence[Record] | None = None) -> list[Record]:
        """Scan, reconcile and sort according to the config."""
        return load_library(
            self.config.catalog_path,
            self.config.library_root,
            self.config.sort_key,
            self.config.reverse,
            extractor=self.extractor,
            on_warning=self._warn,
            persisted=persisted,
        )

    def write(self, records: Sequence[Record]) -> str:
        """Encode and, unless no_save is set, save the records."""
        return write_library(
            records,
            self.config.catalog_path,
            no_save=self.config.no_save,
            backup_path=self.config.backup_path,
        )

    def run(self) -> RunSummary:
        """Do a full load/write pass and report what changed."""
        self._skipped = []
        persisted = decode(read_catalog(self.config.catalog_path))
        previous = {record.path for record in persisted}
        records = self.load(persisted)
        text = self.write(records)
        current = {record.path for record in records}
        return RunSummary(
            records=records,
            text=text,
            added=len(current - previous),
            removed=len(previous - current),
            skipped=list(self._skipped),
            saved=not self.config.no_save,
        )
