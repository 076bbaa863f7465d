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
reconciler.py - Merge the saved catalog with a fresh scan of the library
========================================================================

Books already in the catalog keep every field (date added, read flag,
series...). Books found on disk but not in the catalog are read from their
EPUB file and appended. Books in the catalog whose file is gone are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from .epub_reader import extract_metadata
from .errors import ExtractionError
from .models import EpubMetadata, Record, create_timestamp
from .page_counter import estimate_pages

logger = logging.getLogger(__name__)

Extractor = Callable[[str], EpubMetadata]
WarningCallback = Callable[[str], None]


def create_record(epub_path: str, metadata: EpubMetadata, timestamp: int) -> Record:
    """Build the record of a newly discovered book."""
    return Record(
        timestamp=timestamp,
        read=False,
        title=metadata.title,
        author=metadata.author,
        pages=estimate_pages(metadata.page_sections),
        series="",
        path=epub_path,
    )


def unique_by_path(records: Iterable[Record]) -> list[Record]:
    """Drop records whose path was already seen, keeping the first one."""
    seen: set[str] = set()
    unique: list[Record] = []
    for record in records:
        if record.path in seen:
            logger.warning(f"Duplicate catalog entry for {record.path}, keeping the first one")
            continue
        seen.add(record.path)
        unique.append(record)
    return unique


def reconcile(
    persisted: Sequence[Record],
    discovered_paths: Sequence[str],
    extractor: Extractor | None = None,
    timestamp: int | None = None,
    on_warning: WarningCallback | None = None,
) -> list[Record]:
    """
    Merge saved records with the list of EPUB files currently on disk.

    Args:
        persisted: Records decoded from the catalog file
        discovered_paths: Paths found by the file scan
        extractor: Reads metadata from an EPUB path (default: extract_metadata)
        timestamp: Date given to new records (default: today as YYMMDD)
        on_warning: Called with a message for every file that couldn't be read

    Returns:
        Saved records still on disk, in their saved order, followed by the
        new records in discovery order. A file that fails extraction is left
        out and reported through ``on_warning``.
    """
    extractor = extractor or extract_metadata
    if timestamp is None:
        timestamp = create_timestamp()

    discovered = set(discovered_paths)
    library = unique_by_path(persisted)
    known = {record.path for record in library}

    added = 0
    for epub_path in discovered_paths:
        if epub_path in known:
            continue
        known.add(epub_path)
        try:
            metadata = extractor(epub_path)
        except ExtractionError as e:
            message = f'unable to load "{epub_path}"'
            logger.warning(f"{message}: {e}")
            if on_warning is not None:
                on_warning(message)
            continue
        library.append(create_record(epub_path, metadata, timestamp))
        added += 1

    result = [record for record in library if record.path in discovered]
    logger.info(f"Reconciled library: {len(result)} books ({added} added, {len(library) - len(result)} removed)")
    return result
