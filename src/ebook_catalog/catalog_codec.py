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
catalog_codec.py - Reading and writing the tabulated catalog text
=================================================================

The catalog is a plain text table. The first line is a header, every other
line is one book. Each field is left aligned, padded with spaces to the
width of its column and followed by the delimiter, the last column included::

    DATE    /R   /TITLE        /AUTHOR     /PG  /SERIES  /PATH                 /
    251018  /*   /Dune         /F. Herbert /412 /Dune    /~/Books/dune.epub    /

Column widths are recomputed on every write from the longest value in each
column. Only DATE and R have fixed widths, so the header stays stable on an
empty catalog. Blank lines and lines starting with ``#`` are skipped on read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .catalog_constants import (
    COMMENT_PREFIX,
    DELIMITER,
    FIELD_COUNT,
    HEADER_LABELS,
    LEGACY_FIELD_COUNT,
    PAGES_SENTINEL,
    READ_WIDTH,
    TIMESTAMP_SENTINEL,
    TIMESTAMP_WIDTH,
)
from .errors import FormatError
from .models import Record

logger = logging.getLogger(__name__)

# Columns whose width never shrinks below a fixed value
_FIXED_WIDTHS = {0: TIMESTAMP_WIDTH, 1: READ_WIDTH}


# ───────────────────────────── decode ───────────────────────────── #


def _parse_unsigned(text: str, fallback: int, max_digits: int | None = None) -> int:
    """Parse a non-negative integer field, returning ``fallback`` if malformed."""
    if not text.isascii() or not text.isdigit():
        return fallback
    if max_digits is not None and len(text) > max_digits:
        return fallback
    return int(text)


def split_fields(line: str) -> list[str]:
    """
    Split a catalog line on the delimiter and trim every field.

    The delimiter written after the last column produces an empty trailing
    piece, which is dropped.
    """
    fields = [field.strip() for field in line.rstrip().split(DELIMITER)]
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


def line_to_record(line: str, line_number: int | None = None) -> Record:
    """
    Build a Record from one data line of the catalog.

    Both the full layout (7 fields) and the older layout without the read
    column (6 fields) are accepted.

    Args:
        line: Raw catalog line
        line_number: 1-based line number, used in error messages

    Returns:
        The decoded Record

    Raises:
        FormatError: If the line doesn't hold the expected number of fields
    """
    fields = split_fields(line)

    if len(fields) == LEGACY_FIELD_COUNT:
        fields.insert(1, "")
    elif len(fields) != FIELD_COUNT:
        where = f"line {line_number}" if line_number is not None else "catalog line"
        raise FormatError(
            f"{where}: expected {FIELD_COUNT} fields separated by '{DELIMITER}', found {len(fields)}",
            line_number=line_number,
            line=line,
        )

    timestamp_text, read_text, title, author, pages_text, series, path = fields

    timestamp = _parse_unsigned(timestamp_text, TIMESTAMP_SENTINEL, max_digits=TIMESTAMP_WIDTH)
    pages = _parse_unsigned(pages_text, PAGES_SENTINEL)
    if timestamp == TIMESTAMP_SENTINEL and timestamp_text != str(TIMESTAMP_SENTINEL):
        logger.debug(f"Line {line_number}: invalid date '{timestamp_text}', using {TIMESTAMP_SENTINEL}")
    if pages_text != str(pages):
        logger.debug(f"Line {line_number}: invalid page count '{pages_text}', using {pages}")

    return Record(
        timestamp=timestamp,
        read=bool(read_text),
        title=title,
        author=author,
        pages=pages,
        series=series,
        path=path,
    )


def is_skippable(line: str) -> bool:
    """True for blank lines and comment lines."""
    return not line.strip() or line.startswith(COMMENT_PREFIX)


def decode(raw_text: str | None) -> list[Record]:
    """
    Decode catalog text into records, in file order.

    The first line is the header and is not interpreted. An empty or missing
    input gives an empty list.

    Args:
        raw_text: Full content of the catalog file

    Returns:
        List of records

    Raises:
        FormatError: If any data line is malformed. Nothing is returned in
            that case, the whole decode fails.
    """
    if not raw_text:
        return []

    records: list[Record] = []
    lines = [line.rstrip("\r") for line in raw_text.split("\n")]
    for line_number, line in enumerate(lines[1:], start=2):
        if is_skippable(line):
            continue
        records.append(line_to_record(line, line_number))

    return records


# ───────────────────────────── encode ───────────────────────────── #


def render_fields(record: Record) -> tuple[str, ...]:
    """Return the text of every column of a record, in column order."""
    return (
        f"{record.timestamp:0{TIMESTAMP_WIDTH}d}",
        record.read_symbol,
        record.title,
        record.author,
        str(record.pages),
        record.series or "",
        record.path,
    )


def column_widths(rows: Iterable[Sequence[str]]) -> list[int]:
    """
    Compute the display width of every column.

    Widths are character counts, so multi-byte text lines up the same as
    ASCII. Every column is at least as wide as its header label; DATE and R
    are at least their fixed width.

    Args:
        rows: Rendered field text of every record

    Returns:
        One width per column
    """
    widths = [max(len(label), _FIXED_WIDTHS.get(index, 0)) for index, label in enumerate(HEADER_LABELS)]
    for row in rows:
        for index, text in enumerate(row):
            widths[index] = max(widths[index], len(text))
    return widths


def tabulate(fields: Sequence[str], widths: Sequence[int]) -> str:
    """Pad each field to its column width, append the delimiter, end the row."""
    return "".join(text.ljust(width) + DELIMITER for text, width in zip(fields, widths)) + "\n"


def record_to_line(record: Record, widths: Sequence[int]) -> str:
    """Render one record as a catalog row (newline included)."""
    return tabulate(render_fields(record), widths)


def encode(records: Sequence[Record]) -> str:
    """
    Encode records as catalog text.

    Records are written in the order given, sorting is the caller's job.

    Args:
        records: Records to encode

    Returns:
        Header line followed by one line per record, without trailing newline
    """
    rows = [render_fields(record) for record in records]
    widths = column_widths(rows)

    parts = [tabulate(HEADER_LABELS, widths)]
    parts.extend(tabulate(row, widths) for row in rows)
    return "".join(parts).rstrip()
