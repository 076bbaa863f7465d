#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#

"""Data models for the ebook catalog."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from .catalog_constants import READ_SYMBOL


class SortKey(enum.Enum):
    """Field the catalog can be ordered by."""

    DATE = "date"
    """Date the book was added (YYMMDD timestamp)."""
    READ = "read"
    """Unread books first."""
    TITLE = "title"
    AUTHOR = "author"
    PAGES = "pages"
    SERIES = "series"


@dataclass
class Record:
    """
    One cataloged ebook.

    The path is the identity of the record: two records with the same path
    describe the same book regardless of title or author.
    """

    timestamp: int
    read: bool
    title: str
    author: str
    pages: int
    series: str
    path: str

    @property
    def read_symbol(self) -> str:
        """Marker rendered in the R column."""
        return READ_SYMBOL if self.read else ""


@dataclass
class EpubMetadata:
    """Metadata pulled out of an EPUB file by the extractor."""

    title: str
    author: str
    page_sections: list[str] = field(default_factory=list)


def create_timestamp(today: date | None = None) -> int:
    """
    Return a date as a YYMMDD integer.

    Args:
        today: Date to convert (default: the current UTC date)

    Returns:
        Timestamp such as 251018 for 2025-10-18
    """
    today = today or datetime.now(timezone.utc).date()
    return int(f"{today:%y%m%d}")
