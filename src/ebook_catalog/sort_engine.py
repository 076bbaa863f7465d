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
sort_engine.py - Ordering of catalog records
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .models import Record, SortKey

logger = logging.getLogger(__name__)

DEFAULT_SORT_KEY = SortKey.DATE

# Every accepted spelling, long and short form
SORT_KEY_NAMES: dict[str, SortKey] = {
    "date": SortKey.DATE,
    "d": SortKey.DATE,
    "read": SortKey.READ,
    "r": SortKey.READ,
    "title": SortKey.TITLE,
    "t": SortKey.TITLE,
    "author": SortKey.AUTHOR,
    "a": SortKey.AUTHOR,
    "pages": SortKey.PAGES,
    "p": SortKey.PAGES,
    "series": SortKey.SERIES,
    "s": SortKey.SERIES,
}

# Text keys compare by code point, no locale collation
_KEY_FUNCTIONS: dict[SortKey, Callable[[Record], Any]] = {
    SortKey.DATE: lambda record: record.timestamp,
    SortKey.READ: lambda record: record.read,
    SortKey.TITLE: lambda record: record.title,
    SortKey.AUTHOR: lambda record: record.author,
    SortKey.PAGES: lambda record: record.pages,
    SortKey.SERIES: lambda record: record.series,
}


def parse_sort_key(name: str | SortKey | None) -> SortKey:
    """
    Map a sort key name to a SortKey.

    Args:
        name: One of date/d, read/r, title/t, author/a, pages/p, series/s
            (case-insensitive), or a SortKey

    Returns:
        The matching SortKey, SortKey.DATE when missing or unrecognized
    """
    if isinstance(name, SortKey):
        return name
    if not name:
        return DEFAULT_SORT_KEY
    key = SORT_KEY_NAMES.get(name.strip().lower())
    if key is None:
        logger.warning(f"Unknown sort key '{name}', sorting by {DEFAULT_SORT_KEY.value}")
        return DEFAULT_SORT_KEY
    return key


def sort_records(records: Iterable[Record], key: SortKey = DEFAULT_SORT_KEY, reverse: bool = False) -> list[Record]:
    """
    Return the records ordered by the given field.

    The sort is stable: records with equal keys keep their relative order.
    ``reverse`` flips the sorted list as a whole, so ties come out in the
    opposite order too.

    Args:
        records: Records to order
        key: Field to sort by
        reverse: Reverse the final order

    Returns:
        New sorted list
    """
    ordered = sorted(records, key=_KEY_FUNCTIONS[key])
    if reverse:
        ordered.reverse()
    return ordered
