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
page_counter.py - Approximate page count of an ebook
"""

from __future__ import annotations

from collections.abc import Iterable

from .catalog_constants import CHARS_PER_PAGE


def count_characters(text: str) -> int:
    """Count the characters of a section, newlines excluded."""
    return len(text) - text.count("\n")


def estimate_pages(sections: Iterable[str], chars_per_page: int = CHARS_PER_PAGE) -> int:
    """
    Estimate the page count of an ebook from its reading-order sections.

    The estimate is the total number of non-newline characters divided by
    ``chars_per_page``, rounded down. It is a heuristic, not a pagination:
    existing catalogs were written with the same rule so it must not change.

    Args:
        sections: Text content of every section in reading order
        chars_per_page: Characters counted as one page (default: 2000)

    Returns:
        Estimated number of pages (0 for empty input)
    """
    total = sum(count_characters(section) for section in sections)
    return total // chars_per_page
