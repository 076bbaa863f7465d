#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for sort_engine module.
"""

import pytest

from ebook_catalog.models import Record, SortKey
from ebook_catalog.sort_engine import parse_sort_key, sort_records


@pytest.fixture
def records():
    return [
        Record(250301, True, "beta", "Zed", 300, "", "/1.epub"),
        Record(250101, False, "Alpha", "adam", 100, "S", "/2.epub"),
        Record(250201, False, "Émile", "Bob", 300, "A", "/3.epub"),
        Record(250101, True, "alpha", "Adam", 200, "", "/4.epub"),
    ]


def _paths(records):
    return [r.path for r in records]


class TestParseSortKey:
    """Test the parse_sort_key function."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("date", SortKey.DATE),
            ("d", SortKey.DATE),
            ("read", SortKey.READ),
            ("r", SortKey.READ),
            ("title", SortKey.TITLE),
            ("t", SortKey.TITLE),
            ("author", SortKey.AUTHOR),
            ("a", SortKey.AUTHOR),
            ("pages", SortKey.PAGES),
            ("p", SortKey.PAGES),
            ("series", SortKey.SERIES),
            ("s", SortKey.SERIES),
        ],
    )
    def test_recognized_names(self, name, expected):
        assert parse_sort_key(name) is expected

    def test_case_insensitive(self):
        assert parse_sort_key(" Title ") is SortKey.TITLE

    def test_default_is_date(self):
        assert parse_sort_key(None) is SortKey.DATE
        assert parse_sort_key("") is SortKey.DATE
        assert parse_sort_key("popularity") is SortKey.DATE

    def test_passes_sort_key_through(self):
        assert parse_sort_key(SortKey.PAGES) is SortKey.PAGES


class TestSortRecords:
    """Test the sort_records function."""

    def test_by_date_is_stable(self, records):
        assert _paths(sort_records(records, SortKey.DATE)) == ["/2.epub", "/4.epub", "/3.epub", "/1.epub"]

    def test_by_read_unread_first(self, records):
        assert _paths(sort_records(records, SortKey.READ)) == ["/2.epub", "/3.epub", "/1.epub", "/4.epub"]

    def test_by_title_ordinal(self, records):
        """Uppercase sorts before lowercase, accents after ASCII."""
        assert [r.title for r in sort_records(records, SortKey.TITLE)] == ["Alpha", "alpha", "beta", "Émile"]

    def test_by_author_ordinal(self, records):
        assert [r.author for r in sort_records(records, SortKey.AUTHOR)] == ["Adam", "Bob", "Zed", "adam"]

    def test_by_series_empty_first(self, records):
        assert _paths(sort_records(records, SortKey.SERIES)) == ["/1.epub", "/4.epub", "/3.epub", "/2.epub"]

    def test_by_pages(self, records):
        assert _paths(sort_records(records, SortKey.PAGES)) == ["/2.epub", "/4.epub", "/1.epub", "/3.epub"]

    def test_reverse_flips_ties_too(self, records):
        ascending = sort_records(records, SortKey.PAGES)
        descending = sort_records(records, SortKey.PAGES, reverse=True)

        assert descending == list(reversed(ascending))
        assert _paths(descending) == ["/3.epub", "/1.epub", "/4.epub", "/2.epub"]

    def test_returns_new_list(self, records):
        original = list(records)
        sort_records(records, SortKey.TITLE)
        assert records == original

    def test_default_key_is_date(self, records):
        assert sort_records(records) == sort_records(records, SortKey.DATE)

    def test_empty(self):
        assert sort_records([], SortKey.TITLE, reverse=True) == []
