#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for reconciler module.
"""

from unittest.mock import Mock

from ebook_catalog.errors import ExtractionError
from ebook_catalog.models import EpubMetadata, Record
from ebook_catalog.reconciler import create_record, reconcile, unique_by_path


def _record(path, **overrides):
    fields = dict(timestamp=240101, read=False, title="T", author="A", pages=1, series="", path=path)
    fields.update(overrides)
    return Record(**fields)


class TestCreateRecord:
    """Test the create_record function."""

    def test_new_record_defaults(self):
        metadata = EpubMetadata("Title", "Author", ["x" * 2000, "y" * 2000])

        record = create_record("/b/new.epub", metadata, 251018)

        assert record == Record(251018, False, "Title", "Author", 2, "", "/b/new.epub")


class TestUniqueByPath:
    """Test the unique_by_path function."""

    def test_first_occurrence_kept(self):
        first = _record("/a.epub", title="First")
        second = _record("/a.epub", title="Second")

        assert unique_by_path([first, second, _record("/b.epub")]) == [first, _record("/b.epub")]


class TestReconcile:
    """Test the reconcile function."""

    def test_existing_records_kept_untouched(self, fake_extractor):
        persisted = [_record("/a.epub", read=True, series="Saga", timestamp=200101)]

        result = reconcile(persisted, ["/a.epub"], extractor=fake_extractor, timestamp=251018)

        assert result == persisted
        fake_extractor.assert_not_called()

    def test_new_files_appended(self, fake_extractor):
        persisted = [_record("/a.epub")]

        result = reconcile(persisted, ["/c.epub", "/a.epub", "/b.epub"], extractor=fake_extractor, timestamp=251018)

        assert [r.path for r in result] == ["/a.epub", "/c.epub", "/b.epub"]
        new = result[1]
        assert (new.timestamp, new.read, new.series, new.pages) == (251018, False, "", 2)
        assert (new.title, new.author) == ("New Book", "New Author")

    def test_missing_files_dropped(self, fake_extractor):
        persisted = [_record("/a.epub"), _record("/gone.epub"), _record("/b.epub")]

        result = reconcile(persisted, ["/a.epub", "/b.epub"], extractor=fake_extractor, timestamp=251018)

        assert [r.path for r in result] == ["/a.epub", "/b.epub"]

    def test_empty_scan_empties_catalog(self, fake_extractor):
        assert reconcile([_record("/a.epub")], [], extractor=fake_extractor, timestamp=251018) == []

    def test_extraction_failure_skipped_with_warning(self):
        def extractor(path):
            if path == "/bad.epub":
                raise ExtractionError("corrupt", path=path)
            return EpubMetadata("Good", "Author", [])

        warnings = []
        result = reconcile([], ["/bad.epub", "/good.epub"], extractor=extractor, timestamp=251018, on_warning=warnings.append)

        assert [r.path for r in result] == ["/good.epub"]
        assert warnings == ['unable to load "/bad.epub"']

    def test_all_extractions_failing_gives_empty_result(self):
        extractor = Mock(side_effect=ExtractionError("corrupt"))

        result = reconcile([], ["/x.epub", "/y.epub"], extractor=extractor, timestamp=251018)

        assert result == []
        assert extractor.call_count == 2

    def test_result_paths_match_set_algebra(self, fake_extractor):
        persisted = [_record(p) for p in ["/1.epub", "/2.epub", "/3.epub"]]
        discovered = ["/2.epub", "/3.epub", "/4.epub", "/5.epub"]

        result = reconcile(persisted, discovered, extractor=fake_extractor, timestamp=251018)

        paths = [r.path for r in result]
        assert len(paths) == len(set(paths))
        assert set(paths) == ({"/1.epub", "/2.epub", "/3.epub"} & set(discovered)) | {"/4.epub", "/5.epub"}
        assert set(paths) <= set(discovered)

    def test_duplicate_discovered_paths_extracted_once(self, fake_extractor):
        result = reconcile([], ["/a.epub", "/a.epub"], extractor=fake_extractor, timestamp=251018)

        assert len(result) == 1
        fake_extractor.assert_called_once_with("/a.epub")

    def test_idempotent(self, fake_extractor):
        discovered = ["/a.epub", "/b.epub"]
        first = reconcile([_record("/a.epub")], discovered, extractor=fake_extractor, timestamp=251018)

        second = reconcile(first, discovered, extractor=fake_extractor, timestamp=260101)

        assert second == first

    def test_default_timestamp_is_today(self, fake_extractor, monkeypatch):
        monkeypatch.setattr("ebook_catalog.reconciler.create_timestamp", lambda: 123456)

        result = reconcile([], ["/a.epub"], extractor=fake_extractor)

        assert result[0].timestamp == 123456
