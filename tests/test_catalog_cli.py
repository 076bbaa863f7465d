#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for the catalog_cli entry point.
"""

from unittest.mock import patch

import pytest

from ebook_catalog.catalog_cli import EXIT_FAILURE, main
from ebook_catalog.catalog_codec import decode
from ebook_catalog.errors import LibraryError


@pytest.fixture
def workspace(tmp_path, make_epub):
    """A library with two books, an empty catalog location and a private config file."""
    library = tmp_path / "books"
    make_epub(library / "b.epub", title="Beta", author="Bob", sections=["x" * 4000])
    make_epub(library / "a.epub", title="Alpha", author="Ann", sections=["y" * 2000])
    catalog = tmp_path / "db" / "library.txt"
    config = tmp_path / "config.yml"
    return {
        "library": library,
        "catalog": catalog,
        "argv": ["--config", str(config), "--library", str(library), "--catalog", str(catalog)],
    }


class TestMain:
    """Test the main function."""

    def test_scan_creates_catalog(self, workspace, capsys):
        main(workspace["argv"])

        records = decode(workspace["catalog"].read_text(encoding="utf-8"))
        assert [r.title for r in records] == ["Alpha", "Beta"]
        assert [r.pages for r in records] == [1, 2]
        assert "Catalog saved" in capsys.readouterr().out

    def test_second_scan_keeps_edits(self, workspace):
        main(workspace["argv"])
        catalog = workspace["catalog"]
        edited = catalog.read_text(encoding="utf-8").replace("Beta", "Beta Edited")
        catalog.write_text(edited, encoding="utf-8")

        main(workspace["argv"])

        records = decode(catalog.read_text(encoding="utf-8"))
        assert [r.title for r in records] == ["Alpha", "Beta Edited"]
        assert catalog.with_name("library.txt.bak").read_text(encoding="utf-8") == edited

    def test_no_save_prints_sorted_catalog(self, workspace, capsys):
        main([*workspace["argv"], "--no-save", "--sort", "pages", "--reverse"])

        out = capsys.readouterr().out
        assert not workspace["catalog"].exists()
        assert out.splitlines()[0].startswith("DATE")
        assert out.index("Beta") < out.index("Alpha")

    def test_no_backup(self, workspace):
        main(workspace["argv"])
        main([*workspace["argv"], "--no-backup"])

        assert not workspace["catalog"].with_name("library.txt.bak").exists()

    def test_bad_epub_is_skipped(self, workspace, capsys):
        (workspace["library"] / "broken.epub").write_bytes(b"not a zip")

        main(workspace["argv"])

        assert "unable to load" in capsys.readouterr().out
        assert len(decode(workspace["catalog"].read_text(encoding="utf-8"))) == 2

    def test_missing_library_exits(self, workspace, tmp_path, capsys):
        argv = [*workspace["argv"], "--library", str(tmp_path / "nowhere")]

        with pytest.raises(SystemExit) as exc_info:
            main(argv)

        assert exc_info.value.code == EXIT_FAILURE
        assert "not found" in capsys.readouterr().err

    def test_malformed_catalog_exits(self, workspace, capsys):
        workspace["catalog"].parent.mkdir(parents=True)
        workspace["catalog"].write_text("header\nonly  /three  /fields  /\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(workspace["argv"])

        assert exc_info.value.code == EXIT_FAILURE
        assert "line 2" in capsys.readouterr().err

    def test_invalid_config_exits(self, tmp_path, capsys):
        config = tmp_path / "config.yml"
        config.write_text("unexpected: true\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config)])

        assert exc_info.value.code == 1
        assert "configuration error" in capsys.readouterr().err

    def test_open_db(self, workspace):
        with patch("ebook_catalog.catalog_cli.open_catalog") as mock_open:
            main([*workspace["argv"][:2], "--open-db", "--catalog", str(workspace["catalog"])])

        mock_open.assert_called_once_with(workspace["catalog"], "")
        assert not workspace["catalog"].exists()

    def test_open_db_error_exits(self, workspace, capsys):
        with patch("ebook_catalog.catalog_cli.open_catalog", side_effect=LibraryError("viewer 'nope' not found")):
            with pytest.raises(SystemExit) as exc_info:
                main([*workspace["argv"][:2], "--open-db"])

        assert exc_info.value.code == EXIT_FAILURE
        assert "viewer 'nope' not found" in capsys.readouterr().err
