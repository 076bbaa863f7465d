#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys
import zipfile
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)

from ebook_catalog.models import EpubMetadata, Record  # noqa: E402

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def build_opf(title, author, section_count):
    """Build an OPF package document with one spine item per section."""
    metadata = ""
    if title is not None:
        metadata += f"<dc:title>{title}</dc:title>"
    if author is not None:
        metadata += f"<dc:creator>{author}</dc:creator>"
    manifest = "".join(
        f'<item id="s{i}" href="text/section{i}.xhtml" media-type="application/xhtml+xml"/>' for i in range(section_count)
    )
    spine = "".join(f'<itemref idref="s{i}"/>' for i in range(section_count))
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="id">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">{metadata}</metadata>
  <manifest>{manifest}</manifest>
  <spine>{spine}</spine>
</package>
"""


@pytest.fixture
def make_epub():
    """Factory writing a minimal but valid EPUB archive."""

    def _make_epub(path, title="Test Book", author="Test Author", sections=("<p>Hello</p>",)):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
            archive.writestr("META-INF/container.xml", CONTAINER_XML)
            archive.writestr("OEBPS/content.opf", build_opf(title, author, len(sections)))
            for i, section in enumerate(sections):
                archive.writestr(f"OEBPS/text/section{i}.xhtml", section)
        return path

    return _make_epub


@pytest.fixture
def sample_records():
    """A small catalog with mixed read flags, series and unicode text."""
    return [
        Record(251001, False, "Dune", "Frank Herbert", 412, "Dune", "/books/sf/dune.epub"),
        Record(240315, True, "Le Petit Prince", "Antoine de Saint-Exupéry", 48, "", "/books/fr/petit_prince.epub"),
        Record(250520, False, "三体", "刘慈欣", 302, "地球往事", "/books/zh/three_body.epub"),
    ]


@pytest.fixture
def fake_extractor():
    """Extractor mock returning fixed metadata for any path."""
    return Mock(return_value=EpubMetadata("New Book", "New Author", ["x" * 4000]))


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    return logger


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
