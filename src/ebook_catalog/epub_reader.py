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
epub_reader.py - Metadata extraction from EPUB files
====================================================

Reads the title, the author and the text of every reading-order section
from an EPUB archive. The container is walked by hand:
META-INF/container.xml -> OPF package document -> manifest + spine.
"""

from __future__ import annotations

import logging
import posixpath
import re
import xml.etree.ElementTree as ET
import zipfile
from pathlib import Path

import chardet

from .catalog_constants import DELIMITER, UNKNOWN_AUTHOR, UNKNOWN_TITLE
from .errors import ExtractionError
from .models import EpubMetadata

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"

NAMESPACES = {
    "container": "urn:oasis:names:tc:opendocument:xmlns:container",
    "opf": "http://www.idpf.org/2007/opf",
    "dc": "http://purl.org/dc/elements/1.1/",
}

_WHITESPACE_RE = re.compile(r"\s+")


def clean_metadata_text(text: str | None) -> str:
    """
    Normalize a metadata value so it fits in one catalog cell.

    Collapses whitespace (newlines included) and breaks up any occurrence of
    the column delimiter.
    """
    if not text:
        return ""
    cleaned = _WHITESPACE_RE.sub(" ", text).strip()
    while DELIMITER in cleaned:
        cleaned = cleaned.replace(DELIMITER, " /")
    return cleaned


def decode_resource(data: bytes) -> str:
    """Decode a resource as UTF-8, falling back to chardet detection."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        result = chardet.detect(data)
        encoding = result.get("encoding") or "utf-8"
        logger.debug(f"Resource is not UTF-8, detected {encoding} (confidence: {result.get('confidence')})")
        try:
            return data.decode(encoding, errors="replace")
        except LookupError:
            return data.decode("utf-8", errors="replace")


def _parse_xml(archive: zipfile.ZipFile, name: str, epub_path: str) -> ET.Element:
    try:
        return ET.fromstring(archive.read(name))
    except KeyError as e:
        raise ExtractionError(f"'{name}' not found in {epub_path}", path=epub_path) from e
    except ET.ParseError as e:
        raise ExtractionError(f"Malformed XML in '{name}' of {epub_path}: {e}", path=epub_path) from e


def find_package_document(archive: zipfile.ZipFile, epub_path: str) -> str:
    """Return the archive name of the OPF file declared in container.xml."""
    container = _parse_xml(archive, CONTAINER_PATH, epub_path)
    rootfile = container.find(".//container:rootfile", NAMESPACES)
    if rootfile is None or not rootfile.get("full-path"):
        raise ExtractionError(f"No rootfile declared in {CONTAINER_PATH} of {epub_path}", path=epub_path)
    return str(rootfile.get("full-path"))


def _first_text(package: ET.Element, tag: str) -> str:
    for element in package.iterfind(f".//opf:metadata/dc:{tag}", NAMESPACES):
        text = clean_metadata_text("".join(element.itertext()))
        if text:
            return text
    return ""


def read_spine_sections(archive: zipfile.ZipFile, package: ET.Element, opf_path: str) -> list[str]:
    """
    Return the content of every spine item, in reading order.

    Manifest hrefs are relative to the OPF file. A spine item whose resource
    is missing from the archive contributes an empty section.
    """
    base_dir = posixpath.dirname(opf_path)
    manifest = {
        item.get("id"): item.get("href", "")
        for item in package.iterfind("opf:manifest/opf:item", NAMESPACES)
    }

    sections: list[str] = []
    for itemref in package.iterfind("opf:spine/opf:itemref", NAMESPACES):
        href = manifest.get(itemref.get("idref"))
        if not href:
            logger.debug(f"Spine item '{itemref.get('idref')}' has no manifest entry")
            sections.append("")
            continue
        name = posixpath.normpath(posixpath.join(base_dir, href.split("#", 1)[0]))
        try:
            sections.append(decode_resource(archive.read(name)))
        except KeyError:
            logger.debug(f"Spine resource '{name}' missing from archive")
            sections.append("")
    return sections


def extract_metadata(epub_path: str | Path) -> EpubMetadata:
    """
    Read title, author and reading-order sections from an EPUB file.

    Args:
        epub_path: Path to the .epub file

    Returns:
        EpubMetadata with "Unknown title"/"Unknown author" for missing fields

    Raises:
        ExtractionError: If the file can't be opened or isn't a valid EPUB
    """
    path_str = str(epub_path)
    try:
        with zipfile.ZipFile(path_str) as archive:
            opf_path = find_package_document(archive, path_str)
            package = _parse_xml(archive, opf_path, path_str)
            return EpubMetadata(
                title=_first_text(package, "title") or UNKNOWN_TITLE,
                author=_first_text(package, "creator") or UNKNOWN_AUTHOR,
                page_sections=read_spine_sections(archive, package, opf_path),
            )
    except zipfile.BadZipFile as e:
        raise ExtractionError(f"Not a valid EPUB archive: {path_str}", path=path_str) from e
    except (OSError, zipfile.LargeZipFile, RuntimeError) as e:
        raise ExtractionError(f"Cannot read {path_str}: {e}", path=path_str) from e
