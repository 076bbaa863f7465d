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
errors.py - Exception hierarchy for the ebook catalog
=====================================================

Every fatal condition reaches the command line as a ``CatalogError`` whose
message is printed to the user as a single line. ``ExtractionError`` is the
only recoverable one: the reconciler catches it and skips the file.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all catalog errors."""

    pass


class FormatError(CatalogError):
    """Raised when a catalog line can't be split into the expected fields."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ExtractionError(CatalogError):
    """Raised when metadata can't be read from an EPUB file."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class LibraryError(CatalogError):
    """Raised on catalog, backup, directory or viewer I/O failures."""

    pass


class ConfigError(CatalogError):
    """Raised when the configuration file can't be created or loaded."""

    pass
