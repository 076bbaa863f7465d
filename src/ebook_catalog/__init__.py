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
Ebook Catalog

Keeps a plain text table of the EPUB files found under a directory tree,
merging new files into the saved catalog while preserving hand-edited fields.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

# Core modules
from . import catalog_codec
from . import page_counter
from . import reconciler
from . import sort_engine
from . import library_service

# Collaborators
from . import epub_reader
from . import file_scanner
from . import catalog_viewer

# Configuration and CLI
from . import config_manager
from . import cli_parser
from . import catalog_cli

__all__ = [
    "catalog_codec",
    "page_counter",
    "reconciler",
    "sort_engine",
    "library_service",
    "epub_reader",
    "file_scanner",
    "catalog_viewer",
    "config_manager",
    "cli_parser",
    "catalog_cli",
]
