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
config_schema.py - Configuration schema and default template for the ebook catalog
"""

from .catalog_constants import DEFAULT_BACKUP_SUFFIX, DEFAULT_CATALOG_FILE, DEFAULT_LIBRARY_ROOT

# Expected type of every known key, per section
CONFIG_SCHEMA: dict[str, dict[str, type]] = {
    "library": {
        "root": str,
        "catalog": str,
        "backup": bool,
        "backup_suffix": str,
    },
    "sorting": {
        "key": str,
        "reverse": bool,
    },
    "viewer": {
        "command": str,
    },
    "logging": {
        "level": str,
        "format": str,
        "file_enabled": bool,
        "file_path": str,
    },
}

SECTION_DESCRIPTIONS = {
    "library": "Library settings (scanned directory, catalog file, backup)",
    "sorting": "Default ordering of the catalog",
    "viewer": "Program used by --open-db",
    "logging": "Logging configuration",
}

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Default configuration template with comments, written on first run
DEFAULT_CONFIG_TEMPLATE = f"""# Ebook Catalog Configuration File
# ================================
# Settings used when no command-line option overrides them.

# Library
# -------
library:
  # Directory searched recursively for .epub files
  root: "{DEFAULT_LIBRARY_ROOT.as_posix()}"
  # Catalog file (plain text table, safe to edit by hand)
  catalog: "{DEFAULT_CATALOG_FILE.as_posix()}"
  # Keep a copy of the previous catalog before every save
  backup: true
  # Appended to the catalog file name to name the backup copy
  backup_suffix: "{DEFAULT_BACKUP_SUFFIX}"

# Sorting
# -------
sorting:
  # One of: date (d), read (r), title (t), author (a), pages (p), series (s)
  key: "date"
  # Reverse the order
  reverse: false

# Viewer
# ------
viewer:
  # Command used to open the catalog with --open-db, e.g. "vim" or "code --wait"
  # Leave empty to use the system default application
  command: ""

# Logging
# -------
logging:
  # Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
  level: "WARNING"
  # Log message format
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
  # Also write logs to a file
  file_enabled: false
  # Log file path
  file_path: "ebook_catalog.log"
"""
