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
config_validator.py - Configuration validation for the ebook catalog
"""

from __future__ import annotations

import logging
from typing import Any

from .config_schema import CONFIG_SCHEMA, SECTION_DESCRIPTIONS, VALID_LOG_LEVELS


def find_line_number(key_path: str, config_lines: list[str]) -> int | None:
    """
    Find the line number of a configuration key in the YAML file.

    Args:
        key_path: Dot-separated path to key (e.g. 'library.root')
        config_lines: Configuration file lines

    Returns:
        1-based line number or None if not found
    """
    keys = key_path.split(".")
    depth = 0

    for i, line in enumerate(config_lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = len(line) - len(line.lstrip())
        # Left the section we were looking into
        if depth > 0 and indent < depth * 2:
            return None
        if indent == depth * 2 and stripped.startswith(f"{keys[depth]}:"):
            if depth == len(keys) - 1:
                return i
            depth += 1

    return None


def _type_name(expected: type) -> str:
    return {str: "a string", bool: "true or false"}.get(expected, expected.__name__)


class ConfigValidator:
    """Validates configuration structure and values."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def validate_config_first_error(self, config: dict[str, Any], config_lines: list[str]) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Args:
            config: Configuration as read from the file
            config_lines: Configuration file lines for error reporting

        Returns:
            Error description (type, line, message) or None if valid
        """
        for key in config:
            if key not in CONFIG_SCHEMA:
                return {
                    "type": "unknown_key",
                    "key": key,
                    "line": find_line_number(str(key), config_lines),
                    "message": f"Unknown or malformed key '{key}' found.",
                }

        for section, description in SECTION_DESCRIPTIONS.items():
            if section not in config:
                return {
                    "type": "missing_section",
                    "section": section,
                    "line": None,
                    "message": f"Expected section '{section}' not found. Please add the {section} section ({description})",
                }
            if not isinstance(config[section], dict):
                return {
                    "type": "invalid_type",
                    "path": section,
                    "line": find_line_number(section, config_lines),
                    "message": f"Section '{section}' must be a mapping of settings",
                }

        for section, keys in CONFIG_SCHEMA.items():
            for key, value in config[section].items():
                path = f"{section}.{key}"
                if key not in keys:
                    return {
                        "type": "unknown_key",
                        "key": path,
                        "line": find_line_number(path, config_lines),
                        "message": f"Unknown or malformed key '{path}' found.",
                    }
                if not isinstance(value, keys[key]):
                    return {
                        "type": "invalid_type",
                        "path": path,
                        "value": value,
                        "line": find_line_number(path, config_lines),
                        "message": f"Invalid value '{value}' for {path}. Must be {_type_name(keys[key])}",
                    }

        level = config["logging"].get("level")
        if level is not None and level.upper() not in VALID_LOG_LEVELS:
            return {
                "type": "invalid_value",
                "path": "logging.level",
                "value": level,
                "valid_values": VALID_LOG_LEVELS,
                "line": find_line_number("logging.level", config_lines),
                "message": f"Invalid value '{level}' for logging.level. Must be one of {', '.join(VALID_LOG_LEVELS)}",
            }

        suffix = config["library"].get("backup_suffix")
        if suffix is not None and not suffix.strip():
            return {
                "type": "invalid_value",
                "path": "library.backup_suffix",
                "value": suffix,
                "line": find_line_number("library.backup_suffix", config_lines),
                "message": "library.backup_suffix can't be empty, the backup would overwrite the catalog",
            }

        return None

    @staticmethod
    def format_error(error: dict[str, Any]) -> str:
        """Render an error returned by validate_config_first_error as one line."""
        line = error.get("line")
        where = f"line {line}" if line is not None else "configuration"
        return f"{where}: {error['message']}"
