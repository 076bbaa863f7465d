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
YAML helpers used by the configuration loader.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


def parse_yaml_mapping(text: str, source: str | Path = "<string>") -> dict[str, Any]:
    """
    Parse YAML text that must hold a mapping at the root.

    Args:
        text: YAML document
        source: Name used in error messages

    Returns:
        The mapping, or an empty dict for an empty document

    Raises:
        yaml.YAMLError: On syntax errors, so callers can report the position
        ConfigError: If the root isn't a mapping
    """
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a mapping at the root level, got {type(data).__name__}")
    return data


def format_yaml_error(error: yaml.YAMLError, source: str | Path, lines: list[str]) -> str:
    """
    Describe a YAML syntax error, pointing at the offending line and column.
    """
    mark = getattr(error, "problem_mark", None)
    problem = getattr(error, "problem", None) or str(error)
    if mark is None:
        return f"Error parsing {source}: {problem}"

    message = f"Error parsing {source} at line {mark.line + 1}, column {mark.column + 1}: {problem}"
    if mark.line < len(lines):
        prefix = f"  {mark.line + 1}: "
        message += f"\n{prefix}{lines[mark.line].rstrip()}\n{' ' * (len(prefix) + mark.column)}^"
    return message


def merge_yaml_configs(base_config: dict[str, Any], override_config: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configurations, ``override_config`` wins.

    Nested mappings are merged key by key, every other value is replaced.
    """
    result = dict(base_config)

    for key, value in override_config.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_yaml_configs(result[key], value)
        else:
            result[key] = value

    return result
