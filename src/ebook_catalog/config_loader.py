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
config_loader.py - Configuration loading and merging for the ebook catalog
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .common_yaml_utils import format_yaml_error, merge_yaml_configs, parse_yaml_mapping
from .config_schema import DEFAULT_CONFIG_TEMPLATE
from .errors import ConfigError


class ConfigLoader:
    """Loads the configuration file, creating it with defaults on first run."""

    def __init__(self, config_path: Path, logger: logging.Logger | None = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file
            logger: Logger instance
        """
        self.config_path = config_path
        self.logger = logger or logging.getLogger(__name__)
        self._config_lines: list[str] = []  # Kept for error reporting

    def load_config(self) -> dict[str, Any]:
        """
        Load configuration from file, creating the default one if missing.

        Returns:
            Configuration dictionary as written in the file

        Raises:
            ConfigError: If the file can't be created, read or parsed
        """
        if not self.config_path.exists():
            self.logger.info(f"Configuration file not found. Creating default at: {self.config_path}")
            self._create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                file_content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Error loading configuration file {self.config_path}: {e}") from e

        self._config_lines = file_content.split("\n")

        try:
            config = parse_yaml_mapping(file_content, self.config_path)
        except yaml.YAMLError as e:
            raise ConfigError(format_yaml_error(e, self.config_path, self._config_lines)) from e

        if not config:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return self.get_default_config()

        return config

    def _create_default_config(self) -> None:
        """Write the default configuration template, creating its directory."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(DEFAULT_CONFIG_TEMPLATE)
        except OSError as e:
            raise ConfigError(f"Failed to create configuration file {self.config_path}: {e}") from e
        self.logger.info("Default configuration file created successfully.")

    def get_default_config(self) -> dict[str, Any]:
        """Return the default configuration as a dictionary."""
        return parse_yaml_mapping(DEFAULT_CONFIG_TEMPLATE)

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Merge user config over the defaults so every key exists."""
        return merge_yaml_configs(self.get_default_config(), config)

    def get_config_lines(self) -> list[str]:
        """Return the configuration file lines, for error reporting."""
        return self._config_lines
