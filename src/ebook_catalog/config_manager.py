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
config_manager.py - Configuration management for the ebook catalog
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

from .catalog_constants import DEFAULT_CONFIG_FILE
from .config_loader import ConfigLoader
from .config_validator import ConfigValidator
from .errors import ConfigError
from .library_service import LibraryConfig
from .sort_engine import parse_sort_key

# Command-line argument -> configuration key
ARG_MAPPING = {
    "library": "library.root",
    "catalog": "library.catalog",
    "sort": "sorting.key",
}


def _set_path(config: dict[str, Any], key_path: str, value: Any) -> None:
    keys = key_path.split(".")
    target = config
    for key in keys[:-1]:
        target = target.setdefault(key, {})
    target[keys[-1]] = value


class ConfigManager:
    """Loads, validates and exposes the configuration."""

    def __init__(
        self,
        config_path: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (default: ~/.ebook_catalog/catalog_config.yml)
            logger: Logger instance

        Raises:
            ConfigError: If the configuration can't be loaded or is invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = (config_path or DEFAULT_CONFIG_FILE).expanduser()

        self.loader = ConfigLoader(self.config_path, self.logger)
        self.validator = ConfigValidator(self.logger)

        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file or create default."""
        config = self.loader.load_config()

        first_error = self.validator.validate_config_first_error(config, self.loader.get_config_lines())
        if first_error:
            raise ConfigError(f"{self.config_path}, {self.validator.format_error(first_error)}")

        return self.loader.merge_with_defaults(config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'library.root')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.config
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def update_with_args(self, args: Any) -> dict[str, Any]:
        """
        Update configuration with command-line arguments.
        Command-line args take precedence over the config file.

        Args:
            args: Parsed command-line arguments

        Returns:
            Updated configuration dictionary
        """
        config = copy.deepcopy(self.config)

        for arg_name, key_path in ARG_MAPPING.items():
            value = getattr(args, arg_name, None)
            if value is not None:
                _set_path(config, key_path, value)

        # Flags can only switch a setting on (or backup off)
        if getattr(args, "reverse", False):
            _set_path(config, "sorting.reverse", True)
        if getattr(args, "no_backup", False):
            _set_path(config, "library.backup", False)
        if getattr(args, "verbose", False):
            _set_path(config, "logging.level", "DEBUG")

        self.config = config
        return config

    def to_library_config(self, no_save: bool = False) -> LibraryConfig:
        """
        Resolve the configuration into the settings of one run.

        Args:
            no_save: Print the catalog instead of saving it

        Returns:
            LibraryConfig with expanded paths
        """
        catalog_path = Path(self.get("library.catalog")).expanduser()
        backup_path = None
        if self.get("library.backup", True):
            backup_path = catalog_path.with_name(catalog_path.name + self.get("library.backup_suffix"))

        return LibraryConfig(
            catalog_path=catalog_path,
            library_root=Path(self.get("library.root")).expanduser(),
            sort_key=parse_sort_key(self.get("sorting.key")),
            reverse=bool(self.get("sorting.reverse", False)),
            no_save=no_save,
            backup_path=backup_path,
            viewer_command=self.get("viewer.command") or "",
        )
