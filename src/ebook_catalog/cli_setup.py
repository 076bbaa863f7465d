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
cli_setup.py - CLI setup and initialization
===========================================

Handles loading the configuration file and setting up logging before the
full argument parser is built.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .catalog_constants import DEFAULT_CONFIG_FILE
from .common_print_utils import print_error
from .config_manager import ConfigManager
from .errors import ConfigError


def setup_configuration(argv: Sequence[str] | None = None) -> ConfigManager:
    """Load and validate configuration from the config file.

    Only ``--config`` is looked at here, the rest of the command line is
    parsed once the configuration provides the defaults.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        ConfigManager instance
    """
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument("--config", type=str, default=str(DEFAULT_CONFIG_FILE))
    config_args, _ = config_parser.parse_known_args(argv)

    try:
        return ConfigManager(config_path=Path(config_args.config))
    except ConfigError as e:
        print_error(f"configuration error: {e}")
        print_error("fix the configuration file or delete it to regenerate defaults")
        sys.exit(1)


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, str(config["logging"]["level"]).upper(), logging.WARNING)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format, force=True)
    logger = logging.getLogger("ebook_catalog")

    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(Path(config["logging"]["file_path"]).expanduser(), encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logging.getLogger().addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")
            # Continue without file logging

    return logger
