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
catalog_viewer.py - Open the catalog file in an external program
"""

from __future__ import annotations

import logging
import os
import platform
import shlex
import subprocess
from pathlib import Path

from .errors import LibraryError

logger = logging.getLogger(__name__)


def default_open_command() -> list[str]:
    """Return the platform's "open with the default application" command."""
    system = platform.system().lower()
    if system == "darwin":
        return ["open"]
    if system == "windows":
        return ["cmd", "/c", "start", ""]
    return ["xdg-open"]


def build_command(catalog_path: Path, viewer_command: str = "") -> list[str]:
    """
    Build the argument list used to open the catalog.

    Args:
        catalog_path: Catalog file to open
        viewer_command: User command such as "vim" or "code --wait";
            empty means the platform default

    Returns:
        Argument list ending with the catalog path
    """
    command = shlex.split(viewer_command, posix=os.name != "nt") if viewer_command.strip() else default_open_command()
    return command + [str(catalog_path)]


def open_catalog(catalog_path: Path, viewer_command: str = "") -> None:
    """
    Open the catalog file and wait for the viewer to return.

    Raises:
        LibraryError: If there is no catalog yet or the viewer can't be run
    """
    if not catalog_path.exists():
        raise LibraryError(f"library DB '{catalog_path}' not found, run a scan first to create it")

    command = build_command(catalog_path, viewer_command)
    logger.debug(f"Opening catalog with: {command}")
    try:
        subprocess.run(command, check=True)
    except FileNotFoundError as e:
        raise LibraryError(f"viewer '{command[0]}' not found") from e
    except subprocess.CalledProcessError as e:
        raise LibraryError(f"viewer '{command[0]}' exited with status {e.returncode}") from e
    except OSError as e:
        raise LibraryError(f"unable to open library DB: {e}") from e
