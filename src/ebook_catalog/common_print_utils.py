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
Console output with rich formatting.

Book titles and paths may contain square brackets, so user data is always
escaped or printed with markup disabled.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


def safe_print(*args: Any, **kwargs: Any) -> None:
    """Print rich markup to standard output."""
    console.print(*args, **kwargs)


def print_catalog(text: str) -> None:
    """Print catalog text exactly as encoded, without wrapping or highlighting."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a non-fatal warning line."""
    console.print(f"[yellow]warning:[/yellow] {escape(message)}", highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print a fatal error as a single line on standard error."""
    error_console.print(f"[bold red]error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)
