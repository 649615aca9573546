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
Console output helpers built on rich.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .format_registry import MenuTree

console = Console()
error_console = Console(stderr=True)


def safe_print(*args: Any, **kwargs: Any) -> None:
    """Print rich markup to stdout."""
    console.print(*args, **kwargs)


def print_error(message: str) -> None:
    """Print an error message to stderr. Markup in ``message`` is not interpreted."""
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def render_menu_tree(menu_tree: MenuTree) -> Tree:
    """
    Build a rich Tree showing the format menus.

    Args:
        menu_tree: Menus produced by format_registry.build_menu

    Returns:
        Renderable tree
    """
    root = Tree("[bold]Formats[/bold]")
    for menu in menu_tree:
        branch = root.add(f"[cyan]{menu.title}[/cyan]")
        for item in menu.items:
            branch.add(f"[green]{escape(item.format_name)}[/green]  {escape(item.label)}")
    return root
