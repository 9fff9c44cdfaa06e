from __future__ import annotations

import sys
from typing import Optional

from rich.console import Console
from rich.table import Table

from native_platform.descriptor import Platform


def build_console(use_rich: bool, stderr: bool = False) -> Console:
    return Console(file=sys.stderr if stderr else sys.stdout, force_terminal=use_rich, stderr=stderr)


def platform_table(platform: Platform, library: Optional[str] = None) -> Table:
    """Tabulate the facts of `platform`, plus the file name of `library` if given."""
    table = Table(title=str(platform), show_header=False)
    table.add_column("Property", style="bold")
    table.add_column("Value")
    for key, value in platform.describe().items():
        table.add_row(key, "" if value is None else str(value))
    if library:
        table.add_row("library_file", platform.os.map_library_file_name(library))
    return table


def render_platform(console: Console, platform: Platform, use_rich: bool, library: Optional[str] = None) -> None:
    if use_rich:
        console.print(platform_table(platform, library))
        return
    for key, value in platform.describe().items():
        console.print(f"{key}: {'' if value is None else value}", markup=False, highlight=False)
    if library:
        console.print(f"library_file: {platform.os.map_library_file_name(library)}", markup=False, highlight=False)


def report_error(message: str) -> None:
    """Print a diagnostic to stderr."""
    console = build_console(False, stderr=True)
    console.print(message, markup=False, highlight=False, soft_wrap=True)
