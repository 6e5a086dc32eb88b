"""Backups command implementation."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from settingstore.core.backup import find_backups
from settingstore.ui import console, create_table, info


def backups_command(
    path: Annotated[
        Path,
        typer.Argument(help="Settings file whose backups to list", dir_okay=False),
    ],
) -> None:
    """List timestamped backups of a settings file, oldest first."""
    backups = find_backups(path)
    if not backups:
        info(f"No backups found for [path]{path}[/path]")
        return

    table = create_table(f"Backups of {path.name}")
    table.add_column("File", style="path")
    table.add_column("Size", justify="right", style="value")
    table.add_column("Modified", style="dim")
    for backup in backups:
        stat = backup.stat()
        modified = datetime.fromtimestamp(stat.st_mtime).strftime("%Y-%m-%d %H:%M:%S")
        table.add_row(backup.name, f"{stat.st_size} B", modified)
    console.print(table)
