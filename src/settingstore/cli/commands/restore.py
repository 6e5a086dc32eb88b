"""Restore command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from settingstore.core.backup import restore_backup
from settingstore.ui import error, info, success


def restore_command(
    backup: Annotated[
        Path,
        typer.Argument(help="Backup file to restore", exists=True, dir_okay=False),
    ],
    path: Annotated[
        Path,
        typer.Argument(help="Settings file to overwrite", dir_okay=False),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file"),
    ] = False,
) -> None:
    """Copy a backup over a settings file.

    The backup is kept. The restored file is validated on the next load.
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]")
        info("Use [code]--force[/code] to overwrite")
        raise typer.Exit(1)

    try:
        restore_backup(backup, path)
    except OSError as exc:
        error(f"Could not restore [path]{path}[/path]: {exc}")
        raise typer.Exit(1) from exc

    success(f"Restored [path]{path}[/path] from [path]{backup.name}[/path]")
