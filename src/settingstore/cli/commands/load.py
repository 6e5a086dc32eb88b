"""Load command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from settingstore.core.backup import find_backups
from settingstore.core.shared.exceptions import SettingStoreError
from settingstore.core.store import JsonStore
from settingstore.core.version_gate import NullVersionGate, VersionFileGate, VersionGate
from settingstore.ui import close_logging, console, error, setup_logging, success, warning


def load_command(
    path: Annotated[
        Path,
        typer.Argument(help="Settings file to load", dir_okay=False, resolve_path=True),
    ],
    app_version: Annotated[
        str | None,
        typer.Option(
            "--app-version",
            help="Running application version; purges files written by older versions.",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Append log records to this file (.json for JSON lines)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Print log records to the console"),
    ] = False,
) -> None:
    """Load a settings file, repairing it if needed, and print its contents.

    Missing, empty, malformed or null files are replaced by an empty JSON
    object; any file that gets replaced is backed up first.

    Examples
    --------
      Check and repair a settings file:
        $ settingstore load Settings/launcher.json

      Purge settings written by versions older than v1.2.0:
        $ settingstore load Settings/launcher.json --app-version v1.2.0
    """
    setup_logging(log_file, verbose=verbose)
    gate: VersionGate = VersionFileGate(app_version) if app_version else NullVersionGate()
    store: JsonStore[dict[str, Any]] = JsonStore(path, dict[str, Any], version_gate=gate)
    backups_before = set(find_backups(path))

    try:
        value = store.load()
    except (OSError, SettingStoreError) as exc:
        error(f"Could not load [path]{path}[/path]: {exc}")
        raise typer.Exit(1) from exc
    finally:
        close_logging()

    console.print_json(data=value)

    new_backups = [backup for backup in find_backups(path) if backup not in backups_before]
    for backup in new_backups:
        warning(f"Unreadable contents backed up to [path]{backup.name}[/path]")
    success(f"Loaded [path]{path}[/path]")
