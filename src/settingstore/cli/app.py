"""Main Typer application for settingstore maintenance."""

from typing import Annotated

import typer

from settingstore.cli.callbacks import version_callback
from settingstore.cli.commands import backups_command, load_command, restore_command

app = typer.Typer(
    name="settingstore",
    help="settingstore - Inspect, repair and restore JSON settings files",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """settingstore - Recoverable JSON persistence for application settings."""


app.command(name="load")(load_command)
app.command(name="backups")(backups_command)
app.command(name="restore")(restore_command)
