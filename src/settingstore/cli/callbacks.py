"""Typer callbacks for CLI."""

import typer

from settingstore.ui import VERSION, console


def version_callback(value: bool | None) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"settingstore [value]{VERSION}[/value]")
        raise typer.Exit
