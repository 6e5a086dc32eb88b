"""CLI command modules for settingstore.

Each module exports one command function carrying its Typer annotations.
The main app.py imports and registers these commands.
"""

from settingstore.cli.commands.backups import backups_command
from settingstore.cli.commands.load import load_command
from settingstore.cli.commands.restore import restore_command

__all__ = ["backups_command", "load_command", "restore_command"]
