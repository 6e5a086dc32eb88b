"""UI and terminal output styling for the settingstore CLI.

Submodules:
- console: Theme and console instance
- logging: Log handler setup
- messages: Status messages (success, error, warning, info)
- tables: Table display utilities
"""

from settingstore.ui.console import SETTINGSTORE_THEME, VERSION, console, icon
from settingstore.ui.logging import close_logging, setup_logging
from settingstore.ui.messages import error, info, success, warning
from settingstore.ui.tables import create_table

__all__ = [
    "SETTINGSTORE_THEME",
    "VERSION",
    "close_logging",
    "console",
    "create_table",
    "error",
    "icon",
    "info",
    "setup_logging",
    "success",
    "warning",
]
