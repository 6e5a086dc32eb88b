"""Console configuration and theme for settingstore UI.

This module provides the central console instance and theme used by the
maintenance CLI for consistent styling.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

from settingstore import __version__ as _PKG_VERSION

SETTINGSTORE_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "neutral": "dim white",
        # --- UI Structure ---
        "header": "bold cyan",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "path": "blue underline",
        "code": "bold magenta",
        # --- Modifiers ---
        "dim": "dim",
        "emphasis": "bold",
    }
)

# Single console instance for the CLI
console = Console(theme=SETTINGSTORE_THEME)

VERSION = _PKG_VERSION

_EMOJI_DISABLED = os.getenv("SETTINGSTORE_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_emoji() -> bool:
    """Best-effort detection if the terminal supports Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet
    """
    use_unicode = _supports_emoji()
    mapping = {
        "check": "✓" if use_unicode else "+",
        "warn": "⚠" if use_unicode else "!",
        "error": "✗" if use_unicode else "x",
        "info": "▸" if use_unicode else ">",
        "bullet": "‣" if use_unicode else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = ["SETTINGSTORE_THEME", "VERSION", "console", "icon"]
