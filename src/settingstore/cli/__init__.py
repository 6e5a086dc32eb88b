"""Command line interface for settingstore."""

from settingstore.cli.app import app

__all__ = ["app"]
