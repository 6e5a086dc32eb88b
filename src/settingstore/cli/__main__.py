"""Allow ``python -m settingstore.cli``."""

from settingstore.cli.app import app

app()
