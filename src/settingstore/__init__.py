"""settingstore - Recoverable JSON persistence for application settings.

Public API:
    - JsonStore: Load/save one typed settings object

Version gates:
    - VersionGate: Compatibility oracle protocol
    - NullVersionGate, VersionFileGate: Implementations

Configuration:
    - StoreOptions: Layout and formatting options
    - settings_file: Conventional settings path helper
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from settingstore.core.backup import find_backups, restore_backup
from settingstore.core.config import StoreOptions, settings_file
from settingstore.core.shared.exceptions import (
    ConfigError,
    DecodeError,
    DefaultValueError,
    SettingStoreError,
    StoreStateError,
)
from settingstore.core.store import JsonStore
from settingstore.core.version_gate import (
    NullVersionGate,
    StorageKind,
    VersionFileGate,
    VersionGate,
)

__all__ = [
    # Version
    "__version__",
    # Store
    "JsonStore",
    # Version gates
    "NullVersionGate",
    "StorageKind",
    "VersionFileGate",
    "VersionGate",
    # Configuration
    "StoreOptions",
    "settings_file",
    # Backups
    "find_backups",
    "restore_backup",
    # Errors
    "ConfigError",
    "DecodeError",
    "DefaultValueError",
    "SettingStoreError",
    "StoreStateError",
]
