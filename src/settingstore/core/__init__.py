"""Core persistence layer: store, codec, backups and version gates."""

from settingstore.core.backup import backup_file, find_backups, restore_backup
from settingstore.core.codec import JsonCodec
from settingstore.core.config import StoreOptions, build_options, settings_file
from settingstore.core.store import JSON_STORAGE, JsonStore
from settingstore.core.version_gate import (
    NullVersionGate,
    StorageKind,
    VersionFileGate,
    VersionGate,
)

__all__ = [
    "JSON_STORAGE",
    "JsonCodec",
    "JsonStore",
    "NullVersionGate",
    "StorageKind",
    "StoreOptions",
    "VersionFileGate",
    "VersionGate",
    "backup_file",
    "build_options",
    "find_backups",
    "restore_backup",
    "settings_file",
]
