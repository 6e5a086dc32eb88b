"""Exception taxonomy for settingstore.

Decode problems are the only failures the store absorbs on its own. Everything
else surfaces through one of these types, or as a plain ``OSError`` for I/O.
"""

from __future__ import annotations


class SettingStoreError(Exception):
    """Base class for all settingstore-specific exceptions."""


class DecodeError(SettingStoreError):
    """Stored text is not valid JSON, or not valid for the target type."""


class DefaultValueError(SettingStoreError):
    """The target type cannot be built from an empty document."""


class StoreStateError(SettingStoreError):
    """A store operation was invoked out of order (e.g. save before load)."""


class ConfigError(SettingStoreError):
    """Configuration-related errors (invalid options, bad paths)."""


__all__ = [
    "ConfigError",
    "DecodeError",
    "DefaultValueError",
    "SettingStoreError",
    "StoreStateError",
]
