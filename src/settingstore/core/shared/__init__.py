"""Shared building blocks used across settingstore layers."""

from settingstore.core.shared.exceptions import (
    ConfigError,
    DecodeError,
    DefaultValueError,
    SettingStoreError,
    StoreStateError,
)

__all__ = [
    "ConfigError",
    "DecodeError",
    "DefaultValueError",
    "SettingStoreError",
    "StoreStateError",
]
