"""Single-value JSON store with load-time recovery.

A ``JsonStore`` owns one settings object and the JSON file that mirrors it.
``load`` never fails on bad file contents: missing, empty, malformed, null or
version-stale files all resolve to the type's default value, which is written
back immediately. Whenever an existing file is about to be overwritten, a
timestamped copy is taken first.

I/O errors (permissions, full disk, missing directory) are not handled here
and propagate to the caller.
"""

from __future__ import annotations

import codecs
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from settingstore.core.backup import Clock, backup_file
from settingstore.core.codec import JsonCodec
from settingstore.core.config import StoreOptions
from settingstore.core.shared.exceptions import DecodeError, DefaultValueError, StoreStateError
from settingstore.core.version_gate import NullVersionGate, StorageKind, VersionGate

T = TypeVar("T")

logger = logging.getLogger("settingstore.store")

# Distinguishes JSON stores from other caches sharing the version gate
JSON_STORAGE = StorageKind.JSON


class JsonStore(Generic[T]):
    """Persist one typed value to a JSON file.

    Example:
        >>> store = JsonStore(path, LauncherSettings, version_gate=VersionFileGate("v1.2.0"))
        >>> settings = store.load()
        >>> settings.max_results = 8
        >>> store.save()
    """

    def __init__(
        self,
        file_path: Path,
        target: type[T] | Any,
        *,
        version_gate: VersionGate | None = None,
        options: StoreOptions | None = None,
        default_factory: Callable[[], T] | None = None,
        clock: Clock = time.time_ns,
    ) -> None:
        """Bind a store to *file_path*.

        Args:
            file_path: Path of the JSON file.
            target: Settings type; anything pydantic's TypeAdapter accepts.
            version_gate: Compatibility oracle; defaults to NullVersionGate.
            options: Encoding and formatting options.
            default_factory: Fallback for types that cannot decode ``{}``.
            clock: Nanosecond clock used for backup timestamps.
        """
        self.file_path = Path(file_path)
        self.options = options or StoreOptions()
        self._codec: JsonCodec[T] = JsonCodec(target, indent=self.options.indent)
        self._gate: VersionGate = version_gate or NullVersionGate()
        self._default_factory = default_factory
        self._clock = clock
        self._value: T | None = None
        self._loaded = False

    @property
    def directory_path(self) -> Path:
        """Directory holding the settings file and its backups."""
        return self.file_path.parent

    @property
    def value(self) -> T:
        """The live settings object.

        Raises:
            StoreStateError: If ``load`` has not been called.
        """
        if self._value is None:
            msg = f"Settings at {self.file_path} have not been loaded"
            raise StoreStateError(msg)
        return self._value

    @property
    def is_loaded(self) -> bool:
        """Whether ``load`` has completed on this store."""
        return self._loaded

    def load(self) -> T:
        """Load the settings, recovering to defaults when the file is unusable.

        Returns:
            The loaded (or default) value, never None.

        Raises:
            DefaultValueError: If a default is needed and cannot be built.
            OSError: On file system failures.
        """
        self._loaded = False
        value = self._load()
        self._loaded = True
        return value

    def save(self) -> None:
        """Write the current value to disk and mark it current.

        Raises:
            StoreStateError: If called before ``load``.
            OSError: On file system failures.
        """
        if self._value is None:
            msg = f"Cannot save {self.file_path} before it has been loaded"
            raise StoreStateError(msg)

        serialized = self._codec.encode(self._value)
        self.file_path.write_text(serialized, encoding=self.options.encoding)
        self._gate.mark_current(self.file_path)
        logger.info("Saved settings: %s", self.file_path)

    def _load(self) -> T:
        if self._gate.should_clear_cache(self.file_path, JSON_STORAGE) and self.file_path.exists():
            self.file_path.unlink()
            logger.info("Deleted settings from an incompatible version: %s", self.file_path)

        if not self.file_path.exists():
            return self._load_default()

        try:
            serialized = self._read_text()
        except DecodeError as exc:
            logger.warning("Could not decode settings at %s: %s", self.file_path, exc)
            return self._load_default()

        if not serialized.strip():
            return self._load_default()

        return self._deserialize(serialized)

    def _read_text(self) -> str:
        """Read the file as text, dropping a leading UTF-8 byte order mark.

        Raises:
            DecodeError: If the bytes are not valid in the configured encoding.
        """
        data = self.file_path.read_bytes()
        try:
            return data.decode(_reading_encoding(self.options.encoding))
        except UnicodeDecodeError as exc:
            msg = f"Not valid {self.options.encoding} text: {exc}"
            raise DecodeError(msg) from exc

    def _deserialize(self, serialized: str) -> T:
        try:
            value = self._codec.decode(serialized)
        except DecodeError as exc:
            logger.warning("Could not decode settings at %s: %s", self.file_path, exc)
            return self._load_default()

        if value is None:
            logger.warning("Settings at %s decoded to null", self.file_path)
            return self._load_default()

        self._value = value
        return value

    def _load_default(self) -> T:
        if self.file_path.exists():
            backup_file(self.file_path, clock=self._clock)

        self._value = self._default_value()
        self.save()
        return self._value

    def _default_value(self) -> T:
        try:
            return self._codec.decode_empty()
        except DecodeError as exc:
            if self._default_factory is not None:
                return self._default_factory()
            msg = (
                f"Cannot build default settings for {self.file_path}: {exc}. "
                "Give every field a default or pass default_factory."
            )
            raise DefaultValueError(msg) from exc


def _reading_encoding(encoding: str) -> str:
    """Return the codec used for reading; UTF-8 also accepts a leading BOM."""
    if codecs.lookup(encoding).name == "utf-8":
        return "utf-8-sig"
    return encoding


__all__ = ["JSON_STORAGE", "JsonStore"]
