"""Version compatibility gate for persisted settings.

A store asks its gate, once per load, whether data written by an earlier
application version must be purged. After every successful save the gate is
told that the file is now current.

Design Pattern: Protocol-based dependency injection
    - VersionGate protocol defines the contract
    - NullVersionGate never purges (tests, embedded use)
    - VersionFileGate keeps a version marker file next to the store file
"""

from __future__ import annotations

import logging
import re
from enum import IntEnum
from pathlib import Path
from typing import Protocol, runtime_checkable

from settingstore.core.constants import UNKNOWN_VERSION, VERSION_MARKER_SUFFIX

logger = logging.getLogger("settingstore.version")

_VERSION_RE = re.compile(r"^v?(\d+(?:\.\d+)*)$")
_VERSION_PARTS = 3


class StorageKind(IntEnum):
    """Class of cache sharing the version-compatibility mechanism."""

    BINARY = 0
    JSON = 1


@runtime_checkable
class VersionGate(Protocol):
    """Protocol for the version compatibility oracle."""

    def should_clear_cache(self, path: Path, kind: StorageKind) -> bool:
        """Return True if data at *path* predates a compatible version.

        Must not modify anything on disk.
        """
        ...

    def mark_current(self, path: Path) -> None:
        """Record that *path* was just written by the running version.

        Called after each successful save; must be idempotent.
        """
        ...


class NullVersionGate:
    """Gate that treats every file as compatible."""

    def should_clear_cache(self, path: Path, kind: StorageKind) -> bool:
        """Never request a purge."""
        return False

    def mark_current(self, path: Path) -> None:
        """Discard the commit signal."""


class VersionFileGate:
    """Gate backed by a ``<stem>_version.txt`` marker beside the store file.

    A missing marker means the file was written by a version that predates
    markers, which reads as ``v0.0.0``. Unparseable versions always purge.

    Example:
        >>> gate = VersionFileGate("v1.4.0")
        >>> gate.marker_path(Path("Settings/launcher.json"))
        PosixPath('Settings/launcher_version.txt')
    """

    def __init__(self, current_version: str, encoding: str = "utf-8") -> None:
        self.current_version = current_version.strip()
        self._encoding = encoding

    @staticmethod
    def marker_path(path: Path) -> Path:
        """Return the version marker path associated with *path*."""
        return path.with_name(f"{path.stem}{VERSION_MARKER_SUFFIX}")

    def previous_version(self, path: Path) -> str:
        """Return the version that last committed *path*."""
        marker = self.marker_path(path)
        if not marker.exists():
            return UNKNOWN_VERSION
        return marker.read_text(encoding=self._encoding).strip()

    def should_clear_cache(self, path: Path, kind: StorageKind) -> bool:
        """Return True when the marker is older than the running version."""
        previous = self.previous_version(path)
        stale = is_older_version(previous, self.current_version)
        if stale:
            logger.debug(
                "%s cache at %s written by %s, running %s",
                kind.name,
                path,
                previous,
                self.current_version,
            )
        return stale

    def mark_current(self, path: Path) -> None:
        """Write the running version into the marker file."""
        self.marker_path(path).write_text(self.current_version, encoding=self._encoding)


def parse_version(version: str) -> tuple[int, ...] | None:
    """Parse ``v1.2.3`` or ``1.2`` into a padded integer tuple.

    Returns:
        A tuple of at least three components, or None if unparseable.
    """
    match = _VERSION_RE.match(version.strip())
    if match is None:
        return None
    parts = [int(part) for part in match.group(1).split(".")]
    parts.extend([0] * (_VERSION_PARTS - len(parts)))
    return tuple(parts)


def is_older_version(previous: str, current: str) -> bool:
    """Return True if *previous* is strictly older than *current*.

    Either version being empty or unparseable counts as older.
    """
    previous_parts = parse_version(previous)
    current_parts = parse_version(current)
    if previous_parts is None or current_parts is None:
        return True
    width = max(len(previous_parts), len(current_parts))
    previous_parts += (0,) * (width - len(previous_parts))
    current_parts += (0,) * (width - len(current_parts))
    return previous_parts < current_parts


__all__ = [
    "NullVersionGate",
    "StorageKind",
    "VersionFileGate",
    "VersionGate",
    "is_older_version",
    "parse_version",
]
