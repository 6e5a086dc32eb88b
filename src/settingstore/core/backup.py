"""Timestamped backups of settings files about to be discarded."""

from __future__ import annotations

import logging
import re
import shutil
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from settingstore.core.constants import (
    BACKUP_FRACTION_DIGITS,
    BACKUP_TIMESTAMP_FORMAT,
    BACKUP_TIMESTAMP_PATTERN,
)

logger = logging.getLogger("settingstore.backup")

# Nanosecond clock, injectable for tests
Clock = Callable[[], int]

_NS_PER_SECOND = 1_000_000_000
_NS_PER_TICK = _NS_PER_SECOND // 10**BACKUP_FRACTION_DIGITS


def backup_timestamp(timestamp_ns: int) -> str:
    """Format a nanosecond epoch timestamp as ``yyyy-MM-dd-HH-mm-ss-fffffff``.

    The fractional part has 100 ns resolution, so two backups taken within the
    same second get distinct names. Local time is used.
    """
    seconds, remainder = divmod(timestamp_ns, _NS_PER_SECOND)
    stamp = datetime.fromtimestamp(seconds).strftime(BACKUP_TIMESTAMP_FORMAT)
    fraction = remainder // _NS_PER_TICK
    return f"{stamp}-{fraction:0{BACKUP_FRACTION_DIGITS}d}"


def backup_path_for(path: Path, timestamp_ns: int) -> Path:
    """Return ``<dir>/<stem>-<timestamp><suffix>`` for *path*."""
    return path.with_name(f"{path.stem}-{backup_timestamp(timestamp_ns)}{path.suffix}")


def backup_file(path: Path, clock: Clock = time.time_ns) -> Path:
    """Copy *path* to a timestamped sibling and return the backup path.

    The original is left untouched. An existing file with the same backup name
    is overwritten.
    """
    target = backup_path_for(path, clock())
    shutil.copyfile(path, target)
    logger.info("Backed up %s to %s", path, target.name)
    return target


def find_backups(path: Path) -> list[Path]:
    """List existing backups of *path*, oldest first.

    Only names matching the exact backup pattern are returned, so unrelated
    files sharing the stem prefix are ignored.
    """
    pattern = re.compile(
        rf"^{re.escape(path.stem)}-{BACKUP_TIMESTAMP_PATTERN}{re.escape(path.suffix)}$"
    )
    if not path.parent.is_dir():
        return []
    return sorted(
        candidate
        for candidate in path.parent.iterdir()
        if candidate.is_file() and pattern.match(candidate.name)
    )


def restore_backup(backup: Path, path: Path) -> Path:
    """Copy a backup over the live settings file and return *path*."""
    shutil.copyfile(backup, path)
    logger.info("Restored %s from %s", path, backup.name)
    return path


__all__ = [
    "Clock",
    "backup_file",
    "backup_path_for",
    "backup_timestamp",
    "find_backups",
    "restore_backup",
]
