"""Filesystem listing and root enumeration.

Both helpers are defensive: unreadable paths and platform probing failures
degrade to empty (or minimal) results instead of raising into the UI.
"""

from __future__ import annotations

import logging
import os
import string
import sys

import psutil

from .entries import Entry

logger = logging.getLogger(__name__)

POSIX_ROOT = "/"
WINDOWS_DRIVE_LETTERS = string.ascii_uppercase[string.ascii_uppercase.index("C"):]


def _entry_is_dir(child: os.DirEntry) -> bool:
    """Return whether ``child`` is a directory, following symlinks."""
    try:
        return child.is_dir()
    except OSError:
        return False


def list_entries(path: str) -> tuple[Entry, ...]:
    """List direct children of ``path`` sorted by name.

    Returns an empty tuple when the directory cannot be read (permission
    denied, vanished path, not a directory).
    """
    entries: list[Entry] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                entries.append(
                    Entry(
                        name=child.name,
                        is_dir=_entry_is_dir(child),
                        path=os.path.join(path, child.name),
                    )
                )
    except OSError as exc:
        logger.debug("listing %r failed: %s", path, exc)
        return ()
    entries.sort(key=lambda entry: entry.name)
    return tuple(entries)


def _windows_drive_roots() -> list[str]:
    roots: list[str] = []
    for letter in WINDOWS_DRIVE_LETTERS:
        drive = f"{letter}:\\"
        if os.path.exists(drive):
            roots.append(drive)
    return roots


def _mount_point_roots() -> list[str]:
    mount_points: set[str] = set()
    try:
        for partition in psutil.disk_partitions(all=False):
            if partition.mountpoint:
                mount_points.add(partition.mountpoint)
    except Exception as exc:
        logger.debug("disk partition lookup failed: %s", exc)
    mount_points.discard(POSIX_ROOT)
    return [POSIX_ROOT, *sorted(mount_points)]


def enumerate_roots() -> tuple[Entry, ...]:
    """Return top-level entry points: drive letters on Windows, mount points elsewhere."""
    if sys.platform == "win32":
        roots = _windows_drive_roots()
    else:
        roots = _mount_point_roots()
    return tuple(Entry(name=root, is_dir=True, path=root) for root in roots)


__all__ = ["list_entries", "enumerate_roots"]
