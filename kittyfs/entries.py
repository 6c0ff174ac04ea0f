"""Domain datatype for one listed filesystem object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """Immutable list row: display name, directory flag, and full path."""

    name: str
    is_dir: bool
    path: str


__all__ = ["Entry"]
