"""Viewport sizing for the entry list.

Pure functions mapping terminal size and the current entry set to list
dimensions. Constants mirror the panel chrome drawn by ``kittyfs.render``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .ansi import display_width
from .entries import Entry

NAME_WIDTH_FLOOR = 20
NAME_WIDTH_BUFFER = 10
MIN_HELP_WIDTH = 80
BORDER_OVERHEAD = 6
PADDING_X = 2
PADDING_Y = 1
MIN_CONTENT_HEIGHT = 10


@dataclass(frozen=True)
class TerminalSize:
    width: int
    height: int


@dataclass(frozen=True)
class ListDimensions:
    width: int
    height: int


DEFAULT_TERMINAL_SIZE = TerminalSize(width=80, height=38)


def longest_name_width(entries: Iterable[Entry]) -> int:
    """Widest entry name in display columns, never below ``NAME_WIDTH_FLOOR``."""
    widest = NAME_WIDTH_FLOOR
    for entry in entries:
        widest = max(widest, display_width(entry.name))
    return widest


def list_width_for(entries: Iterable[Entry]) -> int:
    return max(longest_name_width(entries) + NAME_WIDTH_BUFFER, MIN_HELP_WIDTH)


def list_height_for(terminal_height: int, reserved_rows: int = 0) -> int:
    """Rows available to the list, clamped to ``MIN_CONTENT_HEIGHT``.

    ``reserved_rows`` are panel rows drawn below the list, such as the
    extended help block.
    """
    available = terminal_height - BORDER_OVERHEAD - 2 * PADDING_Y - reserved_rows
    return max(available, MIN_CONTENT_HEIGHT)


def compute_list_dimensions(
    terminal_size: TerminalSize,
    entries: Iterable[Entry],
    reserved_rows: int = 0,
) -> ListDimensions:
    """Derive list width/height from terminal size and the visible entries."""
    return ListDimensions(
        width=list_width_for(entries),
        height=list_height_for(terminal_size.height, reserved_rows),
    )


__all__ = [
    "NAME_WIDTH_FLOOR",
    "NAME_WIDTH_BUFFER",
    "MIN_HELP_WIDTH",
    "BORDER_OVERHEAD",
    "PADDING_X",
    "PADDING_Y",
    "MIN_CONTENT_HEIGHT",
    "DEFAULT_TERMINAL_SIZE",
    "TerminalSize",
    "ListDimensions",
    "longest_name_width",
    "list_width_for",
    "list_height_for",
    "compute_list_dimensions",
]
