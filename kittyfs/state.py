"""Single mutable application model for the browser."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .entries import Entry
from .layout import DEFAULT_TERMINAL_SIZE, ListDimensions, TerminalSize, compute_list_dimensions
from .list_view import ListView
from .render.help import EXTENDED_HELP_HEIGHT
from .ui_theme import DEFAULT_THEME, Theme

MODE_DRIVE_SELECT = "drive_select"
MODE_BROWSING = "browsing"

DRIVE_SELECT_TITLE = "Select Drive =^..^="


@dataclass
class NavigationState:
    root_entries: tuple[Entry, ...]
    visible_entries: tuple[Entry, ...]
    entry_list: ListView
    theme: Theme = DEFAULT_THEME
    mode: str = MODE_DRIVE_SELECT
    current_path: str = ""
    terminal_size: TerminalSize = DEFAULT_TERMINAL_SIZE
    list_dimensions: ListDimensions = field(default_factory=lambda: ListDimensions(0, 0))
    help_expanded: bool = False

    @property
    def browsing(self) -> bool:
        return self.mode == MODE_BROWSING

    @property
    def title(self) -> str:
        if self.mode == MODE_DRIVE_SELECT:
            return DRIVE_SELECT_TITLE
        return f"Browsing {self.current_path}"

    def show_entries(self, entries: Sequence[Entry]) -> None:
        """Swap in a new entry set and re-derive list sizing from it."""
        self.visible_entries = tuple(entries)
        self.entry_list.set_items(self.visible_entries)
        self.entry_list.reset_filter()
        self.resize_list()

    def resize_list(self) -> None:
        reserved = EXTENDED_HELP_HEIGHT if self.help_expanded else 0
        self.list_dimensions = compute_list_dimensions(self.terminal_size, self.visible_entries, reserved)
        self.entry_list.set_size(self.list_dimensions.width, self.list_dimensions.height)


def build_initial_state(
    roots: Sequence[Entry],
    theme: Theme = DEFAULT_THEME,
    terminal_size: TerminalSize = DEFAULT_TERMINAL_SIZE,
) -> NavigationState:
    """Create the drive-select model shown at startup."""
    root_entries = tuple(roots)
    state = NavigationState(
        root_entries=root_entries,
        visible_entries=root_entries,
        entry_list=ListView(root_entries),
        theme=theme,
        terminal_size=terminal_size,
    )
    state.resize_list()
    return state


__all__ = [
    "MODE_DRIVE_SELECT",
    "MODE_BROWSING",
    "DRIVE_SELECT_TITLE",
    "NavigationState",
    "build_initial_state",
]
