"""Navigation state machine.

``handle_event`` applies one input event to ``NavigationState`` in place and
returns the effect requests (config writes, process launches, quit) that the
runtime must execute afterwards. Directory listing is the only outside call
made during a transition, through the injected ``list_entries`` callable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Collection
from dataclasses import dataclass

from .entries import Entry
from .layout import TerminalSize
from .listing import list_entries as default_list_entries
from .state import MODE_BROWSING, MODE_DRIVE_SELECT, NavigationState
from .ui_theme import Theme, next_theme

logger = logging.getLogger(__name__)

# Paths this short ("C:\", "/") are treated as the top of a root.
MIN_ROOT_PATH_LENGTH = 3

ListEntries = Callable[[str], tuple[Entry, ...]]


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class ToggleHelp:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Activate:
    pass


@dataclass(frozen=True)
class GoToParent:
    pass


@dataclass(frozen=True)
class CycleTheme:
    pass


@dataclass(frozen=True)
class RevealInExplorer:
    pass


@dataclass(frozen=True)
class ListInput:
    """Key token forwarded untouched to the embedded list."""

    key: str


NavigationEvent = Resize | ToggleHelp | Quit | Activate | GoToParent | CycleTheme | RevealInExplorer | ListInput


@dataclass(frozen=True)
class SaveTheme:
    theme: Theme


@dataclass(frozen=True)
class OpenDefault:
    path: str


@dataclass(frozen=True)
class RevealInFileManager:
    path: str


@dataclass(frozen=True)
class QuitRequested:
    pass


Effect = SaveTheme | OpenDefault | RevealInFileManager | QuitRequested


@dataclass(frozen=True)
class Transition:
    state: NavigationState
    effects: tuple[Effect, ...] = ()

    @property
    def should_quit(self) -> bool:
        return any(isinstance(effect, QuitRequested) for effect in self.effects)


def is_at_top(current_path: str, parent: str, root_paths: Collection[str] = ()) -> bool:
    """Return whether going up from ``current_path`` should leave the root.

    Besides the dirname fixed point and very short paths, a path that is
    itself one of the enumerated roots counts as the top.
    """
    if parent == current_path or parent == "" or len(current_path) <= MIN_ROOT_PATH_LENGTH:
        return True
    return current_path in root_paths


def enter_directory(state: NavigationState, path: str, list_entries: ListEntries) -> None:
    """List ``path`` and make it the browsed directory."""
    entries = list_entries(path)
    state.current_path = path
    state.mode = MODE_BROWSING
    state.show_entries(entries)


def return_to_roots(state: NavigationState) -> None:
    state.current_path = ""
    state.mode = MODE_DRIVE_SELECT
    state.show_entries(state.root_entries)


def _activate(state: NavigationState, list_entries: ListEntries) -> tuple[Effect, ...]:
    selected = state.entry_list.selected_item()
    if selected is None:
        return ()
    if state.mode == MODE_DRIVE_SELECT or selected.is_dir:
        enter_directory(state, selected.path, list_entries)
        return ()
    return (OpenDefault(selected.path),)


def _go_to_parent(state: NavigationState, list_entries: ListEntries) -> None:
    if state.mode != MODE_BROWSING:
        return
    parent = os.path.dirname(state.current_path)
    root_paths = {entry.path for entry in state.root_entries}
    if is_at_top(state.current_path, parent, root_paths):
        return_to_roots(state)
        return
    enter_directory(state, parent, list_entries)


def _reveal(state: NavigationState) -> tuple[Effect, ...]:
    if state.mode != MODE_BROWSING:
        return ()
    selected = state.entry_list.selected_item()
    if selected is None:
        return ()
    target = selected.path if selected.is_dir else os.path.dirname(selected.path)
    return (RevealInFileManager(target),)


def _cycle_theme(state: NavigationState) -> tuple[Effect, ...]:
    state.theme = next_theme(state.theme)
    logger.debug("theme changed to %s (%s)", state.theme.name, state.theme.border_color)
    return (SaveTheme(state.theme),)


def handle_event(
    state: NavigationState,
    event: NavigationEvent,
    list_entries: ListEntries = default_list_entries,
) -> Transition:
    """Apply ``event`` to ``state`` and return it with any effect requests."""
    effects: tuple[Effect, ...] = ()
    if isinstance(event, Resize):
        state.terminal_size = TerminalSize(width=event.width, height=event.height)
        state.resize_list()
    elif isinstance(event, ToggleHelp):
        state.help_expanded = not state.help_expanded
        state.entry_list.set_show_help(not state.help_expanded)
        state.resize_list()
    elif isinstance(event, Quit):
        effects = (QuitRequested(),)
    elif isinstance(event, Activate):
        effects = _activate(state, list_entries)
    elif isinstance(event, GoToParent):
        _go_to_parent(state, list_entries)
    elif isinstance(event, CycleTheme):
        effects = _cycle_theme(state)
    elif isinstance(event, RevealInExplorer):
        effects = _reveal(state)
    elif isinstance(event, ListInput):
        state.entry_list.handle_key(event.key)
    else:
        raise TypeError(f"unsupported navigation event: {event!r}")
    return Transition(state=state, effects=effects)


__all__ = [
    "MIN_ROOT_PATH_LENGTH",
    "Resize",
    "ToggleHelp",
    "Quit",
    "Activate",
    "GoToParent",
    "CycleTheme",
    "RevealInExplorer",
    "ListInput",
    "NavigationEvent",
    "SaveTheme",
    "OpenDefault",
    "RevealInFileManager",
    "QuitRequested",
    "Effect",
    "Transition",
    "is_at_top",
    "enter_directory",
    "return_to_roots",
    "handle_event",
]
