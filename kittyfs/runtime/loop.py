"""Main interactive event loop for the terminal UI.

Each iteration polls terminal size, repaints when needed, and turns at most
one key token into a navigation event. Feature logic lives in
``kittyfs.navigation``; this module only wires input, transitions, effects,
and painting together.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..keymap import event_for_key
from ..navigation import ListEntries, NavigationEvent, Resize, handle_event
from ..render import paint, render_frame
from ..state import NavigationState
from .effects import EffectHandlers, execute_effects
from .terminal import PanelSession

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120
FALLBACK_TERMINAL_SIZE = (80, 24)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    list_entries: ListEntries
    effects: EffectHandlers
    get_terminal_size: Callable[[tuple[int, int]], object] = shutil.get_terminal_size
    read_key: Callable[..., str] = read_key
    paint: Callable[[list[str]], None] = paint


def dispatch_event(
    state: NavigationState,
    event: NavigationEvent,
    callbacks: RuntimeLoopCallbacks,
) -> bool:
    """Apply one event and execute its effects; return ``True`` to quit."""
    transition = handle_event(state, event, list_entries=callbacks.list_entries)
    return execute_effects(transition.effects, callbacks.effects)


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR/LF pairs into a single ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means the token was the
    LF half of an already-reported CRLF and should be dropped.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: NavigationState,
    terminal: PanelSession,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
    *,
    no_color: bool = False,
) -> None:
    """Run the interactive loop until a quit event is processed."""
    dirty = True
    skip_next_lf = False
    with terminal.raw_mode():
        while True:
            term = callbacks.get_terminal_size(FALLBACK_TERMINAL_SIZE)
            if (term.columns, term.lines) != (state.terminal_size.width, state.terminal_size.height):
                dispatch_event(state, Resize(term.columns, term.lines), callbacks)
                dirty = True

            if dirty:
                callbacks.paint(render_frame(state, no_color=no_color))
                dirty = False

            try:
                key = callbacks.read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
            if normalized is None:
                continue

            event = event_for_key(normalized, state.entry_list)
            logger.debug("key %r -> %r", normalized, event)
            if dispatch_event(state, event, callbacks):
                break
            dirty = True
