"""Runtime composition layer for kittyfs.

Loads the persisted theme, enumerates roots, builds the initial model, and
hands everything to the event loop.
"""

from __future__ import annotations

import logging
import sys

from ..listing import enumerate_roots, list_entries
from ..state import build_initial_state
from .config import load_theme
from .effects import default_effect_handlers
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import open_terminal

logger = logging.getLogger(__name__)


def run_browser(no_color: bool = False) -> None:
    """Start the interactive browser on the controlling terminal.

    Raises ``termios.error`` (or ``OSError`` on Windows) when stdin is not a
    terminal; callers treat that as a fatal bootstrap error.
    """
    roots = enumerate_roots()
    theme = load_theme()
    logger.debug("starting with %d roots, theme %s/%s", len(roots), theme.border_color, theme.highlight_color)
    state = build_initial_state(roots, theme)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = open_terminal(stdin_fd, stdout_fd)
    callbacks = RuntimeLoopCallbacks(
        list_entries=list_entries,
        effects=default_effect_handlers(),
    )
    run_main_loop(state, terminal, stdin_fd, callbacks, no_color=no_color)
