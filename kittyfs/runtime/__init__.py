"""Interactive runtime: terminal session, event loop, effects and config.

``run_browser`` is resolved on first call so that importing the CLI (for
``--roots`` or ``--help``) does not touch termios or the loop modules.
"""

from __future__ import annotations


def run_browser(no_color: bool = False) -> None:
    """Start the interactive browser; see ``kittyfs.runtime.app``."""
    from .app import run_browser as _run_browser

    _run_browser(no_color=no_color)


__all__ = ["run_browser"]
