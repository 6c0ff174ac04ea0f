"""kittyfs: a keyboard-driven terminal file browser.

``main`` runs the command line; everything else lives in submodules.
"""

from __future__ import annotations


def main(argv: list[str] | None = None) -> None:
    from .cli import main as _main

    _main(argv)


__all__ = ["main"]
