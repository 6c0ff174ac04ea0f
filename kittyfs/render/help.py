"""Static panel text: title art and the extended help block."""

from __future__ import annotations

TITLE_ART_LINES: tuple[str, ...] = (
    "░█▄▀░▀█▀░▀█▀░▀█▀░█░█░█▀▀░█▀▀",
    "░█░█░░█░░░█░░░█░░░█░░█▀▀░▀▀█",
    "░▀░▀░▀▀▀░░▀░░░▀░░░▀░░▀░░░▀▀▀",
)

EXTENDED_HELP_LINES: tuple[str, ...] = (
    "Extended Help: ( ? to close )",
    "  ↑/↓ or j/k    - Navigate up/down",
    "  enter         - Open file or enter folder",
    "  o             - Open location in file explorer",
    "  backspace     - Go back to parent folder",
    "  /             - Filter/search items",
    "  esc           - Clear filter",
    "  t             - Change color theme",
    "  q or ctrl+c   - Quit",
)


def extended_help_lines(dim: str = "", reset: str = "") -> list[str]:
    """Return the help block with one blank row of vertical padding each side."""
    return ["", *(f"{dim}{line}{reset}" for line in EXTENDED_HELP_LINES), ""]


# Help block rows plus the blank row above and below it.
EXTENDED_HELP_HEIGHT = len(EXTENDED_HELP_LINES) + 2
