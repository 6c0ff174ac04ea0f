"""Frame composition for the browser panel.

Builds a centered, rounded-border panel holding the title art, the list
sub-view, and the optional extended help block. Rendering never mutates the
navigation state.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from ..ansi import clip_ansi_line, display_width, fit_ansi_line
from ..layout import PADDING_X, PADDING_Y
from ..ui_theme import Palette, resolve_palette
from .help import EXTENDED_HELP_LINES, TITLE_ART_LINES, extended_help_lines

if TYPE_CHECKING:
    from ..state import NavigationState

CLEAR_SCREEN = "\033[H\033[J"
BORDER_ROWS = 2


def _center(text: str, width: int) -> str:
    left = max(0, (width - display_width(text)) // 2)
    return " " * left + text


def _art_rows(inner_width: int, palette: Palette) -> list[str]:
    rows = [_center(f"{palette.highlight_bold}{line}{palette.reset}", inner_width) for line in TITLE_ART_LINES]
    rows.append("")
    return rows


def panel_content_lines(state: NavigationState, palette: Palette, *, show_art: bool = True) -> list[str]:
    """Inner panel rows before border and padding are applied."""
    rows = _art_rows(panel_inner_width(state), palette) if show_art else []
    rows.extend(state.entry_list.render(state.title, palette))
    if state.help_expanded:
        rows.extend(extended_help_lines(palette.dim, palette.reset))
    return rows


def panel_inner_width(state: NavigationState) -> int:
    widths = [state.entry_list.width]
    widths.extend(display_width(line) for line in TITLE_ART_LINES)
    if state.help_expanded:
        widths.extend(display_width(line) for line in EXTENDED_HELP_LINES)
    return max(widths)


def _compose_panel(
    state: NavigationState,
    palette: Palette,
    max_rows: int | None,
) -> tuple[list[str], int | None]:
    """Return panel rows and the row index of the list cursor.

    When the full panel is taller than ``max_rows``, the title art is dropped
    first and then the vertical padding.
    """
    show_art = True
    pad_y = PADDING_Y
    content = panel_content_lines(state, palette)
    if max_rows is not None and len(content) + BORDER_ROWS + 2 * pad_y > max_rows:
        show_art = False
        content = panel_content_lines(state, palette, show_art=False)
        if len(content) + BORDER_ROWS + 2 * pad_y > max_rows:
            pad_y = 0

    inner_width = panel_inner_width(state)
    span = inner_width + 2 * PADDING_X
    border, reset = palette.border, palette.reset
    side = f"{border}│{reset}"
    pad = " " * PADDING_X

    lines = [f"{border}╭{'─' * span}╮{reset}"]
    blank = f"{side}{' ' * span}{side}"
    lines.extend(blank for _ in range(pad_y))
    for row in content:
        lines.append(f"{side}{pad}{fit_ansi_line(row, inner_width)}{pad}{side}")
    lines.extend(blank for _ in range(pad_y))
    lines.append(f"{border}╰{'─' * span}╯{reset}")

    list_row = state.entry_list.selected_row()
    if list_row is None:
        return lines, None
    art_height = len(TITLE_ART_LINES) + 1 if show_art else 0
    return lines, 1 + pad_y + art_height + list_row


def render_panel(state: NavigationState, palette: Palette, max_rows: int | None = None) -> list[str]:
    """Wrap content rows in a rounded border with horizontal/vertical padding."""
    lines, _ = _compose_panel(state, palette, max_rows)
    return lines


def _visible_window(lines: list[str], height: int, focus_row: int | None) -> list[str]:
    """Slice ``height`` rows from ``lines``, keeping ``focus_row`` in view."""
    if len(lines) <= height:
        return lines
    start = 0
    if focus_row is not None and focus_row >= height:
        start = min(focus_row - height + 1, len(lines) - height)
    return lines[start : start + height]


def render_frame(state: NavigationState, *, no_color: bool = False) -> list[str]:
    """Return screen rows for ``state``, centered and clipped to the terminal."""
    palette = resolve_palette(state.theme, no_color=no_color)
    term_width = max(1, state.terminal_size.width)
    term_height = max(1, state.terminal_size.height)
    panel, focus_row = _compose_panel(state, palette, term_height)
    panel_width = display_width(panel[0])
    left = " " * max(0, (term_width - panel_width) // 2)
    visible = _visible_window(panel, term_height, focus_row)
    return [clip_ansi_line(left + line, term_width) for line in visible]


def paint(lines: list[str], fd: int | None = None) -> None:
    """Clear the screen and write ``lines`` in one ``os.write`` call."""
    out = CLEAR_SCREEN + "\r\n".join(lines)
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, out.encode("utf-8", errors="replace"))


__all__ = [
    "CLEAR_SCREEN",
    "panel_content_lines",
    "panel_inner_width",
    "render_panel",
    "render_frame",
    "paint",
]
