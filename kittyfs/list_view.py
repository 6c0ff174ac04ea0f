"""Filterable, paginated entry list embedded in the browser panel.

The navigation state machine only calls ``set_items``, ``selected_item``,
``reset_filter``, ``set_size`` and ``set_show_help``; cursor movement and
filter editing arrive as raw key tokens through ``handle_key``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ansi import fit_ansi_line
from .entries import Entry
from .fuzzy import rank_labels
from .ui_theme import PLAIN_PALETTE, Palette

FILTER_UNFILTERED = "unfiltered"
FILTER_EDITING = "filtering"
FILTER_APPLIED = "applied"

# Title, status and spacer rows sit above the items; pagination sits below.
LIST_HEADER_ROWS = 3
LIST_CHROME_ROWS = LIST_HEADER_ROWS + 1

SHORT_HELP: tuple[tuple[str, str], ...] = (
    ("↑/↓", "files"),
    ("←/→", "pages"),
    ("/", "filter"),
    ("backspace", "parent"),
    ("?", "more"),
    ("q", "quit"),
)

_UP_KEYS = {"UP", "k"}
_DOWN_KEYS = {"DOWN", "j"}
_PREV_PAGE_KEYS = {"LEFT", "h", "PGUP"}
_NEXT_PAGE_KEYS = {"RIGHT", "l", "PGDN"}
_FIRST_KEYS = {"g", "HOME"}
_LAST_KEYS = {"G", "END"}


def _is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class ListView:
    """Cursor, paging, and fuzzy-filter state over a sequence of entries."""

    def __init__(self, items: Sequence[Entry] = (), width: int = 80, height: int = 30) -> None:
        self._items: tuple[Entry, ...] = tuple(items)
        self._matches: list[int] = list(range(len(self._items)))
        self.width = width
        self.height = height
        self.cursor = 0
        self.filter_state = FILTER_UNFILTERED
        self.filter_query = ""
        self.show_help = True

    @property
    def items(self) -> tuple[Entry, ...]:
        return self._items

    @property
    def filtering(self) -> bool:
        """Whether the filter prompt is currently capturing keystrokes."""
        return self.filter_state == FILTER_EDITING

    def visible_items(self) -> list[Entry]:
        return [self._items[idx] for idx in self._matches]

    def set_items(self, items: Sequence[Entry]) -> None:
        """Replace all items and move the cursor back to the top."""
        self._items = tuple(items)
        self.cursor = 0
        self._refresh_matches()

    def selected_item(self) -> Entry | None:
        if not self._matches:
            return None
        return self._items[self._matches[self.cursor]]

    def selected_row(self) -> int | None:
        """Index of the cursor row within ``render()`` output, if any."""
        if not self._matches:
            return None
        return LIST_HEADER_ROWS + self.cursor - self.page * self.per_page

    def reset_filter(self) -> None:
        self.filter_state = FILTER_UNFILTERED
        self.filter_query = ""
        self._refresh_matches()

    def set_size(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(1, height)

    def set_show_help(self, show_help: bool) -> None:
        self.show_help = bool(show_help)

    @property
    def per_page(self) -> int:
        help_rows = 1 if self.show_help else 0
        return max(1, self.height - LIST_CHROME_ROWS - help_rows)

    @property
    def page(self) -> int:
        return self.cursor // self.per_page

    @property
    def total_pages(self) -> int:
        count = len(self._matches)
        if count == 0:
            return 1
        return (count + self.per_page - 1) // self.per_page

    def _refresh_matches(self) -> None:
        if self.filter_state == FILTER_UNFILTERED:
            self._matches = list(range(len(self._items)))
        else:
            self._matches = rank_labels(self.filter_query, [item.name for item in self._items])
        self._clamp_cursor()

    def _clamp_cursor(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self._matches) - 1))

    def _move(self, delta: int) -> None:
        self.cursor += delta
        self._clamp_cursor()

    def _handle_filter_key(self, key: str) -> bool:
        if key == "ESC":
            self.reset_filter()
        elif key in {"ENTER", "TAB"}:
            if self.filter_query:
                self.filter_state = FILTER_APPLIED
            else:
                self.reset_filter()
        elif key == "BACKSPACE":
            self.filter_query = self.filter_query[:-1]
            self.cursor = 0
            self._refresh_matches()
        elif key == "UP":
            self._move(-1)
        elif key == "DOWN":
            self._move(1)
        elif _is_text_key(key):
            self.filter_query += key
            self.cursor = 0
            self._refresh_matches()
        else:
            return False
        return True

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return ``True`` when the list consumed it."""
        if self.filtering:
            return self._handle_filter_key(key)

        if key in _UP_KEYS:
            self._move(-1)
        elif key in _DOWN_KEYS:
            self._move(1)
        elif key in _PREV_PAGE_KEYS:
            self.cursor = max(0, (self.page - 1) * self.per_page)
            self._clamp_cursor()
        elif key in _NEXT_PAGE_KEYS:
            if self.page + 1 < self.total_pages:
                self.cursor = (self.page + 1) * self.per_page
            self._clamp_cursor()
        elif key in _FIRST_KEYS:
            self.cursor = 0
            self._clamp_cursor()
        elif key in _LAST_KEYS:
            self.cursor = len(self._matches) - 1
            self._clamp_cursor()
        elif key == "/":
            self.filter_state = FILTER_EDITING
            self._refresh_matches()
        elif key == "ESC" and self.filter_state == FILTER_APPLIED:
            self.reset_filter()
        else:
            return False
        return True

    def _status_line(self, palette: Palette) -> str:
        count = len(self._matches)
        noun = "item" if count == 1 else "items"
        if self.filter_state == FILTER_EDITING:
            return f"Filter: {palette.highlight}{self.filter_query}{palette.reset}█"
        if self.filter_state == FILTER_APPLIED:
            return f"{palette.dim}“{self.filter_query}” {count} {noun}{palette.reset}"
        if not self._items:
            return f"{palette.dim}No items.{palette.reset}"
        return f"{palette.dim}{count} {noun}{palette.reset}"

    def _item_row(self, entry: Entry, selected: bool, palette: Palette) -> str:
        label = entry.name
        if entry.is_dir and not label.endswith(("/", "\\")):
            label += "/"
        if selected:
            return f"{palette.highlight_bold}│ {label}{palette.reset}"
        return f"  {label}"

    def _pagination_line(self, palette: Palette) -> str:
        total = self.total_pages
        if total <= 1:
            return ""
        if total > 20:
            return f"{palette.dim}{self.page + 1}/{total}{palette.reset}"
        dots = ["•" if idx == self.page else "○" for idx in range(total)]
        return f"{palette.dim}{''.join(dots)}{palette.reset}"

    def _help_line(self, palette: Palette) -> str:
        parts = [f"{key} {palette.dim}{desc}{palette.reset}" for key, desc in SHORT_HELP]
        return f" {palette.dim}•{palette.reset} ".join(parts)

    def render(self, title: str, palette: Palette = PLAIN_PALETTE) -> list[str]:
        """Return exactly ``height`` rows, each padded to ``width`` columns."""
        rows: list[str] = [
            f"{palette.highlight_bold}{title}{palette.reset}",
            self._status_line(palette),
            "",
        ]
        start = self.page * self.per_page
        for offset in range(self.per_page):
            match_idx = start + offset
            if match_idx >= len(self._matches):
                rows.append("")
                continue
            entry = self._items[self._matches[match_idx]]
            rows.append(self._item_row(entry, match_idx == self.cursor, palette))
        rows.append(self._pagination_line(palette))
        if self.show_help:
            rows.append(self._help_line(palette))
        rows = rows[: self.height]
        while len(rows) < self.height:
            rows.append("")
        return [fit_ansi_line(row, self.width) for row in rows]


__all__ = [
    "ListView",
    "SHORT_HELP",
    "FILTER_UNFILTERED",
    "FILTER_EDITING",
    "FILTER_APPLIED",
]
