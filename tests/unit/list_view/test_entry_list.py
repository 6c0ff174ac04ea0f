"""Tests for the embedded entry list: cursor, paging, filter, rendering."""

from __future__ import annotations

import unittest

from kittyfs.entries import Entry
from kittyfs.list_view import FILTER_APPLIED, FILTER_EDITING, FILTER_UNFILTERED, ListView


def _entries(*names: str) -> list[Entry]:
    return [Entry(name=name, is_dir=name.endswith("_dir"), path=f"/x/{name}") for name in names]


class CursorAndPagingTests(unittest.TestCase):
    def test_cursor_moves_and_clamps(self) -> None:
        view = ListView(_entries("a", "b", "c"))
        view.handle_key("UP")
        self.assertEqual(view.selected_item().name, "a")
        view.handle_key("DOWN")
        view.handle_key("j")
        view.handle_key("DOWN")
        self.assertEqual(view.selected_item().name, "c")
        view.handle_key("k")
        self.assertEqual(view.selected_item().name, "b")
        view.handle_key("G")
        self.assertEqual(view.cursor, 2)
        view.handle_key("g")
        self.assertEqual(view.cursor, 0)

    def test_pages_follow_list_height(self) -> None:
        view = ListView(_entries(*[f"item{i:02d}" for i in range(12)]), height=10)
        # 10 rows minus 4 chrome rows minus the help footer.
        self.assertEqual(view.per_page, 5)
        self.assertEqual(view.total_pages, 3)

        view.handle_key("RIGHT")
        self.assertEqual(view.cursor, 5)
        view.handle_key("RIGHT")
        view.handle_key("RIGHT")
        self.assertEqual(view.cursor, 10)
        view.handle_key("LEFT")
        self.assertEqual(view.cursor, 5)

        view.set_show_help(False)
        self.assertEqual(view.per_page, 6)

    def test_set_items_resets_cursor(self) -> None:
        view = ListView(_entries("a", "b"))
        view.handle_key("DOWN")
        view.set_items(_entries("c", "d", "e"))
        self.assertEqual(view.selected_item().name, "c")

    def test_empty_list_has_no_selection(self) -> None:
        view = ListView()
        view.handle_key("DOWN")
        self.assertIsNone(view.selected_item())
        self.assertEqual(view.total_pages, 1)

    def test_unknown_keys_are_not_consumed(self) -> None:
        view = ListView(_entries("a"))
        self.assertFalse(view.handle_key("x"))
        self.assertFalse(view.handle_key("ESC"))


class FilterTests(unittest.TestCase):
    def test_filter_edit_apply_and_clear(self) -> None:
        view = ListView(_entries("alpha", "beta", "gamma"))
        view.handle_key("/")
        self.assertEqual(view.filter_state, FILTER_EDITING)
        self.assertTrue(view.filtering)

        for key in "ga":
            view.handle_key(key)
        self.assertEqual([item.name for item in view.visible_items()], ["gamma"])

        view.handle_key("ENTER")
        self.assertEqual(view.filter_state, FILTER_APPLIED)
        self.assertEqual(view.selected_item().name, "gamma")

        view.handle_key("ESC")
        self.assertEqual(view.filter_state, FILTER_UNFILTERED)
        self.assertEqual(len(view.visible_items()), 3)

    def test_backspace_and_escape_while_editing(self) -> None:
        view = ListView(_entries("alpha", "beta"))
        view.handle_key("/")
        view.handle_key("b")
        self.assertEqual(view.filter_query, "b")
        view.handle_key("BACKSPACE")
        self.assertEqual(view.filter_query, "")
        self.assertEqual(view.filter_state, FILTER_EDITING)
        view.handle_key("z")
        self.assertIsNone(view.selected_item())
        view.handle_key("ESC")
        self.assertEqual(view.filter_state, FILTER_UNFILTERED)
        self.assertEqual(view.selected_item().name, "alpha")

    def test_enter_with_empty_query_closes_filter(self) -> None:
        view = ListView(_entries("alpha"))
        view.handle_key("/")
        view.handle_key("ENTER")
        self.assertEqual(view.filter_state, FILTER_UNFILTERED)

    def test_reset_filter_restores_all_items(self) -> None:
        view = ListView(_entries("alpha", "beta"))
        view.handle_key("/")
        view.handle_key("b")
        view.reset_filter()
        self.assertEqual(view.filter_query, "")
        self.assertEqual(len(view.visible_items()), 2)


class RenderTests(unittest.TestCase):
    def test_render_returns_fixed_size_rows(self) -> None:
        view = ListView(_entries("docs_dir", "a.txt"), width=100, height=10)
        rows = view.render("Browsing /x")
        self.assertEqual(len(rows), 10)
        self.assertTrue(all(len(row) == 100 for row in rows))
        self.assertTrue(rows[0].startswith("Browsing /x"))
        self.assertTrue(rows[1].startswith("2 items"))
        self.assertTrue(rows[3].startswith("│ docs_dir/"))
        self.assertTrue(rows[4].startswith("  a.txt"))
        self.assertIn("backspace parent", rows[-1])

    def test_render_shows_filter_prompt_while_editing(self) -> None:
        view = ListView(_entries("alpha"), width=40, height=10)
        view.handle_key("/")
        view.handle_key("a")
        rows = view.render("t")
        self.assertTrue(rows[1].startswith("Filter: a"))

    def test_render_without_help_footer(self) -> None:
        view = ListView(_entries("alpha"), width=200, height=10)
        view.set_show_help(False)
        rows = view.render("t")
        self.assertFalse(any("backspace parent" in row for row in rows))


if __name__ == "__main__":
    unittest.main()
