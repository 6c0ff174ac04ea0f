"""Tests for theme config persistence and input sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from kittyfs.runtime import config
from kittyfs.runtime.effects import EffectHandlers, execute_effects
from kittyfs.navigation import SaveTheme
from kittyfs.ui_theme import DEFAULT_THEME, THEMES, Theme


class ThemeConfigTests(unittest.TestCase):
    def test_missing_config_yields_default_theme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_theme(), DEFAULT_THEME)
                self.assertEqual(config.load_theme().border_color, "#FF69B4")
                self.assertEqual(config.load_theme().highlight_color, "#FF1493")

    def test_malformed_config_yields_default_theme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_theme(), DEFAULT_THEME)

            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_theme(), DEFAULT_THEME)

    def test_invalid_fields_fall_back_individually(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"border_color": "#123ABC", "highlight_color": 7})
                self.assertEqual(config.load_theme(), Theme("#123ABC", "#FF1493"))

    def test_save_theme_writes_exactly_two_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", config_path):
                config.save_theme(THEMES[3])
                saved = json.loads(config_path.read_text(encoding="utf-8"))
                self.assertEqual(config.load_theme(), THEMES[3])

        self.assertEqual(saved, {"border_color": "#FF6347", "highlight_color": "#FF4500"})

    def test_save_effect_persists_new_pair(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            handlers = EffectHandlers(
                save_theme=config.save_theme,
                open_default=mock.Mock(),
                reveal_in_file_manager=mock.Mock(),
            )
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", config_path):
                should_quit = execute_effects((SaveTheme(THEMES[1]),), handlers)
                self.assertEqual(config.load_theme(), THEMES[1])

        self.assertFalse(should_quit)
        handlers.open_default.assert_not_called()

    def test_save_errors_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("file, not dir", encoding="utf-8")
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", blocker / "config.json"):
                config.save_theme(THEMES[2])

    def test_legacy_working_directory_config_is_read_when_default_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = Path(tmp) / "native" / "config.json"
            legacy_path = Path(tmp) / "config.json"
            legacy_path.write_text('{"border_color": "#9370DB", "highlight_color": "#BA55D3"}', encoding="utf-8")
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", default_path), mock.patch(
                "kittyfs.runtime.config.DEFAULT_CONFIG_PATH", default_path
            ), mock.patch("kittyfs.runtime.config.LEGACY_CONFIG_PATH", legacy_path):
                self.assertEqual(config.load_theme(), THEMES[2])

    def test_set_config_path_redirects_load_and_save(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            custom = Path(tmp) / "custom.json"
            with mock.patch("kittyfs.runtime.config.CONFIG_PATH", config.CONFIG_PATH):
                config.set_config_path(custom)
                config.save_theme(THEMES[5])
                self.assertEqual(config.CONFIG_PATH, custom)
                self.assertEqual(config.load_theme(), THEMES[5])
            self.assertTrue(custom.exists())


if __name__ == "__main__":
    unittest.main()
