"""Windows console backend: key decoding and console-mode lifecycle."""

from __future__ import annotations

import unittest
from unittest import mock

from kittyfs.input import read_console_key
from kittyfs.runtime.terminal import (
    ENABLE_PROCESSED_INPUT,
    ENABLE_VIRTUAL_TERMINAL_PROCESSING,
    STD_INPUT_HANDLE,
    STD_OUTPUT_HANDLE,
    TerminalController,
    WindowsConsoleController,
    open_terminal,
)


class FakeConsole:
    def __init__(self, chars: str, ready: bool = True) -> None:
        self._chars = list(chars)
        self._ready = ready

    def kbhit(self) -> bool:
        return self._ready and bool(self._chars)

    def getwch(self) -> str:
        return self._chars.pop(0)


class FakeKernel32:
    def __init__(self, attached: bool = True) -> None:
        self.attached = attached
        self.modes = {STD_INPUT_HANDLE: 0x01F7, STD_OUTPUT_HANDLE: 0x0003}
        self.calls: list[tuple] = []

    def GetStdHandle(self, which: int) -> int:
        return which

    def GetConsoleMode(self, handle: int, mode_ref) -> int:
        if not self.attached:
            return 0
        mode_ref._obj.value = self.modes[handle]
        return 1

    def SetConsoleMode(self, handle: int, mode: int) -> int:
        self.calls.append(("mode", handle, mode))
        return 1

    def GetConsoleOutputCP(self) -> int:
        return 437

    def SetConsoleOutputCP(self, code_page: int) -> int:
        self.calls.append(("cp", code_page))
        return 1


def _read_all(chars: str, count: int) -> list[str]:
    console = FakeConsole(chars)
    return [read_console_key(0, timeout_ms=10, console=console) for _ in range(count)]


class ReadConsoleKeyTests(unittest.TestCase):
    def test_scan_code_keys(self) -> None:
        keys = _read_all("\xe0H\xe0P\xe0K\xe0M\x00G\x00O\xe0I\xe0Q\xe0S", 9)
        self.assertEqual(keys, ["UP", "DOWN", "LEFT", "RIGHT", "HOME", "END", "PGUP", "PGDN", "DELETE"])

    def test_control_and_printable_keys(self) -> None:
        keys = _read_all("\x03\x08\r\t\x1bqé", 7)
        self.assertEqual(keys, ["CTRL_C", "BACKSPACE", "ENTER_CR", "TAB", "ESC", "q", "é"])

    def test_unknown_scan_code_is_dropped(self) -> None:
        self.assertEqual(_read_all("\x00;", 1), [""])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        console = FakeConsole("x", ready=False)
        self.assertEqual(read_console_key(0, timeout_ms=0, console=console), "")


class WindowsConsoleControllerTests(unittest.TestCase):
    def test_enter_and_restore_switch_console_modes(self) -> None:
        kernel32 = FakeKernel32()
        with mock.patch("kittyfs.runtime.terminal.os.write") as write_mock:
            controller = WindowsConsoleController(0, 1, kernel32=kernel32)
            with controller.raw_mode():
                pass

        self.assertEqual(
            kernel32.calls,
            [
                ("mode", STD_INPUT_HANDLE, 0x01F7 & ~ENABLE_PROCESSED_INPUT),
                ("mode", STD_OUTPUT_HANDLE, 0x0003 | ENABLE_VIRTUAL_TERMINAL_PROCESSING),
                ("cp", 65001),
                ("cp", 437),
                ("mode", STD_OUTPUT_HANDLE, 0x0003),
                ("mode", STD_INPUT_HANDLE, 0x01F7),
            ],
        )
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h\x1b[?1049l"))

    def test_detached_console_raises_at_construction(self) -> None:
        with self.assertRaises(OSError):
            WindowsConsoleController(0, 1, kernel32=FakeKernel32(attached=False))

    def test_open_terminal_picks_backend_by_platform(self) -> None:
        with mock.patch("kittyfs.runtime.terminal.WindowsConsoleController") as windows_cls:
            self.assertIs(open_terminal(0, 1, os_name="nt"), windows_cls.return_value)
        with mock.patch("kittyfs.runtime.terminal.termios.tcgetattr", return_value=[0]):
            self.assertIsInstance(open_terminal(0, 1, os_name="posix"), TerminalController)


if __name__ == "__main__":
    unittest.main()
