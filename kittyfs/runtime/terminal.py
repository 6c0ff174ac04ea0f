"""Raw terminal session for the browser panel.

The panel draws on the alternate screen with the cursor hidden. Leaving the
session always brings back the shell screen and the saved terminal modes.
POSIX terminals go through ``termios``; the Windows console through
``kernel32`` console modes with VT sequence processing switched on.
"""

from __future__ import annotations

import contextlib
import ctypes
import os

if os.name != "nt":
    import termios
    import tty

ALT_SCREEN_ON = "\x1b[?1049h"
ALT_SCREEN_OFF = "\x1b[?1049l"
CURSOR_HIDE = "\x1b[?25l"
CURSOR_SHOW = "\x1b[?25h"

STD_INPUT_HANDLE = -10
STD_OUTPUT_HANDLE = -11
ENABLE_PROCESSED_INPUT = 0x0001
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
UTF8_CODE_PAGE = 65001


class PanelSession:
    """Enter/restore pair shared by the platform controllers."""

    stdout_fd: int

    def _emit(self, *codes: str) -> None:
        os.write(self.stdout_fd, "".join(codes).encode("ascii"))

    def enter(self) -> None:
        raise NotImplementedError

    def restore(self) -> None:
        raise NotImplementedError

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the enclosed block inside the panel session."""
        try:
            self.enter()
            yield self
        finally:
            self.restore()


class TerminalController(PanelSession):
    """Raw-mode session bound to one input and one output descriptor.

    Construction snapshots the input tty attributes, so a stdin that is not a
    terminal fails here with ``termios.error`` before anything is drawn.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._original_attrs = termios.tcgetattr(stdin_fd)

    def enter(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._emit(ALT_SCREEN_ON, CURSOR_HIDE)

    def restore(self) -> None:
        self._emit(CURSOR_SHOW, ALT_SCREEN_OFF)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._original_attrs)


class WindowsConsoleController(PanelSession):
    """Console-mode session for the Windows console host.

    Ctrl+C is turned into an ordinary key (processed input off) and output
    switches to UTF-8 with VT escape handling. Raises ``OSError`` when stdout
    is not attached to a console.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int, kernel32=None) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._kernel32 = kernel32 if kernel32 is not None else ctypes.windll.kernel32
        self._in_handle = self._kernel32.GetStdHandle(STD_INPUT_HANDLE)
        self._out_handle = self._kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
        self._original_in_mode = self._console_mode(self._in_handle)
        self._original_out_mode = self._console_mode(self._out_handle)
        self._original_code_page = self._kernel32.GetConsoleOutputCP()

    def _console_mode(self, handle) -> int:
        mode = ctypes.c_uint32()
        if not self._kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            raise OSError("not attached to a Windows console")
        return mode.value

    def enter(self) -> None:
        self._kernel32.SetConsoleMode(self._in_handle, self._original_in_mode & ~ENABLE_PROCESSED_INPUT)
        self._kernel32.SetConsoleMode(self._out_handle, self._original_out_mode | ENABLE_VIRTUAL_TERMINAL_PROCESSING)
        self._kernel32.SetConsoleOutputCP(UTF8_CODE_PAGE)
        self._emit(ALT_SCREEN_ON, CURSOR_HIDE)

    def restore(self) -> None:
        self._emit(CURSOR_SHOW, ALT_SCREEN_OFF)
        self._kernel32.SetConsoleOutputCP(self._original_code_page)
        self._kernel32.SetConsoleMode(self._out_handle, self._original_out_mode)
        self._kernel32.SetConsoleMode(self._in_handle, self._original_in_mode)


def open_terminal(stdin_fd: int, stdout_fd: int, os_name: str | None = None) -> PanelSession:
    """Return the session controller for ``os_name`` (default: this platform)."""
    if (os.name if os_name is None else os_name) == "nt":
        return WindowsConsoleController(stdin_fd, stdout_fd)
    return TerminalController(stdin_fd, stdout_fd)


__all__ = ["PanelSession", "TerminalController", "WindowsConsoleController", "open_terminal"]
