"""Raw keyboard decoding.

Turns bytes read from a raw-mode tty into key tokens such as ``"UP"``,
``"ENTER_CR"`` or a single printable character. A lone ESC press is told
apart from an escape sequence by a short read timeout. On Windows the same
tokens come from the console input buffer through ``msvcrt``.
"""

from __future__ import annotations

import os
import select
import time
from collections import deque

if os.name == "nt":
    import msvcrt
else:
    msvcrt = None

ESC = b"\x1b"
ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_LENGTH = 8

# Bytes read past a lone ESC, replayed by the next read.
_PENDING_BYTES: deque[bytes] = deque()

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

# Windows console: special keys arrive as a prefix followed by a scan code.
CONSOLE_POLL_INTERVAL_S = 0.01
CONSOLE_SCAN_PREFIXES = ("\x00", "\xe0")
_CONSOLE_SCAN_KEYS: dict[str, str] = {
    "H": "UP",
    "P": "DOWN",
    "K": "LEFT",
    "M": "RIGHT",
    "G": "HOME",
    "O": "END",
    "I": "PGUP",
    "Q": "PGDN",
    "S": "DELETE",
}
_CONSOLE_CONTROL_KEYS: dict[str, str] = {
    key.decode("ascii"): token for key, token in _CONTROL_KEYS.items()
}
_CONSOLE_CONTROL_KEYS["\x1b"] = "ESC"

# Keyed by the bytes after ESC; the ``O`` forms come from application cursor mode.
_ESCAPE_SEQUENCES: dict[bytes, str] = {
    b"[A": "UP",
    b"[B": "DOWN",
    b"[C": "RIGHT",
    b"[D": "LEFT",
    b"[H": "HOME",
    b"[F": "END",
    b"OA": "UP",
    b"OB": "DOWN",
    b"OC": "RIGHT",
    b"OD": "LEFT",
    b"OH": "HOME",
    b"OF": "END",
    b"[1~": "HOME",
    b"[3~": "DELETE",
    b"[4~": "END",
    b"[5~": "PGUP",
    b"[6~": "PGDN",
    b"[7~": "HOME",
    b"[8~": "END",
}


def _next_byte(fd: int, timeout_ms: int | None) -> bytes:
    """Return one byte, or ``b""`` when nothing arrives within ``timeout_ms``."""
    if _PENDING_BYTES:
        return _PENDING_BYTES.popleft()
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return b""
    return os.read(fd, 1)


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_char(fd: int, lead: bytes) -> str:
    data = lead
    while len(data) < _utf8_length(lead[0]):
        more = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if not more:
            break
        data += more
    return data.decode("utf-8", errors="replace")


def _is_final_byte(byte: bytes) -> bool:
    return 0x40 <= byte[0] <= 0x7E


def _read_escape(fd: int) -> str:
    introducer = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if not introducer:
        return "ESC"
    if introducer not in (b"[", b"O"):
        _PENDING_BYTES.append(introducer)
        return "ESC"

    body = introducer
    while len(body) < MAX_SEQUENCE_LENGTH:
        more = _next_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if not more:
            break
        body += more
        if introducer == b"O" or _is_final_byte(more):
            break
    return _ESCAPE_SEQUENCES.get(body, "ESC")


def read_tty_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; ``""`` means no input before timeout."""
    lead = _next_byte(fd, timeout_ms)
    if not lead:
        return ""
    if lead == ESC:
        return _read_escape(fd)
    token = _CONTROL_KEYS.get(lead)
    return token if token is not None else _read_char(fd, lead)


def read_console_key(fd: int, timeout_ms: int | None = None, console=None) -> str:
    """Windows console counterpart of ``read_tty_key`` built on ``msvcrt``.

    ``fd`` is unused; the console input buffer is read directly.
    """
    console = msvcrt if console is None else console
    if timeout_ms is not None:
        deadline = time.monotonic() + timeout_ms / 1000.0
        while not console.kbhit():
            if time.monotonic() >= deadline:
                return ""
            time.sleep(CONSOLE_POLL_INTERVAL_S)

    ch = console.getwch()
    if ch in CONSOLE_SCAN_PREFIXES:
        return _CONSOLE_SCAN_KEYS.get(console.getwch(), "")
    token = _CONSOLE_CONTROL_KEYS.get(ch)
    return token if token is not None else ch


read_key = read_console_key if os.name == "nt" else read_tty_key


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "read_console_key", "read_key", "read_tty_key"]
