"""Platform-dispatched launches of the default opener and file manager.

Launches are fire-and-forget: the child is never awaited and spawn failures
are logged, not raised.
"""

from __future__ import annotations

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


def open_command(path: str, platform: str | None = None) -> list[str]:
    """Return the argv that opens ``path`` with its default handler."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return ["rundll32", "url.dll,FileProtocolHandler", path]
    if platform == "darwin":
        return ["open", path]
    return ["xdg-open", path]


def reveal_command(path: str, platform: str | None = None) -> list[str]:
    """Return the argv that shows directory ``path`` in the file manager."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return ["explorer", path]
    if platform == "darwin":
        return ["open", path]
    return ["xdg-open", path]


def _spawn_detached(cmd: list[str]) -> bool:
    logger.debug("launching %s", cmd)
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=sys.platform != "win32",
        )
    except (OSError, ValueError) as exc:
        logger.debug("launch of %s failed: %s", cmd, exc)
        return False
    return True


def open_default(path: str) -> bool:
    return _spawn_detached(open_command(path))


def reveal_in_file_manager(path: str) -> bool:
    return _spawn_detached(reveal_command(path))


__all__ = ["open_command", "reveal_command", "open_default", "reveal_in_file_manager"]
