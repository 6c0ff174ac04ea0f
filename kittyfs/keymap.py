"""Key-token to navigation-event mapping.

Global shortcuts live in a ``KeyBindingTable``; every other token is
forwarded to the embedded list as ``ListInput``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .list_view import ListView
from .navigation import (
    Activate,
    CycleTheme,
    GoToParent,
    ListInput,
    NavigationEvent,
    Quit,
    RevealInExplorer,
    ToggleHelp,
)


@dataclass(frozen=True)
class KeyBinding:
    """Key tokens that all produce the same navigation event."""

    keys: tuple[str, ...]
    make_event: Callable[[], NavigationEvent]


class KeyBindingTable:
    """Lookup from key token to the event it triggers.

    A token may be bound only once; rebinding raises ``ValueError`` so two
    shortcuts can never silently shadow each other.
    """

    def __init__(self, bindings: Iterable[KeyBinding] = ()) -> None:
        self._by_key: dict[str, KeyBinding] = {}
        for binding in bindings:
            self.add(binding)

    def add(self, binding: KeyBinding) -> None:
        for key in binding.keys:
            if key in self._by_key:
                raise ValueError(f"key {key!r} is already bound")
            self._by_key[key] = binding

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def lookup(self, key: str) -> NavigationEvent | None:
        binding = self._by_key.get(key)
        return None if binding is None else binding.make_event()


GLOBAL_KEYS = KeyBindingTable(
    (
        KeyBinding(("q", "CTRL_C"), Quit),
        KeyBinding(("?",), ToggleHelp),
        KeyBinding(("ENTER",), Activate),
        KeyBinding(("BACKSPACE",), GoToParent),
        KeyBinding(("t",), CycleTheme),
        KeyBinding(("o",), RevealInExplorer),
    )
)

# Still honored while the filter prompt owns the keyboard.
PROMPT_ESCAPE_KEYS = frozenset({"CTRL_C"})


def event_for_key(key: str, entry_list: ListView) -> NavigationEvent:
    """Translate one key token into a navigation event.

    While the list filter prompt is open, keystrokes belong to the prompt and
    only ``CTRL_C`` keeps its global meaning.
    """
    if entry_list.filtering and key not in PROMPT_ESCAPE_KEYS:
        return ListInput(key)
    event = GLOBAL_KEYS.lookup(key)
    return ListInput(key) if event is None else event


__all__ = ["KeyBinding", "KeyBindingTable", "GLOBAL_KEYS", "PROMPT_ESCAPE_KEYS", "event_for_key"]
