"""Execution of effect requests returned by navigation transitions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..navigation import Effect, OpenDefault, QuitRequested, RevealInFileManager, SaveTheme
from ..ui_theme import Theme


@dataclass(frozen=True)
class EffectHandlers:
    """Injected outside-world operations, one per effect kind."""

    save_theme: Callable[[Theme], None]
    open_default: Callable[[str], object]
    reveal_in_file_manager: Callable[[str], object]


def execute_effects(effects: Iterable[Effect], handlers: EffectHandlers) -> bool:
    """Run each effect once, in order; return ``True`` when quitting was requested."""
    should_quit = False
    for effect in effects:
        if isinstance(effect, SaveTheme):
            handlers.save_theme(effect.theme)
        elif isinstance(effect, OpenDefault):
            handlers.open_default(effect.path)
        elif isinstance(effect, RevealInFileManager):
            handlers.reveal_in_file_manager(effect.path)
        elif isinstance(effect, QuitRequested):
            should_quit = True
    return should_quit


def default_effect_handlers() -> EffectHandlers:
    from ..launcher import open_default, reveal_in_file_manager
    from .config import save_theme

    return EffectHandlers(
        save_theme=save_theme,
        open_default=open_default,
        reveal_in_file_manager=reveal_in_file_manager,
    )
