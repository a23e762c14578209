"""Minimal Textual adapter that wires ModeManager dispatch into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from rogue_engine.actions.game_actions import GameActions
from rogue_engine.modes import ControlInstruction, ModeManager
from rogue_engine.runtime import telemetry

# Textual key names that differ from the engine's key vocabulary
TEXTUAL_KEY_NAMES: Dict[str, str] = {
    "up": "arrowup",
    "down": "arrowdown",
    "left": "arrowleft",
    "right": "arrowright",
    "escape": "escape",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_prompt: Callable[[str], None]
    update_controls: Callable[[Sequence[ControlInstruction]], None] = _noop
    update_choices: Callable[[Sequence[str]], None] = _noop
    show_messages: Callable[[Sequence[str]], None] = _noop
    update_map: Callable[[Sequence[str]], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


def translate_key(key: str, character: Optional[str] = None) -> Optional[str]:
    """Map a Textual key event onto the engine's key names.

    Returns ``None`` for keys the engine has no name for (function keys,
    modifier chords, ...).
    """

    if key in TEXTUAL_KEY_NAMES:
        return TEXTUAL_KEY_NAMES[key]
    if character and len(character) == 1 and character.isprintable():
        return character
    if len(key) == 1:
        return key
    return None


class TextualGameAdapter:
    """Bridges ModeManager + GameActions to a Textual-friendly surface."""

    def __init__(
        self,
        manager: ModeManager,
        actions: GameActions,
        hooks: TextualUIHooks,
    ) -> None:
        self.manager = manager
        self.actions = actions
        self.hooks = hooks
        self.logger = telemetry.get_logger("rogue_engine.adapters.textual")
        manager.on_mode_change = self._on_mode_change
        self.refresh()

    def handle_textual_key(self, key: str, character: Optional[str] = None) -> bool:
        """Translate a Textual key event and dispatch it to the active mode."""

        translated = translate_key(key, character)
        if translated is None:
            self._log_state("ignored ->", key=key)
            return False

        self._log_state("key ->", key=translated)
        handled = self.manager.handle_input(translated, self.actions)
        if not handled:
            self.logger.debug(
                "Invalid input '%s' in %s mode", translated, self.manager.current_mode
            )
        self.refresh()
        self._log_state("result <-", handled=handled)
        return handled

    def refresh(self) -> None:
        self._refresh_mode()
        state = self.actions.state
        self.hooks.show_messages(state.recent_messages())
        self.hooks.update_map(state.render())

    def _on_mode_change(self) -> None:
        self._log_state("mode ->")
        self._refresh_mode()

    def _refresh_mode(self) -> None:
        self.hooks.update_prompt(self.manager.get_mode_display_text() or "")
        self.hooks.update_controls(self.manager.get_mode_control_instructions())
        context = self.manager.get_action_context()
        choice_lines = getattr(context, "choice_lines", None)
        self.hooks.update_choices(choice_lines() if callable(choice_lines) else [])

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.manager.get_action_context()
        state = self.actions.state
        return {
            "mode": self.manager.current_mode,
            "context": type(context).__name__ if context is not None else None,
            "position": state.position,
            "turns": state.turns,
            "hp": state.player.current_hp,
        }


__all__ = ["TEXTUAL_KEY_NAMES", "TextualGameAdapter", "TextualUIHooks", "translate_key"]
