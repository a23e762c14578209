"""Base class and shared types for interaction modes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from rogue_engine.actions.facade import ActionsFacade
from rogue_engine.actions.outcome import ActionOutcome, resolve_outcome
from rogue_engine.keymaps import Binding, KeymapRegistry, default_keymap, normalize_key
from rogue_engine.runtime import telemetry

from .contexts import ActionContext

if TYPE_CHECKING:
    from .mode_manager import ModeManager

DEFAULT_MODE = "default"
DIRECTIONAL_MODE = "directional"
NUMERIC_MODE = "numeric"
YN_MODE = "yn"


@dataclass(frozen=True, slots=True)
class ControlInstruction:
    """One line of help text shown for the active mode."""

    label: str
    keys: str


class Mode(ABC):
    """Base class all interaction modes inherit from.

    Modes hold no state between key presses. The valid key set is captured
    from the keymap when the mode is created, so a mode instance always
    answers ``is_valid_key`` the same way.
    """

    name: str = "mode"
    context_types: tuple[type, ...] = ()

    def __init__(self, keymap: KeymapRegistry | None = None) -> None:
        self.keymap = keymap or default_keymap()
        self.valid_keys = self.keymap.keys(self.name)
        self.logger = telemetry.get_logger(f"rogue_engine.modes.{self.name}")

    def is_valid_key(self, key: str) -> bool:
        try:
            return normalize_key(key) in self.valid_keys
        except ValueError:
            return False

    def accepts_context(self, context: Optional[ActionContext]) -> bool:
        return context is None or isinstance(context, self.context_types)

    @abstractmethod
    def handle_input(
        self,
        key: str,
        context: Optional[ActionContext],
        actions: ActionsFacade,
        manager: "ModeManager",
    ) -> bool:
        """Run the action bound to ``key``; return whether it was handled."""

    def get_display_text(self, context: Optional[ActionContext]) -> Optional[str]:
        del context
        return None

    def get_control_instructions(
        self, context: Optional[ActionContext]
    ) -> list[ControlInstruction]:
        del context
        return []

    def binding_for(self, key: str) -> Optional[Binding]:
        if not self.is_valid_key(key):
            return None
        return self.keymap.lookup(self.name, key)

    def invoke(
        self,
        manager: "ModeManager",
        operation: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> ActionOutcome:
        """Call a facade operation and classify how it ended."""

        before = manager.transition_count
        result = operation(*args, **kwargs)
        return resolve_outcome(result, transitioned=manager.transition_count != before)


__all__ = [
    "ControlInstruction",
    "DEFAULT_MODE",
    "DIRECTIONAL_MODE",
    "Mode",
    "NUMERIC_MODE",
    "YN_MODE",
]
