"""Mode manager owning the active mode and its action context."""

from __future__ import annotations

from typing import Callable, Optional

from rogue_engine.actions.facade import ActionsFacade
from rogue_engine.keymaps import normalize_key
from rogue_engine.runtime import telemetry

from .base_mode import DEFAULT_MODE, ControlInstruction, Mode
from .contexts import ActionContext
from .registry import ModeRegistry, UnknownModeError, create_default_registry


class ModeManager:
    """Owns the ``(mode, context)`` pair and dispatches keys to the active mode.

    Mode instances are created lazily from the registry and cached until the
    next transition. ``transition_count`` increases on every transition, which
    lets a mode tell whether a facade call it made moved the manager elsewhere.
    """

    def __init__(
        self,
        registry: ModeRegistry | None = None,
        *,
        on_mode_change: Callable[[], None] | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.on_mode_change = on_mode_change
        self.logger = telemetry.get_logger("rogue_engine.modes")
        self._current = DEFAULT_MODE
        self._context: Optional[ActionContext] = None
        self._instance: Optional[Mode] = None
        self._transition_count = 0

    @property
    def current_mode(self) -> str:
        return self._current

    @property
    def action_context(self) -> Optional[ActionContext]:
        return self._context

    @property
    def transition_count(self) -> int:
        return self._transition_count

    def get_current_mode(self) -> str:
        return self._current

    def get_action_context(self) -> Optional[ActionContext]:
        return self._context

    def is_in_special_mode(self) -> bool:
        return self._current != DEFAULT_MODE

    def set_mode(self, name: str, context: Optional[ActionContext] = None) -> None:
        if name == DEFAULT_MODE and context is not None:
            raise ValueError("The default mode does not take an action context")
        previous = self._current
        self._current = name
        self._context = context
        self._instance = None
        self._transition_count += 1
        telemetry.record_event(
            "mode.switch",
            level="debug",
            data={
                "mode": name,
                "previous": previous,
                "context": type(context).__name__ if context is not None else None,
            },
            logger_name="rogue_engine.modes",
        )
        if self.on_mode_change is not None:
            self.on_mode_change()

    def reset_to_default(self) -> None:
        self.set_mode(DEFAULT_MODE)

    def handle_input(self, key: str, actions: ActionsFacade) -> bool:
        try:
            normalized = normalize_key(key)
        except ValueError:
            return False

        mode = self._active_mode()
        if mode is None:
            return False
        if not mode.accepts_context(self._context):
            self.logger.error(
                "Mode '%s' cannot handle context %s",
                mode.name,
                type(self._context).__name__,
            )
            return False
        if not mode.is_valid_key(normalized):
            return False

        with telemetry.span(
            name=f"mode::{mode.name}",
            logger_name="rogue_engine.modes",
            component=True,
            metadata={"key": normalized, "mode": mode.name},
        ):
            return mode.handle_input(normalized, self._context, actions, self)

    def get_mode_display_text(self) -> Optional[str]:
        mode = self._active_mode()
        if mode is None:
            return None
        return mode.get_display_text(self._context)

    def get_mode_control_instructions(self) -> list[ControlInstruction]:
        mode = self._active_mode()
        if mode is None:
            return []
        return mode.get_control_instructions(self._context)

    def _active_mode(self) -> Optional[Mode]:
        if self._instance is None:
            try:
                self._instance = self.registry.get_mode(self._current)
            except UnknownModeError:
                self.logger.error("Unknown mode '%s'", self._current)
                return None
        return self._instance


__all__ = ["ModeManager"]
