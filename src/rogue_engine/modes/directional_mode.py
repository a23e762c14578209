"""Directional mode: waits for a direction to aim the pending action at."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rogue_engine.actions.facade import ActionsFacade
from rogue_engine.actions.outcome import ActionOutcome

from .base_mode import ControlInstruction, Mode
from .contexts import ActionContext, UseContext

if TYPE_CHECKING:
    from .mode_manager import ModeManager


class DirectionalMode(Mode):
    name = "directional"
    context_types = (UseContext,)

    def handle_input(
        self,
        key: str,
        context: Optional[ActionContext],
        actions: ActionsFacade,
        manager: "ModeManager",
    ) -> bool:
        binding = self.binding_for(key)
        if binding is None:
            return False
        if binding.command == "cancel":
            manager.reset_to_default()
            return True
        if not isinstance(context, UseContext):
            self.logger.debug("Direction %s ignored without a pending action", key)
            return False

        dx, dy = int(binding.args["dx"]), int(binding.args["dy"])
        outcome = self.invoke(manager, actions.use_furniture, dx, dy)
        # a failed use keeps the prompt open so another direction can be tried
        if outcome is ActionOutcome.COMPLETED:
            manager.reset_to_default()
        return True

    def get_display_text(self, context: Optional[ActionContext]) -> Optional[str]:
        if isinstance(context, UseContext):
            return "Use - What would you like to use?"
        return "Choose direction"

    def get_control_instructions(
        self, context: Optional[ActionContext]
    ) -> list[ControlInstruction]:
        del context
        return [
            ControlInstruction("Choose direction:", "WASD, QEZC, or Arrow Keys"),
            ControlInstruction("ESC:", "Cancel"),
        ]


__all__ = ["DirectionalMode"]
