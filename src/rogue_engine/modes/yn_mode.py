"""Yes/no mode for confirmation prompts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from rogue_engine.actions.facade import ActionsFacade
from rogue_engine.actions.outcome import ActionOutcome

from .base_mode import ControlInstruction, Mode
from .contexts import (
    ActionContext,
    DropEquipmentContext,
    EquipConfirmContext,
    PlaceInContainerContext,
)

if TYPE_CHECKING:
    from .mode_manager import ModeManager


def _confirm_operation(
    context: Optional[ActionContext], actions: ActionsFacade
) -> Optional[Callable[[], Any]]:
    if isinstance(context, EquipConfirmContext):
        return lambda: actions.equip_item_with_replacement(
            context.item_index, context.existing_item, context.slot
        )
    if isinstance(context, DropEquipmentContext):
        return lambda: actions.remove_equipment_with_drop(
            context.item, context.slot, context.ring_index
        )
    if isinstance(context, PlaceInContainerContext):
        return lambda: actions.drop_item_with_container_check(
            context.item, context.item_index, context.furniture
        )
    return None


class YNMode(Mode):
    """Answers a confirmation prompt.

    ``n`` and escape abandon the prompt without calling the game. ``y`` runs
    the confirmed operation; unless that operation opened another prompt the
    player is returned to the default mode whether it succeeded or not, so a
    failed confirmation cannot trap the player in the prompt.
    """

    name = "yn"
    context_types = (EquipConfirmContext, DropEquipmentContext, PlaceInContainerContext)

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
        if binding.command in {"decline", "cancel"}:
            manager.reset_to_default()
            return True

        operation = _confirm_operation(context, actions)
        if operation is None:
            self.logger.debug("Confirmation ignored without a pending action")
            return False

        outcome = self.invoke(manager, operation)
        if outcome is not ActionOutcome.TRANSITIONED:
            manager.reset_to_default()
        return True

    def get_display_text(self, context: Optional[ActionContext]) -> Optional[str]:
        prompt = getattr(context, "prompt", None)
        if callable(prompt):
            return prompt()
        return "Yes or No?"

    def get_control_instructions(
        self, context: Optional[ActionContext]
    ) -> list[ControlInstruction]:
        del context
        return [
            ControlInstruction("Y:", "Yes"),
            ControlInstruction("N:", "No"),
            ControlInstruction("ESC:", "Cancel"),
        ]


__all__ = ["YNMode"]
