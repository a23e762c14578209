"""Numeric mode: picks an entry from the list carried by the context."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from rogue_engine.actions.facade import ActionsFacade
from rogue_engine.actions.outcome import ActionOutcome

from .base_mode import ControlInstruction, Mode
from .contexts import (
    ActionContext,
    ConsumeContext,
    DropContext,
    EquipSelectionContext,
    PickupContext,
    RemoveContext,
    WeaponReplaceContext,
)

if TYPE_CHECKING:
    from .mode_manager import ModeManager

_DISPLAY_TEXT: Dict[type, str] = {
    PickupContext: "Pick up - What would you like to pick up?",
    EquipSelectionContext: "Equip - What would you like to equip?",
    WeaponReplaceContext: "Replace weapon - Which weapon would you like to replace?",
    RemoveContext: "Remove equipment - What would you like to remove?",
    DropContext: "Drop - What would you like to drop?",
    ConsumeContext: "Consume - What would you like to consume?",
}


def _selection_operation(
    context: Optional[ActionContext], actions: ActionsFacade, manager: "ModeManager"
) -> Optional[Callable[[int], Any]]:
    if isinstance(context, PickupContext):
        return actions.pick_up_item_by_index
    if isinstance(context, EquipSelectionContext):
        return partial(actions.equip_item_by_index, manager=manager)
    if isinstance(context, WeaponReplaceContext):
        return actions.replace_weapon
    if isinstance(context, RemoveContext):
        return actions.remove_equipment_by_index
    if isinstance(context, DropContext):
        return actions.drop_item_from_inventory
    if isinstance(context, ConsumeContext):
        return actions.consume_item_by_index
    return None


class NumericMode(Mode):
    """Digits 0-9 select an entry; escape cancels.

    A selection that fails (out of range, full inventory, ...) keeps the menu
    open. A selection whose facade call opened another prompt leaves that
    prompt in place.
    """

    name = "numeric"
    context_types = (
        PickupContext,
        EquipSelectionContext,
        WeaponReplaceContext,
        RemoveContext,
        DropContext,
        ConsumeContext,
    )

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

        operation = _selection_operation(context, actions, manager)
        if operation is None:
            self.logger.debug("Selection %s ignored without a pending action", key)
            return False

        outcome = self.invoke(manager, operation, int(binding.args["index"]))
        if outcome is ActionOutcome.COMPLETED:
            manager.reset_to_default()
        return True

    def get_display_text(self, context: Optional[ActionContext]) -> Optional[str]:
        if context is None:
            return "Choose item"
        return _DISPLAY_TEXT.get(type(context), "Choose item")

    def get_control_instructions(
        self, context: Optional[ActionContext]
    ) -> list[ControlInstruction]:
        action = getattr(context, "action", None) or "item"
        return [
            ControlInstruction(f"Choose {action.replace('_', ' ')}:", "0-9"),
            ControlInstruction("ESC:", "Cancel"),
        ]


__all__ = ["NumericMode"]
