"""Default mode: free movement and the keys that start multi-step actions."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Sequence

from rogue_engine.actions.facade import ActionsFacade
from rogue_engine.keymaps import Binding

from .base_mode import DIRECTIONAL_MODE, NUMERIC_MODE, ControlInstruction, Mode
from .contexts import (
    ActionContext,
    ConsumeContext,
    DropContext,
    EquipSelectionContext,
    PickupContext,
    RemoveContext,
    UseContext,
)

if TYPE_CHECKING:
    from .mode_manager import ModeManager

CommandHandler = Callable[[Binding, ActionsFacade, "ModeManager"], None]


def _select_or_prompt(
    manager: ModeManager,
    items: Sequence[Any],
    context_cls: Callable[[Sequence[Any]], ActionContext],
    *,
    act_on_single: Callable[[], object],
    on_empty: Callable[[], object],
) -> None:
    if not items:
        on_empty()
    elif len(items) == 1:
        act_on_single()
    else:
        manager.set_mode(NUMERIC_MODE, context_cls(items))


def _move(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del manager
    actions.move_player(int(binding.args["dx"]), int(binding.args["dy"]))


def _pickup(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding
    # pick_up_item reports "nothing to pick up" on its own when empty
    _select_or_prompt(
        manager,
        actions.get_available_items(),
        PickupContext,
        act_on_single=actions.pick_up_item,
        on_empty=actions.pick_up_item,
    )


def _use(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding, actions
    manager.set_mode(DIRECTIONAL_MODE, UseContext())


def _equip(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding
    _select_or_prompt(
        manager,
        actions.get_available_equipment(),
        EquipSelectionContext,
        act_on_single=partial(actions.equip_item_by_index, 0, manager),
        on_empty=partial(actions.show_message, "You have no equipment to equip."),
    )


def _remove(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding
    _select_or_prompt(
        manager,
        actions.get_equipped_items(),
        RemoveContext,
        act_on_single=partial(actions.remove_equipment_by_index, 0),
        on_empty=partial(actions.show_message, "You have no equipment to remove."),
    )


def _drop(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding
    _select_or_prompt(
        manager,
        actions.get_inventory_items(),
        DropContext,
        act_on_single=partial(actions.drop_item_from_inventory, 0),
        on_empty=partial(actions.show_message, "You have nothing to drop."),
    )


def _consume(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding
    _select_or_prompt(
        manager,
        actions.get_consumable_items(),
        ConsumeContext,
        act_on_single=partial(actions.consume_item_by_index, 0),
        on_empty=partial(actions.show_message, "You have nothing to consume."),
    )


def _noop(binding: Binding, actions: ActionsFacade, manager: ModeManager) -> None:
    del binding, actions, manager


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "move": _move,
    "pickup": _pickup,
    "use": _use,
    "equip": _equip,
    "remove": _remove,
    "drop": _drop,
    "consume": _consume,
    "noop": _noop,
}


class DefaultMode(Mode):
    name = "default"

    def handle_input(
        self,
        key: str,
        context: Optional[ActionContext],
        actions: ActionsFacade,
        manager: ModeManager,
    ) -> bool:
        del context
        binding = self.binding_for(key)
        if binding is None:
            return False
        handler = _COMMAND_HANDLERS.get(binding.command)
        if handler is None:
            self.logger.warning(
                "No handler for command '%s' (binding %s)", binding.command, binding.id
            )
            return False
        handler(binding, actions, manager)
        return True

    def get_display_text(self, context: Optional[ActionContext]) -> Optional[str]:
        del context
        return "What would you like to do?"

    def get_control_instructions(
        self, context: Optional[ActionContext]
    ) -> list[ControlInstruction]:
        del context
        instructions = [ControlInstruction("Movement:", "WASD, QEZC or Arrow Keys")]
        for binding in self.keymap.iter_bindings(self.name):
            if binding.command in {"move", "noop"}:
                continue
            instructions.append(
                ControlInstruction(f"{binding.key.upper()}:", binding.description)
            )
        return instructions


__all__ = ["DefaultMode"]
