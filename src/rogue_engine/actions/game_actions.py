"""Concrete actions facade operating on a ``GameState``."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from rogue_engine.modes.base_mode import NUMERIC_MODE, YN_MODE
from rogue_engine.modes.contexts import (
    DropEquipmentContext,
    EquipConfirmContext,
    PlaceInContainerContext,
    WeaponReplaceContext,
)
from rogue_engine.runtime import telemetry
from rogue_engine.world import (
    AvailableItem,
    EquippedEntry,
    Furniture,
    GameState,
    Item,
)

from .outcome import ActionOutcome

if TYPE_CHECKING:
    from rogue_engine.modes.mode_manager import ModeManager

COMPLETED = ActionOutcome.COMPLETED
TRANSITIONED = ActionOutcome.TRANSITIONED
FAILED = ActionOutcome.FAILED

WEAPON_SLOTS: tuple[str, str] = ("weapon1", "weapon2")


class GameActions:
    """Game rules invoked by the interaction modes.

    Every domain failure is reported through the message log and answered
    with ``FAILED``. Operations that hand control to another prompt set the
    mode on the manager themselves and answer ``TRANSITIONED``.
    """

    def __init__(self, state: GameState, manager: "ModeManager") -> None:
        self.state = state
        self.manager = manager
        self.logger = telemetry.get_logger("rogue_engine.actions")

    # -- messages ---------------------------------------------------------

    def show_message(self, text: str) -> None:
        self.state.add_message(text)

    # -- movement and furniture -------------------------------------------

    def move_player(self, dx: int, dy: int) -> ActionOutcome:
        state = self.state
        level = state.level
        x, y = state.x + dx, state.y + dy

        if not level.is_passable(x, y):
            blocker = level.furniture_at(x, y)
            if blocker is not None:
                self.show_message(f"You can't move through the {blocker.name}!")
            else:
                self.show_message("You can't move there!")
            return FAILED

        state.move_to(x, y)
        state.turns += 1
        self.show_message(f"Moved to ({x}, {y})")

        names = [placed.item.name for placed in level.items_at(x, y)]
        if len(names) == 1:
            self.show_message(f"You see a {names[0]} here.")
        elif names:
            self.show_message(f"You see: {', '.join(names)}")

        furniture = level.furniture_at(x, y)
        if furniture is not None:
            message = f"You see a {furniture.describe()}."
            if furniture.is_container and furniture.is_open:
                message += self._contents_suffix(furniture, lead="It contains:")
            self.show_message(message)
        return COMPLETED

    def use_furniture(self, dx: int, dy: int) -> ActionOutcome:
        furniture = self.state.level.furniture_at(self.state.x + dx, self.state.y + dy)
        if furniture is None:
            self.show_message("There's nothing to use there.")
            return FAILED
        if not furniture.is_usable:
            self.show_message(f"You can't use the {furniture.name}.")
            return FAILED
        if not furniture.is_stateful:
            self.show_message(f"You don't know how to use the {furniture.name}.")
            return FAILED
        if not furniture.toggle_state():
            self.show_message(f"You can't toggle the {furniture.name}.")
            return FAILED

        verb = "opened" if furniture.is_open else "closed"
        message = f"You {verb} the {furniture.name}."
        if furniture.is_container:
            message += f" {furniture.container_status()}"
            if furniture.is_open:
                message += self._contents_suffix(furniture, lead="You see:")
        self.show_message(message)
        return COMPLETED

    # -- picking up -------------------------------------------------------

    def get_available_items(self) -> List[AvailableItem]:
        state = self.state
        available = [
            AvailableItem(item=placed.item, source="ground", placed=placed)
            for placed in state.level.items_at(state.x, state.y)
        ]
        container = self._open_container_here()
        if container is not None:
            available.extend(
                AvailableItem(
                    item=item,
                    source="container",
                    container_name=container.name,
                    container_index=index,
                )
                for index, item in enumerate(container.contents)
            )
        return available

    def pick_up_item(self) -> ActionOutcome:
        """Pick up the first thing here: ground items before container contents."""

        player = self.state.player
        if not player.can_add_to_inventory():
            self.show_message("Can't pick anything else up. Inventory is full.")
            return FAILED

        ground = self.state.level.items_at(self.state.x, self.state.y)
        if ground:
            placed = ground[0]
            player.add_to_inventory(placed.item)
            self.state.level.remove_item(placed)
            self.show_message(f"Picked up {placed.item.name}!")
            return COMPLETED

        container = self._open_container_here()
        if container is None:
            self.show_message("There's nothing to pick up.")
            return FAILED
        item = container.remove_item(0)
        if item is None:
            self.show_message(f"The {container.name} is empty.")
            return FAILED
        player.add_to_inventory(item)
        self.show_message(f"Took {item.name} from the {container.name}.")
        return COMPLETED

    def pick_up_item_by_index(self, index: int) -> ActionOutcome:
        available = self.get_available_items()
        if not 0 <= index < len(available):
            self.show_message("Invalid item selection.")
            return FAILED
        if not self.state.player.can_add_to_inventory():
            self.show_message("Can't pick anything else up. Inventory is full.")
            return FAILED

        selected = available[index]
        if selected.source == "ground" and selected.placed is not None:
            self.state.level.remove_item(selected.placed)
            self.state.player.add_to_inventory(selected.item)
            self.show_message(f"Picked up {selected.name}!")
            return COMPLETED

        container = self._open_container_here()
        if container is None or selected.container_index is None:
            self.show_message("Invalid item selection.")
            return FAILED
        container.remove_item(selected.container_index)
        self.state.player.add_to_inventory(selected.item)
        self.show_message(f"Took {selected.name} from the {selected.container_name}.")
        return COMPLETED

    # -- equipping --------------------------------------------------------

    def get_available_equipment(self) -> List[Item]:
        # rings are never offered here
        return [
            item
            for item in self.state.player.inventory
            if item.is_equipment and item.slot != "rings"
        ]

    def equip_item_by_index(
        self, index: int, manager: Optional["ModeManager"] = None
    ) -> ActionOutcome:
        # later prompts (replace_weapon) read their context from this manager
        if manager is not None:
            self.manager = manager
        manager = self.manager
        equipment = self.get_available_equipment()
        if not 0 <= index < len(equipment):
            self.show_message("Invalid equipment selection.")
            return FAILED

        item = equipment[index]
        player = self.state.player
        if item.slot == "weapon":
            for slot in WEAPON_SLOTS:
                if player.equipment[slot] is None:
                    return self._equip_directly(item, slot)
            weapons = [
                EquippedEntry(item=player.equipment[slot], slot=slot)
                for slot in WEAPON_SLOTS
            ]
            manager.set_mode(NUMERIC_MODE, WeaponReplaceContext(item, weapons))
            return TRANSITIONED

        slot = str(item.slot)
        existing = player.equipment.get(slot)
        if existing is not None:
            manager.set_mode(
                YN_MODE,
                EquipConfirmContext(
                    item_index=index, new_item=item, existing_item=existing, slot=slot
                ),
            )
            return TRANSITIONED
        return self._equip_directly(item, slot)

    def equip_item_with_replacement(
        self, index: int, existing_item: Optional[Item], slot: str
    ) -> ActionOutcome:
        equipment = self.get_available_equipment()
        if not 0 <= index < len(equipment):
            self.show_message("Invalid equipment selection.")
            return FAILED
        item = equipment[index]
        if existing_item is not None:
            self._stow_unequipped(slot)
        return self._equip_directly(item, slot)

    def replace_weapon(self, index: int) -> ActionOutcome:
        context = self.manager.get_action_context()
        if not isinstance(context, WeaponReplaceContext):
            self.show_message("Invalid weapon replacement context.")
            return FAILED
        if not 0 <= index < len(context.weapons):
            self.show_message("Invalid weapon selection.")
            return FAILED

        entry = context.weapons[index]
        self._stow_unequipped(entry.slot)
        return self._equip_directly(context.new_item, entry.slot)

    # -- removing ---------------------------------------------------------

    def get_equipped_items(self) -> List[EquippedEntry]:
        return self.state.player.equipped_items()

    def remove_equipment_by_index(self, index: int) -> ActionOutcome:
        equipped = self.get_equipped_items()
        if not 0 <= index < len(equipped):
            self.show_message("Invalid equipment selection.")
            return FAILED

        entry = equipped[index]
        player = self.state.player
        if not player.can_add_to_inventory():
            self.manager.set_mode(
                YN_MODE,
                DropEquipmentContext(
                    item=entry.item, slot=entry.slot, ring_index=entry.ring_index
                ),
            )
            return TRANSITIONED

        item = player.unequip(entry.slot, entry.ring_index)
        if item is None:
            return FAILED
        player.add_to_inventory(item)
        self.show_message(f"Removed {item.name} and added to inventory.")
        return COMPLETED

    def remove_equipment_with_drop(
        self, item: Item, slot: str, ring_index: Optional[int]
    ) -> ActionOutcome:
        del item
        removed = self.state.player.unequip(slot, ring_index)
        if removed is None:
            self.show_message("There is nothing equipped there.")
            return FAILED
        self._drop_here(removed)
        self.show_message(f"Removed {removed.name} and dropped it on the ground.")
        return COMPLETED

    # -- dropping ---------------------------------------------------------

    def get_inventory_items(self) -> List[Item]:
        return list(self.state.player.inventory)

    def drop_item_from_inventory(self, index: int) -> ActionOutcome:
        inventory = self.state.player.inventory
        if not 0 <= index < len(inventory):
            self.show_message("Invalid item selection.")
            return FAILED

        item = inventory[index]
        furniture = self.state.level.furniture_at(self.state.x, self.state.y)
        if furniture is not None and furniture.is_container:
            self.manager.set_mode(
                YN_MODE,
                PlaceInContainerContext(item=item, item_index=index, furniture=furniture),
            )
            return TRANSITIONED
        return self.drop_item_with_container_check(item, index, None)

    def drop_item_with_container_check(
        self, item: Item, index: int, furniture: Optional[Furniture]
    ) -> ActionOutcome:
        del item
        removed = self.state.player.remove_from_inventory(index)
        if removed is None:
            self.show_message("Failed to remove item from inventory.")
            return FAILED

        if furniture is not None and furniture.is_container:
            if furniture.add_item(removed):
                self.show_message(f"Placed {removed.name} in {furniture.name}.")
                return COMPLETED
            self._drop_here(removed)
            self.show_message(
                f"The {furniture.name} is full. Dropped {removed.name} on the ground."
            )
            return COMPLETED

        self._drop_here(removed)
        self.show_message(f"Dropped {removed.name} on the ground.")
        return COMPLETED

    # -- consuming --------------------------------------------------------

    def get_consumable_items(self) -> List[Item]:
        return [item for item in self.state.player.inventory if item.is_consumable]

    def consume_item_by_index(self, index: int) -> ActionOutcome:
        consumables = self.get_consumable_items()
        if not 0 <= index < len(consumables):
            self.show_message("Invalid consumable selection.")
            return FAILED

        item = consumables[index]
        amount = item.heal_amount or 0
        self.state.player.heal(amount)
        self.state.player.discard(item)
        self.show_message(f"Consumed {item.name} and healed {amount} HP!")
        return COMPLETED

    # -- helpers ----------------------------------------------------------

    def _equip_directly(self, item: Item, slot: str) -> ActionOutcome:
        player = self.state.player
        player.discard(item)
        if not player.equip(item, slot):
            player.add_to_inventory(item)
            self.show_message(f"Failed to equip {item.name}.")
            return FAILED
        self.show_message(f"Equipped {item.name} in {slot} slot.")
        return COMPLETED

    def _stow_unequipped(self, slot: str) -> None:
        player = self.state.player
        removed = player.unequip(slot)
        if removed is None:
            return
        if player.add_to_inventory(removed):
            self.show_message(f"Unequipped {removed.name} and added to inventory.")
        else:
            self._drop_here(removed)
            self.show_message(
                f"Unequipped {removed.name} (inventory full, item dropped)."
            )

    def _drop_here(self, item: Item) -> None:
        self.state.level.add_item(self.state.x, self.state.y, item)

    def _open_container_here(self) -> Optional[Furniture]:
        furniture = self.state.level.furniture_at(self.state.x, self.state.y)
        if furniture is not None and furniture.is_container and furniture.is_open:
            return furniture
        return None

    @staticmethod
    def _contents_suffix(furniture: Furniture, *, lead: str) -> str:
        if furniture.contents:
            return f" {lead} {', '.join(item.name for item in furniture.contents)}"
        return " It is empty."


__all__ = ["GameActions", "WEAPON_SLOTS"]
