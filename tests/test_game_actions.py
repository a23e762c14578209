from typing import Iterable, Tuple

from rogue_engine.actions import ActionOutcome
from rogue_engine.actions.game_actions import GameActions
from rogue_engine.modes import (
    DropEquipmentContext,
    EquipConfirmContext,
    ModeManager,
    PlaceInContainerContext,
    RemoveContext,
    WeaponReplaceContext,
)
from rogue_engine.runtime import GameSettings
from rogue_engine.world import DungeonLevel, Furniture, GameState, Item

ROWS = (
    "#######",
    "#.....#",
    "#.....#",
    "#.....#",
    "#######",
)


def make_session(
    *,
    inventory_size: int = 5,
    furniture: Iterable[Furniture] = (),
    start: Tuple[int, int] = (2, 2),
) -> Tuple[GameState, ModeManager, GameActions]:
    level = DungeonLevel(ROWS, furniture=furniture)
    state = GameState(level, start=start, settings=GameSettings(inventory_size=inventory_size))
    manager = ModeManager()
    return state, manager, GameActions(state, manager)


def make_chest(x: int, y: int, *, state: str = "closed", capacity: int = 5) -> Furniture:
    return Furniture(
        x=x,
        y=y,
        name="Chest",
        states=("closed", "open"),
        state=state,
        usable=True,
        container_capacity=capacity,
    )


def sword(name: str = "Short Sword") -> Item:
    return Item(name.lower().replace(" ", "_"), name, slot="weapon")


def last_message(state: GameState) -> str:
    return state.recent_messages(1)[0]


# -- movement -----------------------------------------------------------------


def test_move_player_into_wall_fails() -> None:
    state, _, actions = make_session(start=(1, 1))

    assert actions.move_player(-1, 0) is ActionOutcome.FAILED

    assert state.position == (1, 1)
    assert state.turns == 0
    assert last_message(state) == "You can't move there!"


def test_move_player_advances_turn_and_reports_items() -> None:
    state, _, actions = make_session()
    state.level.add_item(3, 2, sword())

    assert actions.move_player(1, 0) is ActionOutcome.COMPLETED

    assert state.position == (3, 2)
    assert state.turns == 1
    assert state.recent_messages(2) == ["Moved to (3, 2)", "You see a Short Sword here."]


def test_move_player_blocked_by_furniture() -> None:
    table = Furniture(x=3, y=2, name="Table", impassable=True)
    state, _, actions = make_session(furniture=[table])

    assert actions.move_player(1, 0) is ActionOutcome.FAILED

    assert last_message(state) == "You can't move through the Table!"


def test_closed_door_blocks_until_opened() -> None:
    door = Furniture(
        x=2,
        y=1,
        name="Door",
        states=("closed", "open"),
        impassable_when=("closed",),
        usable=True,
    )
    state, _, actions = make_session(furniture=[door])

    assert actions.move_player(0, -1) is ActionOutcome.FAILED
    assert actions.use_furniture(0, -1) is ActionOutcome.COMPLETED
    assert last_message(state) == "You opened the Door."
    assert actions.move_player(0, -1) is ActionOutcome.COMPLETED
    assert last_message(state) == "You see a Door (open)."


# -- furniture ------------------------------------------------------------------


def test_use_furniture_nothing_there() -> None:
    state, _, actions = make_session()

    assert actions.use_furniture(1, 0) is ActionOutcome.FAILED
    assert last_message(state) == "There's nothing to use there."


def test_use_furniture_not_usable() -> None:
    table = Furniture(x=3, y=2, name="Table", impassable=True)
    state, _, actions = make_session(furniture=[table])

    assert actions.use_furniture(1, 0) is ActionOutcome.FAILED
    assert last_message(state) == "You can't use the Table."


def test_opening_chest_lists_contents() -> None:
    chest = make_chest(3, 2)
    chest.add_item(Item("ring_gold", "Gold Ring", slot="rings"))
    state, _, actions = make_session(furniture=[chest])

    assert actions.use_furniture(1, 0) is ActionOutcome.COMPLETED

    assert chest.is_open
    assert last_message(state) == "You opened the Chest. (1/5 items) You see: Gold Ring"


# -- picking up -----------------------------------------------------------------


def test_pick_up_item_from_ground() -> None:
    state, _, actions = make_session()
    blade = sword()
    state.level.add_item(2, 2, blade)

    assert actions.pick_up_item() is ActionOutcome.COMPLETED

    assert state.player.inventory == [blade]
    assert state.level.items_at(2, 2) == []
    assert last_message(state) == "Picked up Short Sword!"


def test_pick_up_item_nothing_here() -> None:
    state, _, actions = make_session()

    assert actions.pick_up_item() is ActionOutcome.FAILED
    assert last_message(state) == "There's nothing to pick up."


def test_pick_up_with_full_inventory_fails() -> None:
    state, _, actions = make_session(inventory_size=1)
    state.player.add_to_inventory(sword("Dagger"))
    state.level.add_item(2, 2, sword())

    assert actions.pick_up_item() is ActionOutcome.FAILED
    assert last_message(state) == "Can't pick anything else up. Inventory is full."
    assert len(state.level.items_at(2, 2)) == 1


def test_available_items_include_open_container() -> None:
    chest = make_chest(2, 2, state="open")
    chest.add_item(Item("potion", "Minor Healing Potion", heal_amount=5))
    state, _, actions = make_session(furniture=[chest])
    state.level.add_item(2, 2, sword())

    available = actions.get_available_items()

    assert [entry.label for entry in available] == [
        "Short Sword",
        "Minor Healing Potion (Chest)",
    ]

    assert actions.pick_up_item_by_index(1) is ActionOutcome.COMPLETED
    assert chest.contents == []
    assert last_message(state) == "Took Minor Healing Potion from the Chest."


def test_pick_up_by_index_out_of_range() -> None:
    state, _, actions = make_session()

    assert actions.pick_up_item_by_index(3) is ActionOutcome.FAILED
    assert last_message(state) == "Invalid item selection."


# -- equipping ------------------------------------------------------------------


def test_weapons_fill_both_slots_then_ask_which_to_replace() -> None:
    state, manager, actions = make_session()
    first, second, third = sword("Short Sword"), sword("Dagger"), sword("Hand Axe")
    for item in (first, second, third):
        state.player.add_to_inventory(item)

    assert actions.equip_item_by_index(0) is ActionOutcome.COMPLETED
    assert actions.equip_item_by_index(0) is ActionOutcome.COMPLETED
    assert state.player.equipment["weapon1"] is first
    assert state.player.equipment["weapon2"] is second

    assert actions.equip_item_by_index(0, manager) is ActionOutcome.TRANSITIONED
    context = manager.get_action_context()
    assert manager.get_current_mode() == "numeric"
    assert isinstance(context, WeaponReplaceContext)
    assert context.new_item is third
    assert [entry.slot for entry in context.weapons] == ["weapon1", "weapon2"]

    assert actions.replace_weapon(0) is ActionOutcome.COMPLETED
    assert state.player.equipment["weapon1"] is third
    assert state.player.inventory == [first]


def test_replace_weapon_reads_the_manager_given_to_equip() -> None:
    state, manager, actions = make_session()
    first, second, third = sword("Short Sword"), sword("Dagger"), sword("Hand Axe")
    state.player.equip(first, "weapon1")
    state.player.equip(second, "weapon2")
    state.player.add_to_inventory(third)
    other = ModeManager()

    assert actions.equip_item_by_index(0, other) is ActionOutcome.TRANSITIONED
    assert other.get_current_mode() == "numeric"
    assert manager.get_current_mode() == "default"

    assert actions.replace_weapon(1) is ActionOutcome.COMPLETED
    assert state.player.equipment["weapon2"] is third
    assert state.player.inventory == [second]


def test_equip_into_occupied_slot_asks_for_confirmation() -> None:
    state, manager, actions = make_session()
    cap = Item("helm_leather", "Leather Cap", slot="head")
    helm = Item("helm_iron", "Iron Helm", slot="head")
    state.player.equip(cap, "head")
    state.player.add_to_inventory(helm)

    assert actions.equip_item_by_index(0) is ActionOutcome.TRANSITIONED

    context = manager.get_action_context()
    assert isinstance(context, EquipConfirmContext)
    assert context.existing_item is cap
    assert context.slot == "head"

    assert actions.equip_item_with_replacement(0, cap, "head") is ActionOutcome.COMPLETED
    assert state.player.equipment["head"] is helm
    assert state.player.inventory == [cap]


def test_rings_are_not_offered_for_equipping() -> None:
    state, _, actions = make_session()
    state.player.add_to_inventory(Item("ring_gold", "Gold Ring", slot="rings"))
    state.player.add_to_inventory(Item("helm_leather", "Leather Cap", slot="head"))

    assert [item.name for item in actions.get_available_equipment()] == ["Leather Cap"]


def test_replace_weapon_without_context_fails() -> None:
    state, _, actions = make_session()

    assert actions.replace_weapon(0) is ActionOutcome.FAILED
    assert last_message(state) == "Invalid weapon replacement context."


# -- removing ---------------------------------------------------------------------


def test_remove_equipment_returns_item_to_inventory() -> None:
    state, _, actions = make_session()
    cap = Item("helm_leather", "Leather Cap", slot="head")
    state.player.equip(cap, "head")

    assert actions.remove_equipment_by_index(0) is ActionOutcome.COMPLETED

    assert state.player.inventory == [cap]
    assert state.player.equipment["head"] is None


def test_remove_with_full_inventory_opens_drop_prompt() -> None:
    state, manager, actions = make_session(inventory_size=1)
    state.player.add_to_inventory(sword())
    ring = Item("ring_gold", "Gold Ring", slot="rings")
    state.player.equip(ring, "rings")

    assert actions.remove_equipment_by_index(0) is ActionOutcome.TRANSITIONED

    context = manager.get_action_context()
    assert manager.get_current_mode() == "yn"
    assert isinstance(context, DropEquipmentContext)
    assert (context.item, context.slot, context.ring_index) == (ring, "rings", 0)

    assert actions.remove_equipment_with_drop(ring, "rings", 0) is ActionOutcome.COMPLETED
    assert state.player.rings[0] is None
    assert [placed.item for placed in state.level.items_at(2, 2)] == [ring]


# -- dropping ---------------------------------------------------------------------


def test_drop_on_floor() -> None:
    state, _, actions = make_session()
    blade = sword()
    state.player.add_to_inventory(blade)

    assert actions.drop_item_from_inventory(0) is ActionOutcome.COMPLETED

    assert state.player.inventory == []
    assert [placed.item for placed in state.level.items_at(2, 2)] == [blade]
    assert last_message(state) == "Dropped Short Sword on the ground."


def test_drop_on_container_asks_to_place_item() -> None:
    chest = make_chest(2, 2, state="open")
    state, manager, actions = make_session(furniture=[chest])
    blade = sword()
    state.player.add_to_inventory(blade)

    assert actions.drop_item_from_inventory(0) is ActionOutcome.TRANSITIONED

    context = manager.get_action_context()
    assert isinstance(context, PlaceInContainerContext)
    assert context.furniture is chest

    assert actions.drop_item_with_container_check(blade, 0, chest) is ActionOutcome.COMPLETED
    assert chest.contents == [blade]
    assert last_message(state) == "Placed Short Sword in Chest."


def test_full_container_falls_back_to_floor() -> None:
    chest = make_chest(2, 2, capacity=0)
    state, _, actions = make_session(furniture=[chest])
    blade = sword()
    state.player.add_to_inventory(blade)

    assert actions.drop_item_with_container_check(blade, 0, chest) is ActionOutcome.COMPLETED

    assert chest.contents == []
    assert [placed.item for placed in state.level.items_at(2, 2)] == [blade]
    assert last_message(state) == "The Chest is full. Dropped Short Sword on the ground."


# -- consuming --------------------------------------------------------------------


def test_consume_heals_and_removes_item() -> None:
    state, _, actions = make_session()
    potion = Item("potion_minor", "Minor Healing Potion", heal_amount=5)
    state.player.add_to_inventory(sword())
    state.player.add_to_inventory(potion)
    state.player.current_hp = 4

    assert actions.consume_item_by_index(0) is ActionOutcome.COMPLETED

    assert state.player.current_hp == 9
    assert potion not in state.player.inventory
    assert last_message(state) == "Consumed Minor Healing Potion and healed 5 HP!"


def test_consume_invalid_index() -> None:
    state, _, actions = make_session()

    assert actions.consume_item_by_index(0) is ActionOutcome.FAILED
    assert last_message(state) == "Invalid consumable selection."


# -- through the mode manager -------------------------------------------------------


def test_use_then_direction_opens_door() -> None:
    door = Furniture(
        x=2, y=1, name="Door", states=("closed", "open"), impassable_when=("closed",), usable=True
    )
    state, manager, actions = make_session(furniture=[door])

    assert manager.handle_input("u", actions) is True
    assert manager.handle_input("w", actions) is True

    assert door.is_open
    assert manager.get_current_mode() == "default"
    assert last_message(state) == "You opened the Door."


def test_remove_with_full_inventory_keeps_confirmation_prompt() -> None:
    state, manager, actions = make_session(inventory_size=1)
    state.player.add_to_inventory(sword())
    cap = Item("helm_leather", "Leather Cap", slot="head")
    state.player.equip(cap, "head")
    state.player.equip(Item("ring_gold", "Gold Ring", slot="rings"), "rings")

    manager.handle_input("r", actions)
    assert isinstance(manager.get_action_context(), RemoveContext)

    manager.handle_input("0", actions)
    assert manager.get_current_mode() == "yn"
    assert isinstance(manager.get_action_context(), DropEquipmentContext)

    manager.handle_input("y", actions)
    assert manager.get_current_mode() == "default"
    assert state.player.equipment["head"] is None
    assert [placed.item for placed in state.level.items_at(2, 2)] == [cap]


def test_failed_selection_keeps_numeric_menu() -> None:
    state, manager, actions = make_session()
    state.player.add_to_inventory(sword())
    state.player.add_to_inventory(sword("Dagger"))

    manager.handle_input("x", actions)
    manager.handle_input("9", actions)

    assert manager.get_current_mode() == "numeric"
    assert last_message(state) == "Invalid item selection."
