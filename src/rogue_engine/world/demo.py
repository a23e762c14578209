"""Small hand-built level used by the Textual demo."""

from __future__ import annotations

from typing import Optional

from rogue_engine.runtime.settings import GameSettings

from .furniture import Furniture
from .items import Item
from .level import DungeonLevel
from .state import GameState

DEMO_ROWS: tuple[str, ...] = (
    "####################",
    "#........#.........#",
    "#........#.........#",
    "#..................#",
    "#........#.........#",
    "#........#.........#",
    "####################",
)


def build_demo_state(settings: Optional[GameSettings] = None) -> GameState:
    door = Furniture(
        x=9,
        y=3,
        name="Door",
        symbol="+",
        states=("closed", "open"),
        impassable_when=("closed",),
        usable=True,
    )
    chest = Furniture(
        x=14,
        y=2,
        name="Chest",
        symbol="=",
        states=("closed", "open"),
        usable=True,
        container_capacity=5,
    )
    chest.add_item(Item("ring_gold", "Gold Ring", slot="rings", symbol="o"))
    chest.add_item(Item("potion_minor", "Minor Healing Potion", heal_amount=5))
    table = Furniture(x=4, y=5, name="Table", symbol="T", impassable=True)

    level = DungeonLevel(DEMO_ROWS, furniture=(door, chest, table))
    level.add_item(3, 2, Item("sword_short", "Short Sword", slot="weapon", symbol="/"))
    level.add_item(3, 2, Item("helm_leather", "Leather Cap", slot="head", symbol="^"))
    level.add_item(6, 4, Item("potion_minor", "Minor Healing Potion", heal_amount=5))
    level.add_item(16, 4, Item("axe_hand", "Hand Axe", slot="weapon", symbol="/"))

    state = GameState(level, start=(2, 3), settings=settings)
    state.add_message("Welcome to ROGµE!")
    state.add_message("Use WASD or arrow keys to move.")
    return state


__all__ = ["DEMO_ROWS", "build_demo_state"]
