"""In-memory world model mutated by the actions facade."""

from .character import Player
from .furniture import Furniture
from .items import AvailableItem, EquippedEntry, Item, PlacedItem
from .level import DungeonLevel
from .state import GameState
from .demo import build_demo_state

__all__ = [
    "AvailableItem",
    "DungeonLevel",
    "EquippedEntry",
    "Furniture",
    "GameState",
    "Item",
    "PlacedItem",
    "Player",
    "build_demo_state",
]
