from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import pytest

from rogue_engine.actions import ActionOutcome
from rogue_engine.modes import ModeManager


class RecordingActions:
    """Facade double that records every call.

    ``results`` overrides what a named operation returns (``COMPLETED`` by
    default) and ``side_effects`` runs a callback with the call's arguments,
    e.g. to make the operation switch modes on the manager.
    """

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.available: List[Any] = []
        self.equipment: List[Any] = []
        self.equipped: List[Any] = []
        self.inventory: List[Any] = []
        self.consumables: List[Any] = []
        self.results: Dict[str, Any] = {}
        self.side_effects: Dict[str, Callable[..., None]] = {}
        self.last_manager: Optional[ModeManager] = None

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def _record(self, name: str, *args: Any) -> Any:
        self.calls.append((name, *args))
        effect = self.side_effects.get(name)
        if effect is not None:
            effect(*args)
        return self.results.get(name, ActionOutcome.COMPLETED)

    def move_player(self, dx: int, dy: int) -> Any:
        return self._record("move_player", dx, dy)

    def pick_up_item(self) -> Any:
        return self._record("pick_up_item")

    def get_available_items(self) -> List[Any]:
        return list(self.available)

    def pick_up_item_by_index(self, index: int) -> Any:
        return self._record("pick_up_item_by_index", index)

    def use_furniture(self, dx: int, dy: int) -> Any:
        return self._record("use_furniture", dx, dy)

    def get_available_equipment(self) -> List[Any]:
        return list(self.equipment)

    def equip_item_by_index(self, index: int, manager: Optional[ModeManager] = None) -> Any:
        self.last_manager = manager
        return self._record("equip_item_by_index", index)

    def equip_item_with_replacement(self, index: int, existing_item: Any, slot: str) -> Any:
        return self._record("equip_item_with_replacement", index, existing_item, slot)

    def replace_weapon(self, index: int) -> Any:
        return self._record("replace_weapon", index)

    def get_equipped_items(self) -> List[Any]:
        return list(self.equipped)

    def remove_equipment_by_index(self, index: int) -> Any:
        return self._record("remove_equipment_by_index", index)

    def remove_equipment_with_drop(self, item: Any, slot: str, ring_index: Optional[int]) -> Any:
        return self._record("remove_equipment_with_drop", item, slot, ring_index)

    def get_inventory_items(self) -> List[Any]:
        return list(self.inventory)

    def drop_item_from_inventory(self, index: int) -> Any:
        return self._record("drop_item_from_inventory", index)

    def drop_item_with_container_check(self, item: Any, index: int, furniture: Any) -> Any:
        return self._record("drop_item_with_container_check", item, index, furniture)

    def get_consumable_items(self) -> List[Any]:
        return list(self.consumables)

    def consume_item_by_index(self, index: int) -> Any:
        return self._record("consume_item_by_index", index)

    def show_message(self, text: str) -> None:
        self.calls.append(("show_message", text))


@pytest.fixture
def actions() -> RecordingActions:
    return RecordingActions()


@pytest.fixture
def manager() -> ModeManager:
    return ModeManager()
