"""Protocol describing the game operations modes are allowed to call."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence

from .outcome import ActionOutcome

if TYPE_CHECKING:
    from rogue_engine.modes.mode_manager import ModeManager


class ActionsFacade(Protocol):
    """Game-logic surface consumed by the interaction modes.

    Mutating calls report an ``ActionOutcome`` (or a plain ``bool``);
    accessors return the eligible targets for a menu action. Domain failures
    are reported to the player by the facade itself.
    """

    def move_player(self, dx: int, dy: int) -> ActionOutcome | bool: ...

    def pick_up_item(self) -> ActionOutcome | bool: ...

    def get_available_items(self) -> Sequence[Any]: ...

    def pick_up_item_by_index(self, index: int) -> ActionOutcome | bool: ...

    def use_furniture(self, dx: int, dy: int) -> ActionOutcome | bool: ...

    def get_available_equipment(self) -> Sequence[Any]: ...

    def equip_item_by_index(
        self, index: int, manager: Optional["ModeManager"] = None
    ) -> ActionOutcome | bool: ...

    def equip_item_with_replacement(
        self, index: int, existing_item: Any, slot: str
    ) -> ActionOutcome | bool: ...

    def replace_weapon(self, index: int) -> ActionOutcome | bool: ...

    def get_equipped_items(self) -> Sequence[Any]: ...

    def remove_equipment_by_index(self, index: int) -> ActionOutcome | bool: ...

    def remove_equipment_with_drop(
        self, item: Any, slot: str, ring_index: Optional[int]
    ) -> ActionOutcome | bool: ...

    def get_inventory_items(self) -> Sequence[Any]: ...

    def drop_item_from_inventory(self, index: int) -> ActionOutcome | bool: ...

    def drop_item_with_container_check(
        self, item: Any, index: int, furniture: Any
    ) -> ActionOutcome | bool: ...

    def get_consumable_items(self) -> Sequence[Any]: ...

    def consume_item_by_index(self, index: int) -> ActionOutcome | bool: ...

    def show_message(self, text: str) -> None: ...


__all__ = ["ActionsFacade"]
