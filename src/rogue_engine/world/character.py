"""Player character: hit points, inventory, and equipment slots."""

from __future__ import annotations

from typing import Dict, List, Optional

from .items import EquippedEntry, Item

SINGLE_SLOTS: tuple[str, ...] = (
    "weapon1",
    "weapon2",
    "head",
    "body",
    "hands",
    "legs",
    "feet",
    "neck",
)


class Player:
    """Mutable character sheet owned by ``GameState``."""

    def __init__(
        self,
        *,
        max_hp: int = 10,
        inventory_size: int = 5,
        ring_slots: int = 10,
        symbol: str = "@",
    ) -> None:
        self.max_hp = max_hp
        self.current_hp = max_hp
        self.symbol = symbol
        self.inventory: List[Item] = []
        self.max_inventory_size = inventory_size
        self.equipment: Dict[str, Optional[Item]] = {slot: None for slot in SINGLE_SLOTS}
        self.rings: List[Optional[Item]] = [None] * ring_slots

    def heal(self, amount: int) -> int:
        """Restore HP up to the maximum and return the amount actually healed."""

        before = self.current_hp
        self.current_hp = min(self.current_hp + amount, self.max_hp)
        return self.current_hp - before

    def can_add_to_inventory(self) -> bool:
        return len(self.inventory) < self.max_inventory_size

    def add_to_inventory(self, item: Item) -> bool:
        if not self.can_add_to_inventory():
            return False
        self.inventory.append(item)
        return True

    def remove_from_inventory(self, index: int) -> Optional[Item]:
        if not 0 <= index < len(self.inventory):
            return None
        return self.inventory.pop(index)

    def discard(self, item: Item) -> bool:
        for index, carried in enumerate(self.inventory):
            if carried is item:
                del self.inventory[index]
                return True
        return False

    def equip(self, item: Item, slot: str) -> bool:
        if slot == "rings":
            for index, ring in enumerate(self.rings):
                if ring is None:
                    self.rings[index] = item
                    return True
            return False
        if slot in self.equipment:
            self.equipment[slot] = item
            return True
        return False

    def unequip(self, slot: str, ring_index: Optional[int] = None) -> Optional[Item]:
        if slot == "rings":
            if ring_index is None or not 0 <= ring_index < len(self.rings):
                return None
            item = self.rings[ring_index]
            self.rings[ring_index] = None
            return item
        if slot in self.equipment:
            item = self.equipment[slot]
            self.equipment[slot] = None
            return item
        return None

    def equipped_items(self) -> List[EquippedEntry]:
        entries = [
            EquippedEntry(item=item, slot=slot)
            for slot, item in self.equipment.items()
            if item is not None
        ]
        entries.extend(
            EquippedEntry(item=ring, slot="rings", ring_index=index)
            for index, ring in enumerate(self.rings)
            if ring is not None
        )
        return entries


__all__ = ["Player", "SINGLE_SLOTS"]
