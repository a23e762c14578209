"""Item records and the views built on top of them for selection lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

EquipmentSlot = Literal[
    "weapon", "head", "body", "hands", "legs", "feet", "neck", "rings"
]


@dataclass(eq=False, slots=True)
class Item:
    """A single carried or placed object.

    Items compare by identity: two potions with the same name are still two
    potions.
    """

    item_id: str
    name: str
    slot: Optional[EquipmentSlot] = None
    heal_amount: Optional[int] = None
    symbol: str = "!"

    @property
    def is_equipment(self) -> bool:
        return self.slot is not None

    @property
    def is_consumable(self) -> bool:
        return self.heal_amount is not None

    @property
    def label(self) -> str:
        return self.name


@dataclass(eq=False, slots=True)
class PlacedItem:
    """An item lying on the floor of a level."""

    x: int
    y: int
    item: Item


@dataclass(frozen=True, slots=True)
class AvailableItem:
    """An item the player could pick up from where they stand."""

    item: Item
    source: Literal["ground", "container"]
    placed: Optional[PlacedItem] = None
    container_name: Optional[str] = None
    container_index: Optional[int] = None

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def label(self) -> str:
        if self.source == "container":
            return f"{self.item.name} ({self.container_name})"
        return self.item.name


@dataclass(frozen=True, slots=True)
class EquippedEntry:
    """An equipped item together with the slot that holds it."""

    item: Item
    slot: str
    ring_index: Optional[int] = None

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def slot_label(self) -> str:
        if self.slot == "rings" and self.ring_index is not None:
            return f"ring{self.ring_index + 1}"
        return self.slot

    @property
    def label(self) -> str:
        return f"{self.item.name} ({self.slot_label})"


__all__ = ["AvailableItem", "EquipmentSlot", "EquippedEntry", "Item", "PlacedItem"]
