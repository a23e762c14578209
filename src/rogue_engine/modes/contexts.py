"""Typed payloads carried from the mode that starts an action to the one that finishes it.

Each class is one variant of the action context union. The ``action`` tag is
kept for display and logging. Dispatch always goes by class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Sequence, Union


def _label(value: Any) -> str:
    label = getattr(value, "label", None)
    if isinstance(label, str):
        return label
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return name
    return str(value)


def _name_or_unknown(value: Any) -> str:
    name = getattr(value, "name", None)
    return name if isinstance(name, str) and name else "Unknown Item"


@dataclass(frozen=True, slots=True)
class UseContext:
    action: ClassVar[str] = "use"

    def choice_lines(self) -> list[str]:
        return []


@dataclass(frozen=True, slots=True)
class _SelectionContext:
    """Base for contexts that offer a numbered list of items."""

    action: ClassVar[str] = "item"
    heading: ClassVar[str] = "Items:"

    items: Sequence[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def choice_lines(self) -> list[str]:
        lines = [self.heading]
        lines.extend(f"{index}. {_label(item)}" for index, item in enumerate(self.items))
        return lines


@dataclass(frozen=True, slots=True)
class PickupContext(_SelectionContext):
    action: ClassVar[str] = "pickup"
    heading: ClassVar[str] = "Available items:"


@dataclass(frozen=True, slots=True)
class EquipSelectionContext(_SelectionContext):
    action: ClassVar[str] = "equip"
    heading: ClassVar[str] = "Available equipment:"


@dataclass(frozen=True, slots=True)
class RemoveContext(_SelectionContext):
    action: ClassVar[str] = "remove"
    heading: ClassVar[str] = "Equipped items:"


@dataclass(frozen=True, slots=True)
class DropContext(_SelectionContext):
    action: ClassVar[str] = "drop"
    heading: ClassVar[str] = "Inventory items:"


@dataclass(frozen=True, slots=True)
class ConsumeContext(_SelectionContext):
    action: ClassVar[str] = "consume"
    heading: ClassVar[str] = "Consumable items:"


@dataclass(frozen=True, slots=True)
class WeaponReplaceContext:
    """Both weapon slots are full; pick which one the new weapon replaces."""

    action: ClassVar[str] = "weapon_replace"

    new_item: Any
    weapons: Sequence[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "weapons", tuple(self.weapons))

    def choice_lines(self) -> list[str]:
        lines = ["Equipped weapons:"]
        lines.extend(f"{index}. {_label(weapon)}" for index, weapon in enumerate(self.weapons))
        return lines


@dataclass(frozen=True, slots=True)
class EquipConfirmContext:
    action: ClassVar[str] = "equip"

    item_index: int
    new_item: Any
    existing_item: Any
    slot: str

    def prompt(self) -> str:
        return (
            f"You have a {_name_or_unknown(self.existing_item)} equipped in your "
            f"{self.slot or 'unknown'} slot. Remove it to equip "
            f"{_name_or_unknown(self.new_item)}?"
        )

    def choice_lines(self) -> list[str]:
        return []


@dataclass(frozen=True, slots=True)
class DropEquipmentContext:
    action: ClassVar[str] = "drop_equipment"

    item: Any
    slot: str
    ring_index: Optional[int] = None

    def prompt(self) -> str:
        return (
            "There is no room in your inventory. "
            f"Drop the {_name_or_unknown(self.item)} on the ground?"
        )

    def choice_lines(self) -> list[str]:
        return []


@dataclass(frozen=True, slots=True)
class PlaceInContainerContext:
    action: ClassVar[str] = "place_in_container"

    item: Any
    item_index: int
    furniture: Any

    def prompt(self) -> str:
        container = getattr(self.furniture, "name", None) or "container"
        return f"Place the {_name_or_unknown(self.item)} in the {container}?"

    def choice_lines(self) -> list[str]:
        return []


SelectionContext = Union[
    PickupContext,
    EquipSelectionContext,
    RemoveContext,
    DropContext,
    ConsumeContext,
    WeaponReplaceContext,
]
ConfirmationContext = Union[
    EquipConfirmContext, DropEquipmentContext, PlaceInContainerContext
]
ActionContext = Union[UseContext, SelectionContext, ConfirmationContext]


__all__ = [
    "ActionContext",
    "ConfirmationContext",
    "ConsumeContext",
    "DropContext",
    "DropEquipmentContext",
    "EquipConfirmContext",
    "EquipSelectionContext",
    "PickupContext",
    "PlaceInContainerContext",
    "RemoveContext",
    "SelectionContext",
    "UseContext",
    "WeaponReplaceContext",
]
