"""Furniture placed on a level: doors, chests, tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .items import Item


@dataclass(eq=False)
class Furniture:
    x: int
    y: int
    name: str
    symbol: str = "F"
    states: tuple[str, ...] = ()
    state: Optional[str] = None
    impassable: bool = False
    impassable_when: tuple[str, ...] = ()
    usable: bool = False
    container_capacity: Optional[int] = None
    contents: List[Item] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.state is None and self.states:
            self.state = self.states[0]

    @property
    def is_stateful(self) -> bool:
        return bool(self.states)

    @property
    def is_container(self) -> bool:
        return self.container_capacity is not None

    @property
    def is_usable(self) -> bool:
        return self.usable

    @property
    def is_open(self) -> bool:
        return self.state == "open"

    def is_passable(self) -> bool:
        if self.impassable:
            return False
        if self.impassable_when and self.state:
            return self.state not in self.impassable_when
        return True

    def toggle_state(self) -> bool:
        if not self.states or self.state not in self.states:
            return False
        position = self.states.index(self.state)
        self.state = self.states[(position + 1) % len(self.states)]
        return True

    def add_item(self, item: Item) -> bool:
        if self.container_capacity is None:
            return False
        if len(self.contents) >= self.container_capacity:
            return False
        self.contents.append(item)
        return True

    def remove_item(self, index: int) -> Optional[Item]:
        if not 0 <= index < len(self.contents):
            return None
        return self.contents.pop(index)

    def describe(self) -> str:
        if self.is_stateful and self.state:
            return f"{self.name} ({self.state})"
        return self.name

    def container_status(self) -> Optional[str]:
        if not self.is_container:
            return None
        return f"({len(self.contents)}/{self.container_capacity} items)"


__all__ = ["Furniture"]
