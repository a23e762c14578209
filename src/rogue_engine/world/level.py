"""Grid-based dungeon level with floor items and furniture."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .furniture import Furniture
from .items import Item, PlacedItem

WALL = "#"
FLOOR = "."


class DungeonLevel:
    """A rectangular map given as rows of tile characters."""

    def __init__(
        self,
        rows: Sequence[str],
        *,
        number: int = 1,
        furniture: Iterable[Furniture] = (),
    ) -> None:
        if not rows:
            raise ValueError("a level needs at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("level rows must all have the same width")
        self.number = number
        self.rows: List[str] = list(rows)
        self.width = width
        self.height = len(rows)
        self.items: List[PlacedItem] = []
        self.furniture: List[Furniture] = list(furniture)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            return WALL
        return self.rows[y][x]

    def is_passable(self, x: int, y: int) -> bool:
        if self.tile_at(x, y) == WALL:
            return False
        furniture = self.furniture_at(x, y)
        return furniture is None or furniture.is_passable()

    def items_at(self, x: int, y: int) -> List[PlacedItem]:
        return [placed for placed in self.items if placed.x == x and placed.y == y]

    def furniture_at(self, x: int, y: int) -> Optional[Furniture]:
        for piece in self.furniture:
            if piece.x == x and piece.y == y:
                return piece
        return None

    def add_item(self, x: int, y: int, item: Item) -> PlacedItem:
        placed = PlacedItem(x=x, y=y, item=item)
        self.items.append(placed)
        return placed

    def remove_item(self, placed: PlacedItem) -> bool:
        for index, candidate in enumerate(self.items):
            if candidate is placed:
                del self.items[index]
                return True
        return False

    def render_rows(self, player_x: int, player_y: int, player_symbol: str = "@") -> List[str]:
        """Return the map as text with furniture, items, and the player drawn in."""

        grid = [list(row) for row in self.rows]
        for placed in self.items:
            grid[placed.y][placed.x] = placed.item.symbol
        for piece in self.furniture:
            grid[piece.y][piece.x] = piece.symbol
        if self.in_bounds(player_x, player_y):
            grid[player_y][player_x] = player_symbol
        return ["".join(row) for row in grid]


__all__ = ["DungeonLevel", "FLOOR", "WALL"]
