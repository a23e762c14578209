"""Per-session game state: level, player, position, and message log."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

from rogue_engine.runtime import telemetry
from rogue_engine.runtime.settings import GameSettings

from .character import Player
from .level import DungeonLevel

Position = Tuple[int, int]


class GameState:
    def __init__(
        self,
        level: DungeonLevel,
        *,
        start: Position = (1, 1),
        player: Optional[Player] = None,
        settings: Optional[GameSettings] = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.level = level
        self.player = player or Player(
            inventory_size=self.settings.inventory_size,
            ring_slots=self.settings.ring_slots,
        )
        self.position: Position = start
        self.turns = 0
        self.messages: Deque[str] = deque(maxlen=self.settings.max_messages)
        self.logger = telemetry.get_logger("rogue_engine.world")

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def move_to(self, x: int, y: int) -> None:
        self.position = (x, y)

    def add_message(self, text: str) -> None:
        self.messages.append(text)
        self.logger.debug("message: %s", text)

    def recent_messages(self, count: Optional[int] = None) -> List[str]:
        messages = list(self.messages)
        if count is None:
            return messages
        return messages[-count:] if count > 0 else []

    def render(self) -> List[str]:
        return self.level.render_rows(self.x, self.y, self.player.symbol)


__all__ = ["GameState", "Position"]
