"""Environment-driven game settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "ROGUE_ENGINE_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(name: str, fallback: int, *, minimum: Optional[int] = None) -> int:
    value = env(name)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    if minimum is not None and parsed < minimum:
        return fallback
    return parsed


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Tunables shared by the world model and the UI."""

    inventory_size: int = 5
    ring_slots: int = 10
    max_messages: int = 30

    def __post_init__(self) -> None:
        if self.inventory_size <= 0:
            raise ValueError("inventory_size must be positive")
        if self.ring_slots < 0:
            raise ValueError("ring_slots cannot be negative")
        if self.max_messages <= 0:
            raise ValueError("max_messages must be positive")

    @classmethod
    def from_env(cls) -> "GameSettings":
        defaults = cls()
        return cls(
            inventory_size=env_int("INVENTORY_SIZE", defaults.inventory_size, minimum=1),
            ring_slots=env_int("RING_SLOTS", defaults.ring_slots, minimum=0),
            max_messages=env_int("MAX_MESSAGES", defaults.max_messages, minimum=1),
        )


__all__ = ["ENV_PREFIX", "GameSettings", "env", "env_flag", "env_int"]
