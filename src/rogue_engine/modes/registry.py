"""Name-to-factory mapping used by the mode manager."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Optional

from rogue_engine.keymaps import KeymapRegistry

from .base_mode import DEFAULT_MODE, DIRECTIONAL_MODE, NUMERIC_MODE, YN_MODE, Mode
from .default_mode import DefaultMode
from .directional_mode import DirectionalMode
from .numeric_mode import NumericMode
from .yn_mode import YNMode

ModeFactory = Callable[[], Mode]


class UnknownModeError(KeyError):
    """Raised when a mode name has no registered factory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown mode '{name}'")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class ModeRegistry:
    """Holds one factory per mode name; the manager asks it for instances."""

    def __init__(self) -> None:
        self._factories: Dict[str, ModeFactory] = {}

    def register(self, name: str, factory: ModeFactory, *, replace: bool = False) -> None:
        if not name:
            raise ValueError("Mode name must be non-empty")
        if name in self._factories and not replace:
            raise ValueError(f"Mode '{name}' already registered")
        self._factories[name] = factory

    def get_mode(self, name: str) -> Mode:
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownModeError(name)
        mode = factory()
        if not isinstance(mode, Mode):
            raise TypeError(f"Factory for mode '{name}' returned {type(mode).__name__}")
        return mode

    def has_mode(self, name: str) -> bool:
        return name in self._factories

    def get_registered_modes(self) -> list[str]:
        return list(self._factories)


def create_default_registry(keymap: Optional[KeymapRegistry] = None) -> ModeRegistry:
    """Registry with the four built-in modes, optionally sharing a custom keymap."""

    registry = ModeRegistry()
    registry.register(DEFAULT_MODE, partial(DefaultMode, keymap))
    registry.register(DIRECTIONAL_MODE, partial(DirectionalMode, keymap))
    registry.register(NUMERIC_MODE, partial(NumericMode, keymap))
    registry.register(YN_MODE, partial(YNMode, keymap))
    return registry


__all__ = ["ModeFactory", "ModeRegistry", "UnknownModeError", "create_default_registry"]
