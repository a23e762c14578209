"""Dataclasses describing key bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

_KEY_ALIASES = {
    "esc": "escape",
    "up": "arrowup",
    "down": "arrowdown",
    "left": "arrowleft",
    "right": "arrowright",
}


def normalize_key(key: str) -> str:
    """Lower-case a raw key identifier and fold common aliases."""

    cleaned = key.strip().lower()
    if not cleaned:
        raise ValueError("key cannot be empty")
    return _KEY_ALIASES.get(cleaned, cleaned)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key in one mode with a named command."""

    id: str
    mode: str
    key: str
    command: str
    description: str = ""
    args: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.command:
            raise ValueError("binding command cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))


__all__ = ["Binding", "normalize_key"]
