"""Declarative keymap registry and default bindings."""

from .models import Binding, normalize_key
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, DIRECTIONS, default_keymap, load_default_keymaps

__all__ = [
    "Binding",
    "normalize_key",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "DIRECTIONS",
    "default_keymap",
    "load_default_keymaps",
]
