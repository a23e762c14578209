"""UI-agnostic input-mode engine for a tile-based roguelike."""

__all__ = [
    "adapters",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "world",
]

__version__ = "0.1.0"
