"""Built-in keymaps that seed each mode with its fixed key set."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from .models import Binding
from .registry import KeymapRegistry

# key, dx, dy, description
DIRECTIONS: tuple[tuple[str, int, int, str], ...] = (
    ("w", 0, -1, "North"),
    ("arrowup", 0, -1, "North"),
    ("s", 0, 1, "South"),
    ("arrowdown", 0, 1, "South"),
    ("a", -1, 0, "West"),
    ("arrowleft", -1, 0, "West"),
    ("d", 1, 0, "East"),
    ("arrowright", 1, 0, "East"),
    ("q", -1, -1, "North-west"),
    ("e", 1, -1, "North-east"),
    ("z", -1, 1, "South-west"),
    ("c", 1, 1, "South-east"),
)


def _direction_bindings(mode: str, command: str) -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=f"{mode}.{command}.{key}",
            mode=mode,
            key=key,
            command=command,
            description=description,
            args={"dx": dx, "dy": dy},
        )
        for key, dx, dy, description in DIRECTIONS
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *_direction_bindings("default", "move"),
    Binding(id="default.pickup", mode="default", key="p", command="pickup", description="Pick up"),
    Binding(id="default.use", mode="default", key="u", command="use", description="Use something nearby"),
    Binding(id="default.equip", mode="default", key="g", command="equip", description="Equip item"),
    Binding(id="default.remove", mode="default", key="r", command="remove", description="Remove equipment"),
    Binding(id="default.drop", mode="default", key="x", command="drop", description="Drop item"),
    Binding(id="default.consume", mode="default", key="f", command="consume", description="Consume item"),
    Binding(id="default.escape", mode="default", key="escape", command="noop", description="Nothing"),
    *_direction_bindings("directional", "direction"),
    Binding(id="directional.cancel", mode="directional", key="escape", command="cancel", description="Cancel"),
    *(
        Binding(
            id=f"numeric.select.{digit}",
            mode="numeric",
            key=str(digit),
            command="select",
            description=f"Choose option {digit}",
            args={"index": digit},
        )
        for digit in range(10)
    ),
    Binding(id="numeric.cancel", mode="numeric", key="escape", command="cancel", description="Cancel"),
    Binding(id="yn.confirm", mode="yn", key="y", command="confirm", description="Yes"),
    Binding(id="yn.decline", mode="yn", key="n", command="decline", description="No"),
    Binding(id="yn.cancel", mode="yn", key="escape", command="cancel", description="Cancel"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


@lru_cache(maxsize=None)
def default_keymap() -> KeymapRegistry:
    """Shared registry holding only the built-in bindings."""

    registry = KeymapRegistry(logger_name="rogue_engine.keymaps")
    load_default_keymaps(registry)
    return registry


__all__ = ["load_default_keymaps", "default_keymap", "DEFAULT_BINDINGS", "DIRECTIONS"]
