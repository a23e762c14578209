"""Keymap registry responsible for storing bindings per mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from rogue_engine.runtime.telemetry import span

from .models import Binding, normalize_key


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding reuses a key already bound in its mode."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on key '{binding.key}' in mode '{binding.mode}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns binding metadata indexed by mode and key."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            existing = self.lookup(binding.mode, binding.key)
            if existing is not None and existing.id != binding.id and not replace:
                handle.add_metadata("conflict", existing.id)
                raise KeymapConflictError(binding, existing)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            if existing is not None:
                self._remove_binding(existing)
            previous = self._bindings.get(binding.id)
            if previous is not None:
                self._remove_binding(previous)

            self._bindings[binding.id] = binding
            self._mode_index.setdefault(binding.mode, {})[binding.key] = binding.id
            self._touch_bindings()
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._remove_binding(binding)
        self._touch_bindings()
        return binding

    def lookup(self, mode: str, key: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode, {}).get(normalize_key(key))
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def keys(self, mode: str) -> frozenset[str]:
        return frozenset(self._mode_index.get(mode, {}))

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._mode_index)),
        )

    def _remove_binding(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        keys = self._mode_index.get(binding.mode)
        if not keys:
            return
        if keys.get(binding.key) == binding.id:
            keys.pop(binding.key)
        if not keys:
            self._mode_index.pop(binding.mode, None)

    def _touch_bindings(self) -> None:
        self._revision += 1


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
