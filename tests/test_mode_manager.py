import logging
from typing import List

import pytest

from rogue_engine.modes import (
    DefaultMode,
    DropContext,
    DropEquipmentContext,
    ModeManager,
    NumericMode,
    PickupContext,
    UseContext,
    create_default_registry,
)


def make_counting_manager(created: List[str]) -> ModeManager:
    registry = create_default_registry()

    def default_factory() -> DefaultMode:
        created.append("default")
        return DefaultMode()

    def numeric_factory() -> NumericMode:
        created.append("numeric")
        return NumericMode()

    registry.register("default", default_factory, replace=True)
    registry.register("numeric", numeric_factory, replace=True)
    return ModeManager(registry)


def test_manager_starts_in_default_mode(manager) -> None:
    assert manager.get_current_mode() == "default"
    assert manager.current_mode == "default"
    assert manager.get_action_context() is None
    assert manager.is_in_special_mode() is False
    assert manager.transition_count == 0


def test_set_mode_updates_state_and_notifies() -> None:
    notifications: List[str] = []
    manager = ModeManager(on_mode_change=lambda: notifications.append("changed"))
    context = PickupContext(["a", "b"])

    manager.set_mode("numeric", context)

    assert manager.get_current_mode() == "numeric"
    assert manager.action_context is context
    assert manager.is_in_special_mode() is True
    assert manager.transition_count == 1
    assert notifications == ["changed"]


@pytest.mark.parametrize(
    ("mode", "context"),
    [
        ("directional", UseContext()),
        ("numeric", PickupContext(["a", "b"])),
        ("yn", DropEquipmentContext(item="Cap", slot="head")),
    ],
)
def test_reset_to_default_clears_context(mode: str, context: object) -> None:
    notifications: List[str] = []
    manager = ModeManager(on_mode_change=lambda: notifications.append(manager.get_current_mode()))
    manager.set_mode(mode, context)

    manager.reset_to_default()

    assert manager.get_current_mode() == "default"
    assert manager.get_action_context() is None
    assert manager.is_in_special_mode() is False
    assert manager.transition_count == 2
    assert notifications == [mode, "default"]


def test_default_mode_rejects_context(manager) -> None:
    with pytest.raises(ValueError):
        manager.set_mode("default", UseContext())

    assert manager.transition_count == 0


def test_mode_instance_cached_until_transition() -> None:
    created: List[str] = []
    manager = make_counting_manager(created)

    manager.get_mode_display_text()
    manager.get_mode_control_instructions()
    assert created == ["default"]

    manager.set_mode("numeric", DropContext(["a", "b"]))
    manager.get_mode_display_text()
    manager.get_mode_display_text()
    assert created == ["default", "numeric"]

    manager.reset_to_default()
    manager.get_mode_display_text()
    assert created == ["default", "numeric", "default"]


def test_unknown_mode_is_logged_and_unhandled(manager, actions, caplog) -> None:
    caplog.set_level(logging.ERROR, logger="rogue_engine")
    manager.set_mode("inventory")

    assert manager.handle_input("w", actions) is False
    assert manager.get_mode_display_text() is None
    assert manager.get_mode_control_instructions() == []

    assert actions.calls == []
    assert any("Unknown mode 'inventory'" in record.getMessage() for record in caplog.records)


def test_context_of_wrong_shape_is_rejected(manager, actions, caplog) -> None:
    caplog.set_level(logging.ERROR, logger="rogue_engine")
    manager.set_mode("numeric", UseContext())

    assert manager.handle_input("1", actions) is False

    assert actions.calls == []
    assert manager.get_current_mode() == "numeric"
    assert any("cannot handle context UseContext" in r.getMessage() for r in caplog.records)


def test_empty_key_is_unhandled(manager, actions) -> None:
    assert manager.handle_input("", actions) is False
    assert manager.handle_input("   ", actions) is False
    assert actions.calls == []


def test_special_mode_without_context_ignores_selection(manager, actions) -> None:
    manager.set_mode("numeric")

    assert manager.handle_input("1", actions) is False
    assert manager.handle_input("Escape", actions) is True
    assert manager.get_current_mode() == "default"


def test_mode_switch_is_recorded(manager, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="rogue_engine")

    manager.set_mode("directional", UseContext())

    messages = [record.getMessage() for record in caplog.records]
    assert any(
        message.startswith("event::mode.switch") and "mode=directional" in message
        for message in messages
    )


def test_display_text_follows_active_mode(manager) -> None:
    assert manager.get_mode_display_text() == "What would you like to do?"

    manager.set_mode("directional", UseContext())
    assert manager.get_mode_display_text() == "Use - What would you like to use?"

    manager.set_mode("numeric", PickupContext(["a", "b"]))
    assert manager.get_mode_display_text() == "Pick up - What would you like to pick up?"


def test_managers_are_independent(actions) -> None:
    first = ModeManager()
    second = ModeManager()

    first.handle_input("u", actions)

    assert first.get_current_mode() == "directional"
    assert second.get_current_mode() == "default"
