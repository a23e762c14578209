"""Interaction modes, their registry, and the manager that switches between them."""

from .base_mode import (
    DEFAULT_MODE,
    DIRECTIONAL_MODE,
    NUMERIC_MODE,
    YN_MODE,
    ControlInstruction,
    Mode,
)
from .contexts import (
    ActionContext,
    ConfirmationContext,
    ConsumeContext,
    DropContext,
    DropEquipmentContext,
    EquipConfirmContext,
    EquipSelectionContext,
    PickupContext,
    PlaceInContainerContext,
    RemoveContext,
    SelectionContext,
    UseContext,
    WeaponReplaceContext,
)
from .default_mode import DefaultMode
from .directional_mode import DirectionalMode
from .numeric_mode import NumericMode
from .yn_mode import YNMode
from .registry import ModeFactory, ModeRegistry, UnknownModeError, create_default_registry
from .mode_manager import ModeManager

__all__ = [
    "ActionContext",
    "ConfirmationContext",
    "ConsumeContext",
    "ControlInstruction",
    "DEFAULT_MODE",
    "DIRECTIONAL_MODE",
    "DefaultMode",
    "DirectionalMode",
    "DropContext",
    "DropEquipmentContext",
    "EquipConfirmContext",
    "EquipSelectionContext",
    "Mode",
    "ModeFactory",
    "ModeManager",
    "ModeRegistry",
    "NUMERIC_MODE",
    "NumericMode",
    "PickupContext",
    "PlaceInContainerContext",
    "RemoveContext",
    "SelectionContext",
    "UnknownModeError",
    "UseContext",
    "WeaponReplaceContext",
    "YNMode",
    "YN_MODE",
]
