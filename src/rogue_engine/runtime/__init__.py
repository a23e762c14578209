"""Logging, telemetry, and settings shared across the engine."""

from . import telemetry
from .settings import GameSettings

__all__ = ["telemetry", "GameSettings"]
