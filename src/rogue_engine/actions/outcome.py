"""Three-way result returned by facade operations that change the game."""

from __future__ import annotations

from enum import Enum


class ActionOutcome(str, Enum):
    """How a facade call ended, from the point of view of the calling mode.

    ``TRANSITIONED`` means the call itself moved the mode manager somewhere
    else (e.g. opened a confirmation), so the caller must leave the mode
    state alone.
    """

    COMPLETED = "completed"
    TRANSITIONED = "transitioned"
    FAILED = "failed"

    def __bool__(self) -> bool:
        return self is not ActionOutcome.FAILED


def resolve_outcome(result: "ActionOutcome | bool", *, transitioned: bool) -> ActionOutcome:
    """Fold a facade return value and an observed transition into one outcome.

    Facades may still return plain booleans; a transition observed while the
    call ran always wins over what the call reported.
    """

    if transitioned:
        return ActionOutcome.TRANSITIONED
    if isinstance(result, ActionOutcome):
        return result
    return ActionOutcome.COMPLETED if result else ActionOutcome.FAILED


__all__ = ["ActionOutcome", "resolve_outcome"]
