"""Actions facade protocol and the outcome type its operations report.

The concrete facade lives in ``rogue_engine.actions.game_actions``; it depends
on the modes package and is imported from there directly.
"""

from .outcome import ActionOutcome, resolve_outcome
from .facade import ActionsFacade

__all__ = ["ActionOutcome", "ActionsFacade", "resolve_outcome"]
