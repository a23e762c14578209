"""Textual host integration for the mode engine."""

from .controller import TEXTUAL_KEY_NAMES, TextualGameAdapter, TextualUIHooks, translate_key

__all__ = ["TEXTUAL_KEY_NAMES", "TextualGameAdapter", "TextualUIHooks", "translate_key"]
