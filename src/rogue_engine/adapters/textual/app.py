"""Executable Textual app that hosts the roguelike demo level."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use rogue_engine.adapters.textual.app"
    ) from exc

from rogue_engine.actions.game_actions import GameActions
from rogue_engine.modes import ControlInstruction, ModeManager
from rogue_engine.runtime import telemetry
from rogue_engine.runtime.settings import GameSettings, env
from rogue_engine.world import GameState, build_demo_state

from .controller import TextualGameAdapter, TextualUIHooks

PRESETS = ("development", "production", "performance")


def create_default_session(
    settings: Optional[GameSettings] = None,
) -> Tuple[GameState, ModeManager, GameActions]:
    """Build the demo level with a fresh manager and facade."""

    state = build_demo_state(settings or GameSettings.from_env())
    manager = ModeManager()
    actions = GameActions(state, manager)
    return state, manager, actions


@dataclass
class UIState:
    prompt_text: str = ""
    controls: List[str] = field(default_factory=list)
    choices: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    map_rows: List[str] = field(default_factory=list)


class RogueEngineApp(App[None]):
    """Minimal Textual UI embedding the mode engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#map-view {
		width: 2fr;
		border: round $accent;
		padding: 0 1;
	}

	#side-panel {
		width: 1fr;
	}

	#prompt-line {
		height: auto;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#choices, #controls {
		height: auto;
		padding: 0 1;
	}

	#messages {
		height: 1fr;
		border: round $secondary;
		padding: 0 1;
		overflow: auto;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, settings: Optional[GameSettings] = None) -> None:
        super().__init__()
        self._settings = settings
        self._state = UIState()
        self.adapter: TextualGameAdapter | None = None
        self._map_widget: Static | None = None
        self._prompt_widget: Static | None = None
        self._choices_widget: Static | None = None
        self._controls_widget: Static | None = None
        self._messages_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal():
            self._map_widget = Static("", id="map-view")
            yield self._map_widget
            with Vertical(id="side-panel"):
                self._prompt_widget = Static("", id="prompt-line")
                self._choices_widget = Static("", id="choices")
                self._controls_widget = Static("", id="controls")
                self._messages_widget = Static("", id="messages")
                yield self._prompt_widget
                yield self._choices_widget
                yield self._controls_widget
                yield self._messages_widget
        yield Footer()

    async def on_mount(self) -> None:
        _, manager, actions = create_default_session(self._settings)
        hooks = TextualUIHooks(
            update_prompt=self._update_prompt,
            update_controls=self._update_controls,
            update_choices=self._update_choices,
            show_messages=self._show_messages,
            update_map=self._update_map,
            log=self._log_line,
        )
        self.adapter = TextualGameAdapter(manager, actions, hooks)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key in {"ctrl+c", "ctrl+q"}:
            return
        if self.adapter.handle_textual_key(event.key, event.character):
            event.stop()

    def _update_prompt(self, text: str) -> None:
        self._state.prompt_text = text
        if self._prompt_widget:
            self._prompt_widget.update(text)

    def _update_controls(self, instructions: Sequence[ControlInstruction]) -> None:
        self._state.controls = [f"{item.label} {item.keys}" for item in instructions]
        if self._controls_widget:
            self._controls_widget.update("\n".join(self._state.controls))

    def _update_choices(self, lines: Sequence[str]) -> None:
        self._state.choices = list(lines)
        if self._choices_widget:
            self._choices_widget.update("\n".join(self._state.choices))

    def _show_messages(self, messages: Sequence[str]) -> None:
        self._state.messages = list(messages)
        if self._messages_widget:
            self._messages_widget.update("\n".join(reversed(self._state.messages)))

    def _update_map(self, rows: Sequence[str]) -> None:
        self._state.map_rows = list(rows)
        if self._map_widget:
            self._map_widget.update("\n".join(self._state.map_rows))

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the rogue engine Textual demo.")
    parser.add_argument(
        "--log-level",
        default=env("LOG_LEVEL"),
        help="Engine log level (default: $ROGUE_ENGINE_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--preset",
        choices=PRESETS,
        default="production",
        help="Logging preset; 'production' keeps the terminal free for the UI",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(level=args.log_level, preset=args.preset)
    app = RogueEngineApp()
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
