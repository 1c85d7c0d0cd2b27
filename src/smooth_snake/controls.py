"""Input events and their mapping onto the game engine."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from smooth_snake.snake import Direction

if TYPE_CHECKING:
    from smooth_snake.engine import GameEngine


class InputEvent(str, enum.Enum):
    """Events a host can feed into a game."""

    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    TOGGLE_PAUSE = "pause"
    RESTART = "restart"


_DIRECTION_MAP: dict[InputEvent, Direction] = {
    InputEvent.MOVE_UP: Direction.UP,
    InputEvent.MOVE_DOWN: Direction.DOWN,
    InputEvent.MOVE_LEFT: Direction.LEFT,
    InputEvent.MOVE_RIGHT: Direction.RIGHT,
}


def parse_event(text: str) -> InputEvent | None:
    """Map a wire string such as ``"up"`` to an event; unknown strings give None."""
    try:
        return InputEvent(text.strip().lower())
    except ValueError:
        return None


class InputMapper:
    """Translates key-level input into engine calls."""

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine

    def on_direction_key(self, direction: Direction) -> None:
        self.engine.set_direction(direction)

    def on_pause_key(self) -> None:
        self.engine.toggle_pause()

    def on_restart_key(self) -> None:
        self.engine.restart()

    def handle(self, event: InputEvent) -> None:
        """Dispatch a single input event."""
        direction = _DIRECTION_MAP.get(event)
        if direction is not None:
            self.on_direction_key(direction)
        elif event == InputEvent.TOGGLE_PAUSE:
            self.on_pause_key()
        elif event == InputEvent.RESTART:
            self.on_restart_key()
