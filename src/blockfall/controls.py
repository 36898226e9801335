"""Keyboard bindings for the engine's discrete actions.

Key names follow the DOM ``KeyboardEvent.key`` convention so the same table
serves browser and desktop front-ends; the pygame runner translates its key
codes into these names first.  Unmapped keys are ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from .engine import GameSession, GameState


class Action(str, Enum):
    """Player actions understood by :class:`~blockfall.engine.GameSession`."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"


KEY_BINDINGS: Dict[str, Action] = {
    "ArrowLeft": Action.MOVE_LEFT,
    "ArrowRight": Action.MOVE_RIGHT,
    "ArrowDown": Action.MOVE_DOWN,
    "ArrowUp": Action.ROTATE,
    " ": Action.HARD_DROP,
    "p": Action.TOGGLE_PAUSE,
    "P": Action.TOGGLE_PAUSE,
}


def action_for_key(key: str) -> Optional[Action]:
    """Return the action bound to ``key`` or ``None`` if it is unmapped."""

    return KEY_BINDINGS.get(key)


def handle_key(session: GameSession, key: str) -> GameState:
    """Apply the action bound to ``key`` and return the resulting state."""

    action = action_for_key(key)
    if action is None:
        return session.state
    return session.apply(action)
