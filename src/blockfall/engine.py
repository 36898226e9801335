"""Game state machine for the falling-block puzzle.

:class:`GameEngine` exposes one pure transition per player action.  Each takes
the current :class:`GameState` and returns the next one; the input state is
never modified, and an action that is not allowed (a blocked move, any input
while paused or after game over) simply returns the state it was given.  The
engine owns no timers and performs no I/O; :class:`GameSession` is the single
owner that threads the state through successive calls for front-ends.

Locking a piece merges it into the field, clears completed rows, scores them
via :data:`SCORE_TABLE`, promotes the next piece and draws a new one.  If the
promoted piece already collides at its spawn placement the game is over.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
import logging
import random

from . import field as fieldlib
from .config import EngineConfig
from .field import Field
from .piece import Piece, rotate, spawn
from .shapes import PieceKind


LOGGER = logging.getLogger(__name__)

# Points awarded for the number of rows cleared by a single lock.  Four or
# more rows score the last entry.
SCORE_TABLE = (0, 100, 300, 500, 800)

# Horizontal offsets tried, in order, when placing a rotated piece.
KICK_OFFSETS = (0, -1, 1)


def score_for_lines(lines: int) -> int:
    """Return the points awarded for clearing ``lines`` rows at once."""

    return SCORE_TABLE[min(max(lines, 0), len(SCORE_TABLE) - 1)]


class GameStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a game session."""

    field: Field
    current_piece: Optional[Piece]
    next_piece: Optional[Piece]
    score: int = 0
    lines: int = 0
    is_game_over: bool = False
    is_paused: bool = False

    @property
    def status(self) -> GameStatus:
        if self.is_game_over:
            return GameStatus.GAME_OVER
        if self.is_paused:
            return GameStatus.PAUSED
        return GameStatus.ACTIVE

    @property
    def accepts_input(self) -> bool:
        """``True`` when movement actions may change this state."""

        return (
            not self.is_game_over
            and not self.is_paused
            and self.current_piece is not None
        )


class GameEngine:
    """Pure transition functions over :class:`GameState`.

    Parameters
    ----------
    config:
        Field dimensions and timing.  Defaults to :class:`EngineConfig`.
    rng:
        Source of randomness for piece selection.  When omitted a
        :class:`random.Random` seeded from ``config.seed`` is used, so a fixed
        seed replays the same sequence of pieces.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._rng = rng if rng is not None else random.Random(self.config.seed)
        self._kinds = list(PieceKind)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def random_kind(self) -> PieceKind:
        return self._rng.choice(self._kinds)

    def spawn_piece(self, kind: Optional[PieceKind] = None) -> Piece:
        """Return a freshly spawned piece of ``kind`` (random when ``None``)."""

        return spawn(kind or self.random_kind(), self.config.width)

    def new_game(self) -> GameState:
        """Return the initial state: empty field, current and next pieces."""

        current = self.spawn_piece()
        upcoming = self.spawn_piece()
        return GameState(
            field=fieldlib.create_empty(self.config.width, self.config.height),
            current_piece=current,
            next_piece=upcoming,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def move_left(self, state: GameState) -> GameState:
        return self._shift(state, -1)

    def move_right(self, state: GameState) -> GameState:
        return self._shift(state, 1)

    def move_down(self, state: GameState) -> GameState:
        """Advance the current piece one row, locking it if it cannot move.

        This is both the soft-drop action and the transition invoked by the
        periodic tick.
        """

        if not state.accepts_input:
            return state
        candidate = state.current_piece.moved(0, 1)
        if fieldlib.collides(candidate, state.field):
            return self._lock(state, state.current_piece)
        return replace(state, current_piece=candidate)

    def rotate(self, state: GameState) -> GameState:
        """Rotate clockwise, retrying one column left then right if blocked."""

        if not state.accepts_input:
            return state
        rotated = rotate(state.current_piece)
        for dx in KICK_OFFSETS:
            candidate = rotated.moved(dx, 0)
            if not fieldlib.collides(candidate, state.field):
                return replace(state, current_piece=candidate)
        return state

    def hard_drop(self, state: GameState) -> GameState:
        """Drop the current piece as far as it goes and lock it there."""

        if not state.accepts_input:
            return state
        piece = state.current_piece
        while not fieldlib.collides(piece, state.field, (0, 1)):
            piece = piece.moved(0, 1)
        return self._lock(state, piece)

    def toggle_pause(self, state: GameState) -> GameState:
        if state.is_game_over:
            return state
        paused = not state.is_paused
        LOGGER.info("Game %s", "paused" if paused else "resumed")
        return replace(state, is_paused=paused)

    def reset(self, state: Optional[GameState] = None) -> GameState:
        """Discard ``state`` and start a new game."""

        LOGGER.info("Game reset")
        return self.new_game()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _shift(self, state: GameState, dx: int) -> GameState:
        if not state.accepts_input:
            return state
        candidate = state.current_piece.moved(dx, 0)
        if fieldlib.collides(candidate, state.field):
            return state
        return replace(state, current_piece=candidate)

    def _lock(self, state: GameState, piece: Piece) -> GameState:
        """Merge ``piece``, clear rows, score, and bring in the next piece.

        A state without a next piece ends the game here rather than leaving
        the session with no current piece; the engine never builds such a
        state itself, so this only guards hand-made states.
        """

        merged = fieldlib.merge(piece, state.field)
        cleared_field, cleared = fieldlib.clear_full_rows(merged)
        score = state.score + score_for_lines(cleared)
        lines = state.lines + cleared
        if cleared:
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, score)
        else:
            LOGGER.debug("Locked %s at %s", piece.kind.value, tuple(piece.position))

        promoted = state.next_piece
        if promoted is None or fieldlib.collides(promoted, cleared_field):
            LOGGER.info("Game over. Final score: %d", score)
            return replace(
                state,
                field=cleared_field,
                current_piece=piece,
                score=score,
                lines=lines,
                is_game_over=True,
            )

        return replace(
            state,
            field=cleared_field,
            current_piece=promoted,
            next_piece=self.spawn_piece(),
            score=score,
            lines=lines,
        )


class GameSession:
    """Single owner of the current :class:`GameState`.

    Each action replaces the held state with the engine's result and returns
    the new snapshot.  Calls must be serialised by the caller; the session is
    not thread-safe.
    """

    def __init__(self, engine: Optional[GameEngine] = None) -> None:
        self.engine = engine or GameEngine()
        self.state: GameState = self.engine.new_game()

    @property
    def config(self) -> EngineConfig:
        return self.engine.config

    def move_left(self) -> GameState:
        self.state = self.engine.move_left(self.state)
        return self.state

    def move_right(self) -> GameState:
        self.state = self.engine.move_right(self.state)
        return self.state

    def move_down(self) -> GameState:
        self.state = self.engine.move_down(self.state)
        return self.state

    def rotate(self) -> GameState:
        self.state = self.engine.rotate(self.state)
        return self.state

    def hard_drop(self) -> GameState:
        self.state = self.engine.hard_drop(self.state)
        return self.state

    def toggle_pause(self) -> GameState:
        self.state = self.engine.toggle_pause(self.state)
        return self.state

    def reset(self) -> GameState:
        self.state = self.engine.reset(self.state)
        return self.state

    def apply(self, action: str) -> GameState:
        """Invoke the action named ``action`` (e.g. ``"hard_drop"``).

        Raises:
            ValueError: If ``action`` does not name a session action.
        """

        name = getattr(action, "value", action)
        if name not in _ACTIONS:
            raise ValueError(f"Unknown action: {action!r}")
        return getattr(self, name)()


_ACTIONS = frozenset(
    {
        "move_left",
        "move_right",
        "move_down",
        "rotate",
        "hard_drop",
        "toggle_pause",
        "reset",
    }
)
