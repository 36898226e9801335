"""Rendering helpers for the falling-block engine."""

from __future__ import annotations

from typing import List, Optional

from .engine import GameState
from .field import Field
from .piece import Piece
from .shapes import PIECE_VALUES


def overlay(field: Field, active: Optional[Piece] = None) -> List[List[int]]:
    """Return the field as nested lists with ``active`` painted in.

    The piece is stamped with its grid code on a throwaway copy, so the field
    itself is untouched.  Blocks still above the top edge are left out.
    """

    grid = field.rows()
    if active is not None:
        value = PIECE_VALUES[active.kind]
        for x, y in active.cells():
            if field.in_bounds(x, y):
                grid[y][x] = value
    return grid


def render_ascii(state: GameState) -> str:
    """Return a text frame for ``state``: ``#`` filled, ``.`` empty."""

    piece = None if state.is_game_over else state.current_piece
    lines = ["".join("#" if cell else "." for cell in row) for row in overlay(state.field, piece)]
    status = f"Score: {state.score}  Lines: {state.lines}"
    if state.next_piece is not None:
        status += f"  Next: {state.next_piece.kind.value}"
    if state.is_game_over:
        status += "  GAME OVER"
    elif state.is_paused:
        status += "  PAUSED"
    lines.append(status)
    return "\n".join(lines)
