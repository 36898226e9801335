from __future__ import annotations

from dataclasses import replace

import pytest

from blockfall.config import EngineConfig
from blockfall.engine import GameEngine
from blockfall.field import create_empty
from blockfall.piece import spawn
from blockfall.shapes import PIECE_VALUES, PieceKind
from blockfall.utils import overlay, render_ascii


def test_overlay_draws_piece_without_locking() -> None:
    field = create_empty()
    piece = spawn(PieceKind.O, 10)
    grid = overlay(field, piece)
    value = PIECE_VALUES[PieceKind.O]
    assert grid[0][4] == value
    assert grid[1][5] == value
    assert field.filled_count() == 0


def test_overlay_skips_cells_above_field() -> None:
    grid = overlay(create_empty(), spawn(PieceKind.O, 10).moved(0, -1))
    assert sum(1 for row in grid for cell in row if cell) == 2


def test_render_ascii_frame() -> None:
    engine = GameEngine(EngineConfig(seed=0))
    state = engine.new_game()
    text = render_ascii(state)
    lines = text.splitlines()
    assert len(lines) == 21
    assert all(len(line) == 10 for line in lines[:20])
    assert sum(line.count("#") for line in lines[:20]) == 4
    assert lines[-1].startswith("Score: 0")


@pytest.mark.parametrize(
    "flags, marker",
    [({"is_paused": True}, "PAUSED"), ({"is_game_over": True}, "GAME OVER")],
)
def test_render_ascii_status_markers(flags, marker) -> None:
    state = replace(GameEngine(EngineConfig(seed=0)).new_game(), **flags)
    assert marker in render_ascii(state)
