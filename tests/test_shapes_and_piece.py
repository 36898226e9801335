from __future__ import annotations

import pytest

from blockfall.field import create_empty, merge
from blockfall.piece import Piece, Position, rotate, rotate_bitmap, spawn
from blockfall.shapes import CELL_COLORS, PIECE_VALUES, PieceKind, shape_bitmap, shape_color


@pytest.mark.parametrize("kind", list(PieceKind))
def test_every_kind_has_square_bitmap_with_four_cells(kind: PieceKind) -> None:
    bitmap = shape_bitmap(kind)
    assert all(len(row) == len(bitmap) for row in bitmap)
    assert sum(sum(row) for row in bitmap) == 4
    assert shape_color(kind).startswith("#")


def test_bitmap_sizes_and_grid_codes() -> None:
    assert len(shape_bitmap(PieceKind.O)) == 2
    assert len(shape_bitmap(PieceKind.I)) == 4
    assert len(shape_bitmap(PieceKind.T)) == 3
    assert 0 not in PIECE_VALUES.values()
    assert len(set(PIECE_VALUES.values())) == 7
    assert CELL_COLORS[PIECE_VALUES[PieceKind.Z]] == shape_color(PieceKind.Z)


def test_spawn_is_centred_on_top_row() -> None:
    assert spawn(PieceKind.I, 10).position == Position(3, 0)
    assert spawn(PieceKind.O, 10).position == Position(4, 0)
    assert spawn(PieceKind.T, 10).position == Position(4, 0)
    assert spawn(PieceKind.L, 7).position == Position(2, 0)


def test_rotate_t_piece_clockwise() -> None:
    piece = spawn(PieceKind.T, 10)
    rotated = rotate(piece)
    assert rotated.bitmap == (
        (0, 1, 0),
        (0, 1, 1),
        (0, 1, 0),
    )
    assert rotated.position == piece.position
    # The source piece is left untouched.
    assert piece.bitmap == shape_bitmap(PieceKind.T)


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_restore_bitmap(kind: PieceKind) -> None:
    piece = spawn(kind, 10)
    turned = piece
    for _ in range(4):
        turned = rotate(turned)
    assert turned == piece


def test_o_piece_rotation_is_noop() -> None:
    bitmap = shape_bitmap(PieceKind.O)
    assert rotate_bitmap(bitmap) == bitmap


def test_moved_returns_new_piece() -> None:
    piece = Piece(PieceKind.O, shape_bitmap(PieceKind.O), Position(2, 3))
    moved = piece.moved(-1, 2)
    assert moved.position == Position(1, 5)
    assert piece.position == Position(2, 3)
    assert sorted(moved.cells()) == [(1, 5), (1, 6), (2, 5), (2, 6)]


@pytest.mark.parametrize("kind", list(PieceKind))
def test_piece_colour_matches_merged_cell_colour(kind: PieceKind) -> None:
    piece = spawn(kind, 10).moved(0, 10)
    merged = merge(piece, create_empty())
    x, y = next(piece.cells())
    assert piece.color == shape_color(kind)
    assert merged.color_at(x, y) == piece.color
