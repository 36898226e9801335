"""The active falling piece.

Pieces are immutable values: moving or rotating one returns a new piece and
leaves the original untouched.  Positions are ``(x, y)`` with ``x`` the column
and ``y`` the row of the bitmap's top-left corner; both may be negative or past
the field edge while a candidate placement is being tested.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, NamedTuple, Tuple

from .shapes import Bitmap, PieceKind, shape_bitmap, shape_color


class Position(NamedTuple):
    x: int
    y: int


def rotate_bitmap(bitmap: Bitmap) -> Bitmap:
    """Return ``bitmap`` rotated 90 degrees clockwise.

    For an ``N x N`` bitmap the cell at ``(i, j)`` moves to ``(j, N - 1 - i)``.
    """

    n = len(bitmap)
    rotated = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            rotated[j][n - 1 - i] = bitmap[i][j]
    return tuple(tuple(row) for row in rotated)


@dataclass(frozen=True)
class Piece:
    """A piece kind placed on the field under its current rotation."""

    kind: PieceKind
    bitmap: Bitmap
    position: Position = Position(0, 0)

    @property
    def color(self) -> str:
        """Display colour, fixed by the kind so it matches the merged grid code."""

        return shape_color(self.kind)

    @property
    def size(self) -> int:
        """Edge length of the square bitmap."""

        return len(self.bitmap)

    def moved(self, dx: int, dy: int) -> "Piece":
        """Return a copy translated by ``dx`` columns and ``dy`` rows."""

        x, y = self.position
        return replace(self, position=Position(x + dx, y + dy))

    def rotated(self) -> "Piece":
        return rotate(self)

    def offsets(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(dx, dy)`` offsets of filled bitmap cells."""

        for dy, row in enumerate(self.bitmap):
            for dx, filled in enumerate(row):
                if filled:
                    yield dx, dy

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield absolute ``(x, y)`` coordinates of the filled cells."""

        x, y = self.position
        for dx, dy in self.offsets():
            yield x + dx, y + dy


def spawn(kind: PieceKind, field_width: int) -> Piece:
    """Create ``kind`` in its canonical orientation, centred on the top row."""

    bitmap = shape_bitmap(kind)
    x = field_width // 2 - len(bitmap[0]) // 2
    return Piece(kind, bitmap, Position(x, 0))


def rotate(piece: Piece) -> Piece:
    """Return ``piece`` with its bitmap rotated clockwise.

    The position is kept as-is and no collision check is made; callers decide
    whether the rotated placement is legal.
    """

    return replace(piece, bitmap=rotate_bitmap(piece.bitmap))
